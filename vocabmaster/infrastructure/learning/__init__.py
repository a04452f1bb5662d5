"""Learning infrastructure layer."""
