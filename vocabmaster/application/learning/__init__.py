"""Learning bounded context - Application layer."""
