"""Vocabulary infrastructure layer."""
