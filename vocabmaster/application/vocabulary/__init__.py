"""Vocabulary bounded context - Application layer."""
