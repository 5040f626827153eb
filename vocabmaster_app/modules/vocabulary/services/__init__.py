"""Database-backed services for vocabulary entries."""
