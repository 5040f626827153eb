"""Session state and pure transition functions."""
