"""Services for the study module."""
