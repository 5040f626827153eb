"""Core infrastructure shared by every VocabMaster module."""
