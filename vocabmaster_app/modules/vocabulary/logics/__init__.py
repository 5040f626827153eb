"""Stateless helpers for the vocabulary module."""
