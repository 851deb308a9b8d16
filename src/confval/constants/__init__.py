"""Shared constants for confval."""
