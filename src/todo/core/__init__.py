"""Core functionality for todo."""
