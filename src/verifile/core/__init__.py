"""Core verification engine and history storage."""
