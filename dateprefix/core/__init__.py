"""Core date resolution and rename logic (no UI dependencies)."""
