"""Core session logic for pacpick."""
