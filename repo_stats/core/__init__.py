"""Core utilities: HTTP error types."""
