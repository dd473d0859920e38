"""Core module - configuration and error types."""
