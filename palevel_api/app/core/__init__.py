"""Core configuration, error types and logging setup."""
