"""Core infrastructure: configuration and output."""
