"""Core configuration and security utilities."""
