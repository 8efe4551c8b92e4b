"""Authentication helpers."""

from .csrf import CsrfTokenManager

__all__ = ["CsrfTokenManager"]
