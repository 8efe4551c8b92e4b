"""Security helpers for sessiongate."""

from .sanitizer import SensitiveDataSanitizer, mask_credential

__all__ = ["SensitiveDataSanitizer", "mask_credential"]
