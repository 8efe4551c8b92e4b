"""CLI commands."""

from .process import process
from .session import csrf, login, logout

__all__ = ["csrf", "login", "logout", "process"]
