"""Authentication and authorization module."""

from .dependencies import verify_admin_token

__all__ = ["verify_admin_token"]
