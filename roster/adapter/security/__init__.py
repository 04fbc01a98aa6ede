"""Credential adapters."""

from roster.adapter.security.password import ScryptPasswordHasher

__all__ = ["ScryptPasswordHasher"]
