"""
Error taxonomy for the short URL core.

Both errors are recoverable by the caller; the transport layer decides how
to present them.
"""

__all__ = ["ShortUrlError", "InvalidUrlError", "AliasNotFoundError"]


class ShortUrlError(Exception):
    """Base class for errors raised by the AliasStore."""


class InvalidUrlError(ShortUrlError, ValueError):
    """Submitted URL is absent, empty, malformed, or not http/https."""

    def __init__(self, candidate=None):
        self.candidate = candidate
        super().__init__("invalid url")


class AliasNotFoundError(ShortUrlError, LookupError):
    """No record carries the requested alias."""

    def __init__(self, alias=None):
        self.alias = alias
        super().__init__(f"alias not found: {alias!r}")
