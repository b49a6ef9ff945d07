"""
shorturl_platform package initializer.
"""

from . import manager
from . import storage
from .exceptions import AliasNotFoundError, InvalidUrlError, ShortUrlError
from .manager.alias_store import AliasStore
from .models import UrlRecord

__all__ = [
    "manager",
    "storage",
    "AliasStore",
    "UrlRecord",
    "ShortUrlError",
    "InvalidUrlError",
    "AliasNotFoundError",
]
