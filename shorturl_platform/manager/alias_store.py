"""
AliasStore module for the short URL service.

Responsibilities:
    - Validate submitted URLs (absolute, http/https, with a host)
    - Assign sequential integer aliases to new URLs
    - Reuse the existing alias when the exact same URL is submitted again
    - Resolve aliases back to their original URLs

Design notes:
    - Dedupe is byte-exact: no normalization of scheme/host casing, trailing
      slashes or query order.
    - Storage and alias strategy are injected dependencies; both default to
      the in-memory/sequential implementations.
    - One lock serializes "lookup, draw alias, append", so concurrent
      creations never share an alias and never duplicate a record.
    - The core raises typed errors and performs no logging; presentation is
      left to the transport layer.
"""

import ipaddress
import re
import threading
from typing import Any, Optional, Tuple
from urllib.parse import unquote, urlparse

from ..exceptions import AliasNotFoundError, InvalidUrlError
from ..models import UrlRecord
from ..storage.base import BaseStorage
from ..storage.storage import Storage
from .strategies import BaseStrategy, SequentialStrategy

ALLOWED_SCHEMES = frozenset({"http", "https"})

# "http:host" and "http:/host" parse as "http://host" for special schemes.
_SHORT_AUTHORITY = re.compile(r"^(https?):/?(?=[^/])", re.IGNORECASE)

# Characters a URL host may never contain, checked after percent-decoding.
_FORBIDDEN_HOST_CHARS = frozenset(' \t\r\n#%/:<>?@[\\]^|"{}`\x7f')


def _is_valid_host(host: str, bracketed: bool) -> bool:
    if bracketed:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True
    host = unquote(host)
    if not host or any(ch in _FORBIDDEN_HOST_CHARS or ord(ch) < 0x20 for ch in host):
        return False
    labels = host.split(".")
    if len(labels) > 1 and all(label.isascii() and label.isdigit() for label in labels):
        try:
            ipaddress.IPv4Address(host)
        except ValueError:
            return False
    return True


def is_valid_http_url(candidate: Any) -> bool:
    """
    Return True iff `candidate` is an absolute http/https URL with a host.

    Purely syntactic: no DNS lookup or network access. Non-string input,
    empty strings, relative references, unknown schemes, empty or malformed
    hosts (including dotted-numeric hosts that are not IPv4 addresses) and
    unparseable ports all yield False. As with browser URL parsing, the
    slashes after the scheme may be shortened: "https:example.com" is read as
    "https://example.com".
    """
    if not isinstance(candidate, str) or not candidate:
        return False
    try:
        parsed = urlparse(_SHORT_AUTHORITY.sub(r"\1://", candidate, count=1))
        # Accessing .port validates it (non-numeric or out of range -> ValueError)
        parsed.port
    except ValueError:
        return False
    if parsed.scheme not in ALLOWED_SCHEMES:
        return False
    host = parsed.hostname
    if not host:
        return False
    return _is_valid_host(host, bracketed="[" in parsed.netloc)


def parse_alias(alias: Any) -> Optional[int]:
    """
    Coerce an alias given as int or as a path token into a positive int.

    Returns None for anything that cannot be an alias (non-numeric text,
    signs, zero, negatives, bools, None).
    """
    if isinstance(alias, bool):
        return None
    if isinstance(alias, int):
        return alias if alias > 0 else None
    if isinstance(alias, str):
        token = alias.strip()
        if token.isascii() and token.isdigit():
            value = int(token)
            return value if value > 0 else None
    return None


class AliasStore:
    """
    Owns the mapping between original URLs and integer aliases.

    Example:
        >>> store = AliasStore()
        >>> store.create_or_reuse("https://www.example.com").alias
        1
        >>> store.resolve(1)
        'https://www.example.com'
    """

    def __init__(
        self,
        storage: Optional[BaseStorage] = None,
        strategy: Optional[BaseStrategy] = None,
    ):
        """
        Args:
            storage (Optional[BaseStorage]): Record backend; fresh in-memory Storage if omitted.
            strategy (Optional[BaseStrategy]): Alias counter; a SequentialStrategy starting at 1 if omitted.
        """
        self.storage = storage if storage is not None else Storage()
        self.strategy = strategy if strategy is not None else SequentialStrategy()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self.storage)

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------
    def validate(self, candidate: Any) -> bool:
        """Return True if `candidate` would be accepted by `create_or_reuse`."""
        return is_valid_http_url(candidate)

    def create_or_reuse(self, candidate: Any) -> UrlRecord:
        """
        Return the record for `candidate`, creating it if it is new.

        Rules:
            - Invalid, absent or empty input -> InvalidUrlError.
            - An identical URL already stored -> that record, unchanged.
            - Otherwise the next alias is drawn and a new record appended.

        Raises:
            InvalidUrlError: If the candidate fails validation.
        """
        if not self.validate(candidate):
            raise InvalidUrlError(candidate)

        with self._lock:
            existing = self.storage.find_by_url(candidate)
            if existing is not None:
                return existing

            record = UrlRecord(original_url=candidate, alias=self.strategy.generate())
            self.storage.append(record)
            return record

    def resolve(self, alias: Any) -> str:
        """
        Return the original URL stored under `alias`.

        `alias` may be an int or the raw path token; non-numeric or missing
        input is reported the same way as an unknown alias.

        Raises:
            AliasNotFoundError: If no record carries the alias.
        """
        number = parse_alias(alias)
        if number is None:
            raise AliasNotFoundError(alias)

        with self._lock:
            record = self.storage.find_by_alias(number)
        if record is None:
            raise AliasNotFoundError(alias)
        return record.original_url

    def records(self) -> Tuple[UrlRecord, ...]:
        """Snapshot of all records in creation order."""
        with self._lock:
            return self.storage.all()
