"""
Base storage interface for the short URL service.

Purpose:
    Define a small, stable contract for the append-only record sequence that
    backs the AliasStore. The in-memory `Storage` is the only backend today;
    an indexed or persistent backend can implement the same methods without
    touching the AliasStore or the routes.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover` so coverage tools don't
    penalize the project for un-runnable abstract declarations.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..models import UrlRecord


class BaseStorage(ABC):
    """Abstract base class for record storage backends."""

    @abstractmethod  # pragma: no cover
    def append(self, record: UrlRecord) -> None:
        """
        Append a new record at the end of the sequence.

        Existing records are never mutated or removed.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def find_by_url(self, url: str) -> Optional[UrlRecord]:
        """
        Return the first record whose original URL equals `url` exactly.

        Returns:
            Optional[UrlRecord]: The matching record, or None.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def find_by_alias(self, alias: int) -> Optional[UrlRecord]:
        """
        Return the record carrying `alias`, or None.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def all(self) -> Tuple[UrlRecord, ...]:
        """Return every record in creation order."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def __len__(self) -> int:
        raise NotImplementedError
