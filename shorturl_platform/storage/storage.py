"""
Storage module for the short URL service (in-memory implementation).

Responsibilities:
    - Keep accepted records in creation order
    - Provide lookups by original URL and by alias
    - Never mutate or drop a stored record

Design:
    - Records live in a plain list; lookups are linear scans in creation order.
    - This backend does no locking. The AliasStore serializes every mutation,
      so a lookup never observes a half-appended record.
    - Process-local: the list is discarded when the process exits.
"""

from typing import List, Optional, Tuple

from .base import BaseStorage
from ..models import UrlRecord


class Storage(BaseStorage):
    def __init__(self):
        """
        Initialize an empty record list.

        Internal schema:
            self.records = [UrlRecord(original_url=str, alias=int), ...]
        """
        self.records: List[UrlRecord] = []

    def append(self, record: UrlRecord) -> None:
        self.records.append(record)

    def find_by_url(self, url: str) -> Optional[UrlRecord]:
        """
        Return the record stored for `url`, if any (dedupe helper).

        Comparison is exact string equality: trailing slashes, casing and
        query order all make URLs distinct.
        """
        for record in self.records:
            if record.original_url == url:
                return record
        return None

    def find_by_alias(self, alias: int) -> Optional[UrlRecord]:
        """
        Return the record carrying `alias`, or None.

        Aliases are unique, so the first match is the only match.
        """
        for record in self.records:
            if record.alias == alias:
                return record
        return None

    def all(self) -> Tuple[UrlRecord, ...]:
        return tuple(self.records)

    def __len__(self) -> int:
        return len(self.records)
