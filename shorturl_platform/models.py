"""
Value objects for the short URL service.

A `UrlRecord` is created once by the AliasStore and never changes afterwards,
so it is modelled as a frozen dataclass.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class UrlRecord:
    """One accepted mapping between an original URL and its integer alias."""

    original_url: str
    alias: int

    def to_dict(self) -> Dict[str, Any]:
        """
        Public JSON shape of a record.

        The alias is exposed as `short_url`, which is the field name clients
        of the HTTP API expect.
        """
        return {"original_url": self.original_url, "short_url": self.alias}
