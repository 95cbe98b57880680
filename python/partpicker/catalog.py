"""Static catalog of parts offered on the selection page."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from partpicker.errors import CatalogError

__all__ = ["PartRecord", "PartCatalog", "PARTS"]


class PartRecord(BaseModel):
    """A catalog entry. Defined at import time and never mutated."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str


PARTS: tuple[PartRecord, ...] = (
    PartRecord(id=1, name="Headlights"),
    PartRecord(id=2, name="Brake Light Switches"),
    PartRecord(id=3, name="Wiper Switches"),
    PartRecord(id=4, name="Door Jamb Switches"),
)

PartList = list[PartRecord]


class PartCatalog:
    """Read-only, ordered collection of parts.

    Safe to share between requests: the records are frozen and the
    backing tuple is never replaced.

    Example:
        >>> [p.id for p in PartCatalog().list()]
        [1, 2, 3, 4]
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[PartRecord] = PARTS):
        records = tuple(records)
        seen = set()
        for record in records:
            if record.id in seen:
                raise CatalogError("Duplicate part id in catalog", part_id=record.id)
            seen.add(record.id)
        self._records = records

    def get(self, part_id: int) -> PartRecord | None:
        for record in self._records:
            if record.id == part_id:
                return record
        return None

    def list(self) -> PartList:
        """Return the parts in catalog order (a fresh list on every call)."""
        return list(self._records)
