"""Partition key range schemas.

These models represent the exact structure returned by the
``/dbs/{db}/colls/{coll}/pkranges`` resource.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PartitionKeyRange(BaseModel):
    """One physical partition key range."""

    id: str
    min_inclusive: str | None = Field(default=None, alias="minInclusive")
    max_exclusive: str | None = Field(default=None, alias="maxExclusive")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class PartitionKeyRangeSet(BaseModel):
    """All partition key ranges of a collection.

    Attributes:
        rid: Resource id of the collection owning the ranges
        ranges: Ranges in server order
        count: Number of ranges reported by the server
    """

    rid: str = Field(alias="_rid")
    ranges: list[PartitionKeyRange] = Field(default_factory=list, alias="PartitionKeyRanges")
    count: int | None = Field(default=None, alias="_count")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @property
    def range_ids(self) -> list[str]:
        return [r.id for r in self.ranges]

    def full_range_header(self) -> str:
        """Header value that targets every range: ``"<rid>,<id1>,...,<idN>"``."""
        return ",".join([self.rid, *self.range_ids])
