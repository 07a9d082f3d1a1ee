"""Canonical size records.

Pure value objects shared by every normalizer, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

UNKNOWN_GZIP = -1


@dataclass(frozen=True)
class SizeRecord:
    """Size of one build artifact (or one synthetic aggregate) in bytes."""

    parsed: int  # minified, uncompressed size
    gzip: int = UNKNOWN_GZIP  # -1 = not measured by this source
    tally: int | None = None  # only set on aggregate records

    def __post_init__(self) -> None:
        if self.parsed < 0:
            raise ValueError(f"parsed size must be >= 0, got {self.parsed}")
        if self.gzip < 0 and self.gzip != UNKNOWN_GZIP:
            raise ValueError(
                f"gzip size must be >= 0 or {UNKNOWN_GZIP}, got {self.gzip}"
            )
        if self.tally is not None and self.tally < 0:
            raise ValueError(f"tally must be >= 0, got {self.tally}")

    @property
    def is_aggregate(self) -> bool:
        return self.tally is not None

    def to_dict(self) -> dict[str, int]:
        data = {"parsed": self.parsed, "gzip": self.gzip}
        if self.tally is not None:
            data["tally"] = self.tally
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SizeRecord:
        return cls(
            parsed=int(data["parsed"]),
            gzip=int(data["gzip"]),
            tally=int(data["tally"]) if data.get("tally") is not None else None,
        )


# (artifact identifier, record) as emitted by a single normalizer
SizeEntry = tuple[str, SizeRecord]

# artifact identifier -> record after merging all normalizers
SizeTable = dict[str, SizeRecord]
