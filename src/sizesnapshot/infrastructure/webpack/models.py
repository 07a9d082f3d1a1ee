"""Pydantic models for the webpack ``--json`` stats output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sizesnapshot.domain.entities import BundleAsset, BundleStats


class WebpackAsset(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    size: int = Field(ge=0)


class WebpackStats(BaseModel):
    """Only the keys needed for size tracking; everything else is ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    assets: list[WebpackAsset] = Field(default_factory=list)
    assets_by_chunk_name: dict[str, str | list[str]] = Field(
        default_factory=dict,
        alias="assetsByChunkName",
    )

    def to_entity(self) -> BundleStats:
        return BundleStats(
            assets=[BundleAsset(name=a.name, size=a.size) for a in self.assets],
            assets_by_chunk_name=dict(self.assets_by_chunk_name),
        )
