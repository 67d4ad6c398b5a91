from __future__ import annotations

import math
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PhotoMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    sharpness: float = Field(..., ge=0.0, le=1.0)
    emotion: float = Field(..., ge=0.0, le=1.0)
    client_relevance: float = Field(..., ge=0.0, le=1.0)


class Photo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    url: str
    thumbnail_url: str
    shot_type: str
    mood: str
    location: str
    tags: tuple[str, ...] = ()
    client_notes: tuple[str, ...] = ()
    faces: int = Field(default=0, ge=0)
    captured_at: datetime
    metrics: PhotoMetrics


class ScoringWeights(BaseModel):
    """Relative importance of the three ranking criteria.

    Raw slider values are accepted as-is; ``normalized()`` rescales them so
    they sum to 1 before they reach the ranking engine.
    """

    model_config = ConfigDict(frozen=True)

    technical: float = Field(..., ge=0.0, allow_inf_nan=False)
    storytelling: float = Field(..., ge=0.0, allow_inf_nan=False)
    client_alignment: float = Field(..., ge=0.0, allow_inf_nan=False)

    @model_validator(mode="after")
    def _require_positive_total(self) -> ScoringWeights:
        total = self.total
        if not math.isfinite(total) or total <= 0:
            raise ValueError("scoring weights must sum to a finite positive value")
        return self

    @property
    def total(self) -> float:
        return self.technical + self.storytelling + self.client_alignment

    def normalized(self) -> ScoringWeights:
        total = self.total
        return ScoringWeights(
            technical=self.technical / total,
            storytelling=self.storytelling / total,
            client_alignment=self.client_alignment / total,
        )

    def is_normalized(self, tolerance: float = 1e-9) -> bool:
        return abs(self.total - 1.0) <= tolerance


class ClientProfile(BaseModel):
    preferred_moods: list[str] = Field(default_factory=list)
    required_shots: list[str] = Field(default_factory=list)
    highlight_tags: list[str] = Field(default_factory=list)
    minimum_faces: int = Field(default=0, ge=0)


class RankedEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    photo: Photo
    score: float


class FilterState(BaseModel):
    shot_types: list[str] = Field(default_factory=list)
    moods: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    query: str = Field(default="", max_length=200)
    show_selected_only: bool = False

    def is_active(self) -> bool:
        return bool(
            self.shot_types
            or self.moods
            or self.locations
            or self.query.strip()
            or self.show_selected_only
        )


class RankingItem(BaseModel):
    photo: Photo
    score: float
    label: str
    selected: bool = False


class RankingRequest(BaseModel):
    weights: ScoringWeights
    profile: ClientProfile = Field(default_factory=ClientProfile)
    filters: FilterState = Field(default_factory=FilterState)
    selected_ids: list[str] = Field(default_factory=list)
    limit: int = Field(default=12, ge=1, le=500)


class RankingResponse(BaseModel):
    items: list[RankingItem]
    hero: RankingItem | None = None
    total_ranked: int
    total_filtered: int
