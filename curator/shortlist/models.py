from __future__ import annotations

from pydantic import BaseModel, Field

from ..ranking.models import Photo


class ShortlistItem(BaseModel):
    photo: Photo
    score: float
    label: str


class ShortlistSummary(BaseModel):
    count: int
    average_alignment: float = Field(..., ge=0.0, le=1.0)
    selected_ids: list[str] = Field(default_factory=list)
    preview: list[ShortlistItem] = Field(default_factory=list)
    remaining: int = 0


class ToggleResponse(BaseModel):
    photo_id: str
    selected: bool
    count: int
