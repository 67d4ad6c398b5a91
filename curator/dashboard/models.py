from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ..ranking.models import ClientProfile, FilterState, RankingItem, ScoringWeights
from ..shortlist.models import ShortlistSummary

SLIDER_MIN = 15
SLIDER_MAX = 70
MINIMUM_FACE_CHOICES: tuple[int, ...] = (0, 1, 2, 4)

WEIGHT_LABELS: dict[str, str] = {
    "technical": "Technical excellence",
    "storytelling": "Storytelling & emotion",
    "client_alignment": "Client alignment",
}


class SliderWeights(BaseModel):
    technical: int = Field(default=40, ge=SLIDER_MIN, le=SLIDER_MAX)
    storytelling: int = Field(default=35, ge=SLIDER_MIN, le=SLIDER_MAX)
    client_alignment: int = Field(default=25, ge=SLIDER_MIN, le=SLIDER_MAX)

    def to_scoring_weights(self) -> ScoringWeights:
        return ScoringWeights(
            technical=self.technical,
            storytelling=self.storytelling,
            client_alignment=self.client_alignment,
        )


def default_profile() -> ClientProfile:
    return ClientProfile(
        preferred_moods=["Joyful", "Romantic"],
        required_shots=["Portrait", "Candid"],
        highlight_tags=["storytelling", "candids", "laughs"],
        minimum_faces=1,
    )


class ProfileUpdate(ClientProfile):
    @field_validator("minimum_faces")
    @classmethod
    def _known_face_choice(cls, value: int) -> int:
        if value not in MINIMUM_FACE_CHOICES:
            raise ValueError(f"minimum_faces must be one of {list(MINIMUM_FACE_CHOICES)}")
        return value


class ProfileField(str, Enum):
    preferred_moods = "preferred_moods"
    required_shots = "required_shots"
    highlight_tags = "highlight_tags"


class ProfileToggle(BaseModel):
    field: ProfileField
    value: str = Field(..., min_length=1, max_length=200)


class DashboardState(BaseModel):
    weights: SliderWeights = Field(default_factory=SliderWeights)
    profile: ClientProfile = Field(default_factory=default_profile)
    filters: FilterState = Field(default_factory=FilterState)
    selected_ids: list[str] = Field(default_factory=list)


class Coverage(BaseModel):
    filtered: int
    total: int
    percent: int


class DashboardView(BaseModel):
    weights: SliderWeights
    influence: dict[str, int]
    profile: ClientProfile
    filters: FilterState
    items: list[RankingItem]
    hero: RankingItem | None = None
    hero_confidence: int
    coverage: Coverage
    shortlist: ShortlistSummary
