"""
Configuration for the photo catalog.

The option vocabularies double as the chip lists offered by the dashboard.
"""

from dataclasses import dataclass
from pathlib import Path

MOOD_OPTIONS: tuple[str, ...] = (
    "Joyful",
    "Romantic",
    "Reflective",
    "Energetic",
    "Serene",
    "Dramatic",
)

SHOT_TYPE_OPTIONS: tuple[str, ...] = (
    "Portrait",
    "Candid",
    "Group",
    "Detail",
    "Landscape",
    "Action",
)

LOCATION_OPTIONS: tuple[str, ...] = (
    "Ceremony Lawn",
    "Garden Terrace",
    "Grand Ballroom",
    "Rooftop",
    "Lakeside Dock",
    "Bridal Suite",
)

TAG_OPTIONS: tuple[str, ...] = (
    "storytelling",
    "candids",
    "laughs",
    "golden-hour",
    "backlit",
    "first-look",
    "family",
    "details",
    "dance-floor",
    "rings",
    "tears",
    "silhouette",
    "florals",
    "bokeh",
    "architecture",
    "veil",
    "toast",
    "sparklers",
)

CLIENT_NOTE_OPTIONS: tuple[str, ...] = (
    "Grandparents must appear in the album",
    "Loves natural light and laughter",
    "Avoid heavy retouching",
    "Highlight the floral arch",
    "Include the sparkler exit",
    "Favourite moment: the first look",
    "Print candidate for the parents",
)


@dataclass(frozen=True)
class CatalogConfig:
    """
    Configuration for catalog generation and persistence.
    """

    seed: int = 2024
    size: int = 120
    shoot_start: str = "2024-06-15T13:30:00"
    processed_dir: Path = Path(__file__).resolve().parent.parent / "data" / "processed"
    processed_filename: str = "photos.csv"

    @property
    def processed_path(self) -> Path:
        return self.processed_dir / self.processed_filename


DEFAULT_CATALOG_CONFIG = CatalogConfig()
