from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Category enumerations
# ---------------------------------------------------------------------------


class Category(str, Enum):
    lighting = "lighting"
    subject = "subject"
    mood = "mood"
    color_preference = "colorPreference"
    location = "location"
    season = "season"


class Lighting(str, Enum):
    bright_sunlight = "bright_sunlight"
    golden_hour = "golden_hour"
    blue_hour = "blue_hour"
    overcast = "overcast"
    indoor = "indoor"
    night = "night"
    mixed = "mixed"


class Subject(str, Enum):
    portrait = "portrait"
    street = "street"
    landscape = "landscape"
    architecture = "architecture"
    nature = "nature"
    food = "food"
    travel = "travel"
    event = "event"


class Mood(str, Enum):
    cinematic = "cinematic"
    vintage = "vintage"
    modern = "modern"
    dreamy = "dreamy"
    moody = "moody"
    natural = "natural"
    dramatic = "dramatic"
    minimal = "minimal"


class ColorPreference(str, Enum):
    warm = "warm"
    cool = "cool"
    neutral = "neutral"
    vibrant = "vibrant"
    muted = "muted"
    bw = "bw"
    teal_orange = "teal_orange"


class Location(str, Enum):
    city = "city"
    nature = "nature"
    beach = "beach"
    cafe = "cafe"
    studio = "studio"
    home = "home"


class Season(str, Enum):
    summer = "summer"
    autumn = "autumn"
    winter = "winter"
    spring = "spring"


CATEGORY_ENUMS: dict[Category, type[Enum]] = {
    Category.lighting: Lighting,
    Category.subject: Subject,
    Category.mood: Mood,
    Category.color_preference: ColorPreference,
    Category.location: Location,
    Category.season: Season,
}

# StructuredInput attribute name for each category
_FIELD_BY_CATEGORY: dict[Category, str] = {
    Category.lighting: "lighting",
    Category.subject: "subject",
    Category.mood: "mood",
    Category.color_preference: "color_preference",
    Category.location: "location",
    Category.season: "season",
}
_CATEGORY_BY_FIELD = {field: category for category, field in _FIELD_BY_CATEGORY.items()}


class FilmSimulation(str, Enum):
    classic_chrome = "Classic Chrome"
    classic_neg = "Classic Neg"
    velvia = "Velvia"
    astia = "Astia"
    provia = "Provia"
    pro_neg_hi = "Pro Neg Hi"
    pro_neg_std = "Pro Neg Std"
    eterna = "Eterna"
    eterna_bleach_bypass = "Eterna Bleach Bypass"
    nostalgic_neg = "Nostalgic Neg"
    acros = "Acros"
    acros_r = "Acros+R"
    acros_g = "Acros+G"
    acros_ye = "Acros+Ye"
    monochrome = "Monochrome"
    monochrome_r = "Monochrome+R"
    monochrome_g = "Monochrome+G"
    monochrome_ye = "Monochrome+Ye"
    sepia = "Sepia"
    reala_ace = "Reala Ace"


# ---------------------------------------------------------------------------
# Structured input
# ---------------------------------------------------------------------------


class StructuredInput(BaseModel):
    """
    The six-category shooting intent consumed by the scorer.

    Values outside a category's enumeration are dropped to ``None`` instead of
    failing validation, and unknown keys are ignored, so the same model decodes
    both user form input and classifier output.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    lighting: Lighting | None = None
    subject: Subject | None = None
    mood: Mood | None = None
    color_preference: ColorPreference | None = Field(default=None, alias="colorPreference")
    location: Location | None = None
    season: Season | None = None

    @field_validator(
        "lighting", "subject", "mood", "color_preference", "location", "season",
        mode="before",
    )
    @classmethod
    def _drop_unknown_values(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or isinstance(value, Enum):
            return value
        enum_cls = CATEGORY_ENUMS[_CATEGORY_BY_FIELD[info.field_name]]
        if isinstance(value, str) and value in {member.value for member in enum_cls}:
            return value
        logger.debug("Ignoring unrecognised %s value %r", info.field_name, value)
        return None

    def selections(self) -> Iterator[tuple[Category, Enum]]:
        """Yield ``(category, value)`` for every field that is set, in category order."""
        for category, field_name in _FIELD_BY_CATEGORY.items():
            value = getattr(self, field_name)
            if value is not None:
                yield category, value

    def get(self, category: Category) -> Enum | None:
        return getattr(self, _FIELD_BY_CATEGORY[category])

    def is_empty(self) -> bool:
        return next(self.selections(), None) is None

    def to_public_dict(self) -> dict[str, str]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# ---------------------------------------------------------------------------
# Recipe output
# ---------------------------------------------------------------------------


class WhiteBalanceShift(BaseModel):
    red: int = 0
    blue: int = 0


class RecipeSettings(BaseModel):
    white_balance: str = "Auto"
    white_balance_shift: WhiteBalanceShift = Field(default_factory=WhiteBalanceShift)
    dynamic_range: str = "DR100"
    highlight: int = 0
    shadow: int = 0
    color: int = 0
    sharpness: int = 0
    noise_reduction: int = 0
    grain_effect: str = "Off"
    grain_size: str | None = None
    color_chrome_effect: str = "Off"
    color_chrome_fx_blue: str = "Off"
    clarity: int = 0
    exposure_compensation: str = "0"


class RecipeOut(BaseModel):
    id: int
    name: str
    description: str = ""
    film_simulation: str = FilmSimulation.classic_chrome.value
    settings: RecipeSettings
    sample_images: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    source: str = "manual"
    source_url: str | None = None
    author: str | None = None

    @classmethod
    def from_record(cls, record: dict[str, Any], **extra: Any) -> RecipeOut:
        """Build from a flat store row (one column per setting)."""

        def _int(key: str) -> int:
            value = record.get(key)
            return int(value) if _present(value) else 0

        def _str(key: str, default: str | None = None) -> str | None:
            value = record.get(key)
            return str(value) if _present(value) else default

        settings = RecipeSettings(
            white_balance=_str("white_balance", "Auto"),
            white_balance_shift=WhiteBalanceShift(
                red=_int("white_balance_shift_red"),
                blue=_int("white_balance_shift_blue"),
            ),
            dynamic_range=_str("dynamic_range", "DR100"),
            highlight=_int("highlight"),
            shadow=_int("shadow"),
            color=_int("color"),
            sharpness=_int("sharpness"),
            noise_reduction=_int("noise_reduction"),
            grain_effect=_str("grain_effect", "Off"),
            grain_size=_str("grain_size"),
            color_chrome_effect=_str("color_chrome_effect", "Off"),
            color_chrome_fx_blue=_str("color_chrome_fx_blue", "Off"),
            clarity=_int("clarity"),
            exposure_compensation=_str("exposure_compensation", "0"),
        )
        return cls(
            id=int(record["id"]),
            name=str(record["name"]),
            description=_str("description", ""),
            film_simulation=_str("film_simulation", FilmSimulation.classic_chrome.value),
            settings=settings,
            sample_images=list(record.get("sample_images") or []),
            tags=list(record.get("tags") or []),
            source=_str("source", "manual"),
            source_url=_str("source_url"),
            author=_str("author"),
            **extra,
        )


def _present(value: Any) -> bool:
    # NULL columns come back from pandas as None or NaN
    return value is not None and value == value


class RecipeDetail(RecipeOut):
    compatible_cameras: list[str] = Field(default_factory=list)


class TagOut(BaseModel):
    id: int
    name: str
    category: str


class CameraOut(BaseModel):
    id: int
    model: str
    sensor: str | None = None


# ---------------------------------------------------------------------------
# Recommendation request / response
# ---------------------------------------------------------------------------


class RecommendationItem(BaseModel):
    recipe: RecipeOut
    score: int = Field(..., ge=0, le=100)
    explanation: str


class NaturalLanguageRequest(BaseModel):
    prompt: str = Field(..., max_length=1000)


class NaturalLanguageResponse(BaseModel):
    parsed: dict[str, str] = Field(default_factory=dict)
    recommendations: list[RecommendationItem]
