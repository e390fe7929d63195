from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Scalar = str | int | float | None


class RecipeRecord(BaseModel):
    """
    A recipe as produced by the scraper or entered by hand: raw setting
    strings, not yet normalised. Accepts camelCase or snake_case keys.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    name: str | None = None
    film_simulation: Scalar = None
    white_balance: Scalar = None
    white_balance_shift_red: Scalar = None
    white_balance_shift_blue: Scalar = None
    dynamic_range: Scalar = None
    highlight: Scalar = None
    shadow: Scalar = None
    color: Scalar = None
    sharpness: Scalar = None
    noise_reduction: Scalar = None
    grain_effect: Scalar = None
    grain_size: Scalar = None
    color_chrome_effect: Scalar = None
    color_chrome_fx_blue: Scalar = None
    clarity: Scalar = None
    exposure_compensation: Scalar = None
    sample_images: list[str] | None = None
    source: str | None = None
    source_url: str | None = None
    author: str | None = None


class ImportStatus(str, Enum):
    imported = "imported"
    updated = "updated"
    skipped = "skipped"
    failed = "failed"


class ImportResult(BaseModel):
    status: ImportStatus
    id: int | None = None
    name: str
    error: str | None = None


class ImportSummary(BaseModel):
    imported: int = 0
    updated: int = 0
    skipped: int = 0
    failed: int = 0
    details: list[ImportResult] = Field(default_factory=list)


class ImportRequest(BaseModel):
    recipes: list[dict] = Field(..., min_length=1, max_length=50)
    update: bool = False
