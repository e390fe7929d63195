from __future__ import annotations

import json
import math
import re
from typing import Any

from ..recommendations.models import FilmSimulation
from .config import DEFAULT_IMPORT_CONFIG, ImportConfig
from .models import RecipeRecord

DEFAULT_FILM_SIMULATION = FilmSimulation.classic_chrome.value

_FILM_SIMULATION_ALIASES: dict[str, str] = {
    "classic chrome": "Classic Chrome",
    "velvia": "Velvia",
    "velvia/vivid": "Velvia",
    "astia": "Astia",
    "astia/soft": "Astia",
    "provia": "Provia",
    "provia/standard": "Provia",
    "pro neg hi": "Pro Neg Hi",
    "pro neg. hi": "Pro Neg Hi",
    "pro negative hi": "Pro Neg Hi",
    "pro neg std": "Pro Neg Std",
    "pro neg. std": "Pro Neg Std",
    "pro negative std": "Pro Neg Std",
    "pro negative standard": "Pro Neg Std",
    "eterna": "Eterna",
    "eterna/cinema": "Eterna",
    "eterna bleach bypass": "Eterna Bleach Bypass",
    "classic neg": "Classic Neg",
    "classic neg.": "Classic Neg",
    "classic negative": "Classic Neg",
    "nostalgic neg": "Nostalgic Neg",
    "nostalgic neg.": "Nostalgic Neg",
    "nostalgic negative": "Nostalgic Neg",
    "acros": "Acros",
    "acros+r": "Acros+R",
    "acros + r": "Acros+R",
    "acros+g": "Acros+G",
    "acros + g": "Acros+G",
    "acros+ye": "Acros+Ye",
    "acros + ye": "Acros+Ye",
    "monochrome": "Monochrome",
    "monochrome+r": "Monochrome+R",
    "monochrome+g": "Monochrome+G",
    "monochrome+ye": "Monochrome+Ye",
    "sepia": "Sepia",
    "reala ace": "Reala Ace",
}

# Longest alias first so "acros+r" wins over "acros" in free text
_ALIASES_BY_LENGTH = sorted(_FILM_SIMULATION_ALIASES, key=len, reverse=True)

_FILM_SIMULATION_PATTERNS: list[tuple[tuple[str, ...], str]] = [
    (("nostalgic", "nostalgia"), "Nostalgic Neg"),
    (("classic neg",), "Classic Neg"),
    (("velvia",), "Velvia"),
    (("astia",), "Astia"),
    (("provia",), "Provia"),
    (("eterna",), "Eterna"),
    (("acros",), "Acros"),
    (("reala",), "Reala Ace"),
    (("pro neg",), "Pro Neg Hi"),
]

_WHITE_BALANCE_PRESETS: list[tuple[tuple[str, ...], str]] = [
    (("auto",), "Auto"),
    (("daylight", "sunny"), "Daylight"),
    (("shade",), "Shade"),
    (("cloudy",), "Cloudy"),
    (("incandescent", "tungsten"), "Incandescent"),
    (("fluorescent 1", "fluorescent1"), "Fluorescent 1"),
    (("fluorescent 2", "fluorescent2"), "Fluorescent 2"),
    (("fluorescent 3", "fluorescent3"), "Fluorescent 3"),
    (("fluorescent",), "Fluorescent 1"),
    (("underwater",), "Underwater"),
]

_KELVIN_RE = re.compile(r"(\d{4,5})\s*k?", re.IGNORECASE)
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_STRENGTHS = {"off": "Off", "weak": "Weak", "strong": "Strong"}
_GRAIN_SIZES = {"small": "Small", "large": "Large"}

_FILM_DESCRIPTIONS: dict[str, str] = {
    "Classic Chrome": "muted, documentary-style colors with a timeless aesthetic",
    "Classic Neg": "punchy contrast with unique, nostalgic color rendering",
    "Velvia": "vivid, saturated colors perfect for landscapes",
    "Astia": "soft, pleasing tones ideal for portraits",
    "Provia": "balanced, natural colors for versatile shooting",
    "Pro Neg Hi": "smooth gradations with soft contrast for portraits",
    "Pro Neg Std": "natural skin tones with gentle contrast",
    "Eterna": "cinematic, understated look with muted colors",
    "Eterna Bleach Bypass": "desaturated, high-contrast cinematic look",
    "Nostalgic Neg": "warm, amber-tinted vintage feel reminiscent of 1970s photography",
    "Acros": "smooth, fine-grained black and white with beautiful tonal range",
    "Acros+R": "high-contrast black and white with enhanced reds for dramatic skies",
    "Acros+G": "black and white with enhanced greens for nature photography",
    "Acros+Ye": "black and white with warm contrast and smooth skin tones",
    "Reala Ace": "natural colors with excellent skin tones and fine detail",
}


def _text(value: Any) -> str | None:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    text = str(value).strip()
    return text or None


def to_int(value: Any) -> int:
    """Leading signed integer of ``value``; 0 when there is none."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return 0 if math.isnan(value) else int(value)
    text = _text(value)
    if text is None:
        return 0
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else 0


def normalize_film_simulation(value: Any) -> str:
    text = _text(value)
    if text is None:
        return DEFAULT_FILM_SIMULATION

    lower = text.lower()
    if lower in _FILM_SIMULATION_ALIASES:
        return _FILM_SIMULATION_ALIASES[lower]

    for alias in _ALIASES_BY_LENGTH:
        if alias in lower:
            return _FILM_SIMULATION_ALIASES[alias]

    if "eterna" in lower and "bleach" in lower:
        return "Eterna Bleach Bypass"
    for needles, name in _FILM_SIMULATION_PATTERNS:
        if any(n in lower for n in needles):
            return name

    return DEFAULT_FILM_SIMULATION


def normalize_white_balance(value: Any) -> str:
    text = _text(value)
    if text is None:
        return "Auto"

    kelvin = _KELVIN_RE.search(text)
    if kelvin:
        return f"{kelvin.group(1)}K"

    lower = text.lower()
    for needles, preset in _WHITE_BALANCE_PRESETS:
        if any(n in lower for n in needles):
            return preset
    return text


def normalize_dynamic_range(value: Any) -> str:
    text = _text(value)
    if text is None:
        return "DR100"
    match = re.search(r"(\d+)", text)
    if match and int(match.group(1)) in (100, 200, 400):
        return f"DR{int(match.group(1))}"
    return "DR100"


def normalize_exposure_compensation(value: Any) -> str:
    text = _text(value)
    if text is None or text in ("0", "+0", "-0"):
        return "0"
    return text


def _normalize_strength(value: Any) -> str:
    text = _text(value)
    return _STRENGTHS.get(text.lower(), "Off") if text else "Off"


def generate_description(recipe: dict[str, Any]) -> str:
    """Summarise a normalised recipe from its film simulation and settings."""
    film_sim = recipe.get("film_simulation") or DEFAULT_FILM_SIMULATION
    flavour = _FILM_DESCRIPTIONS.get(film_sim)
    if flavour:
        desc = f"{film_sim} film simulation with {flavour}."
    else:
        desc = f"{film_sim} film simulation for a unique photographic look."

    characteristics: list[str] = []

    red = recipe.get("white_balance_shift_red", 0)
    blue = recipe.get("white_balance_shift_blue", 0)
    if red > 2 or blue < -2:
        characteristics.append("warm color tones")
    elif blue > 2 or red < -2:
        characteristics.append("cool color tones")

    highlight = recipe.get("highlight", 0)
    shadow = recipe.get("shadow", 0)
    if highlight > 0 and shadow < 0:
        characteristics.append("punchy contrast")
    elif highlight < 0 and shadow > 0:
        characteristics.append("soft, lifted shadows")
    elif shadow > 1:
        characteristics.append("open shadows for low-light situations")

    if recipe.get("grain_effect") == "Strong":
        characteristics.append("prominent film grain for an authentic analog feel")
    elif recipe.get("grain_effect") == "Weak":
        characteristics.append("subtle grain texture")

    if recipe.get("color_chrome_effect") == "Strong":
        characteristics.append("rich, saturated colors")

    if recipe.get("dynamic_range") == "DR400":
        characteristics.append("extended dynamic range")
    elif recipe.get("dynamic_range") == "DR200":
        characteristics.append("balanced dynamic range")

    sharpness = recipe.get("sharpness", 0)
    if sharpness <= -2:
        characteristics.append("soft rendering")
    elif sharpness >= 2:
        characteristics.append("crisp detail")

    if characteristics:
        desc += " Features " + ", ".join(characteristics) + "."
    return desc


def normalize_recipe(
    record: RecipeRecord,
    config: ImportConfig = DEFAULT_IMPORT_CONFIG,
) -> dict[str, Any]:
    """
    Map a raw recipe record onto the stored column set, filling defaults
    and generating the description.
    """
    grain_effect = _normalize_strength(record.grain_effect)
    grain_size = None
    if grain_effect != "Off":
        size = _text(record.grain_size)
        grain_size = _GRAIN_SIZES.get(size.lower(), "Small") if size else "Small"

    normalized: dict[str, Any] = {
        "name": _text(record.name) or "Untitled Recipe",
        "film_simulation": normalize_film_simulation(record.film_simulation),
        "white_balance": normalize_white_balance(record.white_balance),
        "white_balance_shift_red": to_int(record.white_balance_shift_red),
        "white_balance_shift_blue": to_int(record.white_balance_shift_blue),
        "dynamic_range": normalize_dynamic_range(record.dynamic_range),
        "highlight": to_int(record.highlight),
        "shadow": to_int(record.shadow),
        "color": to_int(record.color),
        "sharpness": to_int(record.sharpness),
        "noise_reduction": to_int(record.noise_reduction),
        "grain_effect": grain_effect,
        "grain_size": grain_size,
        "color_chrome_effect": _normalize_strength(record.color_chrome_effect),
        "color_chrome_fx_blue": _normalize_strength(record.color_chrome_fx_blue),
        "clarity": to_int(record.clarity),
        "exposure_compensation": normalize_exposure_compensation(record.exposure_compensation),
        "sample_images": json.dumps((record.sample_images or [])[: config.max_sample_images]),
        "source": _text(record.source) or "manual",
        "source_url": _text(record.source_url),
        "author": _text(record.author),
    }
    normalized["description"] = generate_description(normalized)
    return normalized
