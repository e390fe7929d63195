from __future__ import annotations

from typing import Any

_FILM_SIMULATION_TAGS: dict[str, list[str]] = {
    "Classic Chrome": ["street", "documentary", "muted", "natural", "travel"],
    "Classic Neg": ["street", "contrasty", "urban", "city"],
    "Velvia": ["landscape", "vibrant", "nature", "travel"],
    "Astia": ["portrait", "soft", "pastel", "dreamy"],
    "Pro Neg Hi": ["portrait", "soft", "filmic", "indoor"],
    "Pro Neg Std": ["portrait", "natural", "soft", "golden_hour"],
    "Eterna": ["cinematic", "moody", "muted", "night"],
    "Eterna Bleach Bypass": ["cinematic", "dramatic", "contrasty", "moody"],
    "Nostalgic Neg": ["vintage", "warm", "filmic", "portrait"],
    "Acros": ["monochrome", "street", "portrait"],
    "Acros+R": ["monochrome", "contrasty", "dramatic", "street"],
    "Provia": ["natural", "neutral", "travel", "landscape", "daylight"],
    "Reala Ace": ["natural", "portrait", "soft", "daylight"],
}

# (substrings in the lower-cased name, tags added)
_NAME_KEYWORD_TAGS: list[tuple[tuple[str, ...], list[str]]] = [
    (("portra", "portrait"), ["portrait", "warm", "filmic", "golden_hour", "soft_light"]),
    (("kodak",), ["filmic", "vintage", "warm"]),
    (("fujicolor", "superia", "reala"), ["filmic", "natural", "daylight"]),
    (("natura",), ["low_light", "indoor", "night"]),
    (("velvia",), ["vibrant", "landscape", "nature"]),
    (("ektachrome",), ["vibrant", "travel", "daylight"]),
    (("vision", "cine"), ["cinematic", "moody"]),
    (("night", "neon"), ["night", "low_light", "urban", "city"]),
    (("golden", "sunset"), ["golden_hour", "warm", "portrait"]),
    (("blue hour",), ["blue_hour", "cool", "moody"]),
    (("indoor", "low light"), ["indoor", "low_light"]),
    (("summer", "sun"), ["summer", "warm", "daylight", "beach"]),
    (("autumn", "fall"), ["autumn", "warm", "earthy"]),
    (("winter", "cold"), ["winter", "cool"]),
    (("spring",), ["spring", "soft", "pastel"]),
    (("vintage", "retro", "nostalgic"), ["vintage", "filmic"]),
    (("cinematic", "cinema", "movie"), ["cinematic", "moody", "dramatic"]),
    (("street",), ["street", "urban", "city", "documentary"]),
    (("landscape",), ["landscape", "nature", "travel"]),
    (("b&w", "black", "mono"), ["monochrome"]),
    (("pastel", "soft", "dreamy"), ["pastel", "soft", "dreamy"]),
    (("california", "beach", "pacific"), ["beach", "summer", "travel"]),
    (("urban", "city"), ["urban", "city", "street"]),
]


def assign_tags(recipe: dict[str, Any]) -> list[str]:
    """
    Derive the tag set for a normalised recipe from its film simulation,
    tone settings and name. Order of first appearance is kept, duplicates dropped.
    """
    tags: list[str] = list(_FILM_SIMULATION_TAGS.get(recipe.get("film_simulation", ""), []))

    red = recipe.get("white_balance_shift_red", 0)
    blue = recipe.get("white_balance_shift_blue", 0)
    if red > 2 or blue < -2:
        tags += ["warm", "golden_hour"]
    elif blue > 2 or red < -2:
        tags += ["cool", "overcast"]
    else:
        tags += ["neutral", "natural"]

    highlight = recipe.get("highlight", 0)
    shadow = recipe.get("shadow", 0)
    if highlight > 0 and shadow < 0:
        tags += ["contrasty", "dramatic"]
    elif highlight < 0 and shadow > 0:
        tags += ["soft", "dreamy"]
    if shadow > 1:
        tags += ["low_light", "indoor"]

    if recipe.get("grain_effect") == "Strong":
        tags += ["filmic", "vintage", "street"]

    if recipe.get("color_chrome_effect") == "Strong":
        tags += ["vibrant", "nature", "landscape"]

    if recipe.get("dynamic_range") == "DR400":
        tags += ["landscape", "daylight", "harsh_light"]

    color = recipe.get("color", 0)
    if color >= 2:
        tags.append("vibrant")
    elif color <= -2:
        tags += ["muted", "pastel"]

    name = (recipe.get("name") or "").lower()
    for needles, keyword_tags in _NAME_KEYWORD_TAGS:
        if any(n in name for n in needles):
            tags += keyword_tags

    return list(dict.fromkeys(tags))
