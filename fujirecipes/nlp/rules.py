"""
Keyword rules for the deterministic parameter fallback.

Each category has an ordered list of rules; the first rule whose predicate
matches the lower-cased text decides the value. Multi-word phrases match as
plain substrings. Short words that commonly appear inside other words
("old" in "golden", "fall" in "waterfall") match only as whole words.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..recommendations.models import (
    Category,
    ColorPreference,
    Lighting,
    Location,
    Mood,
    Season,
    Subject,
)

Predicate = Callable[[str], bool]


@dataclass(frozen=True)
class Rule:
    predicate: Predicate
    value: Enum


def keywords(*phrases: str, words: tuple[str, ...] = ()) -> Predicate:
    """Match any substring in ``phrases`` or any whole word in ``words``."""
    word_re = (
        re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b")
        if words
        else None
    )

    def _predicate(text: str) -> bool:
        if any(p in text for p in phrases):
            return True
        return bool(word_re and word_re.search(text))

    return _predicate


LIGHTING_RULES: list[Rule] = [
    Rule(keywords("sunset", "golden hour", "magic hour"), Lighting.golden_hour),
    Rule(keywords("night", "evening", words=("dark",)), Lighting.night),
    Rule(keywords("indoor", "inside"), Lighting.indoor),
    Rule(keywords("overcast", "cloudy", "rainy"), Lighting.overcast),
    Rule(keywords("sunny", "bright", "midday"), Lighting.bright_sunlight),
    Rule(keywords("blue hour", "dusk", "dawn"), Lighting.blue_hour),
    Rule(keywords("low light"), Lighting.indoor),
    Rule(keywords("mixed light"), Lighting.mixed),
]

SUBJECT_RULES: list[Rule] = [
    Rule(keywords("portrait", "people", "person", words=("face", "faces")), Subject.portrait),
    Rule(keywords("street", "urban"), Subject.street),
    Rule(keywords("landscape", "scenery", "mountain", "vista"), Subject.landscape),
    Rule(keywords("architecture", "building"), Subject.architecture),
    Rule(keywords("nature", "wildlife", "animal", "flower"), Subject.nature),
    Rule(keywords("food", "restaurant", "dish"), Subject.food),
    Rule(keywords("travel", "vacation", "trip"), Subject.travel),
    Rule(keywords("wedding", "concert", words=("event", "events", "party")), Subject.event),
]

MOOD_RULES: list[Rule] = [
    Rule(keywords("cinematic", "film", "movie"), Mood.cinematic),
    Rule(keywords("vintage", "retro", "nostalgic", words=("old",)), Mood.vintage),
    Rule(keywords("moody", "atmospheric", words=("dark",)), Mood.moody),
    Rule(keywords("dreamy", "ethereal", words=("soft", "airy")), Mood.dreamy),
    Rule(keywords("dramatic", "intense", words=("bold",)), Mood.dramatic),
    Rule(keywords("natural", "realistic"), Mood.natural),
    # "modern" reads as the minimal look; Mood.modern only comes from the classifier
    Rule(keywords("modern", "clean", "minimal"), Mood.minimal),
    # scene hints, only when no explicit mood word was given
    Rule(keywords("landscape", "scenery"), Mood.natural),
]

COLOR_RULES: list[Rule] = [
    Rule(keywords("teal", "hollywood"), ColorPreference.teal_orange),
    Rule(keywords("neutral", "natural color", "balanced"), ColorPreference.neutral),
    Rule(keywords("warm", "orange", "amber"), ColorPreference.warm),
    Rule(keywords("cool", "blue", words=("cold",)), ColorPreference.cool),
    Rule(keywords("black and white", "b&w", "monochrome", words=("bw",)), ColorPreference.bw),
    Rule(keywords("vibrant", "colorful", "colourful", "punchy", words=("saturated",)), ColorPreference.vibrant),
    Rule(keywords("muted", "desaturated", "pastel", "faded"), ColorPreference.muted),
    Rule(keywords("sunny", "bright"), ColorPreference.vibrant),
]

LOCATION_RULES: list[Rule] = [
    Rule(keywords("city", "tokyo", "new york", "urban", "downtown"), Location.city),
    Rule(keywords("beach", "ocean", "coast", words=("sea",)), Location.beach),
    Rule(keywords("cafe", "café", "coffee", "restaurant"), Location.cafe),
    Rule(keywords("studio"), Location.studio),
    Rule(keywords("forest", "mountain", "nature", "outdoor", words=("park",)), Location.nature),
    Rule(keywords("home", "house", "apartment"), Location.home),
]

SEASON_RULES: list[Rule] = [
    Rule(keywords("summer"), Season.summer),
    Rule(keywords("autumn", words=("fall",)), Season.autumn),
    Rule(keywords("winter"), Season.winter),
    Rule(keywords("spring"), Season.spring),
    # weather and scenery hints
    Rule(keywords("sunny", words=("hot",)), Season.summer),
    Rule(keywords("leaves", "foliage"), Season.autumn),
    Rule(keywords("snow", words=("cold",)), Season.winter),
    Rule(keywords("bloom", "flower"), Season.spring),
]

CATEGORY_RULES: dict[Category, list[Rule]] = {
    Category.lighting: LIGHTING_RULES,
    Category.subject: SUBJECT_RULES,
    Category.mood: MOOD_RULES,
    Category.color_preference: COLOR_RULES,
    Category.location: LOCATION_RULES,
    Category.season: SEASON_RULES,
}


def first_match(rules: list[Rule], text: str) -> Enum | None:
    for rule in rules:
        if rule.predicate(text):
            return rule.value
    return None
