"""
Static tag vocabulary and category weights.

These tables drive both scoring and explanations and must stay consistent
with the tags assigned at import time (see ``data_ingestion.tagging``).
Tags referenced here that no recipe carries simply never match.
"""
from __future__ import annotations

from enum import Enum

from .models import (
    Category,
    ColorPreference,
    Lighting,
    Location,
    Mood,
    Season,
    Subject,
)

INPUT_TO_TAGS: dict[Category, dict[Enum, tuple[str, ...]]] = {
    Category.lighting: {
        Lighting.bright_sunlight: ("daylight", "harsh_light"),
        Lighting.golden_hour: ("golden_hour", "soft_light"),
        Lighting.blue_hour: ("blue_hour", "low_light"),
        Lighting.overcast: ("overcast", "soft_light"),
        Lighting.indoor: ("indoor", "low_light"),
        Lighting.night: ("night", "low_light"),
        Lighting.mixed: ("indoor", "daylight"),
    },
    Category.subject: {
        Subject.portrait: ("portrait",),
        Subject.street: ("street", "urban", "documentary"),
        Subject.landscape: ("landscape", "nature"),
        Subject.architecture: ("architecture", "urban"),
        Subject.nature: ("nature", "landscape"),
        Subject.food: ("food", "indoor"),
        Subject.travel: ("travel", "documentary", "street"),
        Subject.event: ("documentary", "portrait", "indoor"),
    },
    Category.mood: {
        Mood.cinematic: ("cinematic", "dramatic", "moody"),
        Mood.vintage: ("vintage", "filmic", "warm"),
        Mood.modern: ("modern", "contrasty"),
        Mood.dreamy: ("dreamy", "soft", "pastel"),
        Mood.moody: ("moody", "dramatic", "contrasty"),
        Mood.natural: ("natural", "soft"),
        Mood.dramatic: ("dramatic", "contrasty", "moody"),
        Mood.minimal: ("modern", "soft", "muted"),
    },
    Category.color_preference: {
        ColorPreference.warm: ("warm", "earthy"),
        ColorPreference.cool: ("cool",),
        ColorPreference.neutral: ("neutral", "natural"),
        ColorPreference.vibrant: ("vibrant",),
        ColorPreference.muted: ("muted", "pastel"),
        ColorPreference.bw: ("monochrome",),
        ColorPreference.teal_orange: ("teal_orange", "cinematic"),
    },
    Category.location: {
        Location.city: ("city", "urban", "street"),
        Location.nature: ("nature", "mountain"),
        Location.beach: ("beach", "summer"),
        Location.cafe: ("cafe", "indoor"),
        Location.studio: ("studio", "indoor"),
        Location.home: ("indoor",),
    },
    Category.season: {
        Season.summer: ("summer", "vibrant"),
        Season.autumn: ("autumn", "warm", "earthy"),
        Season.winter: ("winter", "cool"),
        Season.spring: ("spring", "pastel"),
    },
}

# Lighting and subject dominate; the six weights sum to 1.0
CATEGORY_WEIGHTS: dict[Category, float] = {
    Category.lighting: 0.20,
    Category.subject: 0.20,
    Category.mood: 0.175,
    Category.color_preference: 0.175,
    Category.location: 0.125,
    Category.season: 0.125,
}

# Tag families used by the explanation generator
LIGHTING_TAGS = frozenset({
    "daylight", "golden_hour", "blue_hour", "overcast", "indoor",
    "low_light", "night", "harsh_light", "soft_light",
})
SUBJECT_TAGS = frozenset({
    "portrait", "street", "landscape", "architecture", "nature",
    "food", "travel", "documentary",
})
MOOD_TAGS = frozenset({
    "cinematic", "vintage", "modern", "moody", "dreamy", "contrasty",
    "soft", "dramatic", "natural", "filmic",
})

# Pre-seeded tag vocabulary: name -> display category
TAG_VOCABULARY: dict[str, str] = {
    # lighting
    "daylight": "lighting",
    "harsh_light": "lighting",
    "golden_hour": "lighting",
    "soft_light": "lighting",
    "blue_hour": "lighting",
    "low_light": "lighting",
    "overcast": "lighting",
    "indoor": "lighting",
    "night": "lighting",
    # subject
    "portrait": "subject",
    "street": "subject",
    "landscape": "subject",
    "architecture": "subject",
    "nature": "subject",
    "food": "subject",
    "travel": "subject",
    "documentary": "subject",
    # mood
    "cinematic": "mood",
    "vintage": "mood",
    "modern": "mood",
    "dreamy": "mood",
    "moody": "mood",
    "natural": "mood",
    "dramatic": "mood",
    "filmic": "mood",
    "contrasty": "mood",
    "soft": "mood",
    # color
    "warm": "color",
    "cool": "color",
    "neutral": "color",
    "vibrant": "color",
    "muted": "color",
    "pastel": "color",
    "earthy": "color",
    "monochrome": "color",
    "teal_orange": "color",
    # location
    "city": "location",
    "urban": "location",
    "mountain": "location",
    "beach": "location",
    "cafe": "location",
    "studio": "location",
    # season
    "summer": "season",
    "autumn": "season",
    "winter": "season",
    "spring": "season",
}


def tags_for(category: Category, value: Enum) -> tuple[str, ...]:
    return INPUT_TO_TAGS[category].get(value, ())
