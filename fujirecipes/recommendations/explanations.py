from __future__ import annotations

from collections.abc import Iterable

from .models import ColorPreference, StructuredInput
from .tag_tables import LIGHTING_TAGS, MOOD_TAGS, SUBJECT_TAGS

FALLBACK_EXPLANATION = "A versatile recipe that works well for your shooting scenario."

FILM_SIMULATION_NOTES: dict[str, str] = {
    "Classic Chrome": "Classic Chrome provides a timeless, muted film look",
    "Velvia": "Velvia delivers vibrant, saturated colors",
    "Astia": "Astia offers soft, pleasing skin tones",
    "Pro Neg Hi": "Pro Neg Hi gives smooth gradations with controlled contrast",
    "Pro Neg Std": "Pro Neg Std provides natural skin reproduction",
    "Eterna": "Eterna creates a cinematic, understated look",
    "Classic Neg": "Classic Neg adds punchy contrast with unique color rendering",
    "Acros": "Acros delivers smooth, fine-grained black and white",
    "Acros+R": "Acros with red filter enhances contrast and drama",
    "Provia": "Provia provides accurate, balanced colors",
    "Nostalgic Neg": "Nostalgic Neg creates warm, amber-tinted memories",
}


def _humanize(value: str) -> str:
    return value.replace("_", " ", 1)


def generate_explanation(
    film_simulation: str | None,
    matched_tags: Iterable[str],
    structured_input: StructuredInput,
) -> str:
    """
    Build a short justification from the matched tags and the user's input.

    Lighting, subject and mood sentences need a matching tag from their
    family; the colour sentence is emitted whenever a preference was given.
    """
    matched = set(matched_tags)
    reasons: list[str] = []

    if structured_input.lighting and matched & LIGHTING_TAGS:
        reasons.append(f"Works well in {_humanize(structured_input.lighting.value)} conditions")

    if structured_input.subject and matched & SUBJECT_TAGS:
        reasons.append(f"Excellent for {structured_input.subject.value} photography")

    if structured_input.mood and matched & MOOD_TAGS:
        reasons.append(f"Creates a {structured_input.mood.value} aesthetic")

    color = structured_input.color_preference
    if color is ColorPreference.bw:
        reasons.append("Perfect for black and white photography")
    elif color is ColorPreference.teal_orange:
        reasons.append("Delivers cinematic teal and orange color grading")
    elif color is not None:
        reasons.append(f"Produces {color.value} tones")

    note = FILM_SIMULATION_NOTES.get(film_simulation or "")
    if note:
        reasons.append(note)

    if not reasons:
        return FALLBACK_EXPLANATION
    return ". ".join(reasons) + "."
