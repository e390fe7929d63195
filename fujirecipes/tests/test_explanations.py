from fujirecipes.recommendations.explanations import (
    FALLBACK_EXPLANATION,
    generate_explanation,
)
from fujirecipes.recommendations.models import StructuredInput


def test_empty_input_without_known_film_falls_back():
    assert generate_explanation("Sepia", [], StructuredInput()) == FALLBACK_EXPLANATION


def test_film_simulation_note_alone():
    text = generate_explanation("Velvia", [], StructuredInput())
    assert text == "Velvia delivers vibrant, saturated colors."


def test_lighting_subject_mood_in_fixed_order():
    structured = StructuredInput(lighting="golden_hour", subject="portrait", mood="dreamy")
    text = generate_explanation("Astia", ["golden_hour", "portrait", "soft"], structured)
    assert text == (
        "Works well in golden hour conditions. "
        "Excellent for portrait photography. "
        "Creates a dreamy aesthetic. "
        "Astia offers soft, pleasing skin tones."
    )


def test_lighting_sentence_requires_a_lighting_tag_match():
    structured = StructuredInput(lighting="night", subject="street")
    text = generate_explanation("Sepia", ["street"], structured)
    assert text == "Excellent for street photography."


def test_any_lighting_family_tag_counts():
    # indoor came from the location, but it is still a lighting-family tag
    structured = StructuredInput(lighting="bright_sunlight", location="cafe")
    text = generate_explanation("Sepia", ["indoor"], structured)
    assert text == "Works well in bright sunlight conditions."


def test_color_sentence_is_unconditional():
    structured = StructuredInput(colorPreference="bw")
    assert generate_explanation("Sepia", [], structured) == "Perfect for black and white photography."


def test_teal_orange_wording():
    structured = StructuredInput(colorPreference="teal_orange")
    text = generate_explanation("Eterna", ["cinematic"], structured)
    assert text == (
        "Delivers cinematic teal and orange color grading. "
        "Eterna creates a cinematic, understated look."
    )


def test_generic_color_wording():
    structured = StructuredInput(colorPreference="warm")
    assert generate_explanation(None, [], structured) == "Produces warm tones."


def test_every_clause_ends_with_period():
    structured = StructuredInput(
        lighting="blue_hour", subject="travel", mood="moody", colorPreference="cool",
    )
    text = generate_explanation("Classic Chrome", ["blue_hour", "travel", "moody"], structured)
    sentences = text.split(". ")
    assert text.endswith(".")
    assert len(sentences) == 5
