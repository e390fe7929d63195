from __future__ import annotations

import pandas as pd
import pytest

from fujirecipes.recommendations.models import (
    Lighting,
    Mood,
    StructuredInput,
    Subject,
)
from fujirecipes.recommendations.scoring import (
    build_target_tags,
    round_score,
    score_recipes,
)


def _corpus(*tag_lists: list[str]) -> pd.DataFrame:
    return pd.DataFrame([
        {"id": i + 1, "name": f"Recipe {i + 1}", "film_simulation": "Classic Chrome", "tags": tags}
        for i, tags in enumerate(tag_lists)
    ])


# ── Target tags ──────────────────────────────────────────────────────────


class TestTargetTags:
    def test_value_expands_to_all_its_tags(self):
        target = build_target_tags(StructuredInput(lighting=Lighting.golden_hour))
        assert target == {"golden_hour": pytest.approx(0.20), "soft_light": pytest.approx(0.20)}

    def test_shared_tag_accumulates_weights_across_categories(self):
        target = build_target_tags(StructuredInput(mood="vintage", colorPreference="warm"))
        assert target["warm"] == pytest.approx(0.35)
        assert target["filmic"] == pytest.approx(0.175)
        assert target["earthy"] == pytest.approx(0.175)

    def test_empty_input_has_no_targets(self):
        assert build_target_tags(StructuredInput()) == {}


# ── Scoring ──────────────────────────────────────────────────────────────


class TestScoreRecipes:
    def test_empty_corpus_returns_empty(self):
        assert score_recipes(StructuredInput(lighting="night"), pd.DataFrame()) == []

    def test_superset_of_target_tags_scores_exactly_100(self):
        structured = StructuredInput(
            lighting="golden_hour", subject="portrait", mood="dreamy",
            colorPreference="warm", location="beach", season="summer",
        )
        everything = list(build_target_tags(structured)) + ["extra", "more"]
        results = score_recipes(structured, _corpus(["portrait"], everything))
        assert results[0].recipe["id"] == 2
        assert results[0].score == 100.0
        assert results[0].rounded_score == 100

    def test_partial_match_is_share_of_requested_weight(self):
        structured = StructuredInput(lighting=Lighting.golden_hour)
        results = score_recipes(structured, _corpus(["golden_hour"]))
        # soft_light is requested but missing
        assert results[0].score == pytest.approx(50.0)
        assert results[0].matched_tags == ["golden_hour"]

    def test_returns_at_most_three_sorted_descending(self):
        structured = StructuredInput(subject=Subject.street, mood=Mood.moody)
        corpus = _corpus(
            ["street"],
            ["street", "urban", "documentary", "moody", "dramatic", "contrasty"],
            [],
            ["moody"],
            ["street", "urban"],
        )
        results = score_recipes(structured, corpus)
        scores = [r.score for r in results]
        assert len(results) == 3
        assert scores == sorted(scores, reverse=True)
        assert results[0].recipe["id"] == 2

    def test_all_null_input_scores_zero_in_corpus_order(self):
        corpus = _corpus(["street"], ["portrait"], ["night"], ["moody"])
        results = score_recipes(StructuredInput(), corpus)
        assert [r.score for r in results] == [0.0, 0.0, 0.0]
        assert [r.recipe["id"] for r in results] == [1, 2, 3]

    def test_unrecognised_values_behave_like_no_input(self):
        structured = StructuredInput.model_validate({"lighting": "underwater", "season": "monsoon"})
        results = score_recipes(structured, _corpus(["night"], ["summer"]))
        assert all(r.score == 0.0 for r in results)

    def test_identical_tags_tie_and_keep_lower_id_first(self):
        structured = StructuredInput(lighting="night")
        corpus = _corpus(["portrait"], ["night", "low_light"], ["night", "low_light"])
        results = score_recipes(structured, corpus)
        assert results[0].score == results[1].score == 100.0
        assert [r.recipe["id"] for r in results[:2]] == [2, 3]

    def test_scores_stay_within_bounds(self):
        corpus = _corpus(["night", "low_light"], ["daylight"], ["indoor", "cafe"], [])
        for lighting in Lighting:
            for result in score_recipes(StructuredInput(lighting=lighting, location="cafe"), corpus):
                assert 0.0 <= result.score <= 100.0

    def test_recipe_without_tags_scores_zero(self):
        corpus = pd.DataFrame([{"id": 1, "name": "Bare", "tags": None}])
        results = score_recipes(StructuredInput(mood="moody"), corpus)
        assert results[0].score == 0.0
        assert results[0].matched_tags == []


# ── Rounding ─────────────────────────────────────────────────────────────


class TestRounding:
    def test_rounds_half_up(self):
        assert round_score(12.5) == 13
        assert round_score(87.5) == 88
        assert round_score(33.333) == 33

    def test_rounding_is_idempotent(self):
        for raw in (0.0, 12.5, 41.17647, 58.8235, 99.5, 100.0):
            once = round_score(raw)
            assert round_score(once) == once
