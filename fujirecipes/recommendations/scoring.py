from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from .models import StructuredInput
from .tag_tables import CATEGORY_WEIGHTS, tags_for

TOP_N = 3


@dataclass
class ScoredRecipe:
    recipe: dict[str, Any]
    score: float
    matched_tags: list[str] = field(default_factory=list)

    @property
    def rounded_score(self) -> int:
        return round_score(self.score)


def round_score(value: float) -> int:
    """Round half up to the nearest integer, matching how scores are displayed."""
    return int(math.floor(value + 0.5))


def build_target_tags(structured_input: StructuredInput) -> dict[str, float]:
    """
    Expand each selected category value into its tags and accumulate the
    category weight per tag. A tag reached from two categories gets both weights.
    """
    target: dict[str, float] = {}
    for category, value in structured_input.selections():
        weight = CATEGORY_WEIGHTS[category]
        for tag in tags_for(category, value):
            target[tag] = target.get(tag, 0.0) + weight
    return target


def _matched_tags(recipe_tags: list[str] | None, target: dict[str, float]) -> list[str]:
    owned = set(recipe_tags or [])
    return [tag for tag in target if tag in owned]


def score_recipes(
    structured_input: StructuredInput,
    corpus: pd.DataFrame,
    limit: int = TOP_N,
) -> list[ScoredRecipe]:
    """
    Score every recipe in ``corpus`` against the weighted target tags and
    return the ``limit`` best, highest first.

    Scores are normalised against the total weight requested by the input,
    so a recipe carrying every target tag scores exactly 100. Ties keep the
    lower recipe id first. Scores are left unrounded.
    """
    if corpus.empty:
        return []

    target = build_target_tags(structured_input)
    max_possible = sum(target.values())

    candidates = corpus.copy()
    candidates["_matched"] = candidates["tags"].apply(_matched_tags, target=target)
    if max_possible > 0:
        candidates["_score"] = candidates["_matched"].apply(
            lambda matched: 100.0 * sum(target[tag] for tag in matched) / max_possible
        )
    else:
        candidates["_score"] = 0.0

    ranked = candidates.sort_values(
        ["_score", "id"], ascending=[False, True], kind="stable"
    ).head(limit)

    results: list[ScoredRecipe] = []
    for _, row in ranked.iterrows():
        recipe = row.drop(labels=["_matched", "_score"]).to_dict()
        results.append(ScoredRecipe(
            recipe=recipe,
            score=float(row["_score"]),
            matched_tags=list(row["_matched"]),
        ))
    return results
