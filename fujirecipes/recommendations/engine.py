from __future__ import annotations

import logging
import time

from ..db.store import RecipeStore
from .explanations import generate_explanation
from .models import RecipeOut, RecommendationItem, StructuredInput
from .scoring import TOP_N, score_recipes

logger = logging.getLogger(__name__)


def recommend(
    structured_input: StructuredInput,
    store: RecipeStore,
    limit: int = TOP_N,
) -> list[RecommendationItem]:
    """
    Rank the full recipe corpus against ``structured_input``.

    Store failures propagate as ``RecipeStoreError``; scoring always runs on
    the whole corpus or not at all.
    """
    start_time = time.time()
    corpus = store.fetch_corpus()
    scored = score_recipes(structured_input, corpus, limit=limit)

    items: list[RecommendationItem] = []
    for entry in scored:
        recipe = RecipeOut.from_record(entry.recipe)
        items.append(RecommendationItem(
            recipe=recipe,
            score=entry.rounded_score,
            explanation=generate_explanation(
                recipe.film_simulation, entry.matched_tags, structured_input,
            ),
        ))

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.info(
        "Scored %d recipes for %s in %sms (top: %s)",
        len(corpus),
        structured_input.to_public_dict() or "empty input",
        elapsed_ms,
        [(item.recipe.name, item.score) for item in items],
    )
    return items
