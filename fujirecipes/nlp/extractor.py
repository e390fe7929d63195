from __future__ import annotations

import logging
from typing import Any

from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import classify_parameters
from ..recommendations.models import Category, StructuredInput
from .rules import CATEGORY_RULES, first_match

logger = logging.getLogger(__name__)

# Only these keys are read from classifier output; anything else is dropped
PUBLIC_FIELDS: tuple[str, ...] = tuple(category.value for category in Category)


# ---------------------------------------------------------------------------
# Classifier output decoding
# ---------------------------------------------------------------------------


def decode_classifier_output(raw: dict[str, Any]) -> StructuredInput:
    """
    Keep each of the six fields only when its value belongs to the field's
    enumeration. Extra or renamed keys and out-of-vocabulary values become absent.
    """
    known = {key: raw[key] for key in PUBLIC_FIELDS if key in raw}
    dropped = sorted(set(raw) - set(known))
    if dropped:
        logger.debug("Dropping unexpected classifier fields: %s", dropped)
    return StructuredInput.model_validate(known)


# ---------------------------------------------------------------------------
# Fallback
# ---------------------------------------------------------------------------


def fallback_parse(text: str) -> StructuredInput:
    """Deterministic keyword extraction, first matching rule per category."""
    lower = (text or "").lower()
    values = {
        category.value: first_match(rules, lower)
        for category, rules in CATEGORY_RULES.items()
    }
    return StructuredInput.model_validate(values)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def extract_parameters(
    text: str,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> StructuredInput:
    """
    Turn a free-text shooting description into a (partial) StructuredInput.

    Tries the Groq classifier first when configured; falls back to keyword
    rules when it is disabled, fails, or returns nothing usable. Never raises.
    """
    raw = classify_parameters(text, config)
    if raw is not None:
        try:
            parsed = decode_classifier_output(raw)
        except Exception:
            logger.warning("Classifier output could not be decoded, using fallback", exc_info=True)
        else:
            if not parsed.is_empty():
                return parsed
            logger.warning("Classifier returned no valid fields, using fallback")

    try:
        return fallback_parse(text)
    except Exception:
        logger.warning("Fallback parsing failed, returning empty input", exc_info=True)
        return StructuredInput()
