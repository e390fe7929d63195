from __future__ import annotations

import json
import logging
from typing import Any

from groq import Groq

from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are a photography assistant that helps parse natural language descriptions \
into structured photography parameters.

Given a user's description of their shooting scenario, extract the following parameters:

1. lighting: One of: bright_sunlight, golden_hour, blue_hour, overcast, indoor, night, mixed
2. subject: One of: portrait, street, landscape, architecture, nature, food, travel, event
3. mood: One of: cinematic, vintage, modern, dreamy, moody, natural, dramatic, minimal
4. colorPreference: One of: warm, cool, neutral, vibrant, muted, bw, teal_orange
5. location: One of: city, nature, beach, cafe, studio, home
6. season: One of: summer, autumn, winter, spring

Return ONLY a valid JSON object with these fields. Use null for any parameter \
that cannot be determined from the input.

Examples:
- "I'm shooting portraits at sunset on the beach" → {"lighting":"golden_hour","subject":"portrait","mood":"dreamy","colorPreference":"warm","location":"beach","season":"summer"}
- "Moody night street photography in Tokyo" → {"lighting":"night","subject":"street","mood":"moody","colorPreference":"teal_orange","location":"city","season":null}
- "Bright sunny landscape in autumn mountains" → {"lighting":"bright_sunlight","subject":"landscape","mood":"natural","colorPreference":"vibrant","location":"nature","season":"autumn"}"""


def classify_parameters(
    text: str,
    config: LLMConfig = DEFAULT_LLM_CONFIG,
) -> dict[str, Any] | None:
    """
    Ask Groq to map a shooting description onto the six photography fields.

    Returns the decoded JSON object exactly as the model produced it; callers
    must validate every field. Returns ``None`` when the classifier is not
    configured or on any failure (timeout, API error, bad JSON, non-object).
    The call is made once with retries disabled.
    """
    if not config.enabled or not config.api_key:
        return None

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout, max_retries=0)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ],
            max_tokens=config.max_tokens,
            temperature=0.3,
            response_format={"type": "json_object"},
        )

        content = (response.choices[0].message.content or "").strip()
        parsed = json.loads(content)
        if not isinstance(parsed, dict):
            raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")
        return parsed

    except Exception:
        logger.warning("Groq parameter classification failed, using keyword fallback", exc_info=True)
        return None
