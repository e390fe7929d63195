from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class LLMConfig:
    api_key: str = os.getenv("GROQ_API_KEY", "")
    # JSON mode is required; override with GROQ_MODEL for another JSON-capable model
    model: str = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
    # Seconds for the single classifier call before the keyword fallback takes over
    timeout: float = 8.0
    # The six-field JSON object is well under this
    max_tokens: int = 200
    enabled: bool = True


DEFAULT_LLM_CONFIG = LLMConfig()
