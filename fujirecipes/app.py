from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, HTTPException, Request

from .data_ingestion.ingest import import_recipes
from .data_ingestion.models import ImportRequest, ImportSummary
from .db.config import DEFAULT_STORE_CONFIG
from .db.store import RecipeStore, RecipeStoreError
from .llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from .nlp.extractor import extract_parameters
from .recommendations.engine import recommend
from .recommendations.models import (
    CameraOut,
    NaturalLanguageRequest,
    NaturalLanguageResponse,
    RecipeDetail,
    RecipeOut,
    RecommendationItem,
    StructuredInput,
    TagOut,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    store = RecipeStore(DEFAULT_STORE_CONFIG)
    try:
        store.open()
    except RecipeStoreError:
        logger.error("Recipe store unavailable; recipe endpoints will fail", exc_info=True)
    app.state.store = store
    try:
        yield
    finally:
        store.close()


app = FastAPI(title="Fuji Recipe Recommendation API", version="1.0.0", lifespan=lifespan)


def get_store(request: Request) -> RecipeStore:
    return request.app.state.store


def get_llm_config() -> LLMConfig:
    return DEFAULT_LLM_CONFIG


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Recipe catalogue ─────────────────────────────────────────────────────


@app.get("/recipes", response_model=list[RecipeOut])
def list_recipes(store: RecipeStore = Depends(get_store)) -> list[RecipeOut]:
    try:
        df = store.list_recipes()
    except RecipeStoreError as exc:
        raise HTTPException(status_code=500, detail=f"Failed to fetch recipes: {exc}") from exc
    return [RecipeOut.from_record(record) for record in df.to_dict(orient="records")]


@app.get("/recipes/meta/tags", response_model=dict[str, list[TagOut]])
def list_tags(store: RecipeStore = Depends(get_store)) -> dict[str, list[TagOut]]:
    try:
        tags = store.list_tags()
    except RecipeStoreError as exc:
        raise HTTPException(status_code=500, detail=f"Failed to fetch tags: {exc}") from exc

    grouped: dict[str, list[TagOut]] = {}
    for tag in tags:
        grouped.setdefault(tag["category"], []).append(TagOut(**tag))
    return grouped


@app.get("/recipes/meta/cameras", response_model=list[CameraOut])
def list_cameras(store: RecipeStore = Depends(get_store)) -> list[CameraOut]:
    try:
        return [CameraOut(**camera) for camera in store.list_cameras()]
    except RecipeStoreError as exc:
        raise HTTPException(status_code=500, detail=f"Failed to fetch cameras: {exc}") from exc


@app.get("/recipes/{recipe_id}", response_model=RecipeDetail)
def get_recipe(recipe_id: int, store: RecipeStore = Depends(get_store)) -> RecipeDetail:
    try:
        record = store.get_recipe(recipe_id)
    except RecipeStoreError as exc:
        raise HTTPException(status_code=500, detail=f"Failed to fetch recipe: {exc}") from exc
    if record is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return RecipeDetail.from_record(record, compatible_cameras=record["compatible_cameras"])


# ── Recommendations ──────────────────────────────────────────────────────


@app.post("/recommend/structured", response_model=list[RecommendationItem])
def recommend_structured(
    body: StructuredInput,
    store: RecipeStore = Depends(get_store),
) -> list[RecommendationItem]:
    try:
        return recommend(body, store)
    except RecipeStoreError as exc:
        logger.error("Structured recommendation failed: %s", exc)
        raise HTTPException(status_code=500, detail=f"Failed to get recommendations: {exc}") from exc


@app.post("/recommend/natural", response_model=NaturalLanguageResponse)
def recommend_natural(
    body: NaturalLanguageRequest,
    store: RecipeStore = Depends(get_store),
    llm_config: LLMConfig = Depends(get_llm_config),
) -> NaturalLanguageResponse:
    prompt = body.prompt.strip()
    if not prompt:
        raise HTTPException(status_code=400, detail="Prompt is required")

    parsed = extract_parameters(prompt, config=llm_config)
    try:
        items = recommend(parsed, store)
    except RecipeStoreError as exc:
        logger.error("Natural language recommendation failed: %s", exc)
        raise HTTPException(status_code=500, detail=f"Failed to process natural language: {exc}") from exc

    return NaturalLanguageResponse(parsed=parsed.to_public_dict(), recommendations=items)


# ── Import ───────────────────────────────────────────────────────────────


@app.post("/import/recipes", response_model=ImportSummary)
def import_recipe_records(
    body: ImportRequest,
    store: RecipeStore = Depends(get_store),
) -> ImportSummary:
    if not store.is_open:
        raise HTTPException(status_code=500, detail="Failed to import recipes: recipe store is not open")
    return import_recipes(store, body.recipes, update_existing=body.update)
