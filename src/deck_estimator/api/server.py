"""FastAPI server — HTTP access to the pricing core for a thin client.

Run with:
    uvicorn deck_estimator.api.server:app --reload --port 8000

Or:
    deck-estimator-api

Endpoints:
    GET  /                                  — welcome + pointers
    GET  /health                            — liveness
    GET  /projects                          — built-in price lists
    GET  /projects/{project_type}/fields    — slider bounds for a variant
    GET  /projects/{project_type}/curves    — price ramps + rush curve
    GET  /state/defaults                    — default session state
    POST /estimate                          — apply edits, return itemized estimate
    POST /estimate/summary                  — same, plain-text summary only

The service is stateless: the client posts its current state and the edits
made since, and gets back the normalized state with the new estimate.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from deck_estimator.config.fields import DEADLINE_DAYS, FieldSpec, field_specs
from deck_estimator.config.project import PROJECT_TYPES, PricingConfig
from deck_estimator.config.settings import get_settings
from deck_estimator.engine.curves import price_curve, rush_curve
from deck_estimator.engine.session import Estimator
from deck_estimator.models.results import Estimate, PriceCurve, RushCurve

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Deck Estimator API",
    version=API_VERSION,
    description=(
        "Price estimator for presentation design: slide layout, illustrations, "
        "key visual and rush surcharge. Post the session state plus edits to "
        "/estimate to get the normalized state and an itemized cost."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def configure_logging(level: str | None = None) -> None:
    """Root logging setup for the service process."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class FieldEdit(BaseModel):
    """One raw user edit, exactly as the form control reported it."""
    field: str = Field(description="State field name, e.g. 'slides_count' or 'keyvisual'")
    value: Any = Field(default=None, description="Raw value; strings are coerced, junk becomes 0")


class EstimateRequest(BaseModel):
    """Request body for /estimate. All fields optional — defaults used for missing."""
    state: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full EstimatorState. Example: {'project_type': 'quest', 'slides_count': 45}",
    )
    edits: list[FieldEdit] = Field(
        default_factory=list,
        description="Edits applied in order through the session controller. "
                    "Example: [{'field': 'slides_price', 'value': '1800'}]",
    )


class CurvesResponse(BaseModel):
    """Response from /projects/{project_type}/curves."""
    slides: PriceCurve
    renders: PriceCurve
    rush: RushCurve


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _get_config(project_type: str) -> PricingConfig:
    config = PROJECT_TYPES.get(project_type)
    if config is None:
        raise HTTPException(status_code=404, detail=f"Unknown project type: {project_type}")
    return config


def _build_estimator(req: EstimateRequest) -> Estimator:
    """Resume a session from the posted state, then replay the edits."""
    estimator = Estimator.from_values(req.state)
    for edit in req.edits:
        try:
            estimator.apply(edit.field, edit.value)
        except KeyError:
            raise HTTPException(status_code=422, detail=f"Unknown field: {edit.field}") from None
    return estimator


def get_default_state() -> dict[str, Any]:
    """State of a freshly opened session."""
    return Estimator().state.model_dump()


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Deck Estimator API",
        "version": API_VERSION,
        "start_here": "GET /projects",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/projects", response_model=dict[str, PricingConfig])
def list_projects():
    """All built-in price lists keyed by project type."""
    return PROJECT_TYPES


@app.get("/projects/{project_type}/fields", response_model=dict[str, FieldSpec])
def get_fields(project_type: str):
    """Slider/number-box bounds; price bounds depend on the variant."""
    return field_specs(_get_config(project_type))


@app.get("/projects/{project_type}/curves", response_model=CurvesResponse)
def get_curves(project_type: str):
    """Unit price over every slider position plus rush percent per deadline day."""
    config = _get_config(project_type)
    specs = field_specs(config)
    return CurvesResponse(
        slides=price_curve(config.slides, specs["slides_count"]),
        renders=price_curve(config.renders, specs["renders_count"]),
        rush=rush_curve(config.rush, DEADLINE_DAYS),
    )


@app.get("/state/defaults")
def get_defaults():
    """Default session state. Use as a starting point for /estimate."""
    return get_default_state()


@app.post("/estimate", response_model=Estimate)
def estimate(req: EstimateRequest):
    """Apply edits to the posted state and return the itemized estimate.

    Example request:
    ```json
    {"state": {"project_type": "event"}, "edits": [{"field": "slides_count", "value": 45}]}
    ```
    """
    return _build_estimator(req).estimate()


@app.post("/estimate/summary")
def estimate_summary(req: EstimateRequest):
    """Plain-text summary, one line per nonzero item plus the total."""
    return {"summary": _build_estimator(req).summary_text()}


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting Deck Estimator API on %s:%d", settings.api_host, settings.api_port)
    uvicorn.run(
        "deck_estimator.api.server:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    main()
