"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from heatload.api.store import HeatLoadStore
from heatload.config import load_settings
from heatload.engine import ENGINE_VERSION
from heatload.exceptions import RecordNotFoundError, ValidationError
from heatload.export.materials import materials_to_csv
from heatload.models.payload import (  # noqa: TCH001 (FastAPI resolves at runtime)
    CalculationRequest,
    HeatLoadPayload,
)
from heatload.services.material_collector import MaterialCollector

if TYPE_CHECKING:
    from heatload.config import EngineSettings
    from heatload.engine import HeatLoadEngine

logger = logging.getLogger(__name__)


def create_app(
    *,
    engine: HeatLoadEngine | None = None,
    store: HeatLoadStore | None = None,
    settings: EngineSettings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created from ``HEATLOAD_*`` settings on
        first use.
    store
        Optional record store. Defaults to a fresh in-memory store.
    settings
        Optional settings; read from the environment when omitted.
    """
    settings = settings or load_settings()
    app = FastAPI(title="Heat Load", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own
    app.state.engine = engine
    app.state.store = store or HeatLoadStore()
    app.state.settings = settings

    def _get_engine() -> HeatLoadEngine:
        eng: HeatLoadEngine | None = app.state.engine
        if eng is not None:
            return eng
        from heatload.api.deps import create_engine

        eng = create_engine(app.state.settings)
        app.state.engine = eng
        return eng

    def _get_store() -> HeatLoadStore:
        return app.state.store

    def _calculate(payload: HeatLoadPayload) -> HeatLoadPayload:
        try:
            return _get_engine().calculate_payload(payload)
        except ValidationError as exc:
            logger.exception("Invalid room in heat-load payload")
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    def _dump(model: Any) -> dict[str, Any]:
        return model.model_dump(mode="json", by_alias=True)

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/heat-load/calculate
    # ------------------------------------------------------------------

    @app.post("/api/heat-load/calculate")
    def calculate(request: CalculationRequest) -> dict[str, Any]:
        try:
            results = _get_engine().calculate(
                request.building,
                request.floors,
                request.outdoor_design_temp_c,
                dimensioning=request.dimensioning,
            )
        except ValidationError as exc:
            logger.exception("Invalid room in calculation request")
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _dump(results.rounded())

    # ------------------------------------------------------------------
    # POST /api/heat-load
    # ------------------------------------------------------------------

    @app.post("/api/heat-load", status_code=201)
    def save(payload: HeatLoadPayload) -> dict[str, Any]:
        record = _get_store().save(_calculate(payload))
        return _dump(record)

    # ------------------------------------------------------------------
    # GET /api/heat-load
    # ------------------------------------------------------------------

    @app.get("/api/heat-load")
    def list_records() -> list[dict[str, Any]]:
        return [_dump(record) for record in _get_store().list()]

    # ------------------------------------------------------------------
    # GET /api/heat-load/{record_id}
    # ------------------------------------------------------------------

    @app.get("/api/heat-load/{record_id}")
    def get_record(record_id: str) -> dict[str, Any]:
        try:
            return _dump(_get_store().get(record_id))
        except RecordNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

    # ------------------------------------------------------------------
    # GET /api/heat-load/{record_id}/materials.csv
    # ------------------------------------------------------------------

    @app.get("/api/heat-load/{record_id}/materials.csv")
    def materials_csv(record_id: str) -> Response:
        try:
            record = _get_store().get(record_id)
        except RecordNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        collector = MaterialCollector()
        lines = collector.group(collector.collect(record.floors))
        return Response(
            content=materials_to_csv(lines),
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": 'attachment; filename="materialliste.csv"'},
        )

    return app
