"""In-memory persistence for heat-load calculations."""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from heatload.exceptions import RecordNotFoundError
from heatload.models.payload import HeatLoadRecord

if TYPE_CHECKING:
    from heatload.models.payload import HeatLoadPayload

logger = logging.getLogger(__name__)

# Identity fields a re-saved record carries; the store assigns them itself
_RECORD_FIELDS = {"id", "created_at", "updated_at"}


class HeatLoadStore:
    """Keeps saved payloads in process memory, one record per quote.

    Saving a payload whose ``quote_id`` already exists replaces that record
    and keeps its id and creation time; so does saving a stored record
    again. Other payloads without a quote id always create a new record.
    """

    def __init__(self) -> None:
        self._records: dict[str, HeatLoadRecord] = {}
        self._lock = threading.Lock()

    def save(self, payload: HeatLoadPayload) -> HeatLoadRecord:
        now = datetime.now(UTC)
        with self._lock:
            existing = self._records.get(payload.id) if isinstance(payload, HeatLoadRecord) else None
            if existing is None and payload.quote_id:
                existing = self._find_by_quote(payload.quote_id)
            record = HeatLoadRecord(
                **payload.model_dump(exclude=_RECORD_FIELDS),
                id=existing.id if existing else uuid.uuid4().hex,
                created_at=existing.created_at if existing else now,
                updated_at=now,
            )
            # re-inserting keeps the dict in least-recently-saved order
            self._records.pop(record.id, None)
            self._records[record.id] = record
        logger.info(
            "%s heat-load record %s (quote %r)",
            "Updated" if existing else "Created",
            record.id,
            record.quote_id,
        )
        return record

    def list(self) -> list[HeatLoadRecord]:
        """All records, most recently updated first."""
        with self._lock:
            records = list(reversed(self._records.values()))
        return sorted(records, key=lambda r: r.updated_at, reverse=True)

    def get(self, record_id: str) -> HeatLoadRecord:
        """Raises RecordNotFoundError if no record has ``record_id``."""
        with self._lock:
            record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(f"Heat-load record '{record_id}' not found")
        return record

    def _find_by_quote(self, quote_id: str) -> HeatLoadRecord | None:
        for record in self._records.values():
            if record.quote_id == quote_id:
                return record
        return None
