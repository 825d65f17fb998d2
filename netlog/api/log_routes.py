"""HTTP routes for reading and driving the netlog store.

Exposes endpoints like:

- GET    /logs    -> every stored entry as a payload dict, newest first
- POST   /logs    -> takes a payload dict, stores it at the head
- DELETE /logs    -> clears the store
- GET    /healthz -> liveness check
"""

import logging

from fastapi import APIRouter, Body, HTTPException
from typing import Any, Dict, Optional

from exceptions.exceptions import LogPayloadError
from ..models.api_models import LogListResponse
from ..models.log_models import LogEntry
from ..store.log_store import LogStore


logger = logging.getLogger(__name__)

# Router for all log-related endpoints
router = APIRouter()


# Module-level reference, to be initialized by the server.
_LOG_STORE: Optional[LogStore] = None


def init_routes(log_store: LogStore) -> None:
    """Initialize the module-level store used by the route handlers."""
    global _LOG_STORE
    _LOG_STORE = log_store


def _require_log_store() -> LogStore:
    if _LOG_STORE is None:
        raise HTTPException(
            status_code=500,
            detail="LogStore is not configured on the server.",
        )
    return _LOG_STORE


def _list_response(log_store: LogStore) -> LogListResponse:
    payloads = log_store.export_payloads()
    return LogListResponse(count=len(payloads), logs=payloads)


@router.get("/logs", response_model=LogListResponse)
async def list_logs() -> LogListResponse:
    """Return the stored entries, newest first."""
    return _list_response(_require_log_store())


@router.post("/logs", status_code=201)
async def add_log(payload: Any = Body(...)) -> Dict[str, Optional[str]]:
    """Build a LogEntry from the JSON body and put it at the head of the store.

    Missing keys default to "-", exactly like LogEntry.from_payload. Bodies
    that are not objects, or that carry non-string values, are rejected
    with 422.
    """
    log_store = _require_log_store()
    try:
        entry = LogEntry.from_payload(payload)
    except LogPayloadError as e:
        logger.warning("[LOGS] Rejected payload %r reason=%r", payload, e.details)
        raise HTTPException(status_code=422, detail=e.details)

    log_store.add_log(entry)
    return entry.to_payload()


@router.delete("/logs", response_model=LogListResponse)
async def clear_logs() -> LogListResponse:
    """Remove every entry from the store."""
    log_store = _require_log_store()
    log_store.clear_logs()
    return _list_response(log_store)


# --------------------------------------------------------
# Endpoint: GET /healthz
# --------------------------------------------------------
@router.get("/healthz")
def health_check():
    """
    Simple health check endpoint for uptime monitoring.
    """
    return {"status": "ok"}
