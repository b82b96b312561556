"""
Discovery API Routes

Exposes the contact discovery engine via REST API:
- GET  /discovery/suggestions
- GET  /discovery/path/{contact_id}
- POST /discovery/track
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Header
from pydantic import BaseModel, Field

from .logic.adapter import SqlAlchemyGraphStore
from .logic.constants import ENGINE_VERSION
from .logic.contracts import ConnectionPath, SuggestedContact
from .logic.engine import DiscoveryEngine
from .logic.errors import (
    Cancelled,
    DiscoveryError,
    InvalidArgument,
    NotFound,
    UpstreamUnavailable,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/discovery", tags=["discovery"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class TrackSuggestionRequest(BaseModel):
    """Request body for the track endpoint."""
    suggested_contact_id: str = Field(..., description="Suggested contact the action applies to")
    action: str = Field(..., description="One of: viewed, accepted, ignored, contacted")
    notes: Optional[str] = Field(default=None, description="Free-text note")


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_discovery_engine() -> DiscoveryEngine:
    store = SqlAlchemyGraphStore()
    return DiscoveryEngine(store=store, action_store=store)


def _to_http(exc: DiscoveryError) -> HTTPException:
    if isinstance(exc, NotFound):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, InvalidArgument):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, UpstreamUnavailable):
        logger.error(f"Discovery request failed upstream: {exc}")
        headers = {"Retry-After": "1"} if exc.retryable else None
        return HTTPException(status_code=503, detail=str(exc), headers=headers)
    if isinstance(exc, Cancelled):
        return HTTPException(status_code=504, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/suggestions", response_model=List[SuggestedContact], summary="Get suggested contacts")
def get_suggestions(
    user_id: str = Header(..., alias="X-User-Id"),
    engine: DiscoveryEngine = Depends(get_discovery_engine),
):
    """
    Suggest second-degree contacts, ranked by score.

    **Scoring:** base 1, +1 same industry, +1 any mutual connection,
    +1 candidate works at one of the user's target companies.
    """
    try:
        return engine.get_suggestions(user_id)
    except DiscoveryError as e:
        raise _to_http(e)


@router.get("/path/{contact_id}", response_model=ConnectionPath, summary="Get connection path")
def get_connection_path(
    contact_id: str,
    user_id: str = Header(..., alias="X-User-Id"),
    engine: DiscoveryEngine = Depends(get_discovery_engine),
):
    """Introduction path (first mutual connection) and all mutual connections."""
    try:
        return engine.get_connection_path(user_id, contact_id)
    except DiscoveryError as e:
        raise _to_http(e)


@router.post("/track", summary="Track action on a suggestion")
def track_action(
    request: TrackSuggestionRequest,
    user_id: str = Header(..., alias="X-User-Id"),
    engine: DiscoveryEngine = Depends(get_discovery_engine),
):
    """Record viewed/accepted/ignored/contacted feedback on a suggestion."""
    try:
        engine.record_action(
            user_id,
            request.suggested_contact_id,
            request.action,
            request.notes,
        )
    except DiscoveryError as e:
        raise _to_http(e)
    return {"message": "Action tracked successfully"}


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Discovery engine health check")
def health_check():
    """Check if discovery engine is operational."""
    return {"status": "ok", "engine": "discovery", "version": ENGINE_VERSION}
