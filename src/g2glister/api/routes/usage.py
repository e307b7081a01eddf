"""Usage statistics API routes."""

from fastapi import APIRouter, Depends

from g2glister.api.dependencies import get_tracker
from g2glister.api.schemas import (
    NamesRequest,
    NamesResponse,
    RecordUsageResponse,
    UsageEntry,
    UsageStatsResponse,
)
from g2glister.core.usage_tracker import UsageTracker

router = APIRouter(prefix="/api/usage", tags=["usage"])


@router.get("", response_model=UsageStatsResponse)
def get_usage_stats(tracker: UsageTracker = Depends(get_tracker)) -> UsageStatsResponse:
    """Get all usage counters, least used first."""
    entries = [UsageEntry(name=name, count=count) for name, count in tracker.get_stats()]
    return UsageStatsResponse(entries=entries, total_items=len(entries))


@router.post("/record", response_model=RecordUsageResponse)
def record_usage(
    request: NamesRequest,
    tracker: UsageTracker = Depends(get_tracker),
) -> RecordUsageResponse:
    """Count each name as featured once more."""
    success = tracker.record(request.names)
    return RecordUsageResponse(success=success, recorded=len(request.names) if success else 0)


@router.post("/rank", response_model=NamesResponse)
def rank_names(
    request: NamesRequest,
    tracker: UsageTracker = Depends(get_tracker),
) -> NamesResponse:
    """Order names from least to most used."""
    return NamesResponse(names=tracker.rank_by_scarcity(request.names))


@router.delete("")
def reset_usage(tracker: UsageTracker = Depends(get_tracker)) -> dict:
    """Clear all usage counters."""
    tracker.reset()
    return {"success": True}
