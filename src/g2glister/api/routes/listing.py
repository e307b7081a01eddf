"""Listing generation API routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from g2glister.api.dependencies import get_preferences, get_reader, get_registry, get_tracker
from g2glister.api.schemas import AccountRecordModel, ListingResponse
from g2glister.config.preferences import Preferences
from g2glister.core.errors import AccountNotFoundError, NoReadableContentError
from g2glister.core.listing import autofill_listing, build_listing, rank_record
from g2glister.core.models import AccountStatus, ListingForm
from g2glister.core.registry import AccountRegistry
from g2glister.core.usage_tracker import UsageTracker
from g2glister.parser.assembler import FileReader

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/listing", tags=["listing"])

NO_CONTENT_MESSAGE = "Could not read any files for this account"


def _to_response(listing: ListingForm, usage_recorded: bool = False) -> ListingResponse:
    return ListingResponse(
        title=listing.title,
        title_length=len(listing.title),
        description=listing.description,
        featured_champions=listing.featured_champions,
        usage_recorded=usage_recorded,
    )


@router.post("/preview", response_model=ListingResponse)
def preview_listing(
    record: AccountRecordModel,
    rank: bool = False,
    tracker: UsageTracker = Depends(get_tracker),
) -> ListingResponse:
    """Generate a listing from posted account attributes without touching counters."""
    parsed = record.to_record()
    if rank:
        parsed = rank_record(parsed, tracker)
    return _to_response(build_listing(parsed))


@router.post("/{account_id}", response_model=ListingResponse)
def autofill_account(
    account_id: int,
    rank: Optional[bool] = None,
    track: Optional[bool] = None,
    registry: AccountRegistry = Depends(get_registry),
    tracker: UsageTracker = Depends(get_tracker),
    reader: FileReader = Depends(get_reader),
    prefs: Preferences = Depends(get_preferences),
) -> ListingResponse:
    """
    Parse an account folder and generate its listing.

    rank and track default to the saved preferences. With track, the
    champions featured in the title are counted afterwards.
    """
    account = registry.get_account(account_id)
    if account is None:
        raise HTTPException(status_code=404, detail="Account not found")

    use_rank = prefs.rank_by_scarcity if rank is None else rank
    use_track = prefs.track_usage if track is None else track

    registry.update_status(account_id, AccountStatus.PROCESSING)
    try:
        files = registry.get_account_files(account_id)
        listing = autofill_listing(
            account.path,
            files,
            reader=reader,
            tracker=tracker if use_rank else None,
        )
    except NoReadableContentError:
        logger.warning(f"No readable content for account {account.name}")
        registry.update_status(account_id, AccountStatus.ERROR)
        raise HTTPException(status_code=422, detail=NO_CONTENT_MESSAGE)
    except AccountNotFoundError:
        raise HTTPException(status_code=404, detail="Account not found")
    except OSError as e:
        registry.update_status(account_id, AccountStatus.ERROR)
        raise HTTPException(status_code=500, detail=f"Could not list account files: {e}")

    recorded = False
    if use_track:
        recorded = tracker.record(listing.featured_champions)

    registry.update_status(account_id, AccountStatus.LISTED)
    return _to_response(listing, usage_recorded=recorded)
