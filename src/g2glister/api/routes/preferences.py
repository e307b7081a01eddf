"""Preferences API routes."""

from dataclasses import asdict
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from g2glister.api.dependencies import get_preferences_path
from g2glister.api.schemas import PreferencesResponse, PreferenceUpdateRequest
from g2glister.config.preferences import load_preferences, update_preference

router = APIRouter(prefix="/api/preferences", tags=["preferences"])


# Preferences that can be written via API, with the accepted value types
WRITABLE_PREFERENCES = {
    "last_folder_path": (str, type(None)),
    "rank_by_scarcity": (bool,),
    "track_usage": (bool,),
}


@router.get("", response_model=PreferencesResponse)
def get_preferences(prefs_path: Path = Depends(get_preferences_path)) -> PreferencesResponse:
    """Get the saved preferences."""
    return PreferencesResponse(**asdict(load_preferences(prefs_path)))


@router.put("", response_model=PreferencesResponse)
def update_preferences(
    request: PreferenceUpdateRequest,
    prefs_path: Path = Depends(get_preferences_path),
) -> PreferencesResponse:
    """
    Change one preference.

    rank_by_scarcity and track_usage become the defaults of listing
    generation when its rank/track flags are omitted.
    """
    expected = WRITABLE_PREFERENCES.get(request.key)
    if expected is None:
        raise HTTPException(status_code=400, detail=f"Unknown preference: {request.key}")
    if not isinstance(request.value, expected):
        raise HTTPException(status_code=400, detail=f"Invalid value for {request.key}")

    if not update_preference(request.key, request.value, prefs_path):
        raise HTTPException(status_code=500, detail="Failed to save preferences")

    return PreferencesResponse(**asdict(load_preferences(prefs_path)))
