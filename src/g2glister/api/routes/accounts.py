"""Account registry API routes."""

from typing import Callable, Optional

from fastapi import APIRouter, Depends, HTTPException

from g2glister.api.dependencies import get_folder_saver, get_registry
from g2glister.api.schemas import (
    AccountFilesResponse,
    AccountResponse,
    LastPathResponse,
    LoadAccountsRequest,
    LoadAccountsResponse,
    StatusUpdateRequest,
)
from g2glister.core.errors import AccountNotFoundError
from g2glister.core.registry import AccountRegistry

router = APIRouter(prefix="/api/accounts", tags=["accounts"])


@router.post("/load", response_model=LoadAccountsResponse)
def load_accounts(
    request: LoadAccountsRequest,
    registry: AccountRegistry = Depends(get_registry),
    save_folder: Callable[[Optional[str]], bool] = Depends(get_folder_saver),
) -> LoadAccountsResponse:
    """
    Load the account folders of a base directory, replacing the current list.

    The path is remembered even if loading fails, so the next browse starts there.
    """
    save_folder(request.path)
    result = registry.load_folders(request.path)

    return LoadAccountsResponse(
        success=result.success,
        message=result.message,
        accounts=[AccountResponse.from_account(a) for a in result.accounts],
    )


@router.get("", response_model=list[AccountResponse])
def list_accounts(registry: AccountRegistry = Depends(get_registry)) -> list[AccountResponse]:
    """List all loaded accounts."""
    return [AccountResponse.from_account(a) for a in registry.get_accounts()]


@router.delete("")
def clear_accounts(registry: AccountRegistry = Depends(get_registry)) -> dict:
    """Forget all loaded accounts."""
    registry.clear()
    return {"success": True}


@router.get("/last-path", response_model=LastPathResponse)
def get_last_path(registry: AccountRegistry = Depends(get_registry)) -> LastPathResponse:
    """Get the last browsed accounts folder."""
    return LastPathResponse(path=registry.last_selected_path or None)


@router.delete("/last-path", response_model=LastPathResponse)
def clear_last_path(
    registry: AccountRegistry = Depends(get_registry),
    save_folder: Callable[[Optional[str]], bool] = Depends(get_folder_saver),
) -> LastPathResponse:
    """Forget the last browsed accounts folder, in memory and on disk."""
    registry.clear_last_path()
    if not save_folder(None):
        raise HTTPException(status_code=500, detail="Failed to save preferences")
    return LastPathResponse(path=None)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(account_id: int, registry: AccountRegistry = Depends(get_registry)) -> AccountResponse:
    """Get one account."""
    account = registry.get_account(account_id)
    if account is None:
        raise HTTPException(status_code=404, detail="Account not found")
    return AccountResponse.from_account(account)


@router.get("/{account_id}/files", response_model=AccountFilesResponse)
def get_account_files(
    account_id: int,
    registry: AccountRegistry = Depends(get_registry),
) -> AccountFilesResponse:
    """List the files of one account folder."""
    try:
        files = registry.get_account_files(account_id)
    except AccountNotFoundError:
        raise HTTPException(status_code=404, detail="Account not found")
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Could not list account files: {e}")
    return AccountFilesResponse(account_id=account_id, files=files)


@router.put("/{account_id}/status", response_model=AccountResponse)
def update_account_status(
    account_id: int,
    request: StatusUpdateRequest,
    registry: AccountRegistry = Depends(get_registry),
) -> AccountResponse:
    """Set the lifecycle status of an account."""
    if not registry.update_status(account_id, request.status):
        raise HTTPException(status_code=404, detail="Account not found")
    return AccountResponse.from_account(registry.get_account(account_id))


@router.delete("/{account_id}")
def remove_account(account_id: int, registry: AccountRegistry = Depends(get_registry)) -> dict:
    """Remove one account from the list."""
    if not registry.remove_account(account_id):
        raise HTTPException(status_code=404, detail="Account not found")
    return {"success": True}
