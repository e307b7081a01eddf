"""Pydantic schemas for API requests and responses."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from g2glister.core.models import (
    DEFAULT_HONOR_LEVEL,
    UNKNOWN,
    Account,
    AccountRecord,
    AccountStatus,
)


class StatusResponse(BaseModel):
    """Server status."""

    status: str
    version: str
    db_path: str
    base_path: Optional[str] = None
    account_count: int


class AccountResponse(BaseModel):
    """Single account folder."""

    id: int
    name: str
    path: str
    status: AccountStatus
    files: Optional[list[str]] = None  # Cached after the first file listing

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            name=account.name,
            path=account.path,
            status=account.status,
            files=account.files,
        )


class LoadAccountsRequest(BaseModel):
    """Request to load account folders from a base directory."""

    path: str


class LoadAccountsResponse(BaseModel):
    """Result of loading account folders."""

    success: bool
    message: str
    accounts: list[AccountResponse]


class AccountFilesResponse(BaseModel):
    """File names of one account folder."""

    account_id: int
    files: list[str]


class StatusUpdateRequest(BaseModel):
    """Request to change an account's lifecycle status."""

    status: AccountStatus


class LastPathResponse(BaseModel):
    """Last browsed accounts folder."""

    path: Optional[str] = None


class PreferencesResponse(BaseModel):
    """Saved user preferences."""

    last_folder_path: Optional[str] = None
    rank_by_scarcity: bool
    track_usage: bool


class PreferenceUpdateRequest(BaseModel):
    """Request to change one preference."""

    key: str
    value: Any = None


class AccountRecordModel(BaseModel):
    """Parsed account attributes, for previewing a listing."""

    server: str = UNKNOWN
    level: int = Field(default=0, ge=0)
    honor_level: int = Field(default=DEFAULT_HONOR_LEVEL, ge=1)
    champions_count: int = Field(default=0, ge=0)
    champions_list: list[str] = Field(default_factory=list)
    skins_count: int = Field(default=0, ge=0)
    skins_list: list[str] = Field(default_factory=list)
    riot_points: int = Field(default=0, ge=0)
    blue_essence: int = Field(default=0, ge=0)
    orange_essence: int = Field(default=0, ge=0)
    last_play_date: str = UNKNOWN
    opgg_link: Optional[str] = None

    def to_record(self) -> AccountRecord:
        return AccountRecord(
            server=self.server,
            level=self.level,
            honor_level=self.honor_level,
            champions_count=self.champions_count,
            champions_list=list(self.champions_list),
            skins_count=self.skins_count,
            skins_list=list(self.skins_list),
            riot_points=self.riot_points,
            blue_essence=self.blue_essence,
            orange_essence=self.orange_essence,
            last_play_date=self.last_play_date,
            opgg_link=self.opgg_link,
        )


class ListingResponse(BaseModel):
    """Generated listing."""

    title: str
    title_length: int
    description: str
    featured_champions: list[str]
    usage_recorded: bool = False  # True if featured champions were counted


class UsageEntry(BaseModel):
    """Usage count of one item."""

    name: str
    count: int


class UsageStatsResponse(BaseModel):
    """All usage counters, least used first."""

    entries: list[UsageEntry]
    total_items: int


class NamesRequest(BaseModel):
    """A list of item names."""

    names: list[str]


class NamesResponse(BaseModel):
    """A list of item names."""

    names: list[str]


class RecordUsageResponse(BaseModel):
    """Result of recording usage."""

    success: bool
    recorded: int
