"""Core domain models - dataclasses with no I/O dependencies."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


UNKNOWN = "Unknown"
DEFAULT_HONOR_LEVEL = 3


class AccountStatus(str, Enum):
    """Lifecycle status of an account in the registry."""

    LOADED = "loaded"
    PROCESSING = "processing"
    LISTED = "listed"
    ERROR = "error"


@dataclass
class AccountRecord:
    """Structured attributes parsed from one account's text dumps."""

    server: str = UNKNOWN  # Normalized region code
    level: int = 0
    honor_level: int = DEFAULT_HONOR_LEVEL
    champions_count: int = 0  # Parsed separately from champions_list
    champions_list: list[str] = field(default_factory=list)
    skins_count: int = 0  # Parsed separately from skins_list
    skins_list: list[str] = field(default_factory=list)
    riot_points: int = 0
    blue_essence: int = 0
    orange_essence: int = 0
    last_play_date: str = UNKNOWN
    opgg_link: Optional[str] = None


@dataclass
class ListingForm:
    """Generated marketplace listing."""

    title: str
    description: str
    featured_champions: list[str] = field(default_factory=list)  # Champions packed into the title


@dataclass(frozen=True)
class AccountFolder:
    """A subfolder holding one account's files."""

    name: str
    path: str


@dataclass
class Account:
    """An account folder tracked by the registry."""

    id: int
    name: str
    path: str
    status: AccountStatus = AccountStatus.LOADED
    files: Optional[list[str]] = None  # Cached after first listing


@dataclass
class LoadAccountsResult:
    """Result of loading account folders from a base directory."""

    success: bool
    message: str
    accounts: list[Account] = field(default_factory=list)


@dataclass
class AutofillOutcome:
    """Per-account result of a batch autofill."""

    account_id: int
    name: str
    status: AccountStatus
    listing: Optional[ListingForm] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.listing is not None
