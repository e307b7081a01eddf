"""Listing title and description generation.

Titles are packed greedily: skins first, then champions, each appended only
if it fits entirely in the remaining budget. This is first-fit, not an
optimal packing; changing it would change which items get featured.
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from g2glister.core.models import AccountRecord, ListingForm
from g2glister.core.usage_tracker import UsageTracker
from g2glister.parser.assembler import FileReader, parse_account_data
from g2glister.parser.sources import read_account_file

logger = logging.getLogger(__name__)

MAX_TITLE_LENGTH = 128
MAX_TITLE_CHAMPIONS = 10

ITEM_SEPARATOR = " | "
TITLE_SUFFIX = " | Handleveled | Full Access ⍜]"

DESCRIPTION_HEADER = "⮸Full info into the media⮸"


def title_prefix(record: AccountRecord) -> str:
    return f"[{record.server} ⍜] - [{record.level} LVL | {record.champions_count} Champions"


def _pack(items: Iterable[str], budget: int, limit: Optional[int] = None) -> tuple[list[str], int]:
    """Greedy first-fit. Returns (packed items, remaining budget)."""
    packed: list[str] = []
    for item in items:
        if limit is not None and len(packed) >= limit:
            break
        cost = len(item) + len(ITEM_SEPARATOR)
        if cost <= budget:
            packed.append(item)
            budget -= cost
    return packed, budget


def select_title_items(record: AccountRecord) -> tuple[list[str], list[str]]:
    """
    Choose which skins and champions go into the title.

    Returns:
        Tuple of (skins, champions) in title order
    """
    budget = MAX_TITLE_LENGTH - len(title_prefix(record)) - len(TITLE_SUFFIX)
    skins, budget = _pack(record.skins_list, budget)
    champions, _ = _pack(record.champions_list, budget, limit=MAX_TITLE_CHAMPIONS)
    return skins, champions


def generate_title(record: AccountRecord) -> str:
    """Build a listing title of at most MAX_TITLE_LENGTH characters."""
    prefix = title_prefix(record)
    skins, champions = select_title_items(record)

    items_part = "".join(ITEM_SEPARATOR + item for item in skins + champions)
    title = prefix + items_part + TITLE_SUFFIX

    if len(title) > MAX_TITLE_LENGTH:
        # Only reachable when the prefix alone is oversized
        logger.warning(f"Title base exceeds {MAX_TITLE_LENGTH} characters, truncating")
        title = title[:MAX_TITLE_LENGTH]

    logger.debug(f"Title length {len(title)}: {len(skins)} skins, {len(champions)} champions")
    return title


def generate_description(record: AccountRecord) -> str:
    """Render the listing description template."""
    lines = [
        DESCRIPTION_HEADER,
        "",
        "▸ Instant Auto-Delivery 24/7",
        "⤱ You must play 10 Quickplay or Draft games to unlock Ranked.",
        "⤱ Last Rank: The Account has never been ranked, but MMR is random.",
        "⤱ Current Rank: Unranked",
        f"⤱ Last Play / Inactive From - {record.last_play_date}",
        "",
        f"◉ Level - {record.level}",
        f"◉ Honor level is {record.honor_level}",
        f"◉ Champions - {record.champions_count}",
        f"◉ Skins - {record.skins_count}",
        f"◉ Riot Points - {record.riot_points}",
        f"◉ Blue Essence - {record.blue_essence}",
        f"◉ Orange Essence - {record.orange_essence}",
        "",
        "✓ Full Access [You can change the email, password, etc.]",
        "⍜ Completely Safe with 0% Banrate",
        "⮸ Hand-Leveled",
        "✫ Positive Reviews",
    ]

    if record.champions_list:
        lines.append("")
        lines.append("◉ List of Champions:")
        lines.append(", ".join(record.champions_list) + ".")

    if record.skins_list:
        lines.append("")
        lines.append("◉ List of Skins:")
        lines.append(", ".join(record.skins_list) + ".")

    return "\n".join(lines)


def rank_record(record: AccountRecord, tracker: UsageTracker) -> AccountRecord:
    """Return a copy of record with its lists ordered least-used first."""
    return replace(
        record,
        champions_list=tracker.rank_by_scarcity(record.champions_list),
        skins_list=tracker.rank_by_scarcity(record.skins_list),
    )


def build_listing(record: AccountRecord) -> ListingForm:
    """Generate title and description for a parsed record."""
    _, champions = select_title_items(record)
    return ListingForm(
        title=generate_title(record),
        description=generate_description(record),
        featured_champions=champions,
    )


def autofill_listing(
    account_path: str,
    file_names: Iterable[str],
    reader: FileReader = read_account_file,
    tracker: Optional[UsageTracker] = None,
) -> ListingForm:
    """
    Parse an account folder and generate its listing.

    Args:
        account_path: Path of the account folder
        file_names: File names in the folder, in processing order
        reader: Callable returning a file's text
        tracker: If given, lists are ordered least-used first (counters untouched)

    Raises:
        NoReadableContentError: If no characters were read from any file
    """
    record = parse_account_data(account_path, file_names, reader)
    if tracker is not None:
        record = rank_record(record, tracker)

    listing = build_listing(record)
    logger.info(f"Generated listing for {account_path} (title {len(listing.title)} chars)")
    return listing
