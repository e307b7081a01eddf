"""Field extraction from concatenated account text.

Every rule is best-effort: a pattern that does not match yields the field's
default, never an exception. Source dumps are unstructured free text, so list
extraction degrades to a partial or empty list on malformed input.
"""

import logging
import re
from typing import Optional

from g2glister.core.models import DEFAULT_HONOR_LEVEL, UNKNOWN, AccountRecord
from g2glister.parser.patterns import (
    BLUE_ESSENCE_PATTERN,
    BRACKET_CHAR,
    BULLET_PATTERN,
    CHAMPIONS_COUNT_PATTERN,
    CHAMPIONS_LIST_MARKER,
    HONOR_LEVEL_PATTERN,
    LAST_PLAY_PATTERN,
    LEVEL_PATTERN,
    LIST_END_MARKERS,
    OPGG_URL_PATTERN,
    ORANGE_ESSENCE_PATTERN,
    RIOT_POINTS_PATTERN,
    RULE_CHAR,
    SERVER_ALIASES,
    SERVER_PATTERNS,
    SKINS_COUNT_PATTERN,
    SKINS_LIST_MARKER,
)

logger = logging.getLogger(__name__)


def extract_number(text: str, pattern: re.Pattern) -> int:
    """Return the first captured integer group of pattern, or 0."""
    match = pattern.search(text)
    if not match:
        return 0
    try:
        return int(match.group(1))
    except (IndexError, TypeError, ValueError):
        return 0


def _strip_period(item: str) -> str:
    return item[:-1] if item.endswith(".") else item


def _is_list_item(item: str) -> bool:
    return bool(item) and not item.startswith(RULE_CHAR) and not item.startswith(BRACKET_CHAR)


def extract_list(text: str, start_marker: str) -> list[str]:
    """
    Extract the list section that follows a heading marker.

    The section runs from the first occurrence of start_marker up to the
    earliest terminator in LIST_END_MARKERS. A section containing a comma is
    split on commas, otherwise it is split into lines with bullets removed.

    Args:
        text: Concatenated account text
        start_marker: Literal heading, e.g. "List of Champions:"

    Returns:
        Items in source order, or an empty list if the marker is absent
    """
    start = text.find(start_marker)
    if start == -1:
        return []

    section = text[start + len(start_marker):]

    end = len(section)
    for marker in LIST_END_MARKERS:
        idx = section.find(marker)
        if idx != -1 and idx < end:
            end = idx

    section = section[:end].strip()

    if "," in section:
        raw_items = [part.strip() for part in section.split(",")]
    else:
        raw_items = [BULLET_PATTERN.sub("", line).strip() for line in section.split("\n")]

    items = [_strip_period(item) for item in raw_items]
    return [item for item in items if _is_list_item(item)]


def normalize_server(server: str) -> str:
    """Map a region alias to its canonical code, else uppercase it."""
    key = server.lower().strip()
    return SERVER_ALIASES.get(key, server.upper())


def extract_server(text: str) -> str:
    """Find the account region, trying each server pattern in priority order."""
    for pattern in SERVER_PATTERNS:
        match = pattern.search(text)
        if match:
            return normalize_server(match.group(1))
    return UNKNOWN


def extract_last_play_date(text: str) -> str:
    """Return the last play / inactive-from value, or "Unknown"."""
    match = LAST_PLAY_PATTERN.search(text)
    if match:
        value = match.group("date").strip()
        if value:
            return value
    return UNKNOWN


def extract_opgg_link(text: str) -> Optional[str]:
    """Return the first op.gg URL in text, if any."""
    match = OPGG_URL_PATTERN.search(text)
    return match.group(1) if match else None


def extract_record(text: str) -> AccountRecord:
    """Run every extraction rule against text and build an AccountRecord."""
    record = AccountRecord(
        server=extract_server(text),
        level=extract_number(text, LEVEL_PATTERN),
        honor_level=extract_number(text, HONOR_LEVEL_PATTERN) or DEFAULT_HONOR_LEVEL,
        champions_count=extract_number(text, CHAMPIONS_COUNT_PATTERN),
        champions_list=extract_list(text, CHAMPIONS_LIST_MARKER),
        skins_count=extract_number(text, SKINS_COUNT_PATTERN),
        skins_list=extract_list(text, SKINS_LIST_MARKER),
        riot_points=extract_number(text, RIOT_POINTS_PATTERN),
        blue_essence=extract_number(text, BLUE_ESSENCE_PATTERN),
        orange_essence=extract_number(text, ORANGE_ESSENCE_PATTERN),
        last_play_date=extract_last_play_date(text),
        opgg_link=extract_opgg_link(text),
    )

    logger.debug(
        f"Extracted server={record.server} level={record.level} "
        f"champions={record.champions_count}/{len(record.champions_list)} "
        f"skins={record.skins_count}/{len(record.skins_list)}"
    )
    return record
