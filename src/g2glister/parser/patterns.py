"""Compiled regex patterns and markers for account text dumps."""

import re

# Scalar fields
# Example: Level - 45
LEVEL_PATTERN = re.compile(r"Level\s*[-:]\s*(\d+)", re.IGNORECASE)

# Example: Champions - 32
CHAMPIONS_COUNT_PATTERN = re.compile(r"Champions\s*[-:]\s*(\d+)", re.IGNORECASE)

# Example: Skins: 4
SKINS_COUNT_PATTERN = re.compile(r"Skins\s*[-:]\s*(\d+)", re.IGNORECASE)

# Example: Honor level is 2
HONOR_LEVEL_PATTERN = re.compile(r"Honor\s+level\s+is\s+(\d+)", re.IGNORECASE)

RIOT_POINTS_PATTERN = re.compile(r"Riot\s+Points\s*[-:]\s*(\d+)", re.IGNORECASE)
BLUE_ESSENCE_PATTERN = re.compile(r"Blue\s+Essence\s*[-:]\s*(\d+)", re.IGNORECASE)
ORANGE_ESSENCE_PATTERN = re.compile(r"Orange\s+Essence\s*[-:]\s*(\d+)", re.IGNORECASE)

# Rest of the line after the label; must not run onto the next line
# Example: Last Play / Inactive From - 2024-11-03
# Example: Last Played: 3 months ago
LAST_PLAY_PATTERN = re.compile(
    r"Last\s+Play(?:ed)?(?:\s*/\s*Inactive\s+From)?[ \t]*[-:][ \t]*(?P<date>[^\r\n]*)",
    re.IGNORECASE,
)

# Example: https://www.op.gg/summoners/br/Name-BR1
OPGG_URL_PATTERN = re.compile(r"(https?://[^\s]+op\.gg[^\s]+)", re.IGNORECASE)

# Server candidates in priority order, first match wins
SERVER_PATTERNS = [
    # Profile URL: op.gg/summoners/euw/Name-1234
    re.compile(r"op\.gg/summoners/([a-z0-9]+)/", re.IGNORECASE),
    # Label: Account(Server - Brazil) / Server: EUW
    re.compile(r"Server\s*[-:]\s*([A-Za-z0-9]+)", re.IGNORECASE),
    # File-name-like token: uyep_br1_info.txt
    re.compile(r"_([a-z]+\d?)_", re.IGNORECASE),
]

# Lowercase alias -> canonical region code
SERVER_ALIASES = {
    "brazil": "BR1",
    "br": "BR1",
    "br1": "BR1",
    "euw": "EUW",
    "euw1": "EUW",
    "eune": "EUNE",
    "eune1": "EUNE",
    "na": "NA",
    "na1": "NA",
    "oce": "OCE",
    "oce1": "OCE",
    "las": "LAS",
    "las1": "LAS",
    "lan": "LAN",
    "lan1": "LAN",
    "tr": "TR",
    "tr1": "TR",
    "ru": "RU",
    "ru1": "RU",
    "jp": "JP",
    "jp1": "JP",
    "kr": "KR",
}

# List section headings
CHAMPIONS_LIST_MARKER = "List of Champions:"
SKINS_LIST_MARKER = "List of Skins:"

# A list section ends at the earliest of these.
# "\nList of" keeps one list from swallowing the next list's heading.
LIST_END_MARKERS = (
    "\n\n",
    "\n[",
    "\n─",
    "\nLink:",
    "\nRegion:",
    "\nList of",
)

# Leading bullet glyph on line-delimited lists
BULLET_PATTERN = re.compile(r"^[•\-*]\s*")

# Lines starting with these are decoration, not items
RULE_CHAR = "─"
BRACKET_CHAR = "["
