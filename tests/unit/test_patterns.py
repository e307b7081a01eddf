"""Tests for regex patterns."""

import pytest

from g2glister.parser.patterns import (
    BULLET_PATTERN,
    CHAMPIONS_COUNT_PATTERN,
    HONOR_LEVEL_PATTERN,
    LAST_PLAY_PATTERN,
    LEVEL_PATTERN,
    OPGG_URL_PATTERN,
    SERVER_PATTERNS,
    SKINS_COUNT_PATTERN,
)


class TestScalarPatterns:
    """Tests for labelled number patterns."""

    @pytest.mark.parametrize("line", ["Level - 45", "Level: 45", "level-45", "LEVEL :  45"])
    def test_level_separators(self, line):
        match = LEVEL_PATTERN.search(line)
        assert match is not None
        assert match.group(1) == "45"

    def test_level_needs_separator(self):
        assert LEVEL_PATTERN.search("Level 45") is None

    def test_honor_level_sentence(self):
        match = HONOR_LEVEL_PATTERN.search("◉ Honor level is 4")
        assert match is not None
        assert match.group(1) == "4"

    def test_honor_level_line_is_not_a_level(self):
        assert LEVEL_PATTERN.search("Honor level is 4") is None

    def test_champions_count_ignores_list_heading(self):
        # The heading is followed by names, not a number
        assert CHAMPIONS_COUNT_PATTERN.search("List of Champions:\nAhri, Garen") is None

    def test_skins_count(self):
        match = SKINS_COUNT_PATTERN.search("Skins - 2")
        assert match.group(1) == "2"


class TestLastPlayPattern:
    """Tests for last play date pattern."""

    def test_full_label(self):
        match = LAST_PLAY_PATTERN.search("⤱ Last Play / Inactive From - 2024-11-03")
        assert match.group("date") == "2024-11-03"

    def test_played_label(self):
        match = LAST_PLAY_PATTERN.search("Last Played: 3 months ago\nLevel - 30")
        assert match.group("date") == "3 months ago"

    def test_does_not_cross_lines(self):
        match = LAST_PLAY_PATTERN.search("Last Play:\nLevel - 30")
        assert match.group("date") == ""


class TestServerPatterns:
    """Tests for server candidate patterns."""

    def test_profile_url(self):
        match = SERVER_PATTERNS[0].search("https://www.op.gg/summoners/euw/Name-1234")
        assert match.group(1) == "euw"

    def test_server_label(self):
        match = SERVER_PATTERNS[1].search("Account(Server - Brazil)")
        assert match.group(1) == "Brazil"

    def test_file_name_token(self):
        match = SERVER_PATTERNS[2].search("uyep_br1_info.txt")
        assert match.group(1) == "br1"


class TestMiscPatterns:
    def test_opgg_url(self):
        match = OPGG_URL_PATTERN.search("Link: https://www.op.gg/summoners/kr/Faker-KR1 more")
        assert match.group(1) == "https://www.op.gg/summoners/kr/Faker-KR1"

    @pytest.mark.parametrize("line", ["• Ahri", "- Ahri", "* Ahri", "•Ahri"])
    def test_bullets(self, line):
        assert BULLET_PATTERN.sub("", line) == "Ahri"
