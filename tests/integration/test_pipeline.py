"""End-to-end tests: account folders on disk through the CLI."""

import json

import pytest

from g2glister.cli.commands import main
from g2glister.core.listing import MAX_TITLE_LENGTH, autofill_listing, generate_title
from g2glister.parser.assembler import parse_account_data
from g2glister.parser.sources import list_account_files


@pytest.fixture
def app_data(tmp_path, monkeypatch):
    """Point the per-user data directory at a temp folder."""
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "appdata"))
    return tmp_path / "appdata" / "G2GLister"


class TestPipeline:
    def test_two_file_account(self, account_dir):
        folder = account_dir(
            "euw_account",
            {
                "a.txt": "Level - 45\nList of Champions:\nAhri, Garen",
                "b.txt": "Server: EUW\nSkins - 2\nList of Skins:\nPulsefire Ezreal, DJ Sona",
            },
        )
        files = list_account_files(str(folder))
        record = parse_account_data(str(folder), files)

        assert record.server == "EUW"
        assert record.level == 45
        assert record.champions_list == ["Ahri", "Garen"]
        assert record.skins_list == ["Pulsefire Ezreal", "DJ Sona"]
        assert record.skins_count == 2

        title = generate_title(record)
        assert title.startswith("[EUW ⍜] - [45 LVL | 0 Champions")
        assert len(title) <= MAX_TITLE_LENGTH

    def test_featured_champions_rotate(self, sample_account, tracker):
        files = list_account_files(str(sample_account))
        featured = []
        for _ in range(3):
            listing = autofill_listing(str(sample_account), files, tracker=tracker)
            tracker.record(listing.featured_champions)
            featured.append(listing.featured_champions)

        # Miss Fortune no longer fits once Master Yi takes the remaining space
        assert featured == [["Ahri", "Annie"], ["Ashe", "Garen"], ["Master Yi"]]


class TestCli:
    """Tests for CLI commands."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: g2glister" in capsys.readouterr().out

    def test_parse(self, app_data, sample_account, capsys):
        assert main(["parse", str(sample_account)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["server"] == "BR1"
        assert data["level"] == 32
        assert data["skins_list"] == ["Pulsefire Ezreal", "DJ Sona", "Star Guardian Lux"]

    def test_parse_missing_folder(self, app_data, tmp_path, capsys):
        assert main(["parse", str(tmp_path / "missing")]) == 1
        assert capsys.readouterr().out.startswith("Error: ")

    def test_autofill_records_usage(self, app_data, sample_account, capsys):
        assert main(["autofill", str(sample_account)]) == 0
        out = capsys.readouterr().out
        assert "Title (127 chars):" in out
        assert "[BR1 ⍜] - [32 LVL | 24 Champions | DJ Sona |" in out
        assert "Description:" in out

        assert main(["usage"]) == 0
        out = capsys.readouterr().out
        assert "Ahri" in out
        assert "Annie" in out
        assert "Total items: 2" in out

    def test_autofill_no_track(self, app_data, sample_account, capsys):
        assert main(["autofill", str(sample_account), "--no-track"]) == 0
        capsys.readouterr()

        assert main(["usage"]) == 0
        assert "No usage recorded" in capsys.readouterr().out

    def test_autofill_no_content(self, app_data, account_dir, capsys):
        folder = account_dir("empty", {"info.txt": "Level - 1"})
        assert main(["autofill", str(folder)]) == 1
        assert "Could not read any files for this account" in capsys.readouterr().out

    def test_usage_reset(self, app_data, sample_account, capsys):
        main(["autofill", str(sample_account)])
        assert main(["usage", "--reset"]) == 0
        assert main(["usage"]) == 0
        assert capsys.readouterr().out.endswith("No usage recorded\n")

    def test_json_usage_store(self, app_data, sample_account, capsys):
        assert main(["--usage-store", "json", "autofill", str(sample_account)]) == 0
        usage = json.loads((app_data / "champion_usage.json").read_text(encoding="utf-8"))
        assert usage == {"Ahri": 1, "Annie": 1}

    def test_batch(self, app_data, accounts_base, capsys):
        assert main(["batch", str(accounts_base)]) == 1
        out = capsys.readouterr().out
        assert 'Loaded 2 accounts from folder "accounts"' in out
        assert "[error] acc_empty" in out
        assert "[listed] acc_good" in out
        assert "Listed: 1, failed: 1" in out

    def test_batch_remembers_folder(self, app_data, accounts_base, capsys):
        main(["batch", str(accounts_base)])
        capsys.readouterr()

        main(["batch"])
        assert 'Loaded 2 accounts from folder "accounts"' in capsys.readouterr().out

    def test_batch_without_folder(self, app_data, capsys):
        assert main(["batch"]) == 1
        assert "No accounts folder given" in capsys.readouterr().out

    def test_batch_missing_folder(self, app_data, tmp_path, capsys):
        assert main(["batch", str(tmp_path / "missing")]) == 1
        assert capsys.readouterr().out.startswith("Error: ")

        # The folder is remembered even though loading failed
        main(["batch"])
        assert "Folder not found" in capsys.readouterr().out

    def test_db_path_is_directory(self, app_data, tmp_path, capsys):
        assert main(["--db", str(tmp_path), "usage"]) == 1
        assert "Database path is a directory" in capsys.readouterr().out
