"""Filesystem access for account folders and their text dumps."""

from pathlib import Path

from g2glister.core.models import AccountFolder


def list_account_folders(base_path: str) -> list[AccountFolder]:
    """
    List the account folders inside a base directory.

    Args:
        base_path: Directory holding one subfolder per account

    Returns:
        Immediate subfolders sorted by name, hidden folders skipped

    Raises:
        FileNotFoundError: If base_path does not exist
        NotADirectoryError: If base_path is not a directory
    """
    base = Path(base_path)
    if not base.exists():
        raise FileNotFoundError(f"Folder not found: {base_path}")
    if not base.is_dir():
        raise NotADirectoryError(f"Not a folder: {base_path}")

    folders = [
        AccountFolder(name=entry.name, path=str(entry))
        for entry in base.iterdir()
        if entry.is_dir() and not entry.name.startswith(".")
    ]
    return sorted(folders, key=lambda folder: folder.name)


def list_account_files(account_path: str) -> list[str]:
    """Return the names of regular files in an account folder, sorted."""
    folder = Path(account_path)
    if not folder.is_dir():
        raise NotADirectoryError(f"Not a folder: {account_path}")
    return sorted(entry.name for entry in folder.iterdir() if entry.is_file())


def read_account_file(account_path: str, file_name: str) -> str:
    """
    Read one file of an account folder as text.

    Undecodable bytes are replaced rather than failing the read.

    Raises:
        OSError: If the file cannot be read
    """
    file_path = Path(account_path) / file_name
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()
