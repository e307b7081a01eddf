"""Assemble one AccountRecord from an account folder's files."""

import logging
from typing import Callable, Iterable

from g2glister.core.errors import NoReadableContentError
from g2glister.core.models import AccountRecord
from g2glister.parser.extractor import extract_record
from g2glister.parser.sources import read_account_file

logger = logging.getLogger(__name__)

# (account_path, file_name) -> file text
FileReader = Callable[[str, str], str]

TEXT_EXTENSION = ".txt"

# Empty template shipped with every account folder
TEMPLATE_FILE_NAME = "info.txt"

FILE_SEPARATOR = "\n\n"


def is_account_text_file(file_name: str) -> bool:
    """Return True for .txt files other than the info.txt template."""
    lower = file_name.lower()
    return lower.endswith(TEXT_EXTENSION) and lower != TEMPLATE_FILE_NAME


def read_account_text(
    account_path: str,
    file_names: Iterable[str],
    reader: FileReader = read_account_file,
) -> tuple[str, int]:
    """
    Read and concatenate the eligible files of an account.

    A file that fails to read counts as empty.

    Returns:
        Tuple of (combined_text, characters_read)
    """
    chunks: list[str] = []
    chars_read = 0

    for file_name in file_names:
        if not is_account_text_file(file_name):
            logger.debug(f"Skipping {file_name}")
            continue

        try:
            content = reader(account_path, file_name)
        except Exception as e:
            logger.warning(f"Could not read {file_name} in {account_path}: {e}")
            content = ""

        logger.debug(f"Read {len(content)} characters from {file_name}")
        chars_read += len(content)
        chunks.append(content + FILE_SEPARATOR)

    return "".join(chunks), chars_read


def parse_account_data(
    account_path: str,
    file_names: Iterable[str],
    reader: FileReader = read_account_file,
) -> AccountRecord:
    """
    Parse an account folder into an AccountRecord.

    Args:
        account_path: Path of the account folder
        file_names: File names in the folder, in processing order
        reader: Callable returning a file's text

    Returns:
        Parsed AccountRecord

    Raises:
        NoReadableContentError: If no characters were read from any file
    """
    logger.debug(f"Parsing account {account_path}")

    text, chars_read = read_account_text(account_path, file_names, reader)
    if chars_read == 0:
        raise NoReadableContentError(account_path)

    return extract_record(text)
