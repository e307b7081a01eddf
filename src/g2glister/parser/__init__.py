"""Text extraction from account dumps."""

from g2glister.parser.assembler import parse_account_data
from g2glister.parser.extractor import extract_list, extract_number, extract_record, extract_server

__all__ = ["parse_account_data", "extract_list", "extract_number", "extract_record", "extract_server"]
