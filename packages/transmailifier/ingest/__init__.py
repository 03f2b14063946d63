"""Ledger ingestion: built-in profiles and the CSV reader."""

from .profiles import PROFILES, Profile, get_profile
from .reader import CsvLedgerReader, LedgerReader, load_ledger_file, parse_amount, read_ledger

__all__ = [
    "PROFILES",
    "Profile",
    "get_profile",
    "CsvLedgerReader",
    "LedgerReader",
    "load_ledger_file",
    "parse_amount",
    "read_ledger",
]
