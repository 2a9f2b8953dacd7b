"""Loading the names and TLDs to check."""

from pathlib import Path
from typing import List, Optional

from ..exceptions import InputError


def split_names(text: str) -> List[str]:
    """Split a comma-separated list of names.

    Blank entries are kept; the scheduler drops them before probing.
    """
    return [part.strip().lower() for part in text.split(',')]


def read_names_from_file(path: str) -> List[str]:
    """Read one name per line."""
    try:
        with open(Path(path)) as f:
            return [line.strip().lower() for line in f]
    except OSError as e:
        raise InputError(f"Cannot read names from {path}: {e}") from e


def split_tlds(text: str) -> List[str]:
    """Split a comma-separated list of TLDs, dropping leading dots and blanks."""
    tlds = [t.strip().lower().lstrip('.') for t in text.split(',')]
    tlds = [t for t in tlds if t]
    if not tlds:
        raise InputError("No TLDs provided")
    return tlds


def load_names(names: Optional[str] = None, file: Optional[str] = None) -> List[str]:
    """Names from the inline list if given, otherwise from the file."""
    if names:
        return split_names(names)
    if file:
        return read_names_from_file(file)
    raise InputError("No names provided")
