from pathlib import Path
from typing import List, Union

from .config import VOTE_FIELDS
from .models import VoteRecord


class ParseError(ValueError):
    """A row that cannot be read as a vote record."""

    def __init__(self, path, line_number: int, line: str, reason: str = "invalid vote count in row"):
        self.path = path
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"{path}:{line_number}: {reason}: {line!r}")


def parse_votes(text: str) -> int:
    """Parse a vote count: base-10 digits only, surrounding whitespace allowed."""
    s = text.strip()
    if not (s.isascii() and s.isdigit()):
        raise ValueError(f"not a non-negative integer: {text!r}")
    return int(s)


def parse_row(line: str, path="<input>", line_number: int = 0) -> VoteRecord:
    # no quoting: the first four commas split the fields, the rest is the vote count
    parts = line.split(",", len(VOTE_FIELDS) - 1)
    if len(parts) < len(VOTE_FIELDS):
        raise ParseError(path, line_number, line)
    state, county, candidate, party, votes_str = parts
    try:
        votes = parse_votes(votes_str)
    except ValueError:
        raise ParseError(path, line_number, line) from None
    return VoteRecord(state, county, candidate, party, votes)


def load_votes(path: Union[str, Path]) -> List[VoteRecord]:
    """Read every vote record from a headerless state,county,candidate,party,votes file.

    The file must be UTF-8 (a BOM is allowed). A header row is not special: it
    fails to parse like any other bad row.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {path}")
    records = []
    with path.open("rb") as f:
        for line_number, raw in enumerate(f, start=1):
            try:
                text = raw.decode("utf-8-sig" if line_number == 1 else "utf-8")
            except UnicodeDecodeError:
                shown = raw.decode("utf-8", errors="replace").rstrip("\r\n")
                raise ParseError(path, line_number, shown, reason="row is not valid UTF-8") from None
            line = text.rstrip("\r\n")
            if not line.strip():
                continue
            records.append(parse_row(line, path, line_number))
    return records
