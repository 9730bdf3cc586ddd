"""The five reports offered by the menu.

Each report is a pure read over the loaded records; nothing here mutates them
and nothing here can fail once the records are loaded.
"""
from typing import List, Tuple

import numpy as np

from .aggregate import summarize, votes_frame
from .config import BAR_SCALE
from .models import CandidateReport, CandidateSummary, Overview, StateTally, VoteRecord
from .states import STATES, catalog_state


def overview(records: List[VoteRecord]) -> Overview:
    return Overview(record_count=len(records), total_votes=sum(r.votes for r in records))


def national_results(records: List[VoteRecord]) -> List[CandidateSummary]:
    return summarize(records)


def bar_count(votes: int, scale: int = BAR_SCALE) -> int:
    """Number of bars for `votes`, rounding votes/scale half away from zero.

    Integer arithmetic keeps the .5 boundary exact: 75000 votes is one bar.
    """
    if votes < 0:
        return 0
    return (2 * votes + scale) // (2 * scale)


def state_results(records: List[VoteRecord], state: str) -> List[Tuple[CandidateSummary, int]]:
    """Candidate totals within one state, each paired with its bar count.

    The state is compared case-insensitively against the records' own state
    values, so states outside the catalog can still be queried.
    """
    wanted = state.upper()
    summaries = summarize(records, scope=lambda r: r.state.upper() == wanted)
    return [(s, bar_count(s.total_votes)) for s in summaries]


def resolve_candidate(records: List[VoteRecord], search: str) -> str:
    """Exact name of the first candidate, in file order, containing `search` (any case)."""
    needle = search.upper()
    for r in records:
        if needle in r.candidate.upper():
            return r.candidate
    return ""


def state_tallies(records: List[VoteRecord], candidate: str) -> List[StateTally]:
    """Per-state totals for every catalog state, in catalog order.

    Records whose state is not in the catalog are left out of every tally.
    """
    df = votes_frame(records)
    df["catalog_state"] = [catalog_state(r) for r in records]
    df = df[df["catalog_state"].notna()]

    totals = df.groupby("catalog_state")["votes"].sum()
    totals = totals.reindex(STATES, fill_value=0)
    cand = df[df["candidate"] == candidate].groupby("catalog_state")["votes"].sum()
    cand = cand.reindex(STATES, fill_value=0)

    return [
        StateTally(state, int(c), int(t))
        for state, c, t in zip(STATES, cand.to_numpy(dtype=np.int64), totals.to_numpy(dtype=np.int64))
    ]


def candidate_results(records: List[VoteRecord], search: str) -> CandidateReport:
    name = resolve_candidate(records, search)
    tallies = state_tallies(records, name)

    best_state = ""
    best_percentage = 0.0
    for tally in tallies:
        if tally.total_votes > 0 and tally.percentage > best_percentage:
            best_percentage = tally.percentage
            best_state = tally.state

    return CandidateReport(name, tallies, best_state, best_percentage)


def county_search(records: List[VoteRecord], search: str) -> List[VoteRecord]:
    needle = search.upper()
    return [r for r in records if needle in r.county.upper()]
