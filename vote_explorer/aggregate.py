"""Group vote records into per-candidate totals.

Totals are ordered by votes, highest first; candidates with equal totals keep
the order in which they first appear in the records.
"""
from typing import Callable, Iterable, List, Optional

import pandas as pd

from .config import VOTE_FIELDS
from .models import CandidateSummary, VoteRecord


def votes_frame(records: Iterable[VoteRecord]) -> pd.DataFrame:
    """Return the records as a DataFrame with one row per record, in file order."""
    rows = [
        (r.state, r.county, r.candidate, r.party, r.votes)
        for r in records
    ]
    df = pd.DataFrame(rows, columns=VOTE_FIELDS)
    df["votes"] = df["votes"].astype("int64")
    return df


def summarize(
    records: Iterable[VoteRecord],
    scope: Optional[Callable[[VoteRecord], bool]] = None,
) -> List[CandidateSummary]:
    if scope is not None:
        records = [r for r in records if scope(r)]
    df = votes_frame(records)
    if df.empty:
        return []

    # sort=False keeps first-seen order; "first" pins the party of the first record
    totals = (
        df.groupby("candidate", sort=False)
        .agg(party=("party", "first"), total_votes=("votes", "sum"))
        .reset_index()
    )
    totals = totals.sort_values("total_votes", ascending=False, kind="stable")

    return [
        CandidateSummary(row.candidate, row.party, int(row.total_votes))
        for row in totals.itertuples(index=False)
    ]
