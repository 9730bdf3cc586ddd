from typing import List, Tuple

from .config import (
    BAR_CHAR, NAME_WIDTH, PARTY_WIDTH, PCT_WIDTH, PLACE_WIDTH, VOTES_WIDTH,
)
from .models import CandidateReport, CandidateSummary, Overview, VoteRecord


def render_overview(result: Overview) -> str:
    return (
        f"Number of election records: {result.record_count}\n"
        f"Total number of votes recorded: {result.total_votes}"
    )


def render_national(summaries: List[CandidateSummary]) -> str:
    return "\n".join(
        f"{s.name:<{NAME_WIDTH}}{s.party:<{PARTY_WIDTH}}{s.total_votes:>{VOTES_WIDTH}}"
        for s in summaries
    )


def render_state(rows: List[Tuple[CandidateSummary, int]]) -> str:
    return "\n".join(f"{s.name:<{NAME_WIDTH}}{BAR_CHAR * bars}" for s, bars in rows)


def render_candidate(report: CandidateReport) -> str:
    lines = [
        f"{t.state:<{NAME_WIDTH}}"
        f"{t.candidate_votes:>{VOTES_WIDTH}}"
        f"{t.total_votes:>{VOTES_WIDTH}}"
        f"{t.percentage:>{PCT_WIDTH}.1f}%"
        for t in report.tallies
    ]
    lines.append(f"The best state for {report.candidate} is {report.best_state}")
    return "\n".join(lines)


def render_county(matches: List[VoteRecord]) -> str:
    return "\n".join(
        f"{r.county + ', ' + r.state:<{PLACE_WIDTH}}"
        f"{r.candidate:<{NAME_WIDTH}}"
        f"{r.votes:>{VOTES_WIDTH}}"
        for r in matches
    )
