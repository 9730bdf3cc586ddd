import dataclasses
from typing import List


@dataclasses.dataclass(frozen=True)
class VoteRecord:
    state: str
    county: str
    candidate: str
    party: str
    votes: int


@dataclasses.dataclass(frozen=True)
class CandidateSummary:
    name: str
    party: str
    total_votes: int


@dataclasses.dataclass(frozen=True)
class StateTally:
    state: str
    candidate_votes: int
    total_votes: int

    @property
    def percentage(self) -> float:
        if self.total_votes > 0:
            return 100.0 * self.candidate_votes / self.total_votes
        return 0.0


@dataclasses.dataclass(frozen=True)
class CandidateReport:
    candidate: str
    tallies: List[StateTally]
    best_state: str = ""
    best_percentage: float = 0.0


@dataclasses.dataclass(frozen=True)
class Overview:
    record_count: int
    total_votes: int
