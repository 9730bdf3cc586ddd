import pytest

from vote_explorer.models import VoteRecord
from vote_explorer.queries import (
    bar_count,
    candidate_results,
    county_search,
    national_results,
    overview,
    resolve_candidate,
    state_results,
)
from vote_explorer.states import STATES


class TestOverview:
    def test_counts(self, sample_records):
        result = overview(sample_records)
        assert result.record_count == 3
        assert result.total_votes == 350

    def test_national_sum_matches_overview(self, sample_records):
        assert sum(s.total_votes for s in national_results(sample_records)) == overview(sample_records).total_votes


class TestBarCount:
    @pytest.mark.parametrize(
        "votes, bars",
        [(0, 0), (74999, 0), (75000, 1), (150000, 1), (224999, 1), (225000, 2), (300000, 2)],
    )
    def test_rounds_half_away_from_zero(self, votes, bars):
        assert bar_count(votes) == bars

    def test_custom_scale(self):
        assert bar_count(15, scale=10) == 2


class TestStateResults:
    def test_case_insensitive_state(self, sample_records):
        rows = state_results(sample_records, "alabama")
        assert [(s.name, s.total_votes, bars) for s, bars in rows] == [
            ("Trump", 200, 0),
            ("Biden", 100, 0),
        ]

    def test_state_outside_catalog(self):
        records = [VoteRecord("Guam", "Hagatna", "X", "Y", 300000)]
        rows = state_results(records, "GUAM")
        assert rows[0][1] == 2

    def test_unknown_state_is_empty(self, sample_records):
        assert state_results(sample_records, "Atlantis") == []


class TestResolveCandidate:
    def test_first_match_in_file_order(self):
        records = [
            VoteRecord("OHIO", "Lake", "Donald Trump", "Republican", 1),
            VoteRecord("OHIO", "Lake", "Donald Duck", "Other", 100),
        ]
        assert resolve_candidate(records, "donald") == "Donald Trump"

    def test_no_match(self, sample_records):
        assert resolve_candidate(sample_records, "Lincoln") == ""


class TestCandidateResults:
    def test_example(self, sample_records):
        report = candidate_results(sample_records, "biden")
        assert report.candidate == "Biden"
        by_state = {t.state: t for t in report.tallies}
        alabama = by_state["ALABAMA"]
        assert (alabama.candidate_votes, alabama.total_votes) == (100, 300)
        assert alabama.percentage == pytest.approx(33.333, abs=1e-3)
        texas = by_state["TEXAS"]
        assert (texas.candidate_votes, texas.total_votes) == (50, 50)
        assert texas.percentage == 100.0
        assert report.best_state == "TEXAS"
        assert report.best_percentage == 100.0

    def test_all_catalog_states_in_order(self, sample_records):
        report = candidate_results(sample_records, "Biden")
        assert [t.state for t in report.tallies] == STATES
        empty = [t for t in report.tallies if t.state not in ("ALABAMA", "TEXAS")]
        assert all(t.total_votes == 0 and t.percentage == 0.0 for t in empty)

    def test_unmatched_candidate(self, sample_records):
        report = candidate_results(sample_records, "Lincoln")
        assert report.candidate == ""
        assert all(t.candidate_votes == 0 for t in report.tallies)
        assert sum(t.total_votes for t in report.tallies) == 350
        assert report.best_state == ""
        assert report.best_percentage == 0.0

    def test_ties_keep_first_state(self):
        records = [
            VoteRecord("TEXAS", "Harris", "Biden", "Democrat", 50),
            VoteRecord("OHIO", "Lake", "Biden", "Democrat", 50),
        ]
        # OHIO comes before TEXAS in the catalog
        assert candidate_results(records, "biden").best_state == "OHIO"

    def test_exact_name_after_resolution(self):
        records = [
            VoteRecord("OHIO", "Lake", "Joe Biden", "Democrat", 10),
            VoteRecord("OHIO", "Lake", "Joe Bidenson", "Other", 30),
        ]
        tally = candidate_results(records, "biden").tallies[STATES.index("OHIO")]
        assert (tally.candidate_votes, tally.total_votes) == (10, 40)

    def test_uncatalogued_states_dropped(self):
        records = [
            VoteRecord("OHIO", "Lake", "Biden", "Democrat", 10),
            VoteRecord("PUERTO RICO", "San Juan", "Biden", "Democrat", 1000),
        ]
        report = candidate_results(records, "Biden")
        assert sum(t.total_votes for t in report.tallies) == 10
        assert sum(t.candidate_votes for t in report.tallies) == 10

    def test_mixed_case_state_counts_under_catalog_name(self):
        records = [
            VoteRecord("Texas", "Harris", "Biden", "Democrat", 30),
            VoteRecord("TEXAS", "Dallas", "Trump", "Republican", 10),
        ]
        report = candidate_results(records, "biden")
        texas = report.tallies[STATES.index("TEXAS")]
        assert (texas.candidate_votes, texas.total_votes) == (30, 40)
        assert report.best_state == "TEXAS"

    def test_zero_percentage_never_best(self):
        records = [VoteRecord("OHIO", "Lake", "Trump", "Republican", 10)]
        report = candidate_results(records, "Biden")
        assert report.best_state == ""

    def test_empty_records(self):
        report = candidate_results([], "Biden")
        assert len(report.tallies) == 51
        assert report.best_state == ""


class TestCountySearch:
    def test_substring_any_case(self, sample_records):
        assert county_search(sample_records, "HAR") == [sample_records[2]]

    def test_empty_search_returns_everything(self, sample_records):
        assert county_search(sample_records, "") == sample_records

    def test_file_order(self, sample_records):
        assert county_search(sample_records, "aut") == sample_records[:2]

    def test_no_match(self, sample_records):
        assert county_search(sample_records, "Cook") == []
