import pytest

from vote_explorer.models import VoteRecord


@pytest.fixture
def sample_records():
    return [
        VoteRecord("ALABAMA", "Autauga", "Biden", "Democrat", 100),
        VoteRecord("ALABAMA", "Autauga", "Trump", "Republican", 200),
        VoteRecord("TEXAS", "Harris", "Biden", "Democrat", 50),
    ]


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="votes.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
