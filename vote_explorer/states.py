"""Fixed catalog of the 51 state names used by the candidate report.

The order is the catalog's declaration order (WASHINGTON DC sits between
WASHINGTON and WEST VIRGINIA); reports iterate and print in this order.
"""
from typing import List, Optional

from .models import VoteRecord


STATES: List[str] = [
    "ALABAMA", "ALASKA", "ARIZONA", "ARKANSAS", "CALIFORNIA",
    "COLORADO", "CONNECTICUT", "DELAWARE", "FLORIDA", "GEORGIA",
    "HAWAII", "IDAHO", "ILLINOIS", "INDIANA", "IOWA",
    "KANSAS", "KENTUCKY", "LOUISIANA", "MAINE", "MARYLAND",
    "MASSACHUSETTS", "MICHIGAN", "MINNESOTA", "MISSISSIPPI", "MISSOURI",
    "MONTANA", "NEBRASKA", "NEVADA", "NEW HAMPSHIRE", "NEW JERSEY",
    "NEW MEXICO", "NEW YORK", "NORTH CAROLINA", "NORTH DAKOTA", "OHIO",
    "OKLAHOMA", "OREGON", "PENNSYLVANIA", "RHODE ISLAND", "SOUTH CAROLINA",
    "SOUTH DAKOTA", "TENNESSEE", "TEXAS", "UTAH", "VERMONT",
    "VIRGINIA", "WASHINGTON", "WASHINGTON DC", "WEST VIRGINIA", "WISCONSIN",
    "WYOMING",
]


def all_states() -> List[str]:
    return list(STATES)


def match_state(record: VoteRecord, catalog_name: str) -> bool:
    """True when the record's state, uppercased, is exactly `catalog_name`."""
    return record.state.upper() == catalog_name


def catalog_state(record: VoteRecord) -> Optional[str]:
    """Return the first catalog entry the record matches, or None."""
    for name in STATES:
        if match_state(record, name):
            return name
    return None
