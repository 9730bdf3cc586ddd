import argparse
import sys
from typing import List, Optional

from .config import EXIT_CHOICE, MENU_OPTIONS
from .io_utils import ParseError, load_votes
from .models import VoteRecord
from .queries import candidate_results, county_search, national_results, overview, state_results
from .states import catalog_state
from .tables import render_candidate, render_county, render_national, render_overview, render_state


def menu_text() -> str:
    lines = ["", "Select a menu option:"]
    lines += [f"  {i}. {label}" for i, label in enumerate(MENU_OPTIONS, start=1)]
    return "\n".join(lines)


def _emit(text: str):
    if text:
        print(text)


def run_choice(choice: int, records: List[VoteRecord]):
    """Run one menu selection. Unknown choices do nothing."""
    if choice == 1:
        _emit(render_overview(overview(records)))
    elif choice == 2:
        _emit(render_national(national_results(records)))
    elif choice == 3:
        state = input("Enter state: ")
        _emit(render_state(state_results(records, state)))
    elif choice == 4:
        search = input("Enter candidate: ")
        _emit(render_candidate(candidate_results(records, search)))
    elif choice == 5:
        search = input("Enter county: ")
        _emit(render_county(county_search(records, search)))


def menu_loop(records: List[VoteRecord]) -> int:
    while True:
        print(menu_text())
        try:
            raw = input("Your choice: ")
        except EOFError:
            return 0
        try:
            choice = int(raw.strip())
        except ValueError:
            continue
        if choice == EXIT_CHOICE:
            return 0
        try:
            run_choice(choice, records)
        except EOFError:
            return 0


def load(path: str) -> List[VoteRecord]:
    records = load_votes(path)
    print(f"Loaded {len(records):,} records from {path}")
    outside = sum(1 for r in records if catalog_state(r) is None)
    if outside:
        print(
            f"Warning: {outside} records have a state outside the 51-state catalog; "
            "they are left out of candidate results",
            file=sys.stderr,
        )
    return records


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Explore county-level election vote records")
    p.add_argument("csv", nargs="?", help="Vote records file (state,county,candidate,party,votes); prompted for when omitted")
    args = p.parse_args(argv)

    path = args.csv
    if path is None:
        try:
            path = input("Enter file to use: ").strip()
        except EOFError:
            return 0

    try:
        records = load(path)
    except (OSError, ParseError) as e:
        print("Error:", e)
        return 1

    return menu_loop(records)


if __name__ == "__main__":
    sys.exit(main())
