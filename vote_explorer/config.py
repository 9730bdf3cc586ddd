# Bar chart: one bar per BAR_SCALE votes
BAR_SCALE = 150000
BAR_CHAR = "|"

# Input columns, in file order
VOTE_FIELDS = ["state", "county", "candidate", "party", "votes"]

# Fixed-width report columns
NAME_WIDTH = 20
PARTY_WIDTH = 15
VOTES_WIDTH = 10
PCT_WIDTH = 7
PLACE_WIDTH = 40

MENU_OPTIONS = [
    "Data overview",
    "National results",
    "State results",
    "Candidate results",
    "County search",
    "Exit",
]
EXIT_CHOICE = 6
