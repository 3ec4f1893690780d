from enum import Enum


class RefreshPolicy(str, Enum):
    # Overlapping refreshes all run; the last one to finish wins
    OVERLAP = "overlap"
    # A refresh requested while another is in flight is skipped
    SINGLE_FLIGHT = "single_flight"
