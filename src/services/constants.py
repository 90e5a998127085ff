"""
Constants shared by the period tracking services.
"""

# Key under which the serialized period list is stored
STORAGE_KEY = "periodTracker"

MS_PER_DAY = 1000 * 60 * 60 * 24

# Cycle lengths outside (MIN, MAX) are treated as logging noise, not cycles.
# Both bounds are exclusive.
MIN_PLAUSIBLE_CYCLE_DAYS = 15
MAX_PLAUSIBLE_CYCLE_DAYS = 50

DELETE_CONFIRMATION_PROMPT = "Are you sure you want to delete this period entry?"
