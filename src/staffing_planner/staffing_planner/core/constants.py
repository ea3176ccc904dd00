"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * 60

DEFAULT_ATTENDANCE_DURATION = 420
DEFAULT_STANDARD_BREAK_TIME = 10
DEFAULT_AVERAGE_RESPONSE_RATE = 80

SHIFT_STAGGER_MINUTES = 15
BREAKS_PER_SHIFT = 4
BREAK_LENGTH_MINUTES = 10

# One standard break is budgeted for every block of this many operators.
OPERATORS_PER_BREAK_BLOCK = 6

DEFAULT_PLANNING_START_HOUR = 7
DEFAULT_PLANNING_END_HOUR = 22

DEFAULT_SESSION_DAYS = 7
