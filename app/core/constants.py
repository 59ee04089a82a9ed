"""Application constants."""

# User view: most recent logs returned with the progress summary
PROGRESS_LOG_LIMIT = 365

# Admin rollup: weight change compares against the last weight on/before this many days ago
TRAILING_WINDOW_DAYS = 30

# Insights
CONSISTENCY_THRESHOLD_PCT = 60
PLATEAU_WINDOW = 14
PLATEAU_TOLERANCE = 0.5
STRENGTH_MILESTONE_PCT = 10

# Strength average always divides by the number of tracked lifts, even when some are missing
STRENGTH_LIFT_DIVISOR = 3

# Goal completion: start weight this close to target counts as already complete
GOAL_EPSILON = 0.01
