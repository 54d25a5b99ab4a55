# Bounded views
ACTIVITY_FEED_LIMIT = 10
RECENT_EXPENSES_LIMIT = 5
TOP_CATEGORIES_LIMIT = 3
LEADERBOARD_TOP_LIMIT = 3
SEARCH_RESULTS_PER_KIND = 5
SEARCH_MIN_LENGTH = 2
NOTIFICATIONS_LIMIT = 20

BILL_TREND_MONTHS = 6

# Budget status thresholds, in percent of the monthly cap
BUDGET_WARNING_THRESHOLD = 80
BUDGET_DANGER_THRESHOLD = 100
