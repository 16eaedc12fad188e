"""Item module constants."""

# Number of items shown on the dashboard's recent list
DASHBOARD_RECENT_LIMIT = 5

DEFAULT_PRIORITY = 0

TITLE_REQUIRED_MESSAGE = "Title is required"
