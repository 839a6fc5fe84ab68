"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_PORT = 3000

ROUTE_NOT_FOUND = "Route not found."
UNEXPECTED_ERROR = "Unexpected server error."
