"""
Application constants.

Values that are fixed for a release and therefore not part of ``Settings``.
"""

PROJECT_NAME = "DMP Meeting Planner"
API_V1_STR = "/api/v1"
API_VERSION = "0.1.0"
SCHEMA_VERSION = "v1"

# Requests slower than this are logged as warnings by the request middleware
SLOW_REQUEST_THRESHOLD_MS = 1000
