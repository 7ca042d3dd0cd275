"""Reusable paths, literals and messages."""
HIPSTER_API_PATH = "/api"

QUESTIONS_RESOURCE = "questions"
USERS_RESOURCE = "users"

# Canned payload served by the offline hipster source.
FAKE_HIPSTER_TEXT = "blarg"
FAKE_HIPSTER_TYPE = "hipster-greek"

# Values accepted for Settings.hipster_source.
REMOTE_SOURCE = "remote"
FAKE_SOURCE = "fake"

DEFAULT_PAGE = 1

ERROR_UPSTREAM = "Upstream request failed."
ERROR_BAD_PAGE = "Query parameter 'page' must be a positive integer."
ERROR_GENERIC = "An unexpected error occurred."
