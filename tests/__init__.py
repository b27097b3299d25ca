"""
TAPP API contract test suite

The same test bodies run against the in-memory mock API and, when
TAPP_API_BASE_URL is set, against a live backend.
"""
