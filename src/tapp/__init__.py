"""
TAPP course-staffing API toolkit: HTTP client, in-memory mock API and
payload shape validation shared by the contract test suites.
"""

__version__ = "1.0.0"
