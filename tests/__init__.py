"""
Test suite for the bookstore API.

This package contains:
- api/: live scenarios against the configured bookstore deployment
- integration/: the same scenarios against an in-process fake service
- unit/: the suite's own helpers (config, client, runner, assertions)
- support/: the fake service and outcome reporting shared by the suites
"""
