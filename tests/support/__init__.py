"""Helpers shared by the live and integration suites."""
