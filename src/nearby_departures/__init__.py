"""Nearby transit stations enriched with live departures."""

__version__ = "0.1.0"
