"""Gear Sync - mirrors Strava gear into a local store."""

__version__ = "1.0.0"
