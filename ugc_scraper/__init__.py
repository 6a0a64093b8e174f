"""Scrape player, team, match and season data from the UGC league website."""

__version__ = "0.5.0"