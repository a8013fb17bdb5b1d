"""Leaderboard scraping and caching."""
