"""
Pick the Stick points calculator.

Scrapes a team's batting and fielding leaderboards for a season, scores every
batter, and shows the result in a paged terminal table.
"""

__version__ = "0.1.0"
