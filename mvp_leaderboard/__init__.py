"""
MVP leaderboard: ranks a static roster by points earned from a scoring event log.
"""

__version__ = "1.0.0"
