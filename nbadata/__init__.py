"""NBA Data API — team/season records served from MongoDB."""

__version__ = "0.2.0"
