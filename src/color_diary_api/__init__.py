"""Color Diary API - Daily Mood Color Tracking Backend.

Stores one mood color per day and derives color mixtures, weekly/monthly
trends and frequency statistics from the history.
"""

__version__ = "0.1.0"
