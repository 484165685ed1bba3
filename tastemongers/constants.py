"""
Shared constants for the tastemongers app.
"""

# Every rating score lives on this fixed scale
SCORE_MIN = 0
SCORE_MAX = 10
