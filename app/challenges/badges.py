"""
Leaderboard badges.
Awards: high_achiever, achiever, participant
Threshold-based on total points; a user holds at most one badge (the highest reached).
"""
from typing import List

# Highest threshold first
BADGES = [
    ("high_achiever", 1000, {"icon": "🏆", "label": "High Achiever", "desc": "Earned 1000 points or more"}),
    ("achiever",       500, {"icon": "⭐", "label": "Achiever",      "desc": "Earned 500 points or more"}),
    ("participant",    100, {"icon": "🎯", "label": "Participant",   "desc": "Earned 100 points or more"}),
]


def badges_for(total_points: int) -> List[str]:
    for key, threshold, _meta in BADGES:
        if total_points >= threshold:
            return [key]
    return []


def describe_badges(keys: List[str]) -> List[dict]:
    """Return badge metadata for display, in the order given."""
    meta_by_key = {key: meta for key, _threshold, meta in BADGES}
    return [{"key": key, **meta_by_key[key]} for key in keys if key in meta_by_key]
