"""
Application constants.

This module contains constants used throughout the application.
"""

from typing import Any

# Levels: level = floor(sqrt(total_xp / XP_PER_LEVEL_UNIT)) + 1
XP_PER_LEVEL_UNIT = 100

# Achievement thresholds, matched to seeded achievement names
LEVEL_ACHIEVEMENTS: dict[int, str] = {
    5: "Level 5",
    10: "Level 10",
    25: "Level 25",
    50: "Legend",
}
STREAK_ACHIEVEMENTS: dict[int, str] = {
    3: "Streak Starter",
    7: "Week Warrior",
    30: "Dedicated Learner",
    100: "Century Streak",
}
CERTIFICATE_ACHIEVEMENT = "Certified"

RESOURCE_TYPE_QUESTION_PAPER = "question_paper"
RESOURCE_TYPE_STUDY_NOTE = "study_note"

UPLOAD_STATUS_PENDING = "pending"
UPLOAD_STATUS_APPROVED = "approved"
UPLOAD_STATUS_REJECTED = "rejected"
UPLOAD_STATUSES = (UPLOAD_STATUS_PENDING, UPLOAD_STATUS_APPROVED, UPLOAD_STATUS_REJECTED)

DEFAULT_REJECTION_REASON = "No reason provided"

SEARCH_HISTORY_LIMIT = 50
LEADERBOARD_DEFAULT_LIMIT = 50
RECENT_RESOURCES_DEFAULT_LIMIT = 10

# Created on first request of the day when no challenges exist yet
DEFAULT_DAILY_CHALLENGES: list[dict[str, Any]] = [
    {
        "title": "Complete a Quiz",
        "description": "Complete any quiz to earn XP",
        "type": "quiz",
        "requirement": {"count": 1},
        "xp_reward": 50,
    },
    {
        "title": "Study for 30 minutes",
        "description": "Spend 30 minutes learning",
        "type": "study_time",
        "requirement": {"minutes": 30},
        "xp_reward": 30,
    },
    {
        "title": "Maintain your streak",
        "description": "Log in and learn something today",
        "type": "streak",
        "requirement": {"count": 1},
        "xp_reward": 25,
    },
]

# SM-2 spaced repetition
SM2_INITIAL_EASE = 2.5
SM2_MIN_EASE = 1.3
SM2_PASSING_QUALITY = 3

# AI generation
AI_CONTENT_CHAR_LIMIT = 3000
AI_SUMMARY_CHAR_LIMIT = 4000
SUMMARY_FALLBACK_CHARS = 500
MCQ_MIN_QUESTIONS = 1
MCQ_MAX_QUESTIONS = 20
FLASHCARDS_MIN = 5
FLASHCARDS_MAX = 15
FLASHCARDS_CHARS_PER_CARD = 200
FALLBACK_FLASHCARDS_MAX = 10

RESOURCE_ALLOWED_CONTENT_TYPES = ("application/pdf",)
MCQ_ALLOWED_EXTENSIONS = (".pdf", ".doc", ".docx", ".txt")
