"""
Configuration constants for the Longhorn Network.
"""

from __future__ import annotations

import os

# =====================================================
# Input Data
# =====================================================

DATA_FILE = os.environ.get("LONGHORN_DATA_FILE", "students.txt")

# name, age, gender, year, major, gpa, roommate prefs, internships
STUDENT_FIELD_COUNT = 8
LIST_FIELD_SEPARATOR = ";"

# =====================================================
# Logging
# =====================================================

LOG_LEVEL = os.environ.get("LONGHORN_LOG_LEVEL", "INFO").strip().upper()

# Default is verbose unless disabled via LONGHORN_VERBOSE=0.
VERBOSE = os.environ.get("LONGHORN_VERBOSE", "1").strip().lower() not in ("0", "false", "no", "off")

# =====================================================
# Students
# =====================================================

DEFAULT_STUDENT_KIND = "university"

# Internship entry meaning "no internship"; compared case-insensitively
NO_INTERNSHIP_TOKEN = "None"

# =====================================================
# Connection Strength Bonuses
# =====================================================

ROOMMATE_PREF_BONUS: int = 4
SHARED_INTERNSHIP_BONUS: int = 3  # per matching pair of entries
SAME_MAJOR_BONUS: int = 2
SAME_AGE_BONUS: int = 1

# =====================================================
# Social Interactions (simulated latency, seconds)
# =====================================================

FRIEND_REQUEST_DELAY: float = float(os.environ.get("LONGHORN_FRIEND_REQUEST_DELAY", "0.05"))
CHAT_DELAY: float = float(os.environ.get("LONGHORN_CHAT_DELAY", "0.03"))
SOCIAL_DEMO_TIMEOUT: float = 5.0
SOCIAL_DEMO_WORKERS: int = 4
