"""
Input validation for birth-detail requests.
"""

import re
from typing import Optional

from fastapi import HTTPException, status


def sanitize_string(value: str, max_length: int = 500) -> str:
    """
    Truncate, drop null bytes and escape sequences, and strip.
    """
    if not isinstance(value, str):
        return str(value)

    value = value[:max_length]
    value = value.replace("\x00", "")
    value = re.sub(r"\\[\'\"nrtbf0]", "", value)

    return value.strip()


def validate_date_format(date_str: str) -> str:
    """Validate ISO date format (YYYY-MM-DD)."""
    if not date_str or not re.match(r"^\d{4}-\d{2}-\d{2}$", date_str.strip()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid date format. Use YYYY-MM-DD"
        )
    return date_str.strip()


def validate_time_format(time_str: Optional[str]) -> Optional[str]:
    """Validate time format (HH:MM or HH:MM:SS). Empty means unknown."""
    if not time_str:
        return None
    if not re.match(r"^\d{2}:\d{2}(:\d{2})?$", time_str.strip()):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid time format. Use HH:MM"
        )
    return time_str.strip()


def validate_place(place: Optional[str]) -> Optional[str]:
    """Sanitize a place/city field. Empty means unknown."""
    if not place:
        return None
    return sanitize_string(place, max_length=200) or None
