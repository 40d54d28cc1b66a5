"""HH:MM:SS parsing and formatting for manual time entry"""
import re

from models.errors import ValidationError

TIME_PATTERN = re.compile(r"^[0-9]{2}:[0-9]{2}:[0-9]{2}$")

FORMAT_ERROR = "Invalid time format. Use HH:MM:SS."
NEGATIVE_ERROR = "Time cannot be negative."


def is_valid_time_string(text: str) -> bool:
    return bool(TIME_PATTERN.fullmatch(text))


def parse_time(text: str) -> int:
    """Parse a strict two-digit HH:MM:SS string into seconds.

    Minute and second fields are not range checked, so "00:99:00" is 5940.
    """
    if not isinstance(text, str) or not is_valid_time_string(text):
        raise ValidationError(FORMAT_ERROR)
    hours, minutes, seconds = (int(part) for part in text.split(":"))
    total = hours * 3600 + minutes * 60 + seconds
    if total < 0:
        raise ValidationError(NEGATIVE_ERROR)
    return total


def format_time(total_seconds: int) -> str:
    """Render seconds as zero-padded HH:MM:SS; hours may exceed two digits"""
    total_seconds = int(total_seconds)
    if total_seconds < 0:
        raise ValueError(f"Cannot format negative duration: {total_seconds}")
    h, rem = divmod(total_seconds, 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"
