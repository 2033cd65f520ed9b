"""Utility functions for the backend."""

import re
import secrets
import uuid
from datetime import UTC, date, datetime
from pathlib import PurePath

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def utc_today() -> date:
    """Current calendar day in UTC."""
    return utc_now().date()


def normalize_email(email: str) -> str:
    """Trim and lower-case an email address for storage and lookup."""
    return email.strip().lower()


def sanitize_filename(filename: str) -> str:
    """Reduce a client-supplied filename to a safe basename.

    Directory components are dropped and anything outside ``[A-Za-z0-9._-]``
    becomes an underscore.

    Examples:
        >>> sanitize_filename("../../etc/passwd")
        'passwd'
        >>> sanitize_filename("Data Structures (2023).pdf")
        'Data_Structures_2023_.pdf'
    """
    basename = PurePath(filename.replace("\\", "/")).name
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", basename).strip("._")
    return cleaned or "file"


def unique_filename(filename: str) -> str:
    """Prefix a sanitized filename with a random UUID."""
    return f"{uuid.uuid4()}-{sanitize_filename(filename)}"


def humanize_filename(filename: str) -> str:
    """Turn ``operating-systems_unit_1.pdf`` into ``operating systems unit 1``."""
    stem = PurePath(filename).stem if "." in filename else filename
    return re.sub(r"[-_]+", " ", stem).strip()


def generate_verification_code() -> str:
    """Generate a certificate verification code like ``LF-3F9A0C1B2D``."""
    return f"LF-{secrets.token_hex(5).upper()}"


LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    r"""
    Build a lower-case ``LIKE`` pattern matching ``text`` literally anywhere.

    Use with ``escape=LIKE_ESCAPE``.

    Examples:
        >>> contains_pattern("100%_Pass")
        '%100\\%\\_pass%'
    """
    escaped = (
        text.lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
