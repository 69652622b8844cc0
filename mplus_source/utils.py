"""Generic helpers for chapter field normalization and id parsing."""

import re
from datetime import datetime, timezone
from typing import Optional

# Match MANGA Plus web links such as '/titles/100020' or '/viewer/1000486'.
_LINK_ID_PATTERN = re.compile(r"(?P<kind>titles|viewer)/(?P<id>\d+)")


def strip_chapter_number(name: str) -> str:
    """
    Return the display number of a chapter without its leading '#'.

    MANGA Plus names numbered chapters like "#012"; special chapters such as
    "ex" or "One-shot" carry no marker and are returned unchanged.

    Parameters:
        name (str): The raw chapter name from the API.

    Returns:
        str: The chapter name with any leading '#' characters removed.
    """
    return name.lstrip("#")


def epoch_to_datetime(timestamp: int | float) -> datetime:
    """
    Convert an epoch-seconds timestamp into a timezone-aware UTC datetime.

    Parameters:
        timestamp (int | float): Seconds since the Unix epoch.

    Returns:
        datetime: The corresponding moment in UTC.
    """
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def extract_id(value: str, kind: str) -> Optional[str]:
    """
    Extract a numeric id from a bare id or a MANGA Plus web link.

    Parameters:
        value (str): Either digits ("100020") or a link containing
            ``titles/<id>`` or ``viewer/<id>``.
        kind (str): The link segment expected for this id ("titles" or "viewer").

    Returns:
        Optional[str]: The id as a string, or None if ``value`` does not
        carry an id of the requested kind.
    """
    value = value.strip()
    if value.isdigit():
        return value
    for match in _LINK_ID_PATTERN.finditer(value):
        if match.group("kind") == kind:
            return match.group("id")
    return None
