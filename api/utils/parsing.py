"""
Parsing helpers for values that arrive as strings from clients.
"""
import re
from typing import List, Optional, Tuple
from uuid import UUID

from api.services.exceptions import NotFoundError, ValidationError

DIMENSIONS_PATTERN = re.compile(r"^[0-9]{1,4}x[0-9]{1,4}$")


def parse_dimensions(dimensions: Optional[str]) -> Tuple[int, int]:
    """
    Parse a "WxH" string into (width, height).

    Each side is 1 to 4 digits separated by a lowercase "x" and must be
    at least 1.

    Raises:
        ValidationError: If the string is missing or malformed
    """
    if dimensions is None or not DIMENSIONS_PATTERN.match(dimensions):
        raise ValidationError(
            f"Invalid dimensions {dimensions!r}, expected WxH (e.g. 100x200)"
        )
    width, height = (int(side) for side in dimensions.split("x"))
    if width < 1 or height < 1:
        raise ValidationError(f"Dimensions must be at least 1x1, got {dimensions!r}")
    return width, height


def format_dimensions(width: int, height: int) -> str:
    return f"{width}x{height}"


def parse_entity_id(value: str, entity: str) -> UUID:
    """
    Parse a client-supplied id.

    An id that is not a valid UUID cannot reference any row, so it is
    reported as a missing entity.

    Raises:
        NotFoundError: If the value is not a UUID
    """
    try:
        return UUID(str(value))
    except ValueError:
        raise NotFoundError(f"{entity} not found")


def parse_id_list(raw: Optional[str]) -> List[UUID]:
    """
    Parse "[id1,id2]" or "id1,id2" into UUIDs.

    Blank and malformed entries are skipped and duplicates are dropped.
    """
    if not raw:
        return []
    raw = raw.strip()
    if raw.startswith("[") and raw.endswith("]"):
        raw = raw[1:-1]
    ids = []
    for part in raw.split(","):
        part = part.strip().strip('"').strip("'")
        if not part:
            continue
        try:
            ids.append(UUID(part))
        except ValueError:
            continue
    return list(dict.fromkeys(ids))
