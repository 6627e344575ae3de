"""Helper functions available to every message template.

Helper names are camelCase, matching the names used by existing generator
configurations.
"""

from __future__ import annotations

import base64
import json
import random
import secrets
import string
import uuid
from datetime import UTC, datetime
from typing import Any

_ALPHANUMERIC = string.ascii_letters + string.digits


def now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


def date(layout: str, moment: datetime | None = None) -> str:
    """Format a datetime with a strftime layout, defaulting to now."""
    return (moment or now()).strftime(layout)


def uuidv4() -> str:
    """Return a random UUID4 string."""
    return str(uuid.uuid4())


def rand_int(minimum: int, maximum: int) -> int:
    """Return a random integer in ``[minimum, maximum)``."""
    return random.randrange(minimum, maximum)


def rand_float(minimum: float, maximum: float) -> float:
    """Return a random float in ``[minimum, maximum]``."""
    return random.uniform(minimum, maximum)


def rand_alpha_num(length: int) -> str:
    """Return a random alphanumeric string."""
    return "".join(secrets.choice(_ALPHANUMERIC) for _ in range(length))


def to_json(value: Any) -> str:
    """Serialize a value as compact JSON."""
    return json.dumps(value, separators=(",", ":"), default=str)


def b64enc(value: str) -> str:
    """Base64-encode a UTF-8 string."""
    return base64.b64encode(str(value).encode("utf-8")).decode("ascii")


TEMPLATE_GLOBALS: dict[str, Any] = {
    "now": now,
    "date": date,
    "uuidv4": uuidv4,
    "randInt": rand_int,
    "randFloat": rand_float,
    "randAlphaNum": rand_alpha_num,
}

TEMPLATE_FILTERS: dict[str, Any] = {
    "toJson": to_json,
    "b64enc": b64enc,
}
