"""Domain service: human-readable order codes.

Codes only have to be unique and never change once assigned; the
repository rejects a duplicate on insert.
"""

from __future__ import annotations

import secrets
from datetime import datetime, timezone
from typing import Callable

OrderCodeGenerator = Callable[[], str]

CODE_PREFIX = "SO"


def generate_order_code() -> str:
    """Return a code like ``SO20261019142530A1B2C3``."""
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    return f"{CODE_PREFIX}{stamp}{secrets.token_hex(3).upper()}"
