"""
Human-readable booking reference: ``CBE`` + base36 epoch-millis + random base36 suffix.

References created in the same millisecond share the time part, so uniqueness
rests on the suffix (36**8 combinations per millisecond, drawn from ``secrets``).
The database unique constraint is the final guard.
"""

import secrets
import string
import time
from typing import Optional


BOOKING_REFERENCE_PREFIX = 'CBE'
RANDOM_PART_LENGTH = 8
_BASE36_ALPHABET = string.digits + string.ascii_uppercase


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError('base36 encoding expects a non-negative integer')
    if value == 0:
        return '0'
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return ''.join(reversed(digits))


def generate_booking_reference(*, now_ms: Optional[int] = None) -> str:
    timestamp = now_ms if now_ms is not None else time.time_ns() // 1_000_000
    random_part = ''.join(secrets.choice(_BASE36_ALPHABET) for _ in range(RANDOM_PART_LENGTH))
    return f'{BOOKING_REFERENCE_PREFIX}{to_base36(timestamp)}{random_part}'
