import re
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _record_id(car) -> int:
    # Non-object entries and missing or non-integer ids count as 0
    if not isinstance(car, dict):
        return 0
    car_id = car.get("id")
    if isinstance(car_id, bool) or not isinstance(car_id, int):
        return 0
    return car_id


def get_next_id(cars: list) -> int:
    last_id = max((_record_id(car) for car in cars), default=0)
    return max(last_id, 0) + 1


def parse_int(value) -> Optional[int]:
    """Parse the leading integer of a form value.

    Leading whitespace and a sign are accepted and trailing characters are
    ignored, so "2020abc" gives 2020. Returns None when there are no leading
    digits at all.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))
