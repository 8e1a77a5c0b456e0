"""Integer arithmetic puzzles with 32-bit semantics."""

from __future__ import annotations

from typing import List, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_RACE_INF = 10**9


def _check_int32(name: str, value: int) -> None:
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"{name}={value} is outside the 32-bit signed range")


def divide(dividend: int, divisor: int) -> int:
    """Divide by repeated shifted subtraction, truncating toward zero.

    The result is clamped to INT_MAX when it overflows the 32-bit range.
    """
    _check_int32("dividend", dividend)
    _check_int32("divisor", divisor)
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    if dividend == divisor:
        return 1
    negative = (dividend < 0) != (divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    quotient = 0
    while remaining >= step:
        shift = 0
        while remaining > step << (shift + 1):
            shift += 1
        remaining -= step << shift
        quotient += 1 << shift
    if negative:
        return -quotient
    return min(quotient, INT_MAX)


def find_complement(num: int) -> int:
    """Flip every bit of ``num`` up to its highest set bit.

    Zero gives 1. A negative number uses all 32 bits, so its complement is ``~num``.
    """
    _check_int32("num", num)
    if num == 0:
        return 1
    if num < 0:
        return ~num
    return ((1 << num.bit_length()) - 1) ^ num


def minimum_finish_time(
    tires: Sequence[Sequence[int]], change_time: int, num_laps: int
) -> int:
    """Return the least time to run ``num_laps`` laps.

    Each tire is ``(f, r)``: its k-th consecutive lap takes ``f * r**(k-1)``.
    Changing to a fresh tire costs ``change_time``.
    """
    if not tires:
        raise ValueError("at least one tire is required")
    if num_laps < 0:
        raise ValueError("number of laps must not be negative")
    best_run: List[int] = [_RACE_INF] * (num_laps + 1)
    for f, r in tires:
        if r < 1:
            raise ValueError("tire wear factor must be positive")
        elapsed = 0
        lap_time = f
        for laps in range(1, num_laps + 1):
            if elapsed + lap_time >= _RACE_INF:
                break
            elapsed += lap_time
            best_run[laps] = min(best_run[laps], elapsed)
            if lap_time >= _RACE_INF // r:
                break
            lap_time *= r

    best: List[int] = [0] + [_RACE_INF] * num_laps
    for laps in range(1, num_laps + 1):
        best[laps] = min(
            best[laps - run] + best_run[run] + (0 if run == laps else change_time)
            for run in range(1, laps + 1)
        )
    return best[num_laps]