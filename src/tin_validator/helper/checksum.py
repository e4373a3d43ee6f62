"""
Small numeric helpers shared by the country handlers
"""

from datetime import date
from string import ascii_uppercase

from typing import Iterable


def digit_at(tin: str, index: int) -> int:
    """
    Return the digit at a given position, or 0 if there is none
    """
    try:
        return int(tin[index])
    except (IndexError, ValueError):
        return 0


def digits_sum(number: int) -> int:
    """
    Add up the decimal digits of a number
    """
    return sum(int(c) for c in str(abs(number)))


def alphabet_position(char: str) -> int:
    """
    Position of a letter in the latin alphabet (A=1, ..., Z=26)
    """
    return ascii_uppercase.index(char.upper()) + 1


def last_digit(number: int) -> int:
    return int(str(number)[-1])


def weighted_sum(tin: str, weights: Iterable[int], start: int = 0) -> int:
    """
    Multiply each digit (from position `start` on) by its weight and add
    them up
    """
    return sum(digit_at(tin, start + i) * w for i, w in enumerate(weights))


def all_same(tin: str) -> bool:
    """
    Check if a string is made of a single repeated character
    """
    return len(set(tin)) <= 1


def is_date(year: int, month: int, day: int) -> bool:
    """
    Check that the three values form a real calendar date
    """
    try:
        date(year, month, day)
        return True
    except ValueError:
        return False
