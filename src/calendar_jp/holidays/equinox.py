"""
Pure equinox-date functions for the Japanese holiday domain.

Vernal and autumnal equinox days are looked up from the published
Gregorian-calendar offset tables (1900–2099), not computed
astronomically. Each table branches on ``year % 4``; within a branch the
year falls into one of several disjoint inclusive spans, each with a fixed
day-of-month. Spans are contiguous for the years of their residue class.

Calculation Contracts:
- vernal_equinox_day: March day-of-month of the vernal equinox
- autumnal_equinox_day: September day-of-month of the autumnal equinox

Both return EQUINOX_UNKNOWN for a year outside every span.
"""

# Never equal to a day-of-month, so an unknown year matches no date
EQUINOX_UNKNOWN = -1

# year % 4 -> ((first_year, last_year, day), ...)
VERNAL_EQUINOX_TABLE: dict[int, tuple[tuple[int, int, int], ...]] = {
    0: ((1900, 1956, 21), (1960, 2088, 20), (2092, 2096, 19)),
    1: ((1901, 1989, 21), (1993, 2097, 20)),
    2: ((1902, 2022, 21), (2026, 2098, 20)),
    3: ((1903, 1923, 22), (1927, 2055, 21), (2059, 2099, 20)),
}

AUTUMNAL_EQUINOX_TABLE: dict[int, tuple[tuple[int, int, int], ...]] = {
    0: ((1900, 2008, 23), (2012, 2096, 22)),
    1: ((1901, 1917, 24), (1921, 2041, 23), (2045, 2097, 22)),
    2: ((1902, 1946, 24), (1950, 2074, 23), (2078, 2098, 22)),
    3: ((1903, 1979, 24), (1983, 2099, 23)),
}


def _lookup(table: dict[int, tuple[tuple[int, int, int], ...]], year: int) -> int:
    for first, last, day in table[year % 4]:
        if first <= year <= last:
            return day
    return EQUINOX_UNKNOWN


def vernal_equinox_day(year: int) -> int:
    """
    Day of March on which the vernal equinox (春分の日) falls.

    Args:
        year: Gregorian year, 1900–2099

    Returns:
        Day-of-month, or EQUINOX_UNKNOWN outside the table
    """
    return _lookup(VERNAL_EQUINOX_TABLE, year)


def autumnal_equinox_day(year: int) -> int:
    """
    Day of September on which the autumnal equinox (秋分の日) falls.

    Args:
        year: Gregorian year, 1900–2099

    Returns:
        Day-of-month, or EQUINOX_UNKNOWN outside the table
    """
    return _lookup(AUTUMNAL_EQUINOX_TABLE, year)
