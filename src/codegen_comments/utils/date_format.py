"""
Java SimpleDateFormat patterns for generated-code timestamps.

Generator configurations shared with the Java toolchain carry patterns such as
``yyyy-MM-dd HH:mm``. This module compiles them into formatters over
``datetime`` so those configuration files work unchanged. Names are always
English; there is no locale support.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Dict, List, Optional, Tuple

from ..exceptions import ConfigurationError

# Zero-argument callable returning the moment to stamp
Clock = Callable[[], datetime]

# Layout of java.util.Date#toString()
DEFAULT_PATTERN = "EEE MMM dd HH:mm:ss zzz yyyy"

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# datetime.weekday() order
DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def system_clock() -> datetime:
    """Current local time with its timezone attached"""
    return datetime.now().astimezone()


@dataclass(frozen=True)
class PatternToken:
    """One piece of a compiled pattern: a field run or literal text"""
    letter: Optional[str] = None  # None for literal text
    width: int = 0
    text: str = ""


def _aware(moment: datetime) -> datetime:
    """Naive datetimes are taken as local time"""
    return moment if moment.tzinfo is not None else moment.astimezone()


def _offset_minutes(moment: datetime) -> int:
    offset = _aware(moment).utcoffset() or timedelta(0)
    return int(offset.total_seconds() // 60)


def _format_offset(moment: datetime, separator: str, with_minutes: bool) -> str:
    minutes = _offset_minutes(moment)
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    if not with_minutes:
        return f"{sign}{hours:02d}"
    return f"{sign}{hours:02d}{separator}{mins:02d}"


def _number(value: int, width: int) -> str:
    return str(value).zfill(width)


def _year(value: int, width: int) -> str:
    if width == 2:
        return f"{value % 100:02d}"
    return _number(value, width)


def _text(name: str, width: int) -> str:
    return name if width >= 4 else name[:3]


def _month(moment: datetime, width: int) -> str:
    if width >= 3:
        return _text(MONTH_NAMES[moment.month - 1], width)
    return _number(moment.month, width)


# Weeks start on Sunday and week 1 is the one holding January 1st, as in the
# US locale Java defaults to. Y, w and W all follow this rule.

def _days_since_sunday(day: date) -> int:
    return (day.weekday() + 1) % 7


def _week_of_year(moment: datetime) -> Tuple[int, int]:
    """(week year, week number) of a moment"""
    day = moment.date()
    week_start = day - timedelta(days=_days_since_sunday(day))
    if (week_start + timedelta(days=6)).year > day.year:
        return day.year + 1, 1
    first_day = date(day.year, 1, 1)
    first_week_start = first_day - timedelta(days=_days_since_sunday(first_day))
    return day.year, (week_start - first_week_start).days // 7 + 1


def _week_of_month(moment: datetime) -> int:
    first_column = _days_since_sunday(moment.date().replace(day=1))
    return (moment.day + first_column - 1) // 7 + 1


def _iso_offset(moment: datetime, width: int) -> str:
    if _offset_minutes(moment) == 0:
        return "Z"
    if width == 1:
        return _format_offset(moment, "", with_minutes=False)
    if width == 2:
        return _format_offset(moment, "", with_minutes=True)
    return _format_offset(moment, ":", with_minutes=True)


_FIELDS: Dict[str, Callable[[datetime, int], str]] = {
    "G": lambda m, w: "AD",
    "y": lambda m, w: _year(m.year, w),
    "Y": lambda m, w: _year(_week_of_year(m)[0], w),
    "M": _month,
    "L": _month,
    "w": lambda m, w: _number(_week_of_year(m)[1], w),
    "W": lambda m, w: _number(_week_of_month(m), w),
    "D": lambda m, w: _number(m.timetuple().tm_yday, w),
    "d": lambda m, w: _number(m.day, w),
    "F": lambda m, w: _number((m.day - 1) // 7 + 1, w),
    "E": lambda m, w: _text(DAY_NAMES[m.weekday()], w),
    "u": lambda m, w: _number(m.isoweekday(), w),
    "a": lambda m, w: "AM" if m.hour < 12 else "PM",
    "H": lambda m, w: _number(m.hour, w),
    "k": lambda m, w: _number(m.hour or 24, w),
    "K": lambda m, w: _number(m.hour % 12, w),
    "h": lambda m, w: _number(m.hour % 12 or 12, w),
    "m": lambda m, w: _number(m.minute, w),
    "s": lambda m, w: _number(m.second, w),
    "S": lambda m, w: _number(m.microsecond // 1000, w),
    "z": lambda m, w: _aware(m).tzname() or _format_offset(m, ":", with_minutes=True),
    "Z": lambda m, w: _format_offset(m, "", with_minutes=True),
    "X": _iso_offset,
}


def tokenize_pattern(pattern: str) -> List[PatternToken]:
    """
    Split a SimpleDateFormat pattern into field runs and literal text.

    ASCII letters are pattern fields and must be known; anything inside single
    quotes is literal, and a doubled quote stands for one quote character.

    Raises:
        ConfigurationError: on an unknown pattern letter or an unclosed quote
    """
    tokens: List[PatternToken] = []
    literal: List[str] = []
    i = 0
    n = len(pattern)

    def flush_literal():
        if literal:
            tokens.append(PatternToken(text="".join(literal)))
            del literal[:]

    while i < n:
        char = pattern[i]
        if char == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = i + 1
            while True:
                if end >= n:
                    raise ConfigurationError(f"Unterminated quote in date pattern {pattern!r}")
                if pattern[end] == "'":
                    if end + 1 < n and pattern[end + 1] == "'":
                        literal.append("'")
                        end += 2
                        continue
                    break
                literal.append(pattern[end])
                end += 1
            i = end + 1
        elif char.isascii() and char.isalpha():
            if char not in _FIELDS:
                raise ConfigurationError(f"Illegal pattern character {char!r} in {pattern!r}")
            run_end = i
            while run_end < n and pattern[run_end] == char:
                run_end += 1
            width = run_end - i
            if char == "X" and width > 3:
                raise ConfigurationError(f"Invalid ISO 8601 offset width in {pattern!r}")
            flush_literal()
            tokens.append(PatternToken(letter=char, width=width))
            i = run_end
        else:
            literal.append(char)
            i += 1

    flush_literal()
    return tokens


class JavaDateFormat:
    """A compiled SimpleDateFormat pattern"""

    def __init__(self, pattern: str):
        self.pattern = pattern
        self.tokens = tokenize_pattern(pattern)

    def format(self, moment: datetime) -> str:
        parts = []
        for token in self.tokens:
            if token.letter is None:
                parts.append(token.text)
            else:
                parts.append(_FIELDS[token.letter](moment, token.width))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"JavaDateFormat({self.pattern!r})"


DEFAULT_DATE_FORMAT = JavaDateFormat(DEFAULT_PATTERN)
