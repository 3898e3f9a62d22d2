"""Date and time generators.

Formats accept a named layout (``RFC3339``, ``ANSIC``, ...), a strftime
pattern (anything containing ``%``) or a Java style pattern such as
``yyyy-MM-dd HH:mm:ss``.
"""

import re
from datetime import datetime, timedelta, timezone

from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import OutputType, ParamType

section = CatalogSection("time")

NAMED_LAYOUTS = {
    "ANSIC": "%a %b %d %H:%M:%S %Y",
    "UnixDate": "%a %b %d %H:%M:%S UTC %Y",
    "RubyDate": "%a %b %d %H:%M:%S %z %Y",
    "RFC822": "%d %b %y %H:%M UTC",
    "RFC822Z": "%d %b %y %H:%M %z",
    "RFC850": "%A, %d-%b-%y %H:%M:%S UTC",
    "RFC1123": "%a, %d %b %Y %H:%M:%S UTC",
    "RFC1123Z": "%a, %d %b %Y %H:%M:%S %z",
    "RFC3339": "%Y-%m-%dT%H:%M:%SZ",
    "RFC3339Nano": "%Y-%m-%dT%H:%M:%S.%fZ",
}

JAVA_TOKENS = {
    "yyyy": "%Y",
    "yy": "%y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "dd": "%d",
    "EEEE": "%A",
    "EEE": "%a",
    "HH": "%H",
    "hh": "%I",
    "mm": "%M",
    "ss": "%S",
    "SSS": "%f",
    "a": "%p",
    "Z": "%z",
}
_JAVA_PATTERN = re.compile("|".join(sorted(JAVA_TOKENS, key=len, reverse=True)))

# (region, abbreviation, offset hours, name, full display text)
TIMEZONES = [
    ("America/New_York", "EST", -5, "Eastern Standard Time", "(UTC-05:00) Eastern Time (US & Canada)"),
    ("America/Chicago", "CST", -6, "Central Standard Time", "(UTC-06:00) Central Time (US & Canada)"),
    ("America/Denver", "MST", -7, "Mountain Standard Time", "(UTC-07:00) Mountain Time (US & Canada)"),
    ("America/Los_Angeles", "PST", -8, "Pacific Standard Time", "(UTC-08:00) Pacific Time (US & Canada)"),
    ("America/Sao_Paulo", "ESAST", -3, "E. South America Standard Time", "(UTC-03:00) Brasilia"),
    ("Europe/London", "GMT", 0, "GMT Standard Time", "(UTC) Dublin, Edinburgh, Lisbon, London"),
    ("Europe/Berlin", "WEDT", 1, "W. Europe Standard Time", "(UTC+01:00) Amsterdam, Berlin, Bern, Rome, Stockholm, Vienna"),
    ("Europe/Athens", "GDT", 2, "GTB Standard Time", "(UTC+02:00) Athens, Bucharest"),
    ("Europe/Moscow", "MSK", 3, "Russian Standard Time", "(UTC+03:00) Moscow, St. Petersburg, Volgograd"),
    ("Asia/Dubai", "AST", 4, "Arabian Standard Time", "(UTC+04:00) Abu Dhabi, Muscat"),
    ("Asia/Kolkata", "IST", 5.5, "India Standard Time", "(UTC+05:30) Chennai, Kolkata, Mumbai, New Delhi"),
    ("Asia/Shanghai", "CST", 8, "China Standard Time", "(UTC+08:00) Beijing, Chongqing, Hong Kong, Urumqi"),
    ("Asia/Tokyo", "JST", 9, "Tokyo Standard Time", "(UTC+09:00) Osaka, Sapporo, Tokyo"),
    ("Australia/Sydney", "AEST", 10, "AUS Eastern Standard Time", "(UTC+10:00) Canberra, Melbourne, Sydney"),
    ("Pacific/Auckland", "NZST", 12, "New Zealand Standard Time", "(UTC+12:00) Auckland, Wellington"),
]

DATE_FORMAT_OPTIONS = [*NAMED_LAYOUTS, "yyyy-MM-dd", "%Y-%m-%d"]
EPOCH = datetime(1900, 1, 1, tzinfo=timezone.utc)


def format_datetime(value: datetime, fmt: str) -> str:
    """Render a datetime using a named layout, strftime or Java style pattern."""
    if fmt in NAMED_LAYOUTS:
        pattern = NAMED_LAYOUTS[fmt]
    elif "%" in fmt:
        pattern = fmt
    else:
        pattern = _JAVA_PATTERN.sub(lambda m: JAVA_TOKENS[m.group(0)], fmt)
    return value.strftime(pattern)


def parse_datetime(text: str) -> datetime:
    """Parse an ISO date/time literal, or ``now``, into an aware datetime."""
    if text.strip().lower() == "now":
        return datetime.now(timezone.utc)
    value = datetime.fromisoformat(text.strip())
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _between(fake, start: datetime, end: datetime) -> datetime:
    span = int((end - start).total_seconds())
    return start + timedelta(seconds=fake.random.randint(0, span))


@section.func(
    "date", "Date", "time",
    description="Representation of a specific day, month, and year, often used for chronological reference",
    example="2006-01-02T15:04:05Z",
    params=[
        param(
            "format", "Format", ParamType.STRING, default="RFC3339",
            options=DATE_FORMAT_OPTIONS,
            description="Date time string format output. You may also use a strftime or java time format",
        ),
    ],
)
def date(fake, params):
    value = _between(fake, EPOCH, datetime.now(timezone.utc))
    return format_datetime(value, params.get_string("format"))


@section.func(
    "daterange", "Date Range", "time",
    description="Random date between two ranges",
    example="1995-06-15T14:30:00Z",
    params=[
        param("startdate", "Start Date", ParamType.STRING, default="1970-01-01", description="Start date time string"),
        param("enddate", "End Date", ParamType.STRING, default="now", description="End date time string"),
        param("format", "Format", ParamType.STRING, default="yyyy-MM-dd", description="Date time string format"),
    ],
)
def date_range(fake, params):
    start = parse_datetime(params.get_string("startdate"))
    end = parse_datetime(params.get_string("enddate"))
    if start > end:
        raise ValueError("startdate must be before enddate")
    return format_datetime(_between(fake, start, end), params.get_string("format"))


@section.func(
    "pasttime", "Past Time", "time",
    description="Date that has occurred before the current moment in time",
    example="2007-01-24T13:00:35Z",
)
def past_time(fake, params):
    now = datetime.now(timezone.utc)
    return format_datetime(_between(fake, now - timedelta(days=365 * 10), now), "RFC3339")


@section.func(
    "futuretime", "Future Time", "time",
    description="Date that has occurred after the current moment in time",
    example="2107-01-24T13:00:35Z",
)
def future_time(fake, params):
    now = datetime.now(timezone.utc)
    return format_datetime(_between(fake, now, now + timedelta(days=365 * 10)), "RFC3339")


@section.func(
    "nanosecond", "Nanosecond", "time",
    description="Unit of time equal to One billionth (10^-9) of a second",
    example="196446360",
    output=OutputType.INT,
)
def nanosecond(fake, params):
    return fake.random.randrange(1_000_000_000)


@section.func(
    "second", "Second", "time",
    description="Unit of time equal to 1/60th of a minute",
    example="43",
    output=OutputType.INT,
)
def second(fake, params):
    return fake.random.randrange(60)


@section.func(
    "minute", "Minute", "time",
    description="Unit of time equal to 60 seconds",
    example="34",
    output=OutputType.INT,
)
def minute(fake, params):
    return fake.random.randrange(60)


@section.func(
    "hour", "Hour", "time",
    description="Unit of time equal to 60 minutes",
    example="8",
    output=OutputType.INT,
)
def hour(fake, params):
    return fake.random.randrange(24)


@section.func(
    "day", "Day", "time",
    description="24-hour period equivalent to one rotation of Earth on its axis",
    example="12",
    output=OutputType.INT,
)
def day(fake, params):
    return int(fake.day_of_month())


@section.func(
    "weekday", "Weekday", "time",
    description="Day of the week excluding the weekend",
    example="Friday",
)
def weekday(fake, params):
    return fake.day_of_week()


@section.func(
    "month", "Month", "time",
    description="Division of the year, typically 30 or 31 days long",
    example="1",
)
def month(fake, params):
    return str(int(fake.month()))


@section.func(
    "monthstring", "Month String", "time",
    description="String Representation of a month name",
    example="September",
)
def month_string(fake, params):
    return fake.month_name()


@section.func(
    "year", "Year", "time",
    description="Period of 365 days, the time Earth takes to orbit the Sun",
    example="1900",
    output=OutputType.INT,
)
def year(fake, params):
    return int(fake.year())


@section.func(
    "timezone", "Timezone", "time",
    description="Region where the same standard time is used, based on longitudinal divisions of the Earth",
    example="Kaliningrad Standard Time",
)
def timezone_name(fake, params):
    return pick(fake, TIMEZONES)[3]


@section.func(
    "timezoneabv", "Timezone Abbreviation", "time",
    description="Abbreviated 3-letter word of a timezone",
    example="KST",
)
def timezone_abbreviation(fake, params):
    return pick(fake, TIMEZONES)[1]


@section.func(
    "timezonefull", "Timezone Full", "time",
    description="Full name of a timezone",
    example="(UTC+03:00) Kaliningrad, Minsk",
)
def timezone_full(fake, params):
    return pick(fake, TIMEZONES)[4]


@section.func(
    "timezoneoffset", "Timezone Offset", "time",
    description="The difference in hours from Coordinated Universal Time (UTC) for a specific region",
    example="-5",
    output=OutputType.FLOAT,
)
def timezone_offset(fake, params):
    return float(pick(fake, TIMEZONES)[2])


@section.func(
    "timezoneregion", "Timezone Region", "time",
    description="Geographic area sharing the same standard time",
    example="America/Alaska",
)
def timezone_region(fake, params):
    return fake.timezone()
