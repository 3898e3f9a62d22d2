"""String generators: digits, letters, templates and string lists."""

from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import OutputType, ParamType

section = CatalogSection("strings")

MAX_COUNT = 100_000


def _count(params) -> int:
    count = params.get_uint("count")
    if count > MAX_COUNT:
        raise ValueError(f"count must not exceed {MAX_COUNT}")
    return count


@section.func(
    "digit", "Digit", "string",
    description="Numerical symbol used to represent numbers",
    example="0",
)
def digit(fake, params):
    return str(fake.random_digit())


@section.func(
    "digitn", "DigitN", "string",
    description="String of length N consisting of ASCII digits",
    example="0136459948",
    params=[param("count", "Count", ParamType.UINT, default="10", description="Number of digits to generate")],
)
def digit_n(fake, params):
    return "".join(str(fake.random_digit()) for _ in range(_count(params)))


@section.func(
    "letter", "Letter", "string",
    description="Character or symbol from the American Standard Code for Information Interchange (ASCII) character set",
    example="g",
)
def letter(fake, params):
    return fake.random_letter()


@section.func(
    "lettern", "LetterN", "string",
    description="ASCII string with length N",
    example="gbRMaRxHki",
    params=[param("count", "Count", ParamType.UINT, default="10", description="Number of letters to generate")],
)
def letter_n(fake, params):
    return "".join(fake.random_letter() for _ in range(_count(params)))


@section.func(
    "lexify", "Lexify", "string",
    description="Replace ? with random generated letters",
    example="gbRma",
    params=[param("str", "String", ParamType.STRING, default="?????", description="String value to replace ?'s")],
)
def lexify(fake, params):
    return fake.lexify(params.get_string("str"))


@section.func(
    "numerify", "Numerify", "string",
    description="Replace # with random numerical values",
    example="613-645-9948",
    params=[param("str", "String", ParamType.STRING, default="###-###-####", description="String value to replace #'s")],
)
def numerify(fake, params):
    return fake.numerify(params.get_string("str"))


@section.func(
    "randomstring", "Random String", "string",
    description="Return a random string from a string array",
    example="hello",
    params=[param("strs", "Strings", ParamType.STRING_ARRAY, description="Delimited separated strings")],
)
def random_string(fake, params):
    return pick(fake, params.get_string_array("strs"))


@section.func(
    "shufflestrings", "Shuffle Strings", "string",
    description="Shuffle an array of strings",
    example='["hello", "world", "whats", "up"]',
    output=OutputType.STRING_ARRAY,
    params=[param("strs", "Strings", ParamType.STRING_ARRAY, description="Delimited separated strings")],
)
def shuffle_strings(fake, params):
    values = list(params.get_string_array("strs"))
    fake.random.shuffle(values)
    return values


@section.func(
    "uuid", "UUID", "misc",
    description="128-bit identifier used to uniquely identify objects or entities in computer systems",
    example="590c1440-9888-45b0-bd51-a817ee07c3f2",
)
def uuid(fake, params):
    return fake.uuid4()
