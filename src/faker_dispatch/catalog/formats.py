"""Template and structured-document generators.

These entries depend on call-site structures (field lists, templates,
weights) that the positional dispatch surface cannot express, so ingestion
drops them from the public namespace. They stay in the raw catalog for
direct use.
"""

import csv
import io
import json

from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import OutputType, ParamType

section = CatalogSection("formats")

VOWELS = "aeiou"


@section.func(
    "flipacoin", "Flip A Coin", "misc",
    description="Decision-making method involving the tossing of a coin to determine outcomes",
    example="Tails",
)
def flip_a_coin(fake, params):
    return "Heads" if fake.random.randrange(2) == 0 else "Tails"


@section.func("vowel", "Vowel", "string", description="Speech sound produced with an open vocal tract", example="a")
def vowel(fake, params):
    return pick(fake, VOWELS)


@section.func(
    "generate", "Generate", "generate",
    description="Random string generated from a template of provider placeholders",
    example="Markus Moen lives in Houston",
    params=[param("str", "String", ParamType.STRING, description="Template with {{provider}} placeholders")],
)
def generate(fake, params):
    return fake.parse(params.get_string("str"))


@section.func(
    "weighted", "Weighted", "misc",
    description="Randomly select a given option based upon an equal amount of weights",
    example="hello",
    output=OutputType.ANY,
    params=[
        param("options", "Options", ParamType.STRING_ARRAY, description="Array of any values"),
        param("weights", "Weights", ParamType.FLOAT_ARRAY, description="Array of weights"),
    ],
)
def weighted(fake, params):
    options = params.get_string_array("options")
    weights = params.get_float_array("weights")
    if len(options) != len(weights):
        raise ValueError("options and weights must be the same length")
    return fake.random.choices(options, weights=weights, k=1)[0]


def _rows(fake, params) -> list[dict]:
    fields = params.get_string_array("fields")
    count = params.get_uint("rowcount")
    return [{field: fake.format(field) for field in fields} for _ in range(count)]


ROW_PARAMS = [
    param("rowcount", "Row Count", ParamType.UINT, default="5", description="Number of rows"),
    param("fields", "Fields", ParamType.STRING_ARRAY, default='["name", "email"]', description="Faker provider per column"),
]


@section.func(
    "json", "JSON", "file",
    description="Format for structured data interchange used in programming, returns an array of objects",
    example='[{"name": "Markus Moen", "email": "markusmoen@example.com"}]',
    params=ROW_PARAMS,
)
def json_rows(fake, params):
    return json.dumps(_rows(fake, params))


@section.func(
    "csv", "CSV", "file",
    description="Individual lines or data entries within a Comma Separated Values (CSV) file",
    example="name,email\nMarkus Moen,markusmoen@example.com",
    params=[*ROW_PARAMS, param("delimiter", "Delimiter", ParamType.STRING, default=",", description="Separator in between row values")],
)
def csv_rows(fake, params):
    rows = _rows(fake, params)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=params.get_string_array("fields"), delimiter=params.get_string("delimiter"))
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue()


@section.func(
    "map", "Map", "generate",
    description="Data structure that stores key-value pairs",
    example='{"bravo": "word", "echo": 42}',
    output=OutputType.MAP_ANY,
)
def random_map(fake, params):
    return fake.pydict(nb_elements=fake.random.randint(2, 6), value_types=[str, int])
