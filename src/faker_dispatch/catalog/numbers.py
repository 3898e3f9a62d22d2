"""Numeric generators: integers, floats, ranges, hex values and booleans."""

from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import OutputType, ParamType

section = CatalogSection("numbers")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _int_range(params) -> tuple[int, int]:
    min_value = params.get_int("min")
    max_value = params.get_int("max")
    if min_value > max_value:
        raise ValueError("min must be less than or equal to max")
    return min_value, max_value


def _float_range(params) -> tuple[float, float]:
    min_value = params.get_float("min")
    max_value = params.get_float("max")
    if min_value > max_value:
        raise ValueError("min must be less than or equal to max")
    return min_value, max_value


def _range_params(kind: ParamType, min_default: str, max_default: str) -> list:
    return [
        param("min", "Min", kind, default=min_default, description="Minimum value"),
        param("max", "Max", kind, default=max_default, description="Maximum value"),
    ]


def _register_bits(key: str, display: str, low: int, high: int, example: str) -> None:
    description = f"Integer value between {low} and {high}"

    @section.func(key, display, "number", description=description, example=example, output=OutputType.INT)
    def generate(fake, params):
        return fake.random.randint(low, high)


def _register_hex(bits: int, example: str) -> None:
    width = bits // 4

    @section.func(
        f"hexuint{bits}", f"Hex Uint{bits}", "number",
        description=f"Hexadecimal representation of an unsigned integer up to {bits} bits",
        example=example,
    )
    def generate(fake, params):
        return f"0x{fake.random.getrandbits(bits):0{width}x}"


for _bits, _example in ((8, "-115"), (16, "-12741"), (32, "-1072427943"), (64, "-8379641344161477543")):
    _register_bits(f"int{_bits}", f"Int{_bits}", -(2 ** (_bits - 1)), 2 ** (_bits - 1) - 1, _example)

for _bits, _example in ((8, "152"), (16, "34968"), (32, "1075055705"), (64, "843730692693298265")):
    _register_bits(f"uint{_bits}", f"Uint{_bits}", 0, 2**_bits - 1, _example)

for _bits, _example in ((8, "0x87"), (16, "0x8754"), (32, "0x87546957"), (64, "0x875469578e51b5e5"),
                        (128, "0x875469578e51b5e56c95b64681d147a1"),
                        (256, "0x875469578e51b5e56c95b64681d147a12cde48a4f417231b0c486abbc263e48d")):
    _register_hex(_bits, _example)


@section.func(
    "number", "Number", "number",
    description="Mathematical concept used for counting, measuring, and expressing quantities or values",
    example="14866",
    output=OutputType.INT,
    params=_range_params(ParamType.INT, str(INT32_MIN), str(INT32_MAX)),
)
def number(fake, params):
    return fake.random.randint(*_int_range(params))


@section.func(
    "intrange", "Int Range", "number",
    description="Integer value between given range",
    example="3",
    output=OutputType.INT,
    params=_range_params(ParamType.INT, "0", "100"),
)
def int_range(fake, params):
    return fake.random.randint(*_int_range(params))


@section.func(
    "uintrange", "Uint Range", "number",
    description="Non-negative integer value between given range",
    example="1",
    output=OutputType.UINT,
    params=_range_params(ParamType.UINT, "0", "100"),
)
def uint_range(fake, params):
    min_value = params.get_uint("min")
    max_value = params.get_uint("max")
    if min_value > max_value:
        raise ValueError("min must be less than or equal to max")
    return fake.random.randint(min_value, max_value)


@section.func(
    "float32", "Float32", "number",
    description="Data type representing floating-point numbers with 32 bits of precision in computing",
    example="3.1128167e+37",
    output=OutputType.FLOAT,
)
def float32(fake, params):
    return float(f"{fake.random.uniform(-3.4e38, 3.4e38):.7g}")


@section.func(
    "float64", "Float64", "number",
    description="Data type representing floating-point numbers with 64 bits of precision in computing",
    example="1.644484108270445e+307",
    output=OutputType.FLOAT,
)
def float64(fake, params):
    return fake.random.uniform(-1.0, 1.0) * 1.7e308


@section.func(
    "float32range", "Float32 Range", "number",
    description="Float32 value between given range",
    example="914774.6",
    output=OutputType.FLOAT,
    params=_range_params(ParamType.FLOAT, "0", "1000000"),
)
def float32_range(fake, params):
    return float(f"{fake.random.uniform(*_float_range(params)):.7g}")


@section.func(
    "float64range", "Float64 Range", "number",
    description="Float64 value between given range",
    example="914774.5585333086",
    output=OutputType.FLOAT,
    params=_range_params(ParamType.FLOAT, "0", "1000000"),
)
def float64_range(fake, params):
    return fake.random.uniform(*_float_range(params))


@section.func(
    "randomint", "Random Int", "number",
    description="Randomly selected value from a slice of int",
    example="-1",
    output=OutputType.INT,
    params=[param("ints", "Integers", ParamType.INT_ARRAY, description="Delimited separated integers")],
)
def random_int(fake, params):
    return pick(fake, params.get_int_array("ints"))


@section.func(
    "randomuint", "Random Uint", "number",
    description="Randomly selected value from a slice of uint",
    example="1",
    output=OutputType.UINT,
    params=[param("uints", "Unsigned Integers", ParamType.UINT_ARRAY, description="Delimited separated unsigned integers")],
)
def random_uint(fake, params):
    return pick(fake, params.get_uint_array("uints"))


@section.func(
    "shuffleints", "Shuffle Ints", "number",
    description="Shuffles an array of ints",
    example="[2, 1, 4, 3]",
    output=OutputType.INT_ARRAY,
    params=[param("ints", "Integers", ParamType.INT_ARRAY, description="Delimited separated integers")],
)
def shuffle_ints(fake, params):
    values = params.get_int_array("ints")
    fake.random.shuffle(values)
    return values


@section.func(
    "bool", "Boolean", "misc",
    description="Data type that represents one of two possible values, typically true or false",
    example="true",
    output=OutputType.BOOL,
)
def boolean(fake, params):
    return fake.boolean()
