"""Address and location generators."""

from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import OutputType, ParamType

section = CatalogSection("address")

STREET_PREFIXES = ["North", "East", "West", "South", "New", "Lake", "Port"]


def _coordinate(fake, low: float, high: float) -> float:
    return round(fake.random.uniform(low, high), 6)


def address_map(fake) -> dict:
    """Build a full address record, shared by composite generators."""
    street = fake.street_address()
    city = fake.city()
    state = fake.state()
    zip_code = fake.postcode()
    return {
        "address": f"{street}, {city}, {state} {zip_code}",
        "street": street,
        "city": city,
        "state": state,
        "zip": zip_code,
        "country": fake.country(),
        "latitude": _coordinate(fake, -90, 90),
        "longitude": _coordinate(fake, -180, 180),
    }


def _range(params, low: float, high: float) -> tuple[float, float]:
    min_value = params.get_float("min")
    max_value = params.get_float("max")
    if min_value > max_value or min_value < low or max_value > high:
        raise ValueError(
            f"invalid min or max range, must be valid floats and between {low:g} and {high:g}"
        )
    return min_value, max_value


@section.func(
    "address", "Address", "address",
    description="Residential location including street, city, state, country and postal code",
    example='{"address": "364 Unionsville, Norfolk, Ohio 99536", "street": "364 Unionsville", ...}',
    output=OutputType.MAP_ANY,
)
def address(fake, params):
    return address_map(fake)


@section.func(
    "city", "City", "address",
    description="Part of a country with significant population, often a central hub for culture and commerce",
    example="Marcelside",
)
def city(fake, params):
    return fake.city()


@section.func(
    "country", "Country", "address",
    description="Nation with its own government and defined territory",
    example="United States of America",
)
def country(fake, params):
    return fake.country()


@section.func(
    "countryabr", "Country Abbreviation", "address",
    description="Shortened 2-letter form of a country's name",
    example="US",
)
def country_abbreviation(fake, params):
    return fake.country_code()


@section.func(
    "state", "State", "address",
    description="Governmental division within a country, often having its own laws and government",
    example="Illinois",
)
def state(fake, params):
    return fake.state()


@section.func(
    "stateabr", "State Abbreviation", "address",
    description="Shortened 2-letter form of a state or province",
    example="IL",
)
def state_abbreviation(fake, params):
    return fake.state_abbr()


@section.func(
    "street", "Street", "address",
    description="Public road in a city or town, typically with houses and buildings on each side",
    example="364 East Rapidsborough",
)
def street(fake, params):
    return fake.street_address()


@section.func(
    "streetname", "Street Name", "address",
    description="Name given to a specific road or street",
    example="View",
)
def street_name(fake, params):
    return fake.street_name()


@section.func(
    "streetnumber", "Street Number", "address",
    description="Numerical identifier assigned to a street",
    example="13645",
)
def street_number(fake, params):
    return fake.building_number()


@section.func(
    "streetprefix", "Street Prefix", "address",
    description="Directional or descriptive term preceding a street name",
    example="East",
)
def street_prefix(fake, params):
    return pick(fake, STREET_PREFIXES)


@section.func(
    "streetsuffix", "Street Suffix", "address",
    description="Designation at the end of a street name indicating type",
    example="Ville",
)
def street_suffix(fake, params):
    return fake.street_suffix()


@section.func(
    "zip", "Zip", "address",
    description="Numerical code for postal address sorting, specific to a geographic area",
    example="13645",
)
def zip_code(fake, params):
    return fake.postcode()


@section.func(
    "latitude", "Latitude", "address",
    description="Geographic coordinate specifying north-south position on Earth's surface",
    example="-73.534056",
    output=OutputType.FLOAT,
)
def latitude(fake, params):
    return _coordinate(fake, -90, 90)


@section.func(
    "latituderange", "Latitude Range", "address",
    description="Latitude number between the given range (default min=0, max=90)",
    example="22.921026",
    output=OutputType.FLOAT,
    params=[
        param("min", "Min", ParamType.FLOAT, default="0", description="Minimum range"),
        param("max", "Max", ParamType.FLOAT, default="90", description="Maximum range"),
    ],
)
def latitude_range(fake, params):
    return _coordinate(fake, *_range(params, -90, 90))


@section.func(
    "longitude", "Longitude", "address",
    description="Geographic coordinate indicating east-west position on Earth's surface",
    example="-147.068112",
    output=OutputType.FLOAT,
)
def longitude(fake, params):
    return _coordinate(fake, -180, 180)


@section.func(
    "longituderange", "Longitude Range", "address",
    description="Longitude number between the given range (default min=0, max=180)",
    example="-8.170450",
    output=OutputType.FLOAT,
    params=[
        param("min", "Min", ParamType.FLOAT, default="0", description="Minimum range"),
        param("max", "Max", ParamType.FLOAT, default="180", description="Maximum range"),
    ],
)
def longitude_range(fake, params):
    return _coordinate(fake, *_range(params, -180, 180))
