"""Person related generators: names, contact details, schools and teams."""

from faker_dispatch.catalog.address import address_map
from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import OutputType, ParamType

section = CatalogSection("person")

HOBBIES = [
    "3D printing", "Archery", "Baking", "Birdwatching", "Board games", "Bouldering",
    "Calligraphy", "Camping", "Chess", "Cycling", "Fishing", "Gardening",
    "Geocaching", "Hiking", "Juggling", "Knitting", "Photography", "Pottery",
    "Running", "Sailing", "Skateboarding", "Surfing", "Woodworking", "Yoga",
]

SCHOOL_TYPES = ["Elementary School", "Middle School", "High School", "Academy", "College"]
SCHOOL_PREFIXES = ["Harborview", "Maplewood", "Riverside", "Oakridge", "Lakeside", "Hillcrest"]


@section.func(
    "name", "Name", "person",
    description="The given and family name of an individual",
    example="Markus Moen",
)
def name(fake, params):
    return f"{fake.first_name()} {fake.last_name()}"


@section.func(
    "firstname", "First Name", "person",
    description="The name given to a person at birth",
    example="Markus",
)
def first_name(fake, params):
    return fake.first_name()


@section.func(
    "middlename", "Middle Name", "person",
    description="Name between a person's first name and last name",
    example="Belinda",
)
def middle_name(fake, params):
    return fake.first_name()


@section.func(
    "lastname", "Last Name", "person",
    description="The family name or surname of an individual",
    example="Daniel",
)
def last_name(fake, params):
    return fake.last_name()


@section.func(
    "nameprefix", "Name Prefix", "person",
    description="A title or honorific added before a person's name",
    example="Mr.",
)
def name_prefix(fake, params):
    return fake.prefix()


@section.func(
    "namesuffix", "Name Suffix", "person",
    description="A title or designation added after a person's name",
    example="Jr.",
)
def name_suffix(fake, params):
    return fake.suffix()


@section.func(
    "gender", "Gender", "person",
    description="Classification based on social and cultural norms that identifies an individual",
    example="male",
)
def gender(fake, params):
    return pick(fake, ["male", "female"])


@section.func(
    "ssn", "SSN", "person",
    description="Unique nine-digit identifier used for government and financial purposes in the United States",
    example="296446360",
)
def ssn(fake, params):
    return fake.ssn().replace("-", "")


@section.func(
    "hobby", "Hobby", "person",
    description="An activity pursued for leisure and pleasure",
    example="Swimming",
)
def hobby(fake, params):
    return pick(fake, HOBBIES)


@section.func(
    "email", "Email", "person",
    description="Electronic mail used for sending digital messages and communication over the internet",
    example="markusmoen@pagac.net",
)
def email(fake, params):
    return fake.email()


@section.func(
    "phone", "Phone", "person",
    description="Numerical sequence used to contact individuals via telephone or mobile devices",
    example="6136459948",
)
def phone(fake, params):
    return fake.numerify("##########")


@section.func(
    "phoneformatted", "Phone Formatted", "person",
    description="Formatted phone number of a person",
    example="136-459-9489",
)
def phone_formatted(fake, params):
    return fake.phone_number()


@section.func(
    "school", "School", "school",
    description="An institution for formal education and learning",
    example="Harborview State Academy",
)
def school(fake, params):
    return f"{pick(fake, SCHOOL_PREFIXES)} {pick(fake, SCHOOL_TYPES)}"


@section.func(
    "person", "Person", "person",
    description="Personal data, like name and contact details, used for identification and communication",
    example='{"first_name": "Markus", "last_name": "Moen", "gender": "male", ...}',
    output=OutputType.MAP_ANY,
)
def person(fake, params):
    first = fake.first_name()
    last = fake.last_name()
    return {
        "first_name": first,
        "last_name": last,
        "gender": pick(fake, ["male", "female"]),
        "ssn": fake.ssn().replace("-", ""),
        "hobby": pick(fake, HOBBIES),
        "job": {
            "company": fake.company(),
            "title": fake.job(),
        },
        "address": address_map(fake),
        "contact": {
            "phone": fake.numerify("##########"),
            "email": fake.email(),
        },
    }


@section.func(
    "teams", "Teams", "person",
    description="Randomly split people into teams",
    example='{"Team 1": ["Justin", "Connor"], "Team 2": ["Sierra", "Ashley"]}',
    output=OutputType.MAP_STRING_ARRAY,
    params=[
        param("people", "Strings", ParamType.STRING_ARRAY, description="Array of people"),
        param("teams", "Strings", ParamType.STRING_ARRAY, description="Array of teams"),
    ],
)
def teams(fake, params):
    people = list(params.get_string_array("people"))
    team_names = params.get_string_array("teams")
    if not team_names:
        raise ValueError("at least one team is required")

    fake.random.shuffle(people)
    result: dict[str, list[str]] = {team: [] for team in team_names}
    for index, member in enumerate(people):
        result[team_names[index % len(team_names)]].append(member)
    return result
