"""Company, job, product and application generators."""

from faker_dispatch.catalog.base import CatalogSection, pick
from faker_dispatch.descriptors.base import OutputType

section = CatalogSection("company")

BLURBS = [
    "Advancement", "Advantage", "Ambition", "Balance", "Belief", "Benefits", "Care",
    "Challenge", "Change", "Choice", "Commitment", "Comfort", "Connection", "Discovery",
    "Dream", "Energy", "Excellence", "Freedom", "Growth", "Harmony", "Innovation",
    "Inspiration", "Journey", "Legacy", "Passion", "Quality", "Trust", "Vision",
]
BUZZWORDS = [
    "adaptive", "analyzing", "asynchronous", "bandwidth-monitored", "client-driven",
    "coherent", "content-based", "dedicated", "disintermediate", "dynamic", "encoding",
    "executive", "fault-tolerant", "grid-enabled", "heuristic", "holistic",
    "interactive", "leverage", "mission-critical", "multi-tasking", "object-oriented",
    "optimizing", "proactive", "real-time", "scalable", "synergistic", "upward-trending",
    "value-added", "zero tolerance",
]
JOB_DESCRIPTORS = [
    "Central", "Chief", "Corporate", "Customer", "Direct", "District", "Dynamic",
    "Forward", "Future", "Global", "Human", "Internal", "International", "Investor",
    "Lead", "Legacy", "National", "Principal", "Product", "Regional", "Senior",
]
JOB_LEVELS = [
    "Accountability", "Accounts", "Applications", "Assurance", "Brand", "Communications",
    "Configuration", "Creative", "Data", "Directives", "Division", "Factors", "Functionality",
    "Group", "Identity", "Implementation", "Infrastructure", "Integration", "Interactions",
    "Intranet", "Marketing", "Markets", "Metrics", "Mobility", "Operations", "Optimization",
    "Paradigm", "Program", "Quality", "Research", "Response", "Security", "Solutions",
    "Tactics", "Usability", "Web",
]
JOB_TITLES = [
    "Administrator", "Agent", "Analyst", "Architect", "Assistant", "Associate",
    "Consultant", "Coordinator", "Designer", "Developer", "Director", "Engineer",
    "Executive", "Facilitator", "Liaison", "Manager", "Officer", "Orchestrator",
    "Planner", "Producer", "Representative", "Specialist", "Strategist", "Supervisor",
    "Technician",
]

PRODUCT_ADJECTIVES = [
    "Bold", "Compact", "Durable", "Ergonomic", "Fast", "Gentle", "Handheld", "Innovative",
    "Lightweight", "Modern", "Portable", "Quiet", "Robust", "Sleek", "Smart", "Stylish",
    "Versatile", "Wireless",
]
PRODUCT_NOUNS = [
    "Blender", "Camera", "Charger", "Drone", "Fan", "Headphones", "Heater", "Keyboard",
    "Lamp", "Microwave", "Monitor", "Mouse", "Printer", "Router", "Scale", "Speaker",
    "Stove", "Thermostat", "Toaster", "Watch",
]
PRODUCT_CATEGORIES = [
    "automotive parts", "baby products", "bath and shower", "books", "clothing",
    "cosmetics", "electronics", "furniture", "gardening supplies", "health and wellness",
    "home appliances", "jewelry", "kitchenware", "music instruments", "office supplies",
    "outdoor gear", "pet supplies", "sports equipment", "toys and games", "travel accessories",
]
PRODUCT_FEATURES = [
    "biometric", "compact design", "durable", "ergonomic", "energy-efficient",
    "fast charging", "gps-enabled", "high-performance", "noise-canceling", "portable",
    "rechargeable", "smart", "touchscreen", "ultra-lightweight", "voice-controlled",
    "water-resistant", "wireless",
]
PRODUCT_MATERIALS = [
    "aluminum", "bamboo", "brass", "carbon", "ceramic", "cotton", "copper", "glass",
    "granite", "leather", "linen", "marble", "nylon", "plastic", "rubber", "silicon",
    "silk", "stainless", "steel", "titanium", "wood", "wool",
]

APP_NOUNS = [
    "Bird", "Bot", "Box", "Cloud", "Dash", "Hub", "Kit", "Lab", "Link", "Loop", "Map",
    "Nest", "Pad", "Pulse", "Scout", "Spark", "Stack", "Sync", "Track", "Wave",
]
APP_ADJECTIVES = [
    "Blue", "Bright", "Clever", "Fast", "Happy", "Lucky", "Neat", "Quick", "Smart",
    "Swift", "Tiny", "Wild",
]


@section.func(
    "company", "Company", "company",
    description="Designated official name of a business or organization",
    example="Moen, Pagac and Wuckert",
)
def company(fake, params):
    return fake.company()


@section.func(
    "companysuffix", "Company Suffix", "company",
    description="Suffix at the end of a company name, indicating business structure, like 'Inc.' or 'LLC'",
    example="Inc",
)
def company_suffix(fake, params):
    return fake.company_suffix()


@section.func(
    "blurb", "Blurb", "company",
    description="Brief description or summary of a company's purpose, products, or services",
    example="word",
)
def blurb(fake, params):
    return pick(fake, BLURBS)


@section.func(
    "bs", "BS", "company",
    description="Random bs company word",
    example="front-end",
)
def bs(fake, params):
    return fake.bs()


@section.func(
    "buzzword", "Buzzword", "company",
    description="Trendy or overused term often used in business to sound impressive",
    example="disintermediate",
)
def buzzword(fake, params):
    return pick(fake, BUZZWORDS)


@section.func(
    "job", "Job", "company",
    description="Position or role in employment, involving specific tasks and responsibilities",
    example='{"company": "ClearHealthCosts", "title": "Agent", "descriptor": "Future", "level": "Tactics"}',
    output=OutputType.MAP_STRING,
)
def job(fake, params):
    return {
        "company": fake.company(),
        "title": pick(fake, JOB_TITLES),
        "descriptor": pick(fake, JOB_DESCRIPTORS),
        "level": pick(fake, JOB_LEVELS),
    }


@section.func(
    "jobdescriptor", "Job Descriptor", "company",
    description="Word used to describe the duties, requirements, and nature of a job",
    example="Central",
)
def job_descriptor(fake, params):
    return pick(fake, JOB_DESCRIPTORS)


@section.func(
    "joblevel", "Job Level", "company",
    description="Random job level",
    example="Assurance",
)
def job_level(fake, params):
    return pick(fake, JOB_LEVELS)


@section.func(
    "jobtitle", "Job Title", "company",
    description="Specific title for a position or role within a company or organization",
    example="Director",
)
def job_title(fake, params):
    return pick(fake, JOB_TITLES)


@section.func(
    "slogan", "Slogan", "company",
    description="Catchphrase or motto used by a company to represent its brand or values",
    example="Universal seamless Focus, interactive.",
)
def slogan(fake, params):
    return f"{pick(fake, BLURBS)}! {fake.catch_phrase()}."


def _product_name(fake) -> str:
    return f"{pick(fake, PRODUCT_ADJECTIVES)} {pick(fake, PRODUCT_FEATURES).title()} {pick(fake, PRODUCT_NOUNS)}"


def _product_description(fake) -> str:
    return (
        f"This {pick(fake, PRODUCT_FEATURES)} {pick(fake, PRODUCT_NOUNS).lower()} is made of "
        f"{pick(fake, PRODUCT_MATERIALS)}. {fake.sentence()}"
    )


def _upc(fake) -> str:
    body = "".join(str(fake.random.randrange(10)) for _ in range(11))
    odd = sum(int(d) for d in body[0::2])
    even = sum(int(d) for d in body[1::2])
    return body + str((10 - (odd * 3 + even) % 10) % 10)


@section.func(
    "product", "Product", "product",
    description="An item created for sale or use",
    example='{"name": "olive copper monitor", "price": 7.8, "categories": ["clothing"], "upc": "012780949980"}',
    output=OutputType.MAP_ANY,
)
def product(fake, params):
    features = [pick(fake, PRODUCT_FEATURES) for _ in range(fake.random.randint(1, 3))]
    return {
        "name": _product_name(fake),
        "description": _product_description(fake),
        "categories": [pick(fake, PRODUCT_CATEGORIES) for _ in range(fake.random.randint(1, 3))],
        "price": round(fake.random.uniform(3, 500), 2),
        "features": sorted(set(features)),
        "color": fake.color_name().lower(),
        "material": pick(fake, PRODUCT_MATERIALS),
        "upc": _upc(fake),
    }


@section.func(
    "productname", "Product Name", "product",
    description="Distinctive title or label assigned to a product for identification and marketing",
    example="olive copper monitor",
)
def product_name(fake, params):
    return _product_name(fake)


@section.func(
    "productdescription", "Product Description", "product",
    description="Explanation detailing the features and characteristics of a product",
    example="Backwards caused quarterly without week it hungry thing someone him regularly.",
)
def product_description(fake, params):
    return _product_description(fake)


@section.func(
    "productcategory", "Product Category", "product",
    description="Classification grouping similar products based on shared characteristics or functions",
    example="clothing",
)
def product_category(fake, params):
    return pick(fake, PRODUCT_CATEGORIES)


@section.func(
    "productfeature", "Product Feature", "product",
    description="Specific characteristic of a product that distinguishes it from others products",
    example="ultra-lightweight",
)
def product_feature(fake, params):
    return pick(fake, PRODUCT_FEATURES)


@section.func(
    "productmaterial", "Product Material", "product",
    description="The substance from which a product is made, influencing its appearance, durability, and properties",
    example="brass",
)
def product_material(fake, params):
    return pick(fake, PRODUCT_MATERIALS)


@section.func(
    "productupc", "Product UPC", "product",
    description="Standardized barcode used for product identification and tracking in retail and commerce",
    example="012780949980",
)
def product_upc(fake, params):
    return _upc(fake)


@section.func(
    "appname", "App Name", "app",
    description="Software program designed for a specific purpose or task on a computer or mobile device",
    example="Parkrespond",
)
def app_name(fake, params):
    style = fake.random.randrange(3)
    if style == 0:
        return f"{pick(fake, APP_ADJECTIVES)}{pick(fake, APP_NOUNS)}"
    if style == 1:
        return f"{pick(fake, APP_NOUNS)}{fake.word().title()}"
    return f"{fake.word().title()} {pick(fake, APP_NOUNS)}"


@section.func(
    "appversion", "App Version", "app",
    description="Particular release of an application in Semantic Versioning format",
    example="1.12.14",
)
def app_version(fake, params):
    rng = fake.random
    return f"{rng.randint(1, 5)}.{rng.randint(1, 20)}.{rng.randint(1, 20)}"


@section.func(
    "appauthor", "App Author", "app",
    description="Person or group creating and developing an application",
    example="Qado Energy, Inc.",
)
def app_author(fake, params):
    return fake.name() if fake.random.randrange(2) else fake.company()
