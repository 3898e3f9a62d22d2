"""Payment and finance generators."""

from datetime import date

from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import OutputType, ParamType

section = CatalogSection("payment")

CARD_TYPES = [
    "amex", "diners", "discover", "jcb15", "jcb16", "maestro",
    "mastercard", "visa13", "visa16", "visa19",
]

# Well-known test card numbers accepted by payment sandboxes.
TEST_CARDS = [
    "4111-1111-1111-1111",
    "4242-4242-4242-4242",
    "4000-0566-5566-5556",
    "5555-5555-5555-4444",
    "5200-8282-8282-8210",
    "5105-1051-0510-5100",
]

ISIN_COUNTRIES = ["US", "GB", "DE", "FR", "JP", "CA", "CH", "NL", "AU", "IE"]

BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
ALPHANUMERIC = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _luhn_check_digit(digits: str) -> str:
    total = 0
    for index, char in enumerate(reversed(digits)):
        value = int(char)
        if index % 2 == 0:
            value *= 2
            if value > 9:
                value -= 9
        total += value
    return str((10 - total % 10) % 10)


def _cusip_check_digit(body: str) -> str:
    total = 0
    for index, char in enumerate(body):
        value = int(char) if char.isdigit() else ord(char) - ord("A") + 10
        if index % 2 == 1:
            value *= 2
        total += value // 10 + value % 10
    return str((10 - total % 10) % 10)


def _cusip(fake) -> str:
    body = "".join(fake.random.choice(ALPHANUMERIC) for _ in range(8))
    return body + _cusip_check_digit(body)


def _with_gaps(number: str) -> str:
    return " ".join(number[i:i + 4] for i in range(0, len(number), 4))


@section.func(
    "price", "Price", "payment",
    description="The amount of money or value assigned to a product, service, or asset in a transaction",
    example="92.26",
    output=OutputType.FLOAT,
    params=[
        param("min", "Min", ParamType.FLOAT, default="0", description="Minimum price value"),
        param("max", "Max", ParamType.FLOAT, default="1000", description="Maximum price value"),
    ],
)
def price(fake, params):
    min_value = params.get_float("min")
    max_value = params.get_float("max")
    if min_value > max_value:
        raise ValueError("min must be less than or equal to max")
    return round(fake.random.uniform(min_value, max_value), 2)


@section.func(
    "creditcard", "Credit Card", "payment",
    description="Plastic card allowing users to make purchases on credit, with payment due at a later date",
    example='{"type": "VISA 16 digit", "number": "4136459948995375", "exp": "01/27", "cvv": "513"}',
    output=OutputType.MAP_ANY,
)
def credit_card(fake, params):
    card_type = pick(fake, CARD_TYPES)
    return {
        "type": fake.credit_card_provider(card_type),
        "number": fake.credit_card_number(card_type),
        "exp": fake.credit_card_expire(),
        "cvv": fake.credit_card_security_code(card_type),
    }


@section.func(
    "creditcardtype", "Credit Card Type", "payment",
    description="Classification of credit cards based on the issuing company",
    example="Visa",
)
def credit_card_type(fake, params):
    return fake.credit_card_provider()


@section.func(
    "creditcardnumber", "Credit Card Number", "payment",
    description="Unique numerical identifier on a credit card used for making electronic payments and transactions",
    example="4136459948995369",
    params=[
        param(
            "types", "Types", ParamType.STRING_ARRAY, default="all",
            options=["all", *CARD_TYPES],
            description="A select number of types you want to use when generating a credit card number",
        ),
        param(
            "bins", "Bins", ParamType.STRING_ARRAY, optional=True,
            description="Optional list of prepended bin numbers to pick from",
        ),
        param("gaps", "Gaps", ParamType.BOOL, default="false", description="Whether or not to have gaps in number"),
    ],
)
def credit_card_number(fake, params):
    types = params.get_string_array("types")
    gaps = params.get_bool("gaps")

    if "bins" in params:
        bin_number = pick(fake, params.get_string_array("bins"))
        if not bin_number.isdigit() or len(bin_number) > 15:
            raise ValueError(f"invalid bin number: {bin_number!r}")
        body = bin_number + "".join(
            str(fake.random.randrange(10)) for _ in range(15 - len(bin_number))
        )
        number = body + _luhn_check_digit(body)
    else:
        if "all" in types:
            card_type = None
        else:
            unknown = [t for t in types if t not in CARD_TYPES]
            if unknown:
                raise ValueError(f"unknown credit card type: {unknown[0]}")
            card_type = pick(fake, types)
        number = fake.credit_card_number(card_type)

    return _with_gaps(number) if gaps else number


@section.func(
    "creditcardexp", "Credit Card Exp", "payment",
    description="Date when a credit card becomes invalid and cannot be used for transactions",
    example="01/27",
)
def credit_card_exp(fake, params):
    return fake.credit_card_expire()


@section.func(
    "creditcardcvv", "Credit Card CVV", "payment",
    description="Three or four-digit security code on a credit card used for online and remote transactions",
    example="513",
)
def credit_card_cvv(fake, params):
    return fake.numerify("###")


@section.func(
    "creditcardstring", "Credit Card Number Formatted", "payment",
    description="Unique numerical identifier on a credit card used for making electronic payments and transactions",
    example="4136-4599-4899-5369",
)
def credit_card_number_formatted(fake, params):
    return pick(fake, TEST_CARDS)


@section.func(
    "creditcardexpmonth", "Credit Card Exp Month", "payment",
    description="Month of the date when a credit card becomes invalid and cannot be used for transactions",
    example="11",
)
def credit_card_exp_month(fake, params):
    return f"{1 + fake.random.randrange(12):02d}"


@section.func(
    "creditcardexpyear", "Credit Card Exp Year", "payment",
    description="Year of the date when a credit card becomes invalid and cannot be used for transactions",
    example="28",
)
def credit_card_exp_year(fake, params):
    current = date.today().year - 2000
    return str(current + 1 + fake.random.randrange(10))


@section.func(
    "achrouting", "ACH Routing Number", "payment",
    description="Unique nine-digit code used in the U.S. for identifying the bank and processing electronic transactions",
    example="513715684",
)
def ach_routing(fake, params):
    return fake.aba()


@section.func(
    "achaccount", "ACH Account Number", "payment",
    description="A bank account number used for Automated Clearing House transactions and electronic transfers",
    example="491527954328",
)
def ach_account(fake, params):
    return fake.numerify("############")


@section.func(
    "bitcoinaddress", "Bitcoin Address", "payment",
    description="Cryptographic identifier used to receive, store, and send Bitcoin cryptocurrency in a peer-to-peer network",
    example="1lWLbxojXq6BqWX7X60VkcDIvYA",
)
def bitcoin_address(fake, params):
    rng = fake.random
    length = rng.randint(25, 34)
    return rng.choice("13") + "".join(rng.choice(BASE58) for _ in range(length))


@section.func(
    "bitcoinprivatekey", "Bitcoin Private Key", "payment",
    description="Secret, secure code that allows the owner to access and control their Bitcoin holdings",
    example="5vrbXTADWJ6sQBSYd6lLkG97jljNc0X9VPBvbVqsXAFtNxVLr7",
)
def bitcoin_private_key(fake, params):
    rng = fake.random
    return "5" + rng.choice("HJK") + "".join(rng.choice(BASE58) for _ in range(49))


@section.func(
    "currency", "Currency", "payment",
    description="Medium of exchange, often in the form of paper money or coins, used for trade and transactions",
    example='{"short": "IQD", "long": "Iraq Dinar"}',
    output=OutputType.MAP_STRING,
)
def currency(fake, params):
    code, name = fake.currency()
    return {"short": code, "long": name}


@section.func(
    "currencyshort", "Currency Short", "payment",
    description="Short 3-letter word used to represent a specific currency",
    example="USD",
)
def currency_short(fake, params):
    return fake.currency_code()


@section.func(
    "currencylong", "Currency Long", "payment",
    description="Complete name of a specific currency used for official identification in financial transactions",
    example="United States Dollar",
)
def currency_long(fake, params):
    return fake.currency_name()


@section.func(
    "cusip", "CUSIP", "finance",
    description="Unique identifier for securities, especially bonds, in the United States and Canada",
    example="38259P508",
)
def cusip(fake, params):
    return _cusip(fake)


@section.func(
    "isin", "ISIN", "finance",
    description="International standard code for uniquely identifying securities worldwide",
    example="CVLRQCZBXQ97",
)
def isin(fake, params):
    body = pick(fake, ISIN_COUNTRIES) + _cusip(fake)
    digits = "".join(str(int(char, 36)) for char in body)
    return body + _luhn_check_digit(digits)
