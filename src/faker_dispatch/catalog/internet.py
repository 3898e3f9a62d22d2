"""Internet generators, including authentication, HTML and image helpers."""

from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import OutputType, ParamType

section = CatalogSection("internet")

HTTP_METHODS = ["HEAD", "GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
HTTP_VERSIONS = ["HTTP/1.0", "HTTP/1.1", "HTTP/2.0"]
HTTP_STATUS_SIMPLE = [200, 301, 302, 400, 404, 500]
HTTP_STATUS = [
    100, 101, 102, 103,
    200, 201, 202, 203, 204, 205, 206,
    300, 301, 302, 303, 304, 307, 308,
    400, 401, 402, 403, 404, 405, 406, 407, 408, 409, 410, 411, 412, 413, 414,
    415, 416, 417, 418, 422, 425, 426, 428, 429, 431, 451,
    500, 501, 502, 503, 504, 505, 506, 507, 508, 510, 511,
]
LOG_LEVELS = ["trace", "debug", "info", "notice", "warning", "error", "critical", "fatal"]
INPUT_NAMES = [
    "first_name", "last_name", "email", "phone", "address", "city", "zip",
    "password", "username", "birthdate", "message", "title", "comment", "gender",
]

LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMERIC = "0123456789"
SPECIAL = "@#$%&?|!(){}<>=*+-_:;,."
SPACE = " "


@section.func(
    "url", "URL", "internet",
    description="Web address that specifies the location of a resource on the internet",
    example="http://www.principalproductize.biz/clicks-and-mortar/reintermediate",
)
def url(fake, params):
    return fake.url()


@section.func(
    "domainname", "Domain Name", "internet",
    description="Human-readable web address used to identify websites on the internet",
    example="centraltarget.biz",
)
def domain_name(fake, params):
    return fake.domain_name()


@section.func(
    "domainsuffix", "Domain Suffix", "internet",
    description="The part of a domain name that comes after the last dot, indicating its type or purpose",
    example="org",
)
def domain_suffix(fake, params):
    return fake.tld()


@section.func(
    "ipv4address", "IPv4 Address", "internet",
    description="Numerical label assigned to devices on a network for identification and communication",
    example="222.83.191.222",
)
def ipv4_address(fake, params):
    return fake.ipv4()


@section.func(
    "ipv6address", "IPv6 Address", "internet",
    description="Numerical label assigned to devices on a network, providing a larger address space than IPv4",
    example="2001:cafe:8898:ee17:bc35:9064:5866:d019",
)
def ipv6_address(fake, params):
    return fake.ipv6()


@section.func(
    "macaddress", "MAC Address", "internet",
    description="Unique identifier assigned to network interfaces, often used in Ethernet networks",
    example="cb:ce:06:94:22:e9",
)
def mac_address(fake, params):
    return fake.mac_address()


@section.func(
    "httpmethod", "HTTP Method", "internet",
    description="Verb used in HTTP requests to specify the desired action to be performed on a resource",
    example="HEAD",
)
def http_method(fake, params):
    return pick(fake, HTTP_METHODS)


@section.func(
    "httpstatuscode", "HTTP Status Code", "internet",
    description="Random http status code",
    example="200",
    output=OutputType.INT,
)
def http_status_code(fake, params):
    return pick(fake, HTTP_STATUS)


@section.func(
    "httpstatuscodesimple", "HTTP Status Code Simple", "internet",
    description="Three-digit number returned by a web server to indicate the outcome of an HTTP request",
    example="404",
    output=OutputType.INT,
)
def http_status_code_simple(fake, params):
    return pick(fake, HTTP_STATUS_SIMPLE)


@section.func(
    "httpversion", "HTTP Version", "internet",
    description="Number indicating the version of the HTTP protocol used for communication between a client and a server",
    example="HTTP/1.1",
)
def http_version(fake, params):
    return pick(fake, HTTP_VERSIONS)


@section.func(
    "loglevel", "Log Level", "internet",
    description="Classification used in logging to indicate the severity or priority of a log entry",
    example="error",
)
def log_level(fake, params):
    return pick(fake, LOG_LEVELS)


@section.func(
    "useragent", "User Agent", "internet",
    description="String sent by a web browser to identify itself when requesting web content",
    example="Mozilla/5.0 (Windows NT 5.0) AppleWebKit/5362 (KHTML, like Gecko) Chrome/37.0.834.0 Mobile Safari/5362",
)
def user_agent(fake, params):
    return fake.user_agent()


@section.func(
    "chromeuseragent", "Chrome User Agent", "internet",
    description="The specific identification string sent by the Google Chrome web browser when making requests on the internet",
    example="Mozilla/5.0 (X11; Linux i686) AppleWebKit/5312 (KHTML, like Gecko) Chrome/39.0.836.0 Mobile Safari/5312",
)
def chrome_user_agent(fake, params):
    return fake.chrome()


@section.func(
    "firefoxuseragent", "Firefox User Agent", "internet",
    description="The specific identification string sent by the Firefox web browser when making requests on the internet",
    example="Mozilla/5.0 (Macintosh; U; PPC Mac OS X 10_8_3 rv:7.0) Gecko/1900-07-01 Firefox/37.0",
)
def firefox_user_agent(fake, params):
    return fake.firefox()


@section.func(
    "operauseragent", "Opera User Agent", "internet",
    description="The specific identification string sent by the Opera web browser when making requests on the internet",
    example="Opera/8.39 (Macintosh; U; PPC Mac OS X 10_8_7; en-US) Presto/2.9.335 Version/10.00",
)
def opera_user_agent(fake, params):
    return fake.opera()


@section.func(
    "safariuseragent", "Safari User Agent", "internet",
    description="The specific identification string sent by the Safari web browser when making requests on the internet",
    example="Mozilla/5.0 (iPad; CPU OS 8_3_2 like Mac OS X; en-US) AppleWebKit/531.15.6 (KHTML, like Gecko) Version/4.0.5 Mobile/8B120 Safari/6531.15.6",
)
def safari_user_agent(fake, params):
    return fake.safari()


@section.func(
    "inputname", "Input Name", "html",
    description="Attribute used to define the name of an input element in web forms",
    example="first_name",
)
def input_name(fake, params):
    return pick(fake, INPUT_NAMES)


@section.func(
    "imageurl", "Image URL", "image",
    description="Web address pointing to an image file that can be accessed and displayed online",
    example="https://picsum.photos/500/500",
    params=[
        param("width", "Width", ParamType.INT, default="500", description="Image width in px"),
        param("height", "Height", ParamType.INT, default="500", description="Image height in px"),
    ],
)
def image_url(fake, params):
    width = params.get_int("width")
    height = params.get_int("height")
    if width <= 0 or height <= 0:
        raise ValueError("image width and height must be positive")
    return f"https://picsum.photos/{width}/{height}"


@section.func(
    "username", "Username", "auth",
    description="Unique identifier assigned to a user for accessing an account or system",
    example="Daniel1364",
)
def username(fake, params):
    return fake.user_name()


@section.func(
    "password", "Password", "auth",
    description="Secret word or phrase used to authenticate access to a system or account",
    example="EEP+wwpk 4lU-eHNXlJZ4n K9%v&TZ9e",
    params=[
        param("lower", "Lower", ParamType.BOOL, default="true", description="Whether or not to add lower case characters"),
        param("upper", "Upper", ParamType.BOOL, default="true", description="Whether or not to add upper case characters"),
        param("numeric", "Numeric", ParamType.BOOL, default="true", description="Whether or not to add numeric characters"),
        param("special", "Special", ParamType.BOOL, default="true", description="Whether or not to add special characters"),
        param("space", "Space", ParamType.BOOL, default="false", description="Whether or not to add spaces"),
        param("length", "Length", ParamType.INT, default="12", description="Number of characters in password"),
    ],
)
def password(fake, params):
    length = params.get_int("length")
    if length < 1:
        raise ValueError("password length must be at least 1")

    pools = [
        pool
        for enabled, pool in (
            (params.get_bool("lower"), LOWER),
            (params.get_bool("upper"), UPPER),
            (params.get_bool("numeric"), NUMERIC),
            (params.get_bool("special"), SPECIAL),
            (params.get_bool("space"), SPACE),
        )
        if enabled
    ]
    if not pools:
        pools = [LOWER]

    rng = fake.random
    # One character from each requested pool, the rest from the union.
    chars = [rng.choice(pool) for pool in pools][:length]
    alphabet = "".join(pools)
    chars.extend(rng.choice(alphabet) for _ in range(length - len(chars)))
    rng.shuffle(chars)
    return "".join(chars)
