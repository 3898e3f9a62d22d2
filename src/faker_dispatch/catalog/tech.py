"""Car, file, error, language and color generators."""

from faker_dispatch.catalog.base import CatalogSection, pick
from faker_dispatch.descriptors.base import OutputType

section = CatalogSection("tech")

CAR_TYPES = [
    "Passenger car compact", "Passenger car medium", "Passenger car heavy", "Passenger car mini",
    "Pickup truck", "Sport utility vehicle", "Van",
]
CAR_FUEL_TYPES = ["CNG", "Diesel", "Electric", "Ethanol", "Gasoline", "LPG"]
CAR_TRANSMISSION_TYPES = ["Automatic", "Manual"]
CAR_MAKERS = [
    "Alfa Romeo", "Audi", "BMW", "Chevrolet", "Fiat", "Ford", "Honda", "Hyundai", "Kia",
    "Lexus", "Mazda", "Mercedes-Benz", "Nissan", "Peugeot", "Porsche", "Renault", "Subaru",
    "Tesla", "Toyota", "Volkswagen", "Volvo",
]
CAR_MODELS = [
    "Accord", "Camry", "Civic", "Corolla", "Cx-5", "Escape", "F150", "Focus", "Golf",
    "Impreza", "Model 3", "Mustang", "Outback", "Passat", "Prius", "Rav4", "Sentra",
    "Tucson", "Wrangler", "Xc90",
]

FILE_EXTENSIONS = [
    "avi", "bmp", "csv", "doc", "docx", "exe", "gif", "gz", "html", "jpg", "json", "md",
    "mp3", "mp4", "pdf", "png", "ppt", "py", "svg", "tar", "txt", "wav", "xls", "xml", "zip",
]

ERROR_OBJECTS = [
    "argument", "buffer", "connection", "database", "header", "hostname", "method",
    "object", "parameter", "query", "request", "response", "route", "server", "session",
    "sql", "storage", "token", "value",
]
DATABASE_ERRORS = [
    "connection refused", "connection timed out", "deadlock detected", "duplicate key value violates unique constraint",
    "invalid transaction state", "query execution error", "relation does not exist",
    "too many connections", "unique constraint violation",
]
GRPC_ERRORS = [
    "aborted", "already exists", "canceled", "data loss", "deadline exceeded",
    "failed precondition", "internal", "invalid argument", "not found", "out of range",
    "permission denied", "resource exhausted", "unauthenticated", "unavailable", "unimplemented",
]
HTTP_CLIENT_ERRORS = [
    "bad request", "conflict", "forbidden", "gone", "method not allowed", "not acceptable",
    "not found", "payload too large", "request timeout", "too many requests", "unauthorized",
    "unprocessable entity", "unsupported media type",
]
HTTP_SERVER_ERRORS = [
    "bad gateway", "gateway timeout", "http version not supported", "insufficient storage",
    "internal server error", "loop detected", "not implemented", "service unavailable",
]
RUNTIME_ERRORS = [
    "address out of bounds", "assignment to entry in nil map", "divide by zero",
    "index out of range", "invalid memory address", "nil pointer dereference",
    "stack overflow", "type assertion failed",
]
VALIDATION_ERRORS = [
    "{} is required", "{} must be a valid email", "{} must be at least 8 characters",
    "{} must be unique", "{} has an invalid format", "{} exceeds the maximum length",
]

LANGUAGES = [
    ("Arabic", "ar", "ar-SA"), ("Chinese", "zh", "zh-CN"), ("Dutch", "nl", "nl-NL"),
    ("English", "en", "en-US"), ("French", "fr", "fr-FR"), ("German", "de", "de-DE"),
    ("Greek", "el", "el-GR"), ("Hindi", "hi", "hi-IN"), ("Italian", "it", "it-IT"),
    ("Japanese", "ja", "ja-JP"), ("Korean", "ko", "ko-KR"), ("Polish", "pl", "pl-PL"),
    ("Portuguese", "pt", "pt-BR"), ("Russian", "ru", "ru-RU"), ("Spanish", "es", "es-ES"),
    ("Swedish", "sv", "sv-SE"), ("Turkish", "tr", "tr-TR"), ("Ukrainian", "uk", "uk-UA"),
]
PROGRAMMING_LANGUAGES = [
    "Ada", "Bash", "C", "C#", "C++", "Clojure", "COBOL", "Dart", "Elixir", "Erlang",
    "F#", "Fortran", "Go", "Haskell", "Java", "JavaScript", "Julia", "Kotlin", "Lisp",
    "Lua", "OCaml", "Perl", "PHP", "Python", "R", "Ruby", "Rust", "Scala", "Swift",
    "TypeScript", "Zig",
]

SAFE_COLORS = ["black", "maroon", "green", "navy", "olive", "purple", "teal", "lime", "blue", "silver", "gray", "yellow", "fuchsia", "aqua", "white"]
NICE_COLORS = [
    ["#69d2e7", "#a7dbd8", "#e0e4cc", "#f38630", "#fa6900"],
    ["#fe4365", "#fc9d9a", "#f9cdad", "#c8c8a9", "#83af9b"],
    ["#ecd078", "#d95b43", "#c02942", "#542437", "#53777a"],
    ["#556270", "#4ecdc4", "#c7f464", "#ff6b6b", "#c44d58"],
    ["#774f38", "#e08e79", "#f1d4af", "#ece5ce", "#c5e0dc"],
    ["#e8ddcb", "#cdb380", "#036564", "#033649", "#031634"],
    ["#490a3d", "#bd1550", "#e97f02", "#f8ca00", "#8a9b0f"],
    ["#594f4f", "#547980", "#45ada8", "#9de0ad", "#e5fcc2"],
]


@section.func(
    "car", "Car", "car",
    description="Wheeled motor vehicle used for transportation",
    example='{"type": "Passenger car mini", "fuel": "Gasoline", "transmission": "Automatic", "brand": "Fiat", "model": "Freestyle Fwd", "year": "1991"}',
    output=OutputType.MAP_STRING,
)
def car(fake, params):
    return {
        "type": pick(fake, CAR_TYPES),
        "fuel": pick(fake, CAR_FUEL_TYPES),
        "transmission": pick(fake, CAR_TRANSMISSION_TYPES),
        "brand": pick(fake, CAR_MAKERS),
        "model": pick(fake, CAR_MODELS),
        "year": str(fake.random.randint(1900, 2025)),
    }


@section.func("carmaker", "Car Maker", "car", description="Company or brand that manufactures and designs cars", example="Nissan")
def car_maker(fake, params):
    return pick(fake, CAR_MAKERS)


@section.func("carmodel", "Car Model", "car", description="Specific design or version of a car produced by a manufacturer", example="Aveo")
def car_model(fake, params):
    return pick(fake, CAR_MODELS)


@section.func("cartype", "Car Type", "car", description="Classification of cars based on size, use, or body style", example="Passenger car mini")
def car_type(fake, params):
    return pick(fake, CAR_TYPES)


@section.func("carfueltype", "Car Fuel Type", "car", description="Type of energy source a car uses", example="CNG")
def car_fuel_type(fake, params):
    return pick(fake, CAR_FUEL_TYPES)


@section.func("cartransmissiontype", "Car Transmission Type", "car", description="Mechanism a car uses to transmit power from the engine to the wheels", example="Manual")
def car_transmission_type(fake, params):
    return pick(fake, CAR_TRANSMISSION_TYPES)


@section.func("fileextension", "File Extension", "file", description="Suffix appended to a filename indicating its format or type", example="nes")
def file_extension(fake, params):
    return pick(fake, FILE_EXTENSIONS)


@section.func("filemimetype", "File Mime Type", "file", description="Defines file format and nature for browsers and email clients using standardized identifiers", example="application/json")
def file_mime_type(fake, params):
    return fake.mime_type()


@section.func("error", "Error", "error", description="Message displayed by a computer or software when a problem or mistake is encountered", example="syntax error")
def error(fake, params):
    pool = DATABASE_ERRORS + GRPC_ERRORS + HTTP_CLIENT_ERRORS + HTTP_SERVER_ERRORS + RUNTIME_ERRORS
    return pick(fake, pool)


@section.func("errorobject", "Error Object Word", "error", description="Various categories conveying details about encountered errors", example="protocol")
def error_object(fake, params):
    return pick(fake, ERROR_OBJECTS)


@section.func("errordatabase", "Database Error", "error", description="A problem or issue encountered while accessing or managing a database", example="sql error")
def error_database(fake, params):
    return pick(fake, DATABASE_ERRORS)


@section.func("errorgrpc", "gRPC Error", "error", description="Communication failure in the high-performance, open-source universal RPC framework", example="client protocol error")
def error_grpc(fake, params):
    return pick(fake, GRPC_ERRORS)


@section.func("errorhttp", "HTTP Error", "error", description="A problem with a web http request", example="invalid method")
def error_http(fake, params):
    return pick(fake, HTTP_CLIENT_ERRORS + HTTP_SERVER_ERRORS)


@section.func("errorhttpclient", "HTTP Client Error", "error", description="Failure or issue occurring within a client software that sends requests to web servers", example="request timeout")
def error_http_client(fake, params):
    return pick(fake, HTTP_CLIENT_ERRORS)


@section.func("errorhttpserver", "HTTP Server Error", "error", description="Failure or issue occurring within a server software that receives requests from clients", example="internal server error")
def error_http_server(fake, params):
    return pick(fake, HTTP_SERVER_ERRORS)


@section.func("errorruntime", "Runtime Error", "error", description="Malfunction occuring during program execution, often causing abrupt termination or unexpected behavior", example="address out of bounds")
def error_runtime(fake, params):
    return pick(fake, RUNTIME_ERRORS)


@section.func("errorvalidation", "Validation Error", "error", description="Occurs when input data fails to meet required criteria or format specifications", example="missing required field")
def error_validation(fake, params):
    return pick(fake, VALIDATION_ERRORS).format(pick(fake, ERROR_OBJECTS))


@section.func("language", "Language", "language", description="System of communication using symbols, words, and grammar to convey meaning between individuals", example="Kazakh")
def language(fake, params):
    return pick(fake, LANGUAGES)[0]


@section.func("languageabbreviation", "Language Abbreviation", "language", description="Shortened form of a language's name", example="kk")
def language_abbreviation(fake, params):
    return pick(fake, LANGUAGES)[1]


@section.func("languagebcp", "Language BCP", "language", description="Set of guidelines for standardizing language tags", example="en-US")
def language_bcp(fake, params):
    return pick(fake, LANGUAGES)[2]


@section.func("programminglanguage", "Programming Language", "language", description="Formal system of instructions used to create software and perform computational tasks", example="Go")
def programming_language(fake, params):
    return pick(fake, PROGRAMMING_LANGUAGES)


@section.func("color", "Color", "color", description="Hue seen by the eye, returns the name of the color like red or blue", example="MediumOrchid")
def color(fake, params):
    return fake.color_name()


@section.func("hexcolor", "Hex Color", "color", description="Six-digit code representing a color in the color model", example="#a99fb4")
def hex_color(fake, params):
    return fake.hex_color()


@section.func("safecolor", "Safe Color", "color", description="Colors displayed consistently on different web browsers and devices", example="black")
def safe_color(fake, params):
    return pick(fake, SAFE_COLORS)


@section.func(
    "rgbcolor", "RGB Color", "color",
    description="Color defined by red, green, and blue light values",
    example="[85, 224, 195]",
    output=OutputType.INT_ARRAY,
)
def rgb_color(fake, params):
    return [fake.random.randrange(256) for _ in range(3)]


@section.func(
    "nicecolors", "Nice Colors", "color",
    description="Attractive and appealing combinations of colors, returns an list of color hex codes",
    example='["#cfffdd", "#b4dec1", "#5c5863", "#a85163", "#ff1f4c"]',
    output=OutputType.STRING_ARRAY,
)
def nice_colors(fake, params):
    return list(pick(fake, NICE_COLORS))
