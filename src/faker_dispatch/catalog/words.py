"""Word, sentence and paragraph generators, including the lorem ipsum,
hipster and hacker vocabularies.
"""

from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import ParamType

section = CatalogSection("word")

NOUNS = [
    "aardvark", "account", "army", "bakery", "bravo", "butter", "choir", "computer",
    "congolese", "crowd", "daughter", "engine", "forest", "garden", "harbor", "island",
    "lung", "mirror", "mountain", "party", "person", "riches", "river", "teacher",
]
VERBS = [
    "bathe", "brace", "chase", "cough", "dance", "drink", "fly", "gather", "guess",
    "heat", "jump", "knit", "laugh", "listen", "paint", "read", "run", "sing", "speak",
    "stand", "swim", "think", "wander", "write",
]
ADVERBS = [
    "abroad", "anyway", "badly", "calmly", "daily", "early", "elsewhere", "eventually",
    "frankly", "gladly", "here", "later", "loudly", "often", "quickly", "rarely", "soon",
    "then", "today", "upstairs",
]
ADJECTIVES = [
    "adorable", "brave", "Chinese", "clumsy", "crowded", "elegant", "fancy", "fierce",
    "gentle", "grumpy", "helpful", "jolly", "lively", "nervous", "obedient", "proud",
    "quaint", "shiny", "tender", "zealous",
]
PREPOSITIONS = [
    "about", "above", "across", "after", "against", "among", "around", "before",
    "behind", "below", "beside", "between", "by", "down", "from", "in", "into", "near",
    "of", "off", "on", "onto", "over", "through", "under", "up", "with",
]
PRONOUNS = [
    "I", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
    "anything", "nobody", "those", "whichever", "mine", "theirs",
]
CONNECTIVES = [
    "although", "because", "besides", "consequently", "furthermore", "however",
    "indeed", "meanwhile", "moreover", "nevertheless", "otherwise", "therefore",
]
INTERJECTIONS = ["alas", "aha", "bravo", "eek", "hey", "hmm", "hurray", "oops", "ouch", "phew", "wow", "yikes"]
QUOTE_AUTHORS = ["Markus Moen", "Belinda Smith", "Ada Cole", "Jonas Reed", "Tessa Hart"]

LOREM = [
    "a", "ab", "accusamus", "ad", "adipisci", "alias", "aliquam", "amet", "animi",
    "aperiam", "aspernatur", "assumenda", "at", "atque", "aut", "autem", "beatae",
    "blanditiis", "commodi", "consectetur", "corporis", "culpa", "cumque", "delectus",
    "deleniti", "dolor", "dolore", "dolorem", "ducimus", "ea", "eaque", "eius", "enim",
    "eos", "error", "esse", "est", "et", "eum", "ex", "excepturi", "explicabo", "facere",
    "facilis", "fugiat", "harum", "hic", "id", "illo", "impedit", "ipsa", "ipsam",
    "ipsum", "iste", "itaque", "labore", "laboriosam", "laudantium", "lorem", "magnam",
    "maiores", "minima", "modi", "molestiae", "nam", "natus", "nemo", "nihil", "nisi",
    "nobis", "non", "numquam", "odio", "officia", "omnis", "optio", "pariatur", "porro",
    "quae", "quam", "quas", "qui", "quia", "quibusdam", "quis", "quod", "ratione",
    "recusandae", "rem", "repellat", "rerum", "saepe", "sapiente", "sed", "sint", "sit",
    "sunt", "tempora", "tenetur", "ullam", "unde", "ut", "vel", "velit", "veniam",
    "vero", "vitae", "voluptas", "voluptate", "voluptatem",
]

HIPSTER = [
    "8-bit", "artisan", "asymmetrical", "austin", "authentic", "banjo", "beard",
    "bicycle rights", "biodiesel", "brooklyn", "brunch", "butcher", "chambray",
    "chia", "cold-pressed", "craft beer", "cronut", "distillery", "droning",
    "fanny pack", "fixie", "flannel", "forage", "freegan", "gastropub", "gluten-free",
    "hashtag", "heirloom", "helvetica", "kale chips", "kinfolk", "kombucha", "letterpress",
    "lomo", "meggings", "microdosing", "mixtape", "mustache", "normcore", "organic",
    "paleo", "pickled", "polaroid", "pour-over", "quinoa", "ramps", "raw denim",
    "selfies", "semiotics", "shoreditch", "single-origin coffee", "slow-carb",
    "sriracha", "sustainable", "tattooed", "thundercats", "tofu", "tote bag", "typewriter",
    "ugh", "umami", "vegan", "vinyl", "wayfarers", "williamsburg", "xoxo", "yr",
]

HACKER_ABBREVIATIONS = [
    "ADP", "AGP", "AI", "API", "ASCII", "CLI", "COM", "CSS", "DNS", "EXE", "FTP",
    "GB", "HDD", "HEX", "HTTP", "IB", "IP", "JBOD", "JSON", "OCR", "PCI", "PNG",
    "RAM", "RSS", "SAS", "SCSI", "SDD", "SMS", "SMTP", "SQL", "SSD", "SSL", "TCP",
    "THX", "TLS", "UDP", "USB", "UTF8", "XML", "XSS",
]
HACKER_ADJECTIVES = [
    "auxiliary", "back-end", "bluetooth", "cross-platform", "digital", "haptic",
    "mobile", "multi-byte", "neural", "online", "open-source", "optical", "primary",
    "redundant", "solid state", "virtual", "wireless",
]
HACKER_NOUNS = [
    "alarm", "application", "array", "bandwidth", "bus", "capacitor", "card",
    "circuit", "driver", "feed", "firewall", "hard drive", "interface", "matrix",
    "microchip", "monitor", "panel", "pixel", "port", "program", "protocol",
    "sensor", "system", "transmitter",
]
HACKER_VERBS = [
    "back up", "bypass", "calculate", "compress", "connect", "copy", "generate",
    "hack", "index", "input", "navigate", "override", "parse", "program", "quantify",
    "reboot", "synthesize", "transmit",
]
HACKER_INGVERBS = [
    "backing up", "bypassing", "calculating", "compressing", "connecting", "copying",
    "generating", "hacking", "indexing", "navigating", "overriding", "parsing",
    "programming", "quantifying", "synthesizing", "transmitting",
]
HACKER_PHRASES = [
    "If we {verb} the {noun}, we can get to the {abbreviation} {noun} through the {adjective} {abbreviation} {noun}!",
    "We need to {verb} the {adjective} {abbreviation} {noun}!",
    "Try to {verb} the {abbreviation} {noun}, maybe it will {verb} the {adjective} {noun}!",
    "You can't {verb} the {noun} without {ingverb} the {adjective} {abbreviation} {noun}!",
    "Use the {adjective} {abbreviation} {noun}, then you can {verb} the {adjective} {noun}!",
    "The {abbreviation} {noun} is down, {verb} the {adjective} {noun} so we can {verb} the {abbreviation} {noun}!",
    "{ingverb} the {noun} won't do anything, we need to {verb} the {adjective} {abbreviation} {noun}!",
    "I'll {verb} the {adjective} {abbreviation} {noun}, that should {noun} the {abbreviation} {noun}!",
]
QUESTION_STARTERS = ["Can", "Did", "Does", "Has", "How", "Should", "What", "When", "Where", "Why", "Will"]

ENGLISH = NOUNS + VERBS + ADVERBS + ADJECTIVES + PREPOSITIONS + PRONOUNS


def _check_count(value: int, field: str, limit: int) -> int:
    if value <= 0 or value > limit:
        raise ValueError(f"invalid {field}, must be greater than 0, less than {limit}")
    return value


def sentence_from(fake, vocabulary, word_count: int) -> str:
    words = [pick(fake, vocabulary) for _ in range(word_count)]
    text = " ".join(words)
    return text[:1].upper() + text[1:] + "."


def paragraph_from(fake, vocabulary, params) -> str:
    paragraph_count = _check_count(params.get_int("paragraphcount"), "paragraph count", 20)
    sentence_count = _check_count(params.get_int("sentencecount"), "sentence count", 20)
    word_count = _check_count(params.get_int("wordcount"), "word count", 50)
    separator = params.get_string("paragraphseparator")

    paragraphs = []
    for _ in range(paragraph_count):
        sentences = [sentence_from(fake, vocabulary, word_count) for _ in range(sentence_count)]
        paragraphs.append(" ".join(sentences))
    return separator.join(paragraphs)


SENTENCE_PARAMS = [
    param("wordcount", "Word Count", ParamType.INT, default="5", description="Number of words in a sentence"),
]
PARAGRAPH_PARAMS = [
    param("paragraphcount", "Paragraph Count", ParamType.INT, default="2", description="Number of paragraphs"),
    param("sentencecount", "Sentence Count", ParamType.INT, default="2", description="Number of sentences in a paragraph"),
    param("wordcount", "Word Count", ParamType.INT, default="5", description="Number of words in a sentence"),
    param("paragraphseparator", "Paragraph Separator", ParamType.STRING, default="<br />", description="String value to add between paragraphs"),
]


def _sentence(fake, vocabulary, params) -> str:
    word_count = _check_count(params.get_int("wordcount"), "word count", 1000)
    return sentence_from(fake, vocabulary, word_count)


@section.func("noun", "Noun", "word", description="Person, place, thing, or idea, named or referred to in a sentence", example="aunt")
def noun(fake, params):
    return pick(fake, NOUNS)


@section.func("verb", "Verb", "word", description="Word expressing an action, event or state", example="release")
def verb(fake, params):
    return pick(fake, VERBS)


@section.func("adverb", "Adverb", "word", description="Word that modifies verbs, adjectives, or other adverbs", example="smoothly")
def adverb(fake, params):
    return pick(fake, ADVERBS)


@section.func("adjective", "Adjective", "word", description="Word describing or modifying a noun", example="genuine")
def adjective(fake, params):
    return pick(fake, ADJECTIVES)


@section.func("preposition", "Preposition", "word", description="Words used to express the relationship of a noun or pronoun to other words in a sentence", example="other than")
def preposition(fake, params):
    return pick(fake, PREPOSITIONS)


@section.func("pronoun", "Pronoun", "word", description="Word used in place of a noun to avoid repetition", example="me")
def pronoun(fake, params):
    return pick(fake, PRONOUNS)


@section.func("connective", "Connective", "word", description="Word used to connect words or sentences", example="such as")
def connective(fake, params):
    return pick(fake, CONNECTIVES)


@section.func("interjection", "Interjection", "word", description="Word expressing emotion", example="wow")
def interjection(fake, params):
    return pick(fake, INTERJECTIONS)


@section.func("word", "Word", "word", description="Basic unit of language representing a concept or thing, consisting of letters and having meaning", example="man")
def word(fake, params):
    return pick(fake, ENGLISH)


@section.func(
    "sentence", "Sentence", "word",
    description="Set of words expressing a statement, question, exclamation, or command",
    example="Interpret context record river mind.",
    params=SENTENCE_PARAMS,
)
def sentence(fake, params):
    return _sentence(fake, ENGLISH, params)


@section.func(
    "paragraph", "Paragraph", "word",
    description="Distinct section of writing covering a single theme, composed of multiple sentences",
    example="Interpret context record river mind press self should compare. Ahead here bravo party.",
    params=PARAGRAPH_PARAMS,
)
def paragraph(fake, params):
    return paragraph_from(fake, ENGLISH, params)


@section.func(
    "phrase", "Phrase", "word",
    description="A small group of words standing together",
    example="time will tell",
)
def phrase(fake, params):
    return f"{pick(fake, PREPOSITIONS)} the {pick(fake, ADJECTIVES)} {pick(fake, NOUNS)}"


@section.func(
    "question", "Question", "word",
    description="Statement formulated to inquire or seek clarification",
    example="Roof chia echo?",
)
def question(fake, params):
    words = [pick(fake, ENGLISH) for _ in range(fake.random.randint(3, 8))]
    return f"{pick(fake, QUESTION_STARTERS)} {' '.join(words)}?"


@section.func(
    "quote", "Quote", "word",
    description="Direct repetition of someone else's words",
    example='"Roof chia echo." - Lura Lockman',
)
def quote(fake, params):
    text = sentence_from(fake, ENGLISH, fake.random.randint(3, 10))
    return f'"{text}" - {pick(fake, QUOTE_AUTHORS)}'


@section.func("loremipsumword", "Lorem Ipsum Word", "word", description="Word of the Lorem Ipsum placeholder text used in design and publishing", example="quia")
def lorem_ipsum_word(fake, params):
    return pick(fake, LOREM)


@section.func(
    "loremipsumsentence", "Lorem Ipsum Sentence", "word",
    description="Sentence of the Lorem Ipsum placeholder text used in design and publishing",
    example="Quia quae repellat consequatur quidem.",
    params=SENTENCE_PARAMS,
)
def lorem_ipsum_sentence(fake, params):
    return _sentence(fake, LOREM, params)


@section.func(
    "loremipsumparagraph", "Lorem Ipsum Paragraph", "word",
    description="Paragraph of the Lorem Ipsum placeholder text used in design and publishing",
    example="Quia quae repellat consequatur quidem nisi quo qui voluptatum accusantium.",
    params=PARAGRAPH_PARAMS,
)
def lorem_ipsum_paragraph(fake, params):
    return paragraph_from(fake, LOREM, params)


@section.func("hipsterword", "Hipster Word", "hipster", description="Trendy and unconventional vocabulary used by hipsters to express unique cultural preferences", example="microdosing")
def hipster_word(fake, params):
    return pick(fake, HIPSTER)


@section.func(
    "hipstersentence", "Hipster Sentence", "hipster",
    description="Sentence showcasing the use of trendy and unconventional vocabulary associated with hipster culture",
    example="Microdosing roof chia echo pickled.",
    params=SENTENCE_PARAMS,
)
def hipster_sentence(fake, params):
    return _sentence(fake, HIPSTER, params)


@section.func(
    "hipsterparagraph", "Hipster Paragraph", "hipster",
    description="Paragraph showcasing the use of trendy and unconventional vocabulary associated with hipster culture",
    example="Microdosing roof chia echo pickled meditation cold-pressed raw denim fingerstache normcore.",
    params=PARAGRAPH_PARAMS,
)
def hipster_paragraph(fake, params):
    return paragraph_from(fake, HIPSTER, params)


@section.func("hackerabbreviation", "Hacker Abbreviation", "hacker", description="Abbreviations and acronyms commonly used in the hacking and cybersecurity community", example="ADP")
def hacker_abbreviation(fake, params):
    return pick(fake, HACKER_ABBREVIATIONS)


@section.func("hackeradjective", "Hacker Adjective", "hacker", description="Adjectives describing terms often associated with hackers and cybersecurity experts", example="wireless")
def hacker_adjective(fake, params):
    return pick(fake, HACKER_ADJECTIVES)


@section.func("hackernoun", "Hacker Noun", "hacker", description="Noun representing an element, tool, or concept within the realm of hacking and cybersecurity", example="driver")
def hacker_noun(fake, params):
    return pick(fake, HACKER_NOUNS)


@section.func("hackerverb", "Hacker Verb", "hacker", description="Verbs associated with actions and activities in the field of hacking and cybersecurity", example="synthesize")
def hacker_verb(fake, params):
    return pick(fake, HACKER_VERBS)


@section.func("hackeringverb", "Hackering Verb", "hacker", description="Verb describing actions and activities related to hacking, often involving computer systems and security", example="connecting")
def hackering_verb(fake, params):
    return pick(fake, HACKER_INGVERBS)


@section.func(
    "hackerphrase", "Hacker Phrase", "hacker",
    description="Informal jargon and slang used in the hacking and cybersecurity community",
    example="If we calculate the program, we can get to the AI pixel through the redundant XSS matrix!",
)
def hacker_phrase(fake, params):
    template = pick(fake, HACKER_PHRASES)
    # Placeholders repeat, so each occurrence draws its own word.
    parts = template.split("{")
    result = [parts[0]]
    vocab = {
        "verb": HACKER_VERBS,
        "ingverb": HACKER_INGVERBS,
        "noun": HACKER_NOUNS,
        "adjective": HACKER_ADJECTIVES,
        "abbreviation": HACKER_ABBREVIATIONS,
    }
    for part in parts[1:]:
        key, rest = part.split("}", 1)
        result.append(pick(fake, vocab[key]) + rest)
    text = "".join(result)
    return text[:1].upper() + text[1:]
