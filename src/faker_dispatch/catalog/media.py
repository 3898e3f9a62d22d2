"""Books, movies, celebrities, games, minecraft and emoji generators."""

from faker_dispatch.catalog.base import CatalogSection, param, pick
from faker_dispatch.descriptors.base import OutputType, ParamType

section = CatalogSection("media")

BOOK_TITLES = [
    "Anna Karenina", "Beloved", "Crime and Punishment", "Don Quixote", "Great Expectations",
    "Hamlet", "Invisible Man", "Jane Eyre", "Madame Bovary", "Middlemarch", "Moby Dick",
    "Nineteen Eighty Four", "One Hundred Years of Solitude", "Pride and Prejudice",
    "The Brothers Karamazov", "The Great Gatsby", "The Odyssey", "The Stranger",
    "To the Lighthouse", "Ulysses", "War and Peace", "Wuthering Heights",
]
BOOK_AUTHORS = [
    "Albert Camus", "Charles Dickens", "Charlotte Bronte", "Emily Bronte", "F. Scott Fitzgerald",
    "Fyodor Dostoevsky", "Gabriel Garcia Marquez", "George Eliot", "George Orwell",
    "Gustave Flaubert", "Homer", "James Joyce", "Jane Austen", "Leo Tolstoy",
    "Miguel de Cervantes", "Ralph Ellison", "Toni Morrison", "Virginia Woolf",
    "William Shakespeare",
]
BOOK_GENRES = [
    "Adventure", "Comic", "Crime", "Erotic", "Fiction", "Fantasy", "Historical", "Horror",
    "Magic", "Mystery", "Philosophical", "Political", "Romance", "Saga", "Satire",
    "Science", "Speculative", "Thriller", "Urban",
]
MOVIE_NAMES = [
    "12 Angry Men", "Casablanca", "City of God", "Fight Club", "Forrest Gump", "Goodfellas",
    "Inception", "Interstellar", "Parasite", "Psycho", "Pulp Fiction", "Schindler's List",
    "Seven Samurai", "Spirited Away", "The Dark Knight", "The Godfather", "The Matrix",
    "The Shawshank Redemption", "The Silence of the Lambs", "Whiplash",
]
MOVIE_GENRES = [
    "Action", "Adventure", "Animation", "Biography", "Comedy", "Crime", "Documentary",
    "Drama", "Family", "Fantasy", "Film-Noir", "History", "Horror", "Music", "Musical",
    "Mystery", "Romance", "Sci-Fi", "Sport", "Thriller", "War", "Western",
]
CELEBRITY_ACTORS = [
    "Audrey Hepburn", "Brad Pitt", "Cate Blanchett", "Denzel Washington", "Emma Stone",
    "Harrison Ford", "Julia Roberts", "Leonardo DiCaprio", "Meryl Streep", "Morgan Freeman",
    "Natalie Portman", "Tom Hanks", "Viola Davis",
]
CELEBRITY_BUSINESS = [
    "Andrew Carnegie", "Bill Gates", "Elon Musk", "Henry Ford", "Indra Nooyi", "Jack Ma",
    "Jeff Bezos", "Oprah Winfrey", "Richard Branson", "Sheryl Sandberg", "Steve Jobs",
    "Warren Buffett",
]
CELEBRITY_SPORTS = [
    "Babe Ruth", "Cristiano Ronaldo", "Lionel Messi", "Michael Jordan", "Muhammad Ali",
    "Pele", "Roger Federer", "Serena Williams", "Simone Biles", "Tiger Woods",
    "Usain Bolt", "Wayne Gretzky",
]
GAMER_ADJECTIVES = ["Angry", "Dark", "Epic", "Furious", "Ghost", "Iron", "Mad", "Silent", "Toxic", "Wild"]
GAMER_NOUNS = ["Badger", "Blade", "Dragon", "Falcon", "Knight", "Ninja", "Panda", "Reaper", "Sniper", "Wizard"]

MINECRAFT = {
    "ore": ["coal", "copper", "iron", "gold", "redstone", "lapis", "diamond", "emerald"],
    "wood": ["oak", "spruce", "birch", "jungle", "acacia", "dark oak", "mangrove", "crimson", "warped"],
    "armortier": ["leather", "chainmail", "iron", "gold", "diamond", "netherite"],
    "armorpart": ["helmet", "chestplate", "leggings", "boots"],
    "weapon": ["sword", "bow", "arrow", "trident", "shield"],
    "tool": ["pickaxe", "axe", "shovel", "hoe", "fishing rod"],
    "dye": ["white", "orange", "magenta", "light blue", "yellow", "lime", "pink", "gray", "black"],
    "food": ["apple", "baked potato", "beetroot", "bread", "carrot", "cookie", "melon slice", "pumpkin pie"],
    "animal": ["chicken", "cow", "pig", "rabbit", "sheep", "wolf"],
    "villagerjob": ["armourer", "butcher", "cartographer", "cleric", "farmer", "fisherman", "librarian"],
    "villagerstation": ["composter", "smoker", "barrel", "loom", "blast furnace", "brewing stand", "lectern"],
    "villagerlevel": ["novice", "apprentice", "journeyman", "expert", "master"],
    "mobpassive": ["axolotl", "bat", "cat", "chicken", "cod", "cow", "donkey", "fox", "horse"],
    "mobneutral": ["bee", "cave spider", "dolphin", "enderman", "goat", "iron golem", "llama", "panda"],
    "mobhostile": ["blaze", "creeper", "drowned", "ghast", "phantom", "skeleton", "slime", "witch", "zombie"],
    "mobboss": ["ender dragon", "wither"],
    "biome": ["stone shore", "snow", "ocean", "desert", "forest", "jungle", "mountain", "swamp", "savanna"],
    "weather": ["clear", "rain", "thunder"],
}
MINECRAFT_DISPLAY = {
    "ore": ("Minecraft Ore", "Naturally occurring minerals found in the game Minecraft, used for crafting purposes"),
    "wood": ("Minecraft Wood", "Natural resource in Minecraft, used for crafting various items and building structures"),
    "armortier": ("Minecraft Armor Tier", "Classification system for armor sets in Minecraft, indicating their effectiveness and protection level"),
    "armorpart": ("Minecraft Armor Part", "Component of an armor set in Minecraft, such as a helmet, chestplate, leggings, or boots"),
    "weapon": ("Minecraft Weapon", "Tools and items used in Minecraft for combat and defeating hostile mobs"),
    "tool": ("Minecraft Tool", "Items in Minecraft designed for specific tasks, including mining, digging, and building"),
    "dye": ("Minecraft Dye", "Items used to change the color of various in-game objects"),
    "food": ("Minecraft Food", "Consumable items in Minecraft that provide nourishment to the player character"),
    "animal": ("Minecraft Animal", "Non-hostile creatures in Minecraft, often used for resources and farming"),
    "villagerjob": ("Minecraft Villager Job", "The profession or occupation assigned to a villager character in the game"),
    "villagerstation": ("Minecraft Villager Station", "Designated area or structure in Minecraft where villagers perform their job-related tasks and trading"),
    "villagerlevel": ("Minecraft Villager Level", "Measure of a villager's experience and proficiency in their assigned job or profession"),
    "mobpassive": ("Minecraft Mob Passive", "Non-aggressive creatures in the game that do not attack players"),
    "mobneutral": ("Minecraft Mob Neutral", "Creature in the game that only becomes hostile if provoked, typically defending itself when attacked"),
    "mobhostile": ("Minecraft Mob Hostile", "Aggressive creatures in the game that actively attack players when encountered"),
    "mobboss": ("Minecraft Mob Boss", "Powerful hostile creature in the game, often found in challenging dungeons or structures"),
    "biome": ("Minecraft Biome", "Distinctive environmental regions in the game, characterized by unique terrain, vegetation, and weather"),
    "weather": ("Minecraft Weather", "Atmospheric conditions in the game that include rain, thunderstorms, and clear skies, affecting gameplay and ambiance"),
}

# (emoji, description, category, aliases, tags)
EMOJI = [
    ("😀", "grinning face", "Smileys & Emotion", ["grinning"], ["smile", "happy"]),
    ("😂", "face with tears of joy", "Smileys & Emotion", ["joy"], ["tears", "laugh"]),
    ("😍", "smiling face with heart-eyes", "Smileys & Emotion", ["heart_eyes"], ["love", "crush"]),
    ("👍", "thumbs up", "People & Body", ["+1", "thumbsup"], ["approve", "ok"]),
    ("🐶", "dog face", "Animals & Nature", ["dog"], ["pet"]),
    ("🌵", "cactus", "Animals & Nature", ["cactus"], ["desert"]),
    ("🍕", "pizza", "Food & Drink", ["pizza"], ["food", "slice"]),
    ("☕", "hot beverage", "Food & Drink", ["coffee"], ["cafe", "espresso"]),
    ("🚀", "rocket", "Travel & Places", ["rocket"], ["ship", "launch"]),
    ("⚽", "soccer ball", "Activities", ["soccer"], ["sports"]),
    ("💡", "light bulb", "Objects", ["bulb"], ["idea", "light"]),
    ("🔥", "fire", "Travel & Places", ["fire"], ["burn"]),
    ("🏁", "chequered flag", "Flags", ["checkered_flag"], ["milestone", "finish"]),
    ("✅", "check mark button", "Symbols", ["white_check_mark"], ["done", "yes"]),
]


@section.func(
    "book", "Book", "book",
    description="Written or printed work consisting of pages bound together, covering various subjects or stories",
    example='{"title": "Anna Karenina", "author": "Toni Morrison", "genre": "Thriller"}',
    output=OutputType.MAP_STRING,
)
def book(fake, params):
    return {
        "title": pick(fake, BOOK_TITLES),
        "author": pick(fake, BOOK_AUTHORS),
        "genre": pick(fake, BOOK_GENRES),
    }


@section.func("booktitle", "Title", "book", description="The specific name given to a book", example="Hamlet")
def book_title(fake, params):
    return pick(fake, BOOK_TITLES)


@section.func("bookauthor", "Author", "book", description="The individual who wrote or created the content of a book", example="Mark Twain")
def book_author(fake, params):
    return pick(fake, BOOK_AUTHORS)


@section.func("bookgenre", "Genre", "book", description="Category or type of book defined by its content, style, or form", example="Adventure")
def book_genre(fake, params):
    return pick(fake, BOOK_GENRES)


@section.func(
    "movie", "Movie", "movie",
    description="A story told through moving pictures and sound",
    example='{"name": "Psycho", "genre": "Mystery"}',
    output=OutputType.MAP_STRING,
)
def movie(fake, params):
    return {"name": pick(fake, MOVIE_NAMES), "genre": pick(fake, MOVIE_GENRES)}


@section.func("moviename", "Movie Name", "movie", description="Title or name of a specific film used for identification and reference", example="The Matrix")
def movie_name(fake, params):
    return pick(fake, MOVIE_NAMES)


@section.func("moviegenre", "Genre", "movie", description="Category that classifies movies based on common themes, styles, and storytelling approaches", example="Action")
def movie_genre(fake, params):
    return pick(fake, MOVIE_GENRES)


@section.func("celebrityactor", "Celebrity Actor", "celebrity", description="Famous person known for acting in films, television, or theater", example="Brad Pitt")
def celebrity_actor(fake, params):
    return pick(fake, CELEBRITY_ACTORS)


@section.func("celebritybusiness", "Celebrity Business", "celebrity", description="High-profile individual known for significant achievements in business or entrepreneurship", example="Elon Musk")
def celebrity_business(fake, params):
    return pick(fake, CELEBRITY_BUSINESS)


@section.func("celebritysport", "Celebrity Sport", "celebrity", description="Famous athlete known for achievements in a particular sport", example="Michael Phelps")
def celebrity_sport(fake, params):
    return pick(fake, CELEBRITY_SPORTS)


@section.func("gamertag", "Gamertag", "game", description="User-selected online username or alias used for identification in games", example="footinterpret63")
def gamertag(fake, params):
    style = fake.random.randrange(3)
    if style == 0:
        return f"{pick(fake, GAMER_ADJECTIVES)}{pick(fake, GAMER_NOUNS)}"
    if style == 1:
        return f"{fake.user_name()}{fake.random.randint(1, 99)}"
    return f"{pick(fake, GAMER_NOUNS)}{pick(fake, GAMER_ADJECTIVES)}{fake.random.randint(1, 999)}"


@section.func(
    "dice", "Dice", "game",
    description="Small, cube-shaped objects used in games of chance for random outcomes",
    example="[5, 2, 3]",
    output=OutputType.INT_ARRAY,
    params=[
        param("numdice", "Number of Dice", ParamType.UINT, default="1", description="Number of dice to roll"),
        param("sides", "Number of Sides", ParamType.UINT_ARRAY, default="[6]", description="Number of sides on each dice"),
    ],
)
def dice(fake, params):
    count = params.get_uint("numdice")
    sides = params.get_uint_array("sides")
    if count > 1000:
        raise ValueError("numdice must not exceed 1000")
    if any(s == 0 for s in sides):
        raise ValueError("sides must be greater than 0")

    # One side count applies to every die, otherwise sides pair up by position.
    if len(sides) == 1:
        sides = sides * count
    elif len(sides) != count:
        count = len(sides)
    return [fake.random.randint(1, sides[i]) for i in range(count)]


def _register_minecraft(kind: str) -> None:
    display, description = MINECRAFT_DISPLAY[kind]
    values = MINECRAFT[kind]

    @section.func(f"minecraft{kind}", display, "minecraft", description=description, example=values[0])
    def generate(fake, params):
        return pick(fake, values)


for _kind in MINECRAFT:
    _register_minecraft(_kind)


@section.func("emoji", "Emoji", "emoji", description="Digital symbol expressing feelings or ideas in text messages and online chats", example="🤣")
def emoji(fake, params):
    return pick(fake, EMOJI)[0]


@section.func("emojidescription", "Emoji Description", "emoji", description="Brief explanation of the meaning or emotion conveyed by an emoji", example="face vomiting")
def emoji_description(fake, params):
    return pick(fake, EMOJI)[1]


@section.func("emojicategory", "Emoji Category", "emoji", description="Group or classification of emojis based on their common theme or use, like 'smileys' or 'animals'", example="Smileys & Emotion")
def emoji_category(fake, params):
    return pick(fake, EMOJI)[2]


@section.func("emojialias", "Emoji Alias", "emoji", description="Alternative name or keyword used to represent a specific emoji in text or code", example="smile")
def emoji_alias(fake, params):
    return pick(fake, pick(fake, EMOJI)[3])


@section.func("emojitag", "Emoji Tag", "emoji", description="Label or keyword associated with an emoji to categorize or search for it easily", example="happy")
def emoji_tag(fake, params):
    return pick(fake, pick(fake, EMOJI)[4])
