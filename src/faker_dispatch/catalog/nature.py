"""Animal, food and beer generators."""

from faker_dispatch.catalog.base import CatalogSection, pick

section = CatalogSection("nature")

ANIMALS = [
    "alligator", "alpaca", "ant", "antelope", "badger", "bat", "bear", "beaver", "bison",
    "buffalo", "camel", "cheetah", "crocodile", "deer", "dolphin", "eagle", "elephant",
    "ferret", "fox", "giraffe", "gorilla", "hedgehog", "hippo", "jaguar", "kangaroo",
    "koala", "lemur", "leopard", "lion", "lynx", "moose", "otter", "owl", "panda",
    "penguin", "rabbit", "raccoon", "rhino", "seal", "shark", "sloth", "tiger", "walrus",
    "whale", "wolf", "zebra",
]
ANIMAL_TYPES = ["amphibians", "birds", "fish", "invertebrates", "mammals", "reptiles"]
FARM_ANIMALS = ["Chicken", "Cow", "Donkey", "Duck", "Goat", "Goose", "Horse", "Llama", "Pig", "Sheep", "Turkey"]
CATS = [
    "Abyssinian", "American Shorthair", "Bengal", "Birman", "Bombay", "British Shorthair",
    "Burmese", "Devon Rex", "Maine Coon", "Manx", "Norwegian Forest", "Persian",
    "Ragdoll", "Russian Blue", "Scottish Fold", "Siamese", "Sphynx", "Turkish Angora",
]
DOGS = [
    "Akita", "Beagle", "Border Collie", "Boxer", "Bulldog", "Chihuahua", "Dachshund",
    "Dalmatian", "Doberman", "German Shepherd", "Golden Retriever", "Great Dane",
    "Husky", "Labrador Retriever", "Newfoundland", "Pomeranian", "Poodle", "Pug",
    "Rottweiler", "Shih Tzu", "Yorkshire Terrier",
]
BIRDS = [
    "albatross", "blackbird", "canary", "cardinal", "crow", "cuckoo", "dove", "falcon",
    "finch", "flamingo", "goose", "heron", "hummingbird", "kingfisher", "magpie",
    "nightingale", "ostrich", "parrot", "pelican", "pigeon", "robin", "sparrow", "swan",
    "toucan", "vulture", "woodpecker",
]
PET_NAMES = [
    "Bailey", "Bella", "Biscuit", "Buddy", "Charlie", "Chewbarka", "Cookie", "Daisy",
    "Ginger", "Jasper", "Luna", "Max", "Milo", "Mochi", "Nacho", "Oreo", "Peanut",
    "Pepper", "Pickles", "Rocky", "Scout", "Sir Barks-a-Lot", "Waffles", "Ziggy",
]

FRUITS = [
    "Apple", "Apricot", "Avocado", "Banana", "Blackberry", "Blueberry", "Cherry",
    "Coconut", "Cranberry", "Date", "Fig", "Grape", "Grapefruit", "Guava", "Kiwi",
    "Lemon", "Lime", "Lychee", "Mango", "Nectarine", "Orange", "Papaya", "Peach",
    "Pear", "Pineapple", "Plum", "Pomegranate", "Raspberry", "Strawberry", "Watermelon",
]
VEGETABLES = [
    "Artichoke", "Asparagus", "Beet", "Broccoli", "Brussels Sprouts", "Cabbage", "Carrot",
    "Cauliflower", "Celery", "Corn", "Cucumber", "Eggplant", "Garlic", "Kale", "Leek",
    "Lettuce", "Mushroom", "Okra", "Onion", "Parsnip", "Peas", "Potato", "Pumpkin",
    "Radish", "Spinach", "Sweet Potato", "Tomato", "Turnip", "Zucchini",
]
BREAKFASTS = [
    "Avocado toast", "Bacon and eggs", "Banana pancakes", "Blueberry muffins",
    "Breakfast burrito", "Cinnamon rolls", "Eggs benedict", "French toast", "Granola",
    "Huevos rancheros", "Oatmeal with berries", "Omelette", "Scrambled tofu",
    "Smoothie bowl", "Waffles with syrup",
]
LUNCHES = [
    "BLT sandwich", "Caesar salad", "Chicken wrap", "Club sandwich", "Falafel pita",
    "Greek salad", "Grilled cheese", "Minestrone soup", "Poke bowl", "Quesadilla",
    "Ramen", "Tomato soup", "Tuna melt", "Veggie burger",
]
DINNERS = [
    "Beef stew", "Chicken curry", "Chili con carne", "Fish tacos", "Grilled salmon",
    "Lasagna", "Mushroom risotto", "Pad thai", "Pork chops", "Roast chicken",
    "Shepherd's pie", "Spaghetti bolognese", "Steak and potatoes", "Stir fry",
]
DRINKS = [
    "Coffee", "Espresso", "Hot chocolate", "Iced tea", "Juice", "Kombucha", "Latte",
    "Lemonade", "Milk", "Smoothie", "Soda", "Sparkling water", "Tea", "Water",
]
SNACKS = [
    "Cheese and crackers", "Chips and salsa", "Fruit salad", "Granola bar", "Hummus and carrots",
    "Mixed nuts", "Popcorn", "Pretzels", "Rice cakes", "Trail mix", "Yogurt",
]
DESSERTS = [
    "Apple pie", "Banana split", "Brownies", "Carrot cake", "Cheesecake", "Chocolate mousse",
    "Creme brulee", "Cupcakes", "Ice cream", "Key lime pie", "Panna cotta", "Tiramisu",
]

BEER_NAMES = [
    "90 Minute IPA", "Alpha King", "Bell's Expedition", "Bigfoot Barleywine", "Blind Pig",
    "Celebrator", "Duvel", "Hop Stoopid", "Orval", "Pliny The Elder", "Racer 5",
    "Sierra Nevada Pale Ale", "Stone IPA", "Trappistes Rochefort 10", "Two Hearted Ale",
    "Westvleteren 12", "Yeti Imperial Stout",
]
BEER_STYLES = [
    "Amber Hybrid Beer", "Belgian And French Ale", "Belgian Strong Ale", "Bock",
    "Dark Lager", "English Brown Ale", "English Pale Ale", "European Amber Lager",
    "Fruit Beer", "German Wheat And Rye Beer", "India Pale Ale", "Light Hybrid Beer",
    "Light Lager", "Pilsner", "Porter", "Scottish And Irish Ale", "Sour Ale", "Stout",
]
BEER_HOPS = [
    "Ahtanum", "Amarillo", "Bramling Cross", "Cascade", "Centennial", "Chinook",
    "Citra", "Columbus", "Fuggle", "Galena", "Goldings", "Hallertau", "Magnum",
    "Mosaic", "Northern Brewer", "Nugget", "Perle", "Saaz", "Simcoe", "Tettnang",
    "Warrior", "Willamette",
]
BEER_MALTS = [
    "Black malt", "Caramel", "Carapils", "Chocolate", "Munich", "Pale", "Pilsner",
    "Roasted barley", "Rye malt", "Special roast", "Victory", "Vienna", "Wheat mal",
]
BEER_YEASTS = [
    "1007 - German Ale", "1056 - American Ale", "1084 - Irish Ale", "1272 - American Ale II",
    "1318 - London Ale III", "1388 - Belgian Strong Ale", "2007 - Pilsen Lager",
    "2124 - Bohemian Lager", "3068 - Weihenstephan Weizen", "3787 - Trappist High Gravity",
]


@section.func("animal", "Animal", "animal", description="Living creature with the ability to move, eat, and interact with its environment", example="elk")
def animal(fake, params):
    return pick(fake, ANIMALS)


@section.func("animaltype", "Animal Type", "animal", description="Type of animal, such as mammals, birds, reptiles, etc.", example="amphibians")
def animal_type(fake, params):
    return pick(fake, ANIMAL_TYPES)


@section.func("farmanimal", "Farm Animal", "animal", description="Animal name commonly found on a farm", example="Chicken")
def farm_animal(fake, params):
    return pick(fake, FARM_ANIMALS)


@section.func("cat", "Cat", "animal", description="Various breeds that define different cats", example="Chausie")
def cat(fake, params):
    return pick(fake, CATS)


@section.func("dog", "Dog", "animal", description="Various breeds that define different dogs", example="Norwich Terrier")
def dog(fake, params):
    return pick(fake, DOGS)


@section.func("bird", "Bird", "animal", description="Distinct species of birds", example="goose")
def bird(fake, params):
    return pick(fake, BIRDS)


@section.func("petname", "Pet Name", "animal", description="Affectionate nickname given to a pet", example="Ozzy Pawsborne")
def pet_name(fake, params):
    return pick(fake, PET_NAMES)


@section.func("fruit", "Fruit", "food", description="Edible plant part, typically sweet, enjoyed as a natural snack or dessert", example="Peach")
def fruit(fake, params):
    return pick(fake, FRUITS)


@section.func("vegetable", "Vegetable", "food", description="Edible plant or part of a plant, often used in savory cooking or salads", example="Amaranth Leaves")
def vegetable(fake, params):
    return pick(fake, VEGETABLES)


@section.func("breakfast", "Breakfast", "food", description="First meal of the day, typically eaten in the morning", example="Blueberry banana happy face pancakes")
def breakfast(fake, params):
    return pick(fake, BREAKFASTS)


@section.func("lunch", "Lunch", "food", description="Midday meal, often lighter than dinner, eaten around noon", example="No bake hersheys bar pie")
def lunch(fake, params):
    return pick(fake, LUNCHES)


@section.func("dinner", "Dinner", "food", description="Evening meal, typically the day's main and most substantial meal", example="Wild addicting dip")
def dinner(fake, params):
    return pick(fake, DINNERS)


@section.func("drink", "Drink", "food", description="Liquid consumed for hydration, pleasure, or nutritional benefits", example="Soda")
def drink(fake, params):
    return pick(fake, DRINKS)


@section.func("snack", "Snack", "food", description="Random snack", example="Hoisin marinated wing pieces")
def snack(fake, params):
    return pick(fake, SNACKS)


@section.func("dessert", "Dessert", "food", description="Sweet treat often enjoyed after a meal", example="French napoleons")
def dessert(fake, params):
    return pick(fake, DESSERTS)


@section.func("beername", "Beer Name", "beer", description="Specific brand or variety of beer", example="Duvel")
def beer_name(fake, params):
    return pick(fake, BEER_NAMES)


@section.func("beerstyle", "Beer Style", "beer", description="Distinct characteristics and flavors of beer", example="European Amber Lager")
def beer_style(fake, params):
    return pick(fake, BEER_STYLES)


@section.func("beerhop", "Beer Hop", "beer", description="The flower used in brewing to add flavor, aroma, and bitterness to beer", example="Glacier")
def beer_hop(fake, params):
    return pick(fake, BEER_HOPS)


@section.func("beeryeast", "Beer Yeast", "beer", description="Microorganism used in brewing to ferment sugars, producing alcohol and carbonation in beer", example="1388 - Belgian Strong Ale")
def beer_yeast(fake, params):
    return pick(fake, BEER_YEASTS)


@section.func("beermalt", "Beer Malt", "beer", description="Processed barley or other grains, provides sugars for fermentation and flavor to beer", example="Munich")
def beer_malt(fake, params):
    return pick(fake, BEER_MALTS)


@section.func("beeralcohol", "Beer Alcohol", "beer", description="Measures the alcohol content in beer", example="2.7%")
def beer_alcohol(fake, params):
    return f"{fake.random.uniform(2.0, 10.0):.1f}%"


@section.func("beeribu", "Beer IBU", "beer", description="Scale measuring bitterness of beer from hops", example="29 IBU")
def beer_ibu(fake, params):
    return f"{fake.random.randint(10, 100)} IBU"


@section.func("beerblg", "Beer BLG", "beer", description="Scale indicating the concentration of extract in worts", example="6.4°Blg")
def beer_blg(fake, params):
    return f"{fake.random.uniform(5.0, 20.0):.1f}°Blg"
