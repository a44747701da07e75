import re

# Pattern rules are matched against the whole value (re.fullmatch)
PATTERN_RULES = {
    "letters": re.compile(r"[a-zA-Z ]*"),
    "text": re.compile(r"[a-zA-Z .,#\-_|;:?!]*"),
    "textnum": re.compile(r"[\w\s .,#\-_|;:?!]*"),
    "alphanumeric": re.compile(r"[^-_][a-zA-Z0-9\-_]*"),
    "checkbox": re.compile(r"(on|true|checked|1)", re.IGNORECASE),
}

ERROR_MESSAGES = {
    "letters": "%s darf nur Buchstaben und Leerzeichen beinhalten.",
    "text": "%s darf nur Buchstaben und Sonderzeichen beinhalten.",
    "textnum": "%s darf nur aus alphanumerischen Zeichen bestehen.",
    "alphanumeric": "%s darf nur Buchstaben, Zahlen, Binde- und Unterstriche beinhalten.",
    "checkbox": "%s muss ausgewählt sein.",
    "numeric": "%s muss numerisch sein.",
    "int": "%s muss ganzzahlig sein.",
    "float": "%s muss eine Fließkommazahl sein.",
    "required": "%s ist ein Pflichtfeld.",
    "min": "%s muss mindestens %s sein.",
    "min-string": "%s muss mindestens %s Zeichen haben.",
    "max": "%s muss kleiner oder gleich %s sein.",
    "max-string": "%s darf maximal %s Zeichen haben.",
    "compare": "%s und %s müssen ident sein.",
    "unique": "%s darf nur einmal verwendet werden.",
}

# PHP-style numeric string: optional surrounding whitespace, sign, decimals, exponent
NUMERIC_STRING_REGEX = re.compile(
    r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*"
)

ROOMS_COLLECTION = "rooms"
USERS_COLLECTION = "users"

SESSION_USER_KEY = "user"
SESSION_COUNTER_KEY = "counter"
SESSION_FLASH_KEY = "flash"
