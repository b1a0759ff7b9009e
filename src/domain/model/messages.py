"""User-facing titles and messages for search outcomes, plus the lucky-word list."""

PAGE_TITLE = "English Dictionary"

ENTER_WORD_TITLE = "Enter a word"
ENTER_WORD = "Please type a word to look up."

WORD_NOT_FOUND_TITLE = "Word not found"
NO_DEFINITION_FOUND_TITLE = "No definition found"
NETWORK_ERROR_TITLE = "Network error"
NETWORK_ERROR = (
    "Could not reach the dictionary service. "
    "Check your connection and try again."
)


def word_not_found(word: str) -> str:
    return f'Sorry, we couldn\'t find "{word}" in the dictionary.'


def no_definition_found(word: str) -> str:
    return f'No definition is available for "{word}".'


def api_error_title(status_code: int) -> str:
    return f"API error ({status_code})"


def api_error(status_code: int) -> str:
    return f"The dictionary service responded with status {status_code}. Please try again later."


RANDOM_ENGLISH_WORDS = (
    "serendipity", "ephemeral", "luminous", "resilience", "eloquent",
    "quintessential", "ubiquitous", "mellifluous", "petrichor", "labyrinth",
    "halcyon", "nostalgia", "solitude", "wanderlust", "sonder",
    "benevolent", "cacophony", "diligent", "enigma", "fortitude",
    "gregarious", "hypothesis", "juxtapose", "kaleidoscope", "lethargic",
    "meticulous", "nonchalant", "obfuscate", "paradigm", "quixotic",
    "run", "set", "light", "bank", "spring",
)
