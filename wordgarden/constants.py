"""Word Garden game constants: word list, sounds, prompts and timings."""

DEFAULT_GRID_SIZE = 10

# Retry budget per word when packing the grid
MAX_PLACEMENT_ATTEMPTS = 50

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEFAULT_WORDS: tuple[str, ...] = (
    "SERENE", "CALM", "GARDEN", "STONE", "WATER", "BAMBOO", "ZEN", "PEACE",
)

DEFAULT_SOUND = "sounds/peacock.mp3"

WORD_SOUNDS: dict[str, str] = {
    "SERENE": "sounds/serene.mp3", "CALM": "sounds/calm.mp3",
    "GARDEN": "sounds/garden.mp3", "STONE": "sounds/stone.mp3",
    "WATER": "sounds/water.mp3", "BAMBOO": "sounds/bamboo.mp3",
    "ZEN": "sounds/zen.mp3", "PEACE": "sounds/peace.mp3",
}

MINDFULNESS_PROMPTS: dict[str, str] = {
    "SERENE": "Embrace the serenity...",
    "CALM": "Find a moment of calm...",
    "GARDEN": "Picture a peaceful garden...",
    "STONE": "Feel the strength...",
    "WATER": "Imagine flowing water...",
    "BAMBOO": "Be flexible like bamboo...",
    "ZEN": "Seek Zen...",
    "PEACE": "Reflect on peace...",
}

FALLBACK_PROMPT = 'Reflect on "{word}"...'

WIN_TITLE = "Harmony Found."
WIN_MESSAGE = "Congratulations!"
WIN_ACTION = "New Puzzle?"

# Seconds
POPUP_HIDE_DELAY = 5.0
WIN_MESSAGE_DELAY = 0.7
