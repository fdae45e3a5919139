"""
The Bytewords word table and its reverse lookup.
See https://github.com/BlockchainCommons/Research/blob/master/papers/bcr-2020-012-bytewords.md

The first and last letters of every word are unique across the table, so a word (or its two letter minimal form) is
resolved through a 26x26 grid indexed by those two letters.
"""

from typing import Optional

from .errors import InvalidWordError

# fmt: off
WORDLIST = (
    "able", "acid", "also", "apex", "aqua", "arch", "atom", "aunt",
    "away", "axis", "back", "bald", "barn", "belt", "beta", "bias",
    "blue", "body", "brag", "brew", "bulb", "buzz", "calm", "cash",
    "cats", "chef", "city", "claw", "code", "cola", "cook", "cost",
    "crux", "curl", "cusp", "cyan", "dark", "data", "days", "deli",
    "dice", "diet", "door", "down", "draw", "drop", "drum", "dull",
    "duty", "each", "easy", "echo", "edge", "epic", "even", "exam",
    "exit", "eyes", "fact", "fair", "fern", "figs", "film", "fish",
    "fizz", "flap", "flew", "flux", "foxy", "free", "frog", "fuel",
    "fund", "gala", "game", "gear", "gems", "gift", "girl", "glow",
    "good", "gray", "grim", "guru", "gush", "gyro", "half", "hang",
    "hard", "hawk", "heat", "help", "high", "hill", "holy", "hope",
    "horn", "huts", "iced", "idea", "idle", "inch", "inky", "into",
    "iris", "iron", "item", "jade", "jazz", "join", "jolt", "jowl",
    "judo", "jugs", "jump", "junk", "jury", "keep", "keno", "kept",
    "keys", "kick", "kiln", "king", "kite", "kiwi", "knob", "lamb",
    "lava", "lazy", "leaf", "legs", "liar", "list", "limp", "lion",
    "logo", "loud", "love", "luau", "luck", "lung", "main", "many",
    "math", "maze", "memo", "menu", "meow", "mild", "mint", "miss",
    "monk", "nail", "navy", "need", "news", "next", "noon", "note",
    "numb", "obey", "oboe", "omit", "onyx", "open", "oval", "owls",
    "paid", "part", "peck", "play", "plus", "poem", "pool", "pose",
    "puff", "puma", "purr", "quad", "quiz", "race", "ramp", "real",
    "redo", "rich", "road", "rock", "roof", "ruby", "ruin", "runs",
    "rust", "safe", "saga", "scar", "sets", "silk", "skew", "slot",
    "soap", "solo", "song", "stub", "surf", "swan", "taco", "task",
    "taxi", "tent", "tied", "time", "tiny", "toil", "tomb", "toys",
    "trip", "tuna", "twin", "ugly", "undo", "unit", "urge", "user",
    "vast", "very", "veto", "vial", "vibe", "view", "visa", "void",
    "vows", "wall", "wand", "warm", "wasp", "wave", "waxy", "webs",
    "what", "when", "whiz", "wolf", "work", "yank", "yawn", "yell",
    "yoga", "yurt", "zaps", "zest", "zinc", "zone", "zoom", "zero",
)
# fmt: on

ALPHABET_SIZE = 26

Grid = tuple[tuple[Optional[int], ...], ...]


def _letter_offset(char: str) -> int:
    """Position of an ASCII letter in the alphabet (case-insensitive), -1 for any other character."""
    if char.isascii() and char.isalpha():
        return ord(char.lower()) - ord("a")
    return -1


def _build_lookup_grid(wordlist: tuple[str, ...]) -> Grid:
    """Builds the grid mapping (last letter, first letter) of a word to its index."""
    rows: list[list[Optional[int]]] = [[None] * ALPHABET_SIZE for _ in range(ALPHABET_SIZE)]
    for index, word in enumerate(wordlist):
        x = _letter_offset(word[0])
        y = _letter_offset(word[3])
        assert rows[y][x] is None, f"{word!r} shares its first and last letter with {wordlist[rows[y][x]]!r}"
        rows[y][x] = index
    return tuple(tuple(row) for row in rows)


# Built once at import time and never modified afterwards.
LOOKUP_GRID: Grid = _build_lookup_grid(WORDLIST)


def word_for_index(index: int) -> str:
    """Returns the four letter word for a byte value."""
    return WORDLIST[index]


def minimal_word_for_index(index: int) -> str:
    """Returns the two letter minimal code (first and last letter of the word) for a byte value."""
    word = WORDLIST[index]
    return word[0] + word[3]


def index_for_token(token: str) -> int:
    """Resolves a four letter word or a two letter minimal code to its byte value, ignoring case.
    Raises an InvalidWordError if the token is not part of the word table.
    """
    if len(token) not in (2, 4):
        raise InvalidWordError(token)

    x = _letter_offset(token[0])
    y = _letter_offset(token[-1])
    if not (0 <= x < ALPHABET_SIZE and 0 <= y < ALPHABET_SIZE):
        raise InvalidWordError(token)

    index = LOOKUP_GRID[y][x]
    if index is None:
        raise InvalidWordError(token)

    # The endpoints already determine the index, the middle letters are checked to catch corrupted words.
    if len(token) == 4:
        if _letter_offset(token[1]) < 0 or _letter_offset(token[2]) < 0:
            raise InvalidWordError(token)
        if token[1:3].lower() != WORDLIST[index][1:3]:
            raise InvalidWordError(token)

    return index
