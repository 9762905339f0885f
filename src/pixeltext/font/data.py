"""Literal bitmap data for the built-in font.

Every glyph is five rows tall. '#' marks a set pixel, '.' a clear one. Widths
vary per glyph; narrow letters such as 'i' and 'l' are a single column.
"""

GlyphRows = tuple[str, str, str, str, str]

SPACE_ROWS: GlyphRows = (
    "...",
    "...",
    "...",
    "...",
    "...",
)

LETTER_ROWS: dict[str, GlyphRows] = {
    "A": (
        ".###.",
        "#...#",
        "#####",
        "#...#",
        "#...#",
    ),
    "B": (
        "####.",
        "#...#",
        "####.",
        "#...#",
        "####.",
    ),
    "C": (
        ".###.",
        "#...#",
        "#....",
        "#...#",
        ".###.",
    ),
    "D": (
        "####.",
        "#...#",
        "#...#",
        "#...#",
        "####.",
    ),
    "E": (
        "#####",
        "#....",
        "####.",
        "#....",
        "#####",
    ),
    "F": (
        "#####",
        "#....",
        "####.",
        "#....",
        "#....",
    ),
    "G": (
        ".###.",
        "#....",
        "#.###",
        "#...#",
        ".###.",
    ),
    "H": (
        "#...#",
        "#...#",
        "#####",
        "#...#",
        "#...#",
    ),
    "I": (
        "###",
        ".#.",
        ".#.",
        ".#.",
        "###",
    ),
    "J": (
        "#####",
        "...#.",
        "...#.",
        "#..#.",
        ".##..",
    ),
    "K": (
        "#..#.",
        "#.#..",
        "##...",
        "#.#..",
        "#..#.",
    ),
    "L": (
        "#....",
        "#....",
        "#....",
        "#....",
        "#####",
    ),
    "M": (
        "#...#",
        "##.##",
        "#.#.#",
        "#...#",
        "#...#",
    ),
    "N": (
        "#...#",
        "##..#",
        "#.#.#",
        "#..##",
        "#...#",
    ),
    "O": (
        ".###.",
        "#...#",
        "#...#",
        "#...#",
        ".###.",
    ),
    "P": (
        "####.",
        "#...#",
        "####.",
        "#....",
        "#....",
    ),
    "Q": (
        ".###.",
        "#...#",
        "#.#.#",
        "#..##",
        ".####",
    ),
    "R": (
        "####.",
        "#...#",
        "####.",
        "#.#..",
        "#..#.",
    ),
    "S": (
        ".###.",
        "#....",
        ".###.",
        "....#",
        ".###.",
    ),
    "T": (
        "#####",
        "..#..",
        "..#..",
        "..#..",
        "..#..",
    ),
    "U": (
        "#...#",
        "#...#",
        "#...#",
        "#...#",
        ".###.",
    ),
    "V": (
        "#...#",
        "#...#",
        "#...#",
        ".#.#.",
        "..#..",
    ),
    "W": (
        "#...#",
        "#...#",
        "#.#.#",
        "##.##",
        "#...#",
    ),
    "X": (
        "#...#",
        ".#.#.",
        "..#..",
        ".#.#.",
        "#...#",
    ),
    "Y": (
        "#...#",
        ".#.#.",
        "..#..",
        "..#..",
        "..#..",
    ),
    "Z": (
        "#####",
        "...#.",
        "..#..",
        ".#...",
        "#####",
    ),
    "a": (
        "....",
        ".##.",
        "...#",
        ".###",
        ".###",
    ),
    "b": (
        "#...",
        "#...",
        "###.",
        "#..#",
        "###.",
    ),
    "c": (
        "....",
        ".##.",
        "#...",
        "#...",
        ".##.",
    ),
    "d": (
        "...#",
        "...#",
        ".###",
        "#..#",
        ".###",
    ),
    "e": (
        "....",
        ".##.",
        "####",
        "#...",
        ".##.",
    ),
    "f": (
        ".##",
        ".#.",
        "##.",
        ".#.",
        ".#.",
    ),
    "g": (
        "....",
        ".###",
        "#..#",
        ".###",
        "...#",
    ),
    "h": (
        "#...",
        "#...",
        "###.",
        "#..#",
        "#..#",
    ),
    "i": (
        "#",
        ".",
        "#",
        "#",
        "#",
    ),
    "j": (
        ".#",
        "..",
        ".#",
        ".#",
        "#.",
    ),
    "k": (
        "#..",
        "#.#",
        "##.",
        "##.",
        "#.#",
    ),
    "l": (
        "#",
        "#",
        "#",
        "#",
        "#",
    ),
    "m": (
        ".....",
        "##.#.",
        "#.#.#",
        "#.#.#",
        "#.#.#",
    ),
    "n": (
        "....",
        "###.",
        "#..#",
        "#..#",
        "#..#",
    ),
    "o": (
        "....",
        ".##.",
        "#..#",
        "#..#",
        ".##.",
    ),
    "p": (
        "....",
        "###.",
        "#..#",
        "###.",
        "#...",
    ),
    "q": (
        "....",
        ".###",
        "#..#",
        ".###",
        "...#",
    ),
    "r": (
        "...",
        "#.#",
        "##.",
        "#..",
        "#..",
    ),
    "s": (
        "....",
        ".##.",
        ".#..",
        "..#.",
        "##..",
    ),
    "t": (
        ".#.",
        "###",
        ".#.",
        ".#.",
        "..#",
    ),
    "u": (
        "....",
        "#..#",
        "#..#",
        "#..#",
        ".###",
    ),
    "v": (
        "....",
        "#..#",
        "#..#",
        ".##.",
        "..#.",
    ),
    "w": (
        ".....",
        "#...#",
        "#.#.#",
        "#.#.#",
        ".#.#.",
    ),
    "x": (
        "....",
        "#..#",
        ".##.",
        "..#.",
        "#..#",
    ),
    "y": (
        "....",
        "#..#",
        "#..#",
        ".###",
        "...#",
    ),
    "z": (
        "....",
        "####",
        "..#.",
        ".#..",
        "####",
    ),
}

DIGIT_ROWS: dict[str, GlyphRows] = {
    "0": (
        ".##.",
        "#..#",
        "#..#",
        "#..#",
        ".##.",
    ),
    "1": (
        ".#.",
        "##.",
        ".#.",
        ".#.",
        "###",
    ),
    "2": (
        "###.",
        "...#",
        ".##.",
        "#...",
        "####",
    ),
    "3": (
        "###.",
        "...#",
        ".##.",
        "...#",
        "###.",
    ),
    "4": (
        "#..#",
        "#..#",
        "####",
        "...#",
        "...#",
    ),
    "5": (
        "####",
        "#...",
        "###.",
        "...#",
        "###.",
    ),
    "6": (
        ".##.",
        "#...",
        "###.",
        "#..#",
        ".##.",
    ),
    "7": (
        "####",
        "...#",
        "..#.",
        ".#..",
        ".#..",
    ),
    "8": (
        ".##.",
        "#..#",
        ".##.",
        "#..#",
        ".##.",
    ),
    "9": (
        ".##.",
        "#..#",
        ".###",
        "...#",
        ".##.",
    ),
}

SYMBOL_ROWS: dict[str, GlyphRows] = {
    "!": (
        "#",
        "#",
        "#",
        ".",
        "#",
    ),
    "@": (
        ".###.",
        "#...#",
        "#.##.",
        "#....",
        ".###.",
    ),
    "#": (
        ".#.#.",
        "#####",
        ".#.#.",
        "#####",
        ".#.#.",
    ),
    "$": (
        ".####",
        "#.#..",
        ".###.",
        "..#.#",
        "####.",
    ),
    "%": (
        "##..#",
        "##.#.",
        "..#..",
        ".#.##",
        "#..##",
    ),
    "^": (
        ".#.",
        "#.#",
        "...",
        "...",
        "...",
    ),
    "&": (
        ".##..",
        "#..#.",
        ".##.#",
        "#..#.",
        ".##.#",
    ),
    "*": (
        "...",
        "#.#",
        ".#.",
        "#.#",
        "...",
    ),
    "(": (
        ".#",
        "#.",
        "#.",
        "#.",
        ".#",
    ),
    ")": (
        "#.",
        ".#",
        ".#",
        ".#",
        "#.",
    ),
    "-": (
        "...",
        "...",
        "###",
        "...",
        "...",
    ),
    "_": (
        "...",
        "...",
        "...",
        "...",
        "###",
    ),
    "=": (
        "...",
        "###",
        "...",
        "###",
        "...",
    ),
    "+": (
        "...",
        ".#.",
        "###",
        ".#.",
        "...",
    ),
    "?": (
        "###.",
        "...#",
        ".##.",
        "....",
        ".#..",
    ),
    ".": (
        ".",
        ".",
        ".",
        ".",
        "#",
    ),
    "/": (
        "..#",
        "..#",
        ".#.",
        "#..",
        "#..",
    ),
    "|": (
        "#",
        "#",
        "#",
        "#",
        "#",
    ),
    ":": (
        ".",
        "#",
        ".",
        "#",
        ".",
    ),
    ";": (
        "..",
        ".#",
        "..",
        ".#",
        "#.",
    ),
    ",": (
        "..",
        "..",
        "..",
        ".#",
        "#.",
    ),
    "<": (
        "..#",
        ".#.",
        "#..",
        ".#.",
        "..#",
    ),
    ">": (
        "#..",
        ".#.",
        "..#",
        ".#.",
        "#..",
    ),
    "[": (
        "##",
        "#.",
        "#.",
        "#.",
        "##",
    ),
    "]": (
        "##",
        ".#",
        ".#",
        ".#",
        "##",
    ),
    "{": (
        ".##",
        ".#.",
        "#..",
        ".#.",
        ".##",
    ),
    "}": (
        "##.",
        ".#.",
        "..#",
        ".#.",
        "##.",
    ),
    "~": (
        "....",
        ".#.#",
        "#.#.",
        "....",
        "....",
    ),
    '"': (
        "#.#",
        "#.#",
        "...",
        "...",
        "...",
    ),
    "'": (
        "#",
        "#",
        ".",
        ".",
        ".",
    ),
    "`": (
        "#.",
        ".#",
        "..",
        "..",
        "..",
    ),
}
