"""pixeltext - Render text as fixed-height pixel art.

pixeltext turns a line of text into a grid of 0/1 pixels using a built-in,
variable-width 5-row bitmap font. Glyphs are laid out left to right with a
single blank column between them and a one-pixel blank border around the
whole canvas.

Example:
    $ pixeltext "Hi"

    output:
    000000000
    010001010
    010001000
    011111010
    010001010
    010001010
    000000000
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
