"""Named RGBA colours for plotting, each an ``(r, g, b, a)`` tuple in 0.0-1.0."""

RGBA = tuple[float, float, float, float]


class Color:
    """Palette of named, fully opaque colours."""

    # Monochrome
    BLACK: RGBA = (0.0, 0.0, 0.0, 1.0)
    DARK_GRAY: RGBA = (0.1, 0.1, 0.12, 1.0)
    WHITE: RGBA = (1.0, 1.0, 1.0, 1.0)

    # Elements
    RED: RGBA = (0.9, 0.2, 0.2, 1.0)
    BLUE: RGBA = (0.2, 0.5, 1.0, 1.0)
    GREEN: RGBA = (0.2, 0.8, 0.3, 1.0)
    YELLOW: RGBA = (1.0, 0.85, 0.1, 1.0)

    # Synthetic
    CYAN: RGBA = (0.0, 1.0, 1.0, 1.0)
    MAGENTA: RGBA = (1.0, 0.2, 0.8, 1.0)
    PURPLE: RGBA = (0.6, 0.2, 1.0, 1.0)
    ORANGE: RGBA = (1.0, 0.5, 0.0, 1.0)

    # Soft and pastel
    SOFT_PINK: RGBA = (1.0, 0.7, 0.75, 1.0)
    ICE_BLUE: RGBA = (0.7, 0.9, 1.0, 1.0)
    MINT: RGBA = (0.6, 1.0, 0.7, 1.0)


BLACK = Color.BLACK
DARK_GRAY = Color.DARK_GRAY
WHITE = Color.WHITE
RED = Color.RED
BLUE = Color.BLUE
GREEN = Color.GREEN
YELLOW = Color.YELLOW
CYAN = Color.CYAN
MAGENTA = Color.MAGENTA
PURPLE = Color.PURPLE
ORANGE = Color.ORANGE
SOFT_PINK = Color.SOFT_PINK
ICE_BLUE = Color.ICE_BLUE
MINT = Color.MINT