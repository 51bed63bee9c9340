"""
Render primitives — width-aware repeat / pad / center helpers.

Everything here is pure string arithmetic against an explicit width.
Nothing reads the live terminal; callers pass the width in.
"""

from consolebar.errors import NegativeWidthError


# ── Decoration tokens ─────────────────────────────────────────────────────────

SPACE = " "
COUNT_SEPARATOR = " / "
CARRIAGE_RETURN = "\r"
NEWLINE = "\n"


# ── Primitives ────────────────────────────────────────────────────────────────

def repeat(token: str, n: int) -> str:
    """Return `token` concatenated `n` times. Negative `n` is an error."""
    if n < 0:
        raise NegativeWidthError(f"cannot repeat {token!r} {n} times")
    return token * n


def pad_left(text: str, width: int, pad_char: str = SPACE) -> str:
    """Left-pad `text` to `width` columns. No-op when it is already that wide."""
    if len(text) >= width:
        return text
    return repeat(pad_char, width - len(text)) + text


def format_number(value: float) -> str:
    """
    Shortest decimal text for a count.

    Integral values drop their fractional part (120.0 → "120") and float
    noise past 15 significant digits is hidden (7/120*120 → "7").
    """
    return f"{value:.15g}"


def center(
    text: str,
    width: int,
    filler: str = SPACE,
    left_spacing: int = 1,
    right_spacing: int = 1,
    ignore_right: bool = False,
) -> str:
    """
    Center `text` within `width` columns:

        center("Done", 20, "─")  →  "─────── Done ──────"

    The spacing columns sit between the text and the filler. The right
    filler is one shorter for even-length content so the result never
    exceeds width - 1 columns (leaves the cursor column free).
    With ignore_right=True nothing is emitted after the right spacing.
    """
    inner = SPACE * left_spacing + text + SPACE * right_spacing
    filler_length = max(0, (width - len(inner)) // 2)
    out = repeat(filler, filler_length) + inner
    if not ignore_right:
        right = filler_length - 1 if len(inner) % 2 == 0 else filler_length
        out += repeat(filler, max(0, right))
    return out


def fill_row(char: str, width: int, addendum: str = "") -> str:
    """`char` repeated across width - 1 columns, followed by `addendum`."""
    return repeat(char, max(0, width - 1)) + addendum
