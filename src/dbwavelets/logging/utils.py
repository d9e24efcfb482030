"""Message wrappers."""

from __future__ import annotations

from typing import Literal


def assert_char(char: str) -> None:
    """Assert that a string is a character.

    Args:
        char (str): Character.

    Raises:
        ValueError: If char is not a single character.
    """
    if len(char) != 1:
        msg = "The fill character must be exactly one character long."
        raise ValueError(msg)


box_styles = {
    "=": ("═", "║", "╔", "╗", "╚", "╝", "╠", "╣"),
    "-": ("─", "│", "┌", "┐", "└", "┘", "├", "┤"),
    "round": ("─", "│", "╭", "╮", "╰", "╯", "├", "┤"),
}

BoxStyles = Literal["-", "round", "="]


def box(
    *msgs: str,
    style: BoxStyles = "=",
    char: str | None = None,
) -> str:
    """Draw a box around messages, one compartment per message.

    Args:
        *msgs (str): Messages to draw a box around.
        style (BoxStyles, optional): Box style. Ignored if char is not None.
            Defaults to "=".
        char (str | None, optional): Char to use to draw the border.
            Take precedence over 'style'. Defaults to None.

    Raises:
        ValueError: If wrong style is passed.

    Returns:
        str: Boxed messages.
    """
    if char is None and style not in box_styles:
        msg = f"Available styles are {', '.join(list(box_styles.keys()))}"
        raise ValueError(msg)
    if char is not None:
        assert_char(char)
        h = v = tl = tr = bl = br = ml = mr = char
    else:
        h, v, tl, tr, bl, br, ml, mr = box_styles[style]
    width = max(len(line) for m in msgs for line in m.split("\n"))
    rule = "".join([h] * (width + 2))
    lines = [tl + rule + tr]
    for m in msgs:
        lines += [f"{v} {line.center(width)} {v}" for line in m.split("\n")]
        lines.append(ml + rule + mr)
    lines[-1] = bl + rule + br
    return "\n".join(lines)


def sec2text(time: float) -> str:
    """Convert time in seconds to text.

    Args:
        time (float): Time in seconds.

    Returns:
        str: Text.
    """
    if time < 1:
        return f"{time * 1e3:.1f} ms"
    if time < 60:  # noqa: PLR2004
        s = "s" if time >= 2 else ""  # noqa: PLR2004
        return f"{time:.1f} second{s}"
    minutes = time / 60
    s = "s" if minutes >= 2 else ""  # noqa: PLR2004
    return f"{minutes:.1f} minute{s}"
