"""Line comment removal."""

from __future__ import annotations


def strip_line_comments(text: str, *, string_aware: bool = False) -> str:
    """Drop `#` and the rest of its line from every line of `text`.

    Newlines are kept, so line numbers computed on the result match the input.
    By default a `#` inside a quoted string still starts a comment; pass
    `string_aware=True` to keep it.
    """
    if not string_aware:
        return "\n".join(line.split("#", 1)[0] for line in text.split("\n"))
    return "\n".join(_strip_string_aware(line) for line in text.split("\n"))


def _strip_string_aware(line: str) -> str:
    in_string = False
    for index, ch in enumerate(line):
        if ch == '"' and (index == 0 or line[index - 1] != "\\"):
            in_string = not in_string
        elif ch == "#" and not in_string:
            return line[:index]
    return line
