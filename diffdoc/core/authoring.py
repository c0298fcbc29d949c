from __future__ import annotations
import re

_LEADING_WS = re.compile(r"^(\s*)")

def dedent_code(text: str) -> str:
    """
    Normalize a diff block written indented inside a data file.
    Drops a blank first and last line, then removes the common leading
    whitespace so the diff marker sits at column 0. Blank lines become "".
    """
    lines = text.split("\n")
    if lines and lines[0].strip() == "":
        lines.pop(0)
    if lines and lines[-1].strip() == "":
        lines.pop()

    widths = [len(_LEADING_WS.match(l).group(1)) for l in lines if l.strip()]
    indent = min(widths) if widths else 0

    return "\n".join(l[indent:] if l.strip() else "" for l in lines)
