"""String processing: decoding, replacement, searching, parsing and layout."""

from __future__ import annotations

import re
from collections.abc import Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_LEADING_INT = re.compile(r" *([+-]?)([0-9]*)")
_CLOSE_TO_OPEN = {")": "(", "]": "[", "}": "{"}


def decode_string(s: str) -> str:
    """Expand an encoding such as ``3[a2[c]]`` into ``accaccacc``."""
    stack: list[tuple[list[str], int]] = [([], 0)]
    times = 0
    for ch in s:
        if "0" <= ch <= "9":
            times = times * 10 + int(ch)
        elif ch == "[":
            stack.append(([], times))
            times = 0
        elif ch == "]":
            if len(stack) == 1:
                raise ValueError("unbalanced ']' in encoded string")
            parts, repeat = stack.pop()
            stack[-1][0].append("".join(parts) * repeat)
        else:
            stack[-1][0].append(ch)
    if len(stack) != 1:
        raise ValueError("unclosed '[' in encoded string")
    return "".join(stack[0][0])


def find_replace_string(
    s: str,
    indices: Sequence[int],
    sources: Sequence[str],
    targets: Sequence[str],
) -> str:
    """Replace each source found at its index in ``s`` by the matching target."""
    matches = {
        index: position
        for position, (index, source) in enumerate(zip(indices, sources))
        if index >= 0 and s.startswith(source, index)
    }
    pieces: list[str] = []
    index = 0
    while index < len(s):
        position = matches.get(index)
        if position is None:
            pieces.append(s[index])
            index += 1
        else:
            pieces.append(targets[position])
            index += len(sources[position])
    return "".join(pieces)


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def parse_int(text: str) -> int:
    """Read a leading 32-bit signed integer, clamping on overflow."""
    match = _LEADING_INT.match(text)
    sign, digits = match.group(1), match.group(2).lstrip("0")
    if len(digits) > 11:
        digits = digits[:11]
    value = int(digits or "0")
    if sign == "-":
        value = -value
    return max(INT_MIN, min(INT_MAX, value))


def is_valid_parentheses(s: str) -> bool:
    """Whether every bracket in ``s`` is closed by its partner in order."""
    opened: list[str] = []
    for ch in s:
        if ch in "([{":
            opened.append(ch)
        elif not opened or opened[-1] != _CLOSE_TO_OPEN.get(ch):
            return False
        else:
            opened.pop()
    return not opened


def _justify_line(line: list[str], length: int, max_width: int) -> str:
    if len(line) == 1:
        return line[0].ljust(max_width)
    average, extra = divmod(max_width - length, len(line) - 1)
    padded = (
        word + " " * (average + (1 if position < extra else 0))
        for position, word in enumerate(line[:-1])
    )
    return "".join(padded) + line[-1]


def full_justify(words: Sequence[str], max_width: int) -> list[str]:
    """Lay words out in fully justified lines of exactly ``max_width`` characters."""
    lines: list[str] = []
    line: list[str] = []
    length = 0
    for word in words:
        if len(word) > max_width:
            raise ValueError(f"word {word!r} is longer than {max_width}")
        if line and length + len(line) + len(word) > max_width:
            lines.append(_justify_line(line, length, max_width))
            line, length = [], 0
        line.append(word)
        length += len(word)
    lines.append(" ".join(line).ljust(max_width))
    return lines