"""
Text processing utilities for fitting resume content into fixed-width layouts.
"""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def wrap_text_to_width(text: str, max_chars_per_line: int) -> str:
    """
    Greedily pack whitespace-delimited words into lines of limited length.

    Text that already fits is returned untouched, so intentional spacing in short
    strings (e.g. skill groups joined with several spaces) survives. Longer text is
    re-flowed word by word. A word longer than the limit gets a line of its own and
    is never split.

    Re-wrapping the output at the same width returns it unchanged.

    Args:
        text: Text to wrap
        max_chars_per_line: Maximum characters per output line (>= 1)

    Returns:
        Newline-joined lines

    Raises:
        ValueError: If max_chars_per_line is less than 1

    Example:
        >>> wrap_text_to_width("a bb ccc dddd", 6)
        'a bb\\nccc\\ndddd'
    """
    if max_chars_per_line < 1:
        raise ValueError(f"max_chars_per_line must be >= 1, got {max_chars_per_line}")

    if len(text) <= max_chars_per_line:
        return text

    lines = []
    current_line = ""

    for word in text.split():
        if not current_line:
            current_line = word
        elif len(current_line) + 1 + len(word) > max_chars_per_line:
            lines.append(current_line)
            current_line = word
        else:
            current_line = f"{current_line} {word}"

    if current_line:
        lines.append(current_line)

    return "\n".join(lines)


def group_items(items: Sequence[T], group_size: int = 3) -> List[List[T]]:
    """
    Partition a sequence into consecutive chunks of a fixed size.

    Order is preserved and only the last chunk may be shorter.

    Args:
        items: Items to partition
        group_size: Number of items per chunk (>= 1)

    Returns:
        List of chunks (empty list for empty input)

    Raises:
        ValueError: If group_size is less than 1

    Example:
        >>> group_items(["A", "B", "C", "D", "E"], 3)
        [['A', 'B', 'C'], ['D', 'E']]
    """
    if group_size < 1:
        raise ValueError(f"group_size must be >= 1, got {group_size}")

    return [list(items[i : i + group_size]) for i in range(0, len(items), group_size)]


def indent_continuation_lines(text: str, indent: str = "  ") -> str:
    """Indent every line after the first (used to hang wrapped bullet text)."""
    return text.replace("\n", "\n" + indent)
