"""
Comment aggregation for UML Enum Generator.

Model elements carry zero or more free-text comments. They are merged into one
multi-line text and split back into the lines of a documentation block.
"""

from typing import List, Sequence

from ..constants import Separators


def concat_comments(comments: Sequence[str]) -> str:
    """
    Merge comment bodies into one text, one body per line.

    Args:
        comments: Comment bodies in model order

    Returns:
        The bodies joined by newlines, without a trailing newline; the empty
        string when there are no comments

    Example:
        >>> concat_comments(["a", "b"])
        'a\\nb'
        >>> concat_comments([])
        ''
    """
    if not comments:
        return ""
    return Separators.COMMENT.join(comments)


def comment_lines(text: str) -> List[str]:
    """
    Split an aggregated comment into documentation lines.

    Trailing empty lines are dropped so a documentation block never ends with a
    blank line. Blank lines between paragraphs are kept.
    """
    lines = text.split(Separators.COMMENT)
    while lines and not lines[-1]:
        lines.pop()
    return lines
