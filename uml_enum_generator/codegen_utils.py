"""
Formatting pass for generated Java code.

Re-indents rendered sources by brace depth; code it cannot balance is written as rendered.
"""

import logging
from pathlib import Path
from typing import Tuple


logger = logging.getLogger(__name__)

DEFAULT_INDENT_WIDTH = 4


def _scan_braces(line: str, in_comment: bool) -> Tuple[int, int, int, bool]:
    """
    Count the code braces of one line.

    Braces inside string and character literals and inside comments are ignored.

    Returns:
        (opening braces, closing braces, closing braces before any other code,
        whether the line ends inside a block comment)
    """
    opens = closes = leading_closes = 0
    seen_code = False
    quote = None
    i = 0
    while i < len(line):
        char = line[i]
        pair = line[i:i + 2]
        if in_comment:
            if pair == "*/":
                in_comment = False
                i += 2
                continue
        elif quote:
            if char == "\\":
                i += 2
                continue
            if char == quote:
                quote = None
        elif pair == "/*":
            in_comment = True
            i += 2
            continue
        elif pair == "//":
            break
        elif char in ('"', "'"):
            quote = char
            seen_code = True
        elif char == "{":
            opens += 1
            seen_code = True
        elif char == "}":
            closes += 1
            if not seen_code:
                leading_closes += 1
        elif not char.isspace():
            seen_code = True
        i += 1
    return opens, closes, leading_closes, in_comment


def format_java_code(filepath: Path, code_string: str, indent_width: int = DEFAULT_INDENT_WIDTH) -> str:
    """
    Re-indents the given Java code by brace depth.

    Blank lines are kept, comment continuation lines are aligned under the opening
    ``/*``. Code with unbalanced braces is returned unchanged.
    """
    indent = " " * indent_width
    formatted_lines = []
    depth = 0
    in_comment = False

    for raw_line in code_string.splitlines():
        line = raw_line.strip()
        if not line:
            formatted_lines.append("")
            continue

        started_in_comment = in_comment
        opens, closes, leading_closes, in_comment = _scan_braces(line, in_comment)

        line_depth = max(depth - leading_closes, 0)
        prefix = indent * line_depth
        if started_in_comment and line.startswith("*"):
            prefix += " "
        formatted_lines.append(prefix + line)

        depth += opens - closes
        if depth < 0:
            break

    if depth != 0 or in_comment:
        logger.warning(
            f"Could not format Java code of {filepath}: unbalanced braces or comments. "
            "Writing unformatted Java code."
        )
        return code_string

    logger.debug(f"Formatted Java code: {filepath}")
    return "\n".join(formatted_lines).rstrip("\n") + "\n"
