# sheet2csv/core/functions/text_escape.py
"""
Escaping applied to exported CSV text.
"""
import re

# a percent sign together with the backslashes directly in front of it
_PERCENT_PATTERN = re.compile(r"(\\*)%")


def escape_percent(text: str) -> str:
    """
    Escape every percent sign that has not been escaped already.

    A percent sign counts as escaped when it is preceded by an odd number
    of backslashes.

    Args:
        text: Text to escape

    Returns:
        Text with every unescaped "%" replaced by "\\%"
    """
    if not text:
        return text

    def _replace(match: "re.Match") -> str:
        backslashes = match.group(1)
        if len(backslashes) % 2 == 1:
            return match.group(0)
        return backslashes + "\\%"

    return _PERCENT_PATTERN.sub(_replace, text)
