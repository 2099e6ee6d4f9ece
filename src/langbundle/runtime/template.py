"""Placeholder substitution for message text.

Placeholders have the form ``{{.Name}}``; whitespace is allowed inside the
braces (``{{ .Name }}``). A placeholder whose name is not in the data is left
in the output unchanged, so a missing value is visible rather than silently
blank.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re

from langbundle.catalog.message import text_of
from langbundle.catalog.types import TemplateData

__all__ = ["PLACEHOLDER_PATTERN", "render_template"]

PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(
    r"\{\{\s*\.([A-Za-z_][A-Za-z0-9_]*)\s*\}\}"
)


def render_template(text: str, data: TemplateData | None) -> str:
    """Substitute ``{{.Key}}`` placeholders with values from ``data``.

    Args:
        text: Message text
        data: Placeholder name -> value. Values are rendered with text_of().

    Returns:
        The rendered text. Text without placeholders is returned as-is.

    Example:
        >>> render_template("Hello, {{.Name}}", {"Name": "Ada"})
        'Hello, Ada'
        >>> render_template("{{.Count}} items", {})
        '{{.Count}} items'
    """
    if not data or "{{" not in text:
        return text

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in data:
            return match.group(0)
        return text_of(data[name])

    return PLACEHOLDER_PATTERN.sub(_substitute, text)

