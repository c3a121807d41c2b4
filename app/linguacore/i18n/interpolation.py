"""Named placeholder substitution.

Replaces ``{name}`` placeholders with caller supplied values. Unknown
placeholders and unterminated braces are kept literally.
"""

from typing import Any, Mapping, Optional


def substitute(body: str, variables: Optional[Mapping[str, Any]] = None) -> str:
    """Replace ``{name}`` placeholders in body.

    The placeholder name is everything between a ``}`` and the nearest
    ``{`` before it.
    Values are inserted with ``str()`` and are not scanned again.

    Args:
        body: Resolved text with placeholders.
        variables: Mapping of placeholder name to value.

    Returns:
        Text with known placeholders replaced.

    Example:
        >>> substitute("Hi {name}, {unknown}", {"name": "Sara"})
        'Hi Sara, {unknown}'
    """
    if not variables or "{" not in body:
        return body

    parts = []
    position = 0
    while True:
        start = body.find("{", position)
        if start == -1:
            break
        end = body.find("}", start + 1)
        if end == -1:
            break
        start = body.rfind("{", start, end)

        name = body[start + 1 : end]
        if name in variables:
            parts.append(body[position:start])
            parts.append(str(variables[name]))
        else:
            parts.append(body[position : end + 1])
        position = end + 1

    parts.append(body[position:])
    return "".join(parts)
