from __future__ import annotations

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters."""
    return text.translate(_HTML_ESCAPES)
