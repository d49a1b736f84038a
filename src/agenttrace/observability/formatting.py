"""
Formatting utilities shared by the formatters and the error taxonomy.

Truncation policy: when `max_length` is zero or negative the limit is
clamped to 0, so any non-empty text collapses to the bare ellipsis marker
and empty text stays empty.
"""

from __future__ import annotations

ELLIPSIS = "..."


def truncate(text: str, max_length: int) -> str:
    """Truncate text to max_length characters, appending an ellipsis if cut.

    Args:
        text: Text to truncate
        max_length: Number of characters to keep

    Returns:
        `text` unchanged if it fits, otherwise the first `max_length`
        characters followed by "..."
    """
    limit = max(max_length, 0)
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def format_currency(value: float) -> str:
    """Render a cost with exactly six decimal places (no grouping)."""
    return f"{value:.6f}"


def format_ratio(value: float) -> str:
    """Render a similarity or threshold score with four decimal places."""
    return f"{value:.4f}"


def escape_json_string(text: str) -> str:
    """
    Escape text for embedding inside a JSON string literal.

    Backslashes are escaped first so the escapes added for quotes and
    newlines are not escaped again.

    Only backslash, double quote and newline are escaped. Other control
    characters such as tabs pass through unchanged, so text containing them
    does not produce a literal that strict JSON parsers accept.
    """
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def error_envelope(message: str) -> str:
    """
    Build the machine-readable error envelope returned to LLM/API consumers.

    Example:
        ```python
        error_envelope("Unknown function: 'calculate_tax'")
        # {"isError": true, "error": "Unknown function: 'calculate_tax'"}
        ```
    """
    return f'{{"isError": true, "error": "{escape_json_string(message)}"}}'
