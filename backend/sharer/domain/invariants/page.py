from ..exceptions import ValidationError

TITLE_MAX_LENGTH = 255


def assert_page_content(html_content) -> str:
    """
    Shared HTML must be a string containing something other than whitespace.

    The content itself is returned untouched; it is stored byte-for-byte.
    """
    if html_content is None:
        raise ValidationError("No HTML content provided")
    if not isinstance(html_content, str):
        raise ValidationError("HTML content must be a string")
    if not html_content.strip():
        raise ValidationError("No HTML content provided")
    return html_content


def normalize_page_title(title):
    """Trimmed and cut to the column width. None and blank give None."""
    if title is None:
        return None
    if not isinstance(title, str):
        raise ValidationError("Title must be a string")
    return title.strip()[:TITLE_MAX_LENGTH] or None
