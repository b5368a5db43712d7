"""Strip markup and control characters from free text before it is stored."""
import re

# Like PHP's strip_tags: "<" opens a tag only when a non-space character
# follows it, and an unterminated tag swallows the rest of the string.
_TAG = re.compile(r"<(?!\s)[^>]*(?:>|$)")
_CONTROL = re.compile(r"[\x00-\x1f\x7f]")


def sanitize_text(value: str) -> str:
    """Remove tags and ASCII control characters. Quotes and a bare "<" are left untouched."""
    value = _TAG.sub("", value)
    return _CONTROL.sub("", value)
