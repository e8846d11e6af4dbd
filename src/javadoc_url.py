"""Utilities for building the URL of a class's Javadoc page."""

import re

from src.class_name import ClassName

# {field} or {field delimiter}
URL_PATTERN_FIELD_RE = re.compile(r"\{(.*?)(\s+(.*?))?\}")

FRAMES_PREFIX = "index.html?"


def expand_url_pattern(pattern: str, base_url: str | None, full_name: str) -> str:
    """Substitute the placeholders of an archive's javadocUrlPattern.

    ``{baseUrl}`` becomes the base URL and ``{full}`` the fully-qualified
    name, with dots replaced by the delimiter when one is given
    (``{full -}``). Unknown fields are removed.
    """

    def repl(m: re.Match) -> str:
        field = m.group(1)
        if field == "baseUrl":
            return base_url or ""
        if field == "full":
            delimiter = m.group(3)
            return full_name if delimiter is None else full_name.replace(".", delimiter)
        return ""

    return URL_PATTERN_FIELD_RE.sub(repl, pattern)


def default_javadoc_url(base_url: str, name: ClassName, *, frames: bool = False) -> str:
    """Build a URL using the standard javadoc tool layout."""
    parts = [base_url]
    if frames:
        parts.append(FRAMES_PREFIX)
    if name.package_name:
        parts.append(name.package_name.replace(".", "/") + "/")
    parts.extend(outer + "." for outer in name.outer_classes)
    parts.append(name.simple_name + ".html")
    return "".join(parts)
