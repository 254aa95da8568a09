"""URL template compilation.

Blog URL templates are plain strings with ``%placeholder%`` tokens, e.g.
``%year%/%month%/%day%/%slug%`` or ``tag/%tag%``. This module turns them
into anchored patterns with named captures, and builds canonical tag URIs.
"""

import re
from collections.abc import Iterable

_POST_PLACEHOLDERS = {
    "%year%": r"(?P<year>\d{4})",
    "%month%": r"(?P<month>\d{2})",
    "%day%": r"(?P<day>\d{2})",
    "%slug%": r"(?P<slug>.*?)",
}
_TAG_PLACEHOLDER = ("%tag%", r"(?P<tag>[\w\-\./]+)")
_CATEGORY_PLACEHOLDER = ("%category%", r"(?P<category>[\w\-\.]+)")


class UriPattern:
    """Compiled URL template.

    Matches a whole URI (one trailing slash tolerated) and exposes the
    named captures of the template's placeholders.
    """

    __slots__ = ("_regex", "template")

    def __init__(self, template: str, regex: str) -> None:
        self.template = template
        self._regex = re.compile(regex + "/?")

    def match(self, uri: str) -> dict[str, str] | None:
        """Match a URI against the template.

        Args:
            uri: Normalized relative URI (no leading slash)

        Returns:
            Capture name to value mapping, or None if the URI doesn't match
        """
        m = self._regex.fullmatch(uri)
        if m is None:
            return None
        return m.groupdict()

    def __repr__(self) -> str:
        return f"UriPattern({self.template!r})"


def _compile(template: str, replacements: Iterable[tuple[str, str]]) -> UriPattern:
    regex = re.escape(template)
    for placeholder, group in replacements:
        regex = regex.replace(re.escape(placeholder), group)
    return UriPattern(template, regex)


def _check_placeholders(kind: str, template: str, placeholders: Iterable[str]) -> None:
    """Require every placeholder exactly once in template.

    Raises:
        ValueError: If a placeholder is missing or repeated
    """
    for placeholder in placeholders:
        count = template.count(placeholder)
        if count == 0:
            raise ValueError(
                f"{kind} URL template {template!r} is missing {placeholder}"
            )
        if count > 1:
            raise ValueError(f"{kind} URL template {template!r} repeats {placeholder}")


def build_post_uri_pattern(template: str) -> UriPattern:
    """Compile a post URL template.

    Raises:
        ValueError: If a date or slug placeholder is missing or repeated
    """
    _check_placeholders("Post", template, _POST_PLACEHOLDERS)
    return _compile(template, _POST_PLACEHOLDERS.items())


def build_tag_uri_pattern(template: str) -> UriPattern:
    """Compile a tag listing URL template.

    The ``tag`` capture may span several path segments for multi-tag URIs.

    Raises:
        ValueError: If the template doesn't contain %tag% exactly once
    """
    _check_placeholders("Tag", template, [_TAG_PLACEHOLDER[0]])
    return _compile(template, [_TAG_PLACEHOLDER])


def build_category_uri_pattern(template: str) -> UriPattern:
    """Compile a category listing URL template.

    Raises:
        ValueError: If the template doesn't contain %category% exactly once
    """
    _check_placeholders("Category", template, [_CATEGORY_PLACEHOLDER[0]])
    return _compile(template, [_CATEGORY_PLACEHOLDER])


def build_tag_uri(template: str, tags: str | Iterable[str]) -> str:
    """Build a tag listing URI.

    Multiple tags are sorted so the URI is the one the resolver accepts.
    """
    if isinstance(tags, str):
        value = tags
    else:
        value = "/".join(sorted(tags))
    return template.replace(_TAG_PLACEHOLDER[0], value)
