"""Core type definitions."""

from enum import StrEnum
from typing import NewType

# URL path for routing (e.g., "blog/2020/01/15/hello", "tag/python")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)

DEFAULT_BLOG_KEY = "blog"
INDEX_PAGE_NAME = "_index"
TAG_PAGE_NAME = "_tag"
CATEGORY_PAGE_NAME = "_category"


class PageKind(StrEnum):
    """Kind of content a URI resolves to."""

    REGULAR = "regular"
    POST = "post"
    TAG = "tag"
    CATEGORY = "category"
