import re

_SLUG_STRIP = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")
_FILENAME_UNSAFE = re.compile(r"[^A-Za-z0-9.-]")


def slugify(title: str) -> str:
    """
    Build a URL slug from a title.

    "Advanced React: Hooks & Context API!" -> "advanced-react-hooks-context-api"
    """
    slug = _SLUG_STRIP.sub("", title.lower())
    slug = _WHITESPACE.sub("-", slug.strip())
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def sanitize_filename(name: str) -> str:
    """Replace every character outside [A-Za-z0-9.-] with an underscore."""
    return _FILENAME_UNSAFE.sub("_", name)
