"""URL slugs for catalog entries."""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lowercase `name` and collapse every run of other characters into one hyphen.

    >>> slugify("Ceylon Black Tea!")
    'ceylon-black-tea'
    """
    return _NON_ALNUM.sub("-", name.lower()).strip("-")
