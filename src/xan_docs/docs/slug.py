"""Anchor slugs for Markdown summaries."""


def slug(title: str) -> str:
    """Turn a heading title into the anchor a Markdown renderer derives from it.

    The title is lower-cased, every character that is not a space, a hyphen
    or an ASCII letter/digit is removed, then spaces become hyphens. No
    trimming or hyphen collapsing is done: "Foo & Bar" gives "foo--bar".
    Hyphens already in the title survive, so "left-hand" stays "left-hand".

    Example:
        >>> slug("Foo Bar!")
        'foo-bar'
    """
    kept = "".join(
        char
        for char in title.lower()
        if char in " -" or (char.isascii() and char.isalnum())
    )
    return kept.replace(" ", "-")
