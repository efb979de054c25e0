"""Plain-text helpers for rich-text article bodies."""

import re

from bs4 import BeautifulSoup, Comment

# Tags whose content never counts as readable body text
REMOVE_TAGS = frozenset(
    [
        "script",
        "style",
        "noscript",
        "iframe",
        "object",
        "embed",
        "svg",
        "canvas",
        "template",
    ]
)

_WHITESPACE = re.compile(r"\s+")


def html_to_text(html: str) -> str:
    """
    Strip markup from a rich-text body.

    Args:
        html: Editor output (HTML) or plain text

    Returns:
        Whitespace-normalized plain text
    """
    if not html:
        return ""

    # Plain text needs no parsing
    if "<" not in html:
        return _WHITESPACE.sub(" ", html).strip()

    soup = BeautifulSoup(html, "html.parser")

    for tag_name in REMOVE_TAGS:
        for tag in soup.find_all(tag_name):
            tag.decompose()

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    text = soup.get_text(separator=" ", strip=True)
    return _WHITESPACE.sub(" ", text).strip()


def count_words(content: str | None) -> int:
    """Count whitespace-separated words in a rich-text body."""
    if not content or not isinstance(content, str):
        return 0
    text = html_to_text(content)
    return len(text.split()) if text else 0
