import re
import time
from dataclasses import dataclass, field
from typing import Callable

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from config import DOWNLOAD_ATTEMPTS, RETRY_DELAY

BLOCK_TAGS = {
    "address", "article", "aside", "blockquote", "br", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section", "table",
    "td", "th", "tr", "ul",
}


def normalize_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def element_text(element: Tag) -> str:
    """
    Visible text of ``element``, whitespace collapsed.
    Inline tags are joined as-is, block tags are separated by a space.
    """
    parts = []
    _collect_text(element, parts)
    return normalize_text("".join(parts))


def _collect_text(element: Tag, parts: list):
    for node in element.children:
        if isinstance(node, Tag):
            block = node.name in BLOCK_TAGS
            if block:
                parts.append(" ")
            _collect_text(node, parts)
            if block:
                parts.append(" ")
        elif isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            parts.append(str(node))


@dataclass
class RetryPolicy:
    """
    Bounded retry with a fixed delay between attempts.
    ``sleep`` is injectable so tests don't wait.
    """

    attempts: int = DOWNLOAD_ATTEMPTS
    delay: float = RETRY_DELAY
    sleep: Callable[[float], None] = field(default=time.sleep)

    def run(self, step: Callable, on_retry: Callable = None):
        """
        Calls ``step()`` until it returns an ok result or attempts run out.
        Returns the last result.
        """
        result = step()
        for attempt in range(2, self.attempts + 1):
            if result.ok:
                break
            if on_retry:
                on_retry(attempt, result)
            self.sleep(self.delay)
            result = step()
        return result
