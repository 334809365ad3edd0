"""Selector-based query adapter over selectolax.

Crawl logic only talks to ``HtmlDocument`` so it can be exercised against inline
HTML fixtures without a network.
"""

from __future__ import annotations

from typing import List, Optional

from selectolax.parser import HTMLParser, Node


class HtmlDocument:
    def __init__(self, html: str) -> None:
        self._doc = HTMLParser(html or "")

    def query(self, selector: str) -> List[Node]:
        """All nodes matching ``selector`` in document order."""
        return list(self._doc.css(selector) or [])

    def first(self, selector: str) -> Optional[Node]:
        return self._doc.css_first(selector)

    @staticmethod
    def attribute(node: Node, name: str) -> Optional[str]:
        # Valueless attributes (<div data-url>) come back as None from selectolax
        return node.attributes.get(name)

    @staticmethod
    def text(node: Node) -> str:
        return (node.text() or "").strip()
