"""Render Markdown into a small element tree that serialises to HTML."""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Union

from markdown_it import MarkdownIt
from markdown_it.token import Token

logger = logging.getLogger(__name__)

_PARSER = MarkdownIt("commonmark").enable("table")

_VOID_TAGS = frozenset({"br", "hr", "img", "input"})

_LANGUAGE_CLASSES = {
    "html": "html-language",
    "rust": "rust-language",
    "java": "java-language",
    "c": "c-language",
}

_ALIGN_CLASSES = {
    "left": "text-left",
    "center": "text-center",
    "right": "text-right",
}

Node = Union["Element", str]


@dataclass
class Element:
    """An HTML element with ordered attributes and element or text children."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List[Node] = field(default_factory=list)

    def add_attribute(self, name: str, value: str) -> None:
        """Set an attribute, replacing any earlier value."""
        self.attributes[name] = value

    def add_child(self, child: Node) -> None:
        self.children.append(child)

    def to_html(self) -> str:
        attrs = "".join(
            f' {name}="{html.escape(value, quote=True)}"' for name, value in self.attributes.items()
        )
        if self.tag in _VOID_TAGS and not self.children:
            return f"<{self.tag}{attrs}>"
        inner = "".join(
            html.escape(child, quote=False) if isinstance(child, str) else child.to_html()
            for child in self.children
        )
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


def add_class(element: Element, classes: Union[str, Iterable[str]]) -> None:
    """Add whitespace-separated classes to an element, keeping existing ones and order."""
    if isinstance(classes, str):
        classes = [classes]
    merged: List[str] = []
    for name in element.attributes.get("class", "").split():
        if name not in merged:
            merged.append(name)
    for group in classes:
        for name in group.split():
            if name not in merged:
                merged.append(name)
    element.add_attribute("class", " ".join(merged))


def _classed(tag: str, css: str) -> Element:
    return Element(tag, {"class": css})


def _cell_alignment(token: Token) -> Optional[str]:
    style = token.attrGet("style")
    if isinstance(style, str) and style.startswith("text-align:"):
        return style[len("text-align:"):].strip()
    return None


class _Builder:
    def __init__(self) -> None:
        self.elems: List[Element] = []
        self.spine: List[Element] = []
        self.aligns: List[Optional[str]] = []
        self.in_thead = False

    def add_child(self, child: Node) -> None:
        if self.spine:
            self.spine[-1].add_child(child)
        elif isinstance(child, Element):
            self.elems.append(child)
        else:
            logger.debug("Dropping text outside any block: %r", child)

    def push(self, element: Element) -> None:
        self.spine.append(element)

    def close(self, kind: Optional[str] = None) -> None:
        top = self.spine.pop()
        if kind == "table":
            for row in top.children:
                if not isinstance(row, Element):
                    continue
                for i, cell in enumerate(row.children):
                    if isinstance(cell, Element) and i < len(self.aligns):
                        css = _ALIGN_CLASSES.get(self.aligns[i] or "")
                        if css is not None:
                            add_class(cell, css)
        elif kind == "thead":
            for cell in top.children:
                if isinstance(cell, Element):
                    cell.add_attribute("scope", "col")
        self.add_child(top)

    def feed(self, tokens: Sequence[Token]) -> None:
        for token in tokens:
            self._handle(token)

    def _handle(self, token: Token) -> None:
        kind = token.type
        if kind == "paragraph_open":
            if not token.hidden:
                self.push(Element("p"))
        elif kind == "paragraph_close":
            if not token.hidden:
                self.close()
        elif kind == "heading_open":
            self.push(Element(token.tag))
        elif kind == "blockquote_open":
            self.push(_classed("blockquote", "blockquote"))
        elif kind == "bullet_list_open":
            self.push(Element("ul"))
        elif kind == "ordered_list_open":
            element = Element("ol")
            start = token.attrGet("start")
            if start is not None and int(start) != 1:
                element.add_attribute("start", str(int(start)))
            self.push(element)
        elif kind == "list_item_open":
            self.push(Element("li"))
        elif kind == "table_open":
            self.aligns = []
            self.push(_classed("table", "table"))
        elif kind == "table_close":
            self.close("table")
        elif kind == "thead_open":
            self.in_thead = True
            self.push(Element("th"))
        elif kind == "thead_close":
            self.in_thead = False
            self.close("thead")
        elif kind in ("tbody_open", "tbody_close"):
            pass
        elif kind == "tr_open":
            if not self.in_thead:
                self.push(Element("tr"))
        elif kind == "tr_close":
            if not self.in_thead:
                self.close()
        elif kind in ("th_open", "td_open"):
            if self.in_thead:
                self.aligns.append(_cell_alignment(token))
            self.push(Element("td"))
        elif kind in ("fence", "code_block"):
            code = Element("code")
            if kind == "fence":
                css = _LANGUAGE_CLASSES.get(token.info)
                if css is not None:
                    code.add_attribute("class", css)
            code.add_child(token.content)
            self.add_child(Element("pre", children=[code]))
        elif kind == "hr":
            self.add_child(Element("hr"))
        elif kind == "inline":
            self.feed(token.children or [])
        elif kind in ("text", "text_special"):
            if token.content:
                self.add_child(token.content)
        elif kind == "softbreak":
            self.add_child("\n")
        elif kind == "hardbreak":
            self.add_child(Element("br"))
        elif kind == "em_open":
            self.push(_classed("span", "font-italic"))
        elif kind == "strong_open":
            self.push(_classed("span", "font-weight-bold"))
        elif kind == "link_open":
            link = Element("a")
            link.add_attribute("href", str(token.attrGet("href") or ""))
            title = token.attrGet("title")
            if title:
                link.add_attribute("title", str(title))
            self.push(link)
        elif kind == "image":
            image = Element("img")
            image.add_attribute("src", str(token.attrGet("src") or ""))
            title = token.attrGet("title")
            if title:
                image.add_attribute("title", str(title))
            self.push(image)
            self.feed(token.children or [])
            self.close()
        elif kind.endswith("_close"):
            self.close()
        else:
            logger.debug("Unknown event: %s", token)


def render_markdown(src: str) -> Element:
    """Render Markdown (tables enabled) to a single element, wrapping several in a div."""
    builder = _Builder()
    builder.feed(_PARSER.parse(src))
    if len(builder.elems) == 1:
        return builder.elems[0]
    return Element("div", children=list(builder.elems))