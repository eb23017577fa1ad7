from __future__ import annotations

from collections.abc import Callable
from xml.etree.ElementTree import Element

from mdconv.domain.interfaces import IHtmlSerializer, IMarkdownParser, IRenderPipeline
from mdconv.domain.models import RenderResult
from mdconv.services.html_serializer import HtmlSerializer
from mdconv.services.markdown_parser import MarkdownParser
from mdconv.services.style_registry import STYLED_NODE_TYPES, StyleRule, style_for
from mdconv.utils.logger import get_logger

log = get_logger(__name__)

StyleLookup = Callable[..., StyleRule]


def _merge_class(rule_class: str, existing: str | None) -> str:
    return " ".join(c for c in (rule_class, existing or "") if c)


def _is_block_code(node: Element) -> bool:
    return node.tag == "pre" and len(node) == 1 and node[0].tag == "code" and not (node.text or "").strip()


def _copy_styled(node: Element, class_name: str, lookup: StyleLookup, unstyled: set[str]) -> Element:
    attrib = dict(node.attrib)
    merged = _merge_class(class_name, attrib.get("class"))
    if merged:
        attrib["class"] = merged
    out = Element(node.tag, attrib)
    out.text = node.text
    for child in node:
        out.append(_style_node(child, lookup, unstyled))
    return out


def _style_node(node: Element, lookup: StyleLookup, unstyled: set[str]) -> Element:
    if _is_block_code(node):
        rule = lookup("code", inline=False)
        inner = _copy_styled(node[0], rule.class_name, lookup, unstyled)
        inner.tail = node[0].tail
        attrib = dict(node.attrib)
        merged = _merge_class(rule.wrapper_class, attrib.get("class"))
        if merged:
            attrib["class"] = merged
        # The container replaces the parsed <pre>; without a wrapper the <pre> is kept.
        wrapper = Element(rule.wrapper or node.tag, attrib)
        wrapper.text = node.text
        wrapper.append(inner)
        wrapper.tail = node.tail
        return wrapper

    rule = lookup(node.tag, inline=True) if node.tag == "code" else lookup(node.tag)
    if node.tag not in STYLED_NODE_TYPES:
        unstyled.add(str(node.tag))
    out = _copy_styled(node, rule.class_name, lookup, unstyled)
    if rule.wrapper is not None:
        wrapper = Element(rule.wrapper, {"class": rule.wrapper_class} if rule.wrapper_class else {})
        wrapper.append(out)
        wrapper.tail = node.tail
        return wrapper
    out.tail = node.tail
    return out


def style_tree(root: Element, lookup: StyleLookup = style_for) -> Element:
    """
    Build a styled copy of a parsed tree.

    Walks depth first in document order. The root keeps its tag and attributes;
    every descendant is rebuilt through its StyleRule. Text, tails and
    attributes are carried over, so no content is dropped or reordered.
    The input tree is left untouched.
    """
    unstyled: set[str] = set()
    styled = Element(root.tag, dict(root.attrib))
    styled.text = root.text
    for child in root:
        styled.append(_style_node(child, lookup, unstyled))
    if unstyled:
        log.debug("Rendered without style rule: %s", ", ".join(sorted(unstyled)))
    return styled


class RenderPipeline(IRenderPipeline):
    """Markdown text -> parsed tree -> styled tree -> HTML, in one synchronous pass."""

    def __init__(
        self,
        parser: IMarkdownParser | None = None,
        serializer: IHtmlSerializer | None = None,
        lookup: StyleLookup = style_for,
    ) -> None:
        self.parser: IMarkdownParser = parser or MarkdownParser()
        self.serializer: IHtmlSerializer = serializer or HtmlSerializer()
        self._lookup = lookup

    def render(self, markdown_text: str) -> RenderResult:
        parsed = self.parser.parse(markdown_text)
        styled = style_tree(parsed, self._lookup)
        html = self.serializer.serialize(styled)
        log.debug("Rendered %d chars of Markdown into %d chars of HTML", len(markdown_text), len(html))
        return RenderResult(source=markdown_text, tree=styled, html=html)
