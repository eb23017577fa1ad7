from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class StyleRule:
    """
    Styling decision for one node type.

    `class_name` is added to the node's own element. When `wrapper` is set, the
    styled element is placed inside a new `wrapper` element carrying
    `wrapper_class`. Children always pass through unchanged and in order.
    """

    class_name: str = ""
    wrapper: str | None = None
    wrapper_class: str = ""

    @property
    def is_identity(self) -> bool:
        return not self.class_name and self.wrapper is None


IDENTITY_RULE = StyleRule()

INLINE_CODE_RULE = StyleRule(class_name="bg-gray-100 rounded px-1")
BLOCK_CODE_RULE = StyleRule(wrapper="pre", wrapper_class="bg-gray-100 rounded p-4 mb-4")

# Headings shrink from h1 to h6; everything else is spacing, markers and accents.
_RULES: Mapping[str, StyleRule] = MappingProxyType(
    {
        "h1": StyleRule("text-4xl font-bold mb-4"),
        "h2": StyleRule("text-3xl font-bold mb-3"),
        "h3": StyleRule("text-2xl font-bold mb-2"),
        "h4": StyleRule("text-xl font-bold mb-2"),
        "h5": StyleRule("text-lg font-bold mb-1"),
        "h6": StyleRule("text-base font-bold mb-1"),
        "p": StyleRule("mb-4"),
        "ul": StyleRule("list-disc list-inside mb-4"),
        "ol": StyleRule("list-decimal list-inside mb-4"),
        "li": StyleRule("mb-1"),
        "a": StyleRule("text-blue-500 hover:underline"),
        "blockquote": StyleRule("border-l-4 border-gray-300 pl-4 italic mb-4"),
    }
)

STYLED_NODE_TYPES: frozenset[str] = frozenset(_RULES) | {"code"}


def style_for(node_type: str, *, inline: bool | None = None) -> StyleRule:
    """
    Look up the rule for a node type.

    Only `code` reads `inline`: False selects the padded block container, any
    other value the inline rule. Unlisted node types get `IDENTITY_RULE`.
    """
    if node_type == "code":
        return BLOCK_CODE_RULE if inline is False else INLINE_CODE_RULE
    return _RULES.get(node_type, IDENTITY_RULE)
