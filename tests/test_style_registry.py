import dataclasses

import pytest

from mdconv.services.style_registry import (
    BLOCK_CODE_RULE,
    IDENTITY_RULE,
    INLINE_CODE_RULE,
    STYLED_NODE_TYPES,
    StyleRule,
    style_for,
)

# Everything the parser setup can produce, styled or not.
PARSER_NODE_TYPES = [
    "h1", "h2", "h3", "h4", "h5", "h6",
    "p", "ul", "ol", "li", "a", "blockquote", "code", "pre",
    "em", "strong", "del", "br", "hr", "img",
    "table", "thead", "tbody", "tr", "th", "td",
]


@pytest.mark.parametrize("node_type", PARSER_NODE_TYPES + ["footnote", "task-item", "", "x-unknown"])
def test_style_for_is_total(node_type: str):
    rule = style_for(node_type)
    assert isinstance(rule, StyleRule)


def test_every_explicit_rule_adds_styling():
    for node_type in STYLED_NODE_TYPES:
        assert not style_for(node_type).is_identity, node_type


def test_heading_styles_are_distinct_and_shrink():
    sizes = ["text-4xl", "text-3xl", "text-2xl", "text-xl", "text-lg", "text-base"]
    rules = [style_for(f"h{level}") for level in range(1, 7)]
    assert len({r.class_name for r in rules}) == 6
    for rule, size in zip(rules, sizes):
        assert rule.class_name.split()[0] == size
        assert "font-bold" in rule.class_name


def test_list_markers_and_spacing():
    assert "list-disc" in style_for("ul").class_name
    assert "list-decimal" in style_for("ol").class_name
    assert "mb-4" in style_for("ul").class_name and "mb-4" in style_for("ol").class_name
    assert style_for("li").class_name == "mb-1"
    assert style_for("p").class_name == "mb-4"


def test_link_and_blockquote_styles():
    assert style_for("a").class_name == "text-blue-500 hover:underline"
    quote = style_for("blockquote").class_name
    assert "border-l-4" in quote and "italic" in quote


def test_code_uses_inline_flag():
    assert style_for("code", inline=True) is INLINE_CODE_RULE
    assert style_for("code") is INLINE_CODE_RULE
    assert style_for("code", inline=False) is BLOCK_CODE_RULE

    assert "px-1" in INLINE_CODE_RULE.class_name and INLINE_CODE_RULE.wrapper is None
    assert BLOCK_CODE_RULE.wrapper == "pre"
    assert "p-4" in BLOCK_CODE_RULE.wrapper_class
    # the code element inside the block container carries no extra styling
    assert BLOCK_CODE_RULE.class_name == ""


def test_inline_flag_ignored_for_other_types():
    assert style_for("p", inline=False) == style_for("p", inline=True) == style_for("p")


@pytest.mark.parametrize("node_type", ["strong", "em", "del", "table", "hr", "img", "footnote"])
def test_unlisted_types_fall_back_to_identity(node_type: str):
    assert style_for(node_type) is IDENTITY_RULE
    assert IDENTITY_RULE.is_identity


def test_rules_are_immutable_and_repeatable():
    first = style_for("h1")
    assert style_for("h1") == first
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.class_name = "changed"  # type: ignore[misc]
