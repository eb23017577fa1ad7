from __future__ import annotations

from xml.etree.ElementTree import Element

from markdown import util
from markdown.serializers import to_html_string

from mdconv.domain.interfaces import IHtmlSerializer


class HtmlSerializer(IHtmlSerializer):
    """Serialize a node tree to HTML, dropping the synthetic document root tags."""

    def serialize(self, tree: Element) -> str:
        output = to_html_string(tree)
        start_tag = f"<{tree.tag}>"
        end_tag = f"</{tree.tag}>"
        if output.startswith(start_tag) and output.endswith(end_tag):
            output = output[len(start_tag) : -len(end_tag)]
        # Same substitution Python-Markdown's AndSubstitutePostprocessor performs.
        return output.replace(util.AMP_SUBSTITUTE, "&").strip()
