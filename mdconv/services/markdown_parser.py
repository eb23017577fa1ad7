from __future__ import annotations

import re
import secrets
import xml.etree.ElementTree as etree
from xml.etree.ElementTree import Element

import markdown
from markdown import util
from markdown.blockprocessors import BlockParser, BlockProcessor
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor

from mdconv.domain.interfaces import IMarkdownParser
from mdconv.utils.logger import get_logger

log = get_logger(__name__)

RE_FENCE_START = re.compile(
    r"^(?P<indent>[ ]{0,3})(?P<fence>`{3,}|~{3,})[ \t]*(?P<lang>[^\s`]*)[^`\n]*$",
    re.MULTILINE,
)
RE_FENCE_END = re.compile(r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})[ \t]*$")


def _closing_index(lines: list[str], fence: str, start: int = 1) -> int | None:
    """Index of the line closing `fence`, searching from `start`."""
    for index in range(start, len(lines)):
        m = RE_FENCE_END.match(lines[index])
        if m and m.group("fence")[0] == fence[0] and len(m.group("fence")) >= len(fence):
            return index
    return None


def _strip_indent(line: str, indent: int) -> str:
    stripped = len(line) - len(line.lstrip(" "))
    return line[min(stripped, indent) :]


class FenceStash:
    """
    Fenced code bodies exactly as typed.

    Python-Markdown expands tabs and blanks whitespace-only lines before block
    parsing, and prettify trims trailing newlines from `pre > code` afterwards.
    Bodies are taken out before the first and written back after the second.
    """

    def __init__(self) -> None:
        self._nonce = secrets.token_hex(8)
        self._bodies: dict[str, list[str]] = {}
        self.blocks: list[tuple[Element, str]] = []

    def store(self, body: list[str]) -> str:
        key = f"fence{self._nonce}n{len(self._bodies)}"
        self._bodies[key] = body
        return key

    def take(self, key: str) -> list[str] | None:
        return self._bodies.pop(key, None)

    def clear(self) -> None:
        self._bodies.clear()
        self.blocks.clear()


class FencedCodeStashPreprocessor(Preprocessor):
    """Swap each top-level fence body for a single placeholder line."""

    def __init__(self, md: markdown.Markdown, stash: FenceStash) -> None:
        super().__init__(md)
        self.stash = stash

    def run(self, lines: list[str]) -> list[str]:
        out: list[str] = []
        index = 0
        while index < len(lines):
            line = lines[index]
            m = RE_FENCE_START.match(line)
            if m is None:
                out.append(line)
                index += 1
                continue

            indent = m.group("indent")
            end = _closing_index(lines, m.group("fence"), index + 1)
            stop = len(lines) if end is None else end
            body = [_strip_indent(raw, len(indent)) for raw in lines[index + 1 : stop]]

            out.append(line)
            if body:
                out.append(indent + self.stash.store(body))
            if end is None:
                break
            out.append(lines[end])
            index = end + 1
        return out


class FencedCodeBlockProcessor(BlockProcessor):
    """
    Fenced code (``` or ~~~) as a real `pre > code` subtree.

    Python-Markdown's own fenced_code extension stashes pre-rendered HTML and
    leaves a placeholder in the tree, which would hide code blocks from styling.
    """

    def __init__(self, parser: BlockParser, stash: FenceStash) -> None:
        super().__init__(parser)
        self.stash = stash

    def test(self, parent: Element, block: str) -> bool:
        return bool(RE_FENCE_START.search(block))

    def run(self, parent: Element, blocks: list[str]) -> bool | None:
        m = RE_FENCE_START.search(blocks[0])
        if m is None:
            return False
        block = blocks.pop(0)

        # A fence may interrupt a paragraph: parse what precedes it first.
        before = block[: m.start()].rstrip("\n")
        if before:
            self.parser.parseBlocks(parent, [before])

        fence = m.group("fence")
        indent = len(m.group("indent"))
        raw = block[m.start() :]

        # Blank lines split blocks; re-join them until the closing fence shows up.
        while True:
            lines = raw.split("\n")
            end = _closing_index(lines, fence)
            if end is not None or not blocks:
                break
            raw = f"{raw}\n\n{blocks.pop(0)}"

        if end is None:
            body, rest = lines[1:], []
            # trailing blank lines here are document padding
            while body and not body[-1].strip():
                body.pop()
        else:
            body, rest = lines[1:end], lines[end + 1 :]

        stashed = self.stash.take(body[0].strip()) if len(body) == 1 else None
        if stashed is None:
            stashed = [_strip_indent(line, indent) for line in body]

        pre = etree.SubElement(parent, "pre")
        code = etree.SubElement(pre, "code")
        lang = m.group("lang")
        if lang:
            code.set("class", f"language-{lang}")
        text = "\n".join(stashed)
        code.text = util.AtomicString(util.code_escape(f"{text}\n" if stashed else ""))
        self.stash.blocks.append((code, code.text))

        remainder = "\n".join(rest)
        if remainder.strip():
            blocks.insert(0, remainder)
        return None


class FencedCodeRestoreTreeprocessor(Treeprocessor):
    """Put fenced code text back after prettify has trimmed it."""

    def __init__(self, md: markdown.Markdown, stash: FenceStash) -> None:
        super().__init__(md)
        self.stash = stash

    def run(self, root: Element) -> None:
        for code, text in self.stash.blocks:
            code.text = text


class FencedCodeBlockExtension(Extension):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.stash = FenceStash()

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        md.registerExtension(self)
        # Before normalize_whitespace (30).
        md.preprocessors.register(
            FencedCodeStashPreprocessor(md, self.stash), "fenced_code_stash", 35
        )
        # Above table (75) and hashheader (70) so fence bodies are never read as tables or headings.
        md.parser.blockprocessors.register(
            FencedCodeBlockProcessor(md.parser, self.stash), "fenced_code_block", 78
        )
        # After prettify (10).
        md.treeprocessors.register(
            FencedCodeRestoreTreeprocessor(md, self.stash), "fenced_code_restore", 5
        )

    def reset(self) -> None:
        self.stash.clear()


class EscapeRawHtmlExtension(Extension):
    """Treat inline/block HTML in the source as text instead of passing it through."""

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        md.preprocessors.deregister("html_block")
        md.inlinePatterns.deregister("html")
        md.inlinePatterns.deregister("entity")


class MarkdownParser(IMarkdownParser):
    """
    Python-Markdown front half: preprocessors, block parser and treeprocessors.

    Returns the finished ElementTree rooted at the `<div>` document element.
    Serialization is left to the caller. Not re-entrant: one instance per thread.
    """

    def __init__(self) -> None:
        self._md = markdown.Markdown(
            extensions=[
                "tables",
                "sane_lists",
                "pymdownx.tilde",
                FencedCodeBlockExtension(),
                EscapeRawHtmlExtension(),
            ],
            extension_configs={
                "pymdownx.tilde": {"subscript": False},
            },
            output_format="html",
        )

    def parse(self, text: str) -> Element:
        md = self._md
        md.reset()
        if not text.strip():
            return etree.Element(md.doc_tag)

        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        for prep in md.preprocessors:
            lines = prep.run(lines)
        root = md.parser.parseDocument(lines).getroot()
        for treeprocessor in md.treeprocessors:
            new_root = treeprocessor.run(root)
            if new_root is not None:
                root = new_root

        log.debug("Parsed %d line(s) into %d top-level node(s)", len(lines), len(root))
        return root
