"""Tag scanner for component sources.

Walks the source once, left to right, and splits it into text runs and
recognized tag tokens. At every ``<`` the tag shapes are tried in priority
order: slot opener, slot closer, self-closing component, opening component,
closing component. Anything that fits none of them stays text.
"""

import bisect
import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from tagblocks.compiler.attributes import ATTRIBUTE_BAG, ATTRIBUTE_NAME, INTERPOLATION

logger = logging.getLogger(__name__)

TAG_NAME = r"[\w\-:.]*"

ATTRIBUTE_REGION = rf"""
    (?:
        \s+
        (?:
            {ATTRIBUTE_BAG}
            |
            {ATTRIBUTE_NAME}
            (?:
                =
                (?:
                    "[^"]*"
                    |
                    '[^']*'
                    |
                    {INTERPOLATION}
                    |
                    [^\s'"=<>]+
                )
            )?
        )
    )*
    \s*
"""

SLOT_OPEN_RE = re.compile(
    r"""<\s*x[-:]slot\s+:?name=(?P<name>"[^"]+"|'[^']+'|[^\s/>]+)\s*(?P<end>/?)>"""
)

SLOT_CLOSE_RE = re.compile(r"</\s*x[-:]slot[^>]*>")

SELF_CLOSING_RE = re.compile(
    rf"""
    <
        \s*
        x[-:](?P<name>{TAG_NAME})
        (?P<attributes>{ATTRIBUTE_REGION})
    />
    """,
    re.VERBOSE,
)

OPENING_RE = re.compile(
    rf"""
    <
        \s*
        x[-:](?P<name>{TAG_NAME})
        (?P<attributes>{ATTRIBUTE_REGION})
        (?<![/=\-])
    >
    """,
    re.VERBOSE,
)

CLOSING_RE = re.compile(rf"</\s*x[-:](?P<name>{TAG_NAME})\s*>")

# Used only to report tag-looking text that did not match any shape.
_TAG_LIKE_RE = re.compile(r"<\s*/?\s*x[-:]")


@dataclass
class Token:
    raw: str
    line: int
    column: int


@dataclass
class Text(Token):
    pass


@dataclass
class SlotOpenTag(Token):
    name: str
    self_closing: bool = False


@dataclass
class SlotCloseTag(Token):
    pass


@dataclass
class ComponentTag(Token):
    """An opening or self-closing component tag."""

    name: str
    attributes: str
    self_closing: bool = False


@dataclass
class ClosingTag(Token):
    name: str


class TagScanner:
    """Splits a template source into a flat token stream."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._line_starts: List[int] = [0] + [
            m.end() for m in re.finditer(r"\n", source)
        ]

    def location(self, pos: int) -> Tuple[int, int]:
        """Return the 1-based ``(line, column)`` of an offset."""
        index = bisect.bisect_right(self._line_starts, pos) - 1
        return index + 1, pos - self._line_starts[index] + 1

    def _match_tag(self, pos: int) -> Optional[Token]:
        source = self.source
        line, column = self.location(pos)

        match = SLOT_OPEN_RE.match(source, pos)
        if match:
            name = match.group("name")
            if name[:1] in ("'", '"'):
                name = name[1:-1]
            return SlotOpenTag(
                raw=match.group(0),
                line=line,
                column=column,
                name=name,
                self_closing=bool(match.group("end")),
            )

        match = SLOT_CLOSE_RE.match(source, pos)
        if match:
            return SlotCloseTag(raw=match.group(0), line=line, column=column)

        for pattern, self_closing in ((SELF_CLOSING_RE, True), (OPENING_RE, False)):
            match = pattern.match(source, pos)
            if match:
                return ComponentTag(
                    raw=match.group(0),
                    line=line,
                    column=column,
                    name=match.group("name"),
                    attributes=match.group("attributes"),
                    self_closing=self_closing,
                )

        match = CLOSING_RE.match(source, pos)
        if match:
            return ClosingTag(
                raw=match.group(0), line=line, column=column, name=match.group("name")
            )

        if _TAG_LIKE_RE.match(source, pos):
            logger.debug("Unrecognized component tag at line %d, column %d", line, column)
        return None

    def tokens(self) -> Iterator[Token]:
        source = self.source
        text_start = 0
        pos = source.find("<")

        while pos != -1:
            token = self._match_tag(pos)
            if token is None:
                pos = source.find("<", pos + 1)
                continue

            if pos > text_start:
                line, column = self.location(text_start)
                yield Text(raw=source[text_start:pos], line=line, column=column)
            yield token

            text_start = pos + len(token.raw)
            pos = source.find("<", text_start)

        if text_start < len(source):
            line, column = self.location(text_start)
            yield Text(raw=source[text_start:], line=line, column=column)


def scan(source: str) -> Iterator[Token]:
    """Tokenize a template source."""
    return TagScanner(source).tokens()
