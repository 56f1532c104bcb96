"""Attribute-string parsing for component tags.

Turns the raw attribute region of a tag, e.g. ``title="Hi" :count="n" open``,
into the mapping literal embedded in a component block marker::

    {'title': "Hi", 'count': n, 'open': true}
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)

# Shared with the tag scanner so both sides agree on what an attribute is.
ATTRIBUTE_NAME = r"[\w\-:.@]+"

# {{ $attributes }}, optionally with chained calls before the closing braces.
# Calls may contain one level of braces, e.g. merge({'class': 'card'}).
ATTRIBUTE_BAG = r"\{\{\s*(\$attributes(?:[^{}]|\{[^{}]*\})*?)\s*\}\}"

INTERPOLATION = r"\{\{[^}]*\}\}"

_BAG_RE = re.compile(ATTRIBUTE_BAG)

_TOKEN_RE = re.compile(
    rf"""
    (?P<name>{ATTRIBUTE_NAME})
    (?:
        =
        (?P<value>
            "[^"]*"
            |
            '[^']*'
            |
            {INTERPOLATION}
            |
            [^\s'"=<>]+
        )
    )?
    """,
    re.VERBOSE,
)

_WHITESPACE_RE = re.compile(r"\s")

EMPTY_STRING = '""'


@dataclass
class Attribute:
    """A single attribute as it appears in the block marker."""

    name: str
    expression: str
    bound: bool = False


def strip_quotes(value: str) -> str:
    """Strip one pair of surrounding quotes, if the value starts with one."""
    if value[:1] in ("'", '"'):
        return value[1:-1]
    return value


def _skip_to_whitespace(value: str, pos: int) -> int:
    match = _WHITESPACE_RE.search(value, pos)
    return match.start() if match else len(value)


def _is_interpolation(value: str) -> bool:
    # Exactly one {{ ... }}: the first closing braces must end the value
    return value.startswith("{{") and value.find("}}") == len(value) - 2


def _string_literal(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("#{", "\\#{")
    return f'"{escaped}"'


def _to_attribute(name: str, value: Optional[str]) -> Attribute:
    bound = name.startswith(":")
    if bound:
        name = name[1:]

    if value is None:
        return Attribute(name=name, expression="true", bound=bound)

    text = strip_quotes(value)
    if _is_interpolation(text):
        text = text[2:-2].strip()
        bound = True
    elif not bound:
        return Attribute(name=name, expression=_string_literal(text))

    # An empty expression would leave "'key': " dangling in the marker
    return Attribute(name=name, expression=text if text.strip() else EMPTY_STRING, bound=True)


def iter_attributes(attribute_string: str) -> Iterator[Attribute]:
    """Yield attributes in source order, duplicates included.

    A ``{{ $attributes ... }}`` token standing on its own becomes a bound
    ``attributes`` attribute; inside a quoted value it is plain text.
    """
    pos = 0
    length = len(attribute_string)
    at_boundary = True

    while pos < length:
        if attribute_string[pos].isspace():
            pos += 1
            at_boundary = True
            continue

        if at_boundary:
            bag = _BAG_RE.match(attribute_string, pos)
            if bag:
                pos = bag.end()
                at_boundary = False
                yield Attribute(name="attributes", expression=bag.group(1), bound=True)
                continue
        at_boundary = False

        match = _TOKEN_RE.match(attribute_string, pos)
        if match is None:
            end = _skip_to_whitespace(attribute_string, pos)
            logger.debug("Skipping stray attribute text %r", attribute_string[pos:end])
            pos = end
            continue

        pos = match.end()
        if match.group("value") is None and attribute_string.startswith("=", pos):
            # name= followed by something that is not a value
            if attribute_string[pos + 1 : pos + 2] in ("'", '"'):
                # Unterminated quote swallows the rest of the region
                logger.debug("Dropping attribute %r with unterminated quote", match.group("name"))
                return
            logger.debug("Dropping attribute %r with malformed value", match.group("name"))
            pos = _skip_to_whitespace(attribute_string, pos)
            continue

        attribute = _to_attribute(match.group("name"), match.group("value"))
        if attribute.name:
            yield attribute


def extract_attributes(attribute_string: str) -> Dict[str, str]:
    """Return an ordered ``name -> expression`` mapping.

    A repeated name keeps its first position but takes the last value.
    """
    attributes: Dict[str, str] = {}
    for attribute in iter_attributes(attribute_string):
        attributes[attribute.name] = attribute.expression
    return attributes


def serialize_attributes(attributes: Dict[str, str]) -> str:
    """Serialize a mapping into ``{'key': expression, ...}``."""
    pairs: List[str] = [f"'{name}': {expression}" for name, expression in attributes.items()]
    return "{" + ", ".join(pairs) + "}"


def parse_attribute_string(attribute_string: str) -> str:
    """Parse a raw attribute region straight into its mapping literal."""
    return serialize_attributes(extract_attributes(attribute_string))
