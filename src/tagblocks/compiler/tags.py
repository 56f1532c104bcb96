"""Component tag compiler.

Rewrites HTML-like component tags into block markers::

    <x-card :title="post.title">...</x-card>
    {% x:card with {'title': post.title} %}...{% endx %}

    <x-slot name="footer">...</x-slot>
    {% slot:footer %}...{% endslot %}

Everything that is not a recognized tag is copied through unchanged.
"""

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional

from tagblocks.compiler import markers
from tagblocks.compiler.attributes import parse_attribute_string
from tagblocks.compiler.exceptions import TagPairingError
from tagblocks.compiler.scanner import (
    ClosingTag,
    ComponentTag,
    SlotCloseTag,
    SlotOpenTag,
    Token,
    scan,
)

logger = logging.getLogger(__name__)

TokenFilter = Callable[[Token], bool]


def _is_slot(token: Token) -> bool:
    return isinstance(token, (SlotOpenTag, SlotCloseTag))


def _is_self_closing(token: Token) -> bool:
    return isinstance(token, ComponentTag) and token.self_closing


def _is_opening(token: Token) -> bool:
    return isinstance(token, ComponentTag) and not token.self_closing


def _is_closing(token: Token) -> bool:
    return isinstance(token, ClosingTag)


def _is_any_tag(token: Token) -> bool:
    return isinstance(token, (SlotOpenTag, SlotCloseTag, ComponentTag, ClosingTag))


def resolve_name(name: str, aliases: Optional[Mapping[str, str]] = None) -> str:
    """Map a short tag name to its component identifier, if aliased."""
    if not aliases:
        return name
    return aliases.get(name, name)


def _closes(opener: Token, closer: Token) -> bool:
    if isinstance(closer, SlotCloseTag):
        return isinstance(opener, SlotOpenTag)
    return isinstance(opener, ComponentTag) and opener.name == closer.name


def validate_pairing(tokens: Iterable[Token], file_path: str = "") -> None:
    """Check that every opening tag has a matching closing tag.

    Raises:
        TagPairingError: on a stray, mismatched or missing closing tag.
    """
    stack: List[Token] = []

    for token in tokens:
        if (isinstance(token, SlotOpenTag) and not token.self_closing) or _is_opening(token):
            stack.append(token)
            continue

        if not isinstance(token, (ClosingTag, SlotCloseTag)):
            continue

        if not stack:
            raise TagPairingError(
                f"Unexpected closing tag {token.raw!r}",
                file_path=file_path,
                line=token.line,
                column=token.column,
            )

        opener = stack.pop()
        if not _closes(opener, token):
            raise TagPairingError(
                f"Mismatched closing tag {token.raw!r} for {opener.raw!r} "
                f"opened at line {opener.line}",
                file_path=file_path,
                line=token.line,
                column=token.column,
            )

    if stack:
        opener = stack[-1]
        raise TagPairingError(
            f"Unclosed tag {opener.raw!r}",
            file_path=file_path,
            line=opener.line,
            column=opener.column,
        )


class ComponentTagCompiler:
    """Compiles component and slot tags into block markers.

    Args:
        aliases: Optional mapping of short tag names to component identifiers,
            e.g. ``{"card": "ui.card"}``. Names not in the mapping are kept.
        strict: Raise ``TagPairingError`` when tags do not pair up instead of
            rewriting them blindly.
    """

    def __init__(
        self, aliases: Optional[Mapping[str, str]] = None, strict: bool = False
    ) -> None:
        self.aliases: Optional[Dict[str, str]] = dict(aliases) if aliases else None
        self.strict = strict

    def compile(self, source: str, file_path: str = "") -> str:
        """Rewrite every recognized tag in ``source``."""
        if self.strict:
            tokens = list(scan(source))
            validate_pairing(tokens, file_path)
            return self._render(tokens, _is_any_tag)
        return self._render(scan(source), _is_any_tag)

    def compile_slots(self, source: str) -> str:
        return self._render(scan(source), _is_slot)

    def compile_self_closing_tags(self, source: str) -> str:
        return self._render(scan(source), _is_self_closing)

    def compile_opening_tags(self, source: str) -> str:
        return self._render(scan(source), _is_opening)

    def compile_closing_tags(self, source: str) -> str:
        return self._render(scan(source), _is_closing)

    def _render(self, tokens: Iterable[Token], rewrite: TokenFilter) -> str:
        parts: List[str] = []
        count = 0

        for token in tokens:
            if rewrite(token):
                parts.append(self._marker(token))
                count += 1
            else:
                parts.append(token.raw)

        logger.debug("Rewrote %d component tag(s)", count)
        return "".join(parts)

    def _marker(self, token: Token) -> str:
        if isinstance(token, SlotOpenTag):
            if token.self_closing:
                return markers.slot_open(token.name) + markers.SLOT_CLOSE
            return markers.slot_open(token.name)
        if isinstance(token, SlotCloseTag):
            return markers.SLOT_CLOSE
        if isinstance(token, ClosingTag):
            return markers.COMPONENT_CLOSE
        if isinstance(token, ComponentTag):
            name = resolve_name(token.name, self.aliases)
            expression = parse_attribute_string(token.attributes)
            if token.self_closing:
                return markers.self_closing_component(name, expression)
            return markers.component_open(name, expression)
        raise TypeError(f"Not a tag token: {token!r}")


def compile_component_tags(
    source: str,
    aliases: Optional[Mapping[str, str]] = None,
    strict: bool = False,
    file_path: str = "",
) -> str:
    """Rewrite all component and slot tags in a template source."""
    return ComponentTagCompiler(aliases=aliases, strict=strict).compile(
        source, file_path=file_path
    )


def compile_slots(source: str) -> str:
    """Rewrite ``<x-slot name="...">`` / ``</x-slot>`` only."""
    return ComponentTagCompiler().compile_slots(source)


def compile_self_closing_tags(
    source: str, aliases: Optional[Mapping[str, str]] = None
) -> str:
    """Rewrite ``<x-name ... />`` only."""
    return ComponentTagCompiler(aliases=aliases).compile_self_closing_tags(source)


def compile_opening_tags(
    source: str, aliases: Optional[Mapping[str, str]] = None
) -> str:
    """Rewrite ``<x-name ...>`` only."""
    return ComponentTagCompiler(aliases=aliases).compile_opening_tags(source)


def compile_closing_tags(source: str) -> str:
    """Rewrite ``</x-name>`` only."""
    return ComponentTagCompiler().compile_closing_tags(source)
