try:
    from ._version import __version__
except ImportError:
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("tagblocks")
    except PackageNotFoundError:
        __version__ = "unknown"

from tagblocks.compiler.attributes import (
    Attribute,
    extract_attributes,
    parse_attribute_string,
    serialize_attributes,
)
from tagblocks.compiler.exceptions import TagPairingError, TagSyntaxError
from tagblocks.compiler.scanner import TagScanner, scan
from tagblocks.compiler.tags import (
    ComponentTagCompiler,
    compile_closing_tags,
    compile_component_tags,
    compile_opening_tags,
    compile_self_closing_tags,
    compile_slots,
)
from tagblocks.runtime.bags import AttributesBag, SlotBag

__all__ = [
    "Attribute",
    "AttributesBag",
    "ComponentTagCompiler",
    "SlotBag",
    "TagPairingError",
    "TagScanner",
    "TagSyntaxError",
    "compile_closing_tags",
    "compile_component_tags",
    "compile_opening_tags",
    "compile_self_closing_tags",
    "compile_slots",
    "extract_attributes",
    "parse_attribute_string",
    "scan",
    "serialize_attributes",
]
