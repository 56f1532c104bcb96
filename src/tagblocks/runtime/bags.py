"""Value carriers handed to component templates.

The compiled block markers pass two kinds of values into a component: the
attribute bag (``'attributes': $attributes``) and rendered slot content. Both
implement ``__html__`` so autoescaping renderers output them as-is.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from markupsafe import Markup, escape


class AttributesBag(Mapping):
    """Ordered HTML attributes that render as ``key="value"`` pairs."""

    def __init__(self, attributes: Optional[Mapping] = None) -> None:
        self._attributes: Dict[str, Any] = dict(attributes or {})

    def __getitem__(self, key: str) -> Any:
        return self._attributes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"AttributesBag({self._attributes!r})"

    def merge(self, defaults: Mapping) -> "AttributesBag":
        """Return a new bag with ``defaults`` under this bag's own values.

        ``class`` is concatenated instead of replaced, defaults first.
        """
        merged: Dict[str, Any] = dict(defaults)
        for key, value in self._attributes.items():
            default = merged.get(key)
            if key == "class" and default and value:
                merged[key] = f"{default} {value}"
            else:
                merged[key] = value
        return AttributesBag(merged)

    def only(self, *keys: str) -> "AttributesBag":
        return AttributesBag({k: v for k, v in self._attributes.items() if k in keys})

    def without(self, *keys: str) -> "AttributesBag":
        return AttributesBag(
            {k: v for k, v in self._attributes.items() if k not in keys}
        )

    def render(self) -> Markup:
        parts = []
        for key, value in self._attributes.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(str(escape(key)))
            else:
                parts.append(f'{escape(key)}="{escape(value)}"')
        return Markup(" ".join(parts))

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())


class SlotBag:
    """Rendered slot content plus the attributes given on the slot tag."""

    def __init__(self, content: str = "", attributes: Optional[Mapping] = None) -> None:
        self.content = content
        self.attributes = AttributesBag(attributes)

    def is_empty(self) -> bool:
        return not str(self.content).strip()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __html__(self) -> str:
        return str(self.content)

    def __str__(self) -> str:
        return str(self.content)

    def __repr__(self) -> str:
        return f"SlotBag({self.content!r})"
