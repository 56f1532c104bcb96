"""Block markers understood by the downstream template engine."""

COMPONENT_CLOSE = "{% endx %}"
SLOT_CLOSE = "{% endslot %}"


def component_open(name: str, expression: str) -> str:
    return f"{{% x:{name} with {expression} %}}"


def self_closing_component(name: str, expression: str) -> str:
    return component_open(name, expression) + COMPONENT_CLOSE


def slot_open(name: str) -> str:
    return f"{{% slot:{name} %}}"
