"""Interactive node variants.

A raw action or button is classified exactly once, where it enters the
walk. Everything downstream works on the variant, never on field presence.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

ID_KEY = "id"
CALLBACK_KEY = "onPress"


@dataclass(frozen=True)
class PlainNode:
    """Node without a callback. ``data`` is the node as supplied."""

    data: Any
    id: str | None = None


@dataclass(frozen=True)
class CallbackNode:
    """Node carrying a callback. ``data`` no longer holds the callback."""

    data: dict[str, Any]
    callback: Callable[..., Any] = field(compare=False)
    id: str | None = None


Node = PlainNode | CallbackNode


def explicit_id(node: Any) -> str | None:
    """Return the caller-supplied identifier, or None when there is none.

    Only non-empty strings count; any other value under ``id`` is treated
    as absent.
    """
    if not isinstance(node, Mapping):
        return None
    value = node.get(ID_KEY)
    if isinstance(value, str) and value:
        return value
    return None


def classify(node: Any) -> Node:
    """Decide the variant of a raw node.

    Anything that is not a mapping, or whose ``onPress`` is not callable,
    is plain pass-through data.
    """
    if not isinstance(node, Mapping):
        return PlainNode(node)

    callback = node.get(CALLBACK_KEY)
    if callable(callback):
        data = {key: value for key, value in node.items() if key != CALLBACK_KEY}
        return CallbackNode(data, callback, explicit_id(node))

    return PlainNode(dict(node), explicit_id(node))
