"""Action Normalizer - one interactive node to a callback-free descriptor."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..core.id import new_callback_id
from .nodes import ID_KEY, CallbackNode, classify
from .registry import CallbackRegistry

IdFactory = Callable[[], str]


@dataclass(frozen=True)
class Normalized:
    """Result of normalizing a single node."""

    descriptor: Any
    id: str | None = None
    bound: bool = False


def normalize_action(
    node: Any,
    registry: CallbackRegistry,
    new_id: IdFactory = new_callback_id,
) -> Normalized:
    """
    Normalize an action or map button.

    - explicit id: reused verbatim, so the upsert replaces the old callback
    - callback without id: a fresh id is generated
    - neither: the node passes through and yields no id

    Args:
        node: Raw node as supplied by the application
        registry: Registry receiving the extracted callback
        new_id: Identifier factory

    Returns:
        Callback-free descriptor and the identifier it carries
    """
    variant = classify(node)

    if isinstance(variant, CallbackNode):
        identifier = variant.id or new_id()
        registry.upsert(identifier, variant.callback)
        return Normalized({**variant.data, ID_KEY: identifier}, identifier, bound=True)

    return Normalized(variant.data, variant.id)


def normalize_button(
    node: Any,
    registry: CallbackRegistry,
    new_id: IdFactory = new_callback_id,
) -> Normalized:
    """
    Normalize a grid button.

    The host addresses buttons by id, so every mapping gets one even
    without a callback. Non-mapping entries pass through untouched.
    """
    variant = classify(node)

    if isinstance(variant, CallbackNode):
        identifier = variant.id or new_id()
        registry.upsert(identifier, variant.callback)
        return Normalized({**variant.data, ID_KEY: identifier}, identifier, bound=True)

    if not isinstance(variant.data, dict):
        return Normalized(variant.data)

    identifier = variant.id or new_id()
    return Normalized({**variant.data, ID_KEY: identifier}, identifier)
