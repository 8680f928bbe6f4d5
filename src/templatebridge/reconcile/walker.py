"""Tree Walker - applies the normalizer across every interactive slot."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..core.id import new_callback_id
from ..core.logging_config import get_logger
from .normalizer import IdFactory, Normalized, normalize_action, normalize_button
from .registry import CallbackRegistry

logger = get_logger(__name__)

ACTIONS = "actions"
MAP_BUTTONS = "mapButtons"
NAVIGATE_ACTION = "navigateAction"
PANE = "pane"
BUTTONS = "buttons"

# Processing order; later slots win explicit-id collisions.
SLOTS = (ACTIONS, MAP_BUTTONS, NAVIGATE_ACTION, PANE, BUTTONS)

Normalizer = Callable[[Any, CallbackRegistry, IdFactory], Normalized]


@dataclass(frozen=True)
class WalkResult:
    """Callback-free config plus the identifiers found while building it."""

    config: dict[str, Any]
    alive_ids: frozenset[str] = field(default_factory=frozenset)
    bound_ids: frozenset[str] = field(default_factory=frozenset)
    collisions: frozenset[str] = field(default_factory=frozenset)


class _Walk:
    """Bookkeeping for one traversal."""

    def __init__(self, registry: CallbackRegistry, new_id: IdFactory, log_collisions: bool) -> None:
        self.registry = registry
        self.new_id = new_id
        self.log_collisions = log_collisions
        self.alive: set[str] = set()
        self.bound: set[str] = set()
        self.collisions: set[str] = set()

    def visit(self, node: Any, normalizer: Normalizer, slot: str) -> Any:
        result = normalizer(node, self.registry, self.new_id)
        if result.id is None:
            return result.descriptor

        if result.bound:
            if result.id in self.bound:
                # last write wins; reported, not prevented
                self.collisions.add(result.id)
                if self.log_collisions:
                    logger.warning(
                        "callback_id_collision",
                        owner_id=self.registry.owner_id,
                        callback_id=result.id,
                        slot=slot,
                    )
            self.bound.add(result.id)
        self.alive.add(result.id)
        return result.descriptor

    def visit_list(self, nodes: Any, normalizer: Normalizer, slot: str) -> Any:
        if not isinstance(nodes, (list, tuple)):
            return nodes
        return [self.visit(node, normalizer, slot) for node in nodes]


class TreeWalker:
    """
    Builds the callback-free configuration of a template.

    Walks ``actions``, ``mapButtons``, ``navigateAction``, the actions
    nested in ``pane`` and ``buttons``. Every other field is copied as is.
    Slots that are absent or None are left out of the result.
    """

    def __init__(self, new_id: IdFactory = new_callback_id, log_collisions: bool = True) -> None:
        self.new_id = new_id
        self.log_collisions = log_collisions

    def walk(self, raw: Mapping[str, Any], registry: CallbackRegistry) -> WalkResult:
        """
        Walk a raw configuration, upserting its callbacks into ``registry``.

        The registry is not pruned here; the caller prunes with
        ``bound_ids`` once the walk has returned.

        Args:
            raw: Configuration as supplied by the application
            registry: Registry of the owning template

        Returns:
            WalkResult with the clean config and the collected identifiers
        """
        walk = _Walk(registry, self.new_id, self.log_collisions)
        rewritten: dict[str, Any] = {}

        if raw.get(ACTIONS) is not None:
            rewritten[ACTIONS] = walk.visit_list(raw[ACTIONS], normalize_action, ACTIONS)

        if raw.get(MAP_BUTTONS) is not None:
            rewritten[MAP_BUTTONS] = walk.visit_list(raw[MAP_BUTTONS], normalize_action, MAP_BUTTONS)

        if raw.get(NAVIGATE_ACTION) is not None:
            rewritten[NAVIGATE_ACTION] = walk.visit(raw[NAVIGATE_ACTION], normalize_action, NAVIGATE_ACTION)

        pane = raw.get(PANE)
        if pane is not None:
            rewritten[PANE] = self._walk_pane(pane, walk)

        if raw.get(BUTTONS) is not None:
            rewritten[BUTTONS] = walk.visit_list(raw[BUTTONS], normalize_button, BUTTONS)

        config: dict[str, Any] = {}
        for key, value in raw.items():
            if key in rewritten:
                config[key] = rewritten[key]
            elif key not in SLOTS:
                config[key] = value

        return WalkResult(
            config, frozenset(walk.alive), frozenset(walk.bound), frozenset(walk.collisions)
        )

    def _walk_pane(self, pane: Any, walk: _Walk) -> Any:
        if not isinstance(pane, Mapping):
            return pane

        updated = dict(pane)
        if pane.get(ACTIONS) is not None:
            updated[ACTIONS] = walk.visit_list(pane[ACTIONS], normalize_action, PANE)
        return updated
