"""
Callback Registry
Per-template mapping from node identifier to callback
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ..core.logging_config import get_logger

logger = get_logger(__name__)

Callback = Callable[..., Any]


class CallbackRegistry:
    """
    Holds the callbacks of one template, keyed by node identifier.

    Entries are upserted while a walk runs and pruned to the walk's
    identifier set once it has finished. Not safe for concurrent
    reconfiguration; the owning template serializes access.
    """

    def __init__(self, owner_id: str = "") -> None:
        self.owner_id = owner_id
        self._callbacks: dict[str, Callback] = {}

    def upsert(self, identifier: str, callback: Callback) -> bool:
        """
        Bind a callback to an identifier, replacing any previous binding.

        Args:
            identifier: Node identifier
            callback: Callable invoked when the node fires

        Returns:
            True if an existing binding was replaced
        """
        replaced = identifier in self._callbacks
        self._callbacks[identifier] = callback
        return replaced

    def prune(self, alive_ids: Iterable[str]) -> list[str]:
        """
        Drop every binding whose identifier is not in ``alive_ids``.

        Must only be called with the identifier set of a finished walk.

        Returns:
            Identifiers that were removed
        """
        alive = set(alive_ids)
        removed = [identifier for identifier in self._callbacks if identifier not in alive]
        for identifier in removed:
            del self._callbacks[identifier]

        if removed:
            logger.debug(
                "callbacks_pruned",
                owner_id=self.owner_id,
                removed=len(removed),
                remaining=len(self._callbacks),
            )
        return removed

    def adopt(self, staged: "CallbackRegistry") -> list[str]:
        """
        Take over every binding of ``staged`` and drop all others.

        Returns:
            Identifiers that were removed
        """
        self._callbacks.update(staged._callbacks)
        return self.prune(staged._callbacks)

    def resolve(self, identifier: str) -> Callback | None:
        """Get the callback bound to an identifier (None on a miss)."""
        return self._callbacks.get(identifier)

    def ids(self) -> frozenset[str]:
        """Identifiers currently bound."""
        return frozenset(self._callbacks)

    def clear(self) -> int:
        """Remove all bindings. Returns how many were held."""
        count = len(self._callbacks)
        self._callbacks.clear()
        return count

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._callbacks

    def __len__(self) -> int:
        return len(self._callbacks)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._callbacks))

    def __repr__(self) -> str:
        return f"CallbackRegistry(owner_id={self.owner_id!r}, size={len(self._callbacks)})"
