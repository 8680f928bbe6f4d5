"""
Callback-identity reconciliation
Assigns node identifiers, extracts callbacks and prunes stale ones
"""

from .nodes import CallbackNode, Node, PlainNode, classify, explicit_id
from .normalizer import Normalized, normalize_action, normalize_button
from .registry import CallbackRegistry
from .walker import SLOTS, TreeWalker, WalkResult

__all__ = [
    "CallbackNode",
    "CallbackRegistry",
    "Node",
    "Normalized",
    "PlainNode",
    "SLOTS",
    "TreeWalker",
    "WalkResult",
    "classify",
    "explicit_id",
    "normalize_action",
    "normalize_button",
]
