"""ID Generation System.

Centralized ULID-based ID management for the template bridge.

Features:
- ULIDs: Lexicographically sortable, timestamp-based
- Monotonic: strictly increasing within the process, so never repeated
- Type-safe: NewType wrappers for the two ID categories
- Prefixed: cb_* for callback nodes, tpl_* for templates

Collaborators must treat every ID as an opaque string.
"""

import threading
from datetime import datetime
from typing import NewType

from ulid import ULID

# ============================================================================
# Type-Safe ID Wrappers
# ============================================================================

CallbackID = NewType("CallbackID", str)
"""Interactive node identifier (action, map button, grid button)"""

TemplateID = NewType("TemplateID", str)
"""Template (configuration owner) identifier"""

# ============================================================================
# ID Prefixes (for debugging and type identification)
# ============================================================================


class Prefix:
    """ID prefix constants."""

    CALLBACK = "cb"
    TEMPLATE = "tpl"


# ============================================================================
# ULID Generator
# ============================================================================


class Generator:
    """Monotonic ULID generator.

    Two ULIDs drawn in the same millisecond only differ by their random
    part, so every new value is bumped past the last one handed out.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last = 0

    def generate(self) -> str:
        """Generate a new ULID, strictly greater than any previous one."""
        with self._lock:
            value = int(ULID())
            if value <= self._last:
                value = self._last + 1
            self._last = value
        return str(ULID.from_int(value))

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"

    def timestamp(self, id_str: str) -> int:
        """Extract timestamp (milliseconds) from ULID."""
        try:
            ulid_str = id_str.split("_")[1] if "_" in id_str else id_str
            ulid = ULID.from_str(ulid_str)
            return int(ulid.timestamp * 1000)
        except (ValueError, IndexError):
            return 0


# Singleton instance
_generator = Generator()


# ============================================================================
# Typed ID Generators
# ============================================================================


def new_callback_id(prefix: str = Prefix.CALLBACK) -> CallbackID:
    """Generate new callback node ID."""
    return CallbackID(_generator.generate_with_prefix(prefix))


def new_template_id(prefix: str = Prefix.TEMPLATE) -> TemplateID:
    """Generate new template ID."""
    return TemplateID(_generator.generate_with_prefix(prefix))


# ============================================================================
# Validation and Parsing
# ============================================================================


def is_valid(id_str: str) -> bool:
    """Check if string is a valid (optionally prefixed) ULID.

    Args:
        id_str: ID string to validate

    Returns:
        True if valid ULID format
    """
    try:
        ulid_part = id_str.split("_")[1] if "_" in id_str else id_str
        if len(ulid_part) != 26:
            return False
        ULID.from_str(ulid_part)
        return True
    except (ValueError, IndexError):
        return False


def extract_timestamp(id_str: str) -> datetime | None:
    """Extract creation time from a generated ID, None if not a ULID."""
    timestamp_ms = _generator.timestamp(id_str)
    return datetime.fromtimestamp(timestamp_ms / 1000.0) if timestamp_ms > 0 else None


def extract_prefix(id_str: str) -> str | None:
    """Extract prefix from prefixed ID."""
    parts = id_str.split("_")
    return parts[0] if len(parts) == 2 else None


# ============================================================================
# Type Guards
# ============================================================================


def is_callback_id(id_str: str) -> bool:
    """Check if ID was generated for a callback node."""
    return id_str.startswith(f"{Prefix.CALLBACK}_") and is_valid(id_str)


def is_template_id(id_str: str) -> bool:
    """Check if ID was generated for a template."""
    return id_str.startswith(f"{Prefix.TEMPLATE}_") and is_valid(id_str)
