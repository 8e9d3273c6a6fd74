"""EditorOptions and ValidationMode for EditorController configuration.

EditorOptions is a frozen (immutable) dataclass holding the controller's
behavioural settings.  ValidationMode selects when validation runs:
after every edit, only on request, or never.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any

__all__ = ["DEFAULT_HISTORY_LIMIT", "EditorOptions", "ValidationMode"]

DEFAULT_HISTORY_LIMIT = 50


class ValidationMode(StrEnum):
    """When the controller validates the document against its schema.

    - ON_CHANGE: After every successful edit, undo and redo.
    - ON_DEMAND: Only when ``validate_now()`` is called.
    - DISABLED:  Never; ``validate_now()`` clears errors and returns ``[]``.
    """

    ON_CHANGE = "on_change"
    ON_DEMAND = "on_demand"
    DISABLED = "disabled"


@dataclass(frozen=True, slots=True)
class EditorOptions:
    """Immutable configuration for EditorController.

    Attributes:
        validation_mode: When validation runs.  Default ON_CHANGE.
        auto_save: When True, every committed edit (and the initial value) is
            recorded as an undo/redo snapshot.  Default False.
        collapse_depth: Nodes at this depth or deeper start collapsed (root is
            depth 0).  None leaves every node expanded.  Default 3.
        history_limit: Maximum number of snapshots kept; the oldest is evicted
            first.  Default 50.
        editable: Value of ``is_editable`` on every node the controller builds.
            Default True.
    """

    validation_mode: ValidationMode = ValidationMode.ON_CHANGE
    auto_save: bool = False
    collapse_depth: float | None = 3
    history_limit: int = DEFAULT_HISTORY_LIMIT
    editable: bool = True

    def __post_init__(self) -> None:
        # Accept plain strings ("on_demand") for the mode
        mode = ValidationMode(self.validation_mode)
        object.__setattr__(self, "validation_mode", mode)
        if self.collapse_depth is not None and (
            math.isnan(self.collapse_depth) or self.collapse_depth < 0
        ):
            msg = f"collapse_depth must be >= 0 or None, got {self.collapse_depth}"
            raise ValueError(msg)
        if self.history_limit < 1:
            msg = f"history_limit must be >= 1, got {self.history_limit}"
            raise ValueError(msg)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> EditorOptions:
        """Build options from a plain mapping, e.g. a parsed settings file.

        Missing keys keep their defaults.

        Raises:
            ValueError: On an unknown key or an invalid value.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            msg = f"Unknown editor options: {', '.join(unknown)}"
            raise ValueError(msg)
        return cls(**mapping)
