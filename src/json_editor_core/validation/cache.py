"""ValidatorCache: LRU-backed cache of compiled schema validators.

``validate`` is a pure function that compiles its schema on every call.
Callers that re-validate against the same schema (the editor controller does
so after every edit) can hold a ``ValidatorCache`` instead: compiled
validators are kept in an ``LRUCache`` keyed by the schema's canonical JSON,
so equal schemas share one entry even when they are different dict objects.

Each ``ValidatorCache`` instance owns its own ``LRUCache``; there is no
module-level shared state, so two instances never interfere.

Example::

    from json_editor_core.validation import ValidatorCache

    cache = ValidatorCache(max_size=16)
    errors = cache.validate({"name": "x"}, {"required": ["age"]})
    errors[0].keyword   # "required"
"""

from __future__ import annotations

from typing import Any

from cachetools import LRUCache
from jsonschema import Draft7Validator

from json_editor_core.validation.validator import (
    ValidationError,
    collect_errors,
    compile_schema,
    schema_key,
)

__all__ = ["ValidatorCache"]


class ValidatorCache:
    """LRU cache of compiled ``Draft7Validator`` instances.

    Args:
        max_size: Maximum number of compiled schemas held in memory.  When
            exceeded, the least-recently-used entry is silently evicted.
            Defaults to 32.
    """

    def __init__(self, max_size: int = 32) -> None:
        self._cache: LRUCache[str, Draft7Validator] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of compiled schemas this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of compiled schemas stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Validation surface
    # ------------------------------------------------------------------

    def get(self, schema: Any) -> Draft7Validator:
        """Return the compiled validator for ``schema``, compiling on a miss.

        Raises:
            SchemaError: If the schema is malformed or not plain JSON.  Nothing
                is cached then.
        """
        key = schema_key(schema)
        validator = self._cache.get(key)
        if validator is None:
            validator = compile_schema(schema)
            self._cache[key] = validator
        return validator

    def validate(self, value: Any, schema: Any) -> list[ValidationError]:
        """Same contract as ``json_editor_core.validation.validate``."""
        return collect_errors(self.get(schema), value)

    def clear(self) -> None:
        """Drop every cached validator."""
        self._cache.clear()
