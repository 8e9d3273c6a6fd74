"""Schema validation with errors mapped back onto tree paths.

Validation is delegated to ``jsonschema``'s ``Draft7Validator`` with a
``FormatChecker`` so ``format`` keywords (``email``, ``date-time``, ``uri``)
are enforced.  Every error the engine reports is converted into a
``ValidationError`` whose ``path`` addresses the offending node in a
``JsonNode`` tree built from the same value.

``validate`` compiles the schema on every call and keeps no state; callers
that validate repeatedly against one schema can use ``ValidatorCache``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.exceptions import SchemaError as EngineSchemaError
from jsonschema.exceptions import ValidationError as EngineValidationError

from json_editor_core.errors import SchemaError
from json_editor_core.paths import JsonPath, path_to_pointer

__all__ = [
    "ValidationError",
    "check_schema",
    "collect_errors",
    "compile_schema",
    "schema_key",
    "validate",
]


@dataclass(frozen=True, slots=True)
class ValidationError:
    """One schema violation located in the document.

    Attributes:
        path:        JsonPath of the offending value; ``()`` for the root.  A
                     missing ``required`` property is reported at the object
                     that lacks it.
        message:     Human-readable message from the validation engine.
        keyword:     Schema keyword that failed (``"required"``, ``"type"``...).
        schema_path: JSON Pointer fragment into the schema, e.g.
                     ``"#/properties/age/minimum"``.
    """

    path: JsonPath
    message: str
    keyword: str
    schema_path: str

    @property
    def pointer(self) -> str:
        """``path`` rendered as a JSON Pointer string."""
        return path_to_pointer(self.path)


def check_schema(schema: Any) -> None:
    """Raise ``SchemaError`` unless ``schema`` is a well-formed Draft-07 schema.

    The schema must also be plain JSON: a Python value the metaschema does not
    constrain, such as a ``set`` under ``const``, is rejected too.
    """
    try:
        Draft7Validator.check_schema(schema)
    except EngineSchemaError as exc:
        msg = f"Invalid JSON schema: {exc.message}"
        raise SchemaError(msg) from exc
    schema_key(schema)


def schema_key(schema: Any) -> str:
    """Canonical JSON text of ``schema``; equal schemas give equal keys.

    Raises:
        SchemaError: If ``schema`` is not serializable as JSON.
    """
    try:
        return json.dumps(schema, sort_keys=True, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        msg = f"Invalid JSON schema: {exc}"
        raise SchemaError(msg) from exc


def compile_schema(schema: Any) -> Draft7Validator:
    """Check ``schema`` and return a ready validator for it.

    Raises:
        SchemaError: If the schema itself is malformed.
    """
    check_schema(schema)
    return Draft7Validator(schema, format_checker=FormatChecker())


def validate(value: Any, schema: Any) -> list[ValidationError]:
    """Validate ``value`` against ``schema`` and return every violation.

    The result is deterministic for a fixed (value, schema) pair: errors come
    in the engine's traversal order, which follows schema and document order.

    Args:
        value:  Any JSON value.
        schema: A Draft-07 JSON schema (dict or bool).

    Returns:
        A list of ``ValidationError``; empty when ``value`` is valid.

    Raises:
        SchemaError: If the schema itself is malformed.
    """
    return collect_errors(compile_schema(schema), value)


def collect_errors(validator: Draft7Validator, value: Any) -> list[ValidationError]:
    """Run a compiled validator and map its errors onto JsonPaths."""
    return [_to_validation_error(error) for error in validator.iter_errors(value)]


def _to_validation_error(error: EngineValidationError) -> ValidationError:
    # absolute_path holds ints for array indices and strs for object keys
    path: JsonPath = tuple(error.absolute_path)
    schema_path = "#" + path_to_pointer(tuple(error.absolute_schema_path))
    return ValidationError(
        path=path,
        message=error.message,
        keyword=str(error.validator),
        schema_path=schema_path,
    )
