"""Validation subpackage: schema validation, error path mapping, schema inference.

Example::

    from json_editor_core.validation import validate, infer_schema

    schema = infer_schema({"name": "x", "age": 3})
    validate({"name": "x"}, schema)[0].keyword   # "required"
"""

from json_editor_core.validation.cache import ValidatorCache
from json_editor_core.validation.inference import infer_schema
from json_editor_core.validation.validator import (
    ValidationError,
    check_schema,
    validate,
)

__all__ = [
    "ValidationError",
    "ValidatorCache",
    "check_schema",
    "infer_schema",
    "validate",
]
