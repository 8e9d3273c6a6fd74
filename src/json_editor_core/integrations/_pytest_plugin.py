"""pytest plugin for json-editor-core.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_editor_core.validation import ValidatorCache


@pytest.fixture(scope="session")
def assert_json_valid() -> Any:
    """Fixture that returns a callable JSON-schema conformance asserter.

    Session-scoped: the returned callable only holds a ``ValidatorCache`` of
    compiled schemas, which never changes validation results.

    Usage in tests::

        def test_payload(assert_json_valid):
            assert_json_valid({"age": 3}, {"required": ["age"]})

        def test_missing_field(assert_json_valid):
            with pytest.raises(AssertionError, match=r"required"):
                assert_json_valid({}, {"required": ["age"]})

    Returns:
        A callable ``_assert(value, schema) -> None`` that raises
        ``AssertionError`` listing every violation as
        ``<json pointer>: [<keyword>] <message>``.
    """
    cache = ValidatorCache()

    def _assert(value: Any, schema: Any) -> None:
        """Assert that ``value`` satisfies ``schema``.

        Raises:
            AssertionError: When validation reports at least one error.
            SchemaError: When ``schema`` itself is malformed.
        """
        errors = cache.validate(value, schema)
        if errors:
            lines = "\n".join(
                f"  {error.pointer or '<root>'}: [{error.keyword}] {error.message}"
                for error in errors
            )
            raise AssertionError(
                f"JSON value does not match schema ({len(errors)} error(s)):\n{lines}"
            )

    return _assert
