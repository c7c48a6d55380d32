"""Unit tests for dialect configuration and the dialect registry."""

import dataclasses

import pytest

from sqlstencil import dialects
from sqlstencil.dialects import (
    DEFAULT_DIALECT,
    ORACLE_DIALECT,
    SQLITE_DIALECT,
    SQLSERVER_DIALECT,
    DialectConfig,
    available_dialects,
    get_dialect,
    register_dialect,
    resolve_dialect,
    template_fields,
)
from sqlstencil.exceptions import ImproperConfigurationError

# Configuration


def test_default_dialect_values() -> None:
    """Test the default dialect's flags and placeholder format."""
    assert DEFAULT_DIALECT.name == "default"
    assert DEFAULT_DIALECT.parameter_format == "@{name}"
    assert DEFAULT_DIALECT.include_order_by_clause is False
    assert DEFAULT_DIALECT.require_sort_order is True
    assert DEFAULT_DIALECT.delete_statement_format == "DELETE FROM {table}{where_clause};"
    assert DEFAULT_DIALECT.insert_statement_format == "INSERT INTO {table} ({fields}) VALUES ({parameters});"
    assert DEFAULT_DIALECT.update_statement_format == "UPDATE {table} SET {update_assignments}{where_clause};"


def test_dialect_is_frozen() -> None:
    """Test dialects cannot be changed after construction."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_DIALECT.parameter_format = ":{name}"  # type: ignore[misc]


def test_replace_returns_modified_copy() -> None:
    """Test replace leaves the original untouched."""
    custom = SQLSERVER_DIALECT.replace(name="custom", parameter_format=":{name}")

    assert custom.parameter_format == ":{name}"
    assert custom.select_statement_format == SQLSERVER_DIALECT.select_statement_format
    assert SQLSERVER_DIALECT.parameter_format == "@{name}"


def test_format_parameter() -> None:
    """Test placeholders for each preset."""
    assert DEFAULT_DIALECT.format_parameter("applicationID") == "@applicationID"
    assert ORACLE_DIALECT.format_parameter("applicationID") == ":applicationID"
    assert SQLITE_DIALECT.format_parameter("applicationID") == "?"


def test_template_fields_in_order() -> None:
    """Test template fields are returned in the order they appear, duplicates included."""
    assert template_fields("SELECT {fields} FROM (SELECT {fields} FROM {table}){where_clause}") == [
        "fields",
        "fields",
        "table",
        "where_clause",
    ]
    assert template_fields("?") == []


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_is_rejected(name: str) -> None:
    """Test a dialect needs a name."""
    with pytest.raises(ImproperConfigurationError, match="Dialect name cannot be empty or whitespace."):
        DialectConfig(name=name)


@pytest.mark.parametrize(
    "field_name",
    [
        "delete_statement_format",
        "insert_statement_format",
        "select_statement_format",
        "update_statement_format",
        "parameter_format",
    ],
)
def test_blank_template_is_rejected(field_name: str) -> None:
    """Test every template must have content."""
    with pytest.raises(ImproperConfigurationError, match=f"{field_name} cannot be empty or whitespace."):
        DialectConfig(name="broken", **{field_name: " "})


def test_unknown_template_field_is_rejected() -> None:
    """Test a template may only use the fields its statement supplies."""
    with pytest.raises(ImproperConfigurationError, match="delete_statement_format references unknown fields: fields."):
        DialectConfig(name="broken", delete_statement_format="DELETE {fields} FROM {table}{where_clause};")


def test_invalid_format_string_is_rejected() -> None:
    """Test a malformed template is reported as a configuration error."""
    with pytest.raises(ImproperConfigurationError, match="is not a valid template"):
        DialectConfig(name="broken", update_statement_format="UPDATE {table SET {update_assignments};")


# Registry


def test_presets_are_registered() -> None:
    """Test the bundled presets can be looked up by name."""
    assert {"default", "oracle", "sqlite", "sqlserver"} <= set(available_dialects())
    assert get_dialect("SQLServer") is SQLSERVER_DIALECT
    assert get_dialect("oracle") is ORACLE_DIALECT


def test_unknown_dialect() -> None:
    """Test unknown names list the registered dialects."""
    with pytest.raises(ImproperConfigurationError, match="Unknown dialect 'mysql'. Available dialects: default"):
        get_dialect("mysql")


@pytest.mark.usefixtures("isolated_dialects")
def test_register_dialect() -> None:
    """Test a custom dialect becomes available by name."""
    custom = DialectConfig(name="Postgres", parameter_format="%({name})s")

    assert register_dialect(custom) is custom
    assert get_dialect("postgres") is custom
    assert "postgres" in available_dialects()


@pytest.mark.usefixtures("isolated_dialects")
def test_register_duplicate_requires_replace() -> None:
    """Test registering an existing name needs ``replace=True``."""
    custom = SQLITE_DIALECT.replace(parameter_format=":{name}")

    with pytest.raises(ImproperConfigurationError, match="already registered"):
        register_dialect(custom)

    register_dialect(custom, replace=True)
    assert get_dialect("sqlite") is custom


def test_registry_restored() -> None:
    """Test registrations from other tests do not leak."""
    assert dialects.get_dialect("sqlite") is SQLITE_DIALECT
    assert "postgres" not in available_dialects()


def test_resolve_dialect() -> None:
    """Test resolve_dialect accepts None, a config or a name."""
    assert resolve_dialect(None) is DEFAULT_DIALECT
    assert resolve_dialect(ORACLE_DIALECT) is ORACLE_DIALECT
    assert resolve_dialect("sqlite") is SQLITE_DIALECT

    with pytest.raises(ImproperConfigurationError, match="Expected a DialectConfig or dialect name, got int."):
        resolve_dialect(3)  # type: ignore[arg-type]
