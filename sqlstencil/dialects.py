"""Statement templates and flags for SQL dialects.

A :class:`DialectConfig` holds everything that differs between database engines:
the four statement templates, the parameter placeholder format and the flags that
control how sort orders are rendered. Builders receive one at construction and never
switch it afterwards.

Templates use :meth:`str.format` named fields:

- delete: ``{table}``, ``{where_clause}``
- insert: ``{table}``, ``{fields}``, ``{parameters}``
- update: ``{table}``, ``{update_assignments}``, ``{where_clause}``
- select: ``{table}``, ``{fields}``, ``{where_clause}``, ``{starting_parameter}``,
  ``{ending_parameter}``, ``{sort_order}``
- parameter: ``{name}`` (optional, ``"?"`` is a valid parameter format)
"""

import dataclasses
import string
from dataclasses import dataclass
from typing import Any, Optional, Union

from sqlstencil.exceptions import ImproperConfigurationError
from sqlstencil.utils.logging import get_logger

__all__ = (
    "DEFAULT_DIALECT",
    "ORACLE_DIALECT",
    "SQLITE_DIALECT",
    "SQLSERVER_DIALECT",
    "DialectConfig",
    "available_dialects",
    "get_dialect",
    "register_dialect",
    "resolve_dialect",
    "template_fields",
)

logger = get_logger("dialects")

DEFAULT_DELETE_STATEMENT_FORMAT = "DELETE FROM {table}{where_clause};"
DEFAULT_INSERT_STATEMENT_FORMAT = "INSERT INTO {table} ({fields}) VALUES ({parameters});"
DEFAULT_UPDATE_STATEMENT_FORMAT = "UPDATE {table} SET {update_assignments}{where_clause};"
DEFAULT_SELECT_STATEMENT_FORMAT = (
    "SELECT {fields} FROM"
    " (SELECT COUNT() as row_count, ROW_NUMBER() OVER({sort_order}) AS row_no, {fields} FROM {table}) as subSelect"
    " WHERE subSelect.row_no >= {starting_parameter} AND subSelect.row_num < {ending_parameter}{where_clause};"
)
DEFAULT_PARAMETER_FORMAT = "@{name}"

_FORMATTER = string.Formatter()

_TEMPLATE_FIELDS: "dict[str, frozenset[str]]" = {
    "delete_statement_format": frozenset({"table", "where_clause"}),
    "insert_statement_format": frozenset({"table", "fields", "parameters"}),
    "select_statement_format": frozenset(
        {"table", "fields", "where_clause", "starting_parameter", "ending_parameter", "sort_order"}
    ),
    "update_statement_format": frozenset({"table", "update_assignments", "where_clause"}),
    "parameter_format": frozenset({"name"}),
}


def template_fields(template: str) -> "list[str]":
    """Return the named fields of a template in the order they appear.

    Raises:
        ValueError: If the template is not a valid format string.
    """
    return [field_name for _, field_name, _, _ in _FORMATTER.parse(template) if field_name is not None]


@dataclass(frozen=True)
class DialectConfig:
    """Templates and rendering flags for one SQL dialect."""

    name: str = "default"
    """Registry name of the dialect."""

    delete_statement_format: str = DEFAULT_DELETE_STATEMENT_FORMAT
    """Template for DELETE statements."""

    insert_statement_format: str = DEFAULT_INSERT_STATEMENT_FORMAT
    """Template for INSERT statements."""

    select_statement_format: str = DEFAULT_SELECT_STATEMENT_FORMAT
    """Template for paginated SELECT statements.

    Rows should carry a ``row_count`` column with the total number of records in the overall set.
    """

    update_statement_format: str = DEFAULT_UPDATE_STATEMENT_FORMAT
    """Template for UPDATE statements."""

    parameter_format: str = DEFAULT_PARAMETER_FORMAT
    """Placeholder format required by the database engine (``@{name}``, ``:{name}``, ``?``)."""

    include_order_by_clause: bool = False
    """Whether the sort-order fragment is prefixed with `` ORDER BY ``."""

    require_sort_order: bool = True
    """Whether SELECT statements refuse to build without a sort order."""

    sqlglot_dialect: Optional[str] = "tsql"
    """sqlglot dialect used to parse rendered statements."""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            msg = "Dialect name cannot be empty or whitespace."
            raise ImproperConfigurationError(msg)
        for field_name, allowed in _TEMPLATE_FIELDS.items():
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                msg = f"Dialect {self.name!r}: {field_name} cannot be empty or whitespace."
                raise ImproperConfigurationError(msg)
            try:
                unknown = [name for name in template_fields(value) if name not in allowed]
            except ValueError as e:
                msg = f"Dialect {self.name!r}: {field_name} is not a valid template: {e}"
                raise ImproperConfigurationError(msg) from e
            if unknown:
                msg = f"Dialect {self.name!r}: {field_name} references unknown fields: {', '.join(unknown)}."
                raise ImproperConfigurationError(msg)

    def replace(self, **changes: Any) -> "DialectConfig":
        """Return a copy of this dialect with ``changes`` applied.

        Returns:
            DialectConfig: The modified copy.
        """
        return dataclasses.replace(self, **changes)

    def format_parameter(self, name: str) -> str:
        """Render a parameter placeholder for ``name``."""
        return self.parameter_format.format(name=name)


DEFAULT_DIALECT = DialectConfig()

SQLSERVER_DIALECT = DialectConfig(
    name="sqlserver",
    select_statement_format=(
        "SELECT row_count, {fields} FROM"
        " (SELECT COUNT(*) OVER() AS row_count, ROW_NUMBER() OVER(ORDER BY {sort_order}) AS row_no, {fields}"
        " FROM {table}) AS subSelect"
        " WHERE subSelect.row_no >= {starting_parameter} AND subSelect.row_no < {ending_parameter}{where_clause};"
    ),
)

# Oracle drivers reject a trailing statement terminator.
ORACLE_DIALECT = DialectConfig(
    name="oracle",
    delete_statement_format="DELETE FROM {table}{where_clause}",
    insert_statement_format="INSERT INTO {table} ({fields}) VALUES ({parameters})",
    update_statement_format="UPDATE {table} SET {update_assignments}{where_clause}",
    select_statement_format=(
        "SELECT row_count, {fields} FROM"
        " (SELECT COUNT(*) OVER() AS row_count, ROW_NUMBER() OVER(ORDER BY {sort_order}) AS row_no, {fields}"
        " FROM {table}) subSelect"
        " WHERE subSelect.row_no >= {starting_parameter} AND subSelect.row_no < {ending_parameter}{where_clause}"
    ),
    parameter_format=":{name}",
    sqlglot_dialect="oracle",
)

SQLITE_DIALECT = DialectConfig(
    name="sqlite",
    select_statement_format=(
        "SELECT row_count, {fields} FROM"
        " (SELECT COUNT(*) OVER() AS row_count, ROW_NUMBER() OVER({sort_order}) AS row_no, {fields}"
        " FROM {table}) AS subSelect"
        " WHERE subSelect.row_no >= {starting_parameter} AND subSelect.row_no < {ending_parameter}{where_clause};"
    ),
    parameter_format="?",
    include_order_by_clause=True,
    require_sort_order=False,
    sqlglot_dialect="sqlite",
)

_DIALECTS: "dict[str, DialectConfig]" = {
    dialect.name: dialect for dialect in (DEFAULT_DIALECT, SQLSERVER_DIALECT, ORACLE_DIALECT, SQLITE_DIALECT)
}


def register_dialect(config: DialectConfig, *, replace: bool = False) -> DialectConfig:
    """Register a dialect under its name.

    Args:
        config: The dialect to register.
        replace: Overwrite an existing registration with the same name.

    Raises:
        ImproperConfigurationError: If the name is taken and ``replace`` is False.

    Returns:
        DialectConfig: The registered dialect.
    """
    key = config.name.lower()
    if key in _DIALECTS and not replace:
        msg = f"A dialect named {config.name!r} is already registered."
        raise ImproperConfigurationError(msg)
    _DIALECTS[key] = config
    logger.debug("Registered dialect %s", key)
    return config


def get_dialect(name: str) -> DialectConfig:
    """Look up a registered dialect by name (case-insensitive).

    Raises:
        ImproperConfigurationError: If no dialect is registered under ``name``.
    """
    try:
        return _DIALECTS[name.lower()]
    except KeyError:
        msg = f"Unknown dialect {name!r}. Available dialects: {', '.join(available_dialects())}."
        raise ImproperConfigurationError(msg) from None


def available_dialects() -> "tuple[str, ...]":
    return tuple(sorted(_DIALECTS))


def resolve_dialect(dialect: Union[DialectConfig, str, None]) -> DialectConfig:
    """Turn a dialect name, config or ``None`` into a :class:`DialectConfig`."""
    if dialect is None:
        return DEFAULT_DIALECT
    if isinstance(dialect, DialectConfig):
        return dialect
    if isinstance(dialect, str):
        return get_dialect(dialect)
    msg = f"Expected a DialectConfig or dialect name, got {type(dialect).__name__}."
    raise ImproperConfigurationError(msg)
