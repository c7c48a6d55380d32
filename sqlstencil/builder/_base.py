"""Shared state and rendering helpers for the statement builder.

The builder keeps its configuration in place: every ``add_*`` call replaces one
piece of state and returns the same instance, and validation is deferred until a
statement is rendered.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum, Flag
from typing import Any, NoReturn, Optional, Union

import sqlglot
from sqlglot import exp
from sqlglot.errors import ParseError as SQLGlotParseError
from typing_extensions import Self

from sqlstencil.dialects import DEFAULT_DIALECT, DialectConfig, resolve_dialect, template_fields
from sqlstencil.exceptions import (
    BlankValueError,
    EmptyCollectionError,
    InvalidFieldError,
    InvalidInputError,
    NotConfiguredError,
    SQLParsingError,
)
from sqlstencil.typing import FieldNames, FieldNormalizer, FieldValues, SortDirection, SortOrderMapping
from sqlstencil.utils.logging import get_logger, statement_context
from sqlstencil.utils.structures import CaseInsensitiveDict
from sqlstencil.utils.text import camel_case

__all__ = (
    "ParameterListKind",
    "SafeQuery",
    "StatementBuilderBase",
    "StatementKind",
)

logger = get_logger("builder")

DEFAULT_STARTING_ROW_NUMBER_PARAMETER_NAME = "startingRowNumber"
DEFAULT_ENDING_ROW_NUMBER_PARAMETER_NAME = "endingRowNumber"


class StatementKind(str, Enum):
    """The four statements a builder can render."""

    DELETE = "DELETE"
    INSERT = "INSERT"
    SELECT = "SELECT"
    UPDATE = "UPDATE"

    @property
    def article(self) -> str:
        return "an" if self.value[0] in "AEIOU" else "a"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> "Optional[StatementKind]":
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


def _statement_kind(kind: "Union[StatementKind, str]") -> StatementKind:
    try:
        return StatementKind(kind)
    except ValueError:
        msg = f"kind must be one of {', '.join(member.value for member in StatementKind)}, got {kind!r}."
        raise InvalidInputError("kind", msg) from None


class ParameterListKind(Flag):
    """How a filter fragment is introduced."""

    DEFAULT = 0
    INCLUDE_WHERE_CLAUSE = 1
    INCLUDE_LEADING_AND = 2


@dataclass(frozen=True)
class SafeQuery:
    """A rendered statement together with the parameters it expects."""

    sql: str
    parameter_names: "tuple[str, ...]" = ()
    """Parameter names in the order their placeholders appear in ``sql``."""
    parameters: "dict[str, Any]" = field(default_factory=dict)
    """Values the builder already holds, keyed by parameter name."""
    dialect: DialectConfig = DEFAULT_DIALECT

    def to_expression(self) -> exp.Expression:
        """Parse the statement with sqlglot.

        Raises:
            SQLParsingError: If sqlglot cannot parse the statement.

        Returns:
            exp.Expression: The parsed statement.
        """
        try:
            expression = sqlglot.parse_one(self.sql, read=self.dialect.sqlglot_dialect)
        except SQLGlotParseError as e:
            msg = f"Could not parse {self.dialect.name} statement: {e}"
            raise SQLParsingError(msg) from e
        if expression is None:
            msg = f"Could not parse {self.dialect.name} statement: {self.sql!r}"
            raise SQLParsingError(msg)
        return expression


def _require_text(value: Optional[str], parameter_name: str) -> str:
    if value is None:
        raise InvalidInputError(parameter_name)
    if not isinstance(value, str):
        raise InvalidInputError(parameter_name, f"{parameter_name} must be a string, got {type(value).__name__}.")
    if not value.strip():
        raise BlankValueError(parameter_name)
    return value


def _require_mapping(value: Optional[Mapping[str, Any]], parameter_name: str) -> Mapping[str, Any]:
    if value is None:
        raise InvalidInputError(parameter_name)
    if not isinstance(value, Mapping):
        raise InvalidInputError(parameter_name, f"{parameter_name} must be a mapping, got {type(value).__name__}.")
    return value


@dataclass(eq=False)
class StatementBuilderBase:
    """Configuration and helpers shared by the statement mixins.

    Args:
        dialect: A :class:`~sqlstencil.dialects.DialectConfig` or the name of a registered dialect.
        normalizer: Naming-convention transform applied to field names to derive parameter names.
    """

    dialect: DialectConfig = field(default=DEFAULT_DIALECT)
    normalizer: FieldNormalizer = field(default=camel_case)
    _table_name: Optional[str] = field(default=None, init=False, repr=False, compare=False)
    _available_fields: "list[str]" = field(default_factory=list, init=False, repr=False, compare=False)
    _filters: "CaseInsensitiveDict[Any]" = field(
        default_factory=CaseInsensitiveDict, init=False, repr=False, compare=False
    )
    _sort_order: "CaseInsensitiveDict[SortDirection]" = field(
        default_factory=CaseInsensitiveDict, init=False, repr=False, compare=False
    )
    _update_fields: "CaseInsensitiveDict[Any]" = field(
        default_factory=CaseInsensitiveDict, init=False, repr=False, compare=False
    )
    _starting_row_number_parameter_name: str = field(
        default=DEFAULT_STARTING_ROW_NUMBER_PARAMETER_NAME, init=False, repr=False, compare=False
    )
    _ending_row_number_parameter_name: str = field(
        default=DEFAULT_ENDING_ROW_NUMBER_PARAMETER_NAME, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.dialect = resolve_dialect(self.dialect)
        if self.normalizer is None:
            raise InvalidInputError("normalizer")

    # -- State --
    @property
    def table_name(self) -> Optional[str]:
        return self._table_name

    @property
    def available_fields(self) -> "tuple[str, ...]":
        """The whitelist that filters, sort keys and update keys are checked against."""
        return tuple(self._available_fields)

    @property
    def filters(self) -> "CaseInsensitiveDict[Any]":
        return self._filters

    @property
    def sort_order(self) -> "CaseInsensitiveDict[SortDirection]":
        return self._sort_order

    @property
    def update_fields(self) -> "CaseInsensitiveDict[Any]":
        return self._update_fields

    @property
    def starting_row_number_parameter_name(self) -> str:
        return self._starting_row_number_parameter_name

    @property
    def ending_row_number_parameter_name(self) -> str:
        return self._ending_row_number_parameter_name

    # -- Configuration --
    def add_table_name(self, table_name: str) -> Self:
        """Set the table the statements target.

        Raises:
            InvalidInputError: If ``table_name`` is None or not a string.
            BlankValueError: If ``table_name`` is empty or whitespace.

        Returns:
            The current builder instance for method chaining.
        """
        self._table_name = _require_text(table_name, "table_name")
        return self

    def add_available_fields(self, available_fields: FieldNames) -> Self:
        """Replace the field whitelist.

        Args:
            available_fields: Field names in the order they are rendered. Any iterable is
                accepted and copied.

        Raises:
            InvalidInputError: If ``available_fields`` is None, a bare string or not iterable.
            EmptyCollectionError: If ``available_fields`` is empty.

        Returns:
            The current builder instance for method chaining.
        """
        if available_fields is None:
            raise InvalidInputError("available_fields")
        if isinstance(available_fields, str) or not isinstance(available_fields, Iterable):
            msg = f"available_fields must be a sequence of field names, not {type(available_fields).__name__}."
            raise InvalidInputError("available_fields", msg)
        fields = list(available_fields)
        if len(fields) <= 0:
            raise EmptyCollectionError("available_fields", "AvailableFields must contain at least 1 field.")
        self._available_fields = fields
        return self

    def add_filters(self, filters: FieldValues) -> Self:
        """Replace the equality filters used by WHERE clauses.

        An empty mapping removes the WHERE clause.

        Raises:
            InvalidInputError: If ``filters`` is None or not a mapping.

        Returns:
            The current builder instance for method chaining.
        """
        self._filters = CaseInsensitiveDict(_require_mapping(filters, "filters"))
        return self

    def add_sort_order(self, sort_order: SortOrderMapping) -> Self:
        """Replace the sort order. Insertion order is the rendered order.

        Raises:
            InvalidInputError: If ``sort_order`` is None, not a mapping or holds an unknown direction.

        Returns:
            The current builder instance for method chaining.
        """
        coerced: CaseInsensitiveDict[SortDirection] = CaseInsensitiveDict()
        for name, direction in _require_mapping(sort_order, "sort_order").items():
            try:
                coerced[name] = SortDirection(direction)
            except ValueError:
                msg = f"sort_order contains an invalid direction for {name}: {direction!r}."
                raise InvalidInputError("sort_order", msg) from None
        self._sort_order = coerced
        return self

    def add_update_fields(self, update_fields: FieldValues) -> Self:
        """Replace the field values assigned by UPDATE statements.

        Raises:
            InvalidInputError: If ``update_fields`` is None or not a mapping.
            EmptyCollectionError: If ``update_fields`` is empty.

        Returns:
            The current builder instance for method chaining.
        """
        if len(_require_mapping(update_fields, "update_fields")) <= 0:
            raise EmptyCollectionError("update_fields", "UpdateFields must contain at least 1 field.")
        self._update_fields = CaseInsensitiveDict(update_fields)
        return self

    def add_starting_row_number_parameter_name(self, starting_row_number_parameter_name: str) -> Self:
        self._starting_row_number_parameter_name = _require_text(
            starting_row_number_parameter_name, "starting_row_number_parameter_name"
        )
        return self

    def add_ending_row_number_parameter_name(self, ending_row_number_parameter_name: str) -> Self:
        self._ending_row_number_parameter_name = _require_text(
            ending_row_number_parameter_name, "ending_row_number_parameter_name"
        )
        return self

    # -- Validation --
    def validate_fields(self, fields: Iterable[str]) -> "list[str]":
        """Return the names in ``fields`` that are not available fields.

        Matching is exact, so a name differing only in case is reported as invalid.
        The result keeps the order of ``fields``.
        """
        available = self._available_fields
        return [name for name in fields if name not in available]

    def _require_configuration(self, kind: StatementKind) -> None:
        if self._table_name is None or not self._table_name.strip():
            self._raise_not_configured("TableName", kind)
        if len(self._available_fields) == 0:
            self._raise_not_configured("AvailableFields", kind)

    @staticmethod
    def _raise_not_configured(setting: str, kind: StatementKind) -> NoReturn:
        msg = f"{setting} must be specified to build {kind.article} {kind} command."
        logger.debug("Cannot build %s statement: %s", kind, msg)
        raise NotConfiguredError(msg)

    def _check_fields(self, kind: StatementKind, *collections: "tuple[str, Iterable[str]]") -> None:
        """Validate each labelled collection and raise one error covering all of them.

        Argument order is the order of the lines in the error message.
        """
        invalid_fields: dict[str, list[str]] = {}
        for label, names in collections:
            invalid = self.validate_fields(names)
            if invalid:
                invalid_fields[label] = invalid
        if invalid_fields:
            logger.debug(
                "Rejected %s statement for %s",
                kind,
                self._table_name,
                extra=statement_context(kind, self._table_name, self.dialect.name, invalid_fields=invalid_fields),
            )
            raise InvalidFieldError(invalid_fields)

    # -- Rendering --
    def _parameter_name(self, field_name: str) -> str:
        return self.normalizer(field_name)

    def _format_parameter(self, name: str) -> str:
        return self.dialect.format_parameter(name)

    def _build_assignment(self, field_name: str) -> str:
        return f"{field_name} = {self._format_parameter(self._parameter_name(field_name))}"

    def _build_parameter_list(self, kind: ParameterListKind = ParameterListKind.DEFAULT) -> str:
        """Render the filters as ``<field> = <parameter>`` terms.

        Returns:
            An empty string when there are no filters.
        """
        if len(self._filters) == 0:
            return ""
        terms = [self._build_assignment(name) for name in self._filters]
        if ParameterListKind.INCLUDE_LEADING_AND in kind:
            return "".join(f" AND {term}" for term in terms)
        clause = " AND ".join(terms)
        if ParameterListKind.INCLUDE_WHERE_CLAUSE in kind:
            return f" WHERE {clause}"
        return clause

    def _build_sort_order(self) -> str:
        if len(self._sort_order) == 0:
            return ""
        terms = ", ".join(f"{name} {direction.value}" for name, direction in self._sort_order.items())
        if self.dialect.include_order_by_clause:
            return f" ORDER BY {terms}"
        return terms

    def _template_for(self, kind: StatementKind) -> str:
        return getattr(self.dialect, f"{kind.value.lower()}_statement_format")

    def get_parameter_names(self, kind: "Union[StatementKind, str]") -> "tuple[str, ...]":
        """Parameter names a rendered ``kind`` statement expects, in placeholder order.

        The order follows the dialect's template, so positional placeholders can be bound
        from this sequence. No validation is performed.
        """
        kind = _statement_kind(kind)
        names_by_field = {
            "where_clause": [self._parameter_name(name) for name in self._filters],
            "parameters": [self._parameter_name(name) for name in self._available_fields],
            "update_assignments": [self._parameter_name(name) for name in self._update_fields],
            "starting_parameter": [self._starting_row_number_parameter_name],
            "ending_parameter": [self._ending_row_number_parameter_name],
        }
        names: list[str] = []
        for field_name in template_fields(self._template_for(kind)):
            names.extend(names_by_field.get(field_name, ()))
        return tuple(names)

    def _log_built(self, kind: StatementKind, sql: str) -> str:
        logger.debug(
            "Built %s statement for %s",
            kind,
            self._table_name,
            extra=statement_context(kind, self._table_name, self.dialect.name, filters=len(self._filters)),
        )
        return sql
