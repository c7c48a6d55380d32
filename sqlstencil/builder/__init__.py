"""Parameterized SQL statement builder.

This package renders SELECT, INSERT, UPDATE and DELETE statements from a table
name, a whitelist of fields, filters, sort order and update values, using the
templates of a :class:`~sqlstencil.dialects.DialectConfig`.
"""

from typing import Any, Union

from sqlstencil.builder._base import ParameterListKind, SafeQuery, StatementBuilderBase, StatementKind
from sqlstencil.builder._delete import DeleteCommandMixin
from sqlstencil.builder._insert import InsertCommandMixin
from sqlstencil.builder._select import SelectCommandMixin
from sqlstencil.builder._statement import StatementBuilder
from sqlstencil.builder._update import UpdateCommandMixin
from sqlstencil.dialects import DialectConfig

__all__ = (
    "DeleteCommandMixin",
    "InsertCommandMixin",
    "ParameterListKind",
    "SafeQuery",
    "SelectCommandMixin",
    "StatementBuilder",
    "StatementBuilderBase",
    "StatementKind",
    "UpdateCommandMixin",
    "create_builder",
)


def create_builder(dialect: Union[DialectConfig, str, None] = None, **kwargs: Any) -> StatementBuilder:
    """Create a statement builder.

    Args:
        dialect: A dialect config or the name of a registered dialect. Defaults to the default dialect.
        **kwargs: Passed to :class:`StatementBuilder` (for example ``normalizer``).

    Returns:
        StatementBuilder: A new, unconfigured builder.
    """
    return StatementBuilder(dialect=dialect, **kwargs)  # type: ignore[arg-type]
