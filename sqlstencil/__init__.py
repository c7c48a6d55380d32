"""SQLStencil: parameterized SQL statement templates with field whitelisting."""

from sqlstencil import builder, dialects, exceptions, typing, utils
from sqlstencil.__metadata__ import __version__
from sqlstencil.builder import ParameterListKind, SafeQuery, StatementBuilder, StatementKind, create_builder
from sqlstencil.dialects import (
    DEFAULT_DIALECT,
    ORACLE_DIALECT,
    SQLITE_DIALECT,
    SQLSERVER_DIALECT,
    DialectConfig,
    get_dialect,
    register_dialect,
)
from sqlstencil.exceptions import (
    BlankValueError,
    EmptyCollectionError,
    ImproperConfigurationError,
    InvalidFieldError,
    InvalidInputError,
    NotConfiguredError,
    OutOfRangeError,
    SQLBuilderError,
    SQLParsingError,
    SQLStencilError,
)
from sqlstencil.result import QueryResult
from sqlstencil.typing import SortDirection

__all__ = (
    "DEFAULT_DIALECT",
    "ORACLE_DIALECT",
    "SQLITE_DIALECT",
    "SQLSERVER_DIALECT",
    "BlankValueError",
    "DialectConfig",
    "EmptyCollectionError",
    "ImproperConfigurationError",
    "InvalidFieldError",
    "InvalidInputError",
    "NotConfiguredError",
    "OutOfRangeError",
    "ParameterListKind",
    "QueryResult",
    "SQLBuilderError",
    "SQLParsingError",
    "SQLStencilError",
    "SafeQuery",
    "SortDirection",
    "StatementBuilder",
    "StatementKind",
    "__version__",
    "builder",
    "create_builder",
    "dialects",
    "exceptions",
    "get_dialect",
    "register_dialect",
    "typing",
    "utils",
)
