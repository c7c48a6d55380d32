from typing import Any, Optional

__all__ = (
    "BlankValueError",
    "EmptyCollectionError",
    "ImproperConfigurationError",
    "InvalidFieldError",
    "InvalidInputError",
    "NotConfiguredError",
    "OutOfRangeError",
    "SQLBuilderError",
    "SQLParsingError",
    "SQLStencilError",
)


class SQLStencilError(Exception):
    """Base exception class from which all SQLStencil exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLStencilError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLStencilError):
    """Improper Configuration error.

    This exception is raised when a dialect or builder is configured with unusable values.
    """


# -- Argument Errors --
class InvalidInputError(SQLStencilError, ValueError):
    """A required argument was not provided."""

    parameter_name: str

    def __init__(self, parameter_name: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"{parameter_name} cannot be None."
        super().__init__(message)
        self.parameter_name = parameter_name


class BlankValueError(SQLStencilError, ValueError):
    """A required string argument was empty or contained only whitespace."""

    parameter_name: str

    def __init__(self, parameter_name: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"{parameter_name} cannot be empty or whitespace."
        super().__init__(message)
        self.parameter_name = parameter_name


class EmptyCollectionError(SQLStencilError, ValueError):
    """A required collection argument contained no entries."""

    parameter_name: str

    def __init__(self, parameter_name: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"{parameter_name} must contain at least 1 entry."
        super().__init__(message)
        self.parameter_name = parameter_name


class OutOfRangeError(SQLStencilError, ValueError):
    """A numeric argument fell outside its allowed range."""

    parameter_name: str
    actual_value: Any

    def __init__(self, parameter_name: str, actual_value: Any, message: str) -> None:
        super().__init__(f"{message} Actual value was {actual_value}.")
        self.parameter_name = parameter_name
        self.actual_value = actual_value


# -- Build Errors --
class SQLBuilderError(SQLStencilError):
    """Issues Building or Generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class NotConfiguredError(SQLBuilderError):
    """A statement was requested before the builder held the configuration it needs."""


class InvalidFieldError(SQLBuilderError):
    """Field names were referenced that are not among the available fields.

    Every offending collection is reported in a single error, one line per collection.
    """

    invalid_fields: "dict[str, list[str]]"

    def __init__(self, invalid_fields: "dict[str, list[str]]") -> None:
        self.invalid_fields = invalid_fields
        super().__init__(
            "\r\n".join(
                f"{collection} contains the following invalid field names: {', '.join(names)}."
                for collection, names in invalid_fields.items()
            )
        )


class SQLParsingError(SQLStencilError):
    """Issues parsing SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues parsing SQL statement."
        super().__init__(message)
