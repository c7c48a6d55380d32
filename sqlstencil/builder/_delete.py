"""DELETE statement rendering."""

from sqlstencil.builder._base import ParameterListKind, StatementBuilderBase, StatementKind

__all__ = ("DeleteCommandMixin",)


class DeleteCommandMixin(StatementBuilderBase):
    """Renders DELETE statements filtered by the configured filters."""

    def build_delete_command(self) -> str:
        """Build a DELETE command that is ready for execution.

        Raises:
            NotConfiguredError: If the table name or available fields are missing.
            InvalidFieldError: If a filter names a field that is not available.

        Returns:
            str: A DELETE SQL command.
        """
        kind = StatementKind.DELETE
        self._require_configuration(kind)
        self._check_fields(kind, ("Filters", self._filters))

        sql = self.dialect.delete_statement_format.format(
            table=self._table_name,
            where_clause=self._build_parameter_list(ParameterListKind.INCLUDE_WHERE_CLAUSE),
        )
        return self._log_built(kind, sql)
