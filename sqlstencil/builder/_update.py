"""UPDATE statement rendering."""

from sqlstencil.builder._base import ParameterListKind, StatementBuilderBase, StatementKind

__all__ = ("UpdateCommandMixin",)


class UpdateCommandMixin(StatementBuilderBase):
    """Renders UPDATE statements from the configured update fields and filters."""

    def build_update_command(self) -> str:
        """Build an UPDATE command that is ready for execution.

        Raises:
            NotConfiguredError: If the table name, available fields or update fields are missing.
            InvalidFieldError: If a filter or update field names a field that is not available.

        Returns:
            str: An UPDATE SQL command.
        """
        kind = StatementKind.UPDATE
        self._require_configuration(kind)
        if len(self._update_fields) == 0:
            self._raise_not_configured("UpdateFields", kind)
        self._check_fields(kind, ("Filters", self._filters), ("UpdateFields", self._update_fields))

        sql = self.dialect.update_statement_format.format(
            table=self._table_name,
            update_assignments=", ".join(self._build_assignment(name) for name in self._update_fields),
            where_clause=self._build_parameter_list(ParameterListKind.INCLUDE_WHERE_CLAUSE),
        )
        return self._log_built(kind, sql)
