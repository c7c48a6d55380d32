"""INSERT statement rendering."""

from sqlstencil.builder._base import StatementBuilderBase, StatementKind

__all__ = ("InsertCommandMixin",)


class InsertCommandMixin(StatementBuilderBase):
    """Renders INSERT statements covering every available field."""

    def build_insert_command(self) -> str:
        """Build an INSERT command that is ready for execution.

        Field ``i`` is bound to parameter ``i``; filters and update fields are not used.

        Raises:
            NotConfiguredError: If the table name or available fields are missing.

        Returns:
            str: An INSERT SQL command.
        """
        kind = StatementKind.INSERT
        self._require_configuration(kind)

        fields = self._available_fields
        sql = self.dialect.insert_statement_format.format(
            table=self._table_name,
            fields=", ".join(fields),
            parameters=", ".join(self._format_parameter(self._parameter_name(name)) for name in fields),
        )
        return self._log_built(kind, sql)
