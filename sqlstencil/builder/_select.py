"""Paginated SELECT statement rendering."""

from sqlstencil.builder._base import ParameterListKind, StatementBuilderBase, StatementKind

__all__ = ("SelectCommandMixin",)


class SelectCommandMixin(StatementBuilderBase):
    """Renders windowed SELECT statements bounded by row-number parameters."""

    def build_select_command(self) -> str:
        """Build a paginated SELECT command that is ready for execution.

        Each filter is appended as `` AND <field> = <parameter>`` after the row-number
        bounds. The sort order is rendered as ``<field> ASC|DESC`` terms, prefixed with
        `` ORDER BY `` only when the dialect asks for it.

        Raises:
            NotConfiguredError: If the table name or available fields are missing, or the
                dialect requires a sort order and none was given.
            InvalidFieldError: If a filter or sort key names a field that is not available.

        Returns:
            str: A SELECT SQL command.
        """
        kind = StatementKind.SELECT
        self._require_configuration(kind)
        if self.dialect.require_sort_order and len(self._sort_order) == 0:
            self._raise_not_configured("SortOrder", kind)
        self._check_fields(kind, ("Filters", self._filters), ("SortOrder", self._sort_order))

        sql = self.dialect.select_statement_format.format(
            table=self._table_name,
            fields=", ".join(self._available_fields),
            where_clause=self._build_parameter_list(ParameterListKind.INCLUDE_LEADING_AND),
            starting_parameter=self._format_parameter(self._starting_row_number_parameter_name),
            ending_parameter=self._format_parameter(self._ending_row_number_parameter_name),
            sort_order=self._build_sort_order(),
        )
        return self._log_built(kind, sql)
