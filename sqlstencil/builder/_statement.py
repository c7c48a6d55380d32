"""The statement builder assembled from the per-statement mixins."""

from dataclasses import dataclass
from typing import Any, Union

from sqlstencil.builder._base import SafeQuery, StatementKind, _statement_kind
from sqlstencil.builder._delete import DeleteCommandMixin
from sqlstencil.builder._insert import InsertCommandMixin
from sqlstencil.builder._select import SelectCommandMixin
from sqlstencil.builder._update import UpdateCommandMixin

__all__ = ("StatementBuilder",)


@dataclass(eq=False)
class StatementBuilder(DeleteCommandMixin, InsertCommandMixin, SelectCommandMixin, UpdateCommandMixin):
    """Builds parameterized SELECT, INSERT, UPDATE and DELETE statements.

    Configure the builder with the fluent ``add_*`` methods, then render one or more
    statements. Templates and placeholder style come from the dialect given at
    construction.

    Example:
        >>> builder = (
        ...     StatementBuilder()
        ...     .add_table_name("dbo.Applications")
        ...     .add_available_fields(["ApplicationID", "Description"])
        ...     .add_filters({"ApplicationID": 42})
        ... )
        >>> builder.build_delete_command()
        'DELETE FROM dbo.Applications WHERE ApplicationID = @applicationID;'

    Instances hold mutable state and are not safe to share between threads.
    """

    def build(self, kind: Union[StatementKind, str]) -> SafeQuery:
        """Render ``kind`` together with its parameter manifest.

        ``parameters`` holds the filter and update-field values keyed by parameter name.
        Insert values and row-number bounds are supplied by the caller. When an update
        field and a filter share a parameter name the filter value is kept.

        Returns:
            SafeQuery: The statement, its parameter names and known values.
        """
        kind = _statement_kind(kind)
        renderers = {
            StatementKind.DELETE: self.build_delete_command,
            StatementKind.INSERT: self.build_insert_command,
            StatementKind.SELECT: self.build_select_command,
            StatementKind.UPDATE: self.build_update_command,
        }
        sql = renderers[kind]()

        parameters: dict[str, Any] = {}
        if kind is StatementKind.UPDATE:
            parameters.update((self._parameter_name(name), value) for name, value in self._update_fields.items())
        if kind is not StatementKind.INSERT:
            parameters.update((self._parameter_name(name), value) for name, value in self._filters.items())

        return SafeQuery(
            sql=sql, parameter_names=self.get_parameter_names(kind), parameters=parameters, dialect=self.dialect
        )
