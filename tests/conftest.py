from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sqlstencil.builder import StatementBuilder

if TYPE_CHECKING:
    from collections.abc import Generator


APPLICATIONS_TABLE = "dbo.Applications"
APPLICATION_FIELDS = ["ApplicationID", "Description"]


@pytest.fixture
def builder() -> StatementBuilder:
    """A default-dialect builder with no configuration."""
    return StatementBuilder()


@pytest.fixture
def applications_builder() -> StatementBuilder:
    """A default-dialect builder targeting ``dbo.Applications``."""
    return StatementBuilder().add_table_name(APPLICATIONS_TABLE).add_available_fields(APPLICATION_FIELDS)


@pytest.fixture
def isolated_dialects() -> Generator[None, None, None]:
    """Restore the dialect registry after a test registers dialects."""
    from sqlstencil import dialects

    saved = dict(dialects._DIALECTS)
    yield
    dialects._DIALECTS.clear()
    dialects._DIALECTS.update(saved)
