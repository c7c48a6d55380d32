"""Unit tests for UPDATE statement rendering."""

import re
import uuid

import pytest

from sqlstencil.builder import StatementBuilder
from sqlstencil.exceptions import InvalidFieldError, NotConfiguredError


def test_update_with_one_update_field(applications_builder: StatementBuilder) -> None:
    """Test a single assignment with a single filter."""
    applications_builder.add_update_fields({"Description": "Hi There!"}).add_filters({"ApplicationID": uuid.uuid4()})

    assert (
        applications_builder.build_update_command()
        == "UPDATE dbo.Applications SET Description = @description WHERE ApplicationID = @applicationID;"
    )


def test_update_with_two_update_fields() -> None:
    """Test assignments are comma-joined in iteration order."""
    builder = (
        StatementBuilder()
        .add_table_name("dbo.Applications")
        .add_available_fields(["ApplicationID", "Description", "Name"])
        .add_update_fields({"Description": "Hi There!", "Name": "Bob"})
        .add_filters({"ApplicationID": uuid.uuid4()})
    )

    assert (
        builder.build_update_command()
        == "UPDATE dbo.Applications SET Description = @description, Name = @name WHERE ApplicationID = @applicationID;"
    )


def test_update_without_filters_updates_every_row(applications_builder: StatementBuilder) -> None:
    """Test an empty filter set renders no WHERE clause."""
    applications_builder.add_update_fields({"Description": "All of them"})

    assert applications_builder.build_update_command() == "UPDATE dbo.Applications SET Description = @description;"


def test_update_requires_table_name() -> None:
    """Test UPDATE fails before a table name is set."""
    builder = StatementBuilder().add_available_fields(["ApplicationID"]).add_update_fields({"ApplicationID": 1})

    with pytest.raises(
        NotConfiguredError, match=re.escape("TableName must be specified to build an UPDATE command.")
    ):
        builder.build_update_command()


def test_update_requires_available_fields() -> None:
    """Test UPDATE fails before available fields are set."""
    builder = StatementBuilder().add_table_name("dbo.Applications")

    with pytest.raises(
        NotConfiguredError, match=re.escape("AvailableFields must be specified to build an UPDATE command.")
    ):
        builder.build_update_command()


def test_update_requires_update_fields(applications_builder: StatementBuilder) -> None:
    """Test UPDATE fails before update fields are set."""
    with pytest.raises(
        NotConfiguredError, match=re.escape("UpdateFields must be specified to build an UPDATE command.")
    ):
        applications_builder.build_update_command()


def test_update_reports_invalid_filters(applications_builder: StatementBuilder) -> None:
    """Test invalid filter names are reported."""
    applications_builder.add_update_fields({"Description": "Hi There!"}).add_filters(
        {"RollingID": uuid.uuid4(), "Name": "Mine"}
    )

    with pytest.raises(InvalidFieldError) as exc_info:
        applications_builder.build_update_command()

    assert str(exc_info.value) == "Filters contains the following invalid field names: RollingID, Name."


def test_update_reports_invalid_update_fields(applications_builder: StatementBuilder) -> None:
    """Test invalid update field names are reported."""
    applications_builder.add_update_fields({"XFiles1": "The Truth", "XFiles2": "Is Out There"}).add_filters(
        {"ApplicationID": uuid.uuid4()}
    )

    with pytest.raises(InvalidFieldError) as exc_info:
        applications_builder.build_update_command()

    assert str(exc_info.value) == "UpdateFields contains the following invalid field names: XFiles1, XFiles2."


def test_update_reports_filters_before_update_fields(applications_builder: StatementBuilder) -> None:
    """Test both lines are reported, filters first, regardless of configuration order."""
    applications_builder.add_update_fields({"XFiles1": "The Truth", "XFiles2": "Is Out There"}).add_filters(
        {"RollingID": uuid.uuid4(), "Name": "Mine"}
    )

    with pytest.raises(InvalidFieldError) as exc_info:
        applications_builder.build_update_command()

    assert str(exc_info.value) == (
        "Filters contains the following invalid field names: RollingID, Name.\r\n"
        "UpdateFields contains the following invalid field names: XFiles1, XFiles2."
    )
