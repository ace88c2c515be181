"""Pytest configuration and shared fixtures."""

from datetime import timezone

import pytest

from signalxml.models.statement import SQLMMS, SQLSMS, SqlStatement


def _statement(columns: list[str], values: dict) -> SqlStatement:
    unknown = set(values) - set(columns)
    assert not unknown, f"unknown columns: {unknown}"
    return SqlStatement(
        statement="INSERT INTO t VALUES (?)",
        parameters=[values.get(name) for name in columns],
    )


@pytest.fixture
def make_sms_statement():
    """Build a 22-column ``sms`` row; unnamed columns are NULL."""

    def _make(**values) -> SqlStatement:
        return _statement(list(SQLSMS.model_fields), values)

    return _make


@pytest.fixture
def make_mms_statement():
    """Build a 42-column ``mms`` row; unnamed columns are NULL."""

    def _make(**values) -> SqlStatement:
        return _statement(list(SQLMMS.model_fields), values)

    return _make


@pytest.fixture
def utc():
    return timezone.utc
