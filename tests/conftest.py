"""
Pytest configuration and shared fixtures.
"""

from decimal import Decimal
from typing import Any, Dict, List

import pytest


class FakeExecutor:
    """
    Stands in for db.executor.Executor.

    Replays scripted result sets in order (an empty list once the script
    runs out) and records every (sql, params) call.
    """

    def __init__(self, *results: List[Dict[str, Any]]):
        self.results = list(results)
        self.calls: list[tuple[str, list]] = []

    def execute(self, sql: str, params=()) -> list[dict]:
        self.calls.append((sql, list(params)))
        if self.results:
            return self.results.pop(0)
        return []

    @property
    def statements(self) -> list[str]:
        return [" ".join(sql.split()) for sql, _ in self.calls]


@pytest.fixture
def fake_executor():
    """Factory: fake_executor(rows1, rows2, ...) -> FakeExecutor."""
    return FakeExecutor


@pytest.fixture
def company_row() -> Dict[str, Any]:
    """A companies row as returned by the executor."""
    return {
        "handle": "abc",
        "name": "ABC",
        "description": "d",
        "num_employees": 10,
        "logo_url": None,
    }


@pytest.fixture
def job_rows() -> List[Dict[str, Any]]:
    """Two jobs rows owned by company 'abc'."""
    return [
        {"id": 1, "title": "engineer", "salary": 100000, "equity": Decimal("0.05"), "company_handle": "abc"},
        {"id": 2, "title": "analyst", "salary": None, "equity": None, "company_handle": "abc"},
    ]
