"""
Tests for repositories/filters.py - list-query filter composition.
"""

import pytest

from repositories.filters import FilterClause, company_filters, job_filters


class TestFilterClause:

    def test_no_fragments_no_where(self):
        assert FilterClause([], []).where() == ""

    def test_fragments_joined_with_and(self):
        clause = FilterClause(["a = %s", "b > 0"], [1])
        assert clause.where() == " WHERE a = %s AND b > 0"


class TestCompanyFilters:
    """Test company filter criteria."""

    @pytest.mark.parametrize("criteria", [None, {}])
    def test_no_criteria(self, criteria):
        assert company_filters(criteria) == ([], [])

    def test_zero_min_employees_is_no_constraint(self):
        assert company_filters({"minEmployees": 0}) == company_filters(None)

    def test_empty_strings_are_ignored(self):
        assert company_filters({"name": "", "description": ""}) == ([], [])

    def test_name_is_wrapped_in_wildcards(self):
        clause = company_filters({"name": "net"})
        assert clause.fragments == ["name ILIKE %s"]
        assert clause.values == ["%net%"]

    def test_all_filters(self):
        clause = company_filters({
            "name": "net",
            "description": "cloud",
            "minEmployees": 10,
            "maxEmployees": 500,
        })
        assert clause.fragments == [
            "name ILIKE %s",
            "description ILIKE %s",
            "num_employees >= %s",
            "num_employees <= %s",
        ]
        assert clause.values == ["%net%", "%cloud%", 10, 500]

    def test_max_only(self):
        assert company_filters({"maxEmployees": 50}) == (["num_employees <= %s"], [50])

    def test_unknown_keys_are_ignored(self):
        assert company_filters({"handle": "abc"}) == ([], [])

    @pytest.mark.parametrize("low, high", [(500, 10), ("9", "10"), ("5", 10)])
    def test_bounds_are_not_compared(self, low, high):
        """Both bounds pass through as given, even an empty or mixed-type range."""
        clause = company_filters({"minEmployees": low, "maxEmployees": high})
        assert clause.fragments == ["num_employees >= %s", "num_employees <= %s"]
        assert clause.values == [low, high]

    def test_equal_bounds_are_allowed(self):
        clause = company_filters({"minEmployees": 10, "maxEmployees": 10})
        assert clause.values == [10, 10]


class TestJobFilters:
    """Test job filter criteria."""

    @pytest.mark.parametrize("criteria", [None, {}])
    def test_no_criteria(self, criteria):
        assert job_filters(criteria) == ([], [])

    def test_title_and_handle(self):
        clause = job_filters({"title": "eng", "companyHandle": "ab"})
        assert clause.fragments == ["j.title ILIKE %s", "j.company_handle ILIKE %s"]
        assert clause.values == ["%eng%", "%ab%"]

    def test_min_salary(self):
        assert job_filters({"minSalary": 50000}) == (["j.salary >= %s"], [50000])

    def test_zero_min_salary_is_no_constraint(self):
        assert job_filters({"minSalary": 0}) == ([], [])

    def test_equity_true_adds_unparameterized_fragment(self):
        assert job_filters({"equity": True}) == (["j.equity > 0"], [])

    @pytest.mark.parametrize("equity", [False, None, "true", 1])
    def test_equity_other_values_are_ignored(self, equity):
        assert job_filters({"equity": equity}) == ([], [])

    def test_all_filters(self):
        clause = job_filters({"title": "eng", "minSalary": 1000, "equity": True})
        assert clause.where() == " WHERE j.title ILIKE %s AND j.salary >= %s AND j.equity > 0"
        assert clause.values == ["%eng%", 1000]
