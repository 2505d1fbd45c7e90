"""
repositories/filters.py
-----------------------
Turns optional list-query criteria into WHERE fragments and their
parameters. A criterion that is falsy (None, "", 0, False) adds nothing,
so a bound of 0 means "no constraint".
"""

from typing import Any, Mapping, NamedTuple, Optional


class FilterClause(NamedTuple):
    """Predicate fragments to be AND-ed, and the values they bind."""
    fragments: list[str]
    values: list[Any]

    def where(self) -> str:
        """The WHERE clause, or an empty string when nothing filters."""
        if not self.fragments:
            return ""
        return " WHERE " + " AND ".join(self.fragments)


def company_filters(criteria: Optional[Mapping[str, Any]] = None) -> FilterClause:
    """
    Build the filter for a company list query.

    Criteria: name, description (case-insensitive substring),
    minEmployees, maxEmployees (inclusive bounds). The bounds are not
    checked against each other; an empty range just matches nothing.
    """
    criteria = criteria or {}
    fragments: list[str] = []
    values: list[Any] = []

    if criteria.get("name"):
        fragments.append("name ILIKE %s")
        values.append(f"%{criteria['name']}%")
    if criteria.get("description"):
        fragments.append("description ILIKE %s")
        values.append(f"%{criteria['description']}%")
    if criteria.get("minEmployees"):
        fragments.append("num_employees >= %s")
        values.append(criteria["minEmployees"])
    if criteria.get("maxEmployees"):
        fragments.append("num_employees <= %s")
        values.append(criteria["maxEmployees"])

    return FilterClause(fragments, values)


def job_filters(criteria: Optional[Mapping[str, Any]] = None) -> FilterClause:
    """
    Build the filter for a job list query (jobs aliased as ``j``).

    Criteria: title, companyHandle (case-insensitive substring),
    minSalary (inclusive bound), equity (only ``True`` restricts to
    jobs with equity above zero).
    """
    criteria = criteria or {}
    fragments: list[str] = []
    values: list[Any] = []

    if criteria.get("title"):
        fragments.append("j.title ILIKE %s")
        values.append(f"%{criteria['title']}%")
    if criteria.get("companyHandle"):
        fragments.append("j.company_handle ILIKE %s")
        values.append(f"%{criteria['companyHandle']}%")
    if criteria.get("minSalary"):
        fragments.append("j.salary >= %s")
        values.append(criteria["minSalary"])
    if criteria.get("equity") is True:
        fragments.append("j.equity > 0")

    return FilterClause(fragments, values)
