"""
repositories/company_repo.py
-----------------------------
Data access layer for companies.
All SQL queries related to the `companies` table live here.
"""

from typing import Any, Mapping, Optional

from models.company import COMPANY_UPDATE_FIELDS, Company
from models.job import Job
from repositories.filters import company_filters
from utils.errors import DuplicateEntityError, NotFoundError
from utils.logger import get_logger
from utils.sql import column_map, sql_for_partial_update, validate_patch

logger = get_logger(__name__)

_COMPANY_COLUMNS = "handle, name, description, num_employees, logo_url"


class CompanyRepository:
    """
    Repository for CRUD operations on the companies table.

    Holds a borrowed executor; the connection pool behind it is managed
    by `db.connection`.
    """

    def __init__(self, executor):
        self.executor = executor

    # ── CREATE ────────────────────────────────────────────

    def create(
        self,
        handle: str,
        name: str,
        description: str,
        num_employees: Optional[int] = None,
        logo_url: Optional[str] = None,
    ) -> Company:
        """
        Insert a new company.

        The existence check and the insert are separate round trips. A
        concurrent insert between them is caught by ON CONFLICT and
        reported the same way.

        Returns:
            The created Company.

        Raises:
            DuplicateEntityError: If the handle is already taken.
        """
        existing = self.executor.execute(
            "SELECT handle FROM companies WHERE handle = %s;", [handle]
        )
        if existing:
            raise DuplicateEntityError(f"Duplicate company: {handle}")

        sql = f"""
            INSERT INTO companies ({_COMPANY_COLUMNS})
            VALUES (%s, %s, %s, %s, %s)
            ON CONFLICT (handle) DO NOTHING
            RETURNING {_COMPANY_COLUMNS};
        """
        rows = self.executor.execute(
            sql, [handle, name, description, num_employees, logo_url]
        )
        if not rows:
            raise DuplicateEntityError(f"Duplicate company: {handle}")

        logger.info(f"Created company '{handle}'")
        return Company.from_row(rows[0])

    # ── READ ──────────────────────────────────────────────

    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> list[Company]:
        """
        List companies ordered by name.

        Args:
            filters: Optional name, description, minEmployees, maxEmployees.

        Returns:
            Company summaries, without jobs.
        """
        clause = company_filters(filters)
        sql = f"SELECT {_COMPANY_COLUMNS} FROM companies{clause.where()} ORDER BY name;"
        logger.debug(f"find_all companies: {sql} {clause.values}")
        return [Company.from_row(r) for r in self.executor.execute(sql, clause.values)]

    def get(self, handle: str) -> Company:
        """
        Fetch a company and its jobs.

        The jobs come from a second query and may be stale if they change
        in between.

        Raises:
            NotFoundError: If no company has this handle.
        """
        rows = self.executor.execute(
            f"SELECT {_COMPANY_COLUMNS} FROM companies WHERE handle = %s;", [handle]
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        company = Company.from_row(rows[0])

        job_rows = self.executor.execute(
            """
            SELECT id, title, salary, equity, company_handle
            FROM jobs
            WHERE company_handle = %s;
            """,
            [handle],
        )
        company.jobs = [Job.from_row(r) for r in job_rows]
        return company

    # ── UPDATE ────────────────────────────────────────────

    def update(self, handle: str, data: Mapping[str, Any]) -> Company:
        """
        Partially update a company; only the supplied fields change.

        Args:
            handle: Company to update.
            data: Any of name, description, numEmployees, logoUrl.

        Returns:
            The updated Company (without jobs).

        Raises:
            InvalidInputError: Empty patch or a field that cannot be updated.
            NotFoundError: If no company has this handle.
        """
        patch = validate_patch(data, COMPANY_UPDATE_FIELDS)
        clause = sql_for_partial_update(patch, column_map(COMPANY_UPDATE_FIELDS))
        sql = f"""
            UPDATE companies
            SET {clause.set_cols}
            WHERE handle = %s
            RETURNING {_COMPANY_COLUMNS};
        """
        rows = self.executor.execute(sql, [*clause.values, handle])
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        logger.info(f"Updated company '{handle}': {', '.join(clause.columns)}")
        return Company.from_row(rows[0])

    # ── DELETE ────────────────────────────────────────────

    def remove(self, handle: str) -> None:
        """
        Delete a company (its jobs go with it).

        Raises:
            NotFoundError: If no company has this handle.
        """
        rows = self.executor.execute(
            "DELETE FROM companies WHERE handle = %s RETURNING handle;", [handle]
        )
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        logger.info(f"Deleted company '{handle}'")
