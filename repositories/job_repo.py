"""
repositories/job_repo.py
------------------------
Data access layer for jobs.
All SQL queries related to the `jobs` table live here.
"""

from decimal import Decimal
from typing import Any, Mapping, Optional

from models.company import Company
from models.job import JOB_UPDATE_FIELDS, Job
from repositories.filters import job_filters
from utils.errors import NotFoundError
from utils.logger import get_logger
from utils.sql import column_map, sql_for_partial_update, validate_patch

logger = get_logger(__name__)

_JOB_COLUMNS = "id, title, salary, equity, company_handle"


class JobRepository:
    """Repository for CRUD operations on the jobs table."""

    def __init__(self, executor):
        self.executor = executor

    # ── CREATE ────────────────────────────────────────────

    def create(
        self,
        title: str,
        salary: Optional[int],
        equity: Optional[Decimal],
        company_handle: str,
    ) -> Job:
        """
        Insert a new job. The id is generated by the database.

        An unknown company handle fails in the database and surfaces as
        the executor's StoreError.

        Returns:
            The created Job with its `id` populated.
        """
        sql = f"""
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES (%s, %s, %s, %s)
            RETURNING {_JOB_COLUMNS};
        """
        rows = self.executor.execute(sql, [title, salary, equity, company_handle])
        job = Job.from_row(rows[0])
        logger.info(f"Created job #{job.id} for company '{company_handle}'")
        return job

    # ── READ ──────────────────────────────────────────────

    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> list[Job]:
        """
        List jobs ordered by title, each with its company's name.

        Args:
            filters: Optional title, companyHandle, minSalary, equity.
        """
        clause = job_filters(filters)
        sql = (
            "SELECT j.id, j.title, j.salary, j.equity, j.company_handle,"
            " c.name AS company_name"
            " FROM jobs j"
            " LEFT JOIN companies c ON c.handle = j.company_handle"
            f"{clause.where()}"
            " ORDER BY j.title;"
        )
        logger.debug(f"find_all jobs: {sql} {clause.values}")
        return [Job.from_row(r) for r in self.executor.execute(sql, clause.values)]

    def get(self, job_id: int) -> Job:
        """
        Fetch a job with its owning company's summary.

        `company` is None if the company is gone by the time the second
        query runs.

        Raises:
            NotFoundError: If no job has this id.
        """
        rows = self.executor.execute(
            f"SELECT {_JOB_COLUMNS} FROM jobs WHERE id = %s;", [job_id]
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        job = Job.from_row(rows[0])

        company_rows = self.executor.execute(
            """
            SELECT handle, name, description, num_employees, logo_url
            FROM companies
            WHERE handle = %s;
            """,
            [job.company_handle],
        )
        job.company = Company.from_row(company_rows[0]) if company_rows else None
        job.company_handle = None
        return job

    # ── UPDATE ────────────────────────────────────────────

    def update(self, job_id: int, data: Mapping[str, Any]) -> Job:
        """
        Partially update a job; only the supplied fields change.

        Args:
            job_id: Job to update.
            data: Any of title, salary, equity.

        Raises:
            InvalidInputError: Empty patch or a field that cannot be updated.
            NotFoundError: If no job has this id.
        """
        patch = validate_patch(data, JOB_UPDATE_FIELDS)
        clause = sql_for_partial_update(patch, column_map(JOB_UPDATE_FIELDS))
        sql = f"""
            UPDATE jobs
            SET {clause.set_cols}
            WHERE id = %s
            RETURNING {_JOB_COLUMNS};
        """
        rows = self.executor.execute(sql, [*clause.values, job_id])
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        logger.info(f"Updated job #{job_id}: {', '.join(clause.columns)}")
        return Job.from_row(rows[0])

    # ── DELETE ────────────────────────────────────────────

    def remove(self, job_id: int) -> None:
        """
        Delete a job by id.

        Raises:
            NotFoundError: If no job has this id.
        """
        rows = self.executor.execute(
            "DELETE FROM jobs WHERE id = %s RETURNING id;", [job_id]
        )
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        logger.info(f"Deleted job #{job_id}")
