"""
models/job.py
-------------
Domain model for job postings.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from models.company import Company
from utils.sql import UpdateField


# Job field names equal their column names; the owning company is fixed
# at creation.
JOB_UPDATE_FIELDS: dict[str, UpdateField] = {
    "title": UpdateField("title", (str,)),
    "salary": UpdateField("salary", (int,), nullable=True),
    "equity": UpdateField("equity", (Decimal, float, int), nullable=True),
}


@dataclass
class Job:
    """
    Represents a job posted by a company.

    Attributes:
        title: Job title.
        company_handle: Handle of the owning company. Cleared by the
            detail view, which sets `company` instead.
        salary: Yearly salary, None when not disclosed.
        equity: Equity fraction in [0, 1], None when not offered.
        id: Database primary key (None for new records).
        company_name: Owning company's name; only set by list queries.
        company: Owning company's summary; only set by the detail view.
    """
    title: str
    company_handle: Optional[str] = None
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    id: Optional[int] = None
    company_name: Optional[str] = None
    company: Optional[Company] = None

    @classmethod
    def from_row(cls, row: dict) -> "Job":
        """Build a Job from a row keyed by column name."""
        return cls(
            id=row.get("id"),
            title=row["title"],
            salary=row.get("salary"),
            equity=row.get("equity"),
            company_handle=row.get("company_handle"),
            company_name=row.get("company_name"),
        )

    def to_dict(self) -> dict:
        """
        Public record using the logical field names.

        The detail view carries `company` in place of `companyHandle`.
        """
        data = {
            "id": self.id,
            "title": self.title,
            "salary": self.salary,
            "equity": self.equity,
        }
        if self.company_handle is not None:
            data["companyHandle"] = self.company_handle
        else:
            data["company"] = self.company.to_dict() if self.company else None
        if self.company_name is not None:
            data["companyName"] = self.company_name
        return data

    def __str__(self) -> str:
        return f"#{self.id} {self.title}"
