"""
models/company.py
-----------------
Domain model for companies.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from utils.sql import UpdateField

if TYPE_CHECKING:
    from models.job import Job


# Fields a partial update may touch. The handle is the primary key and
# never appears here.
COMPANY_UPDATE_FIELDS: dict[str, UpdateField] = {
    "name": UpdateField("name", (str,)),
    "description": UpdateField("description", (str,)),
    "numEmployees": UpdateField("num_employees", (int,), nullable=True),
    "logoUrl": UpdateField("logo_url", (str,), nullable=True),
}


@dataclass
class Company:
    """
    Represents a company.

    Attributes:
        handle: Unique, immutable key chosen at creation.
        name: Display name.
        description: Free-text description.
        num_employees: Headcount, None when unknown.
        logo_url: Logo location, None when unknown.
        jobs: The company's jobs; only filled in by the detail view.
    """
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None
    jobs: Optional[list["Job"]] = None

    @classmethod
    def from_row(cls, row: dict) -> "Company":
        """Build a Company from a row keyed by column name."""
        return cls(
            handle=row["handle"],
            name=row["name"],
            description=row["description"],
            num_employees=row.get("num_employees"),
            logo_url=row.get("logo_url"),
        )

    def to_dict(self) -> dict:
        """Public record using the logical field names."""
        data = {
            "handle": self.handle,
            "name": self.name,
            "description": self.description,
            "numEmployees": self.num_employees,
            "logoUrl": self.logo_url,
        }
        if self.jobs is not None:
            data["jobs"] = [job.to_dict() for job in self.jobs]
        return data

    def __str__(self) -> str:
        return f"{self.name} ({self.handle})"
