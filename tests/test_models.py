"""
Tests for models/ - row mapping and public records.
"""

from decimal import Decimal

from models.company import Company
from models.job import Job


class TestCompany:

    def test_from_row(self, company_row):
        company = Company.from_row(company_row)
        assert company.num_employees == 10
        assert company.logo_url is None
        assert company.jobs is None

    def test_summary_has_no_jobs_key(self, company_row):
        assert "jobs" not in Company.from_row(company_row).to_dict()

    def test_str(self, company_row):
        assert str(Company.from_row(company_row)) == "ABC (abc)"


class TestJob:

    def test_list_record_includes_company_name(self):
        job = Job(id=1, title="t", salary=5, equity=Decimal("0"), company_handle="abc", company_name="ABC")
        assert job.to_dict() == {
            "id": 1,
            "title": "t",
            "salary": 5,
            "equity": Decimal("0"),
            "companyHandle": "abc",
            "companyName": "ABC",
        }

    def test_detail_record_replaces_handle_with_company(self, company_row):
        job = Job(id=1, title="t", company=Company.from_row(company_row))
        data = job.to_dict()
        assert "companyHandle" not in data
        assert data["company"]["name"] == "ABC"
