"""
main.py
-------
Command-line entry point for the Jobly data-access layer.

Responsibilities:
    - Initialize the database connection pool (and schema on `init-db`).
    - Run one repository query and print the result as JSON.
    - Close the pool on exit.

Usage:
    python main.py init-db
    python main.py companies --name net --min-employees 100
    python main.py company acme
    python main.py jobs --title engineer --has-equity
    python main.py job 42
"""

import argparse
import json
import sys

from db.connection import init_pool, close_pool
from db.executor import Executor
from db.init_db import create_tables
from repositories.company_repo import CompanyRepository
from repositories.job_repo import JobRepository
from utils.errors import JoblyError
from utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Define the sub-commands and their options."""
    parser = argparse.ArgumentParser(prog="jobly", description="Query companies and jobs.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="create the companies and jobs tables")

    companies = sub.add_parser("companies", help="list companies")
    companies.add_argument("--name")
    companies.add_argument("--description")
    companies.add_argument("--min-employees", type=int)
    companies.add_argument("--max-employees", type=int)

    company = sub.add_parser("company", help="show one company with its jobs")
    company.add_argument("handle")

    jobs = sub.add_parser("jobs", help="list jobs")
    jobs.add_argument("--title")
    jobs.add_argument("--company-handle")
    jobs.add_argument("--min-salary", type=int)
    jobs.add_argument("--has-equity", action="store_true")

    job = sub.add_parser("job", help="show one job with its company")
    job.add_argument("id", type=int)

    return parser


def run(args: argparse.Namespace, executor) -> object:
    """Dispatch a parsed command; returns a JSON-serializable result."""
    companies = CompanyRepository(executor)
    jobs = JobRepository(executor)

    if args.command == "init-db":
        create_tables(executor)
        return {"status": "ok"}
    if args.command == "companies":
        filters = {
            "name": args.name,
            "description": args.description,
            "minEmployees": args.min_employees,
            "maxEmployees": args.max_employees,
        }
        return [c.to_dict() for c in companies.find_all(filters)]
    if args.command == "company":
        return companies.get(args.handle).to_dict()
    if args.command == "jobs":
        filters = {
            "title": args.title,
            "companyHandle": args.company_handle,
            "minSalary": args.min_salary,
            "equity": args.has_equity,
        }
        return [j.to_dict() for j in jobs.find_all(filters)]
    if args.command == "job":
        return jobs.get(args.id).to_dict()
    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None) -> int:
    """Parse arguments, run the command and print its result."""
    args = build_parser().parse_args(argv)

    init_pool()
    try:
        result = run(args, Executor())
    except JoblyError as e:
        logger.error(f"{args.command} failed: {e.message}")
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    finally:
        close_pool()

    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
