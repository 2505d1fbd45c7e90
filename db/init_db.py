"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.executor import Executor
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Companies: identified by a lowercase handle chosen at creation
CREATE TABLE IF NOT EXISTS companies (
    handle          VARCHAR(25) PRIMARY KEY CHECK (handle = lower(handle)),
    name            TEXT UNIQUE NOT NULL,
    num_employees   INTEGER CHECK (num_employees >= 0),
    description     TEXT NOT NULL,
    logo_url        TEXT
);

-- Jobs: each owned by exactly one company
CREATE TABLE IF NOT EXISTS jobs (
    id              SERIAL PRIMARY KEY,
    title           TEXT NOT NULL,
    salary          INTEGER CHECK (salary >= 0),
    equity          NUMERIC CHECK (equity <= 1.0),
    company_handle  VARCHAR(25) NOT NULL
                    REFERENCES companies ON DELETE CASCADE
);

CREATE INDEX IF NOT EXISTS idx_jobs_company_handle ON jobs(company_handle);
"""


def create_tables(executor=None) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    executor = executor or Executor()
    executor.execute(SCHEMA_SQL)
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    create_tables()
    close_pool()
    print("Database schema created successfully.")
