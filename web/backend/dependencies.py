#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from database.database import DatabaseManager
from database.repositories import CompanyRepository, JobRepository


def get_db_manager(request: Request) -> DatabaseManager:
    """Return the DatabaseManager attached to the running app."""
    return request.app.state.db_manager


def get_db(db_manager: DatabaseManager = Depends(get_db_manager)) -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    The request's work is committed when the endpoint returns normally and
    rolled back when it raises.

    Yields:
        Session: Database session that will be automatically closed.
    """
    with db_manager.session_scope() as session:
        yield session


def get_job_repository(db: Session = Depends(get_db)) -> JobRepository:
    return JobRepository(db)


def get_company_repository(db: Session = Depends(get_db)) -> CompanyRepository:
    return CompanyRepository(db)
