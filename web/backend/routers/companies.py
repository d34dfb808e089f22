#!/usr/bin/env python3
"""
Company endpoints - create, search, view, update and remove companies.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from database.repositories import CompanyRepository
from ..auth import ensure_admin
from ..dependencies import get_company_repository
from ..models.requests import CompanyNew, CompanyUpdate
from ..models.responses import (
    CompaniesResponse,
    CompanyDetailResponse,
    CompanyResponse,
    DeletedResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", status_code=201, response_model=CompanyResponse, dependencies=[Depends(ensure_admin)])
def create_company(
    body: CompanyNew,
    repo: CompanyRepository = Depends(get_company_repository)
):
    """
    Create a company.

    Authorization required: admin
    """
    company = repo.create(body.to_fields())
    repo.commit()
    return CompanyResponse(company=company)


@router.get("", response_model=CompaniesResponse)
def list_companies(
    name: Optional[str] = Query(default=None, description="Case-insensitive name substring"),
    min_employees: Optional[str] = Query(default=None, alias="minEmployees"),
    max_employees: Optional[str] = Query(default=None, alias="maxEmployees"),
    repo: CompanyRepository = Depends(get_company_repository)
):
    """
    List companies ordered by name, optionally filtered.

    minEmployees greater than maxEmployees is rejected with 400.
    """
    companies = repo.find_all(
        name=name,
        min_employees=min_employees,
        max_employees=max_employees
    )
    return CompaniesResponse(companies=companies)


@router.get("/{handle}", response_model=CompanyDetailResponse)
def get_company(
    handle: str,
    repo: CompanyRepository = Depends(get_company_repository)
):
    """Get a company and its jobs."""
    return CompanyDetailResponse(company=repo.get(handle))


@router.patch("/{handle}", response_model=CompanyResponse, dependencies=[Depends(ensure_admin)])
def update_company(
    handle: str,
    body: CompanyUpdate,
    repo: CompanyRepository = Depends(get_company_repository)
):
    """
    Partially update a company.

    Authorization required: admin
    """
    company = repo.update(handle, body.to_fields())
    repo.commit()
    return CompanyResponse(company=company)


@router.delete("/{handle}", response_model=DeletedResponse, dependencies=[Depends(ensure_admin)])
def delete_company(
    handle: str,
    repo: CompanyRepository = Depends(get_company_repository)
):
    """
    Remove a company and, through the store's cascade, its jobs.

    Authorization required: admin
    """
    repo.remove(handle)
    repo.commit()
    return DeletedResponse(deleted=handle)
