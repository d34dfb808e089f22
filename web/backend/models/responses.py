#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional


class ResponseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobItem(ResponseModel):
    """A job as exposed by the API."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Senior Software Engineer",
                "salary": 200000,
                "equity": 0.5,
                "companyHandle": "c1"
            }
        }
    )

    title: str
    salary: int
    equity: float
    company_handle: str


class CompanyItem(ResponseModel):
    """A company as exposed by the API."""
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyDetail(CompanyItem):
    """A company together with its jobs."""
    jobs: List[JobItem]


class JobResponse(BaseModel):
    job: JobItem


class JobsResponse(BaseModel):
    jobs: List[JobItem]


class CompanyResponse(BaseModel):
    company: CompanyItem


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompaniesResponse(BaseModel):
    companies: List[CompanyItem]


class DeletedResponse(BaseModel):
    """Response after removing a resource."""
    deleted: str
