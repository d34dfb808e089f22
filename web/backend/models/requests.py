#!/usr/bin/env python3
"""
Request models for API endpoints.

Bodies use camelCase keys. Unknown keys are rejected, and for updates only the
keys the caller actually sent are passed on to the repository.
"""

from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from database.constants import EQUITY_MAX, SALARY_CEILING

URL_PATTERN = r"^https?://[^\s/$.?#][^\s]*$"


class RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid"
    )

    # Fields that may be omitted but never sent as null
    non_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.model_fields_set:
            if name in self.non_nullable and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} may not be null")
        return self

    def to_fields(self) -> Dict[str, Any]:
        """Field name -> value for the fields present in the request, keyed by camelCase name."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class JobNew(RequestModel):
    """Request to create a job."""
    title: str = Field(min_length=1)
    salary: int = Field(ge=0, lt=SALARY_CEILING)
    equity: float = Field(ge=0, le=EQUITY_MAX)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(RequestModel):
    """Partial update of a job."""
    non_nullable: ClassVar[Tuple[str, ...]] = ("title", "salary", "equity", "company_handle")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0, lt=SALARY_CEILING)
    equity: Optional[float] = Field(None, ge=0, le=EQUITY_MAX)
    company_handle: Optional[str] = Field(None, min_length=1, max_length=25)


class CompanyNew(RequestModel):
    """Request to create a company."""
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = Field(None, pattern=URL_PATTERN)


class CompanyUpdate(RequestModel):
    """Partial update of a company; the handle cannot change."""
    non_nullable: ClassVar[Tuple[str, ...]] = ("name", "description")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = Field(None, pattern=URL_PATTERN)
