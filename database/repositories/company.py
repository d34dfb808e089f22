import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError

from database.exceptions import NotFoundError, ValidationError
from database.filters import compile_company_filters
from database.repositories.base import BaseRepository
from database.repositories.job import JobRepository

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = (
    'handle, name, description, '
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)

COMPANY_COLUMN_OVERRIDES = {
    'numEmployees': 'num_employees',
    'logoUrl': 'logo_url',
}


class CompanyRepository(BaseRepository):
    """Companies, keyed by handle (case-insensitive)."""

    def exists(self, handle: str) -> bool:
        row = self._fetch_one(
            "SELECT handle FROM companies WHERE LOWER(handle) = :p1",
            {'p1': handle.lower()}
        )
        return row is not None

    def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a company from ``{handle, name, description, numEmployees, logoUrl}``.

        Raises:
            ValidationError: A company with the same handle already exists.
        """
        handle = data['handle']
        if self.exists(handle):
            raise ValidationError(f"Duplicate company: {handle}")

        try:
            company = self._fetch_one(
                f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                    VALUES (:p1, :p2, :p3, :p4, :p5)
                    RETURNING {COMPANY_COLUMNS}""",
                {
                    'p1': handle,
                    'p2': data['name'],
                    'p3': data['description'],
                    'p4': data.get('numEmployees'),
                    'p5': data.get('logoUrl'),
                }
            )
        except IntegrityError:
            self.rollback()
            if self.exists(handle):
                raise ValidationError(f"Duplicate company: {handle}") from None
            raise

        logger.info(f"Created company {handle}")
        return company

    def find_all(
        self,
        name: Optional[str] = None,
        min_employees: Any = None,
        max_employees: Any = None
    ) -> List[Dict[str, Any]]:
        """
        Find companies matching every given filter, ordered by name.

        Raises:
            ValidationError: Non-integer bounds, or min_employees > max_employees.
        """
        filters = compile_company_filters(
            name=name,
            min_employees=min_employees,
            max_employees=max_employees
        )
        return self._fetch_all(
            f"SELECT {COMPANY_COLUMNS} FROM companies {filters.where_clause} ORDER BY name",
            filters.params
        )

    def get(self, handle: str) -> Dict[str, Any]:
        """
        Get a company and its jobs.

        Raises:
            NotFoundError: No company has this handle.
        """
        company = self._fetch_one(
            f"SELECT {COMPANY_COLUMNS} FROM companies WHERE LOWER(handle) = :p1",
            {'p1': handle.lower()}
        )
        if company is None:
            raise NotFoundError(f"No company: {handle}")

        company['jobs'] = JobRepository(self.db).find_by_company(company['handle'])
        return company

    def update(self, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partially update a company.

        Raises:
            ValidationError: ``data`` is empty.
            NotFoundError: No company has this handle.
        """
        company = self._update_returning(
            'companies', 'handle', handle, data, COMPANY_COLUMN_OVERRIDES, COMPANY_COLUMNS
        )
        if company is None:
            raise NotFoundError(f"No company: {handle}")

        logger.info(f"Updated company {handle}: {sorted(data.keys())}")
        return company

    def remove(self, handle: str) -> None:
        """Raises NotFoundError if no company has this handle."""
        company = self._fetch_one(
            "DELETE FROM companies WHERE LOWER(handle) = :p1 RETURNING handle",
            {'p1': handle.lower()}
        )
        if company is None:
            raise NotFoundError(f"No company: {handle}")
        logger.info(f"Removed company {handle}")
