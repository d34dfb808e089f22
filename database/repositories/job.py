import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError

from database.constants import EQUITY_MAX
from database.exceptions import NotFoundError, ValidationError
from database.filters import compile_job_filters
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'title, salary, equity, company_handle AS "companyHandle"'

# Domain field name -> column name, where they differ
JOB_COLUMN_OVERRIDES = {
    'companyHandle': 'company_handle',
}


def _normalize(job: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Equity comes back as NUMERIC (Decimal or text depending on driver); expose it as float."""
    if job is not None and job.get('equity') is not None:
        job['equity'] = float(job['equity'])
    return job


def _validate_compensation(data: Mapping[str, Any]) -> None:
    if 'equity' in data:
        equity = data['equity']
        if equity is None or not 0 <= equity <= EQUITY_MAX:
            raise ValidationError(f"Equity value for job is invalid (<= {EQUITY_MAX}): {equity}")

    if 'salary' in data:
        salary = data['salary']
        if salary is None or salary < 0:
            raise ValidationError(f"Salary value for job is invalid (>= 0): {salary}")


class JobRepository(BaseRepository):
    """Jobs, keyed by title (case-insensitive)."""

    def exists(self, title: str) -> bool:
        row = self._fetch_one(
            "SELECT title FROM jobs WHERE LOWER(title) = :p1",
            {'p1': title.lower()}
        )
        return row is not None

    def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a job.

        Args:
            data: ``{title, salary, equity, companyHandle}``.

        Returns:
            The stored job with equity as a float.

        Raises:
            ValidationError: Equity outside [0, 1], negative salary, or a job
                with the same title already exists.
        """
        _validate_compensation(data)

        title = data['title']
        if self.exists(title):
            raise ValidationError(f"Duplicate job: {title}")

        try:
            job = self._fetch_one(
                f"""INSERT INTO jobs (title, salary, equity, company_handle)
                    VALUES (:p1, :p2, :p3, :p4)
                    RETURNING {JOB_COLUMNS}""",
                {
                    'p1': title,
                    'p2': data['salary'],
                    'p3': data['equity'],
                    'p4': data['companyHandle'],
                }
            )
        except IntegrityError:
            # A concurrent create may have won the race past the check above
            self.rollback()
            if self.exists(title):
                raise ValidationError(f"Duplicate job: {title}") from None
            raise

        logger.info(f"Created job {title}")
        return _normalize(job)

    def find_all(
        self,
        title: Optional[str] = None,
        min_salary: Any = None,
        has_equity: Any = None
    ) -> List[Dict[str, Any]]:
        """
        Find jobs matching every given filter.

        Raises:
            ValidationError: If a filter value is out of range.
        """
        filters = compile_job_filters(title=title, min_salary=min_salary, has_equity=has_equity)
        jobs = self._fetch_all(
            f"SELECT {JOB_COLUMNS} FROM jobs {filters.where_clause}",
            filters.params
        )
        return [_normalize(job) for job in jobs]

    def find_by_company(self, handle: str) -> List[Dict[str, Any]]:
        jobs = self._fetch_all(
            f"SELECT {JOB_COLUMNS} FROM jobs WHERE LOWER(company_handle) = :p1 ORDER BY title",
            {'p1': handle.lower()}
        )
        return [_normalize(job) for job in jobs]

    def get(self, title: str) -> Dict[str, Any]:
        """Raises NotFoundError if no job has this title."""
        job = self._fetch_one(
            f"SELECT {JOB_COLUMNS} FROM jobs WHERE LOWER(title) = :p1",
            {'p1': title.lower()}
        )
        if job is None:
            raise NotFoundError(f"No job: {title}")
        return _normalize(job)

    def update(self, title: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partially update a job; fields missing from ``data`` keep their value.

        Raises:
            ValidationError: ``data`` is empty or holds out-of-range values.
            NotFoundError: No job has this title.
        """
        _validate_compensation(data)

        job = self._update_returning(
            'jobs', 'title', title, data, JOB_COLUMN_OVERRIDES, JOB_COLUMNS
        )
        if job is None:
            raise NotFoundError(f"No job: {title}")

        logger.info(f"Updated job {title}: {sorted(data.keys())}")
        return _normalize(job)

    def remove(self, title: str) -> None:
        """Raises NotFoundError if no job has this title."""
        job = self._fetch_one(
            "DELETE FROM jobs WHERE LOWER(title) = :p1 RETURNING title",
            {'p1': title.lower()}
        )
        if job is None:
            raise NotFoundError(f"No job: {title}")
        logger.info(f"Removed job {title}")
