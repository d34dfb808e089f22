"""
Compile query-string filters into a parameterized WHERE clause.

Filter values arrive as raw strings (or ``None`` when absent). Every
user-supplied operand is bound as a parameter; only fixed literals such as
``equity > 0`` appear in the statement text.
"""

import logging
from typing import Any, Dict, List, Optional

from database.constants import SALARY_CEILING
from database.exceptions import ValidationError
from database.sql import placeholder, positional_params

logger = logging.getLogger(__name__)


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value only matches literally."""
    return value.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


def parse_int(name: str, raw: Any) -> Optional[int]:
    """
    Parse an optional integer filter.

    ``None`` and blank strings mean "not given". Anything that is not a whole
    number is rejected.
    """
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw

    text = str(raw).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        raise ValidationError(f"{name} must be an integer: {raw}") from None


class FilterCompiler:
    """Accumulates predicates that are joined with AND."""

    def __init__(self):
        self.predicates: List[str] = []
        self.values: List[Any] = []

    def add(self, template: str, value: Any) -> None:
        """Add a predicate; ``{}`` in ``template`` is replaced by the value's placeholder."""
        self.values.append(value)
        self.predicates.append(template.format(placeholder(len(self.values))))

    def add_literal(self, predicate: str) -> None:
        self.predicates.append(predicate)

    def contains(self, column: str, text: str) -> None:
        """Case-insensitive substring match on ``column``."""
        pattern = f"%{escape_like(text.lower())}%"
        self.add(f"LOWER({column}) LIKE {{}} ESCAPE '\\'", pattern)

    @property
    def where_clause(self) -> str:
        if not self.predicates:
            return ""
        return "WHERE " + " AND ".join(self.predicates)

    @property
    def params(self) -> Dict[str, Any]:
        return positional_params(self.values)


def compile_job_filters(
    title: Optional[str] = None,
    min_salary: Any = None,
    has_equity: Any = None
) -> FilterCompiler:
    """
    Build the predicates for a job search.

    Args:
        title: Case-insensitive substring of the job title.
        min_salary: Inclusive lower bound on salary; zero or absent adds nothing.
        has_equity: ``"true"`` for equity > 0, ``"false"`` for equity = 0,
            anything else leaves equity unconstrained.

    Raises:
        ValidationError: If min_salary is not an integer or reaches the ceiling.
    """
    min_salary_value = parse_int('minSalary', min_salary)
    if min_salary_value is not None and min_salary_value >= SALARY_CEILING:
        raise ValidationError(
            f"minSalary must be less than {SALARY_CEILING}: {min_salary_value}"
        )

    compiler = FilterCompiler()

    if title:
        compiler.contains('title', title)

    if min_salary_value:
        compiler.add('salary >= {}', min_salary_value)

    flag = str(has_equity).lower() if has_equity is not None else ''
    if flag == 'true':
        compiler.add_literal('equity > 0')
    elif flag == 'false':
        compiler.add_literal('equity = 0')
    else:
        compiler.add_literal('equity >= 0')

    logger.debug(f"Compiled job filters: {compiler.predicates}")
    return compiler


def compile_company_filters(
    name: Optional[str] = None,
    min_employees: Any = None,
    max_employees: Any = None
) -> FilterCompiler:
    """
    Build the predicates for a company search.

    Raises:
        ValidationError: If a bound is not an integer, or min is greater than max.
    """
    min_value = parse_int('minEmployees', min_employees)
    max_value = parse_int('maxEmployees', max_employees)

    if min_value is not None and max_value is not None and min_value > max_value:
        raise ValidationError(
            f"Min value is greater than Max value: Min:{min_value}, Max:{max_value}"
        )

    compiler = FilterCompiler()

    if name:
        compiler.contains('name', name)
    if min_value is not None:
        compiler.add('num_employees >= {}', min_value)
    if max_value is not None:
        compiler.add('num_employees <= {}', max_value)

    logger.debug(f"Compiled company filters: {compiler.predicates}")
    return compiler
