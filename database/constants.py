# Upper bound (exclusive) for salaries and the minSalary filter
SALARY_CEILING = 1_000_000

EQUITY_MAX = 1.0
