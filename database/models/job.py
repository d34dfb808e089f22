from sqlalchemy import Column, Integer, Text, Numeric, ForeignKey, CheckConstraint, Index, func

from .base import Base


class Job(Base):
    __tablename__ = 'jobs'

    title = Column(Text, primary_key=True)
    salary = Column(Integer, nullable=False)
    equity = Column(Numeric, nullable=False)
    company_handle = Column(Text, ForeignKey('companies.handle', ondelete='CASCADE'), nullable=False)

    __table_args__ = (
        CheckConstraint('salary >= 0', name='ck_jobs_salary_non_negative'),
        CheckConstraint('equity <= 1.0', name='ck_jobs_equity_max'),
        # Titles are compared case-insensitively everywhere
        Index('ix_jobs_title_lower', func.lower(title), unique=True),
    )
