from database.repositories.base import BaseRepository
from database.repositories.job import JobRepository
from database.repositories.company import CompanyRepository

__all__ = [
    'BaseRepository',
    'JobRepository',
    'CompanyRepository',
]
