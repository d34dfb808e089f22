"""
API routers for the Jobly web application.
"""

from .jobs import router as jobs_router
from .companies import router as companies_router

__all__ = [
    'jobs_router',
    'companies_router',
]
