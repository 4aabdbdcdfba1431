"""
Application layer building blocks shared by every bounded context.
"""

from appointment_manager.core.application.paged_list import PagedList
from appointment_manager.core.application.result import InvalidResultError, Result
from appointment_manager.core.application.unit_of_work import IUnitOfWork

__all__ = [
    "Result",
    "InvalidResultError",
    "PagedList",
    "IUnitOfWork",
]
