"""
Unit of Work Port

Commit boundary invoked once per write use case.
"""

from typing import Protocol, runtime_checkable

from appointment_manager.core.shared.cancellation import CancellationToken


@runtime_checkable
class IUnitOfWork(Protocol):
    """Unit of work interface."""

    async def save_changes(self, cancellation: CancellationToken | None = None) -> int:
        """
        Commit pending changes.

        Args:
            cancellation: Optional cooperative cancellation token

        Returns:
            Number of affected records
        """
        ...
