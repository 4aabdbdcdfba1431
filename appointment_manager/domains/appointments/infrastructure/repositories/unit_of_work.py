"""
SQLAlchemy Unit of Work

Commits everything staged on the request session in one transaction.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from appointment_manager.core.application import IUnitOfWork
from appointment_manager.core.shared.cancellation import CancellationToken

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(IUnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save_changes(self, cancellation: CancellationToken | None = None) -> int:
        """
        Commit pending changes.

        Returns:
            Number of new, modified and deleted records that were pending
        """
        CancellationToken.check(cancellation)
        affected = len(self.session.new) + len(self.session.dirty) + len(self.session.deleted)
        try:
            await self.session.commit()
        except Exception as e:
            logger.error(f"Commit failed, rolling back: {e}")
            await self.session.rollback()
            raise
        logger.debug(f"Committed {affected} change(s)")
        return affected
