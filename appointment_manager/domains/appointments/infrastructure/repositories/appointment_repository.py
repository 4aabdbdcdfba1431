"""
Appointment Repository Implementation

SQLAlchemy implementation of IAppointmentRepository.
"""

import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from appointment_manager.core.domain import EntityNotFoundException
from appointment_manager.core.shared.cancellation import CancellationToken
from appointment_manager.domains.appointments.application.ports.appointment_repository import (
    IAppointmentRepository,
)
from appointment_manager.domains.appointments.domain.entities.appointment import Appointment
from appointment_manager.domains.appointments.domain.value_objects import (
    AppointmentId,
    AppointmentStatus,
    DateRange,
)
from appointment_manager.domains.appointments.infrastructure.persistence.sqlalchemy.models import (
    AppointmentModel,
)

logger = logging.getLogger(__name__)


class SQLAlchemyAppointmentRepository(IAppointmentRepository):
    """
    SQLAlchemy implementation of appointment repository.

    Writes are staged on the session; SQLAlchemyUnitOfWork commits them.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(
        self,
        appointment_id: AppointmentId,
        cancellation: CancellationToken | None = None,
    ) -> Appointment | None:
        """Find appointment by ID."""
        CancellationToken.check(cancellation)
        result = await self.session.execute(
            select(AppointmentModel).where(AppointmentModel.id == appointment_id.to_uuid())
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self, cancellation: CancellationToken | None = None) -> list[Appointment]:
        CancellationToken.check(cancellation)
        result = await self.session.execute(select(AppointmentModel).order_by(AppointmentModel.start_date))
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_paged(
        self,
        page: int,
        page_size: int,
        cancellation: CancellationToken | None = None,
    ) -> list[Appointment]:
        """Get one page ordered by start date; ``page`` is 1-based."""
        CancellationToken.check(cancellation)
        query = (
            select(AppointmentModel)
            .order_by(AppointmentModel.start_date)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_by_doctor(
        self,
        doctor_name: str,
        cancellation: CancellationToken | None = None,
    ) -> list[Appointment]:
        CancellationToken.check(cancellation)
        query = (
            select(AppointmentModel)
            .where(AppointmentModel.doctor_name.contains(doctor_name, autoescape=True))
            .order_by(AppointmentModel.start_date)
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_by_patient(
        self,
        patient_name: str,
        cancellation: CancellationToken | None = None,
    ) -> list[Appointment]:
        CancellationToken.check(cancellation)
        query = (
            select(AppointmentModel)
            .where(AppointmentModel.patient_name.contains(patient_name, autoescape=True))
            .order_by(AppointmentModel.start_date)
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_by_date_range(
        self,
        start: datetime,
        end: datetime,
        cancellation: CancellationToken | None = None,
    ) -> list[Appointment]:
        """Appointments fully contained in [start, end]."""
        CancellationToken.check(cancellation)
        query = (
            select(AppointmentModel)
            .where(AppointmentModel.start_date >= start, AppointmentModel.end_date <= end)
            .order_by(AppointmentModel.start_date)
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def add(self, appointment: Appointment, cancellation: CancellationToken | None = None) -> None:
        CancellationToken.check(cancellation)
        self.session.add(self._to_model(appointment))

    async def update(self, appointment: Appointment, cancellation: CancellationToken | None = None) -> None:
        CancellationToken.check(cancellation)
        model = await self.session.get(AppointmentModel, appointment.appointment_id.to_uuid())
        if model is None:
            raise EntityNotFoundException(
                entity_type="Appointment",
                entity_id=appointment.appointment_id,
                message="Appointment not found",
            )
        self._apply_to_model(appointment, model)

    async def remove(self, appointment: Appointment, cancellation: CancellationToken | None = None) -> None:
        CancellationToken.check(cancellation)
        model = await self.session.get(AppointmentModel, appointment.appointment_id.to_uuid())
        if model is None:
            logger.warning(f"Remove skipped, appointment not stored: {appointment.appointment_id}")
            return
        await self.session.delete(model)

    # Mapping

    def _to_entity(self, model: AppointmentModel) -> Appointment:
        """Convert model to entity."""
        return Appointment.reconstruct(
            id=AppointmentId.from_uuid(model.id),
            title=model.title,
            description=model.description,
            date_range=DateRange(start=model.start_date, end=model.end_date),
            patient_name=model.patient_name,
            patient_email=model.patient_email,
            patient_phone=model.patient_phone,
            doctor_name=model.doctor_name,
            status=AppointmentStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Appointment) -> AppointmentModel:
        """Convert entity to model."""
        model = AppointmentModel(id=entity.appointment_id.to_uuid(), created_at=entity.created_at)
        self._apply_to_model(entity, model)
        return model

    @staticmethod
    def _apply_to_model(entity: Appointment, model: AppointmentModel) -> None:
        model.title = entity.title
        model.description = entity.description
        model.start_date = entity.date_range.start
        model.end_date = entity.date_range.end
        model.patient_name = entity.patient_name
        model.patient_email = entity.patient_email
        model.patient_phone = entity.patient_phone
        model.doctor_name = entity.doctor_name
        model.status = entity.status
        model.updated_at = entity.updated_at
