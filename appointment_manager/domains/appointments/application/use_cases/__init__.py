"""
Appointments Use Cases

One use case per command or query. Every ``execute`` returns a Result.
"""

from appointment_manager.domains.appointments.application.use_cases.cancel_appointment import (
    CancelAppointmentCommand,
    CancelAppointmentUseCase,
)
from appointment_manager.domains.appointments.application.use_cases.complete_appointment import (
    CompleteAppointmentCommand,
    CompleteAppointmentUseCase,
)
from appointment_manager.domains.appointments.application.use_cases.confirm_appointment import (
    ConfirmAppointmentCommand,
    ConfirmAppointmentUseCase,
)
from appointment_manager.domains.appointments.application.use_cases.create_appointment import (
    CreateAppointmentCommand,
    CreateAppointmentUseCase,
)
from appointment_manager.domains.appointments.application.use_cases.get_appointment_by_id import (
    GetAppointmentByIdQuery,
    GetAppointmentByIdUseCase,
)
from appointment_manager.domains.appointments.application.use_cases.list_appointments import (
    ListAppointmentsQuery,
    ListAppointmentsUseCase,
)
from appointment_manager.domains.appointments.application.use_cases.mark_no_show import (
    MarkNoShowCommand,
    MarkNoShowUseCase,
)
from appointment_manager.domains.appointments.application.use_cases.start_appointment import (
    StartAppointmentCommand,
    StartAppointmentUseCase,
)
from appointment_manager.domains.appointments.application.use_cases.update_appointment import (
    UpdateAppointmentCommand,
    UpdateAppointmentUseCase,
)

__all__ = [
    # Commands
    "CreateAppointmentCommand",
    "CreateAppointmentUseCase",
    "UpdateAppointmentCommand",
    "UpdateAppointmentUseCase",
    "ConfirmAppointmentCommand",
    "ConfirmAppointmentUseCase",
    "StartAppointmentCommand",
    "StartAppointmentUseCase",
    "CompleteAppointmentCommand",
    "CompleteAppointmentUseCase",
    "CancelAppointmentCommand",
    "CancelAppointmentUseCase",
    "MarkNoShowCommand",
    "MarkNoShowUseCase",
    # Queries
    "GetAppointmentByIdQuery",
    "GetAppointmentByIdUseCase",
    "ListAppointmentsQuery",
    "ListAppointmentsUseCase",
]
