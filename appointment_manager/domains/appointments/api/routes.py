"""
Appointments API Routes

FastAPI router for appointment endpoints.
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from appointment_manager.config.settings import Settings, get_settings
from appointment_manager.core.application import Result
from appointment_manager.core.shared.cancellation import CancellationToken
from appointment_manager.domains.appointments.api.dependencies import (
    get_appointment_by_id_use_case,
    get_cancel_appointment_use_case,
    get_cancellation_token,
    get_complete_appointment_use_case,
    get_confirm_appointment_use_case,
    get_create_appointment_use_case,
    get_list_appointments_use_case,
    get_mark_no_show_use_case,
    get_start_appointment_use_case,
    get_update_appointment_use_case,
)
from appointment_manager.domains.appointments.api.schemas import (
    AppointmentCreatedResponse,
    AppointmentPageResponse,
    AppointmentResponse,
    CreateAppointmentRequest,
    UpdateAppointmentRequest,
)
from appointment_manager.domains.appointments.application.use_cases import (
    CancelAppointmentCommand,
    CancelAppointmentUseCase,
    CompleteAppointmentCommand,
    CompleteAppointmentUseCase,
    ConfirmAppointmentCommand,
    ConfirmAppointmentUseCase,
    CreateAppointmentCommand,
    CreateAppointmentUseCase,
    GetAppointmentByIdQuery,
    GetAppointmentByIdUseCase,
    ListAppointmentsQuery,
    ListAppointmentsUseCase,
    MarkNoShowCommand,
    MarkNoShowUseCase,
    StartAppointmentCommand,
    StartAppointmentUseCase,
    UpdateAppointmentCommand,
    UpdateAppointmentUseCase,
)
from appointment_manager.domains.appointments.application.use_cases.base import NOT_FOUND_CODE
from appointment_manager.domains.appointments.domain.value_objects import AppointmentId, AppointmentStatus

router = APIRouter(prefix="/appointments", tags=["Appointments"])

# Type aliases for use case dependencies
CreateUseCaseDep = Annotated[CreateAppointmentUseCase, Depends(get_create_appointment_use_case)]
UpdateUseCaseDep = Annotated[UpdateAppointmentUseCase, Depends(get_update_appointment_use_case)]
ConfirmUseCaseDep = Annotated[ConfirmAppointmentUseCase, Depends(get_confirm_appointment_use_case)]
StartUseCaseDep = Annotated[StartAppointmentUseCase, Depends(get_start_appointment_use_case)]
CompleteUseCaseDep = Annotated[CompleteAppointmentUseCase, Depends(get_complete_appointment_use_case)]
CancelUseCaseDep = Annotated[CancelAppointmentUseCase, Depends(get_cancel_appointment_use_case)]
MarkNoShowUseCaseDep = Annotated[MarkNoShowUseCase, Depends(get_mark_no_show_use_case)]
GetByIdUseCaseDep = Annotated[GetAppointmentByIdUseCase, Depends(get_appointment_by_id_use_case)]
ListUseCaseDep = Annotated[ListAppointmentsUseCase, Depends(get_list_appointments_use_case)]
CancellationDep = Annotated[CancellationToken, Depends(get_cancellation_token)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def _raise_for_failure(result: Result) -> None:
    """Not-found failures become 404, every other failure 400."""
    if result.is_success:
        return
    if result.error_code == NOT_FOUND_CODE:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)


@router.get("/", response_model=AppointmentPageResponse)
async def list_appointments(
    use_case: ListUseCaseDep,
    settings: SettingsDep,
    cancellation: CancellationDep,
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int | None, Query(ge=1)] = None,
    doctor_name: str | None = None,
    patient_name: str | None = None,
    status_filter: Annotated[AppointmentStatus | None, Query(alias="status")] = None,
    start_date: datetime | None = None,
    end_date: datetime | None = None,
):
    """List one page of appointments, optionally filtered."""
    size = page_size or settings.DEFAULT_PAGE_SIZE
    if size > settings.MAX_PAGE_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"page_size cannot exceed {settings.MAX_PAGE_SIZE}",
        )

    result = await use_case.execute(
        ListAppointmentsQuery(
            page=page,
            page_size=size,
            doctor_name=doctor_name,
            patient_name=patient_name,
            status=status_filter,
            start_date=start_date,
            end_date=end_date,
        ),
        cancellation,
    )

    if result.is_failure or result.value is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)

    return AppointmentPageResponse.from_paged_list(result.value)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: UUID,
    use_case: GetByIdUseCaseDep,
    cancellation: CancellationDep,
):
    """Get a single appointment."""
    result = await use_case.execute(
        GetAppointmentByIdQuery(appointment_id=AppointmentId.from_uuid(appointment_id)),
        cancellation,
    )

    if result.is_failure or result.value is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)

    return AppointmentResponse.from_dto(result.value)


@router.post("/", response_model=AppointmentCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    body: CreateAppointmentRequest,
    request: Request,
    response: Response,
    use_case: CreateUseCaseDep,
    cancellation: CancellationDep,
):
    """Schedule a new appointment."""
    result = await use_case.execute(
        CreateAppointmentCommand(
            title=body.title,
            description=body.description,
            start_date=body.start_date,
            end_date=body.end_date,
            patient_name=body.patient_name,
            patient_email=body.patient_email,
            patient_phone=body.patient_phone,
            doctor_name=body.doctor_name,
        ),
        cancellation,
    )

    if result.is_failure or result.value is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)

    response.headers["Location"] = str(request.url_for("get_appointment", appointment_id=str(result.value)))
    return AppointmentCreatedResponse(id=result.value)


@router.put("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_appointment(
    appointment_id: UUID,
    body: UpdateAppointmentRequest,
    use_case: UpdateUseCaseDep,
    cancellation: CancellationDep,
) -> Response:
    """Replace the title, description and time slot of an appointment."""
    result = await use_case.execute(
        UpdateAppointmentCommand(
            appointment_id=AppointmentId.from_uuid(appointment_id),
            title=body.title,
            description=body.description,
            start_date=body.start_date,
            end_date=body.end_date,
        ),
        cancellation,
    )
    _raise_for_failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Status transitions


@router.post("/{appointment_id}/confirm", status_code=status.HTTP_204_NO_CONTENT)
async def confirm_appointment(
    appointment_id: UUID, use_case: ConfirmUseCaseDep, cancellation: CancellationDep
) -> Response:
    result = await use_case.execute(
        ConfirmAppointmentCommand(appointment_id=AppointmentId.from_uuid(appointment_id)), cancellation
    )
    _raise_for_failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{appointment_id}/start", status_code=status.HTTP_204_NO_CONTENT)
async def start_appointment(
    appointment_id: UUID, use_case: StartUseCaseDep, cancellation: CancellationDep
) -> Response:
    result = await use_case.execute(
        StartAppointmentCommand(appointment_id=AppointmentId.from_uuid(appointment_id)), cancellation
    )
    _raise_for_failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{appointment_id}/complete", status_code=status.HTTP_204_NO_CONTENT)
async def complete_appointment(
    appointment_id: UUID, use_case: CompleteUseCaseDep, cancellation: CancellationDep
) -> Response:
    result = await use_case.execute(
        CompleteAppointmentCommand(appointment_id=AppointmentId.from_uuid(appointment_id)), cancellation
    )
    _raise_for_failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{appointment_id}/cancel", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_appointment(
    appointment_id: UUID, use_case: CancelUseCaseDep, cancellation: CancellationDep
) -> Response:
    result = await use_case.execute(
        CancelAppointmentCommand(appointment_id=AppointmentId.from_uuid(appointment_id)), cancellation
    )
    _raise_for_failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{appointment_id}/mark-no-show", status_code=status.HTTP_204_NO_CONTENT)
async def mark_no_show(
    appointment_id: UUID, use_case: MarkNoShowUseCaseDep, cancellation: CancellationDep
) -> Response:
    result = await use_case.execute(
        MarkNoShowCommand(appointment_id=AppointmentId.from_uuid(appointment_id)), cancellation
    )
    _raise_for_failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
