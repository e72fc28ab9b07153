"""
Appointments API routes
"""
from datetime import date, datetime
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from app.dependencies import AuditContext, require_permission
from app.permission_config import (
    PERMISSION_CREATE_APPOINTMENT,
    PERMISSION_DELETE_APPOINTMENT,
    PERMISSION_GET_ALL_APPOINTMENTS,
    PERMISSION_GET_APPOINTMENT_BY_CUSTOMER_ID,
    PERMISSION_GET_APPOINTMENT_BY_ID,
    PERMISSION_GET_APPOINTMENTS_BY_CUSTOMERID_AND_DATE,
    PERMISSION_GET_APPOINTMENTS_BY_HOUR,
    PERMISSION_SEARCH_APPOINTMENT_BY_STATE,
    PERMISSION_SEARCH_APPOINTMENTS_BY_ID,
    PERMISSION_SEARCH_APPOINTMENTS_BY_NAME,
    PERMISSION_UPDATE_APPOINTMENT,
)
from app.schemas.appointment import (
    AppointmentCreate,
    AppointmentResponse,
    AppointmentUpdate,
    HourlyCountsResponse,
)
from app.services.appointment_service import AppointmentService

router = APIRouter()


@router.get("/", response_model=List[AppointmentResponse])
def get_all_appointments(
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_ALL_APPOINTMENTS, "GetAllAppointments")),
):
    appointments = AppointmentService.get_all(audit.db)
    audit.log("Appointments retrieved")
    return appointments


@router.get("/search-by-id", response_model=List[AppointmentResponse])
def search_appointments_by_id(
    query: str = Query("", alias="id"),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_APPOINTMENTS_BY_ID, "SearchAppointmentsByID")),
):
    appointments = AppointmentService.search_by_id(audit.db, query)
    audit.log(f"Appointments searched by id '{query}'")
    return appointments


@router.get("/search-by-state", response_model=List[AppointmentResponse])
def search_appointments_by_state(
    state: bool = Query(...),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_APPOINTMENT_BY_STATE, "SearchAppointmentByState")),
):
    appointments = AppointmentService.search_by_state(audit.db, state)
    audit.log(f"Appointments searched by state {state}")
    return appointments


@router.get("/search-by-name", response_model=List[AppointmentResponse])
def search_appointments_by_name(
    name: str = Query(""),
    audit: AuditContext = Depends(require_permission(PERMISSION_SEARCH_APPOINTMENTS_BY_NAME, "SearchAppointmentsByName")),
):
    """Matches the customer's name or lastname."""
    appointments = AppointmentService.search_by_customer_name(audit.db, name)
    audit.log(f"Appointments searched by customer name '{name}'")
    return appointments


@router.get("/hours", response_model=HourlyCountsResponse)
def get_appointment_counts_by_hour(
    day: date = Query(..., alias="date"),
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_APPOINTMENTS_BY_HOUR, "GetAppointmentsByHour")),
):
    """Bookings per hourly slot on a date."""
    counts = AppointmentService.counts_by_hour(audit.db, day)
    audit.log(f"Appointment counts for {day} retrieved")
    return counts


@router.get("/customer/{customer_id}/date", response_model=List[AppointmentResponse])
def get_appointments_by_customer_and_date(
    customer_id: int,
    date_time: datetime = Query(...),
    audit: AuditContext = Depends(
        require_permission(PERMISSION_GET_APPOINTMENTS_BY_CUSTOMERID_AND_DATE, "GetAppointmentsByCustomerIDAndDate")
    ),
):
    appointments = AppointmentService.get_by_customer_and_date(audit.db, customer_id, date_time)
    if not appointments:
        raise audit.fail(404, "No appointments found")
    audit.log(f"Appointments of customer {customer_id} at {date_time} retrieved")
    return appointments


@router.get("/customer/{customer_id}", response_model=List[AppointmentResponse])
def get_appointments_by_customer(
    customer_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_APPOINTMENT_BY_CUSTOMER_ID, "GetAppointmentByCustomerID")),
):
    appointments = AppointmentService.get_by_customer(audit.db, customer_id)
    audit.log(f"Appointments of customer {customer_id} retrieved")
    return appointments


@router.post("/", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
def create_appointment(
    body: AppointmentCreate,
    audit: AuditContext = Depends(require_permission(PERMISSION_CREATE_APPOINTMENT, "CreateAppointment")),
):
    try:
        appointment = AppointmentService.create(audit.db, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Appointment {appointment.id} created")
    return appointment


@router.put("/{appointment_id}", response_model=AppointmentResponse)
def update_appointment(
    appointment_id: int,
    body: AppointmentUpdate,
    audit: AuditContext = Depends(require_permission(PERMISSION_UPDATE_APPOINTMENT, "UpdateAppointment")),
):
    try:
        appointment = AppointmentService.update(audit.db, appointment_id, body)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Appointment {appointment_id} updated")
    return appointment


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_appointment(
    appointment_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_DELETE_APPOINTMENT, "DeleteAppointment")),
):
    try:
        AppointmentService.delete(audit.db, appointment_id)
    except ValueError as e:
        raise audit.service_error(e)
    audit.log(f"Appointment {appointment_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
def get_appointment(
    appointment_id: int,
    audit: AuditContext = Depends(require_permission(PERMISSION_GET_APPOINTMENT_BY_ID, "GetAppointmentByID")),
):
    appointment = AppointmentService.get_by_id(audit.db, appointment_id)
    if not appointment:
        raise audit.fail(404, "Appointment not found")
    audit.log(f"Appointment {appointment_id} retrieved")
    return appointment
