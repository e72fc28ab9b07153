"""
Appointment service: hourly slots between APPOINTMENT_FIRST_HOUR and
APPOINTMENT_LAST_HOUR, at most APPOINTMENT_SLOT_CAPACITY bookings per slot.
"""
import logging
from datetime import date, datetime, timedelta
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.config import settings
from app.models import Appointment, Customer
from app.schemas.appointment import AppointmentBase
from app.services.errors import ConflictError, NotFoundError
from app.services.query_helpers import contains_ci, id_prefix

logger = logging.getLogger(__name__)


def _naive(value: datetime) -> datetime:
    # Slots are local business time; an offset, if sent, is dropped.
    return value.replace(tzinfo=None) if value.tzinfo else value


class AppointmentService:

    @staticmethod
    def get_by_id(db: Session, appointment_id: int) -> Optional[Appointment]:
        return db.query(Appointment).filter(Appointment.id == appointment_id).first()

    @staticmethod
    def get_all(db: Session) -> List[Appointment]:
        return db.query(Appointment).order_by(Appointment.date_time, Appointment.id).all()

    @staticmethod
    def search_by_id(db: Session, query: str) -> List[Appointment]:
        return db.query(Appointment).filter(id_prefix(Appointment.id, query)).order_by(Appointment.id).all()

    @staticmethod
    def search_by_state(db: Session, state: bool) -> List[Appointment]:
        return (
            db.query(Appointment)
            .filter(Appointment.state == state)
            .order_by(Appointment.date_time, Appointment.id)
            .all()
        )

    @staticmethod
    def search_by_customer_name(db: Session, query: str) -> List[Appointment]:
        return (
            db.query(Appointment)
            .join(Customer, Appointment.customer_id == Customer.id)
            .filter(or_(contains_ci(Customer.customer_name, query), contains_ci(Customer.lastname, query)))
            .order_by(Appointment.date_time, Appointment.id)
            .all()
        )

    @staticmethod
    def get_by_customer(db: Session, customer_id: int) -> List[Appointment]:
        return (
            db.query(Appointment)
            .filter(Appointment.customer_id == customer_id)
            .order_by(Appointment.date_time, Appointment.id)
            .all()
        )

    @staticmethod
    def get_by_customer_and_date(db: Session, customer_id: int, date_time: datetime) -> List[Appointment]:
        return (
            db.query(Appointment)
            .filter(Appointment.customer_id == customer_id, Appointment.date_time == _naive(date_time))
            .order_by(Appointment.id)
            .all()
        )

    @staticmethod
    def _validate(db: Session, data: AppointmentBase, appointment_id: Optional[int] = None) -> datetime:
        slot = _naive(data.date_time)
        if slot.minute or slot.second or slot.microsecond:
            raise ValueError("Appointments must start exactly on the hour")
        if not settings.APPOINTMENT_FIRST_HOUR <= slot.hour <= settings.APPOINTMENT_LAST_HOUR:
            raise ValueError(
                f"Appointments must be between {settings.APPOINTMENT_FIRST_HOUR}:00 "
                f"and {settings.APPOINTMENT_LAST_HOUR}:00"
            )
        if not db.query(Customer.id).filter(Customer.id == data.customer_id).first():
            raise NotFoundError(f"Customer {data.customer_id} not found")

        in_slot = db.query(Appointment).filter(Appointment.date_time == slot)
        if appointment_id is not None:
            in_slot = in_slot.filter(Appointment.id != appointment_id)
        if in_slot.filter(Appointment.customer_id == data.customer_id).first():
            raise ConflictError("Customer already has an appointment at this time")
        if in_slot.count() >= settings.APPOINTMENT_SLOT_CAPACITY:
            raise ConflictError("Appointment slot full")
        return slot

    @staticmethod
    def create(db: Session, data: AppointmentBase) -> Appointment:
        slot = AppointmentService._validate(db, data)
        appointment = Appointment(date_time=slot, state=data.state, customer_id=data.customer_id)
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
        logger.info("Booked appointment %s for customer %s at %s", appointment.id, data.customer_id, slot)
        return appointment

    @staticmethod
    def update(db: Session, appointment_id: int, data: AppointmentBase) -> Appointment:
        appointment = AppointmentService.get_by_id(db, appointment_id)
        if not appointment:
            raise NotFoundError("Appointment not found")
        slot = AppointmentService._validate(db, data, appointment_id=appointment_id)
        appointment.date_time = slot
        appointment.state = data.state
        appointment.customer_id = data.customer_id
        db.commit()
        db.refresh(appointment)
        return appointment

    @staticmethod
    def delete(db: Session, appointment_id: int) -> None:
        appointment = AppointmentService.get_by_id(db, appointment_id)
        if not appointment:
            raise NotFoundError("Appointment not found")
        db.delete(appointment)
        db.commit()

    @staticmethod
    def counts_by_hour(db: Session, day: date) -> dict:
        first = settings.APPOINTMENT_FIRST_HOUR
        last = settings.APPOINTMENT_LAST_HOUR
        start = datetime.combine(day, datetime.min.time()) + timedelta(hours=first)
        end = datetime.combine(day, datetime.min.time()) + timedelta(hours=last + 1)
        counts = [0] * (last - first + 1)
        rows = (
            db.query(Appointment.date_time)
            .filter(Appointment.date_time >= start, Appointment.date_time < end)
            .all()
        )
        for (slot,) in rows:
            counts[slot.hour - first] += 1
        return {"date": day, "first_hour": first, "counts": counts}
