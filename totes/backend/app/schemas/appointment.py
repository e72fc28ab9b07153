"""
Appointment schemas
"""
from pydantic import BaseModel
from typing import List
import datetime as dt


class AppointmentBase(BaseModel):
    date_time: dt.datetime
    state: bool = True
    customer_id: int


class AppointmentCreate(AppointmentBase):
    pass


class AppointmentUpdate(AppointmentBase):
    pass


class AppointmentResponse(AppointmentBase):
    id: int

    class Config:
        from_attributes = True


class HourlyCountsResponse(BaseModel):
    """counts[i] = appointments booked at (first_hour + i):00 on date"""
    date: dt.date
    first_hour: int
    counts: List[int]
