"""
Appointment model
"""
from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class Appointment(Base):
    """
    Hourly appointment slot for a customer.

    date_time is naive local business time, always on the hour.
    state True = active, False = cancelled/attended.
    """
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True)
    date_time = Column(DateTime, nullable=False, index=True)
    state = Column(Boolean, nullable=False, default=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False)

    customer = relationship("Customer", back_populates="appointments")
