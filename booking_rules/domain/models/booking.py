from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional
from datetime import datetime
from booking_rules.domain.models.passport import Passenger


class ContactDetails(BaseModel):
    """Lead customer contact captured on the booking form."""
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


class CruiseBooking(BaseModel):
    id: str
    type: Literal['cruise'] = 'cruise'
    item_id: str
    item_name: str = ""
    agent_id: str = ""
    passengers: List[Passenger] = Field(default_factory=list)
    total_amount: float = 0.0
    payment_status: Literal['pending', 'paid', 'failed', 'refunded'] = 'pending'
    status: Literal['confirmed', 'pending', 'cancelled', 'completed'] = 'pending'
    booking_date: datetime
    travel_date: str = ""
    cabin_category: str = ""
    cabin_number: Optional[str] = None
    duration: int = Field(..., description="Cruise duration in nights")
    hold_period: int = Field(0, description="Days the booking is held unpaid")
    hold_expiry: Optional[datetime] = None

    @field_validator('duration')
    @classmethod
    def validate_duration(cls, v):
        if v <= 0:
            raise ValueError('Cruise duration must be a positive number of nights')
        return v
