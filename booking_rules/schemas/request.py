from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from booking_rules.domain.models.booking import ContactDetails
from booking_rules.domain.models.passport import Passenger


class BookingCheckRequest(BaseModel):
    """Everything the cruise booking form submits for a "Book Now" check."""
    cruise_duration: int = Field(..., description="Cruise duration in nights")
    booking_date: datetime
    travel_date: Optional[str] = Field(None, description="Departure date (YYYY-MM-DD)")
    contact: ContactDetails = Field(default_factory=ContactDetails)
    passengers: List[Passenger] = Field(default_factory=list)

    @field_validator('cruise_duration')
    @classmethod
    def validate_duration(cls, v):
        if v <= 0:
            raise ValueError('Cruise duration must be a positive number of nights')
        return v
