import logging
from typing import List, Optional
from booking_rules.domain.logic.contact_checker import check_contact_details
from booking_rules.domain.logic.document_recompute import recompute_document
from booking_rules.domain.logic.hold_period import (
    calculate_hold_period,
    calculate_hold_expiry,
    format_hold_period,
    get_remaining_hold_time,
)
from booking_rules.domain.models.booking import CruiseBooking
from booking_rules.domain.models.passport import Passenger
from booking_rules.schemas.request import BookingCheckRequest
from booking_rules.schemas.response import BookingCheckResponse
from booking_rules.utils.clock import Clock, read_clock

logger = logging.getLogger(__name__)


class BookingValidationOrchestrator:
    """Runs every check that gates confirming a cruise booking."""

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock

    def _now(self):
        return read_clock(self.clock)

    def find_ineligible_passengers(self, passengers: List[Passenger]) -> List[Passenger]:
        return [p for p in passengers if not p.document.is_eligible]

    def refresh_passengers(
        self,
        passengers: List[Passenger],
        travel_date: Optional[str] = None
    ) -> List[Passenger]:
        """Recompute each passenger's document against the travel date; stored verdicts may be stale."""
        now = self._now()
        return [
            p.model_copy(update={
                'document': recompute_document(p.document, travel_date, clock=lambda: now)
            })
            for p in passengers
        ]

    def validate_booking(self, request: BookingCheckRequest) -> BookingCheckResponse:
        """
        Complete pre-confirmation workflow.

        Args:
            request: Contact details, passengers, cruise duration and dates from the booking form

        Returns:
            BookingCheckResponse; `valid` is True only when every check passed
        """
        checks = {}
        errors = []

        # Step 1: Contact details
        logger.info("Starting contact details validation...")
        ok, contact_msg = check_contact_details(request.contact)
        checks['contact_details'] = contact_msg
        if not ok:
            errors.append(contact_msg)

        # Step 2: Passenger documents
        logger.info("Validating documents for %d passenger(s)...", len(request.passengers))
        passengers = self.refresh_passengers(request.passengers, request.travel_date)
        ineligible = self.find_ineligible_passengers(passengers)
        if not passengers:
            passenger_msg = "At least one passenger is required."
            errors.append(passenger_msg)
        elif ineligible:
            passenger_msg = (
                f"{len(ineligible)} passenger(s) have invalid or expired passports. "
                "Please update documents."
            )
            errors.append(passenger_msg)
            logger.warning(
                "Booking blocked by ineligible passengers: %s",
                [p.id for p in ineligible]
            )
        else:
            passenger_msg = "All passenger documents eligible"
        checks['passenger_documents'] = passenger_msg

        # Step 3: Hold window
        hold_days = calculate_hold_period(request.cruise_duration)
        hold_expiry = calculate_hold_expiry(request.booking_date, request.cruise_duration)
        checks['hold_period'] = f"Held for {format_hold_period(request.cruise_duration)}"
        logger.debug("Hold period %s day(s), expires %s", hold_days, hold_expiry.isoformat())

        result = BookingCheckResponse(
            valid=not errors,
            data={
                'hold_days': hold_days,
                'hold_expiry': hold_expiry.isoformat(),
                'hold_period': format_hold_period(request.cruise_duration),
                'remaining_hold_hours': get_remaining_hold_time(hold_expiry, clock=self.clock),
                'ineligible_passenger_ids': [p.id for p in ineligible],
                'passengers': [p.model_dump(mode='json') for p in passengers],
            },
            checks=checks,
            errors=errors
        )
        logger.info("Booking validation finished: valid=%s", result.valid)
        return result

    def place_hold(self, booking: CruiseBooking) -> CruiseBooking:
        """Copy of `booking` with its hold period and expiry filled from the policy table."""
        return booking.model_copy(update={
            'hold_period': calculate_hold_period(booking.duration),
            'hold_expiry': calculate_hold_expiry(booking.booking_date, booking.duration),
        })
