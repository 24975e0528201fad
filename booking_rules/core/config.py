import os
import math
from dotenv import load_dotenv
from typing import Dict, Any, Tuple
from booking_rules.domain.models.hold_period import HoldPeriodRule

load_dotenv()

# Ascending thresholds, terminated by an unbounded catch-all.
HOLD_PERIOD_RULES: Tuple[HoldPeriodRule, ...] = (
    HoldPeriodRule(duration_threshold_nights=7, hold_days=1),
    HoldPeriodRule(duration_threshold_nights=15, hold_days=2),
    HoldPeriodRule(duration_threshold_nights=math.inf, hold_days=3),
)

class Settings:
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    hold_period_rules: Tuple[HoldPeriodRule, ...] = HOLD_PERIOD_RULES
    passport_config: Dict[str, Any] = {
        'min_validity_months': 6,
        'days_per_month': 30,
        'number_pattern': r'^[A-Z0-9]{6,9}$',
        'min_passenger_age_years': 1
    }
    validity_status_config: Dict[str, Any] = {
        'valid_months': 12,
        'expiring_months': 6
    }
    contact_config: Dict[str, Any] = {
        'email_pattern': r'^[^\s@]+@[^\s@]+\.[^\s@]+$',
        'phone_digits': 10
    }
settings = Settings()
