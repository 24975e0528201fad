from typing import NamedTuple, Union


class HoldPeriodRule(NamedTuple):
    """One row of the hold policy: cruises up to `duration_threshold_nights` are held `hold_days`."""
    duration_threshold_nights: Union[int, float]
    hold_days: int
