"""Finance arithmetic engine for savings growth and dream goals"""

from .future_value import compute_future_value
from .goal_payment import compute_required_payment, total_deposited
from .periods import clamp_term, periods_per_year
from .schedule import contribution_table, yearly_series

__all__ = [
    "clamp_term",
    "compute_future_value",
    "compute_required_payment",
    "contribution_table",
    "periods_per_year",
    "total_deposited",
    "yearly_series",
]
