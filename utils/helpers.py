# utils/helpers.py
"""Utility functions for LightBnB API."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

def to_minor_units(amount: Union[int, float, Decimal], rounding: str = ROUND_HALF_UP) -> int:
    """Convert a major currency amount (dollars) to integer minor units (cents).

    Sub-cent amounts are rounded with ``rounding`` (a ``decimal`` rounding mode).
    """
    return int((Decimal(str(amount)) * 100).to_integral_value(rounding=rounding))

def log_query_performance(query: str, execution_time: float, row_count: int):
    """Log query performance metrics."""
    query = " ".join(query.split())
    logger.info(
        f"Query executed in {execution_time:.3f}s, returned {row_count} rows. "
        f"Query: {query[:100]}{'...' if len(query) > 100 else ''}"
    )
