# database/queries.py
"""SQL statements for the LightBnB data-access layer."""

import logging
from dataclasses import dataclass, field
from decimal import ROUND_CEILING, ROUND_FLOOR
from typing import Any, List, Optional

from config import settings
from database.models import SearchOptions
from utils.helpers import to_minor_units

logger = logging.getLogger(__name__)

class InvalidLimitError(ValueError):
    """Raised when a result limit is not a positive integer."""

GET_USER_WITH_EMAIL = "SELECT * FROM users WHERE email = $1"

GET_USER_WITH_ID = "SELECT * FROM users WHERE id = $1"

ADD_USER = """
INSERT INTO users (name, email, password)
VALUES ($1, $2, $3)
RETURNING *
"""

# GROUP BY ALL groups on every selected properties/reservations column,
# which is the same as grouping by property id and reservation id.
GET_ALL_RESERVATIONS = """
SELECT
    reservations.id,
    properties.title,
    properties.thumbnail_photo_url,
    properties.cover_photo_url,
    properties.number_of_bedrooms,
    properties.number_of_bathrooms,
    properties.parking_spaces,
    properties.cost_per_night,
    reservations.start_date,
    AVG(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = $1
GROUP BY ALL
ORDER BY reservations.start_date
LIMIT $2
"""

ADD_PROPERTY = """
INSERT INTO properties (
    owner_id, title, description, thumbnail_photo_url, cover_photo_url,
    cost_per_night, street, city, province, post_code, country,
    parking_spaces, number_of_bathrooms, number_of_bedrooms
)
VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14)
RETURNING *
"""

PROPERTY_SEARCH_BASE = """
SELECT properties.*, AVG(property_reviews.rating) AS average_rating
FROM properties
JOIN property_reviews ON properties.id = property_reviews.property_id
"""

@dataclass
class QueryPlan:
    """A parameterized statement and its positional bind values."""
    conditions: List[str] = field(default_factory=list)
    params: List[Any] = field(default_factory=list)
    query: str = ""

    def bind(self, value: Any) -> str:
        """Append a bind value and return the placeholder that refers to it."""
        self.params.append(value)
        return f"${len(self.params)}"

def resolve_limit(limit: Optional[int]) -> int:
    if limit is None:
        return settings.default_result_limit
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidLimitError(f"limit must be a positive integer, got {limit!r}")
    return limit

def build_property_search_query(
    options: Optional[SearchOptions] = None,
    limit: Optional[int] = None
) -> QueryPlan:
    """Build the property search statement.

    Filters are added in a fixed order (city, owner, minimum price, maximum
    price). Each one pushes its value before emitting the fragment, so the
    placeholder number is always the current parameter count. Sub-cent
    price bounds round inward (minimum up, maximum down). The minimum
    rating filters on an aggregate and goes in HAVING, after the grouping.
    The limit is always the last parameter.
    """
    if options is None:
        options = SearchOptions()
    limit = resolve_limit(limit)

    plan = QueryPlan()

    if options.city:
        placeholder = plan.bind(f"%{options.city}%")
        plan.conditions.append(f"LOWER(city) LIKE LOWER({placeholder})")

    if options.owner_id is not None:
        placeholder = plan.bind(options.owner_id)
        plan.conditions.append(f"owner_id = {placeholder}")

    if options.minimum_price_per_night is not None:
        placeholder = plan.bind(to_minor_units(options.minimum_price_per_night, ROUND_CEILING))
        plan.conditions.append(f"cost_per_night >= {placeholder}")

    if options.maximum_price_per_night is not None:
        placeholder = plan.bind(to_minor_units(options.maximum_price_per_night, ROUND_FLOOR))
        plan.conditions.append(f"cost_per_night <= {placeholder}")

    query = PROPERTY_SEARCH_BASE
    if plan.conditions:
        query += f"WHERE {' AND '.join(plan.conditions)}\n"

    query += "GROUP BY ALL\n"

    if options.minimum_rating is not None:
        query += f"HAVING AVG(property_reviews.rating) >= {plan.bind(options.minimum_rating)}\n"

    query += f"ORDER BY cost_per_night\nLIMIT {plan.bind(limit)};"

    plan.query = query
    logger.debug(f"Property search: {' '.join(query.split())} {plan.params}")
    return plan
