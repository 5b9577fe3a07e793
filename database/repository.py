# database/repository.py
"""Data-access operations for users, properties and reservations."""

import duckdb
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from database.connection import DatabaseConnection
from database.models import PropertyCreate, SearchOptions, UserCreate
from database import queries
from utils.helpers import to_minor_units

logger = logging.getLogger(__name__)

@dataclass
class QueryOutcome:
    """Result of a repository call: rows on success, an error reason on failure.

    An empty ``rows`` list with no ``error`` means nothing matched.
    """
    rows: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None
    conflict: bool = False  # a UNIQUE or other constraint rejected the write

    @property
    def ok(self) -> bool:
        return self.error is None

    def first(self) -> Optional[Dict[str, Any]]:
        return self.rows[0] if self.rows else None

class LightBnbRepository:
    def __init__(self, db: DatabaseConnection):
        self.db = db

    async def _run(self, query: str, params: List[Any]) -> QueryOutcome:
        try:
            result = await self.db.execute_query(query, params)
        except duckdb.ConstraintException as e:
            logger.warning(f"Constraint violation: {e}")
            return QueryOutcome(error=str(e), conflict=True)
        except duckdb.Error as e:
            logger.error(f"Database operation failed: {e}")
            return QueryOutcome(error=str(e))
        return QueryOutcome(rows=result["rows"])

    # Users

    async def get_user_with_email(self, email: str) -> QueryOutcome:
        return await self._run(queries.GET_USER_WITH_EMAIL, [email])

    async def get_user_with_id(self, user_id: int) -> QueryOutcome:
        return await self._run(queries.GET_USER_WITH_ID, [user_id])

    async def add_user(self, user: UserCreate) -> QueryOutcome:
        return await self._run(queries.ADD_USER, [user.name, user.email, user.password])

    # Reservations

    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> QueryOutcome:
        """Reservations made by ``guest_id``, earliest start date first."""
        limit = queries.resolve_limit(limit)
        return await self._run(queries.GET_ALL_RESERVATIONS, [guest_id, limit])

    # Properties

    async def get_all_properties(
        self,
        options: Optional[SearchOptions] = None,
        limit: Optional[int] = None
    ) -> QueryOutcome:
        plan = queries.build_property_search_query(options, limit)
        return await self._run(plan.query, plan.params)

    async def add_property(self, new_property: PropertyCreate) -> QueryOutcome:
        """Insert a property. ``cost_per_night`` is given in dollars and stored in cents."""
        return await self._run(queries.ADD_PROPERTY, [
            new_property.owner_id,
            new_property.title,
            new_property.description,
            new_property.thumbnail_photo_url,
            new_property.cover_photo_url,
            to_minor_units(new_property.cost_per_night),
            new_property.street,
            new_property.city,
            new_property.province,
            new_property.post_code,
            new_property.country,
            new_property.parking_spaces,
            new_property.number_of_bathrooms,
            new_property.number_of_bedrooms,
        ])
