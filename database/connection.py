# database/connection.py
import duckdb
from typing import Dict, List, Any, Optional
import time
import logging
from config import settings
from utils.helpers import log_query_performance

logger = logging.getLogger(__name__)

class DatabaseConnection:
    """Query facade over a single duckdb connection.

    Either pass ``database_url`` (a duckdb path or ``:memory:``) and let
    ``connect()`` open it, or hand in an already open ``connection``.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        connection: Optional[duckdb.DuckDBPyConnection] = None
    ):
        self.database_url = database_url or settings.database_url
        self.connection = connection
        self._initialized = connection is not None

    async def connect(self):
        """Open the duckdb database"""
        if self._initialized and self.connection:
            return

        try:
            logger.info(f"Connecting to {self.database_url}...")

            start_time = time.time()
            self.connection = duckdb.connect(self.database_url)
            connection_time = time.time() - start_time

            self._initialized = True
            logger.info(f"Database connected in {connection_time:.2f}s")

        except duckdb.Error as e:
            logger.error(f"Connection error: {e}")
            self.connection = None
            self._initialized = False
            raise

    async def execute_query(
        self,
        query: str,
        params: List[Any] = None
    ) -> Dict[str, Any]:
        """Execute a query with positional ($1, $2, ...) parameters"""
        if params is None:
            params = []

        try:
            if not self._initialized:
                await self.connect()

            start_time = time.time()
            if params:
                result = self.connection.execute(query, params)
            else:
                result = self.connection.execute(query)

            rows = result.fetchall()
            columns = [desc[0] for desc in result.description] if result.description else []

            formatted_rows = [dict(zip(columns, row)) for row in rows]
            log_query_performance(query, time.time() - start_time, len(formatted_rows))

            return {
                "rows": formatted_rows,
                "columns": columns,
                "row_count": len(formatted_rows)
            }

        except duckdb.Error as e:
            logger.error(f"Query error: {e}")
            # Reset connection on connection errors
            if isinstance(e, duckdb.ConnectionException) or "connection" in str(e).lower():
                self._initialized = False
                self.connection = None
            raise

    async def close(self):
        """Close database connection"""
        if self.connection:
            self.connection.close()
            self.connection = None
            self._initialized = False
