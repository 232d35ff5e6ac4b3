import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models.vehicle import COLUMN_NAMES, ElectricVehicle
from services.errors import StoreError

logger = logging.getLogger(__name__)

TABLE = ElectricVehicle.__tablename__

_SELECT_COLUMNS = (
    'rowid AS rowid, "Make", "Model", "Year", "Region", "Vehicle_Type", "Range", '
    '"Battery_Capacity", "Energy_Consumption", "C02_Saved"'
)

# Row order used by the per-dimension tables.
_ORDER_BY = {
    "Vehicle_Type": '"Year" DESC, "Make", "Model"',
    "Region": '"Year" DESC, "Make", "Model"',
    "Year": '"Make", "Model"',
}


def _checked_column(column: str) -> str:
    if column not in COLUMN_NAMES or column == "rowid":
        raise ValueError(f"Unknown column: {column!r}")
    return column


class VehicleStore:
    """
    Read-only access to the electric_vehicles table.

    Every value reaches the driver as a bound parameter; only column names
    from the ElectricVehicle model are ever placed into SQL text.
    """

    def __init__(self, db: Session):
        self.db = db

    def query(self, sql: str, params: dict[str, Any] | None = None) -> list[dict]:
        try:
            result = self.db.execute(text(sql), params or {})
            return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as exc:
            raise self._store_error(exc, sql, params) from exc

    def query_one(self, sql: str, params: dict[str, Any] | None = None) -> dict | None:
        try:
            row = self.db.execute(text(sql), params or {}).mappings().first()
        except SQLAlchemyError as exc:
            raise self._store_error(exc, sql, params) from exc
        return dict(row) if row is not None else None

    def distinct(self, column: str) -> list:
        col = _checked_column(column)
        sql = (
            f'SELECT DISTINCT "{col}" AS val FROM {TABLE} '
            f'WHERE "{col}" IS NOT NULL ORDER BY "{col}" ASC'
        )
        return [row["val"] for row in self.query(sql)]

    def by_dimension(self, column: str, value: Any) -> list[dict]:
        col = _checked_column(column)
        order_by = _ORDER_BY.get(col, '"Make", "Model"')
        sql = (
            f'SELECT {_SELECT_COLUMNS} FROM {TABLE} '
            f'WHERE "{col}" = :value ORDER BY {order_by}'
        )
        return self.query(sql, {"value": value})

    def by_id(self, row_id: Any) -> dict | None:
        sql = f"SELECT {_SELECT_COLUMNS} FROM {TABLE} WHERE rowid = :row_id"
        return self.query_one(sql, {"row_id": row_id})

    @staticmethod
    def _store_error(exc: SQLAlchemyError, sql: str, params: dict | None) -> StoreError:
        # DBAPI errors carry the driver's own message in .orig
        message = str(getattr(exc, "orig", None) or exc)
        logger.error("SQL ERROR: %s | sql=%s params=%s", message, sql, params)
        return StoreError(message)
