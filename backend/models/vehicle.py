# models/vehicle.py

from sqlalchemy import Column, Float, Integer, String
from db.base import Base


class ElectricVehicle(Base):
    __tablename__ = "electric_vehicles"

    # SQLite's implicit row identifier; declared so fixture tables alias it
    rowid = Column("rowid", Integer, primary_key=True)
    make = Column("Make", String)
    model = Column("Model", String)
    year = Column("Year", Integer, index=True)
    region = Column("Region", String, index=True)
    vehicle_type = Column("Vehicle_Type", String, index=True)
    range = Column("Range", Float, quote=True)
    battery_capacity = Column("Battery_Capacity", Float, nullable=True)
    energy_consumption = Column("Energy_Consumption", Float, nullable=True)
    co2_saved = Column("C02_Saved", Float, nullable=True)


COLUMN_NAMES = frozenset(c.name for c in ElectricVehicle.__table__.columns)
