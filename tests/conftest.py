from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from db.base import Base
from db.deps import get_db
from main import app
from models.vehicle import ElectricVehicle
from services.deps import get_templates
from services.templates import TemplateLoader

REPO_ROOT = Path(__file__).resolve().parent.parent
TEMPLATE_DIR = REPO_ROOT / "templates"

VEHICLES = [
    dict(rowid=1, make="Tesla", model="Model 3", year=2021, region="North America",
         vehicle_type="Sedan", range=500.0, battery_capacity=75.0,
         energy_consumption=15.0, co2_saved=2.5),
    dict(rowid=2, make="Nissan", model="Leaf", year=2020, region="Europe",
         vehicle_type="Hatchback", range=240.0, battery_capacity=40.0,
         energy_consumption=17.0, co2_saved=None),
    dict(rowid=3, make="Tesla", model="Model Y", year=2020, region="Europe",
         vehicle_type="SUV", range=450.0, battery_capacity=75.0,
         energy_consumption=16.5, co2_saved=3.1),
    dict(rowid=4, make="Hyundai", model="Kona", year=2021, region="Asia",
         vehicle_type="SUV", range=400.0, battery_capacity=64.0,
         energy_consumption=None, co2_saved=None),
    dict(rowid=5, make="Ford", model="Mustang Mach-E", year=2020, region="North America",
         vehicle_type="SUV", range=350.0, battery_capacity=88.0,
         energy_consumption=20.2, co2_saved=2.9),
    # duplicate of row 4 apart from the id
    dict(rowid=6, make="Hyundai", model="Kona", year=2021, region="Asia",
         vehicle_type="SUV", range=400.0, battery_capacity=64.0,
         energy_consumption=None, co2_saved=None),
    dict(rowid=7, make="R&D <Motors>", model="Hauler", year=2022, region="Asia",
         vehicle_type="Pickup", range=320.0, battery_capacity=None,
         energy_consumption=None, co2_saved=None),
]


@pytest.fixture
def session_factory(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'electric_vehicles.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    with factory() as db:
        db.add_all([ElectricVehicle(**v) for v in VEHICLES])
        db.commit()
    yield factory
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    with session_factory() as db:
        yield db


def _override_db(factory):
    def _get_db():
        db = factory()
        try:
            yield db
        finally:
            db.close()

    return _get_db


@pytest.fixture
def client(session_factory):
    app.dependency_overrides[get_db] = _override_db(session_factory)
    app.dependency_overrides[get_templates] = lambda: TemplateLoader(TEMPLATE_DIR)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def empty_store_client(tmp_path):
    """Client backed by a database that has no electric_vehicles table."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'empty.db'}",
        connect_args={"check_same_thread": False},
    )
    factory = sessionmaker(bind=engine)
    app.dependency_overrides[get_db] = _override_db(factory)
    app.dependency_overrides[get_templates] = lambda: TemplateLoader(TEMPLATE_DIR)
    yield TestClient(app)
    app.dependency_overrides.clear()
    engine.dispose()
