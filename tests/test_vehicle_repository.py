import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError

from db.session import resolve_database_url, sqlite_readonly_url
from services.errors import StoreError
from services.vehicle_repository import VehicleStore


def test_distinct_is_sorted_without_duplicates(db_session):
    store = VehicleStore(db_session)
    assert store.distinct("Vehicle_Type") == ["Hatchback", "Pickup", "SUV", "Sedan"]
    assert store.distinct("Region") == ["Asia", "Europe", "North America"]
    assert store.distinct("Year") == [2020, 2021, 2022]


def test_distinct_rejects_unknown_column(db_session):
    with pytest.raises(ValueError):
        VehicleStore(db_session).distinct("Make; DROP TABLE electric_vehicles")


def test_by_dimension_binds_value(db_session):
    store = VehicleStore(db_session)
    rows = store.by_dimension("Region", "Europe' OR '1'='1")
    assert rows == []


def test_by_dimension_year_accepts_path_string(db_session):
    rows = VehicleStore(db_session).by_dimension("Year", "2020")
    assert [(r["Make"], r["Model"]) for r in rows] == [
        ("Ford", "Mustang Mach-E"),
        ("Nissan", "Leaf"),
        ("Tesla", "Model Y"),
    ]


def test_by_id(db_session):
    store = VehicleStore(db_session)
    row = store.by_id("3")
    assert row["rowid"] == 3
    assert row["Model"] == "Model Y"
    assert store.by_id(404) is None


def test_store_error_carries_driver_message(db_session):
    store = VehicleStore(db_session)
    with pytest.raises(StoreError, match="no such table"):
        store.query("SELECT * FROM missing_table")


def test_readonly_url(tmp_path):
    path = tmp_path / "ev.db"
    url = sqlite_readonly_url(path)
    assert url.startswith("sqlite:///file:")
    assert url.endswith("?mode=ro&uri=true")
    assert path.resolve().as_posix() in url


def test_readonly_engine_refuses_writes(tmp_path, session_factory):
    db_path = tmp_path / "electric_vehicles.db"
    engine = create_engine(sqlite_readonly_url(db_path))
    try:
        with engine.connect() as conn:
            count = conn.execute(text("SELECT COUNT(*) FROM electric_vehicles")).scalar()
            assert count == 7
            with pytest.raises(OperationalError):
                conn.execute(text("DELETE FROM electric_vehicles"))
    finally:
        engine.dispose()


def test_readonly_url_encodes_path(tmp_path):
    url = sqlite_readonly_url(tmp_path / "my data" / "ev#1?.db")
    assert "/my%20data/ev%231%3F.db?mode=ro&uri=true" in url


def test_database_url_from_path_keeps_spaces(tmp_path):
    path = tmp_path / "my data" / "ev.db"
    url = resolve_database_url(None, path)
    assert url == sqlite_readonly_url(path)
    assert "my%20data" in url


def test_database_url_from_env_is_normalized(tmp_path):
    url = resolve_database_url(" sqlite:///\n/srv/ev.db ", tmp_path / "ignored.db")
    assert url == "sqlite:////srv/ev.db"


def test_readonly_engine_opens_path_with_space(tmp_path):
    folder = tmp_path / "my data"
    folder.mkdir()
    db_path = folder / "ev.db"
    writer = create_engine(f"sqlite:///{db_path}")
    with writer.begin() as conn:
        conn.execute(text("CREATE TABLE t (x INTEGER)"))
        conn.execute(text("INSERT INTO t VALUES (1)"))
    writer.dispose()

    engine = create_engine(sqlite_readonly_url(db_path))
    try:
        with engine.connect() as conn:
            assert conn.execute(text("SELECT x FROM t")).scalar() == 1
    finally:
        engine.dispose()
