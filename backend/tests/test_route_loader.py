# backend/tests/test_route_loader.py
import pytest

from core.exceptions import ConfigurationError
from services.routes.loader import load_routes_csv
from services.routes.routes_factory import get_route_table


def _write(tmp_path, text, name="routes.csv"):
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


def test_load_csv(tmp_path):
    p = _write(
        tmp_path,
        "origin,destination,distance_km\n"
        "Lisboa, Porto ,313\n"
        "Porto,Braga,55.5\n",
    )
    routes = load_routes_csv(p)
    assert [(r.origin, r.destination, r.distance_km) for r in routes] == [
        ("Lisboa", "Porto", 313.0),
        ("Porto", "Braga", 55.5),
    ]


def test_load_csv_alternate_headers(tmp_path):
    p = _write(tmp_path, "from,to,distanceKm\nA,B,12\n")
    assert load_routes_csv(p)[0].distance_km == 12


@pytest.mark.parametrize(
    "text",
    [
        "a,b,c\n1,2,3\n",
        "origin,destination,distance_km\nA,B,-4\n",
        "origin,destination,distance_km\nA,B,far\n",
        "origin,destination,distance_km\n",
    ],
)
def test_bad_csv(tmp_path, text):
    with pytest.raises(ConfigurationError):
        load_routes_csv(_write(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_routes_csv(tmp_path / "nope.csv")


def test_factory_uses_file(tmp_path):
    p = _write(tmp_path, "origin,destination,distance_km\nA,B,12\n", name="ok.csv")
    table = get_route_table(str(p))
    assert table.find_distance("b", "a") == 12
    assert get_route_table(str(p)) is table


def test_factory_falls_back_to_builtin(tmp_path):
    table = get_route_table(str(tmp_path / "missing.csv"))
    assert table.name == "brazil"
    assert table.find_distance("São Paulo, SP", "Santos, SP") == 72


def test_factory_default_is_builtin():
    assert len(get_route_table()) == 39


def test_non_utf8_csv_is_configuration_error(tmp_path):
    p = tmp_path / "latin1.csv"
    p.write_bytes("origin,destination,distance_km\nSão Paulo,Niterói,400\n".encode("latin-1"))
    with pytest.raises(ConfigurationError):
        load_routes_csv(p)


def test_factory_falls_back_on_unreadable_file(tmp_path):
    p = tmp_path / "latin1_routes.csv"
    p.write_bytes("origin,destination,distance_km\nSão Paulo,Niterói,400\n".encode("latin-1"))
    table = get_route_table(str(p))
    assert table.name == "brazil"
    assert table.find_distance("são paulo, sp", "rio de janeiro, rj") == 430
