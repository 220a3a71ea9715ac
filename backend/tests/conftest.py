# backend/tests/conftest.py
import os
import random
import sys
import pytest
from fastapi.testclient import TestClient

# Make /Project/backend importable as top-level
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# Built-in route table and default display settings for every test
os.environ["ROUTES_FILE"] = ""
os.environ["DISPLAY_LOCALE"] = "pt-BR"
os.environ["CURRENCY"] = "BRL"

# Import app only after setting env
from main import app
from api.deps import calculator_dep
from models.emissions import CalculatorConfig
from services.emissions.calculator import EmissionCalculator
from services.routes.presets import brazil_routes
from services.routes.route_table import RouteTable


@pytest.fixture(scope="session")
def client():
    # Use context manager so FastAPI lifespan (startup/shutdown) runs
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded_client(client):
    """Same client, but credit prices come from a seeded generator."""
    app.dependency_overrides[calculator_dep] = lambda: EmissionCalculator(
        CalculatorConfig(), rng=random.Random(1234)
    )
    yield client
    app.dependency_overrides.pop(calculator_dep, None)


@pytest.fixture
def calc():
    return EmissionCalculator(CalculatorConfig(), rng=random.Random(42))


@pytest.fixture(scope="session")
def table():
    return RouteTable(brazil_routes(), name="brazil")
