# backend/tests/test_places.py


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_places_sorted(client):
    r = client.get("/routes/places")
    assert r.status_code == 200
    places = r.json()["data"]["places"]
    assert places == sorted(set(places))
    assert "Brasília, DF" in places


def test_distance_lookup_normalizes(client):
    r = client.get(
        "/routes/distance",
        params={"origin": " RIO DE JANEIRO, RJ ", "destination": "são paulo, sp"},
    )
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["distance_km"] == 430
    assert data["origin"] == "RIO DE JANEIRO, RJ"


def test_distance_not_found(client):
    r = client.get(
        "/routes/distance", params={"origin": "Santos, SP", "destination": "Gramado, RS"}
    )
    assert r.status_code == 404
    assert "manually" in r.json()["detail"]
