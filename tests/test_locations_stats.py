"""API tests for locations, statistics, health and demo seeding."""

from conftest import reservation_payload
from core.database.models import Car
from core.database.seed import seed_database


def test_locations_only_active(client):
    client.post("/api/locations", json={"name": "Gdańsk Port", "address": "ul. Portowa 1", "city": "Gdańsk"})
    client.post("/api/locations", json={
        "name": "Poznań Stary Rynek", "address": "Stary Rynek 1", "city": "Poznań", "isActive": False,
    })

    locations = client.get("/api/locations").json()
    assert [location["name"] for location in locations] == ["Gdańsk Port"]
    assert locations[0]["isActive"] is True


def test_create_location_validates(client):
    response = client.post("/api/locations", json={"name": "", "address": "x", "city": "y"})
    assert response.status_code == 400


def test_stats_on_empty_database(client):
    stats = client.get("/api/stats").json()

    assert stats["totalCars"] == 0
    assert stats["utilizationPercent"] == 0
    assert stats["revenue"] == "0.00"
    assert stats["carsByStatus"] == {"available": 0, "rented": 0, "maintenance": 0}


def test_stats_follow_bookings(client, make_car):
    car = make_car()
    make_car(plate_number="WAW-002")
    booked = client.post("/api/reservations", json=reservation_payload(car.id)).json()

    stats = client.get("/api/stats").json()
    assert stats["totalCars"] == 2
    assert stats["carsByStatus"]["rented"] == 1
    assert stats["activeReservations"] == 1
    assert stats["utilizationPercent"] == 50
    assert stats["revenue"] == "255.84"

    client.put(f"/api/reservations/{booked['id']}", json={"status": "cancelled"})
    stats = client.get("/api/stats").json()
    assert stats["activeReservations"] == 0
    assert stats["reservationsByStatus"]["cancelled"] == 1
    assert stats["revenue"] == "0.00"


def test_seed_is_idempotent(client, db):
    assert seed_database(db) is True
    assert seed_database(db) is False
    assert db.query(Car).count() == 5

    stats = client.get("/api/stats").json()
    assert stats["carsByStatus"] == {"available": 3, "rented": 1, "maintenance": 1}
    assert stats["activeReservations"] == 2
    assert stats["utilizationPercent"] == 40
    assert stats["revenue"] == "934.00"
    assert stats["totalCustomers"] == 1

    login = client.post("/api/auth/login", json={"email": "admin@autowinajem.pl", "password": "admin123"})
    assert login.json()["user"]["role"] == "admin"


def test_health(client):
    assert client.get("/").json()["status"] == "running"

    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert health["database"] == "connected"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json()["success"] is False
