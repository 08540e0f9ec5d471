"""API tests for fleet management and the catalog."""

from datetime import datetime, timezone

from conftest import car_payload


def test_create_and_fetch_car(client):
    response = client.post("/api/cars", json=car_payload())
    assert response.status_code == 201
    created = response.json()

    assert created["plateNumber"] == "WAW-001"
    assert created["pricePerDay"] == "89.00"
    assert created["fuelConsumption"] == "5.2"
    assert created["rating"] == "5.0"
    assert created["reviewCount"] == 0
    assert created["status"] == "available"

    fetched = client.get(f"/api/cars/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_missing_car_is_404(client):
    response = client.get("/api/cars/999")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert "timestamp" in body


def test_duplicate_plate_is_rejected(client):
    assert client.post("/api/cars", json=car_payload()).status_code == 201

    response = client.post("/api/cars", json=car_payload(model="Corolla"))
    assert response.status_code == 400
    assert "WAW-001" in response.json()["message"]


def test_plate_can_be_kept_on_update(client):
    car = client.post("/api/cars", json=car_payload()).json()

    response = client.put(f"/api/cars/{car['id']}", json={"plateNumber": "WAW-001", "pricePerDay": "95.50"})
    assert response.status_code == 200
    assert response.json()["pricePerDay"] == "95.50"


def test_validation_errors_list_fields(client):
    response = client.post("/api/cars", json=car_payload(category="spaceship", seats=0))

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Invalid data"
    fields = {error["field"] for error in body["errors"]}
    assert {"category", "seats"} <= fields


def test_manual_status_change_is_idempotent(client):
    car = client.post("/api/cars", json=car_payload()).json()

    first = client.put(f"/api/cars/{car['id']}", json={"status": "maintenance"})
    second = client.put(f"/api/cars/{car['id']}", json={"status": "maintenance"})

    assert first.status_code == second.status_code == 200
    assert second.json()["status"] == "maintenance"
    assert second.json()["make"] == "Toyota"


def test_update_missing_car_is_404(client):
    assert client.put("/api/cars/42", json={"status": "maintenance"}).status_code == 404


def test_delete_car(client):
    car = client.post("/api/cars", json=car_payload()).json()

    response = client.delete(f"/api/cars/{car['id']}")
    assert response.status_code == 200
    assert response.json()["success"] is True

    assert client.get(f"/api/cars/{car['id']}").status_code == 404
    assert client.delete(f"/api/cars/{car['id']}").status_code == 404


def test_catalog_filters_and_sort(client, make_car):
    make_car(plate_number="A-1", category="economic", price_per_day="89.00", rating="4.8")
    make_car(plate_number="A-2", category="suv", price_per_day="299.00", rating="4.7")
    make_car(plate_number="A-3", category="suv", price_per_day="349.00", rating="4.9")
    make_car(plate_number="A-4", category="premium", price_per_day="449.00", rating="5.0", fuel_type="electric")

    suvs = client.get("/api/cars", params={"category": "suv", "maxPrice": "300"}).json()
    assert [car["plateNumber"] for car in suvs] == ["A-2"]

    by_price = client.get("/api/cars", params={"sort": "price-desc"}).json()
    assert [car["plateNumber"] for car in by_price] == ["A-4", "A-3", "A-2", "A-1"]

    electric = client.get("/api/cars", params={"fuelType": "electric"}).json()
    assert [car["plateNumber"] for car in electric] == ["A-4"]

    band = client.get("/api/cars", params={"minPrice": "299", "maxPrice": "349", "sort": "rating"}).json()
    assert [car["plateNumber"] for car in band] == ["A-3", "A-2"]


def test_catalog_rejects_unknown_enum(client):
    response = client.get("/api/cars", params={"category": "spaceship"})
    assert response.status_code == 400


def test_service_date_keeps_its_instant(client):
    response = client.post("/api/cars", json=car_payload(lastServiceDate="2024-11-15T10:00:00+02:00"))
    created = response.json()

    assert created["lastServiceDate"] == "2024-11-15T08:00:00+00:00"
    assert datetime.fromisoformat(created["lastServiceDate"]) == datetime(2024, 11, 15, 8, 0, tzinfo=timezone.utc)

    updated = client.put(f"/api/cars/{created['id']}", json={"lastServiceDate": "2025-01-10T09:30:00-05:00"}).json()
    assert updated["lastServiceDate"] == "2025-01-10T14:30:00+00:00"
    assert client.get(f"/api/cars/{created['id']}").json()["lastServiceDate"] == "2025-01-10T14:30:00+00:00"


def test_naive_service_date_is_read_as_utc(client):
    created = client.post("/api/cars", json=car_payload(lastServiceDate="2024-11-15T10:00:00")).json()

    assert created["lastServiceDate"] == "2024-11-15T10:00:00+00:00"
