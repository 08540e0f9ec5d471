# ------------------------------ IMPORTS ------------------------------
import logging
from datetime import datetime
from decimal import Decimal
from sqlalchemy.orm import Session

from core.database.models import User, Car, Reservation, Location
from core.utils.security import hash_password

logger = logging.getLogger(__name__)

# ------------------------------ SEED DATA ------------------------------
LOCATIONS = [
    {"name": "Warszawa Centrum", "address": "ul. Marszałkowska 1", "city": "Warszawa"},
    {"name": "Warszawa Lotnisko", "address": "ul. Żwirki i Wigury 1", "city": "Warszawa"},
    {"name": "Kraków Główny", "address": "pl. Kolejowy 1", "city": "Kraków"},
    {"name": "Gdańsk Port", "address": "ul. Portowa 1", "city": "Gdańsk"},
]

USERS = [
    {
        "username": "admin",
        "email": "admin@autowinajem.pl",
        "password": "admin123",
        "first_name": "Admin",
        "last_name": "System",
        "phone": "+48 100 000 000",
        "license_number": None,
        "role": "admin",
    },
    {
        "username": "customer",
        "email": "jan.kowalski@example.com",
        "password": "customer123",
        "first_name": "Jan",
        "last_name": "Kowalski",
        "phone": "+48 123 456 789",
        "license_number": "ABC123456789",
        "role": "customer",
    },
]

CARS = [
    ("Toyota", "Yaris", 2023, "economic", "automatic", "petrol", 5, 2, "5.2", "89.00", "available", "Warszawa Centrum", "WAW-001", "2024-11-15"),
    ("Volkswagen", "Golf", 2022, "compact", "manual", "petrol", 5, 3, "6.1", "119.00", "rented", "Warszawa Centrum", "WAW-002", "2024-11-08"),
    ("BMW", "X3", 2023, "suv", "automatic", "diesel", 5, 5, "7.8", "289.00", "maintenance", "Serwis BMW", "WAW-003", "2024-11-01"),
    ("Audi", "A3", 2023, "compact", "automatic", "petrol", 5, 3, "6.5", "159.00", "available", "Kraków Główny", "KRK-001", "2024-10-20"),
    ("Mercedes", "C-Class", 2024, "premium", "automatic", "diesel", 5, 4, "5.8", "329.00", "available", "Warszawa Lotnisko", "WAW-004", "2024-11-20"),
]

# ------------------------------ SEEDING ------------------------------

def seed_database(db: Session) -> bool:
    """Insert demo locations, users, cars and reservations into an empty database.

    Returns False without writing anything when cars already exist.
    """
    if db.query(Car).first():
        logger.info("Database already contains cars, skipping seed")
        return False

    try:
        db.add_all(Location(is_active=True, **location) for location in LOCATIONS)

        users = []
        for user_data in USERS:
            data = dict(user_data)
            user = User(password_hash=hash_password(data.pop("password")), loyalty_points=0, **data)
            users.append(user)
        db.add_all(users)

        cars = [
            Car(
                make=make, model=model, year=year, category=category, transmission=transmission,
                fuel_type=fuel_type, seats=seats, luggage=luggage, has_air_conditioning=True,
                fuel_consumption=Decimal(consumption), price_per_day=Decimal(price), status=status,
                location=location, plate_number=plate, last_service_date=datetime.fromisoformat(service_date),
                rating=Decimal("5.0"), review_count=0,
            )
            for (make, model, year, category, transmission, fuel_type, seats, luggage,
                 consumption, price, status, location, plate, service_date) in CARS
        ]
        db.add_all(cars)
        db.flush()

        customer, golf, yaris = users[1], cars[1], cars[0]
        db.add_all([
            Reservation(
                user_id=customer.id, car_id=golf.id,
                pickup_date=datetime(2024, 12, 15, 10, 0), return_date=datetime(2024, 12, 17, 18, 0),
                pickup_location="Warszawa Centrum", return_location="Warszawa Centrum",
                status="active", total_amount=Decimal("578.00"), extras=[],
            ),
            Reservation(
                user_id=customer.id, car_id=yaris.id,
                pickup_date=datetime(2024, 12, 22, 9, 0), return_date=datetime(2024, 12, 26, 17, 0),
                pickup_location="Kraków Główny", return_location="Kraków Główny",
                status="confirmed", total_amount=Decimal("356.00"), extras=["gps"],
            ),
        ])

        db.commit()
        logger.info(f"Seeded {len(LOCATIONS)} locations, {len(users)} users, {len(cars)} cars, 2 reservations")
        return True

    except Exception as e:
        logger.error(f"Error seeding database: {e}")
        db.rollback()
        raise

# ------------------------------ END OF FILE ------------------------------
