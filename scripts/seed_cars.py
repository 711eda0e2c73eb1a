#!/usr/bin/env python3
"""
Seed the cars table with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Realism-lite: price, horsepower and mpg follow the make's segment and the year

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_cars.py

A running API with the postgres backend picks the rows up on its next poll
(every CAR_STORE_POLL_SECONDS, default 2), or on restart when polling is off.
"""

from __future__ import annotations

import random
import sys
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from car_catalog.domain.car import NewCar
from car_catalog.infra.db.models.car import CarRow
from car_catalog.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_CARS = 40
CURRENT_YEAR = 2025
PLACEHOLDER_IMAGE = "https://placehold.co/600x400.png"


# ==============================================================================
# US Market Car Data
# ==============================================================================

# Segments with price bands (new-car base prices in USD) and typical output
SEGMENTS = {
    "economy": {
        "makes": ["Honda", "Toyota", "Hyundai", "Kia", "Nissan"],
        "base_price_min": Decimal("22000"),
        "base_price_max": Decimal("32000"),
        "horsepower": (120, 200),
        "mpg": (30.0, 42.0),
    },
    "mainstream": {
        "makes": ["Ford", "Chevrolet", "Subaru", "Mazda", "Volkswagen"],
        "base_price_min": Decimal("28000"),
        "base_price_max": Decimal("55000"),
        "horsepower": (180, 450),
        "mpg": (18.0, 32.0),
    },
    "premium": {
        "makes": ["BMW", "Mercedes-Benz", "Audi", "Tesla", "Porsche"],
        "base_price_min": Decimal("45000"),
        "base_price_max": Decimal("110000"),
        "horsepower": (250, 520),
        "mpg": (20.0, 120.0),
    },
}

MODELS_BY_MAKE = {
    "Honda": ["Civic", "Accord", "CR-V"],
    "Toyota": ["Corolla", "Camry", "RAV4"],
    "Hyundai": ["Elantra", "Tucson", "Kona"],
    "Kia": ["Forte", "Sportage", "Telluride"],
    "Nissan": ["Sentra", "Altima", "Rogue"],
    "Ford": ["Mustang", "F-150", "Explorer"],
    "Chevrolet": ["Malibu", "Equinox", "Silverado"],
    "Subaru": ["Outback", "Forester", "Crosstrek"],
    "Mazda": ["Mazda3", "CX-5", "MX-5 Miata"],
    "Volkswagen": ["Jetta", "Tiguan", "Golf GTI"],
    "BMW": ["3 Series", "X3", "X5"],
    "Mercedes-Benz": ["C-Class", "E-Class", "GLC"],
    "Audi": ["A4", "Q5", "Q7"],
    "Tesla": ["Model 3", "Model Y", "Model S"],
    "Porsche": ["Macan", "Cayenne", "911"],
}

FEATURES = [
    "Backup Camera",
    "Bluetooth",
    "Sunroof",
    "Leather Seats",
    "Heated Seats",
    "Apple CarPlay",
    "Adaptive Cruise Control",
    "Lane Keep Assist",
    "Third Row Seating",
    "All-Wheel Drive",
]


# ==============================================================================
# Price Calculation with Realism
# ==============================================================================


def segment_for(make: str) -> dict:
    for segment in SEGMENTS.values():
        if make in segment["makes"]:
            return segment
    return SEGMENTS["mainstream"]


def calculate_price(make: str, year: int) -> Decimal:
    """
    Calculate price based on segment and year.

    Logic:
    - Newer cars are more expensive
    - Premium makes cost more than economy ones
    - Price depreciates ~8% per year from base price, capped at 60%
    """
    segment = segment_for(make)

    base_price = Decimal(
        random.randint(int(segment["base_price_min"]), int(segment["base_price_max"]))
    )

    years_old = max(0, CURRENT_YEAR - year)
    total_depreciation = min(Decimal("0.08") * years_old, Decimal("0.60"))
    depreciated_price = base_price * (Decimal("1") - total_depreciation)

    # Add some randomness (+/- 5%)
    variance = Decimal(str(random.uniform(0.95, 1.05)))
    final_price = depreciated_price * variance

    # Round to nearest 100
    final_price = (final_price / 100).quantize(Decimal("1")) * 100

    return max(final_price, Decimal("5000"))


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_car() -> NewCar:
    """Generate a single random listing; validated like any user submission."""
    segment_name = random.choice(list(SEGMENTS.keys()))
    segment = SEGMENTS[segment_name]
    make = random.choice(segment["makes"])
    model = random.choice(MODELS_BY_MAKE[make])

    # Year: 2016-2025 (weighted toward newer)
    year = random.choices(
        range(2016, 2026),
        weights=[1, 1, 2, 2, 3, 3, 4, 5, 6, 7],
        k=1,
    )[0]

    hp_min, hp_max = segment["horsepower"]
    mpg_min, mpg_max = segment["mpg"]

    new_car = NewCar(
        make=make,
        model=model,
        year=year,
        price=calculate_price(make, year),
        horsepower=random.randint(hp_min, hp_max),
        mpg=round(random.uniform(mpg_min, mpg_max), 1),
        image_url=PLACEHOLDER_IMAGE,
        data_ai_hint=NewCar.default_ai_hint(make, model),
        features=tuple(random.sample(FEATURES, k=random.randint(2, 5))),
    )
    new_car.validate()
    return new_car


def to_row(new_car: NewCar) -> CarRow:
    return CarRow(
        make=new_car.make,
        model=new_car.model,
        year=new_car.year,
        price=new_car.price,
        horsepower=new_car.horsepower,
        mpg=new_car.mpg,
        image_url=new_car.image_url,
        data_ai_hint=new_car.data_ai_hint,
        features=list(new_car.features),
    )


def seed_cars(num_cars: int = NUM_CARS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random car data.

    Args:
        num_cars: Number of cars to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {num_cars} cars (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing cars...")
        deleted_count = session.query(CarRow).delete()
        print(f"   Deleted {deleted_count} existing cars")

        # Step 2: Generate and insert new cars
        print(f"🚗 Generating {num_cars} cars...")
        cars = [generate_car() for _ in range(num_cars)]

        session.add_all([to_row(car) for car in cars])
        session.flush()

        print(f"✅ Successfully seeded {len(cars)} cars!")

        print("\n📊 Sample cars:")
        for i, car in enumerate(cars[:5], 1):
            print(
                f"   {i}. {car.year} {car.make} {car.model} - "
                f"${car.price:,.2f} ({car.horsepower} hp, {car.mpg} mpg)"
            )

        if len(cars) > 5:
            print(f"   ... and {len(cars) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_cars()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
