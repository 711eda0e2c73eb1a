from __future__ import annotations

from decimal import Decimal, InvalidOperation

from car_catalog.domain.car import NewCar, parse_features
from car_catalog.domain.errors import ValidationError
from car_catalog.entrypoints.http.dtos.car import CreateCarRequestDTO


class CarMapper:
    """Maps the create-listing body to a domain NewCar."""

    @staticmethod
    def to_new_car(dto: CreateCarRequestDTO) -> NewCar:
        """
        Converts request DTO to domain NewCar.

        Handles string → Decimal conversion at the boundary and accepts
        features either as a list or as one comma-separated string.

        Raises:
            ValidationError: If price cannot be converted to a valid Decimal
        """
        try:
            price = Decimal(dto.price)
        except (InvalidOperation, ValueError):
            raise ValidationError(
                errors=[
                    {
                        "field": "price",
                        "message": f"Invalid decimal format: {dto.price}",
                        "code": "INVALID_FORMAT",
                    }
                ]
            )

        if isinstance(dto.features, str):
            features = parse_features(dto.features)
        else:
            features = tuple(item.strip() for item in dto.features if item.strip())

        return NewCar(
            make=dto.make.strip(),
            model=dto.model.strip(),
            year=dto.year,
            price=price,
            horsepower=dto.horsepower,
            mpg=dto.mpg,
            image_url=dto.image_url.strip(),
            data_ai_hint=dto.data_ai_hint.strip(),
            features=features,
        )
