from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from urllib.parse import urlparse

from car_catalog.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


class CarValidationError(ValidationError):
    """Raised when a new listing fails field validation."""

    pass


MIN_YEAR = 1900
MAX_AI_HINT_WORDS = 2
AI_HINT_MAX_CHARS = 20


def max_year() -> int:
    """Latest plausible model year (next year's models are already on sale)."""
    return date.today().year + 1


@dataclass(frozen=True)
class Car:
    id: str
    make: str
    model: str
    year: int
    price: Decimal
    horsepower: int
    mpg: float
    image_url: str
    data_ai_hint: str = ""
    features: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class NewCar:
    """A listing about to be inserted. The store assigns the id."""

    make: str
    model: str
    year: int
    price: Decimal
    horsepower: int
    mpg: float
    image_url: str
    data_ai_hint: str = ""
    features: tuple[str, ...] = ()

    def validate(self) -> None:
        """
        Validate every field and report all failures at once.

        Raises:
            CarValidationError: If one or more fields are invalid
        """
        errors: list[dict[str, str]] = []

        def fail(field_name: str, message: str, code: str = "INVALID_VALUE") -> None:
            errors.append({"field": field_name, "message": message, "code": code})

        if len(self.make.strip()) < 2:
            fail("make", "Must be at least 2 characters", "TOO_SHORT")
        if len(self.model.strip()) < 1:
            fail("model", "Must be at least 1 character", "TOO_SHORT")
        if not MIN_YEAR <= self.year <= max_year():
            fail("year", f"Must be between {MIN_YEAR} and {max_year()}", "OUT_OF_RANGE")
        if not isinstance(self.price, Decimal):
            fail("price", "Must be Decimal (no floats past the boundary)")
        elif self.price <= 0:
            fail("price", "Must be positive")
        if self.horsepower <= 0:
            fail("horsepower", "Must be positive")
        if self.mpg <= 0:
            fail("mpg", "Must be positive")
        if not _is_http_url(self.image_url):
            fail("image_url", "Must be a valid URL", "INVALID_URL")
        if len(self.data_ai_hint.split()) > MAX_AI_HINT_WORDS:
            fail("data_ai_hint", f"Must be at most {MAX_AI_HINT_WORDS} words", "TOO_LONG")

        if errors:
            raise CarValidationError(errors=errors)

    def with_id(self, car_id: str) -> Car:
        return Car(
            id=car_id,
            make=self.make,
            model=self.model,
            year=self.year,
            price=self.price,
            horsepower=self.horsepower,
            mpg=self.mpg,
            image_url=self.image_url,
            data_ai_hint=self.data_ai_hint,
            features=self.features,
        )

    @staticmethod
    def default_ai_hint(make: str, model: str) -> str:
        """Hint used when the submitter leaves it blank: first two words of "make model"."""
        text = f"{make.lower()} {model.lower()}"[:AI_HINT_MAX_CHARS]
        return " ".join(text.split(" ")[:MAX_AI_HINT_WORDS])


def parse_features(raw: str | None) -> tuple[str, ...]:
    """Split comma-separated feature text, dropping blank entries."""
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


@dataclass(frozen=True, slots=True)
class CatalogFilters:
    make: str = ""
    year_min: int | None = None
    year_max: int | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if self.price_min is not None and not isinstance(self.price_min, Decimal):
            raise FilterValidationError(
                "price_min must be Decimal or None (no floats past the boundary)"
            )
        if self.price_max is not None and not isinstance(self.price_max, Decimal):
            raise FilterValidationError(
                "price_max must be Decimal or None (no floats past the boundary)"
            )

        if (
            self.year_min is not None
            and self.year_max is not None
            and self.year_min > self.year_max
        ):
            raise FilterValidationError("year_min cannot be greater than year_max")
        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise FilterValidationError("price_min cannot be greater than price_max")

    def matches(self, car: Car) -> bool:
        """AND across defined constraints. Make is exact and case-sensitive."""
        if self.make and car.make != self.make:
            return False
        if self.year_min is not None and car.year < self.year_min:
            return False
        if self.year_max is not None and car.year > self.year_max:
            return False
        if self.price_min is not None and car.price < self.price_min:
            return False
        if self.price_max is not None and car.price > self.price_max:
            return False
        return True


class SortOption(str, Enum):
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    YEAR_ASC = "year_asc"
    YEAR_DESC = "year_desc"
    MAKE_ASC = "make_asc"
    MAKE_DESC = "make_desc"


DEFAULT_SORT = SortOption.PRICE_ASC
