from car_catalog.infra.db.models.base import Base
from car_catalog.infra.db.models.car import CarRow

__all__ = ["Base", "CarRow"]
