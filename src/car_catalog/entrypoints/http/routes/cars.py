from fastapi import APIRouter, Depends, status

from car_catalog.domain.user import User
from car_catalog.entrypoints.http.dependencies import (
    get_add_car_use_case,
    get_current_user,
    get_get_car_by_id_use_case,
    get_list_car_makes_use_case,
    get_search_catalog_use_case,
)
from car_catalog.entrypoints.http.dtos.car import CreateCarRequestDTO, CreateCarResponseDTO
from car_catalog.entrypoints.http.dtos.catalog_search import (
    CarMakesQueryDTO,
    CarMakesResponseDTO,
    CarResponseDTO,
    CarsSearchQueryDTO,
    CatalogSearchResponseDTO,
)
from car_catalog.entrypoints.http.error_responses import ErrorResponse
from car_catalog.entrypoints.http.mappers.car_mapper import CarMapper
from car_catalog.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from car_catalog.use_cases.add_car import AddCar, AddCarRequest
from car_catalog.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest
from car_catalog.use_cases.list_car_makes import ListCarMakes, ListCarMakesRequest
from car_catalog.use_cases.search_car_catalog import SearchCarCatalog


router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=CatalogSearchResponseDTO,
    summary="Search car catalog",
    description="""
    Filter and sort the live car catalog.

    ## Filters
    - All filters use AND semantics
    - Make: exact, case-sensitive match; empty means all makes
    - Year/price: inclusive ranges

    ## Sorting
    price_asc (default), price_desc, year_asc, year_desc, make_asc, make_desc.
    Ties keep catalog order (newest model year first).

    ## Status
    - `loading`: the first snapshot has not arrived; no cars yet
    - `ready`: cars may be empty if nothing matches
    - `error`: the live subscription failed; cars are the last known ones

    ## Example
    ```
    GET /v1/cars?make=Toyota&price_max=30000.00&sort=year_desc
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "status": "ready",
                        "error": None,
                        "cars": [
                            {
                                "id": "550e8400-e29b-41d4-a716-446655440000",
                                "make": "Toyota",
                                "model": "Camry",
                                "year": 2022,
                                "price": "25000.00",
                                "horsepower": 203,
                                "mpg": 32.0,
                                "image_url": "https://placehold.co/600x400.png",
                                "data_ai_hint": "toyota camry",
                                "features": ["Backup Camera"],
                            }
                        ],
                        "total": 1,
                    }
                }
            },
        },
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def get_cars(
    query: CarsSearchQueryDTO = Depends(),
    use_case: SearchCarCatalog = Depends(get_search_catalog_use_case),
) -> CatalogSearchResponseDTO:
    """Search cars endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = CatalogSearchMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return CatalogSearchMapper.to_response(result)


# Declared before /cars/{car_id} so "makes" is not taken for an id.
@router.get(
    "/cars/makes",
    response_model=CarMakesResponseDTO,
    summary="Suggest makes",
    description="""
    Options for the make selector: "All makes" first, then every distinct
    make of the full catalog whose name contains `q` (case-insensitive).
    Independent of any active search filter.
    """,
)
def get_car_makes(
    query: CarMakesQueryDTO = Depends(),
    use_case: ListCarMakes = Depends(get_list_car_makes_use_case),
) -> CarMakesResponseDTO:
    result = use_case.execute(ListCarMakesRequest(query=query.q))
    return CatalogSearchMapper.to_makes_response(result)


@router.get(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Get car details",
    description="""
    Look up one car, first in the synchronized catalog and then in the store.
    A listing added moments ago is found here before it shows up in searches.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        503: {"model": ErrorResponse, "description": "Store lookup failed"},
    },
)
def get_car(
    car_id: str,
    use_case: GetCarById = Depends(get_get_car_by_id_use_case),
) -> CarResponseDTO:
    result = use_case.execute(GetCarByIdRequest(car_id=car_id))
    return CatalogSearchMapper.to_car_response(result.car)


@router.post(
    "/cars",
    response_model=CreateCarResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Add a listing",
    description="""
    Create a listing. Requires a bearer token from /v1/auth/login.

    The new car appears in GET /v1/cars once the live subscription delivers
    it; GET /v1/cars/{id} finds it right away.
    """,
    responses={
        401: {"model": ErrorResponse, "description": "Not signed in"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "Insert failed"},
    },
)
def create_car(
    body: CreateCarRequestDTO,
    user: User = Depends(get_current_user),
    use_case: AddCar = Depends(get_add_car_use_case),
) -> CreateCarResponseDTO:
    request = AddCarRequest(new_car=CarMapper.to_new_car(body), user=user)
    result = use_case.execute(request)
    return CreateCarResponseDTO(id=result.car_id)
