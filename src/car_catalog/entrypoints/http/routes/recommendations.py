from fastapi import APIRouter, Depends, Request

from car_catalog.domain.user import User
from car_catalog.entrypoints.http.dependencies import (
    get_optional_user,
    get_recommend_cars_use_case,
)
from car_catalog.entrypoints.http.dtos.recommendation import (
    RecommendationRequestDTO,
    RecommendationResponseDTO,
)
from car_catalog.entrypoints.http.error_responses import ErrorResponse
from car_catalog.entrypoints.http.mappers.recommendation_mapper import RecommendationMapper
from car_catalog.use_cases.recommend_cars import RecommendCars


router = APIRouter(tags=["Recommendations"])


def requester_key(request: Request, user: User | None) -> str:
    """
    Who is asking: the signed-in uid, else the client address.

    Anonymous callers behind one NAT or proxy share an address, so they
    share one in-progress slot too.
    """
    if user is not None:
        return f"user:{user.uid}"
    host = request.client.host if request.client else "unknown"
    return f"host:{host}"


@router.post(
    "/recommendations",
    response_model=RecommendationResponseDTO,
    summary="Get AI car recommendations",
    description="""
    Describe what you want in plain words and get suggested cars.

    ## Outcomes
    - `ok`: recommendation text
    - `empty`: the service had nothing to suggest
    - 422: fewer than 10 characters (the service is not called)
    - 409: you already have a request in progress
    - 502: the service failed; try again
    - 503: recommendations are not configured on this server

    ## One request at a time
    Signed-in callers get one in-progress request per account. Anonymous
    callers are grouped by client address, so everyone behind the same NAT
    or proxy shares one slot and may see 409 while a neighbour is waiting.
    Send a bearer token to get a slot of your own.

    ## Example
    ```
    POST /v1/recommendations
    {"preferences": "Family SUV under $30k with good mileage"}
    ```
    """,
    responses={
        409: {"model": ErrorResponse, "description": "Request already in progress"},
        422: {"model": ErrorResponse, "description": "Preferences too short"},
        502: {"model": ErrorResponse, "description": "Completion service failed"},
        503: {"model": ErrorResponse, "description": "Not configured"},
    },
)
def recommend_cars(
    body: RecommendationRequestDTO,
    request: Request,
    user: User | None = Depends(get_optional_user),
    use_case: RecommendCars = Depends(get_recommend_cars_use_case),
) -> RecommendationResponseDTO:
    domain_request = RecommendationMapper.to_domain_request(body, requester_key(request, user))
    result = use_case.execute(domain_request)
    return RecommendationMapper.to_response(result)
