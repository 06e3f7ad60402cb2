"""
Flight Planner HTTP API.

Exposes route finding, route sorting, route persistence and flight
search over the FlightPlanner facade.

Run with:
    uvicorn src.api.planner_api:app
"""

import logging
from contextlib import asynccontextmanager
from datetime import time
from typing import List, Literal, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from src.flight_planner.application import FlightPlanner
from src.flight_planner.config import PlannerConfig
from src.flight_planner.exceptions import (
    DataLoadError,
    InvalidSortOptionError,
    PlannerStateError,
)
from src.flight_planner.logging_config import setup_logging
from src.flight_planner.schemas.criterion import RouteCriterion
from src.flight_planner.services.route_sorting_service import SortAlgorithm

logger = logging.getLogger(__name__)


# --- Pydantic Schemas (The JSON Contract) ---
# Read straight from the dataclasses so @property fields are included.


class AirportSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    iata: str
    city: str
    country: str
    latitude: float
    longitude: float


class FlightSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    flight_id: int
    origin: str
    destination: str
    airline: str
    flight_number: str
    duration: int
    price: float
    departure_time: time


class RouteSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    route_id: int
    flight_ids: List[int]
    total_duration: int
    total_price: float
    stopovers: int
    formatted_duration: str  # Captures @property


class RouteDetailSchema(BaseModel):
    route: RouteSchema
    flights: List[FlightSchema]


class SearchResultSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    criteria: str
    airport: Optional[AirportSchema] = None
    flights: List[FlightSchema]
    result_count: int  # Captures @property


class HealthSchema(BaseModel):
    ready: bool
    airports: int
    flights: int
    routes: int
    graph_nodes: int
    graph_edges: int


class FindRouteRequest(BaseModel):
    origin: str
    destination: str
    criterion: RouteCriterion


class SortRequest(BaseModel):
    route_ids: Optional[List[int]] = None
    algorithm: str = SortAlgorithm.STABLE.value
    comparator: int


class SaveResponse(BaseModel):
    path: str
    saved: int


def load_planner_data(planner: FlightPlanner) -> None:
    """Load airports and flights, then routes when a routes file exists."""
    planner.load_airports()
    planner.load_flights()
    try:
        planner.load_routes()
    except DataLoadError as e:
        logger.warning("Routes not loaded: %s", e)


def create_app(planner: Optional[FlightPlanner] = None, load_data: bool = True) -> FastAPI:
    """
    Build the API around a planner.

    Args:
        planner: Planner to serve; a default one is created when None.
        load_data: Load the CSV data on startup.
    """
    config = PlannerConfig.from_env()
    planner = planner or FlightPlanner(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if load_data:
            setup_logging(config.log_level, config.log_file)
            load_planner_data(planner)
        yield

    app = FastAPI(title="Flight Planner API", lifespan=lifespan)
    app.state.planner = planner

    @app.exception_handler(PlannerStateError)
    async def planner_state_handler(request: Request, exc: PlannerStateError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(InvalidSortOptionError)
    async def sort_option_handler(request: Request, exc: InvalidSortOptionError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    # --- API Endpoints ---

    @app.get("/health", response_model=HealthSchema)
    def health():
        graph = planner.graph
        return HealthSchema(
            ready=planner.is_ready,
            airports=len(planner.airports),
            flights=len(planner.flights),
            routes=len(planner.routes),
            graph_nodes=graph.node_count() if graph is not None else 0,
            graph_edges=graph.edge_count() if graph is not None else 0,
        )

    @app.post("/routes/find", response_model=RouteDetailSchema)
    def find_route(request: FindRouteRequest):
        route = planner.find_route(request.origin, request.destination, request.criterion)
        if route is None:
            raise HTTPException(
                status_code=404,
                detail=f"No route found between {request.origin} and {request.destination}",
            )
        return RouteDetailSchema(
            route=RouteSchema.model_validate(route),
            flights=[FlightSchema.model_validate(f) for f in planner.flights_for_route(route)],
        )

    @app.get("/routes", response_model=List[RouteSchema])
    def list_routes():
        return [RouteSchema.model_validate(r) for r in planner.routes]

    @app.post("/routes/sort", response_model=List[RouteSchema])
    def sort_routes(request: SortRequest):
        routes = planner.sort_routes(request.route_ids, request.algorithm, request.comparator)
        if not routes:
            raise HTTPException(status_code=404, detail="No valid routes found")
        return [RouteSchema.model_validate(r) for r in routes]

    @app.post("/routes/save", response_model=SaveResponse)
    def save_routes():
        path = planner.save_routes()
        return SaveResponse(path=str(path), saved=len(planner.routes))

    @app.get("/flights/search", response_model=SearchResultSchema)
    def search_flights(
        by: Literal["origin", "destination", "airline", "flight_number"] = Query(...),
        q: str = Query(..., min_length=1),
    ):
        return SearchResultSchema.model_validate(planner.search_flights(by, q))

    return app


app = create_app()
