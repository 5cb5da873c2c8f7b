"""HTTP routes. Thin translation of requests into GameService calls.

Handlers are plain `def` functions, so FastAPI runs them in its worker thread pool.
Concurrent requests on the same game are serialized by the registry, not here.
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tictactoe_backend.api.models import (
    ErrorResponse,
    GameListResponse,
    GameResponse,
    HealthResponse,
    MoveRequest,
    StatusResponse,
)
from tictactoe_backend.core.exceptions import (
    GameNotFoundError,
    InvalidRequestError,
    MoveError,
)
from tictactoe_backend.services.game_service import GameService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_game_service(request: Request) -> GameService:
    return request.app.state.game_service


Service = Annotated[GameService, Depends(get_game_service)]

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("/", response_model=HealthResponse, tags=["System"], summary="Health check")
def health_check() -> HealthResponse:
    """Returns a simple healthy message for uptime checks."""
    return HealthResponse()


@router.post(
    "/games",
    response_model=GameResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Games"],
    summary="Create a new game",
)
def create_game(service: Service, response: Response) -> GameResponse:
    """Creates a new Tic Tac Toe game and returns its initial state."""
    game = service.create_new_game()
    response.headers["Location"] = f"/games/{game.id}"
    return game


@router.get("/games", response_model=GameListResponse, tags=["Games"], summary="List games")
def list_games(service: Service) -> GameListResponse:
    return GameListResponse(game_ids=service.list_games())


@router.get(
    "/games/{game_id}",
    response_model=GameResponse,
    responses=NOT_FOUND,
    tags=["Games"],
    summary="Get game state",
)
def get_game(game_id: UUID, service: Service) -> GameResponse:
    """Fetch the current state of the specified game."""
    return service.get_game_state(game_id)


@router.post(
    "/games/{game_id}/moves",
    response_model=GameResponse,
    responses={
        **NOT_FOUND,
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    },
    tags=["Moves"],
    summary="Make a move",
)
def make_move(game_id: UUID, move: MoveRequest, service: Service) -> GameResponse:
    """
    Places the specified player's symbol at the given board position if valid.

    - player: "X" or "O" (case-insensitive)
    - position: 0..8, left-to-right, top-to-bottom
    """
    return service.make_move(game_id, move)


@router.get(
    "/games/{game_id}/status",
    response_model=StatusResponse,
    responses=NOT_FOUND,
    tags=["Games"],
    summary="Get game status",
)
def get_status(game_id: UUID, service: Service) -> StatusResponse:
    """Returns the game status and winner if the game has concluded."""
    return service.get_status(game_id)


# --- ERROR TRANSLATION ---
def _game_not_found(request: Request, exc: Exception) -> JSONResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ErrorResponse(error="Game not found", code=GameNotFoundError.code).model_dump(),
    )


def _move_rejected(request: Request, exc: MoveError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=str(exc), code=exc.code).model_dump(),
    )


def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Payload and path are validated before the game is looked up, so a malformed move on a finished game is a 422."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    cause = first.get("ctx", {}).get("error")
    message = str(cause) if cause is not None else first.get("msg", "Invalid request")
    logger.info("%s %s invalid: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(error=message, code=InvalidRequestError.code).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GameNotFoundError, _game_not_found)
    app.add_exception_handler(MoveError, _move_rejected)
    app.add_exception_handler(RequestValidationError, _invalid_request)
