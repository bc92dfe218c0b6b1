from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from aqueren import __version__
from aqueren.core.exceptions import DecodeError, InvalidActionError, ReplayInconsistencyError
from aqueren.core.game import GameConfig, action_to_dict, get_legal_actions
from aqueren.core.snapshot import serialize_snapshot
from aqueren.data import close_db, get_settings as get_db_settings, init_db
from aqueren.services import GameService, parse_hotels
from aqueren.settings import get_server_settings

from .schemas import (
    ActionLogResponse,
    ActionRequest,
    ErrorResponse,
    LegalActionsResponse,
    PlaceTileRequest,
)

logger = logging.getLogger(__name__)

ERROR_RESPONSES: Dict[int | str, Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Malformed action payload"},
    409: {"model": ErrorResponse, "description": "Action not legal in the current state"},
    500: {"model": ErrorResponse, "description": "Stored action log no longer replays"},
}


def _build_service() -> GameService:
    """Create the service described by the environment settings."""
    settings = get_server_settings()
    config = GameConfig(seed=settings.seed)
    if get_db_settings().enabled:
        init_db()
        return GameService.open_persistent(config, game_id=settings.game_id)
    return GameService.new_game(config, game_id=settings.game_id)


def create_app(service: Optional[GameService] = None) -> FastAPI:
    """
    Build the HTTP application.

    Args:
        service: Game to serve. When omitted, one is created at startup from
            the environment (and persisted if DATABASE_URL is set).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_db = False
        if service is None:
            logger.info("Starting Aqueren server...")
            app.state.service = _build_service()
            owns_db = get_db_settings().enabled
        else:
            app.state.service = service
        logger.info(f"Serving game {app.state.service.game_id}")

        yield

        if owns_db:
            close_db()
        logger.info("Shutdown complete")

    app = FastAPI(title="Aqueren Server", version=__version__, lifespan=lifespan)

    @app.exception_handler(InvalidActionError)
    async def invalid_action_handler(request: Request, exc: InvalidActionError):
        return JSONResponse(status_code=409, content={"error": str(exc)})

    @app.exception_handler(DecodeError)
    async def decode_error_handler(request: Request, exc: DecodeError):
        logger.info(f"Bad action payload on {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Bad action payload on {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": _describe_validation(exc)})

    @app.exception_handler(ReplayInconsistencyError)
    async def replay_error_handler(request: Request, exc: ReplayInconsistencyError):
        logger.error(f"Action log for {request.app.state.service.game_id} is corrupt: {exc}")
        return JSONResponse(status_code=500, content={"error": f"Internal consistency fault: {exc}"})

    app.include_router(_routes())
    return app


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "Bad action: " + "; ".join(parts)


def get_game_service(request: Request) -> GameService:
    return request.app.state.service


def _routes() -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    def health():
        return {"status": "ok"}

    @router.get("/state")
    def get_state(service: GameService = Depends(get_game_service)):
        return serialize_snapshot(service.current_state())

    @router.post("/action", responses=ERROR_RESPONSES)
    def place_tile(req: PlaceTileRequest, service: GameService = Depends(get_game_service)):
        game = service.place_tile(req.tile.to_tile())
        return serialize_snapshot(game)

    @router.post("/actions", responses=ERROR_RESPONSES)
    def apply_action(req: ActionRequest, service: GameService = Depends(get_game_service)):
        if req.type == "place_tile":
            if req.tile is None:
                raise DecodeError("place_tile needs a tile")
            game = service.place_tile(req.tile.to_tile())
        elif req.type == "buy_stocks":
            game = service.buy_stocks(parse_hotels(req.hotels))
        elif req.type == "found_chain":
            if req.hotel is None:
                raise DecodeError("found_chain needs a hotel")
            (hotel,) = parse_hotels([req.hotel])
            game = service.found_chain(hotel)
        else:
            game = service.draw_tile()
        return serialize_snapshot(game)

    @router.get("/legal_actions", response_model=LegalActionsResponse)
    def legal_actions(service: GameService = Depends(get_game_service)):
        game = service.current_state()
        acts = get_legal_actions(game, game.turn)
        return LegalActionsResponse(
            turn=game.turn.value,
            turn_state=game.turn_state.value,
            actions=[a.value for a in acts],
        )

    @router.get("/log", response_model=ActionLogResponse)
    def action_log(service: GameService = Depends(get_game_service)):
        return ActionLogResponse(
            game_id=service.game_id,
            actions=[action_to_dict(a) for a in service.actions()],
        )

    return router


app = create_app()


def main() -> None:
    """Run the server with settings from the environment."""
    import uvicorn

    settings = get_server_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting server on {settings.host}:{settings.port}")
    uvicorn.run("aqueren.server.app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
