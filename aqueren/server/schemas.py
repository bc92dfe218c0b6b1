from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from aqueren.core.game import COLS, ROWS, Tile


class TileModel(BaseModel):
    row: int = Field(ge=0, lt=ROWS)
    col: int = Field(ge=0, lt=COLS)

    def to_tile(self) -> Tile:
        return Tile(self.row, self.col)


class PlaceTileRequest(BaseModel):
    """Body of POST /action: place a tile for the current turn holder."""

    tile: TileModel


class ActionRequest(BaseModel):
    """Body of POST /actions. The acting player is always the turn holder."""

    type: Literal["place_tile", "buy_stocks", "draw_tile", "found_chain"]
    tile: Optional[TileModel] = None
    hotels: List[Optional[str]] = Field(default_factory=list, max_length=3)
    hotel: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str


class ActionLogResponse(BaseModel):
    game_id: str
    actions: List[Dict[str, Any]]


class LegalActionsResponse(BaseModel):
    turn: int
    turn_state: str
    actions: List[str]
