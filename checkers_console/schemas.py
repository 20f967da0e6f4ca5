from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from checkers_core.pieces import Cell, Player


class ConsoleConfig(BaseModel):
    player_a_symbol: str = Field(default="X", min_length=1, max_length=1)
    player_b_symbol: str = Field(default="O", min_length=1, max_length=1)
    empty_symbol: str = Field(default="□", min_length=1, max_length=1)
    light_symbol: str = Field(default="░", min_length=1, max_length=1)
    clear_screen: bool = True

    @field_validator("player_a_symbol", "player_b_symbol", "empty_symbol", "light_symbol")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if value.isspace():
            raise ValueError("Board symbols must be visible characters.")
        return value

    @model_validator(mode="after")
    def _distinct_symbols(self) -> "ConsoleConfig":
        symbols = [self.player_a_symbol, self.player_b_symbol, self.empty_symbol, self.light_symbol]
        if len(set(symbols)) != len(symbols):
            raise ValueError("Player, empty and light square symbols must all differ.")
        return self

    def with_overrides(self, **overrides: Any) -> "ConsoleConfig":
        merged = self.model_dump()
        for key, value in overrides.items():
            if value is not None:
                merged[key] = value
        return ConsoleConfig(**merged)

    def symbol_for(self, player: Player) -> str:
        return self.player_a_symbol if player is Player.A else self.player_b_symbol

    def glyph_for(self, cell: Cell) -> str:
        if cell is Cell.EMPTY:
            return self.empty_symbol
        return self.symbol_for(Player.from_marker(cell))
