"""JSON serialization helpers for board models.

Thin wrappers around Pydantic's built-in serialization so that the HTTP layer
and the command line can serialize boards without depending on Pydantic
internals.
"""

from __future__ import annotations

import typing

import pydantic

from .board import Board


def serialize_model(model: pydantic.BaseModel) -> dict[str, typing.Any]:
    """Return a JSON-serializable dict representation of any Pydantic model."""
    return model.model_dump(mode='json')


def serialize_to_json(model: pydantic.BaseModel, indent: int | None = None) -> str:
    """Serialize any Pydantic model to a JSON string."""
    return model.model_dump_json(indent=indent)


def deserialize_board(data: dict[str, typing.Any]) -> Board:
    """Deserialize a plain dict into a Board instance."""
    return Board.model_validate(data)


def board_from_json(json_str: str) -> Board:
    """Parse a JSON string back into a Board instance."""
    return Board.model_validate_json(json_str)
