"""Tests for the move-result wire schema."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from boardshot.core import Move, MoveResult, MoveResultPayload, MovesRequest, Side


def test_payload_uses_camel_case_and_from_alias() -> None:
    result = MoveResult(Move("e2", "e4", "Center"), None)
    dumped = MoveResultPayload.from_result(result).model_dump(by_alias=True)

    assert dumped == {
        "whiteBestMove": {"from": "e2", "to": "e4", "comments": "Center"},
        "blackBestMove": None,
    }


def test_validate_converts_to_domain_result() -> None:
    payload = MoveResultPayload.model_validate(
        {
            "whiteBestMove": None,
            "blackBestMove": {"from": "g8", "to": "f6", "comments": "Develop knight"},
        }
    )
    result = payload.to_result()

    assert result.white_best_move is None
    assert result.best_move(Side.BLACK) == Move("g8", "f6", "Develop knight")


def test_missing_side_key_is_rejected() -> None:
    with pytest.raises(ValidationError):
        MoveResultPayload.model_validate({"whiteBestMove": None})


def test_non_string_fields_are_not_coerced() -> None:
    with pytest.raises(ValidationError):
        MoveResultPayload.model_validate(
            {
                "whiteBestMove": {"from": 52, "to": "e4", "comments": ""},
                "blackBestMove": None,
            }
        )


def test_missing_move_subfield_is_rejected() -> None:
    with pytest.raises(ValidationError):
        MoveResultPayload.model_validate(
            {"whiteBestMove": {"from": "e2", "to": "e4"}, "blackBestMove": None}
        )


def test_unknown_top_level_keys_are_dropped() -> None:
    payload = MoveResultPayload.model_validate(
        {"whiteBestMove": None, "blackBestMove": None, "confidence": 0.9}
    )
    assert payload.to_result() == MoveResult(None, None)


def test_request_requires_non_empty_image() -> None:
    with pytest.raises(ValidationError):
        MovesRequest.model_validate({"imageBase64": ""})


def test_request_defaults_to_jpeg() -> None:
    request = MovesRequest.model_validate({"imageBase64": "aGk="})
    assert request.mime_type == "image/jpeg"


def test_snake_case_side_keys_are_rejected() -> None:
    with pytest.raises(ValidationError):
        MoveResultPayload.model_validate(
            {
                "white_best_move": {"from": "e2", "to": "e4", "comments": "x"},
                "black_best_move": None,
            }
        )


def test_from_must_use_wire_name() -> None:
    with pytest.raises(ValidationError):
        MoveResultPayload.model_validate(
            {
                "whiteBestMove": {"from_": "e2", "to": "e4", "comments": "x"},
                "blackBestMove": None,
            }
        )


def test_request_requires_camel_case_image_key() -> None:
    with pytest.raises(ValidationError):
        MovesRequest.model_validate({"image_base64": "aGk="})
