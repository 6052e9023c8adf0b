"""Unit tests for the error translator."""

import pytest
from bson.errors import InvalidId
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from travestore.errors import map_error
from travestore.exceptions import AppError, InvalidIdError, NotFoundError, ValidationError
from travestore.models import ProductDocument


def _schema_error() -> PydanticValidationError:
    with pytest.raises(PydanticValidationError) as info:
        ProductDocument.new({"name": "", "category": "Apparel", "price": -1, "imageUrl": "x"})
    return info.value


def test_invalid_object_id_maps_to_resource_not_found() -> None:
    status, body = map_error(InvalidId("'abc' is not a valid ObjectId"))
    assert status == 404
    assert body.model_dump() == {"success": False, "error": "Resource not found"}


def test_duplicate_key_maps_to_400() -> None:
    exc = DuplicateKeyError("E11000 duplicate key error collection: ecommerce.products", 11000)
    status, body = map_error(exc)
    assert status == 400
    assert body.error == "Duplicate field value entered"


def test_schema_validation_lists_every_field_message() -> None:
    status, body = map_error(_schema_error())
    assert status == 400
    assert isinstance(body.error, list)
    assert len(body.error) == 2
    assert body.error[0].startswith("name: ")
    assert body.error[1].startswith("price: ")


def test_request_validation_strips_location_prefix() -> None:
    exc = RequestValidationError(
        [
            {
                "type": "float_parsing",
                "loc": ("body", "price"),
                "msg": "Input should be a valid number",
            }
        ]
    )
    status, body = map_error(exc)
    assert status == 400
    assert body.error == ["price: Input should be a valid number"]


def test_request_validation_without_field_keeps_bare_message() -> None:
    exc = RequestValidationError(
        [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error"}]
    )
    _, body = map_error(exc)
    assert body.error == ["JSON decode error"]


@pytest.mark.parametrize(
    "exc, status, message",
    [
        (ValidationError("Price cannot be negative"), 400, "Price cannot be negative"),
        (InvalidIdError("Invalid product ID"), 400, "Invalid product ID"),
        (NotFoundError("Product not found"), 404, "Product not found"),
        (AppError("Teapot", 418), 418, "Teapot"),
    ],
    ids=["validation", "invalid_id", "not_found", "explicit_status"],
)
def test_app_errors_keep_raiser_status_and_message(
    exc: AppError, status: int, message: str
) -> None:
    got_status, body = map_error(exc)
    assert got_status == status
    assert body.error == message


def test_http_exception_keeps_status_and_detail() -> None:
    status, body = map_error(StarletteHTTPException(status_code=405, detail="Method Not Allowed"))
    assert status == 405
    assert body.error == "Method Not Allowed"


def test_unknown_error_uses_its_message() -> None:
    status, body = map_error(RuntimeError("connection refused"))
    assert status == 500
    assert body.model_dump() == {"success": False, "error": "connection refused"}


def test_unknown_error_without_message_is_server_error() -> None:
    status, body = map_error(Exception())
    assert status == 500
    assert body.error == "Server Error"
