from http import HTTPStatus

import pytest

from agentforge.api_errors import ApiError
from agentforge.errors import (
    CircularBiasError,
    DatabaseError,
    NotFoundError,
    ParseError,
    RegressionGateFailed,
    ScoreGateFailed,
    StabilityGateFailed,
    ValidationError,
)


@pytest.mark.parametrize(
    "factory, status, code",
    [
        (ApiError.not_found, HTTPStatus.NOT_FOUND, "NOT_FOUND"),
        (ApiError.bad_request, HTTPStatus.BAD_REQUEST, "BAD_REQUEST"),
        (ApiError.internal, HTTPStatus.INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"),
        (ApiError.conflict, HTTPStatus.CONFLICT, "CONFLICT"),
        (ApiError.unprocessable, HTTPStatus.UNPROCESSABLE_ENTITY, "UNPROCESSABLE_ENTITY"),
    ],
)
def test_factories(factory, status, code):
    err = factory("boom")
    assert err.status == status
    assert err.code == code
    assert err.message == "boom"
    assert str(err) == "boom"


def test_to_response_body_shape():
    status, body = ApiError.not_found("Agent x not found").to_response()
    assert status == HTTPStatus.NOT_FOUND
    assert body == {"error": {"code": "NOT_FOUND", "message": "Agent x not found"}}


def test_from_not_found():
    source = NotFoundError("agent", "abc")
    err = ApiError.from_error(source)
    assert err.status == HTTPStatus.NOT_FOUND
    assert err.message == str(source)


@pytest.mark.parametrize(
    "source",
    [ValidationError("bad"), ParseError("bad yaml"), CircularBiasError("gpt-4o")],
)
def test_from_bad_request_errors(source):
    err = ApiError.from_error(source)
    assert err.status == HTTPStatus.BAD_REQUEST
    assert err.code == "BAD_REQUEST"
    assert err.message == str(source)


@pytest.mark.parametrize(
    "source",
    [
        ScoreGateFailed(0.82, 0.85, 0.03),
        RegressionGateFailed(0.9, 0.95),
        StabilityGateFailed(1, 3),
    ],
)
def test_from_gate_failures(source):
    err = ApiError.from_error(source)
    assert err.status == HTTPStatus.UNPROCESSABLE_ENTITY
    assert err.message == str(source)


def test_from_other_error_hides_details():
    err = ApiError.from_error(DatabaseError("connection refused at secret host"))
    assert err.status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert err.message == "An unexpected error occurred"
    assert "secret" not in err.to_response()[1]["error"]["message"]


def test_api_error_is_raisable():
    err = ApiError.conflict("dup")
    assert isinstance(err, Exception)
    assert err.code == "CONFLICT"
    assert err.status == HTTPStatus.CONFLICT
    with pytest.raises(ApiError, match="dup"):
        raise err