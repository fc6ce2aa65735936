"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from listfetch.kernel.errors import (
    ApplicationError,
    BaseError,
    ClientError,
    ConnectionError,
    ControllerClosedError,
    ExternalServiceError,
    InfrastructureError,
    InvalidRequestError,
    InvalidResponseError,
    SerializationError,
    ServerError,
    TimeoutError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        assert BaseError("m", detail={"page": 2}).to_dict() == {
            "code": "base_error",
            "message": "m",
            "detail": {"page": 2},
        }

    def test_chained_cause_is_reported(self) -> None:
        cause = ValueError("bad json")
        try:
            raise BaseError("decode failed") from cause
        except BaseError as exc:
            err = exc
        assert err.to_dict()["cause"] == repr(cause)

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("boom")))
        assert payload["message"] == "boom"

    def test_repr(self) -> None:
        assert repr(BaseError("boom")) == "BaseError(code='base_error', message='boom')"


class TestApplicationErrors:
    def test_invalid_request(self) -> None:
        err = InvalidRequestError("bad url")
        assert isinstance(err, ApplicationError)
        assert err.code == "invalid_request"

    def test_controller_closed(self) -> None:
        err = ControllerClosedError("characters")
        assert err.name == "characters"
        assert "characters" in err.message
        assert err.code == "controller_closed"


class TestInfrastructureErrors:
    @pytest.mark.parametrize(
        "err",
        [
            ConnectionError("svc"),
            TimeoutError("slow"),
            SerializationError("bad"),
            ClientError("svc", "nope", status_code=404),
            ServerError("svc", status_code=502),
            InvalidResponseError("svc", status_code=304),
        ],
    )
    def test_all_are_infrastructure(self, err: BaseError) -> None:
        assert isinstance(err, InfrastructureError)

    def test_connection_error_default_message(self) -> None:
        err = ConnectionError("https://rickandmortyapi.com")
        assert err.resource == "https://rickandmortyapi.com"
        assert "rickandmortyapi" in err.message

    def test_client_error_carries_message(self) -> None:
        err = ClientError("svc", "Character not found", status_code=404)
        assert isinstance(err, ExternalServiceError)
        assert err.message == "Character not found"
        assert err.status_code == 404
        assert err.code == "client_error"

    def test_server_error_carries_status(self) -> None:
        err = ServerError("svc", status_code=503)
        assert err.status_code == 503
        assert "503" in err.message
        assert err.code == "server_error"

    def test_serialization_payload_type(self) -> None:
        assert SerializationError("bad", payload_type="results").payload_type == "results"


class TestErrorDetail:
    def test_server_error_detail_names_service_and_status(self) -> None:
        assert ServerError("characters", status_code=503).to_dict() == {
            "code": "server_error",
            "message": "Server error 503 from 'characters'",
            "detail": {"service": "characters", "status_code": 503},
        }

    def test_client_error_detail(self) -> None:
        err = ClientError("characters", "Character not found", status_code=404)
        assert err.detail == {"service": "characters", "status_code": 404}

    def test_unset_fields_are_omitted(self) -> None:
        assert InvalidResponseError("characters").detail == {"service": "characters"}
        assert SerializationError("bad").detail == {}

    def test_explicit_detail_wins(self) -> None:
        err = ConnectionError("https://rickandmortyapi.com", detail={"resource": "redacted", "attempt": 1})
        assert err.detail == {"resource": "redacted", "attempt": 1}

    def test_controller_closed_detail(self) -> None:
        assert ControllerClosedError("characters").detail == {"name": "characters"}

    def test_payload_type_in_detail(self) -> None:
        assert SerializationError("bad", payload_type="results").detail == {"payload_type": "results"}
