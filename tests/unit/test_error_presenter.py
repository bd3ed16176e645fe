from clients.users_api_sdk.errors import ApiError

from user_desk.app.error_presenter import build_error_payload


def test_api_error_payload_keeps_code_status_and_body() -> None:
    error = ApiError(code="HTTP_500", message="boom", trace_id="trace-1", status_code=500)

    payload = build_error_payload("create", error)

    assert payload == {"action": "create", "code": "HTTP_500", "status_code": 500, "message": "boom"}


def test_unexpected_error_is_reported_as_internal() -> None:
    network = build_error_payload("fetch", ApiError(code="NETWORK_ERROR", message="ConnectError: refused"))
    internal = build_error_payload("update", KeyError("id"))

    assert network["code"] == "NETWORK_ERROR"
    assert network["status_code"] is None
    assert internal["code"] == "INTERNAL_ERROR"
    assert internal["message"] == "KeyError: 'id'"
