from unittest.mock import Mock

import requests

from contact_api.client import ContactAPI

_EMPTY = object()


def _response(status_code, body=_EMPTY, text=None):
    """Build a fake ``requests.Response``.

    ``body`` is the decoded JSON payload (``None`` means a literal JSON
    ``null``); ``text`` gives a non-JSON body instead.
    """
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.content = b"" if body is _EMPTY and text is None else b"body"
    response.text = text or ""
    if body is _EMPTY:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


def _client(response=None, exc=None, **kwargs):
    session = Mock(spec=requests.Session)
    if exc is not None:
        session.request.side_effect = exc
    else:
        session.request.return_value = response
    return ContactAPI(base_url="http://contacts.test/", session=session, **kwargs), session


def test_get_contact_returns_payload():
    body = {"name": "Pete", "number": "5031234567", "type": "Person"}
    api, session = _client(_response(200, body))

    contact, error = api.get_contact("Pete")

    assert contact == body
    assert error is None
    session.request.assert_called_once_with(
        method="GET",
        url="http://contacts.test/contact",
        params={"name": "Pete"},
        json=None,
        timeout=15,
    )


def test_get_unknown_contact_returns_none_without_error():
    api, _ = _client(_response(200, None))

    contact, error = api.get_contact("Nobody")

    assert contact is None
    assert error is None


def test_create_contact_success():
    api, session = _client(_response(204))
    payload = {"name": "Pete", "number": "5031234567", "type": "Person"}

    ok, error = api.create_contact(payload)

    assert ok is True
    assert error is None
    assert session.request.call_args.kwargs["method"] == "POST"
    assert session.request.call_args.kwargs["json"] == payload


def test_create_contact_validation_error_is_returned():
    api, _ = _client(_response(400, {"detail": "Business contacts must have a number."}))

    ok, error = api.create_contact({"name": "Acme", "number": "", "type": "Business"})

    assert ok is False
    assert error == {"status_code": 400, "message": "Business contacts must have a number."}


def test_non_json_error_body_falls_back_to_text():
    api, _ = _client(_response(502, text="Bad Gateway"))

    contact, error = api.get_contact("Pete")

    assert contact is None
    assert error == {"status_code": 502, "message": "Bad Gateway"}


def test_transport_failure_is_returned_as_error():
    api, _ = _client(exc=requests.ConnectionError("connection refused"))

    ok, error = api.create_contact({"name": "Pete"})

    assert ok is False
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_custom_contact_path_and_timeout():
    api, session = _client(_response(200, None), contact_path="api/v1/contact/", timeout=3)

    api.get_contact("Pete")

    assert session.request.call_args.kwargs["url"] == "http://contacts.test/api/v1/contact"
    assert session.request.call_args.kwargs["timeout"] == 3
