# tests/test_client.py
from unittest.mock import MagicMock

import requests

from palevel_client import PaLevelAPI


def make_response(status_code, body):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.content = b"x"
    response.json.return_value = body
    response.text = str(body)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


def make_client(response=None, exc=None):
    session = MagicMock(spec=requests.Session)
    if exc is not None:
        session.request.side_effect = exc
    else:
        session.request.return_value = response
    return PaLevelAPI(base_url="http://localhost:5000/", session=session), session


def test_get_welcome_message():
    api, session = make_client(make_response(200, {"message": "Welcome to PaLevel API!"}))
    message, error = api.get_welcome_message()
    assert message == "Welcome to PaLevel API!"
    assert error is None
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://localhost:5000/api/hello"


def test_list_listings():
    listing = {"id": 1, "name": "Room1", "location": "Lusaka", "price": "500", "contact": "0977000000"}
    api, _ = make_client(make_response(200, [listing]))
    listings, error = api.list_listings()
    assert listings == [listing]
    assert error is None


def test_create_listing_sends_all_fields():
    created = {"id": 7, "name": "Room1", "location": "Lusaka", "price": "500", "contact": "0977000000"}
    api, session = make_client(make_response(201, created))
    listing, error = api.create_listing("Room1", "Lusaka", "500", "0977000000")
    assert listing == created
    assert error is None
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "http://localhost:5000/api/listings"
    assert kwargs["json"] == {"name": "Room1", "location": "Lusaka", "price": "500", "contact": "0977000000"}


def test_create_listing_reports_validation_error():
    api, _ = make_client(make_response(400, {"error": "All fields are required."}))
    listing, error = api.create_listing("Room2", "", "500", "0977000000")
    assert listing is None
    assert error == {"status_code": 400, "message": "All fields are required."}


def test_network_failure_is_reported_not_raised():
    api, _ = make_client(exc=requests.ConnectionError("connection refused"))
    listings, error = api.list_listings()
    assert listings == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
