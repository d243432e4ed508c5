"""Tests for folio.contact.form."""

from unittest.mock import MagicMock

import pytest
import requests

from folio.contact.form import (
    FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
    ContactClient,
    ContactValidationError,
    validate_contact_form,
)

VALID = {
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "subject": "collaboration",
    "message": "Interested in your acoustic work.",
}


def _fields(**overrides):
    return {**VALID, **overrides}


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def test_valid_form():
    assert validate_contact_form(VALID) == {}


def test_all_empty():
    errors = validate_contact_form({})
    assert errors == {
        "name": "Please enter your name",
        "email": "Please enter your email",
        "subject": "Please select a subject",
        "message": "Please enter your message",
    }


def test_whitespace_name_rejected():
    assert validate_contact_form(_fields(name="   ")) == {"name": "Please enter your name"}


@pytest.mark.parametrize("email", ["ada", "ada@", "ada@example", "a da@example.com"])
def test_invalid_email(email):
    assert validate_contact_form(_fields(email=email)) == {
        "email": "Please enter a valid email address"
    }


def test_short_message():
    assert validate_contact_form(_fields(message="  too short ")) == {
        "message": "Message should be at least 10 characters long"
    }


def test_message_exactly_ten_characters():
    assert validate_contact_form(_fields(message="0123456789")) == {}


# ---------------------------------------------------------------------------
# ContactClient
# ---------------------------------------------------------------------------


def _response(ok=True, status=200, json_data=None, json_error=False):
    response = MagicMock()
    response.ok = ok
    response.status_code = status
    if json_error:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = json_data
    return response


def test_client_requires_endpoint():
    with pytest.raises(ValueError):
        ContactClient("")


def test_submit_success():
    session = MagicMock()
    session.post.return_value = _response()
    client = ContactClient("https://formspree.io/f/abc", timeout=5, session=session)

    result = client.submit(VALID)

    assert result.ok
    assert result.message == SUCCESS_MESSAGE
    assert result.status_code == 200
    session.post.assert_called_once_with(
        "https://formspree.io/f/abc",
        data=VALID,
        headers={"Accept": "application/json"},
        timeout=5,
    )


def test_submit_invalid_does_not_post():
    session = MagicMock()
    client = ContactClient("https://formspree.io/f/abc", session=session)
    with pytest.raises(ContactValidationError) as exc:
        client.submit(_fields(email="bad"))
    assert exc.value.errors == {"email": "Please enter a valid email address"}
    session.post.assert_not_called()


def test_submit_http_error_with_detail():
    session = MagicMock()
    session.post.return_value = _response(ok=False, status=422, json_data={"error": "Spam detected"})
    result = ContactClient("https://x", session=session).submit(VALID)
    assert not result.ok
    assert result.message == FAILURE_MESSAGE
    assert result.status_code == 422
    assert result.detail == "Spam detected"


def test_submit_http_error_without_json():
    session = MagicMock()
    session.post.return_value = _response(ok=False, status=500, json_error=True)
    result = ContactClient("https://x", session=session).submit(VALID)
    assert result.detail == "Form submission failed"


def test_submit_http_error_non_dict_json():
    session = MagicMock()
    session.post.return_value = _response(ok=False, status=400, json_data=["nope"])
    result = ContactClient("https://x", session=session).submit(VALID)
    assert result.detail == "Form submission failed"


def test_submit_network_error():
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("down")
    result = ContactClient("https://x", session=session).submit(VALID)
    assert not result.ok
    assert result.message == FAILURE_MESSAGE
    assert result.status_code is None
    assert "down" in result.detail
