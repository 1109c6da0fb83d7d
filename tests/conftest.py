import json
from datetime import date
from unittest.mock import MagicMock

import pytest
import requests

from formflow.forms import booking_form, contact_form
from formflow.renderer import ResultArea, ResultRenderer
from formflow.submitter import Submitter

TODAY = date(2026, 10, 19)
HOME_URL = "/HTML/HomePage.html"

# A booking payload as the validator produces it.
BOOKING = {
    "movie": "Dune: Part Two", "cinema": "VOX Red Sea Mall", "date": "2026-10-19",
    "time": "19:30", "tickets": 3, "seat": "Premium", "popcorn": "Large",
    "drink": "Water", "offer": "None", "name": "Sara Ahmed",
    "email": "sara@example.com", "phone": "0551234567",
}


class FakeFields:
    """In-memory field source: read(name) and reset()."""

    def __init__(self, values):
        self.values = dict(values)
        self.reset_calls = 0

    def read(self, name):
        return self.values.get(name, "")

    def reset(self):
        self.values = {}
        self.reset_calls += 1


def make_response(status_code=200, body=None, text=None):
    resp = requests.Response()
    resp.status_code = status_code
    if text is None:
        text = "" if body is None else json.dumps(body)
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def booking_values():
    return {
        "movie": "Dune: Part Two",
        "cinema": "VOX Red Sea Mall",
        "date": "2026-10-19",
        "time": "19:30",
        "tickets": "3",
        "seat": "Premium",
        "popcorn": "Large",
        "drink": "Water",
        "offer": "None",
        "name": "Sara Ahmed",
        "email": "Sara@Example.com",
        "phone": "0551234567",
    }


@pytest.fixture
def contact_values():
    return {
        "first_name": "Sara",
        "last_name": "Ahmed",
        "gender": "female",
        "mobile": "+966551234567",
        "dob": "2000-05-01",
        "email": "sara@example.com",
        "location": "jed",
        "message": "Loved the new screens!",
    }


@pytest.fixture
def booking_spec():
    return booking_form(today=lambda: TODAY)


@pytest.fixture
def contact_spec():
    return contact_form(today=lambda: TODAY)


@pytest.fixture
def session():
    s = MagicMock(spec=requests.Session)
    s.post.return_value = make_response(200, {"ok": True})
    return s


@pytest.fixture
def submitter(session):
    return Submitter("http://api.test", session=session)


@pytest.fixture
def navigator():
    return MagicMock()


@pytest.fixture
def area():
    return ResultArea()


@pytest.fixture
def renderer(area, navigator):
    return ResultRenderer(area, navigator, HOME_URL)
