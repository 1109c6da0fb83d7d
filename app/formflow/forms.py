# app/formflow/forms.py
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Tuple

from formflow.outcomes import FormPayload, ValidationResult
from formflow.policy import DEFAULT_POLICY, PricingPolicy
from formflow.predicates import (
    age_from_dob,
    is_alpha_name,
    is_email,
    is_mobile_ksa,
    is_not_past,
    is_time_24h,
    parse_int,
    within,
)
from formflow.rules import FieldRule, FormState, read_state, validate
from formflow.sanitizer import normalize_email, sanitize, trim

Today = Callable[[], date]

# Options offered by the page. Validation only requires a selection,
# the backend decides whether a value is acceptable.
MOVIES = ["Dune: Part Two", "Inside Out 2", "Oppenheimer", "The Wild Robot"]
CINEMAS = ["VOX Red Sea Mall", "Muvi Riyadh Park", "AMC Al Khobar"]
SEATS = ["Standard", "Premium", "VIP"]
POPCORN = ["None", "Small", "Medium", "Large"]
DRINKS = ["None", "Water", "Soft drink", "Iced tea"]
OFFERS = ["None", "Student", "Family pack", "Weekday saver"]

GENDERS = ("female", "male")
CITIES = {"jed": "Jeddah", "ruh": "Riyadh", "khobar": "Khobar"}


@dataclass(frozen=True)
class FormSpec:
    """Everything that differs between the booking and the contact form."""
    name: str
    endpoint: str
    fields: Tuple[str, ...]
    rules: Tuple[FieldRule, ...]
    build_payload: Callable[[FormState], FormPayload]
    labels: Tuple[Tuple[str, str], ...]
    receipt_title: str
    confirm_label: str
    acknowledgement: str
    failure_message: str
    server_error_message: str
    priced: bool = False

    def read(self, source) -> dict:
        return read_state(source, self.fields)

    def validate(self, source) -> ValidationResult:
        return validate(self.rules, self.read(source), self.build_payload)


# ---------- Booking ----------

BOOKING_FIELDS = (
    "movie", "cinema", "date", "time", "tickets", "seat",
    "popcorn", "drink", "offer", "name", "email", "phone",
)


def _selected(field):
    return lambda s: bool(sanitize(s.get(field)))


def booking_rules(today: Today = date.today,
                  policy: Optional[PricingPolicy] = None) -> Tuple[FieldRule, ...]:
    policy = policy or DEFAULT_POLICY

    def tickets_ok(s):
        n = parse_int(s.get("tickets"))
        return n is not None and policy.MIN_TICKETS <= n <= policy.MAX_TICKETS

    return (
        FieldRule("movie", _selected("movie"), "Select a movie"),
        FieldRule("cinema", _selected("cinema"), "Select cinema"),
        FieldRule("date",
                  lambda s: bool(trim(s.get("date"))) and is_not_past(s.get("date"), today()),
                  "Choose a valid date (today or future)"),
        FieldRule("time", lambda s: is_time_24h(sanitize(s.get("time"))),
                  "Select a valid time (HH:MM 24h)"),
        FieldRule("tickets", tickets_ok,
                  f"Tickets must be {policy.MIN_TICKETS}–{policy.MAX_TICKETS}"),
        FieldRule("seat", _selected("seat"), "Select seat type"),
        FieldRule("popcorn", _selected("popcorn"), "Select popcorn size"),
        FieldRule("drink", _selected("drink"), "Select drink"),
        FieldRule("offer", _selected("offer"), "Select an offer"),
        FieldRule("name", lambda s: len(sanitize(s.get("name"))) >= 2, "Enter full name"),
        FieldRule("email", lambda s: is_email(normalize_email(s.get("email"))),
                  "Enter a valid email"),
        FieldRule("phone", lambda s: is_mobile_ksa(sanitize(s.get("phone"))),
                  "Mobile must be 05xxxxxxxx or +9665xxxxxxxx"),
    )


def booking_payload(s: FormState) -> FormPayload:
    return {
        "movie": sanitize(s.get("movie")),
        "cinema": sanitize(s.get("cinema")),
        "date": trim(s.get("date")),
        "time": sanitize(s.get("time")),
        "tickets": parse_int(s.get("tickets")),
        "seat": sanitize(s.get("seat")),
        "popcorn": sanitize(s.get("popcorn")),
        "drink": sanitize(s.get("drink")),
        "offer": sanitize(s.get("offer")),
        "name": sanitize(s.get("name")),
        "email": normalize_email(s.get("email")),
        "phone": sanitize(s.get("phone")),
    }


def booking_form(today: Today = date.today,
                 policy: Optional[PricingPolicy] = None) -> FormSpec:
    return FormSpec(
        name="booking",
        endpoint="/api/book",
        fields=BOOKING_FIELDS,
        rules=booking_rules(today, policy),
        build_payload=booking_payload,
        labels=(
            ("name", "Name"), ("movie", "Movie"), ("cinema", "Cinema"),
            ("date", "Date"), ("time", "Time"), ("tickets", "Tickets"),
            ("seat", "Seat"), ("popcorn", "Popcorn"), ("drink", "Drink"),
            ("offer", "Offer"), ("email", "Email"), ("phone", "Phone"),
        ),
        receipt_title="Booking Details",
        confirm_label="Pay now",
        acknowledgement="Payment successful",
        failure_message="Booking failed",
        server_error_message="Server error. Try again.",
        priced=True,
    )


# ---------- Contact ----------

CONTACT_FIELDS = (
    "first_name", "last_name", "gender", "mobile",
    "dob", "email", "location", "message",
)


def contact_rules(today: Today = date.today) -> Tuple[FieldRule, ...]:
    def age_ok(s):
        age = age_from_dob(s.get("dob"), today())
        return age is not None and 13 <= age <= 100

    def email_ok(s):
        email = trim(s.get("email"))
        return is_email(email) and within(email, 3, 150)

    return (
        FieldRule("first_name", lambda s: is_alpha_name(s.get("first_name")),
                  "First name must be 2–100 letters."),
        FieldRule("last_name", lambda s: is_alpha_name(s.get("last_name")),
                  "Last name must be 2–100 letters."),
        FieldRule("gender", lambda s: trim(s.get("gender")) in GENDERS, "Pick a gender."),
        FieldRule("mobile", lambda s: is_mobile_ksa(s.get("mobile")),
                  "Mobile must be KSA format (05xxxxxxxx or +9665xxxxxxxx)."),
        FieldRule("dob", age_ok, "Enter a valid birth date (age 13–100)."),
        FieldRule("email", email_ok, "Enter a valid email (max 150 chars)."),
        FieldRule("location", lambda s: trim(s.get("location")) in CITIES, "Pick a city."),
        FieldRule("message", lambda s: within(trim(s.get("message")), 5, 2000),
                  "Message must be 5–2000 characters."),
    )


def contact_payload(s: FormState) -> FormPayload:
    return {
        "first_name": sanitize(s.get("first_name")),
        "last_name": sanitize(s.get("last_name")),
        "gender": trim(s.get("gender")),
        "mobile": sanitize(s.get("mobile")),
        "dob": trim(s.get("dob")),
        "email": normalize_email(s.get("email")),
        "location": trim(s.get("location")),
        "message": sanitize(s.get("message")),
    }


def contact_form(today: Today = date.today) -> FormSpec:
    return FormSpec(
        name="contact",
        endpoint="/api/contact",
        fields=CONTACT_FIELDS,
        rules=contact_rules(today),
        build_payload=contact_payload,
        labels=(
            ("first_name", "First Name"), ("last_name", "Last Name"),
            ("gender", "Gender"), ("mobile", "Mobile"), ("dob", "Date of Birth"),
            ("email", "Email"), ("location", "City"), ("message", "Message"),
        ),
        receipt_title="Message Details",
        confirm_label="Confirm",
        acknowledgement="Message saved successfully!",
        failure_message="Submission failed",
        server_error_message="Server error. Please try again.",
    )
