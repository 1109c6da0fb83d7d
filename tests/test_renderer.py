from formflow.outcomes import ApplicationFailure, ProtocolFailure, Success, TransportFailure
from formflow.renderer import ErrorView, ReceiptView
from tests.conftest import BOOKING, HOME_URL


def test_failure_renders_single_error(renderer, area, booking_spec):
    renderer.render(ApplicationFailure("Seat taken"), BOOKING, booking_spec)

    assert area.view == ErrorView("Seat taken")


def test_empty_failure_message_renders_generic_error(renderer, area, booking_spec):
    renderer.render(ProtocolFailure("", status_code=500), BOOKING, booking_spec)

    assert area.view == ErrorView("Error")


def test_booking_receipt_lists_every_field_and_total(renderer, area, booking_spec):
    renderer.render(Success({"ok": True}), BOOKING, booking_spec)

    view = area.view
    assert isinstance(view, ReceiptView)
    assert view.title == "Booking Details"
    assert dict(view.rows) == {
        "Name": "Sara Ahmed", "Movie": "Dune: Part Two", "Cinema": "VOX Red Sea Mall",
        "Date": "2026-10-19", "Time": "19:30", "Tickets": "3", "Seat": "Premium",
        "Popcorn": "Large", "Drink": "Water", "Offer": "None",
        "Email": "sara@example.com", "Phone": "0551234567",
    }
    assert view.total == 135
    assert view.total_text == "135 SAR"
    assert [a.label for a in view.actions] == ["Pay now", "Back to homepage"]
    assert not area.acknowledged


def test_receipt_is_built_from_payload_not_server_body(renderer, area, booking_spec):
    renderer.render(Success({"ok": True, "name": "Someone Else"}), BOOKING, booking_spec)

    assert dict(area.view.rows)["Name"] == "Sara Ahmed"


def test_total_is_tickets_times_price(renderer, area, booking_spec):
    for tickets in range(1, 11):
        renderer.render(Success(), dict(BOOKING, tickets=tickets), booking_spec)
        assert area.view.total == tickets * 45


def test_second_success_replaces_first_receipt(renderer, area, booking_spec):
    renderer.render(Success(), BOOKING, booking_spec)
    renderer.confirm()
    first = area.view

    renderer.render(Success(), dict(BOOKING, tickets=5), booking_spec)

    assert area.view is not first
    assert area.view.total == 225
    assert not area.acknowledged


def test_error_after_success_evicts_receipt(renderer, area, booking_spec):
    renderer.render(Success(), BOOKING, booking_spec)
    renderer.render(TransportFailure("Server error. Try again."), BOOKING, booking_spec)

    assert area.view == ErrorView("Server error. Try again.")
    assert area.receipt is None


def test_confirm_reveals_acknowledgement_in_place(renderer, area, navigator, booking_spec):
    renderer.render(Success(), BOOKING, booking_spec)
    receipt = area.view

    renderer.on_action("confirm")

    assert area.acknowledged
    assert area.view is receipt
    assert receipt.acknowledgement == "Payment successful"
    navigator.assert_not_called()


def test_confirm_without_receipt_does_nothing(renderer, area):
    renderer.render_error("nope")
    renderer.confirm()

    assert not area.acknowledged


def test_home_action_navigates(renderer, navigator, booking_spec):
    renderer.render(Success(), BOOKING, booking_spec)

    renderer.on_action("home")

    navigator.assert_called_once_with(HOME_URL)


def test_contact_confirmation_has_no_total(renderer, area, contact_spec):
    payload = {
        "first_name": "Sara", "last_name": "Ahmed", "gender": "female",
        "mobile": "0551234567", "dob": "2000-05-01", "email": "sara@example.com",
        "location": "jed", "message": "Hello there",
    }

    renderer.render(Success({"ok": True}), payload, contact_spec)

    view = area.view
    assert view.title == "Message Details"
    assert view.total is None and view.total_text is None
    assert len(view.rows) == 8
    assert view.acknowledgement == "Message saved successfully!"
