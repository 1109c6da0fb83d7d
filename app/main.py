import json
import logging
from datetime import date, time

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv

from formflow.config import Settings
from formflow.controller import FormController, SubmitEvent
from formflow.forms import (
    CINEMAS,
    CITIES,
    DRINKS,
    GENDERS,
    MOVIES,
    OFFERS,
    POPCORN,
    SEATS,
    booking_form,
    contact_form,
)
from formflow.outcomes import Success
from formflow.renderer import ErrorView, ResultArea, ResultRenderer
from formflow.submitter import Submitter
from formflow.utils.calendar import create_ics, ics_filename
from formflow.utils.receipt_pdf import build_receipt_pdf

load_dotenv()
settings = Settings.from_env()
logging.basicConfig(level=settings.log_level,
                    format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Cinema Booking", page_icon="🎬", layout="centered")

st.title("🎬 Cinema Booking")

mode = st.sidebar.radio("Select Page", ["Book Tickets", "Contact Us"])


# ---------- Streamlit bindings ----------
class SessionFields:
    """Reads widget values out of st.session_state by field name."""

    def __init__(self, form_name, names):
        self.form_name = form_name
        self.names = names

    def key(self, name):
        return f"{self.form_name}.{name}"

    def read(self, name):
        value = st.session_state.get(self.key(name))
        if value is None:
            return ""
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, time):
            return value.strftime("%H:%M")
        return str(value)

    def reset(self):
        for name in self.names:
            st.session_state.pop(self.key(name), None)


def result_area(form_name):
    # Kept in session state so the mounted view survives reruns.
    key = f"{form_name}.result"
    if key not in st.session_state:
        st.session_state[key] = ResultArea()
    return st.session_state[key]


def navigate(url):
    # Streamlit cannot redirect server-side; let the browser do it.
    components.html(f"<script>window.parent.location.href = {json.dumps(url)};</script>", height=0)


def build_controller(spec):
    # One controller per form per session, so its in-flight flag spans reruns.
    key = f"{spec.name}.controller"
    if key not in st.session_state:
        area = result_area(spec.name)
        renderer = ResultRenderer(area, navigate, settings.home_url, settings.pricing())
        fields = SessionFields(spec.name, spec.fields)
        submitter = Submitter(settings.api_base_url)
        st.session_state[key] = FormController(spec, fields, submitter, renderer)
    return st.session_state[key]


def show_result(controller):
    area = controller.renderer.area
    view = area.view
    if view is None:
        return
    if isinstance(view, ErrorView):
        st.error(view.message)
        return

    st.subheader(view.title)
    st.table(pd.DataFrame(view.rows, columns=["Field", "Value"]).set_index("Field"))
    if view.total_text:
        st.markdown(f"**Total:** {view.total_text}")

    confirm, home = view.actions
    col1, col2 = st.columns(2)
    with col1:
        if st.button(confirm.label, key=f"{controller.spec.name}.{confirm.key}"):
            controller.renderer.on_action(confirm.key)
    with col2:
        if st.button(home.label, key=f"{controller.spec.name}.{home.key}"):
            controller.renderer.on_action(home.key)

    if area.acknowledged:
        st.success(view.acknowledgement)

    if controller.spec.priced:
        dl1, dl2 = st.columns(2)
        with dl1:
            st.download_button("📄 Download receipt (PDF)", build_receipt_pdf(view),
                               file_name="booking_receipt.pdf", mime="application/pdf")
        with dl2:
            st.download_button("📅 Add to calendar (.ics)", create_ics(view.payload),
                               file_name=ics_filename(view.payload), mime="text/calendar")


def handle_submit(controller):
    outcome = controller.on_submit(SubmitEvent(form=controller.spec.name))
    if isinstance(outcome, Success):
        # fields were cleared on success; rerun so the widgets pick that up
        st.rerun()
    return outcome


# ========================
#  BOOKING SECTION
# ========================
if mode == "Book Tickets":
    spec = booking_form(policy=settings.pricing())
    controller = build_controller(spec)
    k = SessionFields(spec.name, spec.fields).key

    with st.form("bookingForm", clear_on_submit=False):
        st.subheader("Book your tickets")
        col1, col2 = st.columns(2)
        with col1:
            st.selectbox("Movie", MOVIES, index=None, placeholder="Select a movie", key=k("movie"))
            st.date_input("Date", value=None, key=k("date"))
            st.number_input("Tickets", min_value=0, max_value=20, step=1, value=1, key=k("tickets"))
            st.selectbox("Popcorn", POPCORN, index=None, key=k("popcorn"))
            st.selectbox("Offer", OFFERS, index=None, key=k("offer"))
        with col2:
            st.selectbox("Cinema", CINEMAS, index=None, placeholder="Select cinema", key=k("cinema"))
            st.time_input("Time", value=None, key=k("time"))
            st.selectbox("Seat", SEATS, index=None, key=k("seat"))
            st.selectbox("Drink", DRINKS, index=None, key=k("drink"))
        st.text_input("Full name", key=k("name"))
        st.text_input("Email", key=k("email"))
        st.text_input("Phone (05xxxxxxxx)", key=k("phone"))
        submitted = st.form_submit_button("Confirm Booking")

    if submitted:
        handle_submit(controller)

    show_result(controller)

# ========================
#  CONTACT SECTION
# ========================
if mode == "Contact Us":
    spec = contact_form()
    controller = build_controller(spec)
    k = SessionFields(spec.name, spec.fields).key

    with st.form("contactForm", clear_on_submit=False):
        st.subheader("Contact us")
        col1, col2 = st.columns(2)
        with col1:
            st.text_input("First name", key=k("first_name"))
            st.text_input("Mobile", key=k("mobile"))
        with col2:
            st.text_input("Last name", key=k("last_name"))
            st.date_input("Date of birth", value=None, min_value=date(1900, 1, 1),
                          max_value=date.today(), key=k("dob"))
        st.radio("Gender", GENDERS, index=None, horizontal=True, key=k("gender"))
        st.text_input("Email", key=k("email"))
        st.selectbox("City", list(CITIES), index=None, format_func=CITIES.get, key=k("location"))
        st.text_area("Message", height=150, key=k("message"))
        submitted = st.form_submit_button("Send")

    if submitted:
        handle_submit(controller)

    show_result(controller)
