import os

import pandas as pd
import requests
import streamlit as st

from app.models.db_models import Booking
from app.services.list_view import SORT_OPTIONS, build_display_list

API_URL = os.getenv("BOOKING_API_URL", "http://localhost:8000")

# Page Config
st.set_page_config(
    page_title="Bookings Admin",
    page_icon="📅",
    layout="wide"
)

st.title("Admin Dashboard")

def api_headers():
    return {"X-Admin-Token": st.session_state.get("admin_token", "")}

def login_form():
    with st.form("admin_login"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted:
        try:
            response = requests.post(
                f"{API_URL}/api/admin/login",
                json={"username": username, "password": password},
                timeout=10
            )
        except requests.RequestException as e:
            st.error(f"Could not reach the booking API: {e}")
            return

        body = response.json()
        if body.get("success"):
            st.session_state["admin_token"] = body["data"]["token"]
            st.rerun()
        else:
            st.error(body.get("message", "Invalid username or password"))

def load_bookings():
    try:
        response = requests.get(f"{API_URL}/api/bookings", headers=api_headers(), timeout=10)
    except requests.RequestException as e:
        st.error(f"Failed to load bookings: {e}")
        return None

    if response.status_code == 401:
        st.session_state.pop("admin_token", None)
        st.rerun()

    body = response.json()
    if not body.get("success"):
        st.error(body.get("message", "Failed to load bookings. Please try again."))
        return None
    return [Booking.model_validate(item) for item in body.get("data", [])]

def bookings_frame(bookings):
    return pd.DataFrame([
        {
            "S.No": index,
            "Name": b.name,
            "Email": b.email,
            "Phone": b.phone,
            "Date": b.date,
            "Time Slot": b.time_slot,
            "Booked On": b.created_at,
            "ID": b.id,
        }
        for index, b in enumerate(bookings, start=1)
    ])

if "admin_token" not in st.session_state:
    login_form()
    st.stop()

col_refresh, col_logout = st.columns([1, 1])
if col_refresh.button("Refresh"):
    st.rerun()
if col_logout.button("Logout"):
    requests.post(f"{API_URL}/api/admin/logout", headers=api_headers(), timeout=10)
    st.session_state.pop("admin_token", None)
    st.rerun()

bookings = load_bookings()

if bookings:
    search = st.text_input("Search by name, email, phone, date...")
    labels = [label for _, _, label in SORT_OPTIONS]
    choice = st.selectbox("Sort by", labels, index=0)
    field, direction, _ = SORT_OPTIONS[labels.index(choice)]

    visible = build_display_list(bookings, search, field, direction)

    st.metric("Total Bookings", len(bookings))
    st.caption(f'Showing results for "{search}"' if search else f"Showing all {len(bookings)} bookings")

    if visible:
        st.dataframe(
            bookings_frame(visible),
            use_container_width=True,
            hide_index=True,
            column_config={
                "Booked On": st.column_config.DatetimeColumn("Booked On", format="D MMM YYYY, h:mm a"),
            }
        )
    else:
        st.info("No bookings match your search.")

    export = requests.get(f"{API_URL}/api/bookings/export", headers=api_headers(), timeout=30)
    if export.ok:
        filename = export.headers.get("Content-Disposition", "").split("filename=")[-1] or "bookings.xlsx"
        st.download_button("Export to Excel", data=export.content, file_name=filename)

    with st.expander("Delete a booking"):
        booking_id = st.selectbox(
            "Booking",
            [b.id for b in visible],
            format_func=lambda i: next(f"{b.name} - {b.date} {b.time_slot}" for b in visible if b.id == i)
        )
        if booking_id and st.button("Delete"):
            response = requests.delete(f"{API_URL}/api/bookings/{booking_id}", headers=api_headers(), timeout=10)
            body = response.json()
            if body.get("success"):
                st.rerun()
            else:
                st.error(body.get("message", "Failed to delete booking."))
else:
    st.info("No bookings yet.")

# Footer
st.markdown("---")
st.caption("Appointment Booking System • Admin Panel")
