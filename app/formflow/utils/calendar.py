import datetime
import re


def create_ics(payload, duration_minutes=150, uid=None):
    """
    Build the .ics calendar invite for a booked showtime.
    Returns the file content; the page offers it as a download.
    """
    dt_start = datetime.datetime.strptime(f"{payload['date']} {payload['time']}", "%Y-%m-%d %H:%M")
    dt_end = dt_start + datetime.timedelta(minutes=duration_minutes)

    # ICS datetime format: YYYYMMDDTHHMMSS
    start_str = dt_start.strftime("%Y%m%dT%H%M%S")
    end_str = dt_end.strftime("%Y%m%dT%H%M%S")
    uid = uid or f"{start_str}-{payload['phone']}@formflow"

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "PRODID:-//Formflow Cinema//EN",
        "BEGIN:VEVENT",
        f"UID:{uid}",
        f"SUMMARY:{payload['movie']} ({payload['tickets']} tickets)",
        f"DTSTART:{start_str}",
        f"DTEND:{end_str}",
        f"DESCRIPTION:Booking for {payload['name']} - {payload['seat']} seats",
        f"LOCATION:{payload['cinema']}",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return "\r\n".join(lines) + "\r\n"


def ics_filename(payload):
    name = f"{payload['movie']}_{payload['date']}_{payload['time'].replace(':', '')}"
    return re.sub(r"[^A-Za-z0-9_-]+", "_", name).strip("_") + ".ics"
