from io import BytesIO

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def build_receipt_pdf(view) -> bytes:
    """Draw a mounted ReceiptView onto a one-page PDF and return its bytes."""
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setTitle(view.title)
    c.setFont("Helvetica-Bold", 14)
    c.drawString(50, 750, view.title)

    c.setFont("Helvetica", 12)
    y = 720
    for label, value in view.rows:
        c.drawString(50, y, f"{label}: {value}")
        y -= 20

    if view.total_text:
        c.line(50, y + 8, 300, y + 8)
        y -= 10
        c.setFont("Helvetica-Bold", 12)
        c.drawString(50, y, f"Total: {view.total_text}")

    c.showPage()
    c.save()
    return buf.getvalue()
