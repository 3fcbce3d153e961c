"""
PDF generator tests - renders a finished session without going through HTTP.
"""

from backend.models import DoorType, Side
from backend.pdf_generator import QuotePDF, _fmt, _safe, generate_quote_pdf
from backend.session import QuoteSession


def _quoted_session(**options):
    session = QuoteSession()
    session.set_sidewall_height("14")
    session.set_contact(name="Pat Smith", phone="555-0100", address="12 County Rd")
    session.add_door(Side.FRONT, DoorType.GARAGE, "10x10")
    session.add_door(Side.LEFT, DoorType.WALK, "3x7")
    if options.get("spray_foam"):
        session.set_spray_foam(True)
    if options.get("premium"):
        session.set_color("premium")
    session.get_quote()
    return session


def test_pdf_generates_valid_bytes():
    pdf_bytes = generate_quote_pdf(_quoted_session().snapshot())
    assert isinstance(pdf_bytes, (bytes, bytearray))
    assert len(pdf_bytes) > 1000
    assert bytes(pdf_bytes[:5]) == b"%PDF-"


def test_pdf_with_every_option():
    pdf_bytes = generate_quote_pdf(_quoted_session(spray_foam=True, premium=True).snapshot())
    assert bytes(pdf_bytes[:5]) == b"%PDF-"
    assert "/Count" in bytes(pdf_bytes).decode("latin-1")


def test_pdf_without_doors_or_contact():
    session = QuoteSession()
    session.get_quote()
    pdf_bytes = generate_quote_pdf(session.snapshot())
    assert len(pdf_bytes) > 1000


def test_pdf_company_override():
    pdf_bytes = generate_quote_pdf(
        _quoted_session().snapshot(),
        {"name": "Acme Steel Buildings", "phone": "555-0199"},
    )
    assert len(pdf_bytes) > 1000


def test_footer_carries_company_name():
    pdf = QuotePDF(company_name="Acme Steel Buildings")
    pdf.add_page()
    assert pdf.footer_text() == "Acme Steel Buildings - Page 1/{nb}"
    assert QuotePDF().footer_text() == "Page 0/{nb}"


def test_fmt_and_safe_helpers():
    assert _fmt(42000) == "$42,000.00"
    assert _fmt("junk") == "$0.00"
    assert _safe("Pat\u2019s shop \u2014 north") == "Pat's shop  -  north"
    assert _safe("") == ""
