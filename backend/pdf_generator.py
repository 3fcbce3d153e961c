"""
PDF Quote Generator.

Renders a finished quote for a metal shop building as a one-page PDF.
Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header (company + quote date) and customer contact block
2. Building specification
3. Doors by wall
4. Price breakdown + total
5. Note and terms
"""

from datetime import datetime

from fpdf import FPDF

from .config import settings


SIDE_NAMES = {
    "front": "Front",
    "back": "Back",
    "left": "Left",
    "right": "Right",
}


def _fmt(amount) -> str:
    """Format a number as $X,XXX.XX"""
    try:
        return f"${float(amount):,.2f}"
    except (ValueError, TypeError):
        return "$0.00"


def _feet(value) -> str:
    try:
        return f"{float(value):g}'"
    except (ValueError, TypeError):
        return "-"


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (latin-1)."""
    if not text:
        return ""
    return (
        str(text)
        .replace("\u2022", "-")    # bullet
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")    # en dash
        .replace("\u201c", '"')    # left double quote
        .replace("\u201d", '"')    # right double quote
        .replace("\u2018", "'")    # left single quote
        .replace("\u2019", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class QuotePDF(FPDF):
    """Custom PDF class for shop building quotes."""

    def __init__(self, company_name=""):
        super().__init__()
        self.company_name = company_name
        self.set_auto_page_break(auto=True, margin=20)

    def footer_text(self):
        page = f"Page {self.page_no()}/{{nb}}"
        if self.company_name:
            return _safe(f"{self.company_name} - {page}")
        return page

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, self.footer_text(), align="C")

    def section_header(self, title):
        """Render a section header bar."""
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def table_header(self, cols):
        """Render a table header row. cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_fill_color(240, 240, 240)
        for label, width in cols:
            align = "R" if label in ("Offset", "Amount") else "L"
            self.cell(width, 6, label, border="B", fill=True, align=align)
        self.ln()

    def table_row(self, values, widths):
        self.set_font("Helvetica", "", 8)
        for i, (val, width) in enumerate(zip(values, widths)):
            align = "R" if i == len(widths) - 1 else "L"
            self.cell(width, 5.5, _safe(str(val)), align=align)
        self.ln()

    def label_row(self, label, value):
        self.set_font("Helvetica", "", 9)
        self.cell(60, 5.5, label)
        self.cell(0, 5.5, _safe(str(value)), new_x="LMARGIN", new_y="NEXT")


def generate_quote_pdf(snapshot: dict, company: dict = None) -> bytes:
    """
    Generate a PDF quote document.

    Args:
        snapshot: QuoteSession.snapshot() - must include a computed "quote"
        company: optional override of the company header
                 (name, address, phone, email); defaults come from settings

    Returns:
        PDF bytes
    """
    company = company or {}
    company_name = company.get("name") or settings.COMPANY_NAME
    info_parts = [
        company.get("address", settings.COMPANY_ADDRESS),
        company.get("phone", settings.COMPANY_PHONE),
        company.get("email", settings.COMPANY_EMAIL),
    ]
    company_info = " | ".join(p for p in info_parts if p)

    spec = snapshot.get("spec", {})
    doors = snapshot.get("doors", {})
    contact = snapshot.get("contact", {})
    quote = snapshot.get("quote") or {}
    breakdown = quote.get("breakdown") or {}

    pdf = QuotePDF(company_name=company_name)
    pdf.alias_nb_pages()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin  # printable width

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "B", 20)
    pdf.cell(0, 10, _safe(company_name), new_x="LMARGIN", new_y="NEXT")
    if company_info:
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(100, 100, 100)
        pdf.cell(0, 5, _safe(company_info), new_x="LMARGIN", new_y="NEXT")
        pdf.set_text_color(0, 0, 0)
    pdf.ln(4)

    created = snapshot.get("created_at", "")
    try:
        date_str = datetime.fromisoformat(created).strftime("%B %d, %Y")
    except (ValueError, TypeError):
        date_str = datetime.utcnow().strftime("%B %d, %Y")

    pdf.set_font("Helvetica", "B", 14)
    pdf.cell(0, 8, "SHOP BUILDING QUOTE", new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, f"Date: {date_str}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Valid for: {settings.QUOTE_VALID_DAYS} days", new_x="LMARGIN", new_y="NEXT")

    contact_lines = [contact.get(k, "") for k in ("name", "address", "phone", "email")]
    contact_lines = [line for line in contact_lines if line]
    if contact_lines:
        pdf.ln(2)
        pdf.cell(0, 5, _safe(f"Prepared for: {contact_lines[0]}"), new_x="LMARGIN", new_y="NEXT")
        for line in contact_lines[1:]:
            pdf.cell(0, 5, _safe(f"    {line}"), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(6)

    # ── SECTION 2: Building ──
    pdf.section_header("BUILDING")
    pdf.label_row("Size (W x L)", f"{_feet(breakdown.get('width', spec.get('width')))} x "
                                  f"{_feet(breakdown.get('length', spec.get('length')))}")
    pdf.label_row("Sidewall height", _feet(breakdown.get("sidewall_height", spec.get("sidewall_height"))))
    pdf.label_row("Roof pitch", spec.get("roof_pitch", ""))
    color = spec.get("color", "normal")
    pdf.label_row("Color", "Premium (+15%)" if color == "premium" else "Normal")
    pdf.label_row("Spray foam", '1" closed cell, whole building' if spec.get("spray_foam") else "No")
    pdf.ln(4)

    # ── SECTION 3: Doors ──
    pdf.section_header("DOORS")
    door_cols = [("Wall", 40), ("Type", 40), ("Size", 50), ("Offset", 60)]
    door_widths = [c[1] for c in door_cols]
    any_doors = any(doors.get(side) for side in SIDE_NAMES)
    if any_doors:
        pdf.table_header(door_cols)
        for side, side_name in SIDE_NAMES.items():
            for door in doors.get(side, []):
                pdf.table_row(
                    [side_name, door.get("type", "").title(), door.get("size", ""),
                     f"{door.get('offset', 0):+.1f} ft"],
                    door_widths,
                )
    else:
        pdf.set_font("Helvetica", "", 9)
        pdf.cell(0, 5, "No doors selected", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    # ── SECTION 4: Price ──
    pdf.section_header("PRICE")
    lines = [
        ("Concrete and metal building", breakdown.get("base", 0)),
        ("Extra sidewall height", breakdown.get("extra_height", 0)),
        ("Doors", breakdown.get("doors", 0)),
        (f"Spray foam ({breakdown.get('spray_foam_sq_ft', 0):,.0f} sq ft)", breakdown.get("spray_foam", 0)),
    ]
    pdf.set_font("Helvetica", "", 10)
    for label, amount in lines:
        if amount:
            pdf.cell(130, 6, _safe(label))
            pdf.cell(60, 6, _fmt(amount), align="R")
            pdf.ln()

    if breakdown.get("color_multiplier", 1.0) != 1.0:
        subtotal = breakdown.get("subtotal", 0)
        pdf.cell(130, 6, "Premium color (+15%)")
        pdf.cell(60, 6, _fmt(breakdown.get("total", 0) - subtotal), align="R")
        pdf.ln()

    pdf.ln(1)
    pdf.set_fill_color(45, 55, 72)
    pdf.set_text_color(255, 255, 255)
    pdf.set_font("Helvetica", "B", 13)
    pdf.cell(130, 10, "  QUOTE TOTAL", fill=True)
    pdf.cell(60, 10, f"${quote.get('formatted_total', '0.00')}  ", fill=True, align="R")
    pdf.set_text_color(0, 0, 0)
    pdf.ln(14)

    # ── SECTION 5: Note + terms ──
    note = quote.get("note", "")
    if note:
        pdf.set_font("Helvetica", "", 9)
        pdf.multi_cell(pw, 4.5, _safe(note))
        pdf.ln(4)

    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(100, 100, 100)
    pdf.set_x(pdf.l_margin)
    pdf.cell(pw, 4, "This is an estimate. Final price is confirmed after a site visit.",
             new_x="LMARGIN", new_y="NEXT")
    pdf.cell(pw, 4, f"This quote is valid for {settings.QUOTE_VALID_DAYS} days from the date above.",
             new_x="LMARGIN", new_y="NEXT")
    pdf.set_text_color(0, 0, 0)

    return pdf.output()
