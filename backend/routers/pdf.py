"""
PDF download endpoint.

GET /api/session/{session_id}/pdf - download the latest quote as a PDF.

The quote must have been computed first (POST /session/{id}/quote); the PDF
always reflects that last computed quote, not any edits made since.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from ..pdf_generator import generate_quote_pdf
from ..session import QuoteSession
from .quote_session import get_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["pdf"])


@router.get("/{session_id}/pdf")
def download_pdf(session: QuoteSession = Depends(get_session)):
    """
    Generate and download a PDF quote document.

    Returns: application/pdf
    """
    if session.last_quote is None:
        raise HTTPException(
            status_code=400,
            detail="No quote yet. Request a quote before exporting a PDF.",
        )

    # Convert bytearray to bytes for Response compatibility
    pdf_bytes = bytes(generate_quote_pdf(session.snapshot()))
    logger.info("Generated PDF for session %s (%d bytes)", session.id, len(pdf_bytes))

    filename = f"Shop-Quote-{session.id[:8]}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )
