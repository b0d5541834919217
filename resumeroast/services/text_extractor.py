import io
import logging
import pdfplumber

logger = logging.getLogger(__name__)


def is_pdf(content: bytes) -> bool:
    """Check the PDF magic header."""
    return content[:5] == b"%PDF-"


def extract_with_pdfplumber(pdf_bytes: bytes) -> str:
    """Extract text using pdfplumber (handles most font encodings)."""
    text = ""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text += page_text + "\n"
    return text.strip()


def extract_text_from_pdf(pdf_bytes: bytes) -> str:
    """
    Extract text from PDF bytes.

    Image-only PDFs come back (nearly) empty; callers decide whether the
    result is long enough to analyze.
    """
    text = extract_with_pdfplumber(pdf_bytes)
    logger.info(f"Extracted {len(text)} characters from PDF")
    return text
