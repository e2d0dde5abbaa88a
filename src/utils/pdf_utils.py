import io
from PyPDF2 import PdfReader, errors
from qf_utils.logger_utils import logger


def extract_text_from_pdf(file_stream: io.BytesIO) -> str:
    """
    Extracts text from a PDF file stream using PyPDF2.
    Page texts are joined with newlines; pages without a text layer are skipped.
    """
    try:
        pdf_reader = PdfReader(file_stream)
        pages = [page.extract_text() or "" for page in pdf_reader.pages]
    except errors.PdfReadError as e:
        logger.error(f"Could not read PDF file. It may be encrypted or corrupted: {e}")
        raise ValueError("Invalid or corrupted PDF file.") from e

    text = "\n".join(page for page in pages if page)
    if not text:
        logger.warning("PyPDF2 extracted no text. The PDF might be image-based or scanned.")
    return text
