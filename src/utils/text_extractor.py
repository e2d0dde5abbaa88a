import io

from qf_utils.file_utils import (
    UploadedFile,
    PDF_EXTENSION,
    PDF_MIMETYPE,
    TEXT_EXTENSIONS,
    normalize_mimetype,
)
from qf_utils.logger_utils import logger
from src.domain.errors import ExtractionFailure, UnsupportedFormat
from .pdf_utils import extract_text_from_pdf


def extract_text(uploaded: UploadedFile) -> str:
    """
    Extracts plain text from an uploaded file.
    Supports PDF and plain-text formats; routing uses the declared MIME type
    or, failing that, the filename extension.
    """
    if not uploaded.data:
        return ""

    mime_type = normalize_mimetype(uploaded.content_type)
    ext = uploaded.extension
    display_name = uploaded.filename or mime_type

    if mime_type == PDF_MIMETYPE or ext == PDF_EXTENSION:
        logger.info(f"Extracting PDF text from '{display_name}' ({uploaded.size} bytes).")
        try:
            return extract_text_from_pdf(io.BytesIO(uploaded.data))
        except Exception as e:
            logger.error(f"PDF extraction failed for '{display_name}': {e}", exc_info=True)
            raise ExtractionFailure(display_name, "invalid or corrupted PDF") from e

    if mime_type.startswith("text/") or ext in TEXT_EXTENSIONS:
        logger.info(f"Decoding '{display_name}' as UTF-8 text ({uploaded.size} bytes).")
        try:
            return uploaded.data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ExtractionFailure(display_name, "file is not valid UTF-8 text") from e

    logger.warning(f"Unsupported file type '{mime_type}' for file '{display_name}'.")
    raise UnsupportedFormat(display_name)
