from typing import Optional, Sequence, Tuple
from .file_utils import UploadedFile
import logging

logger = logging.getLogger(__name__)

# user-facing messages
UPLOAD_ERRORS = {
    "too_many": "Too many files. Please upload at most {max_files} files.",
    "too_large": "File '{filename}' is too large. Please use files up to {max_mb}MB.",
    "bad_count": "Question count must be a number.",
    "count_range": "Question count must be between 1 and {ceiling}.",
}

def validate_upload_batch(
    files: Sequence[UploadedFile],
    max_files: int,
    max_size: int,
) -> Optional[Tuple[str, int]]:
    """
    Validate the number and size of uploaded files.
    Returns an (error message, HTTP status) pair if invalid, otherwise None.
    """
    if len(files) > max_files:
        logger.debug("Validation failed: too many files (count=%d)", len(files))
        return UPLOAD_ERRORS["too_many"].format(max_files=max_files), 400
    for uploaded in files:
        if uploaded.size > max_size:
            logger.debug("Validation failed: too large (%s, size=%d)", uploaded.filename, uploaded.size)
            message = UPLOAD_ERRORS["too_large"].format(
                filename=uploaded.filename, max_mb=max_size // (1024 * 1024)
            )
            return message, 413
    return None

def parse_question_count(raw: Optional[str], ceiling: int) -> Optional[int]:
    """
    Convert the form value for the question count.
    Blank input means "no fixed count"; anything else must be an integer in 1..ceiling.
    """
    if raw is None or not str(raw).strip():
        return None
    try:
        count = int(str(raw).strip())
    except ValueError:
        raise ValueError(UPLOAD_ERRORS["bad_count"])
    if count < 1 or count > ceiling:
        raise ValueError(UPLOAD_ERRORS["count_range"].format(ceiling=ceiling))
    return count
