from dataclasses import dataclass
from typing import Optional
import os

@dataclass
class UploadedFile:
    """
    Represents a single uploaded file held in memory for the duration of a request.
    """
    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def extension(self) -> str:
        return file_extension(self.filename)

PDF_MIMETYPE = "application/pdf"
PDF_EXTENSION = ".pdf"

TEXT_EXTENSIONS = {".txt", ".md", ".csv", ".json"}

def file_extension(filename: Optional[str]) -> str:
    return os.path.splitext(filename or "")[1].lower()

def secure_name(filename: str) -> str:
    """
    Minimal secure filename: remove path components and null bytes
    and restrict characters + length.
    """
    name = os.path.basename(filename or "")
    name = name.replace("\x00", "")  # strip null bytes
    safe = "".join(c for c in name if c.isalnum() or c in " ._-")
    return safe[:200]

def normalize_mimetype(mime: Optional[str]) -> str:
    # werkzeug may hand us "text/plain; charset=utf-8"
    mime = (mime or "").split(";", 1)[0].strip().lower()
    return mime or "application/octet-stream"
