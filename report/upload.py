# report/upload.py

import hashlib
from dataclasses import dataclass
from typing import Protocol, Sequence

from report.schemas import ReportValidationError


TEXT_MIME = "text/plain"


class UploadedFile(Protocol):
    # matches streamlit's UploadedFile
    name: str
    type: str

    def getvalue(self) -> bytes: ...


@dataclass(frozen=True)
class ReportUpload:
    name: str
    text: str

    @property
    def digest(self) -> str:
        return hashlib.sha256(self.text.encode("utf-8")).hexdigest()


def check_upload(files: Sequence[UploadedFile]) -> ReportUpload:
    """
    Accept exactly one plain-text report and decode it.
    Anything else is rejected before it reaches the parser.
    """
    if not files:
        raise ReportValidationError("drop a text file")

    if len(files) > 1:
        raise ReportValidationError("drop only one text file at a time")

    f = files[0]
    if (f.type or "").lower() != TEXT_MIME:
        raise ReportValidationError("drop a text file")

    return ReportUpload(
        name=f.name,
        text=f.getvalue().decode("utf-8", errors="replace"),
    )
