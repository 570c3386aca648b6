"""
Resume upload and export service.
"""

import re
from typing import BinaryIO, List, Optional

from choojobs.exceptions import FormValidationError
from choojobs.models import Resume, ResumeExport
from choojobs.services.api_client import ApiClient
from choojobs.utils.formatting import safe_filename
from choojobs.utils.logger import get_logger

logger = get_logger(__name__)

EXPORT_CONTENT_TYPES = {
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

FILENAME_PATTERN = re.compile(r'filename\*?=(?:UTF-8\'\')?"?([^";]+)"?', re.IGNORECASE)


class ResumeService:
    """Manage the user's resumes."""
    
    def __init__(self, client: ApiClient, export_formats: Optional[List[str]] = None):
        self.client = client
        self.export_formats = [fmt.lower() for fmt in (export_formats or EXPORT_CONTENT_TYPES)]
    
    def list_resumes(self) -> List[Resume]:
        data = self.client.get("/resumes")
        if isinstance(data, dict):
            data = data.get("resumes") or []
        return [Resume.from_api(item) for item in data or []]
    
    def upload(self, filename: str, stream: BinaryIO, content_type: Optional[str] = None) -> None:
        """
        Upload a resume file as multipart field ``resume``.
        
        Args:
            filename: Original filename
            stream: File contents
            content_type: MIME type reported by the browser
        """
        if not filename:
            raise FormValidationError("Please choose a file to upload")
        
        files = {"resume": (filename, stream, content_type or "application/octet-stream")}
        self.client.request("POST", "/resumes/upload", files=files)
        logger.info(f"📄 Uploaded resume {filename}")
    
    def export(self, resume_id: str, fmt: str = "pdf", name: Optional[str] = None) -> ResumeExport:
        """
        Download a resume rendered in the given format.
        
        Args:
            resume_id: Resume to export
            fmt: One of the enabled export formats, e.g. pdf or docx
            name: Base filename to fall back on when the API sends none
            
        Returns:
            ResumeExport with the file contents
        """
        fmt = fmt.lower()
        if fmt not in self.export_formats:
            raise FormValidationError(f"Unsupported export format: {fmt}")
        
        response = self.client.request_raw(
            "POST", "/resumes/export", json={"resumeId": resume_id, "format": fmt}
        )
        
        filename = _filename_from_headers(response.headers.get("Content-Disposition", ""))
        if not filename:
            stem = (name or "resume").rsplit(".", 1)[0]
            filename = f"{safe_filename(stem)}.{fmt}"
        
        logger.info(f"📦 Exported resume {resume_id} as {fmt}")
        return ResumeExport(
            filename=filename,
            content=response.content,
            content_type=response.headers.get("Content-Type") or EXPORT_CONTENT_TYPES.get(fmt, "application/octet-stream"),
        )


def _filename_from_headers(disposition: str) -> Optional[str]:
    match = FILENAME_PATTERN.search(disposition or "")
    if not match:
        return None
    return safe_filename(match.group(1), default="") or None
