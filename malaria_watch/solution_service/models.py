"""
Report data passed between ingestion and the model call.
"""

from dataclasses import dataclass

IMAGE_MIME_TYPE = "image/jpeg"


@dataclass(frozen=True)
class ReportRequest:
    """
    A single user report. Lives only for the duration of one request.
    """
    title: str
    description: str
    image: bytes
