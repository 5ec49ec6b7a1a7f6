"""
Request ingestion.
Turns a JSON body or a multipart upload into a ReportRequest.
"""

import base64
import binascii
import os
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping

from werkzeug.datastructures import FileStorage

from malaria_watch.solution_service.errors import ValidationError
from malaria_watch.solution_service.models import ReportRequest

JSON_MISSING_FIELDS = "Missing imageBase64, title, or description."
MULTIPART_MISSING_FIELDS = "Missing image, title, or description."
INVALID_BASE64 = "imageBase64 is not valid base64."


def decode_image(image_b64: str) -> bytes:
    """
    Decode standard, URL-safe, unpadded or line-wrapped base64.

    Raises:
        binascii.Error: If no base64 alphabet can decode the text.
    """
    if not isinstance(image_b64, str):
        raise TypeError("imageBase64 must be a string")

    text = "".join(image_b64.split())
    text = text.translate(str.maketrans("-_", "+/"))
    text += "=" * (-len(text) % 4)
    return base64.b64decode(text, validate=True)


def parse_json_report(payload: Dict[str, Any]) -> ReportRequest:
    """
    Build a report from a JSON body with an already encoded image.

    Expects:
    - title (str)
    - description (str)
    - imageBase64 (str)

    Raises:
        ValidationError: If a field is missing/empty or the image is not base64.
    """
    payload = payload or {}
    title = payload.get("title")
    description = payload.get("description")
    image_b64 = payload.get("imageBase64")

    if not image_b64 or not title or not description:
        raise ValidationError(JSON_MISSING_FIELDS)

    try:
        image = decode_image(image_b64)
    except (binascii.Error, TypeError, ValueError):
        raise ValidationError(INVALID_BASE64)

    return ReportRequest(title=title, description=description, image=image)


@contextmanager
def stored_upload(file: FileStorage, upload_dir: str) -> Iterator[str]:
    """
    Save an upload under a unique name and delete it when the block exits.

    Args:
        file (FileStorage): The uploaded file.
        upload_dir (str): Directory for temporary uploads (created if missing).

    Yields:
        str: Path of the stored file.
    """
    os.makedirs(upload_dir, exist_ok=True)
    path = os.path.join(upload_dir, uuid.uuid4().hex)
    try:
        file.save(path)
        yield path
    finally:
        if os.path.exists(path):
            os.remove(path)


@contextmanager
def parse_multipart_report(form: Mapping[str, str], files: Mapping[str, FileStorage], upload_dir: str) -> Iterator[ReportRequest]:
    """
    Build a report from a multipart form.

    The upload stays on disk for the whole `with` block, so anything run
    inside it (the model call included) finishes before cleanup.

    Expects:
    - image (file)
    - title (form field)
    - description (form field)

    Raises:
        ValidationError: If the file or either text field is missing. Nothing is written in that case.
    """
    image = files.get("image")
    title = form.get("title")
    description = form.get("description")

    if image is None or not image.filename or not title or not description:
        raise ValidationError(MULTIPART_MISSING_FIELDS)

    with stored_upload(image, upload_dir) as path:
        with open(path, "rb") as f:
            image_bytes = f.read()
        yield ReportRequest(title=title, description=description, image=image_bytes)
