"""
File ingestion
Turns uploaded images and resumes into data-URL strings; the store keeps
them as opaque attribute values (logo, profile picture, resume, photos).
"""
import base64
import mimetypes
from typing import Optional, Tuple

from fastapi import UploadFile

DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(filename: Optional[str], declared: Optional[str] = None) -> str:
    if declared:
        return declared
    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            return guessed
    return DEFAULT_MIME_TYPE


def to_data_url(content: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def split_data_url(data_url: str) -> Tuple[str, str]:
    """Return (mime_type, base64 payload); raises ValueError if malformed"""
    if not data_url.startswith("data:") or "," not in data_url:
        raise ValueError("Not a data URL")
    header, payload = data_url[5:].split(",", 1)
    mime_type = header.split(";", 1)[0] or DEFAULT_MIME_TYPE
    return mime_type, payload


def decode_data_url(data_url: str) -> Tuple[str, bytes]:
    mime_type, payload = split_data_url(data_url)
    return mime_type, base64.b64decode(payload)


async def read_upload(upload: UploadFile) -> Tuple[bytes, str]:
    """Read an uploaded file into memory, with its best-guess mime type"""
    content = await upload.read()
    return content, guess_mime_type(upload.filename, upload.content_type)
