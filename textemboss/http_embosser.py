"""An embosser that posts images to a text-emboss HTTP service."""

from __future__ import annotations

import mimetypes
import os
import secrets
from typing import IO

import requests

from textemboss.emboss import Embosser, EmbosserError, EmbossTextResult


def image_part_headers(name: str, filename: str) -> dict[str, str]:
    """Return the multipart headers for an image part named ``name``."""
    _, ext = os.path.splitext(filename)
    content_type = mimetypes.guess_type(f"image{ext}")[0] if ext else None
    return {
        "Content-Disposition": f'form-data; name="{name}"; filename="{filename}"',
        "Content-Type": content_type or "",
    }


def _base_name(path: str) -> str:
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else "."
    return os.path.basename(stripped)


def _encode_form(filename: str, image: bytes) -> tuple[bytes, str]:
    boundary = secrets.token_hex(30)
    parts = [
        ({"Content-Disposition": 'form-data; name="Content-Type"'}, b"image/jpeg"),
        (image_part_headers("image", filename), image),
    ]
    chunks: list[bytes] = []
    for headers, payload in parts:
        chunks.append(f"--{boundary}\r\n".encode())
        chunks.extend(f"{key}: {value}\r\n".encode() for key, value in headers.items())
        chunks.extend((b"\r\n", payload, b"\r\n"))
    chunks.append(f"--{boundary}--\r\n".encode())
    return b"".join(chunks), f"multipart/form-data; boundary={boundary}"


class HTTPEmbosser(Embosser):
    """Extracts text by posting images to ``<uri>/json`` as multipart form data."""

    def __init__(self, uri: str, session: requests.Session | None = None) -> None:
        self.endpoint = uri
        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            session.headers["Connection"] = "close"
        self.session = session

    def emboss_text(self, path: str) -> EmbossTextResult:
        try:
            reader = open(path, "rb")
        except OSError as err:
            raise EmbosserError(f"Failed to open {path} for reading, {err}") from err
        with reader:
            return self.emboss_text_with_reader(path, reader)

    def emboss_text_with_reader(self, path: str, reader: IO[bytes]) -> EmbossTextResult:
        filename = _base_name(path)
        try:
            image = reader.read()
        except OSError as err:
            raise EmbosserError(f"Failed to copy image to form, {err}") from err

        body, content_type = _encode_form(filename, image)
        headers = {"Content-Type": content_type, "ContentLength": str(len(image))}

        try:
            rsp = self.session.post(self.endpoint + "/json", data=body, headers=headers)
        except requests.RequestException as err:
            raise EmbosserError(f"Failed to execute request, {err}") from err

        with rsp:
            if rsp.status_code != requests.codes.ok:
                status = f"{rsp.status_code} {rsp.reason or ''}".strip()
                raise EmbosserError(f"Request failed with status '{status}'")
            try:
                data = rsp.json()
            except ValueError as err:
                raise EmbosserError(f"Failed to decode response, {err}") from err

        return EmbossTextResult.from_dict(data)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()