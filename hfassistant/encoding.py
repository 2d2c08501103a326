"""Image/file encoding helpers for the visual QA endpoint."""

from __future__ import annotations

import base64
import io
import mimetypes
import os
from pathlib import Path
from typing import BinaryIO, Union

from PIL import Image, UnidentifiedImageError

FileInput = Union[str, os.PathLike, bytes, bytearray, BinaryIO, Image.Image]

_DEFAULT_MIME = "application/octet-stream"


def _img_to_png_bytes(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def _sniff_mime(raw: bytes) -> str:
    """Guess the MIME type of raw image bytes with PIL."""
    try:
        with Image.open(io.BytesIO(raw)) as im:
            return Image.MIME.get(im.format or "", _DEFAULT_MIME)
    except (UnidentifiedImageError, OSError):
        return _DEFAULT_MIME


def _read_file(file: FileInput) -> tuple[bytes, str]:
    if isinstance(file, Image.Image):
        return _img_to_png_bytes(file), "image/png"

    if isinstance(file, (bytes, bytearray)):
        raw = bytes(file)
        return raw, _sniff_mime(raw)

    if isinstance(file, (str, os.PathLike)):
        path = Path(file)
        raw = path.read_bytes()
        mime, _ = mimetypes.guess_type(path.name)
        return raw, mime or _sniff_mime(raw)

    if hasattr(file, "read"):
        raw = file.read()
        if isinstance(raw, str):
            raise TypeError("file object must be opened in binary mode")
        name = getattr(file, "name", None)
        mime = mimetypes.guess_type(str(name))[0] if isinstance(name, (str, os.PathLike)) else None
        return raw, mime or _sniff_mime(raw)

    raise TypeError(f"unsupported file input: {type(file).__name__}")


def read_as_data_url(file: FileInput) -> str:
    """Read a file (path, bytes, binary stream or PIL image) as a base64 data URL."""
    raw, mime = _read_file(file)
    payload = base64.b64encode(raw).decode("ascii")
    return f"data:{mime};base64,{payload}"


def strip_data_url_prefix(data_url: str) -> str:
    """Return everything after the first comma of a data URL."""
    _, sep, payload = data_url.partition(",")
    if not sep:
        raise ValueError("not a data URL: missing ',' separator")
    return payload


def file_to_base64(file: FileInput) -> str:
    """
    Base64 payload of a file, without the `data:<mime>;base64,` prefix.

    Raises OSError when the file cannot be read.
    """
    return strip_data_url_prefix(read_as_data_url(file))
