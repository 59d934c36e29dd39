"""
MIME type inference for data URIs.

The HTML builder only needs the `MimeTypeGuesser` seam: something that can
name the type of a file on disk. `infer_mime_type` writes the data to a
temporary file, asks the guesser and always removes the file again.

`SignatureMimeTypeGuesser` is the default guesser. It sniffs well-known magic
numbers, falls back to `text/plain` for UTF-8 text and finally to the file
name's extension.
"""

from __future__ import annotations

import logging
import mimetypes
import os
import tempfile
from typing import Optional, Protocol, Tuple, Union

LOGGER = logging.getLogger(__name__)

# (offset, magic bytes, MIME type); checked in order
_SIGNATURES: Tuple[Tuple[int, bytes, str], ...] = (
    (0, b"\x89PNG\r\n\x1a\n", "image/png"),
    (0, b"\xff\xd8\xff", "image/jpeg"),
    (0, b"GIF87a", "image/gif"),
    (0, b"GIF89a", "image/gif"),
    (8, b"WEBP", "image/webp"),
    (4, b"ftypavif", "image/avif"),
    (0, b"BM", "image/bmp"),
    (0, b"\x00\x00\x01\x00", "image/vnd.microsoft.icon"),
    (0, b"%PDF-", "application/pdf"),
    (0, b"wOFF", "font/woff"),
    (0, b"wOF2", "font/woff2"),
    (0, b"OggS", "audio/ogg"),
    (0, b"ID3", "audio/mpeg"),
    (0, b"\x1aE\xdf\xa3", "video/webm"),
    (0, b"PK\x03\x04", "application/zip"),
    (0, b"\x1f\x8b", "application/gzip"),
)

_SNIFF_BYTES = 512


class MimeTypeGuesser(Protocol):
    """Names the MIME type of a file, or returns None when it cannot."""

    def guess_mime_type(self, path: str) -> Optional[str]: ...


class SignatureMimeTypeGuesser:
    """Content-sniffing guesser backed by a magic-number table."""

    def guess_mime_type(self, path: str) -> Optional[str]:
        with open(path, "rb") as f:
            head = f.read(_SNIFF_BYTES)

        for offset, magic, mime in _SIGNATURES:
            if head[offset : offset + len(magic)] == magic:
                return mime

        stripped = head.lstrip()
        if stripped.startswith(b"<svg") or (
            stripped.startswith(b"<?xml") and b"<svg" in head
        ):
            return "image/svg+xml"

        if head:
            try:
                head.decode("utf-8")
                return "text/plain"
            except UnicodeDecodeError:
                # A multi-byte sequence may be cut at the sniff boundary
                if len(head) == _SNIFF_BYTES:
                    try:
                        head[:-3].decode("utf-8")
                        return "text/plain"
                    except UnicodeDecodeError:
                        pass

        guessed, _ = mimetypes.guess_type(path)
        return guessed


def infer_mime_type(
    data: Union[bytes, str],
    guesser: MimeTypeGuesser,
    prefix: str = "mime",
) -> Optional[str]:
    """Return the MIME type of ``data`` by way of a temporary file."""
    raw = data.encode("utf-8") if isinstance(data, str) else data
    fd, tmp = tempfile.mkstemp(prefix=prefix)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(raw)
        mime = guesser.guess_mime_type(tmp)
        LOGGER.debug("htmlbuilder.mime inferred=%s len=%d", mime, len(raw))
        return mime
    finally:
        try:
            os.unlink(tmp)
        except OSError:
            LOGGER.debug("htmlbuilder.mime could not remove %s", tmp)


__all__ = ["MimeTypeGuesser", "SignatureMimeTypeGuesser", "infer_mime_type"]
