"""Repeating-key XOR decryption of MANGA Plus page images."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import TYPE_CHECKING

from mplus_source.constants import ImageQuality
from mplus_source.errors import DecodeError

if TYPE_CHECKING:
    from mplus_source.domain.models import PageDescriptor

log = logging.getLogger(__name__)


def _convert_hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert a hexadecimal string to bytes.
    """
    try:
        key = bytes.fromhex(hex_str)
    except ValueError as exc:
        raise DecodeError(f"Encryption key is not valid hexadecimal: {hex_str!r}") from exc
    if not key:
        raise DecodeError("Encryption key is empty")
    return key


def _convert_base64_to_bytes(data: str | bytes) -> bytearray:
    """
    Decode a base64 payload into a mutable byte buffer.

    ASCII whitespace (line wrapping) is ignored and missing "=" padding is
    restored before decoding; any other non-alphabet character is rejected.
    """
    try:
        if isinstance(data, str):
            data = data.encode("ascii")
        compact = b"".join(data.split())
        compact += b"=" * (-len(compact) % 4)
        return bytearray(base64.b64decode(compact, validate=True))
    except (binascii.Error, ValueError) as exc:
        raise DecodeError("Page payload is not valid base64") from exc


def _xor_decrypt(data: bytearray, key: bytes) -> bytearray:
    """
    Decrypt data using XOR with a repeating key.
    """
    key_length = len(key)
    if key_length == 0:
        raise DecodeError("Encryption key is empty")
    for index in range(len(data)):
        data[index] ^= key[index % key_length]
    return data


def xor_decrypt(data: bytes, key: bytes) -> bytes:
    """
    Apply repeating-key XOR to ``data`` and return new bytes.

    XOR is self-inverse, so the same call both obfuscates and recovers a
    payload. ``data`` is never modified.
    """
    return bytes(_xor_decrypt(bytearray(data), key))


def decrypt_bytes(encryption_hex: str, data: bytes) -> bytes:
    """Decrypt raw image bytes with a hexadecimal key."""
    return xor_decrypt(data, _convert_hex_to_bytes(encryption_hex))


def decrypt_page(encryption_hex: str, data: str | bytes) -> str:
    """
    Recover a page image from its base64 encoded, XOR obfuscated payload.

    The payload is base64 decoded, XOR-ed against the repeating key decoded
    from ``encryption_hex`` and re-encoded as base64. Image formats are never
    inspected.

    Raises:
        DecodeError: The key is empty or not hexadecimal, or ``data`` is not
            valid base64.
    """
    raw_key = _convert_hex_to_bytes(encryption_hex)
    raw_data = _convert_base64_to_bytes(data)
    log.debug(
        "Decrypting manga page with key %s (%d bytes), first bytes %s",
        encryption_hex,
        len(raw_key),
        bytes(raw_data[:4]).hex(),
    )
    decrypted = _xor_decrypt(raw_data, raw_key)
    log.debug("Decrypted manga page (%d bytes)", len(decrypted))
    return base64.b64encode(decrypted).decode("ascii")


class DecryptionMixin:
    def download_page(
        self,
        page: PageDescriptor,
        quality: ImageQuality | str = ImageQuality.HIGH,
    ) -> bytes:
        """
        Fetch the image of ``page`` for one tier and return decrypted bytes.

        Pages without an encryption key are returned as fetched.
        """
        quality = ImageQuality(quality)
        if quality is ImageQuality.HIGH:
            url, key = page.high_url, page.high_key
        else:
            url, key = page.low_url, page.low_key
        if not url:
            raise DecodeError(f"Page has no {quality.value} quality image URL")

        encrypted_data = self._fetch_encrypted_data(url)
        if not key:
            return encrypted_data
        return decrypt_bytes(key, encrypted_data)

    def _fetch_encrypted_data(self, url: str) -> bytes:
        """
        Fetch encrypted image data from the provided URL.
        """
        response = self._get(url)
        return response.content

    def _get(self, url, params=None):
        raise NotImplementedError
