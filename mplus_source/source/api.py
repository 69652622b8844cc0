"""HTTP request building and JSON envelope handling for the MANGA Plus API."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import requests

from mplus_source.constants import (
    MANGA_VIEWER_PATH,
    TITLE_DETAIL_PATH,
    TITLE_INDEX_PATH,
    ImageQuality,
)
from mplus_source.config import SourceSettings
from mplus_source.errors import ApiError, DecodeError, FetchError, NotFoundError
from mplus_source.types import ResponseLike, SessionLike

log = logging.getLogger(__name__)

_NOT_FOUND_MARKERS = ("not found", "does not exist", "no longer available")


def _build_title_index_params() -> dict:
    """Assemble the query parameters for the title index API request."""
    return {"format": "json"}


def _build_title_detail_params(title_id: str | int) -> dict:
    """Assemble the query parameters for the title details API request."""
    return {"format": "json", "title_id": title_id}


def _build_manga_viewer_params(chapter_id: str | int, quality: ImageQuality) -> dict:
    """Assemble the query parameters for the manga viewer API request."""
    return {
        "format": "json",
        "split": "yes",
        "chapter_id": chapter_id,
        "img_quality": quality.value,
    }


def _popup_text(error: Mapping[str, Any]) -> tuple[str, str]:
    """Return ``(subject, body)`` of the English popup in an error envelope."""
    popup = error.get("englishPopup")
    if not isinstance(popup, Mapping):
        popups = error.get("popups")
        popup = popups[0] if isinstance(popups, list) and popups else {}
    if not isinstance(popup, Mapping):
        return "", ""
    return str(popup.get("subject", "")), str(popup.get("body", ""))


def _raise_for_error_envelope(payload: Any) -> None:
    """Raise ``ApiError`` or ``NotFoundError`` unless ``payload`` holds ``success``."""
    if not isinstance(payload, Mapping):
        raise DecodeError(f"Expected a JSON object, got {type(payload).__name__}")

    error = payload.get("error")
    if error is not None:
        subject, body = _popup_text(error) if isinstance(error, Mapping) else ("", "")
        message = ": ".join(part for part in (subject, body) if part) or "MANGA Plus API returned an error"
        text = f"{subject} {body}".lower()
        if any(marker in text for marker in _NOT_FOUND_MARKERS):
            raise NotFoundError(message, subject=subject, body=body)
        raise ApiError(message, subject=subject, body=body)

    if "success" not in payload:
        raise ApiError("MANGA Plus API response has no success payload")


def _unwrap(payload: Mapping[str, Any], *keys: str) -> Any:
    """
    Walk ``payload["success"]`` along ``keys`` and return the nested value.

    Raises ``DecodeError`` naming the first missing key.
    """
    node: Any = payload["success"]
    path = "success"
    for key in keys:
        if not isinstance(node, Mapping) or key not in node:
            raise DecodeError(f"Response is missing '{path}.{key}'")
        node = node[key]
        path = f"{path}.{key}"
    return node


class APILoaderMixin:
    session: SessionLike
    settings: SourceSettings

    def _get(self, url: str, params: Mapping[str, object] | None = None) -> ResponseLike:
        """
        Perform one GET request and translate transport failures.
        """
        log.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.settings.request_timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Request to {url} failed: {exc}") from exc

        if response.status_code == 404:
            raise NotFoundError(f"{url} returned HTTP 404")
        try:
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(f"Request to {url} failed: {exc}") from exc
        return response

    def _get_json(self, path: str, params: Mapping[str, object]) -> Mapping[str, Any]:
        """
        Fetch ``path`` below the API root and return the checked JSON envelope.
        """
        response = self._get(self._build_api_url(path), params=params)
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(f"Response from {path} is not valid JSON") from exc
        _raise_for_error_envelope(payload)
        return payload

    def _build_api_url(self, path: str) -> str:
        """Construct the full URL for an API endpoint."""
        return f"{self.settings.api_url}/{path}"

    def _load_title_index(self) -> list:
        """
        Retrieve every title group of the catalog.
        """
        payload = self._get_json(TITLE_INDEX_PATH, _build_title_index_params())
        groups = _unwrap(payload, "allTitlesViewV2", "AllTitlesGroup")
        if not isinstance(groups, list):
            raise DecodeError("Title index 'AllTitlesGroup' is not a list")
        return groups

    def _get_title_details(self, title_id: str | int) -> Mapping[str, Any]:
        """
        Retrieve detailed information for a given manga title.
        """
        payload = self._get_json(TITLE_DETAIL_PATH, _build_title_detail_params(title_id))
        details = _unwrap(payload, "titleDetailView")
        if not isinstance(details, Mapping):
            raise DecodeError("'titleDetailView' is not an object")
        return details

    def _load_pages(self, chapter_id: str | int, quality: ImageQuality) -> list:
        """
        Retrieve the viewer page list of a chapter for one image tier.
        """
        payload = self._get_json(MANGA_VIEWER_PATH, _build_manga_viewer_params(chapter_id, quality))
        pages = _unwrap(payload, "mangaViewer", "pages")
        if not isinstance(pages, list):
            raise DecodeError("'mangaViewer.pages' is not a list")
        return pages
