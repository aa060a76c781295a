"""
API client for communicating with the ytdigest backend.
"""

import requests
from typing import Dict, List, Any
from urllib.parse import urljoin
from ytdigest.config import config


class ApiError(Exception):
    """Error payload returned by the API."""

    def __init__(self, status_code: int, error: str, details: str = None):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


class ApiClient:
    """Client for interacting with the ytdigest API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = 120.0):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for a response
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    @staticmethod
    def _check(response: requests.Response) -> None:
        if response.ok:
            return
        try:
            payload = response.json()
        except ValueError:
            response.raise_for_status()
        if not isinstance(payload, dict):
            raise ApiError(response.status_code, response.reason, str(payload))
        raise ApiError(response.status_code, payload.get("error", response.reason), payload.get("details"))

    def summarize_video(self, url: str, num_sentences: int = 5) -> Dict[str, Any]:
        """
        Request a video summary.

        Args:
            url: YouTube video URL
            num_sentences: Target number of sentences or key points

        Returns:
            Dictionary with summary, method, video_id and timestamps

        Raises:
            ApiError: If the API reports an error
        """
        response = requests.post(
            self._url("summarize"),
            json={"url": url, "num_sentences": num_sentences},
            timeout=self.timeout,
        )
        self._check(response)
        return response.json()

    def get_history(self) -> List[Dict[str, Any]]:
        """Get the summary history, newest first."""
        response = requests.get(self._url("history"), timeout=self.timeout)
        self._check(response)
        return response.json()

    def delete_history_entry(self, entry_id: str) -> bool:
        """
        Delete a history entry.

        Returns:
            True if deleted, False if the entry did not exist
        """
        response = requests.delete(self._url(f"history/{entry_id}"), timeout=self.timeout)
        if response.status_code == 404:
            return False
        self._check(response)
        return True
