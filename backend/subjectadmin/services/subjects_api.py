"""
Subjects API client - the HTTP transport used by the subject form.
"""

import asyncio
from typing import List, Optional

import httpx
from pydantic import ValidationError

from subjectadmin.config import logger, SUBJECTS_API_URL, REQUEST_TIMEOUT, get_auth_token
from subjectadmin.errors import ServerError, NetworkError, RequestError
from subjectadmin.models.subject import SubjectsCreate, SubjectsRecord, SubjectsSaved


class SubjectsApiClient:
    """Async client for /subjects. Raises SubmissionError subclasses on failure."""

    def __init__(
        self,
        base_url: str = SUBJECTS_API_URL,
        timeout: float = REQUEST_TIMEOUT,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if token is None:
            token = get_auth_token()

        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        # httpx applies `timeout` per phase; self.timeout bounds the whole request
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
            follow_redirects=True,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def create_subjects(self, class_name: str, subjects: List[str]) -> SubjectsSaved:
        """POST one class's subject list"""
        payload = SubjectsCreate(class_name=class_name, subjects=subjects).model_dump(by_alias=True)
        response = await self._send("POST", "/subjects", json=payload)
        try:
            return SubjectsSaved.model_validate(response.json())
        except (ValueError, ValidationError):
            logger.warning(f"⚠️ Unexpected body from POST /subjects: {response.text[:200]}")
            return SubjectsSaved()

    async def list_subjects(self) -> List[SubjectsRecord]:
        """GET every stored record"""
        response = await self._send("GET", "/subjects")
        try:
            return [SubjectsRecord.model_validate(item) for item in response.json()]
        except (ValueError, TypeError, ValidationError) as e:
            raise ServerError(f"Malformed subjects list: {e}", status_code=response.status_code) from e

    async def _send(self, method: str, url: str, json=None) -> httpx.Response:
        try:
            request = self._client.build_request(method, url, json=json)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            logger.error(f"Error: {e}")
            raise RequestError(str(e) or None) from e

        try:
            response = await asyncio.wait_for(self._client.send(request), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"No response within {self.timeout}s: {method} {request.url}")
            raise NetworkError() from e
        except (httpx.UnsupportedProtocol, httpx.LocalProtocolError) as e:
            logger.error(f"Error: {e}")
            raise RequestError(str(e) or None) from e
        except httpx.TransportError as e:
            logger.error(f"No response: {e!r}")
            raise NetworkError() from e
        except httpx.RequestError as e:
            logger.error(f"Error: {e}")
            raise RequestError(str(e) or None) from e

        # Redirects are followed above, so anything left outside 2xx is a failure
        if not response.is_success:
            logger.error(f"API Error: {response.status_code} {response.text[:200]}")
            raise ServerError(_error_message(response), status_code=response.status_code)

        return response


def _error_message(response: httpx.Response) -> Optional[str]:
    """Message from an error body, if it carries one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    message = data.get("message") or data.get("detail")
    return message if isinstance(message, str) else None
