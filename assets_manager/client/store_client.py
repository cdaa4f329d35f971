"""
HTTP transport for the store API.

Every call carries the bearer credential (except sign up / sign in), sends
JSON, and maps non-2xx responses back onto the error taxonomy. Network
failures surface as ``TransientError``; nothing is retried automatically.
"""

from typing import Any, Dict, Optional, Type, TypeVar

import requests
from pydantic import BaseModel as PydanticBaseModel
from pydantic import ValidationError as PydanticValidationError

from ..config.settings import Settings, get_settings
from ..exceptions import AuthError, TransientError, ValidationError, error_for_status
from ..utils.structured_logging import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=PydanticBaseModel)


def validate_payload(model_class: Type[M], data: Any) -> M:
    """Validate outgoing data client-side, raising the taxonomy's ValidationError."""
    if isinstance(data, model_class):
        return data
    try:
        return model_class.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = [str(part) for part in first.get("loc", ())]
        message = str(first.get("msg", "Invalid value")).replace("Value error, ", "", 1)
        raise ValidationError(message, field=location[-1] if location else None) from e


class StoreClient:
    """Thin ``requests`` wrapper around the store endpoints.

    ``session`` may be any object with a ``requests``-compatible
    ``request(method, url, ...)`` method returning responses that expose
    ``status_code`` and ``json()``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        session: Optional[Any] = None,
        timeout: Optional[float] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.base_url = (base_url or settings.api.base_url).rstrip("/")
        self.timeout = timeout or settings.api.timeout
        self.session = session or requests.Session()
        self.token = token

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def _headers(self, auth: bool) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if auth:
            if not self.token:
                raise AuthError("Not signed in")
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Any] = None,
        auth: bool = True,
    ) -> Dict[str, Any]:
        """Issue one request and return the decoded JSON body."""
        url = f"{self.base_url}{path}"
        headers = self._headers(auth)
        try:
            response = self.session.request(
                method, url, headers=headers, json=json, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.warning(
                "Store request failed",
                method=method,
                path=path,
                error_type=type(e).__name__,
                operation="store_request",
            )
            raise TransientError("Could not reach the server", details={"path": path}) from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {"data": body}

        if not 200 <= response.status_code < 300:
            message = body.get("error") or body.get("detail") or f"Request failed with status {response.status_code}"
            logger.info(
                "Store returned an error",
                method=method,
                path=path,
                status_code=response.status_code,
                operation="store_request",
            )
            raise error_for_status(response.status_code, str(message), field=body.get("field"))
        return body

    def _data(self, method: str, path: str, **kwargs: Any) -> Any:
        return self._request(method, path, **kwargs).get("data")
