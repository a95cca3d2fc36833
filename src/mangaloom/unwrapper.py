# mangaloom/unwrapper.py
"""Decoding of MangaDex's tagged response envelopes.

Every enveloped response carries a `result` tag:

```json
{"result": "ok", "data": {...}, "relationships": [...]}
{"result": "error", "errors": [{"id": "...", "status": 404, "title": "...", "detail": "..."}]}
```

Paginated responses wrap a list of such envelopes:

```json
{"results": [{"result": "ok", ...}, {"result": "error", ...}], "limit": 10, "offset": 0, "total": 2}
```

A single decoding function handles one envelope; single objects, pages and
bare arrays all go through it element by element, so a page may mix `Ok`
and `Err` entries.
"""

from functools import lru_cache
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .exceptions import ApiError, MalformedResponseError
from .log_config import logger
from .models.errors import ApiErrorRecord

RESULT_KEY = "result"
RESULT_OK = "ok"
RESULT_ERROR = "error"


class Ok(BaseModel):
    """A successful envelope; `value` holds the decoded payload."""

    value: Any

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class Err(BaseModel):
    """An error envelope carrying zero or more error records."""

    errors: list[ApiErrorRecord] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


Envelope = Ok | Err


class Page(BaseModel):
    """One page of an offset-paginated listing.

    Attributes:
        results: The decoded elements, each independently `Ok` or `Err`.
        limit: Page size used by the server.
        offset: Offset of the first element.
        total: Total number of elements across all pages.
    """

    results: list[Ok | Err] = Field(default_factory=list)
    limit: int
    offset: int
    total: int

    model_config = ConfigDict(frozen=True)

    def ok_values(self) -> list[Any]:
        """Returns the payloads of the `Ok` elements, skipping errors."""
        return [item.value for item in self.results if isinstance(item, Ok)]

    @property
    def next_offset(self) -> int | None:
        next_offset = self.offset + self.limit
        return next_offset if next_offset < self.total else None


@lru_cache(maxsize=128)
def _adapter(payload_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(payload_type)


_ERRORS_ADAPTER: TypeAdapter[list[ApiErrorRecord]] = TypeAdapter(list[ApiErrorRecord])


class EnvelopeUnwrapper:
    """Turns decoded JSON into `Ok`/`Err` values, pages and collections.

    The unwrapper is stateless; `MangaloomClient` owns one instance.
    """

    def unwrap_envelope(self, response_json: Any, payload_type: Any = None) -> Envelope:
        """Decode one `{result: ...}` envelope.

        Args:
            response_json: A decoded JSON object.
            payload_type: Type the `"ok"` payload is validated against. The
                whole envelope object (without the `result` tag) is handed to
                the validator, so `ApiData` payloads pick up `data` and
                `relationships`. With `None` the raw mapping is kept.

        Returns:
            `Ok` with the validated payload or `Err` with the error records.

        Raises:
            MalformedResponseError: If the object has no recognizable
                `result` tag or the payload does not validate.
        """
        if not isinstance(response_json, dict):
            raise MalformedResponseError(
                f"Expected a JSON object envelope, got {type(response_json).__name__}"
            )

        tag = response_json.get(RESULT_KEY)
        if tag == RESULT_OK:
            payload = {k: v for k, v in response_json.items() if k != RESULT_KEY}
            if payload_type is None:
                return Ok(value=payload)
            try:
                return Ok(value=_adapter(payload_type).validate_python(payload))
            except ValidationError as e:
                logger.error(f"Payload validation failed for {payload_type}: {e}")
                raise MalformedResponseError(
                    f"Response payload does not match {getattr(payload_type, '__name__', payload_type)}: {e}"
                ) from e

        if tag == RESULT_ERROR:
            try:
                errors = _ERRORS_ADAPTER.validate_python(
                    response_json.get("errors") or []
                )
            except ValidationError as e:
                raise MalformedResponseError(f"Invalid error records: {e}") from e
            return Err(errors=errors)

        if tag is None:
            raise MalformedResponseError("Response envelope has no 'result' tag")
        raise MalformedResponseError(f"Unknown response result tag: {tag!r}")

    def unwrap_single_item(
        self,
        response_json: Any,
        payload_type: Any = None,
        *,
        response: httpx.Response | None = None,
    ) -> Any:
        """Decode one envelope and return its payload.

        Raises:
            ApiError: If the envelope is an error envelope.
            MalformedResponseError: See `unwrap_envelope`.
        """
        envelope = self.unwrap_envelope(response_json, payload_type)
        if isinstance(envelope, Err):
            raise _api_error(envelope, response)
        return envelope.value

    def unwrap_results(
        self,
        response_json: Any,
        payload_type: Any = None,
        *,
        response: httpx.Response | None = None,
    ) -> Page:
        """Decode a paginated listing.

        A top-level error envelope (instead of a page) raises `ApiError`.
        """
        if not isinstance(response_json, dict):
            raise MalformedResponseError(
                f"Expected a JSON object page, got {type(response_json).__name__}"
            )
        if response_json.get(RESULT_KEY) == RESULT_ERROR:
            raise _api_error(self.unwrap_envelope(response_json), response)

        results = response_json.get("results")
        if results is None:
            results = []
        if not isinstance(results, list):
            raise MalformedResponseError(
                f"Expected 'results' to be a list, got {type(results).__name__}"
            )

        try:
            return Page(
                results=[self.unwrap_envelope(item, payload_type) for item in results],
                limit=response_json.get("limit"),
                offset=response_json.get("offset"),
                total=response_json.get("total"),
            )
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid pagination fields: {e}") from e

    def unwrap_collection(
        self,
        response_json: Any,
        payload_type: Any = None,
        *,
        response: httpx.Response | None = None,
    ) -> list[Envelope]:
        """Decode a bare JSON array of envelopes."""
        if isinstance(response_json, dict) and response_json.get(RESULT_KEY) == RESULT_ERROR:
            raise _api_error(self.unwrap_envelope(response_json), response)
        if not isinstance(response_json, list):
            raise MalformedResponseError(
                f"Expected a JSON array, got {type(response_json).__name__}"
            )
        return [self.unwrap_envelope(item, payload_type) for item in response_json]

    def unwrap_raw(self, response_json: Any, payload_type: Any = None) -> Any:
        """Validate a response that carries no envelope at all."""
        if payload_type is None:
            return response_json
        try:
            return _adapter(payload_type).validate_python(response_json)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Response does not match {getattr(payload_type, '__name__', payload_type)}: {e}"
            ) from e


def _api_error(envelope: Envelope, response: httpx.Response | None) -> ApiError:
    errors = envelope.errors if isinstance(envelope, Err) else []
    summary = "; ".join(
        f"{error.status} {error.title or ''}".strip() for error in errors
    )
    message = f"API returned an error: {summary}" if summary else "API returned an error"
    return ApiError(message, errors=errors, response=response)
