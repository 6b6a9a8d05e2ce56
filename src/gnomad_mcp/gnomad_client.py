"""Async gnomAD GraphQL client using httpx.

Features:
- One POST per query, a fresh AsyncClient per call (nothing shared between calls)
- Configurable endpoint and timeout via GNOMAD_API_URL / GNOMAD_TIMEOUT env vars
- No retries: every failure is terminal for the call that hit it
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from gnomad_mcp.errors import DecodingError, TransportError

_GNOMAD_API = "https://gnomad.broadinstitute.org/api"

log = logging.getLogger("gnomad-mcp")


@dataclass(frozen=True, slots=True)
class RemoteError:
    """A single entry of a GraphQL ``errors`` array."""

    message: str
    extensions: Mapping[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class RemoteQueryResult:
    """Decoded GraphQL response."""

    data: Any = None
    errors: tuple[RemoteError, ...] = ()

    @property
    def error_messages(self) -> list[str]:
        return [err.message for err in self.errors]


def _api_url() -> str:
    return os.environ.get("GNOMAD_API_URL", _GNOMAD_API)


def _timeout() -> float:
    return float(os.environ.get("GNOMAD_TIMEOUT", "30"))


def _make_client() -> httpx.AsyncClient:
    """Create a per-call AsyncClient (caller manages lifecycle)."""
    return httpx.AsyncClient(
        headers={"Content-Type": "application/json"},
        timeout=_timeout(),
    )


async def execute_query(query: str, variables: Mapping[str, Any] | None = None) -> RemoteQueryResult:
    """POST *query* with *variables* to the gnomAD API and decode the reply.

    Raises:
        TransportError: the request failed or the status is not 2xx.
        DecodingError: the body is not a GraphQL ``{data, errors}`` object.
    """
    url = _api_url()
    payload = {"query": query, "variables": dict(variables or {})}
    async with _make_client() as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.HTTPError as exc:
            log.error("POST %s failed: %s", url, exc)
            raise TransportError(f"Request to gnomAD failed: {type(exc).__name__}: {exc}") from exc

    if not resp.is_success:
        log.error("POST %s returned HTTP %d", url, resp.status_code)
        raise TransportError(f"HTTP error! status: {resp.status_code}", status_code=resp.status_code)

    try:
        body = resp.json()
    except ValueError as exc:
        raise DecodingError(f"Invalid JSON in gnomAD response: {exc}") from exc

    return _decode_body(body)


def _decode_body(body: Any) -> RemoteQueryResult:
    if not isinstance(body, dict):
        raise DecodingError(f"Expected a JSON object from gnomAD, got {type(body).__name__}")

    raw_errors = body.get("errors") or []
    if not isinstance(raw_errors, list):
        raise DecodingError("Malformed 'errors' field in gnomAD response")

    errors: list[RemoteError] = []
    for entry in raw_errors:
        if not isinstance(entry, dict) or "message" not in entry:
            raise DecodingError(f"Malformed GraphQL error entry: {entry!r}")
        errors.append(RemoteError(message=str(entry["message"]), extensions=entry.get("extensions")))

    return RemoteQueryResult(data=body.get("data"), errors=tuple(errors))
