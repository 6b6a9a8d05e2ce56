"""Error taxonomy for tool dispatch.

Every error raised while serving a tool call derives from
:class:`GnomadMCPError` and is turned into an ``"Error: ..."`` text block by
the dispatcher in :mod:`gnomad_mcp.tools`.
"""

from __future__ import annotations

from collections.abc import Sequence


class GnomadMCPError(Exception):
    """Base class for all failures reported back to the caller as text."""


class ArgumentValidationError(GnomadMCPError):
    """Tool arguments are missing, malformed, or not a mapping."""


class UnknownToolError(GnomadMCPError):
    """The requested tool name is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class TransportError(GnomadMCPError):
    """The HTTP round trip failed or returned a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteQueryError(GnomadMCPError):
    """The GraphQL endpoint answered with one or more error entries."""

    def __init__(self, messages: Sequence[str]) -> None:
        super().__init__(f"GraphQL errors: {'; '.join(messages)}")
        self.messages = tuple(messages)


class DecodingError(GnomadMCPError):
    """The response body does not have the ``{data, errors}`` shape."""
