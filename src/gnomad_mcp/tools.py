"""Tool dispatch: validate arguments, run one gnomAD query, unwrap the result.

Every call produces exactly one text block. Failures are rendered as
``"Error: <message>"`` instead of being raised to the MCP layer.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from mcp import types

from gnomad_mcp import catalog, gnomad_client, queries
from gnomad_mcp.errors import (
    ArgumentValidationError,
    GnomadMCPError,
    RemoteQueryError,
    UnknownToolError,
)
from gnomad_mcp.params import coerce_int, normalize_dataset, normalize_reference_genome

log = logging.getLogger("gnomad-mcp")

Variables = dict[str, Any]

# ---------------------------------------------------------------------------
# Argument helpers
# ---------------------------------------------------------------------------


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def _string(args: Mapping[str, Any], name: str) -> str:
    value = args[name]
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise ArgumentValidationError(f"{name} must be a string, got {value!r}")
    return value


def _optional_string(args: Mapping[str, Any], name: str) -> str | None:
    # Falsy values (None, "", False, 0) mean the identifier was not given.
    value = args.get(name)
    if not value:
        return None
    if not isinstance(value, str):
        raise ArgumentValidationError(f"{name} must be a string, got {value!r}")
    return value


def _require_one_of(tool: catalog.ToolDefinition, args: Mapping[str, Any]) -> None:
    """Shared check for gene-scoped tools: gene_id or gene_symbol must be given."""
    if tool.required_one_of and not any(
        _optional_string(args, k) for k in tool.required_one_of
    ):
        raise ArgumentValidationError(
            f"Either {' or '.join(tool.required_one_of)} must be provided"
        )


def _validate(tool: catalog.ToolDefinition, args: Mapping[str, Any]) -> None:
    for name in tool.required:
        if not _is_present(args.get(name)):
            raise ArgumentValidationError(f"Missing required argument: {name}")
    _require_one_of(tool, args)


def _dataset(tool: catalog.ToolDefinition, args: Mapping[str, Any]) -> str:
    value = args.get("dataset")
    if not _is_present(value):
        return tool.default_for("dataset")
    return normalize_dataset(value)


def _reference_genome(args: Mapping[str, Any]) -> str:
    return normalize_reference_genome(args.get("reference_genome"))


def _gene(args: Mapping[str, Any]) -> Variables:
    # Absent identifiers are sent as explicit null, never omitted.
    return {
        "geneId": _optional_string(args, "gene_id"),
        "geneSymbol": _optional_string(args, "gene_symbol"),
    }


def _interval(args: Mapping[str, Any]) -> Variables:
    return {
        "chrom": _string(args, "chrom"),
        "start": coerce_int("start", args["start"]),
        "stop": coerce_int("stop", args["stop"]),
    }


# ---------------------------------------------------------------------------
# Route table
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Route:
    """How one tool maps onto a GraphQL query and back."""

    query: str
    bind: Callable[[catalog.ToolDefinition, Mapping[str, Any]], Variables]
    result_path: tuple[str, ...]
    many: bool = False

    def empty(self) -> Any:
        return [] if self.many else None


_ROUTES: dict[str, Route] = {
    "search": Route(
        query=queries.SEARCH,
        bind=lambda tool, args: {
            "query": _string(args, "query"),
            "referenceGenome": _reference_genome(args),
        },
        result_path=("searchResults",),
        many=True,
    ),
    "get_gene": Route(
        query=queries.GET_GENE,
        bind=lambda tool, args: {**_gene(args), "referenceGenome": _reference_genome(args)},
        result_path=("gene",),
    ),
    "get_variant": Route(
        query=queries.GET_VARIANT,
        bind=lambda tool, args: {
            "variantId": _string(args, "variant_id"),
            "datasetId": _dataset(tool, args),
        },
        result_path=("variant",),
    ),
    "get_variants_in_gene": Route(
        query=queries.GET_VARIANTS_IN_GENE,
        bind=lambda tool, args: {
            **_gene(args),
            "datasetId": _dataset(tool, args),
            "referenceGenome": _reference_genome(args),
        },
        result_path=("gene", "variants"),
        many=True,
    ),
    "get_transcript": Route(
        query=queries.GET_TRANSCRIPT,
        bind=lambda tool, args: {
            "transcriptId": _string(args, "transcript_id"),
            "referenceGenome": _reference_genome(args),
        },
        result_path=("transcript",),
    ),
    "get_region_variants": Route(
        query=queries.GET_REGION_VARIANTS,
        bind=lambda tool, args: {
            **_interval(args),
            "datasetId": _dataset(tool, args),
            "referenceGenome": _reference_genome(args),
        },
        result_path=("region", "variants"),
        many=True,
    ),
    "get_coverage": Route(
        query=queries.GET_COVERAGE,
        bind=lambda tool, args: {
            **_gene(args),
            "datasetId": _dataset(tool, args),
            "referenceGenome": _reference_genome(args),
        },
        result_path=("gene", "coverage"),
    ),
    "get_structural_variants": Route(
        query=queries.GET_STRUCTURAL_VARIANTS,
        bind=lambda tool, args: {
            **_interval(args),
            "datasetId": _dataset(tool, args),
            "referenceGenome": _reference_genome(args),
        },
        result_path=("region", "structural_variants"),
        many=True,
    ),
    "get_mitochondrial_variants": Route(
        query=queries.GET_MITOCHONDRIAL_VARIANTS,
        bind=lambda tool, args: {"datasetId": _dataset(tool, args)},
        result_path=("mitochondrial_variants",),
        many=True,
    ),
}


def _extract(data: Any, route: Route) -> Any:
    node = data
    for key in route.result_path:
        if not isinstance(node, Mapping):
            return route.empty()
        node = node.get(key)
    return route.empty() if node is None else node


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


def prepare(name: str, arguments: Any) -> tuple[str, Variables, Route]:
    """Validate *arguments* for tool *name* and build the GraphQL request.

    Returns ``(query, variables, route)``. Raises before any network I/O.
    """
    if not isinstance(arguments, Mapping):
        raise ArgumentValidationError("Invalid arguments provided")

    tool = catalog.get_tool(name)
    route = _ROUTES.get(name)
    if tool is None or route is None:
        raise UnknownToolError(name)

    _validate(tool, arguments)
    return route.query, route.bind(tool, arguments), route


async def run_tool(name: str, arguments: Any) -> Any:
    """Execute tool *name* and return the unwrapped result (raises on failure)."""
    query, variables, route = prepare(name, arguments)
    log.debug("Running %s with %s", name, variables)

    result = await gnomad_client.execute_query(query, variables)
    if result.errors:
        raise RemoteQueryError(result.error_messages)

    return _extract(result.data, route)


async def call_tool(name: str, arguments: Any) -> list[types.TextContent]:
    """Run a tool and render its result (or failure) as a single text block."""
    try:
        value = await run_tool(name, arguments)
        text = json.dumps(value, indent=2, ensure_ascii=False)
    except GnomadMCPError as exc:
        log.warning("Tool %s failed: %s", name, exc)
        text = f"Error: {exc}"
    except Exception as exc:
        log.exception("Unexpected failure in tool %s", name)
        text = f"Error: {exc}"
    return [types.TextContent(type="text", text=text)]
