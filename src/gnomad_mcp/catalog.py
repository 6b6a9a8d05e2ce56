"""Static tool catalog advertised through ``tools/list``.

The catalog is declarative metadata only; argument handling lives in
:mod:`gnomad_mcp.tools`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp import types

from gnomad_mcp.params import DEFAULT_DATASET, DEFAULT_REFERENCE_GENOME

GENE_IDENTIFIERS = ("gene_id", "gene_symbol")


@dataclass(frozen=True, slots=True)
class ArgumentSpec:
    """One property of a tool's input schema."""

    name: str
    description: str
    type: str = "string"
    required: bool = False
    default: Any = None

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.default is not None:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """A named tool with its argument schema."""

    name: str
    description: str
    arguments: tuple[ArgumentSpec, ...] = ()
    # At least one of these must be present (gene-scoped tools).
    required_one_of: tuple[str, ...] = ()

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(arg.name for arg in self.arguments if arg.required)

    def default_for(self, argument: str) -> Any:
        for arg in self.arguments:
            if arg.name == argument:
                return arg.default
        return None

    @property
    def input_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {arg.name: arg.json_schema() for arg in self.arguments},
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


def _reference_genome(description: str = "Reference genome") -> ArgumentSpec:
    return ArgumentSpec("reference_genome", description, default=DEFAULT_REFERENCE_GENOME)


def _dataset(description: str = "Dataset ID", default: str = DEFAULT_DATASET) -> ArgumentSpec:
    return ArgumentSpec("dataset", description, default=default)


def _gene_identifiers(gene_id: str, gene_symbol: str) -> tuple[ArgumentSpec, ...]:
    return (ArgumentSpec("gene_id", gene_id), ArgumentSpec("gene_symbol", gene_symbol))


def _interval() -> tuple[ArgumentSpec, ...]:
    return (
        ArgumentSpec("start", "Start position", type="number", required=True),
        ArgumentSpec("stop", "Stop position", type="number", required=True),
    )


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="search",
        description="Search for genes, variants, or regions in gnomAD",
        arguments=(
            ArgumentSpec(
                "query",
                "Search query (gene symbol, gene ID, variant ID, rsID, etc.)",
                required=True,
            ),
            _reference_genome("Reference genome (GRCh37 or GRCh38)"),
            _dataset("Dataset ID (gnomad_r4, gnomad_r3, gnomad_r2_1, etc.)"),
        ),
    ),
    ToolDefinition(
        name="get_gene",
        description="Get detailed information about a gene including constraint scores",
        arguments=(
            *_gene_identifiers("Ensembl gene ID (e.g., ENSG00000141510)", "Gene symbol (e.g., TP53)"),
            _reference_genome("Reference genome (GRCh37 or GRCh38)"),
        ),
        required_one_of=GENE_IDENTIFIERS,
    ),
    ToolDefinition(
        name="get_variant",
        description="Get detailed information about a specific variant",
        arguments=(
            ArgumentSpec(
                "variant_id",
                "Variant ID in format: chr-pos-ref-alt (e.g., 1-55516888-G-A)",
                required=True,
            ),
            _dataset("Dataset ID (gnomad_r4, gnomad_r3, gnomad_r2_1, etc.)"),
        ),
    ),
    ToolDefinition(
        name="get_variants_in_gene",
        description="Get all variants in a specific gene",
        arguments=(
            *_gene_identifiers("Ensembl gene ID", "Gene symbol"),
            _dataset(),
            _reference_genome(),
        ),
        required_one_of=GENE_IDENTIFIERS,
    ),
    ToolDefinition(
        name="get_transcript",
        description="Get information about a specific transcript",
        arguments=(
            ArgumentSpec(
                "transcript_id",
                "Ensembl transcript ID (e.g., ENST00000269305)",
                required=True,
            ),
            _reference_genome(),
        ),
    ),
    ToolDefinition(
        name="get_region_variants",
        description="Get variants in a specific genomic region",
        arguments=(
            ArgumentSpec("chrom", "Chromosome (1-22, X, Y)", required=True),
            *_interval(),
            _dataset(),
            _reference_genome(),
        ),
    ),
    ToolDefinition(
        name="get_coverage",
        description="Get coverage information for a gene",
        arguments=(
            *_gene_identifiers("Ensembl gene ID", "Gene symbol"),
            _dataset(),
            _reference_genome(),
        ),
        required_one_of=GENE_IDENTIFIERS,
    ),
    ToolDefinition(
        name="get_structural_variants",
        description="Get structural variants in a genomic region",
        arguments=(
            ArgumentSpec("chrom", "Chromosome", required=True),
            *_interval(),
            _dataset("Dataset ID (gnomad_sv_r4, gnomad_sv_r2_1)", default="gnomad_sv_r4"),
            _reference_genome(),
        ),
    ),
    ToolDefinition(
        name="get_mitochondrial_variants",
        description="Get mitochondrial variants",
        arguments=(_dataset(default="gnomad_r3"),),
    ),
)

_BY_NAME = {tool.name: tool for tool in TOOLS}

TOOL_NAMES = frozenset(_BY_NAME)


def get_tool(name: str) -> ToolDefinition | None:
    return _BY_NAME.get(name)


def list_tools() -> list[types.Tool]:
    """Return the full catalog as MCP tool descriptors."""
    return [tool.to_mcp_tool() for tool in TOOLS]
