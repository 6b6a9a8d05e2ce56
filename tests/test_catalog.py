"""Unit tests for the static tool catalog."""

from __future__ import annotations

from gnomad_mcp import catalog

EXPECTED_NAMES = {
    "search",
    "get_gene",
    "get_variant",
    "get_variants_in_gene",
    "get_transcript",
    "get_region_variants",
    "get_coverage",
    "get_structural_variants",
    "get_mitochondrial_variants",
}


class TestListTools:
    def test_exactly_nine_tools(self) -> None:
        tools = catalog.list_tools()
        assert len(tools) == 9
        assert {t.name for t in tools} == EXPECTED_NAMES
        assert catalog.TOOL_NAMES == EXPECTED_NAMES

    def test_listing_is_stable(self) -> None:
        first = [t.model_dump() for t in catalog.list_tools()]
        second = [t.model_dump() for t in catalog.list_tools()]
        assert first == second

    def test_schemas_are_objects(self) -> None:
        for tool in catalog.list_tools():
            assert tool.inputSchema["type"] == "object"
            assert tool.description


class TestToolDefinitions:
    def test_required_arguments(self) -> None:
        assert catalog.get_tool("search").required == ("query",)
        assert catalog.get_tool("get_variant").required == ("variant_id",)
        assert catalog.get_tool("get_region_variants").required == ("chrom", "start", "stop")
        assert catalog.get_tool("get_mitochondrial_variants").required == ()

    def test_gene_scoped_tools_share_rule(self) -> None:
        for name in ("get_gene", "get_variants_in_gene", "get_coverage"):
            tool = catalog.get_tool(name)
            assert tool.required_one_of == ("gene_id", "gene_symbol")
            assert "required" not in tool.input_schema

    def test_dataset_defaults(self) -> None:
        assert catalog.get_tool("get_variant").default_for("dataset") == "gnomad_r4"
        assert catalog.get_tool("get_structural_variants").default_for("dataset") == "gnomad_sv_r4"
        assert catalog.get_tool("get_mitochondrial_variants").default_for("dataset") == "gnomad_r3"

    def test_schema_renders_defaults_and_types(self) -> None:
        schema = catalog.get_tool("get_region_variants").input_schema
        assert schema["properties"]["start"]["type"] == "number"
        assert schema["properties"]["reference_genome"]["default"] == "GRCh38"
        assert schema["required"] == ["chrom", "start", "stop"]

    def test_unknown_tool(self) -> None:
        assert catalog.get_tool("get_everything") is None
