"""Unit tests for dataset / reference genome normalization."""

from __future__ import annotations

import pytest

from gnomad_mcp.errors import ArgumentValidationError
from gnomad_mcp.params import (
    DATASETS,
    coerce_int,
    normalize_dataset,
    normalize_reference_genome,
)


class TestNormalizeDataset:
    @pytest.mark.parametrize("dataset", sorted(DATASETS))
    def test_known_values_in_any_case(self, dataset: str) -> None:
        assert normalize_dataset(dataset) == dataset
        assert normalize_dataset(dataset.upper()) == dataset
        assert normalize_dataset(dataset.title()) == dataset

    @pytest.mark.parametrize("value", ["", "gnomad_r5", "gnomad r4", " gnomad_r4", "1000g"])
    def test_unknown_values_fall_back(self, value: str) -> None:
        assert normalize_dataset(value) == "gnomad_r4"

    def test_non_string_falls_back(self) -> None:
        assert normalize_dataset(None) == "gnomad_r4"
        assert normalize_dataset(4) == "gnomad_r4"

    def test_custom_default(self) -> None:
        assert normalize_dataset("nope", default="gnomad_r3") == "gnomad_r3"


class TestNormalizeReferenceGenome:
    @pytest.mark.parametrize("genome", ["GRCh37", "GRCh38"])
    def test_valid_values_pass_through(self, genome: str) -> None:
        assert normalize_reference_genome(genome) == genome

    @pytest.mark.parametrize("value", ["grch37", "GRCH37", "hg19", "", "GRCh39", None])
    def test_everything_else_is_grch38(self, value) -> None:
        assert normalize_reference_genome(value) == "GRCh38"


class TestCoerceInt:
    def test_int_passes(self) -> None:
        assert coerce_int("start", 55516888) == 55516888

    def test_float_truncates(self) -> None:
        assert coerce_int("start", 100.9) == 100

    def test_numeric_string(self) -> None:
        assert coerce_int("start", " 100 ") == 100
        assert coerce_int("start", "100.7") == 100

    @pytest.mark.parametrize("value", ["abc", "", None, True, float("nan"), [1]])
    def test_rejects_non_numeric(self, value) -> None:
        with pytest.raises(ArgumentValidationError, match="start must be an integer"):
            coerce_int("start", value)
