"""Argument normalization helpers shared by every tool."""

from __future__ import annotations

import re
from typing import Any

from gnomad_mcp.errors import ArgumentValidationError

DATASETS = frozenset(
    {
        "gnomad_r2_1",
        "gnomad_r3",
        "gnomad_r4",
        "gnomad_sv_r2_1",
        "gnomad_sv_r4",
        "gnomad_cnv_r4",
        "exac",
    }
)
REFERENCE_GENOMES = frozenset({"GRCh37", "GRCh38"})

DEFAULT_DATASET = "gnomad_r4"
DEFAULT_REFERENCE_GENOME = "GRCh38"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def normalize_dataset(value: Any, default: str = DEFAULT_DATASET) -> str:
    """Return the canonical (lower-case) dataset id, or *default* if unknown."""
    if not isinstance(value, str):
        return default
    lowered = value.lower()
    return lowered if lowered in DATASETS else default


def normalize_reference_genome(value: Any) -> str:
    """Return ``GRCh37``/``GRCh38`` unchanged; anything else maps to GRCh38.

    The match is case-sensitive: ``"grch37"`` is not recognized.
    """
    if isinstance(value, str) and value in REFERENCE_GENOMES:
        return value
    return DEFAULT_REFERENCE_GENOME


def coerce_int(name: str, value: Any) -> int:
    """Coerce a coordinate argument to ``int``.

    Strings are parsed leniently: the leading integer is used, so ``"100.7"``
    and ``"100bp"`` both give 100.
    """
    if isinstance(value, bool):
        raise ArgumentValidationError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            raise ArgumentValidationError(f"{name} must be an integer, got {value!r}")
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    raise ArgumentValidationError(f"{name} must be an integer, got {value!r}")
