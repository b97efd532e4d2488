"""Typed configuration schema and loader for the converter."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, InstanceOf, conint, field_validator

from ..edtf.modifiers import CustomModifier

LOCALES_ENV = "EDTF_CONVERTER_LOCALES"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ApproximateVariance(BaseModel):
    """Widening applied to approximate values, one amount per unit."""

    years: conint(ge=0) = 3
    months: conint(ge=0) = 3
    days: conint(ge=0) = 3

    model_config = ConfigDict(extra="forbid", frozen=True)


class CustomModifierSettings(BaseModel):
    """Declarative custom modifier: a keyword and a literal EDTF marker."""

    keyword: str = Field(min_length=1)
    marker: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def build(self) -> CustomModifier:
        return CustomModifier.from_marker(self.keyword, self.marker)


class ConverterOptions(BaseModel):
    """Top-level converter options.

    ``custom_modifiers`` accepts :class:`CustomModifier` instances or mappings
    with ``keyword`` and ``marker`` keys.  ``locales`` is ordered by priority.
    """

    approximate_variance: ApproximateVariance = Field(default_factory=ApproximateVariance)
    custom_modifiers: tuple[InstanceOf[CustomModifier], ...] = ()
    locales: tuple[str, ...] = Field(default=("en",), min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("custom_modifiers", mode="before")
    @classmethod
    def _build_custom_modifiers(cls, value: Any) -> Any:
        if value is None:
            return ()
        return tuple(
            CustomModifierSettings.model_validate(item).build() if isinstance(item, Mapping) else item
            for item in value
        )


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConverterOptions:
    """Load options from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``EDTF_CONVERTER_LOCALES`` (comma separated locale identifiers).
    """

    with (
        importlib_resources.files("edtf_converter.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    raw_locales = environ.get(LOCALES_ENV, "").strip()
    if raw_locales:
        merged["locales"] = [loc.strip() for loc in raw_locales.split(",") if loc.strip()]

    return ConverterOptions.model_validate(merged)


__all__ = [
    "ApproximateVariance",
    "ConverterOptions",
    "CustomModifierSettings",
    "LOCALES_ENV",
    "deep_merge_dicts",
    "load_config",
]
