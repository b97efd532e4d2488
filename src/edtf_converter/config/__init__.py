"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable ``EDTF_CONVERTER_LOCALES`` for the locale list
"""

from .schema import ApproximateVariance, ConverterOptions, CustomModifierSettings, load_config

__all__ = ["ApproximateVariance", "ConverterOptions", "CustomModifierSettings", "load_config"]
