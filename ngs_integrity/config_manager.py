"""
Configuration management for the integrity checker.

Sample sizes and tool names default to the values baked into each
checker's Settings. An optional JSON file overrides them:

    {
      "fastq":   {"line_budget": 40000, "validator": "fastQValidator"},
      "bam":     {"header_lines": 500, "tail_bytes": 32768, "eof_magic": "42430200"},
      "cram":    {"header_lines": 500},
      "vcf":     {"record_budget": 10000},
      "options": {"scratch_dir": "/scratch/tmp"}
    }

All sections are optional. Unknown sections or settings are rejected.
"""

import json
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ngs_integrity.checkers import BamChecker, CramChecker, FastqChecker, VcfChecker
from ngs_integrity.exceptions import ConfigurationError
from ngs_integrity.logger import get_logger

# Only these fields can be specified in the "options" section; they apply to every checker
ALLOWED_GLOBAL_OPTIONS = {'scratch_dir'}

# Settings that must be positive integers wherever they appear
_POSITIVE_INT_SETTINGS = {'line_budget', 'header_lines', 'tail_bytes', 'record_budget'}

# Zero allowed
_NON_NEGATIVE_INT_SETTINGS = {'max_errors'}

# Whole bytes written as hex digits, e.g. "42430200"
HEX_SIGNATURE = re.compile(r'(?:[0-9A-Fa-f]{2})+')


@dataclass
class Config:
    """
    Settings for every checker.

    Attributes:
        fastq: FastqChecker settings
        bam: BamChecker settings
        cram: CramChecker settings
        vcf: VcfChecker settings
        options: Global options applied to all checkers
    """
    fastq: FastqChecker.Settings = field(default_factory=FastqChecker.Settings)
    bam: BamChecker.Settings = field(default_factory=BamChecker.Settings)
    cram: CramChecker.Settings = field(default_factory=CramChecker.Settings)
    vcf: VcfChecker.Settings = field(default_factory=VcfChecker.Settings)
    options: Dict[str, Any] = field(default_factory=dict)


# Section name -> Settings class
_SECTIONS = {
    'fastq': FastqChecker.Settings,
    'bam': BamChecker.Settings,
    'cram': CramChecker.Settings,
    'vcf': VcfChecker.Settings,
}


class ConfigManager:
    """
    Configuration file parser and validator.

    Primary usage:
        config = ConfigManager.load("integrity.json")
    """

    @staticmethod
    def load(config_path: Union[str, Path]) -> Config:
        """
        Load and validate configuration from JSON file.

        Raises:
            ConfigurationError: If the file is missing, malformed or invalid
        """
        logger = get_logger()
        logger.info(f"Loading configuration from: {config_path}")

        config_file = Path(config_path)
        if not config_file.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file: {e}") from e

        config = ConfigManager.from_dict(data)
        logger.debug("Configuration loaded and validated successfully")
        return config

    @staticmethod
    def from_dict(data: Any) -> Config:
        """
        Build a Config from an already-parsed mapping.

        Raises:
            ConfigurationError: If the mapping is invalid
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a JSON object, got {type(data).__name__}"
            )

        unknown = set(data) - set(_SECTIONS) - {'options'}
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration section(s): {', '.join(sorted(unknown))}. "
                f"Allowed: {', '.join(sorted(set(_SECTIONS) | {'options'}))}"
            )

        options = ConfigManager._parse_options(data.get('options', {}))

        config = Config(options=options)
        for section, settings_cls in _SECTIONS.items():
            settings = ConfigManager._parse_section(section, data.get(section, {}), settings_cls)
            if 'scratch_dir' in options and 'scratch_dir' not in data.get(section, {}):
                settings = settings.update(scratch_dir=options['scratch_dir'])
            setattr(config, section, settings)

        return config

    @staticmethod
    def _parse_options(options: Any) -> Dict[str, Any]:
        """Parse and validate the global options section (internal method)."""
        if not isinstance(options, dict):
            raise ConfigurationError("'options' must be a dictionary")

        invalid_keys = set(options) - ALLOWED_GLOBAL_OPTIONS
        if invalid_keys:
            raise ConfigurationError(
                f"Invalid global options: {', '.join(sorted(invalid_keys))}. "
                f"Only {', '.join(sorted(ALLOWED_GLOBAL_OPTIONS))} allowed."
            )

        scratch_dir = options.get('scratch_dir')
        if scratch_dir is not None and not isinstance(scratch_dir, str):
            raise ConfigurationError(
                f"'scratch_dir' must be a string or null, got {type(scratch_dir).__name__}"
            )

        return dict(options)

    @staticmethod
    def _parse_section(section: str, values: Any, settings_cls):
        """Parse one checker section into its Settings object (internal method)."""
        if not isinstance(values, dict):
            raise ConfigurationError(f"'{section}' must be a dictionary")

        for key in _POSITIVE_INT_SETTINGS & set(values):
            value = values[key]
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(
                    f"'{section}.{key}' must be a positive integer, got {value!r}"
                )

        for key in _NON_NEGATIVE_INT_SETTINGS & set(values):
            value = values[key]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(
                    f"'{section}.{key}' must be a non-negative integer, got {value!r}"
                )

        expected_types = {f.name: f.type for f in fields(settings_cls)}
        for key, value in values.items():
            expected = expected_types.get(key)
            if expected is str and not isinstance(value, str):
                raise ConfigurationError(
                    f"'{section}.{key}' must be a string, got {type(value).__name__}"
                )
            if expected == Optional[str] and value is not None and not isinstance(value, str):
                raise ConfigurationError(
                    f"'{section}.{key}' must be a string or null, got {type(value).__name__}"
                )
            if expected is bool and not isinstance(value, bool):
                raise ConfigurationError(
                    f"'{section}.{key}' must be true or false, got {value!r}"
                )

        eof_magic = values.get('eof_magic')
        if 'eof_magic' in expected_types and eof_magic is not None:
            if not HEX_SIGNATURE.fullmatch(eof_magic):
                raise ConfigurationError(
                    f"'{section}.eof_magic' must be a non-empty hex string with an even number "
                    f"of digits, got {eof_magic!r}"
                )

        try:
            return settings_cls.from_dict(values)
        except ValueError as e:
            raise ConfigurationError(f"Invalid '{section}' section: {e}") from e
