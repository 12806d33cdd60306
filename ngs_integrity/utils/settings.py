"""
Base settings infrastructure for checkers.

Provides BaseSettings abstract base class with immutable update pattern,
deep copy support, and dictionary serialization for all checker Settings classes.

Features:
    - Immutable update pattern (prevents shared mutable state bugs)
    - Deep copy support
    - Dictionary serialization (to_dict/from_dict)
    - Field name validation (prevents typos)
    - Pretty printing for inspection
"""

from dataclasses import asdict, fields
from copy import deepcopy
from typing import Dict, Any
from abc import ABC


class BaseSettings(ABC):
    """
    Base class for all checker settings with common functionality.

    Usage:
        # Create settings
        settings = BamChecker.Settings()

        # Update (returns new instance)
        new_settings = settings.update(tail_bytes=65536)

        # Convert to dict
        settings_dict = settings.to_dict()

        # Load from dict
        settings = BamChecker.Settings.from_dict({'header_lines': 1000})
    """

    def copy(self):
        """Return a deep copy of settings."""
        return deepcopy(self)

    def update(self, **kwargs):
        """
        Update settings and return new instance (immutable pattern).

        Args:
            **kwargs: Settings to update

        Returns:
            New settings instance with updated values

        Raises:
            ValueError: If an unknown setting name is provided

        Example:
            >>> settings = FastqChecker.Settings()
            >>> new_settings = settings.update(line_budget=400)
            >>> settings.line_budget  # Original unchanged
            40000
            >>> new_settings.line_budget
            400
        """
        new_settings = self.copy()
        self._check_names(kwargs.keys())

        for key, value in kwargs.items():
            setattr(new_settings, key, value)

        return new_settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """
        Create settings instance from dictionary.

        Raises:
            ValueError: If dictionary contains unknown settings
        """
        cls._check_names(data.keys())
        return cls(**data)

    @classmethod
    def _check_names(cls, names):
        valid_fields = {f.name for f in fields(cls)}
        unknown = set(names) - valid_fields
        if unknown:
            allowed = ', '.join(sorted(valid_fields))
            unknown_str = ', '.join(f"'{k}'" for k in sorted(unknown))
            raise ValueError(
                f"Unknown setting(s) {unknown_str} for {cls.__qualname__}. "
                f"Allowed settings: {allowed}"
            )

    def __str__(self) -> str:
        """
        Pretty print settings for inspection.

        Example:
            >>> print(settings)
            BamChecker.Settings:
              header_lines: 500
              tail_bytes: 32768
              ...
        """
        lines = [f"{self.__class__.__qualname__}:"]
        for key, value in self.to_dict().items():
            lines.append(f"  {key}: {value}")
        return '\n'.join(lines)
