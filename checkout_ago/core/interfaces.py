"""Core interfaces and abstract base classes for checkout-ago."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .models import CommandResult


class IGitRunner(ABC):
    """Interface for running the git executable."""

    @property
    @abstractmethod
    def executable(self) -> str:
        """Name or path of the git executable."""
        pass

    @abstractmethod
    def capture(self, args: Sequence[str]) -> CommandResult:
        """Run git with ``args`` and capture its output."""
        pass

    @abstractmethod
    def call(self, args: Sequence[str]) -> int:
        """Run git with ``args`` on the parent's streams and return the exit code."""
        pass


class IConfigManager(ABC):
    """Interface for configuration management."""

    @abstractmethod
    def load_config(self, config_path: Optional[Path] = None) -> Dict[str, Any]:
        """Load configuration from file."""
        pass

    @abstractmethod
    def get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values."""
        pass

    @abstractmethod
    def validate_config(self, config: Dict[str, Any]) -> List[str]:
        """Validate configuration and return any errors."""
        pass
