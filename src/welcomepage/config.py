"""Configuration management for Welcome Page.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from welcomepage.core.errors import ConfigurationError

CONFIG_FILENAME = "welcomepage.toml"


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass(frozen=True)
class DocsConfig:
    """Markdown corpus configuration."""

    root_directory: Path | None = None


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    docs: DocsConfig = field(default_factory=DocsConfig)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for welcomepage.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            docs=cls._parse_docs(data.get("docs"), config_dir),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance; root_directory stays None when unset or blank
        """
        if data is None:
            return DocsConfig()

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        root_directory = data.get("root_directory")
        if root_directory is None:
            return DocsConfig()
        if not isinstance(root_directory, str):
            raise ValueError("docs.root_directory must be a string")
        if not root_directory.strip():
            return DocsConfig()

        return DocsConfig(root_directory=config_dir / root_directory)

    def require_root_directory(self) -> Path:
        """Return the configured root directory.

        The directory itself is not checked for existence.

        Raises:
            ConfigurationError: If no root directory is configured
        """
        root_directory = self.docs.root_directory
        if root_directory is None or not str(root_directory).strip():
            raise ConfigurationError("RootDirectory is not configured.")
        return root_directory

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        root_directory: Path | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        docs = self.docs
        if root_directory is not None:
            docs = replace(self.docs, root_directory=root_directory)

        return replace(self, server=server, docs=docs)
