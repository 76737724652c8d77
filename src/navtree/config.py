"""Configuration management for navtree.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from navtree.core.context import DEFAULT_HOME_TITLE

CONFIG_FILENAME = "navtree.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class DocsConfig:
    """Documentation source configuration."""

    source_dir: Path = field(default_factory=lambda: Path("docs"))
    tree_file: Path | None = None
    ignore: list[str] = field(default_factory=list)


@dataclass
class NavigationConfig:
    """Navigation rendering configuration."""

    home_title: str = DEFAULT_HOME_TITLE
    max_depth: int | None = None
    hide_directory_index: bool = True


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    docs: DocsConfig
    navigation: NavigationConfig
    translations: dict[str, str] = field(default_factory=dict)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for navtree.toml in current directory and parents.

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
            return cls._default()

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
    def _default(cls) -> "Config":
        return cls(
            server=ServerConfig(),
            docs=DocsConfig(),
            navigation=NavigationConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid configuration file {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            docs=cls._parse_docs(data.get("docs"), config_dir),
            navigation=cls._parse_navigation(data.get("navigation")),
            translations=cls._parse_i18n(data.get("i18n")),
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
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(source_dir=config_dir / "docs")

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        source_dir = data.get("source_dir", "docs")
        if not isinstance(source_dir, str):
            raise ValueError("docs.source_dir must be a string")

        tree_file = data.get("tree_file")
        if tree_file is not None and not isinstance(tree_file, str):
            raise ValueError("docs.tree_file must be a string")

        ignore = data.get("ignore", [])
        if not isinstance(ignore, list):
            raise ValueError("docs.ignore must be a list")
        for item in ignore:
            if not isinstance(item, str):
                raise ValueError("docs.ignore items must be strings")

        return DocsConfig(
            source_dir=config_dir / source_dir,
            tree_file=config_dir / tree_file if tree_file is not None else None,
            ignore=list(ignore),
        )

    @classmethod
    def _parse_navigation(cls, data: object) -> NavigationConfig:
        if data is None:
            return NavigationConfig()

        if not isinstance(data, dict):
            raise ValueError("navigation section must be a dictionary")

        home_title = data.get("home_title", DEFAULT_HOME_TITLE)
        if not isinstance(home_title, str):
            raise ValueError("navigation.home_title must be a string")

        max_depth = data.get("max_depth")
        if max_depth is not None and (not isinstance(max_depth, int) or isinstance(max_depth, bool)):
            raise ValueError("navigation.max_depth must be an integer")

        hide_directory_index = data.get("hide_directory_index", True)
        if not isinstance(hide_directory_index, bool):
            raise ValueError("navigation.hide_directory_index must be a boolean")

        return NavigationConfig(
            home_title=home_title,
            max_depth=max_depth,
            hide_directory_index=hide_directory_index,
        )

    @classmethod
    def _parse_i18n(cls, data: object) -> dict[str, str]:
        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ValueError("i18n section must be a dictionary")

        translations: dict[str, str] = {}
        for key, value in data.items():
            if not isinstance(value, str):
                raise ValueError(f"i18n.{key} must be a string")
            translations[key] = value
        return translations

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
        max_depth: int | None = None,
        hide_directory_index: bool | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            source_dir: Override docs.source_dir
            max_depth: Override navigation.max_depth
            hide_directory_index: Override navigation.hide_directory_index

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        docs = self.docs
        if source_dir is not None:
            docs = replace(self.docs, source_dir=source_dir)

        navigation = self.navigation
        if max_depth is not None:
            navigation = replace(navigation, max_depth=max_depth)
        if hide_directory_index is not None:
            navigation = replace(navigation, hide_directory_index=hide_directory_index)

        return replace(self, server=server, docs=docs, navigation=navigation)
