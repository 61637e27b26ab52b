"""Configuration management for fparty.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "fparty.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class SiteConfig:
    """Site rendering configuration."""

    templates_dir: Path | None = None


@dataclass
class DeployConfig:
    """Deployment configuration."""

    app_dir: Path = field(default_factory=lambda: Path("."))
    restart_file: str = "tmp/restart.txt"


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    site: SiteConfig
    deploy: DeployConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load fparty.toml, auto-discovered when config_path is None.

        Raises:
            FileNotFoundError: If an explicit config_path doesn't exist
            ValueError: If the file is not valid TOML or a key has the wrong type
        """
        if config_path is None:
            config_path = cls._discover_config()
            if config_path is None:
                return cls._default()
        elif not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        return cls._load_from_file(config_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        cwd = Path.cwd()
        for directory in (cwd, *cwd.parents):
            candidate = directory / CONFIG_FILENAME
            if candidate.exists():
                return candidate
        return None

    @classmethod
    def _default(cls) -> "Config":
        return cls(server=ServerConfig(), site=SiteConfig(), deploy=DeployConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        with path.open("rb") as f:
            data = tomllib.load(f)

        # Relative paths in the file resolve against its directory.
        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            site=cls._parse_site(data.get("site"), config_dir),
            deploy=cls._parse_deploy(data.get("deploy"), config_dir),
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
    def _parse_site(cls, data: object, config_dir: Path) -> SiteConfig:
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        templates_dir = data.get("templates_dir")
        if templates_dir is None:
            return SiteConfig()
        if not isinstance(templates_dir, str):
            raise ValueError("site.templates_dir must be a string")

        return SiteConfig(templates_dir=config_dir / templates_dir)

    @classmethod
    def _parse_deploy(cls, data: object, config_dir: Path) -> DeployConfig:
        if data is None:
            return DeployConfig(app_dir=config_dir)

        if not isinstance(data, dict):
            raise ValueError("deploy section must be a dictionary")

        app_dir = data.get("app_dir", ".")
        if not isinstance(app_dir, str):
            raise ValueError("deploy.app_dir must be a string")

        restart_file = data.get("restart_file", "tmp/restart.txt")
        if not isinstance(restart_file, str):
            raise ValueError("deploy.restart_file must be a string")

        return DeployConfig(app_dir=config_dir / app_dir, restart_file=restart_file)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        templates_dir: Path | None = None,
    ) -> "Config":
        """Return a copy with the non-None CLI overrides applied."""
        server_overrides = {
            key: value
            for key, value in (("host", host), ("port", port))
            if value is not None
        }
        server = replace(self.server, **server_overrides)

        site = self.site
        if templates_dir is not None:
            site = replace(self.site, templates_dir=templates_dir)

        return replace(self, server=server, site=site)
