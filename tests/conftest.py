"""Shared test fixtures."""

from pathlib import Path

import pytest
from aiohttp import web

from fparty.config import Config, DeployConfig, ServerConfig, SiteConfig
from fparty.server import create_app


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Create a test configuration with bundled templates and tmp_path deploy dir."""
    return Config(
        server=ServerConfig(),
        site=SiteConfig(),
        deploy=DeployConfig(app_dir=tmp_path),
    )


@pytest.fixture
def app(test_config: Config) -> web.Application:
    return create_app(test_config)
