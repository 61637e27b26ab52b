"""Application keys for type-safe app configuration access."""

from pathlib import Path

from aiohttp import web

from fparty.config import Config
from fparty.core.renderer import PageRenderer

renderer_key = web.AppKey("renderer", PageRenderer)
config_key = web.AppKey("config", Config)
static_dir_key = web.AppKey("static_dir", Path)
