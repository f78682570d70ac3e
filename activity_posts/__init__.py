from __future__ import annotations

from .activity import extract_activity
from .classify import classify_category
from .config import config_sha256, load_config
from .config_schema import AppConfig
from .engine import classify_post, classify_posts
from .errors import ConfigError, ExportError, FeedError
from .normalize import make_post, normalize_text
from .post import ClassifiedPost, Post
from .render import render_row
from .written import detect_written

__all__ = [
    "AppConfig",
    "ClassifiedPost",
    "ConfigError",
    "ExportError",
    "FeedError",
    "Post",
    "classify_category",
    "classify_post",
    "classify_posts",
    "config_sha256",
    "detect_written",
    "extract_activity",
    "load_config",
    "make_post",
    "normalize_text",
    "render_row",
]
