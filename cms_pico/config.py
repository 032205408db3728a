"""Global configuration constants for the project.

Defines paths, validation limits and config keys used across the website
guard, the themes service and the command line tools.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
PACKAGE_DIR: Path = PROJECT_ROOT / "cms_pico"
LOG_DIR: Path = PROJECT_ROOT / "logs"
DEFAULT_DATA_DIR: Path = PROJECT_ROOT / "data"
DEFAULT_THEMES_DIR: Path = PROJECT_ROOT / "Pico" / "themes"
DEFAULT_APP_CONFIG_FILENAME: str = "appconfig.json"

# Website validation
SITE_LENGTH_MIN: int = 3
NAME_LENGTH_MIN: int = 5
ALPHA_NUMERIC_SCORES: str = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-"
)
FORBIDDEN_PATH_SEGMENTS: tuple[str, ...] = (".", "..")
PATH_SEPARATOR: str = "/"

# Website types and options
TYPE_PUBLIC: int = 1
TYPE_PRIVATE: int = 2
OPTION_PRIVATE: str = "private"
OPTION_CONTENT_DIR: str = "content_dir"
DEFAULT_CONTENT_DIR: str = "content"
PAGE_ACCESS_META_KEY: str = "access"
PAGE_ACCESS_PRIVATE: str = "private"
INDEX_PAGE: str = "index"
PAGE_FILE_SUFFIX: str = ".md"

# Themes
BUILTIN_THEMES: tuple[str, ...] = ("default",)
DEFAULT_THEME: str = "default"
CONFIG_CUSTOM_THEMES: str = "custom_themes"

# Page rendering
MARKDOWN_EXTRAS: list[str] = ["tables", "fenced-code-blocks"]

# Logging
LOG_FILENAME_CLI: str = "cms_pico.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# UI defaults
LANG: str = "en"
SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "sv")
