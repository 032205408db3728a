"""Runtime settings loader.

This module provides ``Settings``, which resolves the data directory, the
themes root, the app-config file and the UI language from environment
variables and an optional project ``.env`` file.

Role in Architecture
--------------------
- Forms the boundary between the process environment and the strongly-typed
  paths consumed by the storage backend, the config store and the CLI.
- No business logic: only loading, defaulting and validation.

Examples
--------
>>> from cms_pico.settings import Settings
>>> s = Settings()
>>> s.language in ("en", "sv")
True
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

import cms_pico.config as _project_config
from cms_pico.config import (
    DEFAULT_APP_CONFIG_FILENAME,
    DEFAULT_DATA_DIR,
    DEFAULT_THEMES_DIR,
    LANG,
    SUPPORTED_LANGUAGES,
)
from cms_pico.exceptions import ConfigurationError


class Settings:
    r"""Configuration loader and validator for the website core.

    Attributes
    ----------
    data_dir : Path
        Root of the per-user storage tree (``<data_dir>/<user>/files``).
    themes_dir : Path
        Directory holding one sub-directory per installed theme.
    app_config_file : Path
        JSON file backing the application key-value config store.
    language : str
        UI language used for translated messages.
    log_level : str
        Logging level name for the CLI.

    Notes
    -----
    Instantiate once at process start. No runtime mutation is intended.
    """

    def __init__(self) -> None:
        r"""Read the environment, loading the project ``.env`` first.

        Raises
        ------
        ConfigurationError
            If ``PICO_LANG`` names an unsupported language.

        Examples
        --------
        >>> import os
        >>> os.environ["PICO_LANG"] = "sv"
        >>> Settings().language
        'sv'
        """
        # Resolved through the module so tests can monkeypatch PROJECT_ROOT.
        env_path = Path(_project_config.PROJECT_ROOT) / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=True)
        self.data_dir: Path = Path(os.getenv("PICO_DATA_DIR", str(DEFAULT_DATA_DIR)))
        self.themes_dir: Path = Path(
            os.getenv("PICO_THEMES_DIR", str(DEFAULT_THEMES_DIR))
        )
        self.app_config_file: Path = Path(
            os.getenv(
                "PICO_APP_CONFIG", str(self.data_dir / DEFAULT_APP_CONFIG_FILENAME)
            )
        )
        self.language: str = os.getenv("PICO_LANG", LANG)
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        if self.language not in SUPPORTED_LANGUAGES:
            raise ConfigurationError(
                f"Unsupported language: {self.language}",
                context={"supported": list(SUPPORTED_LANGUAGES)},
            )


__all__ = ["Settings"]
