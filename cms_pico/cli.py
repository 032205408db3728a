"""Command line entrypoint for administering themes and checking websites.

This module implements the ``cms-pico`` command. It is a thin orchestration
layer: argument parsing, logging setup, settings loading and wiring of the
storage, config and localization collaborators into the services. All
behavior lives in :mod:`cms_pico.service`.

Errors raised by the services are ``AppError`` subclasses; they are logged,
printed in red and turned into exit code ``1``.

Examples
--------
>>> # In shell
>>> cms-pico themes list
>>> cms-pico website check --user alice --site blog --name "My Blog" --path sites/blog
>>> cms-pico website render --user alice --site blog --name "My Blog" \\
...     --path sites/blog --page about --viewer bob
"""

from __future__ import annotations

import argparse
import logging
import os

from rich.console import Console
from rich.table import Table

from cms_pico.config import LOG_DIR, LOG_FILENAME_CLI, LOG_FORMAT, TYPE_PRIVATE
from cms_pico.exceptions import AppError
from cms_pico.i18n import Localizer
from cms_pico.model.website import Website
from cms_pico.service.pages import PageService
from cms_pico.service.themes import ThemesService
from cms_pico.service.website_guard import WebsiteGuard
from cms_pico.settings import Settings
from cms_pico.storage.app_config import AppConfigStore
from cms_pico.storage.local import LocalStorage

logger = logging.getLogger(__name__)

console = Console()


def configure_logging(level: str = "INFO", enable_file: bool = True) -> None:
    r"""Configure logging output for the command line tools.

    Installs a console handler and, when ``enable_file`` is set, a file
    handler under ``logs/``. Failure to create the file handler is ignored
    so the command still runs on read-only checkouts.

    Parameters
    ----------
    level : str, optional
        Logging level name, e.g. ``"DEBUG"``. Defaults to ``"INFO"``.
    enable_file : bool, optional
        Whether to also log to ``logs/cms_pico.log``.
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0, logging.FileHandler(LOG_DIR / LOG_FILENAME_CLI, mode="a")
            )
        except OSError:
            pass
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cms-pico", description="Manage Pico themes and check websites."
    )
    parser.add_argument("--log-level", type=str, default=None)
    commands = parser.add_subparsers(dest="command", required=True)

    themes = commands.add_parser("themes", help="List and register themes")
    themes_actions = themes.add_subparsers(dest="action", required=True)
    list_cmd = themes_actions.add_parser("list", help="List available themes")
    list_cmd.add_argument("--custom-only", action="store_true")
    themes_actions.add_parser("new", help="List installed, unregistered themes")
    add_cmd = themes_actions.add_parser("add", help="Register a custom theme")
    add_cmd.add_argument("theme")
    remove_cmd = themes_actions.add_parser("remove", help="Unregister a custom theme")
    remove_cmd.add_argument("theme")

    website = commands.add_parser("website", help="Validate and render websites")
    website_actions = website.add_subparsers(dest="action", required=True)
    check_cmd = website_actions.add_parser("check", help="Validate a website")
    render_cmd = website_actions.add_parser("render", help="Render a website page")
    for cmd in (check_cmd, render_cmd):
        cmd.add_argument("--user", required=True)
        cmd.add_argument("--site", required=True)
        cmd.add_argument("--name", required=True)
        cmd.add_argument("--path", required=True)
        cmd.add_argument("--theme", default=None)
        cmd.add_argument("--private", action="store_true")
    render_cmd.add_argument("--page", default="")
    render_cmd.add_argument("--viewer", default=None)
    return parser


def _website_from_args(args: argparse.Namespace) -> Website:
    website = Website(
        site=args.site, name=args.name, user_id=args.user, path=args.path
    )
    if args.theme:
        website.theme = args.theme
    if args.private:
        website.type = TYPE_PRIVATE
        website.set_option("private", "1")
    return website


def _print_themes(themes: list[str], l10n: Localizer) -> None:
    if not themes:
        console.print(l10n.t("no_themes"))
        return
    table = Table("Theme")
    for theme in themes:
        table.add_row(theme)
    console.print(table)


def run_themes(
    args: argparse.Namespace, service: ThemesService, l10n: Localizer
) -> None:
    if args.action == "list":
        _print_themes(service.list_themes(custom_only=args.custom_only), l10n)
    elif args.action == "new":
        _print_themes(service.list_new_themes(), l10n)
    elif args.action == "add":
        service.add_custom_theme(args.theme)
        console.print(l10n.t("theme_added", theme=args.theme))
    elif args.action == "remove":
        service.remove_custom_theme(args.theme)
        console.print(l10n.t("theme_removed", theme=args.theme))


def run_website(
    args: argparse.Namespace,
    themes: ThemesService,
    storage: LocalStorage,
    l10n: Localizer,
) -> None:
    website = _website_from_args(args)
    guard = WebsiteGuard(website, storage, l10n)
    if args.action == "check":
        guard.validate_for_save()
        themes.assert_valid_theme(website.theme)
        console.print(l10n.t("website_valid", site=website.site))
    elif args.action == "render":
        website.viewer = args.viewer
        rendered = PageService().render_page(guard, args.page)
        console.print(rendered.html, markup=False, highlight=False)


def main(argv: list[str] | None = None) -> int:
    """Parse ``argv``, run the command and return the process exit code."""
    args = build_parser().parse_args(argv)
    try:
        settings = Settings()
        configure_logging(
            args.log_level or settings.log_level,
            enable_file=not bool(os.environ.get("DISABLE_FILE_LOGS")),
        )
        l10n = Localizer(settings.language)
        themes = ThemesService(
            AppConfigStore(settings.app_config_file), l10n, settings.themes_dir
        )
        storage = LocalStorage(settings.data_dir)
        if args.command == "themes":
            run_themes(args, themes, l10n)
        else:
            run_website(args, themes, storage, l10n)
    except AppError as exc:
        logger.error(f"Command failed: {exc}", extra={"error": exc.to_dict()})
        console.print(f"[red]{exc.message}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
