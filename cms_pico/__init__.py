"""CMS Pico website core package.

This package holds the core of a content-management plugin that publishes a
folder of a user's cloud storage as a Pico static website. It covers the
parts of the plugin with real rules in them: website validation before
save, path containment inside the owner's storage, page visibility and
viewer access control, and the theme registry.

Package Structure
-----------------
- `model/`:
    The ``Website`` data record.
- `service/`:
    ``WebsiteGuard`` (validation and access control), ``ThemesService``
    (built-in and custom themes) and ``PageService`` (page rendering).
- `storage/`:
    Storage and config collaborator protocols plus local implementations.
- `config.py`: Configuration constants, as UPPER_SNAKE_CASE.
- `settings.py`: Environment and ``.env`` driven runtime settings.
- `exceptions.py`: Project-specific exception classes.
- `i18n.py`: Message table and ``Localizer``.
- `cli.py`: The ``cms-pico`` command.

Examples
--------
>>> from cms_pico.model import Website
>>> from cms_pico.service import WebsiteGuard
"""
