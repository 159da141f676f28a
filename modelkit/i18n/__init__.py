"""
Message lookup for default error text.

Messages live in YAML catalogs keyed by locale (``en.yaml``, ...). Keys are
dotted paths into the catalog, e.g. ``errors.messages.empty``.

Usage:
    from modelkit.i18n import translate

    translate("errors.messages.too_long", count=40)
    # "is too long (maximum is 40 characters)"
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from modelkit.utils.config import settings
from modelkit.utils.logger import setup_logger

logger = setup_logger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"

_CATALOGS: Dict[str, Dict[str, Any]] = {}


def _catalog_path(locale: str) -> Path:
    if settings.MESSAGES_PATH:
        override = Path(settings.MESSAGES_PATH) / f"{locale}.yaml"
        if override.exists():
            return override
    return LOCALES_DIR / f"{locale}.yaml"


def load_catalog(locale: Optional[str] = None) -> Dict[str, Any]:
    """
    Load (and cache) the message catalog for a locale.

    Falls back to the bundled English catalog when the locale has no file.

    Args:
        locale: Locale code, defaults to the configured LOCALE

    Returns:
        Catalog dictionary
    """
    locale = locale or settings.LOCALE
    if locale in _CATALOGS:
        return _CATALOGS[locale]

    path = _catalog_path(locale)
    if not path.exists():
        logger.warning(f"No message catalog for locale '{locale}', using 'en'")
        path = LOCALES_DIR / "en.yaml"

    with open(path, 'r', encoding='utf-8') as f:
        catalog = yaml.safe_load(f) or {}

    logger.debug(f"Loaded message catalog from: {path}")
    _CATALOGS[locale] = catalog
    return catalog


def clear_cache() -> None:
    """Forget loaded catalogs so the next lookup re-reads them."""
    _CATALOGS.clear()


def translate(key: str, locale: Optional[str] = None, **values: Any) -> str:
    """
    Look up a message by dotted key and interpolate values.

    Args:
        key: Dotted key, e.g. "errors.messages.blank"
        locale: Optional locale override
        **values: Placeholder values ({count}, {attribute}, ...)

    Returns:
        The message, or the key itself when it is not in the catalog
    """
    node: Any = load_catalog(locale)
    for part in key.split('.'):
        if not isinstance(node, dict) or part not in node:
            logger.warning(f"Missing translation: {key}")
            return key
        node = node[part]

    message = str(node)
    if values:
        try:
            message = message.format(**values)
        except (KeyError, IndexError) as e:
            logger.warning(f"Could not interpolate '{key}': missing {e}")
    return message


t = translate

__all__ = ['translate', 't', 'load_catalog', 'clear_cache']
