"""Message catalog lookup for user-facing strings."""

import gettext
from pathlib import Path

from cdidc import NAME

_translation: gettext.NullTranslations = gettext.NullTranslations()


def setup_translation(locale_dir: Path) -> None:
    """Install the message catalog for the user's locale.

    Falls back to the untranslated English strings when no catalog exists.
    """
    global _translation
    _translation = gettext.translation(NAME, localedir=locale_dir, fallback=True)


def _(message: str) -> str:
    """Translate a message using the installed catalog."""
    return _translation.gettext(message)
