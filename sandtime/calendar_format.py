from __future__ import annotations

import locale
import logging
import time

logger = logging.getLogger(__name__)


def format_timestamp(instant: float, locale_name: str = "") -> str:
    """Render ``instant`` as the locale's date and time (``%c``).

    ``locale_name`` selects the LC_TIME locale (e.g. ``"en_US.UTF-8"``); an
    empty name uses the host default. Any failure yields ``""``. The previous
    LC_TIME setting is restored before returning.
    """

    try:
        previous = locale.setlocale(locale.LC_TIME)
    except locale.Error as exc:
        logger.debug("cannot query LC_TIME: %s", exc)
        return ""

    try:
        locale.setlocale(locale.LC_TIME, locale_name)
        return time.strftime("%c", time.localtime(instant))
    except (locale.Error, ValueError, OverflowError, OSError) as exc:
        logger.debug("cannot format %r with locale %r: %s", instant, locale_name, exc)
        return ""
    finally:
        locale.setlocale(locale.LC_TIME, previous)
