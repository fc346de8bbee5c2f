"""Timezone-aware current time for record timestamps."""

from datetime import datetime

import pytz

from homedirect.config import get_settings


def now() -> datetime:
    """Current time in the configured timezone."""
    return datetime.now(pytz.timezone(get_settings().TIMEZONE))
