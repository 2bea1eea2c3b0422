"""Built-in template variables: current date/time and working directory.

Built-ins are computed when a document is processed and always win over
frontmatter keys of the same name.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

logger = logging.getLogger(__name__)

CUSTOM_DATE_FORMAT_KEY = "custom_date_fmt"

_DATE_FORMATS = {
    "datetime_rfc1123": "%a, %d %b %Y %H:%M:%S %Z",
    "datetime": "%Y-%m-%d %H:%M",
    "datetime_iso": "%Y-%m-%d %H:%M:%S",
    "date_short": "%Y-%m-%d",
    "date_long": "%b %d, %Y",
    "date_full": "%A, %d %b %Y",
    "time_12h": "%I:%M %p",
    "time_24h": "%H:%M",
    "time_long": "%H:%M:%S",
    "tz_short": "%Z",
}

_ALIASES = {
    "date": "date_short",
    "time": "time_24h",
    "tz": "tz_short",
}


def _rfc3339(now: datetime) -> str:
    stamp = now.isoformat(timespec="seconds")
    if stamp.endswith("+00:00"):
        stamp = stamp[: -len("+00:00")] + "Z"
    return stamp


def _utc_offset(now: datetime) -> str:
    offset = now.strftime("%z")
    if not offset:
        return ""
    return f"{offset[:3]}:{offset[3:5]}"


def _custom_date(now: datetime, layout: str) -> str:
    if not layout:
        return ""
    try:
        return now.strftime(layout)
    except ValueError as e:
        logger.debug("Invalid %s %r: %s", CUSTOM_DATE_FORMAT_KEY, layout, e)
        return ""


def _cwd_variables(cwd: str | None) -> dict[str, str]:
    if cwd is None:
        try:
            cwd = os.getcwd()
        except OSError as e:
            logger.debug("Working directory unavailable, skipping cwd variables: %s", e)
            return {}

    short = os.path.basename(cwd.rstrip(os.sep))
    # root has no basename
    if short in ("", "."):
        short = cwd
    return {"pwd": cwd, "cwd": cwd, "pwd_short": short, "cwd_short": short}


def builtin_variables(
    now: datetime | None = None,
    cwd: str | None = None,
    user_vars: dict[str, str] | None = None,
) -> dict[str, str]:
    """Compute the built-in variables.

    ``now`` defaults to the current local time (timezone-aware) and ``cwd`` to
    the process working directory. ``user_vars`` is only consulted for
    ``custom_date_fmt``, the strftime layout used for ``custom_date``.
    """
    if now is None:
        now = datetime.now().astimezone()
    user_vars = user_vars or {}

    values = {key: now.strftime(fmt) for key, fmt in _DATE_FORMATS.items()}
    values["datetime_rfc3339"] = _rfc3339(now)
    values["tz_offset"] = _utc_offset(now)
    values["custom_date"] = _custom_date(now, user_vars.get(CUSTOM_DATE_FORMAT_KEY, ""))
    for alias, target in _ALIASES.items():
        values[alias] = values[target]

    values.update(_cwd_variables(cwd))
    return values


def merge_variables(user_vars: dict[str, str], builtins: dict[str, str]) -> dict[str, str]:
    """Overlay built-ins on the frontmatter table. Built-ins overwrite same-named keys."""
    merged = dict(user_vars)
    merged.update(builtins)
    return merged
