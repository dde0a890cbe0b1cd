"""Infrastructure: optional JSON configuration file.

Reads ``crc-config.json`` (or an explicit path) and produces a
:class:`~crc_wrap.core.models.ConfigLoadResult`.  Loading never fails:
an absent file, unreadable file, malformed JSON or bad field value each
degrade to the built-in defaults and are described in
``ConfigLoadResult.warnings`` for the caller to display.

Recognised keys: ``memory`` (MiB), ``cpus``, ``diskSize`` (GiB).  Values
may be JSON numbers or numeric strings.  Unknown keys are ignored.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from crc_wrap.core.models import Configuration, ConfigLoadResult

# JSON key -> Configuration field
_FIELDS: tuple[tuple[str, str], ...] = (
    ("memory", "memory"),
    ("cpus", "cpus"),
    ("diskSize", "disk_size"),
)


def load_configuration(path: Path) -> ConfigLoadResult:
    """Read *path* and return the resolved configuration plus notes."""
    defaults = Configuration.defaults()

    if not path.is_file():
        return ConfigLoadResult(configuration=defaults)

    try:
        raw: Any = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        return ConfigLoadResult(
            configuration=defaults,
            source=path,
            warnings=(f"Could not read {path}: {exc}. Using default configuration.",),
        )
    except ValueError as exc:
        return ConfigLoadResult(
            configuration=defaults,
            source=path,
            warnings=(f"{path} is not valid JSON ({exc}). Using default configuration.",),
        )

    if not isinstance(raw, dict):
        return ConfigLoadResult(
            configuration=defaults,
            source=path,
            warnings=(f"{path} must contain a JSON object. Using default configuration.",),
        )

    values: dict[str, int] = {}
    warnings: list[str] = []
    for key, attr in _FIELDS:
        default_value: int = getattr(defaults, attr)
        parsed = _coerce_positive_int(raw.get(key))
        if parsed is None:
            if raw.get(key) is not None:
                warnings.append(
                    f"Ignoring invalid '{key}' value {raw[key]!r} in {path}; "
                    f"using default {default_value}.",
                )
            values[attr] = default_value
        else:
            values[attr] = parsed

    return ConfigLoadResult(
        configuration=Configuration(**values),
        source=path,
        warnings=tuple(warnings),
    )


def load(path: Path) -> Configuration:
    """Return only the resolved :class:`Configuration` for *path*."""
    return load_configuration(path).configuration


# ---------------------------------------------------------------------------
# Utility
# ---------------------------------------------------------------------------

def _coerce_positive_int(value: object) -> int | None:
    """Convert *value* to a positive ``int`` or return ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        number = int(value)
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if number > 0 else None
