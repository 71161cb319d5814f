import os

from typing import Optional


class _DontChangeMe:
    MAIN_ENV_PREFIX = "LMT_PROXY_"


TRUE_ENV_VALUES = ["1", "true", "t", "yes", "y"]


def bool_env_value(env_name: str) -> bool:
    return os.environ.get(env_name, "").strip().lower() in TRUE_ENV_VALUES


def env_value(name: str, default: str, *legacy_names: str) -> str:
    """
    Read ``LMT_PROXY_<name>``; when unset, the first defined *legacy_names*
    variable (without prefix) is used, then *default*.
    """
    value: Optional[str] = os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}{name}")
    for legacy in legacy_names:
        if value is not None:
            break
        value = os.environ.get(legacy)
    if value is None:
        value = default
    return value.strip()


class ServerTypes:
    FLASK = "flask"
    GUNICORN = "gunicorn"
    WAITRESS = "waitress"


POSSIBLE_SERVER_TYPES = [
    ServerTypes.FLASK,
    ServerTypes.GUNICORN,
    ServerTypes.WAITRESS,
]
