from dataclasses import dataclass, field
from typing import Any, Dict, List

from lib.utils.validation import ensure

from .yaml_loader import load_yaml


DEFAULT_SEED_USERS: List[Dict[str, str]] = [
    {"id": "1", "name": "John Doe", "email": "john@example.com"},
    {"id": "2", "name": "Jane Doe", "email": "jane@example.com"},
]


@dataclass
class ServiceConfig:
    """Typed view over ``users_api.yaml``.

    Every section is optional.  The raw mapping is retained next to the typed
    values so callers can reach keys that are not modelled here.
    """

    raw: Dict[str, Any] = field(default_factory=dict)
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    seed_users: List[Dict[str, Any]] = field(
        default_factory=lambda: [dict(u) for u in DEFAULT_SEED_USERS]
    )


def parse_service_config(raw: Dict[str, Any]) -> ServiceConfig:
    """Build a :class:`ServiceConfig` from an already loaded mapping."""

    raw = raw or {}
    service = raw.get("service") or {}
    logging_cfg = raw.get("logging") or {}
    defaults = ServiceConfig()

    port = service.get("port", defaults.port)
    ensure(
        isinstance(port, int) and not isinstance(port, bool) and 0 < port < 65536,
        f"service.port must be an integer between 1 and 65535, got {port!r}",
    )
    seed = raw.get("seed_users")
    if seed is None:
        seed = defaults.seed_users
    ensure(isinstance(seed, list), "seed_users must be a list of user mappings")

    return ServiceConfig(
        raw=raw,
        host=str(service.get("host", defaults.host)),
        port=port,
        log_level=str(logging_cfg.get("level", defaults.log_level)),
        seed_users=seed,
    )


def load_service_config(path: str) -> ServiceConfig:
    """Load ``users_api.yaml`` and return a :class:`ServiceConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML configuration file.
    """

    return parse_service_config(load_yaml(path))
