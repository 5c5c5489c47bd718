from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

ENV_PREFIX = "MINICORE_DB_URL"


@dataclass
class DbConfig:
    connections: dict[str, str] = field(default_factory=dict)
    default_connection: str = "default"
    echo: bool = False
    pool_pre_ping: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.connections:
            raise ValueError("at least one connection URL must be configured")
        if self.default_connection not in self.connections:
            raise ValueError(
                f"default_connection {self.default_connection!r} "
                "is not one of the configured connections"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DbConfig":
        """
        Build a config from environment variables.

        MINICORE_DB_URL configures the "default" connection and
        MINICORE_DB_URL_<NAME> configures a connection named <name> (lowercased).
        """
        env = os.environ if environ is None else environ
        connections: dict[str, str] = {}
        for key, value in env.items():
            if key == ENV_PREFIX:
                connections["default"] = value
            elif key.startswith(ENV_PREFIX + "_"):
                name = key[len(ENV_PREFIX) + 1:].lower()
                if name:
                    connections[name] = value

        echo = env.get("MINICORE_DB_ECHO", "").lower() in ("1", "true", "yes")
        return cls(connections=connections, echo=echo)
