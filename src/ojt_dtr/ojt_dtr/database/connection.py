from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

import mysql.connector


@dataclass
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "ojt_dtr"

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        """Build from a config module's DB_CONFIG; missing or empty keys keep the defaults."""
        given = {f.name: db_config.get(f.name) for f in fields(cls)}
        defaults = cls()
        return cls(
            host=str(given["host"] or defaults.host),
            port=int(given["port"] or defaults.port),
            user=str(given["user"] or defaults.user),
            password=str(given["password"] or defaults.password),
            database=str(given["database"] or defaults.database),
        )


class DatabaseConnection:
    """Singleton-like DB connection factory.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connect(self, *, with_database: bool = True):
        """Open a connection; ``with_database=False`` connects to the server only (schema bootstrap)."""
        kwargs = dict(
            host=self._config.host,
            port=self._config.port,
            user=self._config.user,
            password=self._config.password,
            use_pure=True,
        )
        if with_database:
            kwargs["database"] = self._config.database
        return mysql.connector.connect(**kwargs)
