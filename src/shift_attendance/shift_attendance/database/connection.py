from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import pooling
from mysql.connector.errors import PoolError

from ..core.exceptions import DatabaseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "attendance_db"
    pool_size: int = 5

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        """Build from a settings ``DB_CONFIG`` mapping; missing keys use defaults."""
        defaults = cls()
        return cls(
            host=str(db_config.get("host") or defaults.host),
            port=int(db_config.get("port") or defaults.port),
            user=str(db_config.get("user") or defaults.user),
            password=str(db_config.get("password") or ""),
            database=str(db_config.get("database") or defaults.database),
            pool_size=int(db_config.get("pool_size") or defaults.pool_size),
        )

    def connect_kwargs(self, *, with_database: bool = True) -> dict:
        kwargs = {"host": self.host, "port": self.port, "user": self.user, "password": self.password}
        if with_database:
            kwargs["database"] = self.database
        return kwargs


class DatabaseConnection:
    """Process-wide source of MySQL connections.

    Connections come from a lazily created pool; ``close()`` on a pooled
    connection hands it back instead of closing the socket. When every pooled
    connection is checked out, a short-lived direct connection is opened
    instead, so ``pool_size`` bounds idle connections, not concurrency.
    """

    _instance: Optional["DatabaseConnection"] = None
    _lock = threading.Lock()

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        with cls._lock:
            if cls._instance is None or cls._instance.config != config:
                cls._instance = DatabaseConnection(config)
            return cls._instance

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        with self._lock:
            if self._pool is None:
                self._pool = pooling.MySQLConnectionPool(
                    pool_name=f"shift_attendance_{self._config.database}",
                    pool_size=self._config.pool_size,
                    **self._config.connect_kwargs(),
                )
                logger.info(
                    "MySQL pool ready (%s@%s:%s/%s, size=%d)",
                    self._config.user, self._config.host, self._config.port,
                    self._config.database, self._config.pool_size,
                )
            return self._pool

    def connect(self):
        try:
            try:
                return self._get_pool().get_connection()
            except PoolError:
                logger.debug("MySQL pool exhausted, opening a direct connection")
                return mysql.connector.connect(**self._config.connect_kwargs())
        except mysql.connector.Error as e:
            raise DatabaseError(f"Cannot connect to database: {e}") from e
