from __future__ import annotations

import threading
from dataclasses import dataclass

from mysql.connector import pooling

from ..core.constants import DEFAULT_POOL_SIZE


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "payroll_db")),
            pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
        )


class DatabaseConnection:
    """Storage handle handed to every repository.

    Owns a lazily created connection pool; ``connect()`` borrows a pooled
    connection and ``close()`` on that connection returns it to the pool.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool = None
        self._pool_lock = threading.Lock()

    @property
    def config(self) -> DBConfig:
        return self._config

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        with self._pool_lock:
            if self._pool is None:
                self._pool = pooling.MySQLConnectionPool(
                    pool_name=f"payroll_{self._config.database}",
                    pool_size=int(self._config.pool_size),
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                )
            return self._pool

    def connect(self):
        return self._get_pool().get_connection()

    def ping(self) -> bool:
        conn = self.connect()
        try:
            return bool(conn.is_connected())
        finally:
            conn.close()
