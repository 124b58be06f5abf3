"""Address book configuration via pydantic-settings."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class AddressBookSettings(BaseSettings):
    environment: str = "development"
    app_title: str = "Address Book"
    database_url: str = "sqlite+aiosqlite:///addressbook.db"
    echo_sql: bool = False
    log_level: str = "INFO"

    # "sql" or "memory"
    storage_backend: str = "sql"
    # "uuid", "sequential", or "adapter" (let the storage backend assign ids)
    id_strategy: str = "adapter"

    birthday_format: str = "%d/%m/%Y"

    model_config = {"env_prefix": "ADDRESSBOOK_", "env_file": ".env", "extra": "ignore"}

    @property
    def base_dir(self) -> Path:
        return Path(__file__).resolve().parent

    @property
    def templates_dir(self) -> Path:
        return self.base_dir / "templates"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in {"prod", "production"}


settings = AddressBookSettings()
