"""Configuration management for dynv6dns."""

from datetime import timedelta
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dynv6dns.exceptions import ConfigurationError
from dynv6dns.records import DEFAULT_TTL, GenericRecord


class Dynv6Settings(BaseSettings):
    """Environment variables for dynv6 access."""

    model_config = SettingsConfigDict(env_prefix="DYNV6_", env_file=".env", extra="ignore")

    token: str | None = None
    base_url: str = "https://dynv6.com/api/v2"
    timeout: float = 30.0


class RecordEntry(BaseModel):
    """One record in a records file."""

    type: str
    name: str = ""
    data: str = ""
    ttl: int = int(DEFAULT_TTL.total_seconds())  # seconds

    @field_validator("type")
    @classmethod
    def normalize_type(cls, v: str) -> str:
        return v.upper()

    @field_validator("data", mode="before")
    @classmethod
    def stringify_data(cls, v: Any) -> str:
        # YAML reads bare addresses and numbers as non-strings
        return "" if v is None else str(v)

    def to_record(self) -> GenericRecord:
        return GenericRecord(
            name=self.name,
            type=self.type,
            data=self.data,
            ttl=timedelta(seconds=self.ttl),
        )


class RecordsFile(BaseModel):
    """Layout of a records file."""

    records: list[RecordEntry] = Field(default_factory=list)


def load_settings() -> Dynv6Settings:
    """Load settings from .env and environment variables."""
    return Dynv6Settings()


def load_records_file(path: Path) -> list[GenericRecord]:
    """Load desired records from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file is not a valid records file.
    """
    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return []

    try:
        parsed = RecordsFile.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid records file {path}: {e}") from e

    return [entry.to_record() for entry in parsed.records]


def parse_record_spec(spec: str, ttl: timedelta = DEFAULT_TTL) -> GenericRecord:
    """Parse an inline ``"TYPE NAME DATA..."`` record spec.

    Use ``@`` for the zone apex. Everything after the name is the data.

    Raises:
        ConfigurationError: If the spec has fewer than two fields.
    """
    parts = spec.split(maxsplit=2)
    if len(parts) < 2:
        raise ConfigurationError(f"Invalid record spec '{spec}': expected 'TYPE NAME [DATA]'")

    record_type, name = parts[0].upper(), parts[1]
    data = parts[2] if len(parts) == 3 else ""
    return GenericRecord(
        name="" if name == "@" else name,
        type=record_type,
        data=data,
        ttl=ttl,
    )
