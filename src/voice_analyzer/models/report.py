"""Shared models for analysis reports and corpora."""

import json
from typing import Any, Callable, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from voice_analyzer.errors import InvalidReportError


class Report(BaseModel):
    """
    Base class for every analyzer report.

    Reports are frozen once built. Each subclass sets ``report_name``
    (the JSON file stem) and bumps ``SCHEMA_VERSION`` when its shape
    changes, registering a function in ``MIGRATIONS`` that upgrades the
    previous version's raw dict. Reports built in code get the
    current version.
    """

    model_config = ConfigDict(frozen=True)

    report_name: ClassVar[str] = ""
    SCHEMA_VERSION: ClassVar[int] = 1
    MIGRATIONS: ClassVar[dict[int, Callable[[dict], dict]]] = {}

    schema_version: int = 1

    @model_validator(mode="before")
    @classmethod
    def _current_schema_version(cls, data: Any) -> Any:
        if isinstance(data, dict) and "schema_version" not in data:
            data = {**data, "schema_version": cls.SCHEMA_VERSION}
        return data

    @classmethod
    def filename(cls) -> str:
        return f"{cls.report_name}.json"

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Validate raw data, upgrading older schema versions first."""
        version = data.get("schema_version", 1)
        while version != cls.SCHEMA_VERSION:
            migrate = cls.MIGRATIONS.get(version)
            if migrate is None:
                raise InvalidReportError(
                    f"{cls.report_name}: schema version {version} is not supported "
                    f"(expected {cls.SCHEMA_VERSION})"
                )
            version += 1
            data = {**migrate(data), "schema_version": version}
        try:
            return cls.model_validate({**data, "schema_version": version})
        except ValidationError as e:
            raise InvalidReportError(f"{cls.report_name}: {e}") from e

    @classmethod
    def from_json(cls, text: str):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidReportError(f"{cls.report_name}: not valid JSON ({e})") from e
        if not isinstance(data, dict):
            raise InvalidReportError(f"{cls.report_name}: expected a JSON object")
        return cls.from_dict(data)


class PhraseExample(BaseModel):
    """A phrase, how often it occurred, and optionally where."""

    model_config = ConfigDict(frozen=True)

    phrase: str
    count: int
    context: Optional[str] = None


class ArticleMeta(BaseModel):
    """Frontmatter of one collected article."""

    title: str = ""
    url: str = ""
    date: str = "unknown"
    word_count: int = 0


class Corpus(BaseModel):
    """Concatenated article text plus collection metadata."""

    model_config = ConfigDict(frozen=True)

    name: str
    text: str
    sitemap_url: Optional[str] = None
    word_count: int = 0
    article_count: int = 0
    articles: list[ArticleMeta] = Field(default_factory=list)
