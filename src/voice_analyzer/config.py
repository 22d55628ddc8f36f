"""Configuration management for Voice Analyzer."""

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Thresholds(BaseModel):
    """
    Heuristic bands used to label analyzer output.

    These were calibrated by reading real corpora, not fitted against a
    labelled dataset. Override any of them through the environment, e.g.
    ``VOICE_THRESHOLDS__BURSTINESS_UNIFORM=-0.2``.
    """

    model_config = ConfigDict(frozen=True)

    # Burstiness / clustering
    burstiness_uniform: float = -0.1
    burstiness_natural: float = 0.2
    opening_entropy_low: float = 1.5
    opening_entropy_moderate: float = 2.0
    variation_low: float = 0.5
    variation_moderate: float = 0.8
    cluster_threshold: float = 5
    cluster_min_size: int = 2

    # Function-word z-scores
    z_distinctive: float = 1.0
    z_highly_distinctive: float = 2.0
    short_corpus_words: int = 1000

    # Naturalness score
    very_natural: int = 85
    natural: int = 65
    somewhat_mechanical: int = 45

    # Argument flow confidence (strong / total)
    confidence_high: float = 0.7
    confidence_medium: float = 0.4

    # Formality (formal words per 1000)
    formality_high: float = 20
    formality_moderate: float = 10
    formality_acceptable: float = 5
    guide_high_formality: float = 10

    # Dash consistency
    dash_significant_uses: int = 3
    dash_minimum_total: int = 10
    dash_consistency: int = 80
    dash_typographic_uses: int = 5

    # Specificity ratio
    specificity_high: float = 0.4
    specificity_moderate: float = 0.25
    specificity_low: float = 0.15

    # Guide derived flags (per 100 words)
    personal_voice: float = 0.3
    confident_hedging: float = 0.5


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VOICE_",
        env_nested_delimiter="__",
    )

    # Paths
    corpus_dir: Path = Field(default=Path("data/corpora"))
    articles_dirname: str = Field(default="articles")
    analysis_dirname: str = Field(default="analysis")

    generator_version: str = Field(default="1.4.0")
    log_level: str = Field(default="WARNING")
    spacy_model: str = Field(default="en_core_web_sm")

    thresholds: Thresholds = Field(default_factory=Thresholds)

    def corpus_path(self, corpus_name: str) -> Path:
        return self.corpus_dir / corpus_name

    def articles_path(self, corpus_name: str) -> Path:
        return self.corpus_path(corpus_name) / self.articles_dirname

    def analysis_path(self, corpus_name: str) -> Path:
        return self.corpus_path(corpus_name) / self.analysis_dirname


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
