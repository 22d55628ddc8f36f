"""spaCy pipeline loading, shared by analyzers that need part-of-speech tags."""

from functools import lru_cache
import logging

import spacy

logger = logging.getLogger(__name__)

DEFAULT_SPACY_MODEL = "en_core_web_sm"


@lru_cache
def load_nlp(model: str = DEFAULT_SPACY_MODEL) -> spacy.Language:
    """Load a spaCy model once per process, downloading it on first use."""
    try:
        return spacy.load(model, disable=["parser", "ner"])
    except OSError:
        # Model not installed
        from spacy.cli import download

        logger.info("Downloading spaCy model %s", model)
        download(model)
        return spacy.load(model, disable=["parser", "ner"])
