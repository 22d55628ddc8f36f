"""Voice Analyzer - derive an author's voice fingerprint from a corpus of articles."""

__version__ = "1.4.0"
