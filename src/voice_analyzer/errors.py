"""Exceptions raised by Voice Analyzer."""


class VoiceAnalyzerError(Exception):
    """Base class for all Voice Analyzer errors."""


class CorpusNotFoundError(VoiceAnalyzerError, FileNotFoundError):
    """The corpus directory or its articles directory does not exist."""


class MissingReportError(VoiceAnalyzerError, FileNotFoundError):
    """A report the guide depends on has not been generated yet."""

    def __init__(self, path, report_name: str):
        self.path = path
        self.report_name = report_name
        super().__init__(
            f"Required analysis '{report_name}' not found at {path}. "
            f"Run 'voice-analyzer analyze' first."
        )


class InvalidReportError(VoiceAnalyzerError, ValueError):
    """A report file exists but does not match the expected schema, or is not valid JSON."""


class UnknownAnalysisTypeError(VoiceAnalyzerError, ValueError):
    """The requested analysis type is not one of the known groups."""
