"""Core exceptions for Noogle page generation."""


class NoogleError(Exception):
    """Base exception for all Noogle errors."""


class CorpusLoadError(NoogleError):
    """Raised when the documentation corpus cannot be read or validated."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load corpus at '{path}': {reason}")


class ConfigLoadError(NoogleError):
    """Raised when a configuration file cannot be loaded or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load or parse config at '{path}': {reason}")


class TemplateRenderError(NoogleError):
    """Raised when a page template fails to render."""

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Failed to render template '{template}': {reason}")
