from pathlib import Path


class CoverageError(Exception):
    """Base class for errors that abort a coverage run."""


class ContractLoadError(CoverageError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load API contract {self.path}: {reason}")


class LogSourceError(CoverageError):
    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read log source {self.path}: {reason}")
