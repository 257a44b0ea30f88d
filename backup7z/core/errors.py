from __future__ import annotations


class BackupError(RuntimeError):
    """Base class for failures that end a backup run."""


class ConfigNotFoundError(BackupError):
    pass


class ConfigParseError(BackupError):
    def __init__(self, config_file: str, line_number: int, line: str) -> None:
        super().__init__(
            f"{config_file}:{line_number}: value outside of any section: {line!r}"
        )
        self.line_number = line_number


class ConfigValueError(BackupError):
    pass


class MissingBaseArchiveError(BackupError):
    """The requested mode needs a full archive that the pointer does not provide."""


class ExternalToolError(BackupError):
    def __init__(self, returncode: int, message: str | None = None) -> None:
        super().__init__(message or f"7z exited with status {returncode}")
        self.returncode = returncode
