from __future__ import annotations

from pathlib import Path

from .host import LocalHost, ProcessEnvironment
from .protocols import EnvironmentProtocol, HostProtocol


KEY_ENV_VAR = "BACKUP7Z_KEY"


class PasswordResolver:
    """Turns the configured key setting into the credential handed to 7z.

    An explicitly empty key disables encryption. Without a configured key the
    ``BACKUP7Z_KEY`` environment variable is used, then a default made from
    the host name and the archive file name. The final value may name a
    file, in which case the file's first line is the credential.
    """

    def __init__(
        self,
        *,
        environment: EnvironmentProtocol | None = None,
        host: HostProtocol | None = None,
    ) -> None:
        self._environment = environment or ProcessEnvironment()
        self._host = host or LocalHost()

    def resolve(self, explicit: str | None, archive_name: str) -> str:
        if explicit == "":
            return ""

        candidate = explicit
        if candidate is None:
            candidate = self._environment.get(KEY_ENV_VAR) or self.default_key(archive_name)
        return self._read_key_file(candidate)

    def default_key(self, archive_name: str) -> str:
        return f"{self._host.hostname()}-{archive_name}"

    def _read_key_file(self, candidate: str) -> str:
        key_file = Path(candidate).expanduser()
        try:
            if not key_file.is_file():
                return candidate
            lines = key_file.read_text(encoding="utf-8").splitlines()
        except OSError:
            return candidate
        first_line = lines[0].strip() if lines else ""
        return first_line or candidate
