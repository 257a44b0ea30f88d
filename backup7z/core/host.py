from __future__ import annotations

import os
import socket


class ProcessEnvironment:
    def get(self, name: str) -> str | None:
        return os.environ.get(name)


class LocalHost:
    def hostname(self) -> str:
        return socket.gethostname()
