from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .errors import ConfigNotFoundError, ConfigParseError


COMMENT_PREFIXES = ("#", ";")


class _ParserState(Enum):
    NO_SECTION = "no-section"
    KEYED = "in-section-keyed"
    BARE = "in-section-bare"


@dataclass
class ConfigDocument:
    """Sections of a parsed config file.

    Keyed lines are stored by lower-cased key. Bare lines are stored under
    sequential string keys ("0", "1", ...) so their order survives.
    """

    source: Path
    sections: dict[str, dict[str, str]] = field(default_factory=dict)

    def section(self, name: str) -> dict[str, str]:
        return dict(self.sections.get(name.lower(), {}))

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.sections.get(section.lower(), {}).get(key.lower(), default)

    def values(self, section: str) -> list[str]:
        entries = self.sections.get(section.lower(), {})
        return [entries[key] for key in sorted((k for k in entries if k.isdigit()), key=int)]


class ConfigStore:
    def load(self, path: str | Path) -> ConfigDocument:
        config_file = Path(path).expanduser()
        if not config_file.is_file():
            raise ConfigNotFoundError(f"Missing config file: {config_file}")
        try:
            text = config_file.read_text(encoding="utf-8-sig")
        except OSError as exc:
            raise ConfigNotFoundError(f"Cannot read config file {config_file}: {exc}") from exc
        return self.parse(text, config_file)

    def parse(self, text: str, source: Path) -> ConfigDocument:
        document = ConfigDocument(source=source)
        state = _ParserState.NO_SECTION
        current: dict[str, str] = {}
        bare_count = 0

        for line_number, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.strip()
            if not line or line.startswith(COMMENT_PREFIXES):
                continue

            if line.startswith("[") and line.endswith("]"):
                name = line[1:-1].strip().lower()
                current = document.sections.setdefault(name, {})
                bare_count = sum(1 for key in current if key.isdigit())
                state = _ParserState.KEYED
                continue

            state = _next_state(state, line)
            if state is _ParserState.NO_SECTION:
                raise ConfigParseError(str(source), line_number, line)
            if state is _ParserState.KEYED:
                key, value = line.split("=", 1)
                current[key.strip().lower()] = _unquote(value.strip())
            else:
                current[str(bare_count)] = _unquote(line)
                bare_count += 1

        return document


def _next_state(state: _ParserState, line: str) -> _ParserState:
    if state is _ParserState.NO_SECTION:
        return state
    return _ParserState.KEYED if "=" in line else _ParserState.BARE


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value
