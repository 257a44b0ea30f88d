#!/usr/bin/env python3

from __future__ import annotations

import argparse
import sys

from .commands.factory import CommandFactory
from .core.errors import BackupError, ExternalToolError
from .core.modes import Compression, RequestedMode
from .core.run_options import RunOptions


class CliApplication:
    def __init__(self, factory: CommandFactory | None = None) -> None:
        self._factory = factory or CommandFactory()

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="backup7z",
            description="Full, update and differential 7-Zip backups driven by a job config",
        )
        parser.add_argument("config", help="Path to the job config file")
        parser.add_argument(
            "--compression",
            choices=[item.value for item in Compression],
            default=Compression.FAST.value,
        )
        parser.add_argument(
            "--mode",
            choices=[item.value for item in RequestedMode],
            default=RequestedMode.AUTO.value,
        )
        parser.add_argument(
            "--password",
            default=None,
            help="Archive key, or a file whose first line is the key",
        )
        parser.add_argument(
            "--no-encryption",
            action="store_true",
            help="Do not encrypt even when no key is given",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Print the resolved plan and 7z command without running it",
        )
        return parser

    def parse_options(self, argv: list[str] | None = None) -> RunOptions:
        args = self.build_parser().parse_args(argv)
        return RunOptions(
            config_path=args.config,
            mode=RequestedMode(args.mode),
            compression=Compression(args.compression),
            password=args.password,
            no_encryption=args.no_encryption,
            dry_run=args.dry_run,
        )

    def run(self, argv: list[str] | None = None) -> int:
        options = self.parse_options(argv)
        try:
            command = self._factory.create(options)
            return command.run()
        except ExternalToolError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return exc.returncode
        except BackupError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1


def main() -> int:
    return CliApplication().run()


if __name__ == "__main__":
    raise SystemExit(main())
