from __future__ import annotations

from pathlib import Path

from .mode_resolver import ExecutionPlan


FIXED_SWITCHES = ("-t7z", "-ssw", "-spf2", "-scsUTF-8", "-bb1", "-bd")


class CommandBuilder:
    def build(
        self,
        plan: ExecutionPlan,
        include_list: Path,
        exclude_list: Path | None = None,
    ) -> list[str]:
        args = [plan.subcommand, str(plan.archive_path), *plan.update_options]
        args.append(f"-i@{include_list}")
        if exclude_list is not None:
            args.append(f"-xr@{exclude_list}")
        args.append(plan.compression.switch)
        args.extend(FIXED_SWITCHES)
        args.append(f"-w{plan.target_dir}")
        if plan.password:
            args.extend([f"-p{plan.password}", "-mhe=on"])
        return args

    @staticmethod
    def mask(args: list[str]) -> list[str]:
        return ["-p***" if arg.startswith("-p") and len(arg) > 2 else arg for arg in args]
