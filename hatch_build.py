"""Custom build hook for Hatchling to embed build info."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO = "paraspace/_build_info.py"


class CustomBuildHook(BuildHookInterface):
    """Writes the git commit and date into paraspace/_build_info.py."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        root = Path(self.root)
        commit = self._run_git(["rev-parse", "HEAD"], cwd=root)
        date = self._run_git(["show", "-s", "--format=%cI", "HEAD"], cwd=root)
        (root / BUILD_INFO).write_text(
            "# Auto-generated at build time.\n"
            f"COMMIT = {commit!r}\n"
            f"DATE = {date!r}\n",
            encoding="utf-8",
        )
        build_data.setdefault("artifacts", []).append(BUILD_INFO)

    def _run_git(self, args: list[str], cwd: Path) -> str | None:
        try:
            out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        except (subprocess.CalledProcessError, OSError):
            # Building from an sdist or without git
            return None
        return out.decode().strip() or None
