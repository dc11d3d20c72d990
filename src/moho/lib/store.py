"""Template store - a directory of executable, self-describing scripts."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List

from moho.compiler.vars import TemplateVars, decode_vars
from moho.exceptions import (
    InvalidTemplateNameError,
    TemplateNotFoundError,
    TemplateReadError,
)

log = logging.getLogger(__name__)

SCRIPT_SUFFIX = ".mh"
SCRIPT_MODE = 0o755


class TemplateStore:
    """Named templates stored as ``<root>/<name>.mh``."""

    def __init__(self, root: Path):
        self.root = root

    def path_for(self, name: str) -> Path:
        if not name or "/" in name or name.startswith("."):
            raise InvalidTemplateNameError(name)
        return self.root / f"{name}{SCRIPT_SUFFIX}"

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def names(self) -> List[str]:
        """Template names, sorted."""
        if not self.root.is_dir():
            return []
        return sorted(
            p.stem
            for p in self.root.iterdir()
            if p.is_file() and p.suffix == SCRIPT_SUFFIX and p.stem
        )

    def save(self, name: str, script: str) -> Path:
        """Write a script and make it executable. Returns its path."""
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(script, encoding="utf-8")
        path.chmod(SCRIPT_MODE)
        log.info("Saved template %s to %s", name, path)
        return path

    def delete(self, name: str) -> None:
        path = self._require(name)
        path.unlink()
        log.info("Deleted template %s", name)

    def read_template(self, name: str) -> str:
        """Source template text, as echoed by ``<script> get-template``."""
        out = self._describe(name, "get-template")
        # echo appends a newline
        if out.endswith("\n"):
            out = out[:-1]
        return out

    def read_vars(self, name: str) -> TemplateVars:
        """Default path, defaults and descriptions from ``<script> get-vars``."""
        return decode_vars(self._describe(name, "get-vars"))

    def _require(self, name: str) -> Path:
        path = self.path_for(name)
        if not path.is_file():
            raise TemplateNotFoundError(name)
        return path

    def _describe(self, name: str, subcommand: str) -> str:
        path = self._require(name)
        cmd = ["/bin/sh", str(path), subcommand]
        log.debug("Running: %s", " ".join(cmd))

        result = subprocess.run(cmd, capture_output=True, text=True)
        if result.returncode != 0:
            raise TemplateReadError(name, result.stderr)
        return result.stdout
