"""Init helpers - scaffold the .moho directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .config import CONFIG_FILE, MohoConfig, get_moho_dir, save_config

log = logging.getLogger(__name__)

README_FILE = "readme.md"
README_TEXT = "# moho\n\nthis folder contains this project's moho templates\n"


def scaffold(cwd: Optional[Path] = None) -> List[Path]:
    """Create .moho/ with a config and readme. Returns the files created.

    Files that already exist are left untouched.
    """
    moho_dir = get_moho_dir(cwd)
    moho_dir.mkdir(parents=True, exist_ok=True)
    created: List[Path] = []

    config_path = moho_dir / CONFIG_FILE
    if not config_path.is_file():
        save_config(MohoConfig(version=1), config_path)
        created.append(config_path)

    readme = moho_dir / README_FILE
    if not readme.is_file():
        readme.write_text(README_TEXT)
        created.append(readme)

    for path in created:
        log.info("Created %s", path)
    return created
