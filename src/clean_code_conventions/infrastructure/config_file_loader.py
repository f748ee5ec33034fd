"""Load [tool.clean-code-conventions] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

from clean_code_conventions.domain.constants import TOOL_NAME

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml."""

    @staticmethod
    def load_config_from_fs(
        start: Optional[Path] = None,
    ) -> dict[str, object]:
        """Walk up from `start` (default: cwd). Returns the tool table, empty when absent."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except OSError:
                continue
            except tomllib.TOMLDecodeError as e:
                logger.warning("Ignoring unreadable %s: %s", config_file, e)
                continue
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(TOOL_NAME, {}) or {}
            logger.debug("Loaded configuration from %s", config_file)
            return config_dict
        return {}
