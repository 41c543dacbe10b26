"""Runtime bundle assembly.

The PHP runtime that transformed programs run against is described by a
template whose header lists support files via `require_once('...')`. This
module concatenates those files into one text, preceded by the environment
constants the runtime expects.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path

from jsscope.core.config import JsScopeConfig, get_config

logger = logging.getLogger(__name__)

INCLUDE_PATTERN = re.compile(r"require_once\('(.+?)'\)")
OPEN_TAG_PATTERN = re.compile(r"\A<\?php")
EDGE_NEWLINES_PATTERN = re.compile(r"\A\n+|\n+\Z")


class RuntimeNotFoundError(Exception):
    """Raised when the runtime template lacks its end marker."""

    def __init__(self, template_path: Path, marker: str) -> None:
        self.template_path = template_path
        self.marker = marker
        super().__init__(f"Unable to find runtime: no '{marker}' in {template_path}")


class RuntimeBuilder:
    """Builds the runtime support bundle from a template."""

    def __init__(self, config: JsScopeConfig | None = None) -> None:
        self._config = config or get_config()

    def build(self, template_path: Path | None = None) -> str:
        """Assemble the runtime bundle.

        Args:
            template_path: Template file; defaults to the configured one.
                Included files are read relative to its directory.

        Returns:
            The LOCAL_TZ definition, the encoding directive and every
            included file, joined with newlines.

        Raises:
            RuntimeNotFoundError: If the template has no end marker.
        """
        config = self._config
        path = template_path or config.runtime_template_path
        source = path.read_text(encoding="utf-8")

        end = source.find(config.runtime_marker)
        if end == -1:
            raise RuntimeNotFoundError(path, config.runtime_marker)
        source = source[:end]

        output: list[str] = []
        for match in INCLUDE_PATTERN.finditer(source):
            include_path = path.parent / match.group(1)
            logger.debug(f"Including runtime file {include_path}")
            included = include_path.read_text(encoding="utf-8")
            included = OPEN_TAG_PATTERN.sub("", included)
            included = EDGE_NEWLINES_PATTERN.sub("", included)
            output.append(included)

        output.insert(0, f'mb_internal_encoding("{config.runtime_encoding}");\n')
        output.insert(0, f'define("LOCAL_TZ", "{self._timezone()}");\n')
        return "\n".join(output)

    def _timezone(self) -> str:
        if self._config.runtime_timezone:
            return self._config.runtime_timezone
        return datetime.now().astimezone().strftime("%Z")


def build_runtime(template_path: Path | None = None, config: JsScopeConfig | None = None) -> str:
    """Assemble the runtime bundle with a one-off builder."""
    return RuntimeBuilder(config).build(template_path)
