"""Unit tests for runtime bundle assembly."""

from pathlib import Path

import pytest

from jsscope.core.config import JsScopeConfig
from jsscope.services import RuntimeBuilder, RuntimeNotFoundError, build_runtime

TEMPLATE = """<?php
require_once('php/helpers.php');
require_once('php/globals.php');
//</BOILERPLATE>
require_once('php/not_included.php');
"""


@pytest.fixture
def runtime_dir(tmp_path: Path) -> Path:
    (tmp_path / "php").mkdir()
    (tmp_path / "tests.php").write_text(TEMPLATE, encoding="utf-8")
    (tmp_path / "php" / "helpers.php").write_text(
        "<?php\n\nfunction helper() {}\n\n", encoding="utf-8"
    )
    (tmp_path / "php" / "globals.php").write_text("<?php\n$global = 1;\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def runtime_config(runtime_dir: Path) -> JsScopeConfig:
    return JsScopeConfig(_env_file=None, runtime_root=runtime_dir, runtime_timezone="UTC")


class TestRuntimeBuilder:
    def test_bundle_layout(self, runtime_config: JsScopeConfig) -> None:
        bundle = RuntimeBuilder(runtime_config).build()

        assert bundle == "\n".join(
            [
                'define("LOCAL_TZ", "UTC");\n',
                'mb_internal_encoding("UTF-8");\n',
                "function helper() {}",
                "$global = 1;",
            ]
        )

    def test_includes_after_marker_are_ignored(self, runtime_config: JsScopeConfig) -> None:
        bundle = RuntimeBuilder(runtime_config).build()

        assert "not_included" not in bundle

    def test_explicit_template_path(self, runtime_dir: Path) -> None:
        other = runtime_dir / "other.php"
        other.write_text("require_once('php/globals.php');\n//</BOILERPLATE>\n", encoding="utf-8")
        config = JsScopeConfig(_env_file=None, runtime_timezone="CET", runtime_encoding="ISO-8859-1")

        bundle = build_runtime(other, config)

        assert bundle.splitlines() == [
            'define("LOCAL_TZ", "CET");',
            "",
            'mb_internal_encoding("ISO-8859-1");',
            "",
            "$global = 1;",
        ]

    def test_missing_marker_raises(self, runtime_dir: Path, runtime_config: JsScopeConfig) -> None:
        (runtime_dir / "tests.php").write_text("require_once('php/globals.php');\n", encoding="utf-8")

        with pytest.raises(RuntimeNotFoundError) as exc_info:
            RuntimeBuilder(runtime_config).build()

        assert exc_info.value.marker == "//</BOILERPLATE>"
        assert exc_info.value.template_path == runtime_dir / "tests.php"
        assert "Unable to find runtime" in str(exc_info.value)

    def test_missing_include_propagates(self, runtime_dir: Path, runtime_config: JsScopeConfig) -> None:
        (runtime_dir / "php" / "helpers.php").unlink()

        with pytest.raises(FileNotFoundError):
            RuntimeBuilder(runtime_config).build()

    def test_local_timezone_used_when_unset(self, runtime_dir: Path) -> None:
        config = JsScopeConfig(_env_file=None, runtime_root=runtime_dir)

        first_line = RuntimeBuilder(config).build().splitlines()[0]

        assert first_line.startswith('define("LOCAL_TZ", "')
        assert first_line.endswith('");')
