"""Tests for the command line interface."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from assethandler.cli.app import app

runner = CliRunner()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    public = tmp_path / "public" / "js"
    public.mkdir(parents=True)
    script = public / "app.js"
    script.write_text("// app", encoding="utf-8")
    os.utime(script, (1650000000, 1650000000))

    payload = {
        "containers": {
            "scripts": {
                "url": "/js",
                "path": str(public),
                "print_pattern": '<script src="{{URL}}"></script>',
                "file_regex": "/\\.js$/",
            },
            "styles": {
                "url": "/css",
                "print_pattern": '<link href="{{URL}}">',
                "file_regex": "/\\.css$/",
            },
        }
    }
    path = tmp_path / "assets.yaml"
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    return path


def test_render_detects_containers(config_path):
    result = runner.invoke(app, ["--config", str(config_path), "render", "app.js", "site.css"])

    assert result.exit_code == 0, result.output
    assert result.output == '<script src="/js/app.js"></script>\n<link href="/css/site.css">\n'


def test_render_with_template_and_versioning(config_path):
    result = runner.invoke(
        app,
        [
            "--config",
            str(config_path),
            "render",
            "--container",
            "scripts",
            "--versioned",
            "--template",
            "{{NAME}} {{URI}}",
            "app.js",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output == "app.js /js/app.js?1650000000\n"


def test_render_reports_errors(config_path):
    result = runner.invoke(app, ["--config", str(config_path), "render", "logo.png"])

    assert result.exit_code == 1
    assert "Could not determine a container for 'logo.png'" in result.output


def test_render_rejects_missing_base_path(config_path, tmp_path):
    result = runner.invoke(
        app,
        ["--config", str(config_path), "render", "--base-path", str(tmp_path / "nope"), "app.js"],
    )

    assert result.exit_code == 1
    assert "is not an existing directory" in result.output


def test_config_from_environment(config_path, monkeypatch):
    monkeypatch.setenv("ASSETHANDLER_CONFIG", str(config_path))

    result = runner.invoke(app, ["render", "app.js"])

    assert result.exit_code == 0, result.output
    assert result.output == '<script src="/js/app.js"></script>\n'


def test_containers_lists_configuration(config_path):
    result = runner.invoke(app, ["--config", str(config_path), "containers"])

    assert result.exit_code == 0, result.output
    assert "scripts" in result.output
    assert "styles" in result.output


def test_missing_config_is_a_usage_error(tmp_path):
    result = runner.invoke(app, ["--config", str(tmp_path / "absent.yaml"), "containers"])

    assert result.exit_code == 2


def test_version_flag():
    from assethandler import get_version

    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == get_version()
