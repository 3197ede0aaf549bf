import json
from pathlib import Path

import pytest

from pagegen.config import load_workspace_config, locate_config_file
from pagegen.errors import ConfigError


def test_missing_config_uses_defaults(tmp_path):
    config = load_workspace_config(tmp_path)
    assert config.path is None
    assert config.defaults.solution == "react-vite"
    assert config.defaults.project_name == "pagegen-app"
    assert config.defaults.out_dir == (tmp_path / "build").resolve()
    assert config.formatting.max_line_length == 80


def test_toml_config(tmp_path):
    (tmp_path / "pagegen.toml").write_text(
        '[defaults]\nsolution = "vue-vite"\nproject_name = "shop"\nout_dir = "dist"\npublish = "disk"\nlog_level = "debug"\n'
        "\n[formatting]\nindent_size = 4\nmax_line_length = 100\n",
        encoding="utf-8",
    )
    config = load_workspace_config(tmp_path)
    assert config.path == (tmp_path / "pagegen.toml").resolve()
    assert config.defaults.solution == "vue-vite"
    assert config.defaults.project_name == "shop"
    assert config.defaults.out_dir == (tmp_path / "dist").resolve()
    assert config.defaults.publish == "disk"
    assert config.defaults.log_level == "debug"
    options = config.formatting.to_options()
    assert (options.indent_size, options.max_line_length, options.max_empty_lines) == (4, 100, 1)


def test_json_rc_config(tmp_path):
    (tmp_path / ".pagegenrc").write_text(json.dumps({"defaults": {"project_name": "rc-app"}}), encoding="utf-8")
    config = load_workspace_config(tmp_path)
    assert config.defaults.project_name == "rc-app"
    assert config.raw == {"defaults": {"project_name": "rc-app"}}


def test_toml_takes_precedence(tmp_path):
    (tmp_path / "pagegen.toml").write_text("", encoding="utf-8")
    (tmp_path / ".pagegenrc").write_text("{}", encoding="utf-8")
    assert locate_config_file(tmp_path) == tmp_path / "pagegen.toml"


def test_explicit_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_workspace_config(tmp_path, Path(tmp_path / "nope.toml"))


@pytest.mark.parametrize(
    "name, content",
    [
        ("pagegen.toml", "[defaults\nsolution = 1"),
        (".pagegenrc", "{broken"),
        (".pagegenrc", "[1, 2]"),
        ("pagegen.toml", "defaults = 3\n"),
        ("pagegen.toml", "[formatting]\nindent_size = \"wide\"\n"),
        ("pagegen.toml", "[formatting]\nmax_empty_lines = -1\n"),
    ],
)
def test_invalid_config(tmp_path, name, content):
    (tmp_path / name).write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_workspace_config(tmp_path)
