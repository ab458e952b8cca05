from textwrap import dedent

from core.settings import Settings, get_settings, load_settings
from domain.entities import DiffOptions


def write_config(tmp_path, content):
    path = tmp_path / "settings.yaml"
    path.write_text(dedent(content), encoding="utf-8")
    return path


def test_defaults_without_config_file(tmp_path):
    settings = Settings(project_root=tmp_path)

    assert settings.diff_options() == DiffOptions()
    assert settings.view == "side-by-side"
    assert settings.max_input_lines == 5000
    assert settings.load_errors == []
    assert settings.logs_dir == tmp_path.resolve() / "logs"


def test_load_yaml_values(tmp_path, monkeypatch):
    monkeypatch.delenv("DIFFKIT_LOG_LEVEL", raising=False)
    path = write_config(
        tmp_path,
        """
        diff:
          ignore_case: true
          trim_lines: true
          view: unified
          max_display_lines: 20
        logging:
          level: debug
        """,
    )

    settings = load_settings(str(path))

    assert settings.diff_options() == DiffOptions(ignore_case=True, trim_lines=True)
    assert settings.view == "unified"
    assert settings.max_display_lines == 20
    assert settings.log_level == "DEBUG"
    assert settings.load_errors == []


def test_invalid_values_keep_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("DIFFKIT_LOG_LEVEL", raising=False)
    path = write_config(
        tmp_path,
        """
        diff:
          ignore_case: "yes"
          view: columns
          max_input_lines: true
        logging:
          level: loud
        """,
    )

    settings = load_settings(str(path))

    assert settings.ignore_case is False
    assert settings.view == "side-by-side"
    assert settings.max_input_lines == 5000
    assert settings.log_level == "INFO"
    assert len(settings.load_errors) == 4


def test_malformed_yaml_is_reported(tmp_path):
    path = write_config(tmp_path, "diff: [unclosed\n")

    settings = load_settings(str(path))

    assert settings.view == "side-by-side"
    assert settings.load_errors
    assert "Cannot load" in settings.load_errors[0]


def test_env_overrides_log_level(tmp_path, monkeypatch):
    monkeypatch.setenv("DIFFKIT_LOG_LEVEL", "warning")

    assert Settings(project_root=tmp_path).log_level == "WARNING"


def test_get_settings_is_cached_per_workspace(tmp_path):
    assert get_settings(tmp_path) is get_settings(str(tmp_path))
    assert get_settings(tmp_path).project_root == tmp_path.resolve()
