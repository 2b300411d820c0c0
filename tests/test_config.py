"""Tests for configuration loading."""

import pytest

from meetfinder.config import Config, load_config


@pytest.fixture(autouse=True)
def no_env_url(monkeypatch):
    monkeypatch.delenv("MEETFINDER_DATA_URL", raising=False)


def write_config(tmp_path, text):
    path = tmp_path / "meetfinder.conf"
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        assert load_config(tmp_path / "missing.conf") == Config()

    def test_reads_values(self, tmp_path):
        path = write_config(
            tmp_path,
            """
# Meeting Finder
DATA_URL = "https://example.org/meetings.json" # catalog
SITE_URL = https://example.org/meetings
MEETINGS_PER_PAGE = 25
TIMEZONE = 'America/Chicago'
REQUEST_TIMEOUT = 2.5
ENVIRONMENT = staging  # comment
""",
        )
        config = load_config(path)
        assert config.data_url == "https://example.org/meetings.json"
        assert config.site_url == "https://example.org/meetings"
        assert config.meetings_per_page == 25
        assert config.timezone == "America/Chicago"
        assert config.request_timeout == 2.5
        assert config.environment == "staging"

    @pytest.mark.parametrize("value", ["0", "-3", "lots"])
    def test_invalid_page_size_keeps_default(self, tmp_path, value):
        path = write_config(tmp_path, f"MEETINGS_PER_PAGE = {value}\n")
        assert load_config(path).meetings_per_page == 10

    def test_invalid_timeout_keeps_default(self, tmp_path):
        path = write_config(tmp_path, "REQUEST_TIMEOUT = soon\n")
        assert load_config(path).request_timeout == 10

    def test_ignores_junk_lines(self, tmp_path):
        path = write_config(tmp_path, "not a setting\nCOLOR = blue\n")
        assert load_config(path) == Config()

    def test_env_overrides_data_url(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, "DATA_URL = https://example.org/a.json\n")
        monkeypatch.setenv("MEETFINDER_DATA_URL", "https://example.org/b.json")
        assert load_config(path).data_url == "https://example.org/b.json"
