import pytest

from akamai_purge_tools.errors import ConfigError
from akamai_purge_tools.utils.config_file import load_config, with_mail


def test_load_config(config_file, config):
    assert load_config(config_file) == config


def test_load_config_drops_keys_without_value(tmp_path):
    path = tmp_path / "akamai.properties"
    path.write_text("# comment\n\nmail=ops@example.com\nlonely\nempty=\n")

    assert load_config(path) == {"mail": "ops@example.com", "empty": ""}


def test_load_config_missing(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.properties")


def test_load_config_directory(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "expected,mail",
    [
        ("cli@example.com", "cli@example.com"),
        ("cli@example.com", " cli@example.com "),
        ("file@example.com", None),
        ("file@example.com", "   "),
    ],
)
def test_with_mail(expected, mail):
    config = {"mail": "file@example.com"}
    assert with_mail(config, mail)["mail"] == expected
    assert config == {"mail": "file@example.com"}


def test_load_config_keeps_dollar_values(tmp_path, monkeypatch):
    monkeypatch.setenv("AKAMAI_TEST_VAR", "expanded")
    path = tmp_path / "akamai.properties"
    path.write_text("fastpurge_client_secret=ab${AKAMAI_TEST_VAR}cd\n")

    assert load_config(path) == {"fastpurge_client_secret": "ab${AKAMAI_TEST_VAR}cd"}
