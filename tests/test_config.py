import pytest
from pydantic import ValidationError

from config import LogSettings, SampleSettings


def test_sample_defaults_point_at_jsonplaceholder(monkeypatch):
    monkeypatch.delenv("SAMPLE_API_URL", raising=False)

    assert SampleSettings().api_url == "https://jsonplaceholder.typicode.com"


def test_sample_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SAMPLE_API_URL", "http://localhost:9000")
    monkeypatch.setenv("SAMPLE_TIMEOUT", "1.5")

    sample = SampleSettings()

    assert sample.api_url == "http://localhost:9000"
    assert sample.timeout == 1.5


@pytest.mark.parametrize("timeout", [0, -1])
def test_timeout_must_be_positive(timeout):
    with pytest.raises(ValidationError):
        SampleSettings(timeout=timeout)


def test_log_level_is_normalised():
    assert LogSettings(level="debug").level == "DEBUG"


def test_log_level_rejects_unknown_names():
    with pytest.raises(ValidationError):
        LogSettings(level="chatty")
