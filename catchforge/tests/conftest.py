import pytest

from catchforge.core.config import reload_configs

_ENV_VARS = (
    "CATCHFORGE_CONFIG",
    "CATCHFORGE_ANNOTATION_PACKAGE",
    "CATCHFORGE_STRICT_PRECEDENCE",
    "CATCHFORGE_SOURCE_FOLDERS",
    "CATCHFORGE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reload_configs()
    yield
    reload_configs()
