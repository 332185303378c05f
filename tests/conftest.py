from collections.abc import Iterator

import pytest

from sorbet_ext.util.log import Log


@pytest.fixture(autouse=True)
def _log_teardown() -> Iterator[None]:
    yield
    Log.reset()


@pytest.fixture(autouse=True)
def _no_user_config(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> None:
    monkeypatch.setenv("SORBET_EXT_CONFIG_DIR", str(tmp_path_factory.mktemp("user-config")))
