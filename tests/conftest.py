import pytest

from hashset import HashSet
from hashset.env import ENV_HASHSET_LOG_LEVEL


@pytest.fixture
def numbers() -> HashSet[int]:
	return HashSet([1, 2, 3])


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):  # pyright: ignore[reportUnusedFunction]
	# setenv first so monkeypatch restores the original value on teardown
	monkeypatch.setenv(ENV_HASHSET_LOG_LEVEL, "")
	monkeypatch.delenv(ENV_HASHSET_LOG_LEVEL)
