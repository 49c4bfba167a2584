import pytest

from nctcdf.constants import NEWTON_MAX_ITER, env_int


def test_default_when_unset(monkeypatch):
    monkeypatch.delenv("NCTCDF_NEWTON_MAX_ITER", raising=False)
    assert env_int("NCTCDF_NEWTON_MAX_ITER", 100) == 100


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("NCTCDF_NEWTON_MAX_ITER", "25")
    assert env_int("NCTCDF_NEWTON_MAX_ITER", 100) == 25


@pytest.mark.parametrize("raw", ["ten", "2.5", ""])
def test_non_integer_names_variable(monkeypatch, raw):
    monkeypatch.setenv("NCTCDF_NEWTON_MAX_ITER", raw)
    with pytest.raises(ValueError, match="NCTCDF_NEWTON_MAX_ITER"):
        env_int("NCTCDF_NEWTON_MAX_ITER", 100)


@pytest.mark.parametrize("raw", ["0", "-4"])
def test_non_positive_rejected(monkeypatch, raw):
    monkeypatch.setenv("NCTCDF_NEWTON_MAX_ITER", raw)
    with pytest.raises(ValueError, match="NCTCDF_NEWTON_MAX_ITER"):
        env_int("NCTCDF_NEWTON_MAX_ITER", 100)


def test_module_default():
    assert NEWTON_MAX_ITER >= 1
