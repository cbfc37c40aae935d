import pytest
from cmhomog import Homog
from cmhomog import _utility


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path/'home'
    home.mkdir()
    monkeypatch.setenv('HOME', str(home))
    _utility.get_config.cache_clear()
    yield home
    _utility.get_config.cache_clear()


def test_load_config(tmp_path, home):
    assert _utility.load_config() == {}
    assert _utility.get_precision() == _utility.DEFAULT_PRECISION

    (home/'cmhomog.yml').write_text('precision: 6\n')
    assert _utility.load_config() == {'precision': 6}

    # Current directory takes priority.
    (tmp_path/'cmhomog.yml').write_text('precision: 2\n')
    _utility.get_config.cache_clear()
    assert _utility.get_precision() == 2
    assert Homog(1/3).format() == '0.33+0j'


def test_config_cached(tmp_path, home):
    (tmp_path/'cmhomog.yml').write_text('precision: 2\n')
    assert _utility.get_precision() == 2
    (tmp_path/'cmhomog.yml').write_text('precision: 5\n')
    assert _utility.get_precision() == 2
    assert str(Homog(1/3)) == '0.33+0j'
    _utility.get_config.cache_clear()
    assert _utility.get_precision() == 5


def test_load_empty_config(tmp_path, home):
    (tmp_path/'cmhomog.yml').write_text('')
    assert _utility.load_config() == {}


def test_get_precision():
    assert _utility.get_precision({'precision': '3'}) == 3
    with pytest.raises(ValueError):
        _utility.get_precision({'precision': 0})
