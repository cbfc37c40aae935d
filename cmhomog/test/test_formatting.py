import numpy as np
from numpy import testing
import pytest
from cmhomog import Homog, concatenate, ParseError
from cmhomog import formatting, _utility


@pytest.fixture
def no_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('HOME', str(tmp_path))
    _utility.get_config.cache_clear()
    yield
    _utility.get_config.cache_clear()


def test_format_element():
    assert formatting.format_element(1 + 0j, 1 + 0j, 4) == '1+0j'
    assert formatting.format_element(1 + 0j, 3 + 0j, 3) == '0.333+0j'
    assert formatting.format_element(1j, 0j, 4) == 'inf@(0.5pi)'
    assert formatting.format_element(-2 + 0j, 0j, 4) == 'inf@(1pi)'
    assert formatting.format_element(0j, 0j, 4) == 'nan+nanj'


def test_format():
    assert Homog([1, 2 + 0.5j]).format(4) == '[  1+0j  2+0.5j]'
    assert Homog(0.5 - 1j).format(4) == '0.5-1j'
    assert Homog.infinity(np.pi/2).format(4) == 'inf@(0.5pi)'
    assert Homog(complex(np.inf, 0)).format(4) == 'inf@(0pi)'
    assert Homog([[1, 2], [3, np.inf]]).format(3) == '[[     1+0j       2+0j]\n [     3+0j  inf@(0pi)]]'
    assert Homog([]).format(4) == '[]'
    assert (Homog.infinity() + Homog.infinity(1)).format(4) == 'nan+nanj'


def test_str(no_config):
    h = Homog([1/3, 2j])
    assert str(h) == h.format(4)
    assert repr(h).startswith('Homog(')


def test_describe():
    text = Homog(np.ones((2, 3))).describe(2)
    assert text.startswith('2-by-3 array of homogeneous coordinates:\n\n[[')
    assert Homog([1, 2]).describe(2).startswith('2-element array of homogeneous coordinates:')


def test_parse_round_trip():
    h = concatenate([Homog([1.5 - 2j, 0]), Homog.infinity([0.25*np.pi, -0.75*np.pi])])
    p = Homog.parse(h.format(6))
    testing.assert_allclose(p.to_complex(), h.to_complex())
    testing.assert_allclose(p.angle(), h.angle(), atol=1e-12)
    testing.assert_array_equal(p.isinf(), h.isinf())

    h = Homog(np.arange(12).reshape(2, 3, 2) + 1j)
    p = Homog.parse(h.format(4))
    assert p.shape == (2, 3, 2)
    testing.assert_allclose(p.to_complex(), h.to_complex())

    p = Homog.parse('inf@(-0.5pi)')
    assert p.isinf()
    assert np.isclose(p.angle(), -np.pi/2)

    num, den = formatting.parse('nan+nanj')
    assert num == 0 and den == 0

    assert Homog.parse('[]').shape == (0,)


def test_parse_errors():
    for text in ('[1+0j', '[1+0j]]', '[[1 2] [3]]', 'abc', '1 2', '[inf@(xpi)]'):
        with pytest.raises(ParseError):
            formatting.parse(text)
