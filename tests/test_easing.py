import pytest
from popups.core import easing
from popups.core.easing import EASINGS, resolve


@pytest.mark.parametrize("name", sorted(EASINGS))
def test_curves_hit_endpoints(name):
    fn = EASINGS[name]
    assert fn(0.0) == pytest.approx(0.0, abs=1e-12)
    assert fn(1.0) == pytest.approx(1.0, abs=1e-12)


def test_back_out_overshoots_then_settles():
    samples = [easing.back_out(i / 20) for i in range(21)]
    assert max(samples) > 1.0
    assert samples[-1] == pytest.approx(1.0)


def test_back_in_dips_below_zero_first():
    samples = [easing.back_in(i / 20) for i in range(21)]
    assert min(samples) < 0.0


def test_resolve_accepts_name_callable_and_none():
    assert resolve('backOut') is easing.back_out
    assert resolve(None) is easing.linear
    custom = lambda t: t ** 3
    assert resolve(custom) is custom


def test_resolve_unknown_name_raises():
    with pytest.raises(ValueError):
        resolve('bounceOut')
