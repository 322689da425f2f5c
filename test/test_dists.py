''' Test Type B distributions '''
import pytest
import numpy as np

from gbuncert import distributions, uncertainty
from gbuncert.distributions import TypeBDistribution, TypeBSpec, get_distribution
from gbuncert import InvalidDistribution, InvalidInput


def test_kfactors():
    assert np.isclose(TypeBDistribution.UNIFORM.k, 1.7320508)
    assert TypeBDistribution.NORMAL95.k == 2.0
    assert TypeBDistribution.NORMAL99.k == 3.0
    assert TypeBDistribution.UNIFORM.k < TypeBDistribution.NORMAL95.k < TypeBDistribution.NORMAL99.k


def test_picker_order():
    ''' Codes follow the picker order Uniform, Normal95, Normal99 '''
    assert [int(d) for d in TypeBDistribution] == [0, 1, 2]
    assert distributions.names() == ['uniform', 'normal95', 'normal99']
    assert TypeBDistribution.UNIFORM.label == 'Uniform (k=√3)'
    assert TypeBDistribution.NORMAL95.label == 'Normal 95% (k=2)'
    assert TypeBDistribution.NORMAL99.label == 'Normal 99% (k=3)'


def test_lookup():
    ''' Distribution from code, name, or label '''
    assert get_distribution(0) == TypeBDistribution.UNIFORM
    assert get_distribution(np.int64(1)) == TypeBDistribution.NORMAL95
    assert get_distribution('2') == TypeBDistribution.NORMAL99
    assert get_distribution('Uniform') == TypeBDistribution.UNIFORM
    assert get_distribution('rectangular') == TypeBDistribution.UNIFORM
    assert get_distribution(' NORMAL95 ') == TypeBDistribution.NORMAL95
    assert get_distribution('Normal 99% (k=3)') == TypeBDistribution.NORMAL99
    assert get_distribution(TypeBDistribution.NORMAL99) == TypeBDistribution.NORMAL99


def test_invalid():
    ''' Unknown codes fail instead of defaulting to uniform '''
    for code in [3, -1, 1.5, True, None, 'triangular', '', '7']:
        with pytest.raises(InvalidDistribution):
            get_distribution(code)
        with pytest.raises(InvalidDistribution):
            TypeBSpec(0.1, code)


def test_typeb_inputs():
    spec = TypeBSpec(0.05, 'normal95')
    assert spec.distribution == TypeBDistribution.NORMAL95
    assert spec.k == 2
    assert TypeBSpec().limit_error == 0
    assert TypeBSpec().distribution == TypeBDistribution.UNIFORM
    with pytest.raises(InvalidInput):
        TypeBSpec(float('nan'))
    with pytest.raises(InvalidInput):
        TypeBSpec(None)
    with pytest.raises(InvalidInput):
        TypeBSpec(10**400)


def test_frozen():
    ''' Standard deviation of the scipy distribution matches the Type B uncertainty '''
    a = 0.05
    for dist in TypeBDistribution:
        frozen = dist.frozen(a)
        ub = uncertainty.typeb_uncertainty(TypeBSpec(a, dist))
        assert np.isclose(frozen.std(), ub)
        assert np.isclose(frozen.mean(), 0)
    assert np.isclose(TypeBDistribution.UNIFORM.frozen(a).cdf(a), 1)
    assert np.isclose(TypeBDistribution.NORMAL95.frozen(a).cdf(a), .97725, atol=1E-5)   # 2 sigma
    assert TypeBDistribution.NORMAL99.frozen(0) is None
