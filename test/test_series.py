''' Test measurement series and parsing of entered values '''
import pytest
import numpy as np

from gbuncert import MeasurementSeries, parse_measurement, parse_measurements, InvalidInput
from gbuncert.series import parse_decimals


def test_parse():
    ''' Text entries are converted to float '''
    assert parse_measurement('10.02') == 10.02
    assert parse_measurement('  -3 ') == -3.0
    assert parse_measurement('1e-3') == 0.001
    assert parse_measurement(5) == 5.0

    # Unparseable input is rejected, not treated as zero
    for text in ['', '   ', 'abc', '10,02', '1.2.3', 'nan', 'inf', '-inf', None]:
        with pytest.raises(InvalidInput):
            parse_measurement(text)


def test_parse_block():
    assert parse_measurements('1, 2;3\n4  5') == [1, 2, 3, 4, 5]
    assert parse_measurements('') == []
    with pytest.raises(InvalidInput):
        parse_measurements('1 2 x')


def test_series():
    ''' Series append, entries, and reset '''
    s = MeasurementSeries()
    assert len(s) == 0
    assert s.count == 0
    assert s.entries() == []
    s.append(3.2).append(3.4)
    assert s.count == 2
    assert s.entries() == [(1, 3.2), (2, 3.4)]

    vals = s.values
    assert isinstance(vals, np.ndarray)
    vals[0] = 100   # A copy, series is unchanged
    assert list(s) == [3.2, 3.4]

    s.reset()
    assert s.count == 0
    s.append(1)
    assert s.count == 1


def test_extend_all_or_nothing():
    ''' A bad value in extend leaves the series unchanged '''
    s = MeasurementSeries([1, 2])
    with pytest.raises(InvalidInput):
        s.extend([3, float('nan'), 4])
    assert list(s) == [1, 2]


def test_large_integer():
    ''' Integers beyond float range are invalid input '''
    s = MeasurementSeries([1])
    with pytest.raises(InvalidInput):
        s.append(10**400)
    with pytest.raises(InvalidInput):
        s.extend([2, -10**400])
    assert list(s) == [1]


def test_decimals():
    assert parse_decimals(3) == 3
    assert parse_decimals('0') == 0
    assert parse_decimals(' 8 ') == 8
    for bad in [-1, '-1', 1.5, 'six', '', None, True]:
        with pytest.raises(InvalidInput):
            parse_decimals(bad)
