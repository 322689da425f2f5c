''' Test command-line interface and interactive session '''
import os
from io import StringIO

import pytest

from gbuncert import project, InvalidInput
from gbuncert.session import Session
from gbuncert import __main__ as cli


SETUP = os.path.join(os.path.dirname(__file__), 'ex_gaugeblock.yaml')
GAUGE = ['10.00', '10.02', '9.98', '10.01', '9.99']


def test_file(capsys):
    ''' Test running a yaml file '''
    u = project.ProjectUncertainty.from_configfile(SETUP)
    report = u.report_short()
    cli.main_setup([SETUP])
    report2, err = capsys.readouterr()
    assert report2 == report + '\n'

    cli.main_setup([SETUP, '-v'])
    report2, err = capsys.readouterr()
    assert report2 == u.report_summary().get_md(mathfmt='text', figfmt='text') + '\n'


def test_calc(capsys):
    ''' Values on the command line '''
    cli.main_calc(GAUGE + ['--limit', '0.05', '--dist', 'uniform'])
    out, err = capsys.readouterr()
    assert 'Measurement result: 10.000000 ± 0.059442' in out
    assert 'Distribution: Uniform (k=√3)' in out

    cli.main_calc(GAUGE + ['-a', '0.05', '-d', '1', '--decimals', '4'])
    out, err = capsys.readouterr()
    assert 'Distribution: Normal 95% (k=2)' in out
    assert 'Limit error: 0.0500' in out


def test_short(capsys):
    cli.main_calc(GAUGE + ['--limit', '0.05', '-s'])
    out, err = capsys.readouterr()
    vals = [float(v) for v in out.split(',')]
    assert vals[0] == 5
    assert len(vals) == 7
    assert abs(vals[-1] - 0.0594418) < 1E-7


def test_formats(capsys, tmp_path):
    cli.main_calc(GAUGE + ['--limit', '0.05', '-f', 'md'])
    out, err = capsys.readouterr()
    assert '## Measurement Uncertainty' in out

    cli.main_calc(GAUGE + ['--limit', '0.05', '-f', 'html'])
    out, err = capsys.readouterr()
    assert out.startswith('<style')

    fname = tmp_path / 'out.html'
    cli.main_calc(GAUGE + ['--limit', '0.05', '-o', str(fname)])
    with open(fname, encoding='utf-8') as f:
        html = f.read()
    assert '10.000000 &#177; 0.059442' in html


def test_datafile(capsys, tmp_path):
    fname = tmp_path / 'data.txt'
    fname.write_text('10.00, 10.02; 9.98\n10.01 9.99\n')
    cli.main_calc(['--datafile', str(fname), '--limit', '0.05'])
    out, err = capsys.readouterr()
    assert 'Number of measurements: 5' in out
    assert '10.000000 ± 0.059442' in out


def test_errors(capsys):
    ''' Errors exit with status 1 and a message '''
    with pytest.raises(SystemExit) as exc:
        cli.main_calc(['10.0', '--limit', '0.05'])
    assert exc.value.code == 1
    out, err = capsys.readouterr()
    assert 'At least 2 measurements' in err

    with pytest.raises(SystemExit) as exc:
        cli.main_calc(['10.0', 'abc'])
    assert exc.value.code == 1
    out, err = capsys.readouterr()
    assert '"abc" is not a number' in err

    with pytest.raises(SystemExit) as exc:
        cli.main_calc(GAUGE + ['--dist', '5'])
    assert exc.value.code == 1

    with pytest.raises(SystemExit) as exc:
        cli.main_setup(['does_not_exist.yaml'])
    assert exc.value.code == 1


def test_session():
    ''' Interactive session commands '''
    s = Session()
    assert s.execute('') == ''
    assert s.execute('10.00') == '1 measurements'
    assert s.execute('calc').startswith('Error: At least 2')
    assert s.execute('add 10.02 9.98') == '3 measurements'
    s.execute('10.01')
    s.execute('9.99')
    assert s.execute('count') == '5'
    listing = s.execute('list').splitlines()
    assert listing[0].split() == ['1', '10.000000']
    assert listing[4].split() == ['5', '9.990000']

    assert s.execute('limit 0.05') == 'Limit error: 0.050000'
    assert s.execute('dist uniform') == 'Distribution: Uniform (k=√3)'
    assert s.execute('calc').endswith('10.000000 ± 0.059442')
    assert s.last.count == 5

    # Errors leave the session usable
    assert s.execute('abc').startswith('Error: Unknown command')
    assert s.execute('nan').startswith('Error: Unknown command')
    assert s.execute('add').startswith('Error: Measurement is empty')
    assert s.execute('limit x').startswith('Error:')
    assert s.execute('dist 3').startswith('Error:')
    assert s.execute('count') == '5'
    assert 'calc' in s.execute('help')

    assert s.execute('clear') == 'Cleared'
    assert s.execute('count') == '0'
    assert s.limit_error == 0
    assert s.execute('list') == 'No measurements'
    s.execute('1')
    assert s.execute('count') == '1'

    s.execute('quit')
    assert s.done


def test_interactive(capsys, monkeypatch):
    ''' Interactive session on stdin '''
    lines = '\n'.join(GAUGE + ['limit 0.05', 'dist normal95', 'calc', 'quit', '12']) + '\n'
    monkeypatch.setattr('sys.stdin', StringIO(lines))
    cli.main_interactive([])
    out, err = capsys.readouterr()
    assert 'Distribution: Normal 95% (k=2)' in out
    assert 'Standard uncertainty: 0.025000 (u_B)' in out

    # Ends at end of input
    monkeypatch.setattr('sys.stdin', StringIO('1\n2\n'))
    cli.main_interactive(['--limit', '0.1'])
    out, err = capsys.readouterr()
    assert '2 measurements' in out


def test_bad_decimals(capsys, tmp_path):
    ''' Invalid report decimals are rejected with a message, not a traceback '''
    with pytest.raises(SystemExit) as exc:
        cli.main_calc(['1', '2', '--decimals', '-1'])
    assert exc.value.code == 2
    out, err = capsys.readouterr()
    assert 'Decimals must be a whole number' in err

    with pytest.raises(SystemExit) as exc:
        cli.main_interactive(['--decimals', 'x'])
    assert exc.value.code == 2
    capsys.readouterr()

    with pytest.raises(InvalidInput):
        Session(decimals=-1)

    fname = tmp_path / 'setup.yaml'
    for setup in ['measurements: [1, 2]\ndecimals: six\n', 'measurements: 5\n']:
        fname.write_text(setup)
        with pytest.raises(SystemExit) as exc:
            cli.main_setup([str(fname)])
        assert exc.value.code == 1
        out, err = capsys.readouterr()
        assert err.startswith('gbuncertf: error:')
