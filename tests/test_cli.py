import json

import pytest

from smoothpath import __main__ as cli

KNOTS = ['50,182', '100,166', '150,87', '200,191', '250,106']

def test_prints_path_data(capsys):
    assert cli.main(KNOTS) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith('M 50,182 Q ')
    assert out.count(' C ') == 2

def test_precision(capsys):
    cli.main(KNOTS + ['--precision', '1'])
    out = capsys.readouterr().out.strip()
    for token in out.replace(',', ' ').split():
        assert len(token.partition('.')[2]) <= 1

def test_diagnostics_table(capsys):
    cli.main(KNOTS + ['--diagnostics'])
    lines = capsys.readouterr().out.strip().split('\n')
    assert 'in control' in lines[0]
    assert lines[-1].startswith('M 50,182')

@pytest.mark.parametrize('argv', [
    KNOTS + ['--scaling', '1.5'],
    ['1,2', '3,4'],
    ['1,2', '3;4', '5,6'],
    ['0,0', '1,1', '0,0'],
    [],
])
def test_bad_input_exits(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    assert excinfo.value.code == 2
    assert 'error' in capsys.readouterr().err

def test_svg_and_json(tmp_path, capsys):
    svg_path = tmp_path / 'out.svg'
    json_path = tmp_path / 'out.json'
    cli.main(KNOTS + ['--svg', str(svg_path), '--json', str(json_path), '--diagnostics'])
    assert capsys.readouterr().out == ''
    document = svg_path.read_text()
    assert document.startswith('<svg ')
    assert '<g class="diagnostics">' in document
    records = json.loads(json_path.read_text())
    assert [record['index'] for record in records] == [1, 2, 3]

def test_file_input(tmp_path, capsys):
    path = tmp_path / 'knots.csv'
    path.write_text('\n'.join(KNOTS) + '\n')
    cli.main(['--file', str(path)])
    from_file = capsys.readouterr().out
    cli.main(KNOTS)
    assert capsys.readouterr().out == from_file

def test_missing_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(['--file', str(tmp_path / 'missing.csv')])
    assert excinfo.value.code == 2
    assert 'error' in capsys.readouterr().err

def test_unwritable_svg_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(KNOTS + ['--svg', str(tmp_path / 'no' / 'such' / 'dir.svg')])
    assert excinfo.value.code == 2
    assert 'error' in capsys.readouterr().err

def test_negative_precision_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(KNOTS + ['--precision=-1'])
    assert excinfo.value.code == 2
    assert 'negative' in capsys.readouterr().err
