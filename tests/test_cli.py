'''
Command line tests
'''

from guac.cli import CLI

from pytest import raises


def output(capsys, *args):
    CLI().run(args=list(args))
    return capsys.readouterr().out


def test_expression(capsys):
    assert output(capsys, '-e', '1 2 +') == '3\n'


def test_expression_per_argument(capsys):
    assert output(capsys, '-e', '1', '2', '+') == '3\n'


def test_stack_printed_top_first(capsys):
    assert output(capsys, '-e', '1 2 x') == 'x\n2\n1\n'


def test_error_aborts_line(capsys):
    assert output(capsys, '-e', '1 0 / 5') == '0\n1\n'


def test_symbolic(capsys):
    assert output(capsys, '-e', 'x x +') == '2\N{MIDDLE DOT}x\n'


def test_radix(capsys):
    assert output(capsys, '-r', 'hex', '-e', 'ff 1 +') == '100\n'


def test_angle(capsys):
    assert output(capsys, '-a', 'deg', '-e', '90 sin') == '1\n'


def test_precision(capsys):
    assert output(capsys, '-k', '2', '-e', 'pi ;') == '3.14\n'


def test_dump(capsys):
    out = output(capsys, '-D', '-e', '1 +')
    assert "number\t'1'\t\n" in out
    assert "operator\t'+'\t2\n" in out


def test_bad_radix():
    with raises(SystemExit):
        CLI().run(args=['-r', 'nope', '-e', '1'])
