from lox.interpreter import run_program


def test_program_13_comments_and_multiline_strings(capsys):
    with open('examples/program_13.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    diagnostics = run_program(source)
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ['first line', 'second line', '5', '5']
    assert not diagnostics.had_error
