from lox.interpreter import run_program


def test_program_9_reports_every_parse_error(capsys):
    with open('examples/program_9.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    diagnostics = run_program(source)
    captured = capsys.readouterr()
    # static errors stop the program from running at all
    assert captured.out == ''
    assert captured.err.splitlines() == [
        "[line 1] Error at '=': Expect variable name.",
        "[line 2] Error at 'print': Expect ';' after value.",
    ]
    assert diagnostics.had_error
    assert not diagnostics.had_runtime_error
