from lox.interpreter import run_program


def test_program_8_undefined_variable(capsys):
    with open('examples/program_8.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    diagnostics = run_program(source)
    captured = capsys.readouterr()
    assert captured.out.strip() == 'before'
    assert captured.err == "Undefined variable 'undefinedVar'.\n[line 2]\n"
    assert diagnostics.had_runtime_error
    assert not diagnostics.had_error
