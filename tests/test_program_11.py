from lox.interpreter import run_program, Interpreter


def test_program_11_undefined_assignment_in_block(capsys):
    with open('examples/program_11.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    interp = Interpreter()
    diagnostics = run_program(source, interp)
    captured = capsys.readouterr()
    assert captured.out.strip() == 'start'
    assert captured.err == "Undefined variable 'missing'.\n[line 4]\n"
    assert diagnostics.had_runtime_error
    # the block's scope is gone even though it was left by an error
    assert interp.environment is interp.globals
    assert 'inner' not in interp.globals.values
