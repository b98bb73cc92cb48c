from lox.interpreter import run_program


def test_program_6_conditional_and_comma(capsys):
    with open('examples/program_6.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    diagnostics = run_program(source)
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ['1', '2', 'no', 'yes', 'yes', '2', '2', '1', 'Infinity']
    assert not diagnostics.had_runtime_error
