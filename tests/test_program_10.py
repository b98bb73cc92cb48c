from lox.interpreter import run_program


def test_program_10_assignment_expressions(capsys):
    with open('examples/program_10.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    run_program(source)
    out = capsys.readouterr().out.strip().splitlines()
    assert out == ['nil', '5', '7', '7', '8', 'both', 'both']
