from lox.interpreter import run_program


def test_program_1(capsys):
    with open('examples/program_1.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    run_program(source)
    out = capsys.readouterr().out.strip()
    assert out == 'Hello World!!'
