from lox.interpreter import run_program


def test_program_7_equality_and_logic(capsys):
    with open('examples/program_7.lox', 'r', encoding='utf-8') as f:
        source = f.read()
    run_program(source)
    out = capsys.readouterr().out.strip().splitlines()
    assert out == [
        'true', 'true', 'true', 'false', 'false', 'true',
        'true', 'true', 'false', 'true', 'false',
        # and/or have no evaluation rule of their own and yield nil
        'nil', 'nil',
    ]
