import io

import pytest

from lox.__main__ import main, run_prompt
from lox.interpreter import Interpreter


def write_script(tmp_path, text):
    path = tmp_path / 'script.lox'
    path.write_text(text, encoding='utf-8')
    return str(path)


def test_run_file_success(tmp_path, capsys):
    main([write_script(tmp_path, 'print "ok";')])
    assert capsys.readouterr().out == 'ok\n'


def test_run_file_static_error_exit_code(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([write_script(tmp_path, 'print ;')])
    assert exc.value.code == 65


def test_run_file_runtime_error_exit_code(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([write_script(tmp_path, 'print "a";\nprint b;')])
    assert exc.value.code == 70
    captured = capsys.readouterr()
    assert captured.out == 'a\n'
    assert captured.err == "Undefined variable 'b'.\n[line 2]\n"


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / 'nope.lox')])
    assert exc.value.code == 66
    assert 'not found' in capsys.readouterr().err


def test_too_many_arguments(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['a.lox', 'b.lox'])
    assert exc.value.code == 64


def test_verbose_writes_debug_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(['-v', write_script(tmp_path, 'var a = 1;')])
    assert 'define a: number = 1' in (tmp_path / 'debug.txt').read_text(encoding='utf-8')


def test_prompt_recovers_from_errors_between_lines(capsys):
    stdin = io.StringIO('var a = 1;\nprint ;\nprint a + 1;\nprint missing;\nprint a;\n')
    interp = Interpreter()
    assert run_prompt(interp, stdin) == 0
    captured = capsys.readouterr()
    assert captured.out.replace('> ', '').splitlines() == ['2', '1', '']
    assert captured.err.splitlines() == [
        "[line 1] Error at ';': Expect expression.",
        "Undefined variable 'missing'.",
        '[line 1]',
    ]
    assert not interp.diagnostics.had_error


def test_run_file_with_invalid_utf8(tmp_path, capsys):
    path = tmp_path / 'latin1.lox'
    path.write_bytes(b'print "caf\xe9";\n')
    main([str(path)])
    assert capsys.readouterr().out == 'caf\ufffd\n'


def test_prompt_does_not_accumulate_messages(capsys):
    stdin = io.StringIO('print ;\n@\nprint 1;\n')
    interp = Interpreter()
    run_prompt(interp, stdin)
    assert interp.diagnostics.messages == []
