import logging

import pytest

from cgfunge import cli, config


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger('cgfunge').handlers.clear()


def write_program(tmp_path, text, name='prog.cgf'):
    path = tmp_path / name
    path.write_text(text, encoding='utf-8')
    return str(path)


def test_runs_a_program(tmp_path, capsys):
    path = write_program(tmp_path, '"!iH"CCCE\n')
    assert cli.main([path]) == config.EXIT_OK
    assert capsys.readouterr().out == 'Hi!'


def test_stack_underflow_exit_code(tmp_path, capsys):
    path = write_program(tmp_path, '4II E\n')
    assert cli.main([path]) == config.EXIT_STACK_UNDERFLOW
    captured = capsys.readouterr()
    assert captured.out == '4'
    assert 'Stack underflow' in captured.err


def test_step_limit_exit_code(tmp_path, capsys):
    path = write_program(tmp_path, '>v\n^<\n')
    assert cli.main([path, '--max-steps', '10']) == config.EXIT_STEP_LIMIT
    assert 'step limit of 10' in capsys.readouterr().err


def test_step_limit_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv(config.MAX_STEPS_ENV, '5')
    path = write_program(tmp_path, '>v\n^<\n')
    assert cli.main([path]) == config.EXIT_STEP_LIMIT


def test_invalid_environment_value(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv(config.MAX_STEPS_ENV, 'lots')
    path = write_program(tmp_path, 'E\n')
    assert cli.main([path]) == config.EXIT_ERROR
    assert config.MAX_STEPS_ENV in capsys.readouterr().err


def test_no_limit(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv(config.MAX_STEPS_ENV, '1')
    path = write_program(tmp_path, '12+IE\n')
    assert cli.main([path, '--no-limit']) == config.EXIT_OK
    assert capsys.readouterr().out == '3'


def test_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / 'missing.cgf')]) == config.EXIT_ERROR
    assert 'Error' in capsys.readouterr().err


def test_bundled_example(capsys):
    assert cli.main(['--example', 'hello']) == config.EXIT_OK
    assert capsys.readouterr().out == 'Hello, World!'


def test_unknown_example(capsys):
    assert cli.main(['--example', 'nope']) == config.EXIT_ERROR


def test_list_examples(capsys):
    assert cli.main(['--list-examples']) == config.EXIT_OK
    assert capsys.readouterr().out.split() == ['add', 'bottles', 'hello']


def test_filename_is_required():
    with pytest.raises(SystemExit):
        cli.main([])


def test_debug_writes_trace(tmp_path, capsys):
    path = write_program(tmp_path, '11+E\n')
    assert cli.main([path, '--debug']) == config.EXIT_OK
    trace_file = tmp_path / 'prog.trace.csv'
    assert trace_file.exists()
    assert len(trace_file.read_text(encoding='utf-8').splitlines()) == 5
    assert 'Trace saved to' in capsys.readouterr().err


def test_log_file(tmp_path):
    path = write_program(tmp_path, 'E\n')
    log_file = tmp_path / 'run.log'
    assert cli.main([path, '--log-level', 'DEBUG', '--log-file', str(log_file)]) == config.EXIT_OK
    logging.getLogger('cgfunge').handlers[-1].flush()
    assert 'Halted after 1 steps' in log_file.read_text(encoding='utf-8')


def test_large_character_code(tmp_path, capsys):
    path = write_program(tmp_path, '99*D*D*CE\n')
    assert cli.main([path]) == config.EXIT_OK
    assert capsys.readouterr().out == chr(0xD741)


def test_runtime_value_error_is_reported(tmp_path, capsys, monkeypatch):
    def broken_run(self):
        raise ValueError('bad value')

    monkeypatch.setattr(cli.Interpreter, 'run', broken_run)
    path = write_program(tmp_path, 'E\n')
    assert cli.main([path]) == config.EXIT_ERROR
    assert 'Error: bad value' in capsys.readouterr().err


def test_zero_steps_means_the_same_everywhere(tmp_path, monkeypatch):
    path = write_program(tmp_path, 'E\n')
    assert cli.main([path, '--max-steps', '0']) == config.EXIT_STEP_LIMIT
    monkeypatch.setenv(config.MAX_STEPS_ENV, '0')
    assert cli.main([path]) == config.EXIT_STEP_LIMIT
