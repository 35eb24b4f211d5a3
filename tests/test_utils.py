import io
import json
import os
import sys
import time
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

import utils
import wordlist


def test_log_with_time(monkeypatch):
    monkeypatch.setattr(utils, 'start_time', time.time() - 61)
    out = io.StringIO()
    monkeypatch.setattr('sys.stdout', out)
    utils.log_with_time('Test message', color='')
    line = out.getvalue()
    assert 'Test message' in line
    assert '[01:0' in line


def test_log_with_time_sets_start(monkeypatch, capsys):
    monkeypatch.setattr(utils, 'start_time', None)
    utils.log_with_time('first')
    assert utils.start_time is not None
    assert 'first' in capsys.readouterr().out


def test_vlog_only_when_verbose(monkeypatch, capsys):
    monkeypatch.setattr(utils, 'start_time', time.time())
    monkeypatch.setattr(utils, 'VERBOSE', False)
    utils.vlog('hidden')
    assert capsys.readouterr().out == ''
    monkeypatch.setattr(utils, 'VERBOSE', True)
    utils.vlog('shown', time.time())
    out = capsys.readouterr().out
    assert 'shown' in out
    assert 'took' in out


def test_log_run_to_file(tmp_path, monkeypatch):
    monkeypatch.setattr(utils, 'start_time', time.time())
    log_dir = tmp_path / 'logs'
    path = utils.log_run_to_file({'words': 3}, log_dir=str(log_dir))
    assert json.loads(open(path).read()) == {'summary': {'words': 3}}
    utils.log_run_to_file({'words': 4}, log_dir=str(log_dir))
    data = json.loads(open(path).read())
    assert data['summary'] == {'words': 4}
    assert data['previous'] == {'words': 3}


def test_log_run_to_file_ignores_corrupt(tmp_path, monkeypatch):
    monkeypatch.setattr(utils, 'start_time', time.time())
    log_dir = tmp_path / 'logs'
    log_dir.mkdir()
    (log_dir / f"frequency_{time.strftime('%Y-%m-%d')}.json").write_text('{not json')
    path = utils.log_run_to_file({'words': 1}, log_dir=str(log_dir))
    assert json.loads(open(path).read()) == {'summary': {'words': 1}}


def test_read_words(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text('alpha  beta\n\tgamma\n\n', encoding='utf-8')
    assert wordlist.read_words(str(path)) == ['alpha', 'beta', 'gamma']


def test_load_words_dispatch(tmp_path, monkeypatch):
    monkeypatch.setattr(utils, 'VERBOSE', False)
    monkeypatch.setattr(sys, 'stdin', io.StringIO('one two'))
    assert wordlist.load_words('-') == ['one', 'two']
    monkeypatch.setattr(wordlist, 'fetch_words', lambda url: ['from', url])
    assert wordlist.load_words('https://example.com/w') == ['from', 'https://example.com/w']
    with pytest.raises(FileNotFoundError):
        wordlist.load_words(str(tmp_path / 'nope.txt'))
