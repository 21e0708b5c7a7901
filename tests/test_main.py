import pyperclip
import pytest

from memphrase import pool
from memphrase.main import main as memphrase_main
from memphrase.clipboard import OutputSink, ClipboardError, copy_to_clipboard

WORDS = "oak pine frost delta urban granite harbor lantern meadow willow"


@pytest.fixture()
def clipboard(monkeypatch):
    copied = []

    def copy(_self, text):
        copied.append(text)

    monkeypatch.setattr(OutputSink, '_copy', copy, raising=True)
    return copied


@pytest.fixture()
def words(monkeypatch, tmp_path):
    path = tmp_path / 'words'
    path.write_text(WORDS, encoding='utf-8')
    monkeypatch.setattr(pool, 'WORDLIST_SYSTEM_PATH', path)
    pool.load_words.cache_clear()
    yield path
    pool.load_words.cache_clear()


@pytest.fixture()
def config_file(tmp_path):
    return tmp_path / 'memphrase.conf'


def test_words(clipboard, words, config_file, capsys):
    assert memphrase_main(['-c', str(config_file)]) == 0
    assert len(clipboard) == 1
    passphrase = clipboard[0]
    chunks = passphrase.split(' ')
    assert len(chunks) == 5
    assert all(chunk in WORDS.split() for chunk in chunks)
    assert capsys.readouterr().out == passphrase + '\n'


def test_syllables_quiet(clipboard, config_file, capsys):
    assert memphrase_main(['-c', str(config_file), '--syll', '--long',
                           '--quiet', '--suffix']) == 0
    assert clipboard[0].endswith('Q1!')
    assert ' ' not in clipboard[0]
    assert capsys.readouterr().out == ''


def test_suffix_and_sep(clipboard, words, config_file):
    assert memphrase_main(['-c', str(config_file),
                           '--suffix=2024#', '--sep=-']) == 0
    chunks = clipboard[0].split('-')
    assert len(chunks) == 6
    assert chunks[-1] == '2024#'


def test_config_file(clipboard, words, config_file, capsys):
    config_file.write_text("[memphrase]\nsep = _\nquiet = yes\n")
    assert memphrase_main(['-c', str(config_file)]) == 0
    assert clipboard[0].count('_') == 4
    assert capsys.readouterr().out == ''
    # command line wins
    assert memphrase_main(['-c', str(config_file), '--sep=+']) == 0
    assert clipboard[1].count('+') == 4


def test_custom_wordlist(clipboard, config_file, tmp_path):
    wordlist = tmp_path / 'custom'
    wordlist.write_text("alpha bravo charlie delta echo foxtrot")
    assert memphrase_main(['-c', str(config_file), '-w', str(wordlist)]) == 0
    assert set(clipboard[0].split()) <= {'alpha', 'bravo', 'charlie',
                                         'delta', 'echo', 'foxtrot'}


def test_pool_too_small(clipboard, config_file, tmp_path, capsys):
    wordlist = tmp_path / 'custom'
    wordlist.write_text("alpha bravo charlie")
    assert memphrase_main(['-c', str(config_file), '-w', str(wordlist)]) == 1
    assert clipboard == [], "no clipboard write"
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.startswith("Error: Cannot draw 5 distinct words")


def test_clipboard_error(monkeypatch, words, config_file, capsys):
    def copy(_text):
        raise pyperclip.PyperclipException("no clipboard")

    monkeypatch.setattr(pyperclip, 'copy', copy)
    assert memphrase_main(['-c', str(config_file)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert "no clipboard" in captured.err


def test_copy_to_clipboard(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, 'copy', copied.append)
    copy_to_clipboard("oak pine")
    assert copied == ["oak pine"]

    def copy(_text):
        raise pyperclip.PyperclipException("no display")

    monkeypatch.setattr(pyperclip, 'copy', copy)
    with pytest.raises(ClipboardError):
        copy_to_clipboard("oak pine")


def test_version(capsys):
    with pytest.raises(SystemExit):
        memphrase_main(['--version'])
    assert capsys.readouterr().out.startswith('memphrase ')


def test_config_overridden_by_flags(clipboard, words, config_file, capsys):
    config_file.write_text("[memphrase]\nlong = yes\nquiet = yes\n")
    assert memphrase_main(['-c', str(config_file)]) == 0
    assert len(clipboard[0].split(' ')) == 8
    assert capsys.readouterr().out == ''
    assert memphrase_main(['-c', str(config_file), '--no-long', '--no-quiet']) == 0
    assert len(clipboard[1].split(' ')) == 5
    assert capsys.readouterr().out == clipboard[1] + '\n'


def test_bundled_words_offline(clipboard, monkeypatch, config_file):
    monkeypatch.setattr(pool, 'WORDLIST_SYSTEM_PATH', config_file.parent / 'no-words')
    pool.load_words.cache_clear()
    assert memphrase_main(['-c', str(config_file)]) == 0
    assert len(clipboard[0].split(' ')) == 5
    assert set(clipboard[0].split(' ')) <= set(pool.load_bundled_words())
    pool.load_words.cache_clear()


def test_wordlist_not_utf8(clipboard, config_file, tmp_path, capsys):
    wordlist = tmp_path / 'custom'
    wordlist.write_bytes("alpha bravo caf\xe9 delta echo foxtrot".encode('latin-1'))
    assert memphrase_main(['-c', str(config_file), '-w', str(wordlist)]) == 1
    assert clipboard == []
    assert "not UTF-8" in capsys.readouterr().err
