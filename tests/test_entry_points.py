import bootstrap
import spell_checker


def test_clean_words():
    lines = ["Zebra\n", "apple\n", "apple\n", "it's\n", "\n", "Éclair\n"]
    assert bootstrap.clean_words(lines) == ["apple", "zebra"]


def test_write_dictionary_one_word_per_line(tmp_path):
    path = tmp_path / "dictionary.txt"
    bootstrap.write_dictionary(str(path), ["cat", "dog"])
    assert path.read_text(encoding="utf-8") == "cat\ndog\n"


def test_download_dictionary_keeps_existing_file(tmp_path, capsys):
    path = tmp_path / "dictionary.txt"
    path.write_text("cat\n", encoding="utf-8")
    assert bootstrap.download_dictionary(str(path)) is True
    assert "already exists" in capsys.readouterr().out
    assert path.read_text(encoding="utf-8") == "cat\n"


def test_main_runs_shell_on_given_dictionary(tmp_path, monkeypatch, capsys):
    path = tmp_path / "words.txt"
    path.write_text("hello\nhelp\n", encoding="utf-8")
    answers = iter(["helo", "exit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    spell_checker.main(["--dict", str(path)])

    out = capsys.readouterr().out
    assert "WORD TRIE" in out
    assert "Did you mean: hello help" in out
