from wordtrie.cli import check_word, run_cli
from wordtrie.constants import UNDERLINE_ON
from wordtrie.dictionary import Dictionary


def make_dictionary(*words):
    d = Dictionary(search_defaults=False)
    d.load_words(words)
    return d


def feed(monkeypatch, *lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_check_word_found(capsys):
    d = make_dictionary("car", "cart", "cat")
    check_word(d.trie, "car")
    out = capsys.readouterr().out
    assert "Suggestions for prefix 'car': car cart" in out
    assert "Word found: car" in out
    assert "Did you mean" not in out


def test_check_word_not_found_suggests(capsys):
    d = make_dictionary("cot", "dog")
    check_word(d.trie, "cat")
    out = capsys.readouterr().out
    assert "Suggestions for prefix" not in out
    assert UNDERLINE_ON + "Word not found: cat" in out
    assert "Did you mean: cot" in out


def test_check_word_no_suggestions(capsys):
    d = make_dictionary("elephant")
    check_word(d.trie, "cat")
    assert "No suggestions found." in capsys.readouterr().out


def test_run_cli_session(monkeypatch, capsys):
    d = make_dictionary("cat", "cot")
    feed(monkeypatch, "Cat", "", "/delete cat", "cat", "/update cot cut",
         "cut", "exit", "cot")
    run_cli(d)
    out = capsys.readouterr().out

    assert "Word found: cat" in out
    assert "Deleted 'cat'" in out
    assert "Did you mean: cot" in out
    assert "Updated 'cot' -> 'cut'" in out
    assert "Word found: cut" in out
    # nothing after exit is processed
    assert d.trie.search("cut") is True
    assert d.trie.search("cot") is False


def test_run_cli_reports_invalid_input(monkeypatch, capsys):
    d = make_dictionary("cat")
    feed(monkeypatch, "c4t", "/delete nope", "/bogus", "two words")
    run_cli(d)
    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Not found: nope" in out
    assert "Format:" in out
    assert "One word at a time" in out
    assert "cat" in d
