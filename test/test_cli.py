import pytest
from wordsplit.cli import main

@pytest.fixture
def wordlist(tmp_path):
  p = tmp_path / "words.txt"
  p.write_text("loitering\nwith\nin\ntent\ntin\nwithin\nintent\n", encoding="utf-8")
  return str(p)

@pytest.fixture
def cat_words(tmp_path):
  p = tmp_path / "cats.txt"
  p.write_text("a\ncat\nca\ntscat\n", encoding="utf-8")
  return str(p)

def test_finds_solution(wordlist, capsys):
  assert main([wordlist, "LoiteringWithinTent"]) == 0
  out = capsys.readouterr().out.splitlines()
  assert out == ["read dict, maxwordlen=9", "found solution with 3 words", "Loitering Within Tent"]

def test_extra_words(wordlist, capsys):
  assert main([wordlist, "loiteringwithintentions", "Intentions"]) == 0
  out = capsys.readouterr().out.splitlines()
  assert out[0] == "read dict, maxwordlen=10"
  assert out[-1] == "loitering with intentions"

def test_changes(wordlist, capsys):
  assert main([wordlist, "loiteringwithintent", "--changes=-within"]) == 0
  assert capsys.readouterr().out.splitlines()[-1] == "loitering with intent"

def test_changes_starting_with_include(wordlist, capsys):
  assert main([wordlist, "loiteringwithintent", "--changes", "+tin-within-intent"]) == 0
  assert capsys.readouterr().out.splitlines()[-1] == "loitering with in tent"

def test_many_words_do_not_exhaust_the_stack(cat_words, capsys):
  assert main([cat_words, "a" * 1023, "--max-words", "2000"]) == 0
  out = capsys.readouterr().out.splitlines()
  assert out[1] == "found solution with 1023 words"

def test_greedy(cat_words, capsys):
  assert main([cat_words, "acatscat", "--greedy"]) == 0
  assert capsys.readouterr().out.splitlines()[-1] == "No solution found"
  assert main([cat_words, "acatscat"]) == 0
  out = capsys.readouterr().out.splitlines()
  assert out == ["read dict, maxwordlen=5", "found solution with 3 words", "a ca tscat"]

def test_no_memo_and_max_words(cat_words, capsys):
  assert main([cat_words, "acatscat", "--no-memo", "--max-words", "2"]) == 0
  assert capsys.readouterr().out.splitlines()[-1] == "No solution found"

def test_default_wordlist(wordlist, capsys):
  assert main(["", "tintent"], default_wordlist=wordlist) == 0
  assert capsys.readouterr().out.splitlines()[-1] == "tin tent"

def test_malformed_dictionary(tmp_path, capsys):
  p = tmp_path / "bad.txt"
  p.write_text("cat\ndog", encoding="utf-8")
  assert main([str(p), "catdog"]) == 1
  assert "no trailing newline" in capsys.readouterr().err

def test_not_utf8_dictionary(tmp_path, capsys):
  p = tmp_path / "latin1.txt"
  p.write_bytes(b"caf\xe9\n")
  assert main([str(p), "cafe"]) == 1
  assert "not valid UTF-8" in capsys.readouterr().err

def test_bad_changes(wordlist, capsys):
  assert main([wordlist, "tintent", "--changes", "tin"]) == 1
  assert "must start with" in capsys.readouterr().err

def test_sentence_too_long(wordlist, capsys):
  assert main([wordlist, "a" * 1024]) == 1
  assert "exceeds maximum" in capsys.readouterr().err

def test_usage_error():
  with pytest.raises(SystemExit) as exc:
    main(["only-one"])
  assert exc.value.code == 2
  with pytest.raises(SystemExit):
    main(["words.txt", "abc", "--max-words", "0"])

if __name__ == "__main__":
  pytest.main([__file__, "-v"])
