import os
from typing import Iterable, Optional, Tuple
from ..base import MAX_WORD_LEN, MalformedDictionaryError
from .strset import StringSet
from .utils import lowercase

def add_words(dictionary: StringSet, words: Iterable[str]) -> int:
  """includes each word lowercased, returns the length of the longest one"""
  longest = 0
  for word in words:
    word = lowercase(word)
    dictionary.insert(word)
    longest = max(longest, len(word))
  return longest

def _read_lines(path: str):
  with open(path, 'r', encoding='utf-8') as f:
    try:
      for lineno, line in enumerate(f, 1):
        if not line.endswith("\n"): raise MalformedDictionaryError(f"{path}:{lineno}: line has no trailing newline")
        if len(line) >= MAX_WORD_LEN: raise MalformedDictionaryError(f"{path}:{lineno}: line longer than {MAX_WORD_LEN - 2} characters")
        yield line[:-1]
    except UnicodeDecodeError as e: raise MalformedDictionaryError(f"{path}: not valid UTF-8 ({e.reason} at byte {e.start})") from e

def read_dictionary(path: str, extra_words: Iterable[str] = (), dictionary: Optional[StringSet] = None, verbose: bool = False) -> Tuple[StringSet, int]:
  """
    builds a set of all the lowercased words of a word list, one word per line,
    plus `extra_words`. returns the set and the length of its longest word.
    a malformed line aborts the whole read.
  """
  if not os.path.exists(path): raise IOError(f"Word list does not exist: {path}")
  dictionary = StringSet() if dictionary is None else dictionary
  longest = max(add_words(dictionary, extra_words), add_words(dictionary, _read_lines(path)))
  if verbose: print(f"Loaded {dictionary.size()} words from {path}, longest {longest}")
  return dictionary, longest
