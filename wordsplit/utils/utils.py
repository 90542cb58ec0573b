import regex as re
from typing import List, Sequence, Tuple
from ..base import MalformedChangesError, InputTooLongError

# ascii only, so a lowercased copy keeps every offset of the original
_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")
_CHANGE = re.compile(r"([+-])([^+-]*)")

def lowercase(s: str) -> str: return s.translate(_LOWER)

def check_length(s: str, limit: int, what: str = "input"):
  if len(s) > limit: raise InputTooLongError(f"{what} of length {len(s)} exceeds maximum {limit}")

def parse_changes(changes: str) -> List[Tuple[str, str]]:
  """
    splits a change string into (sign, word) pairs
    eg: '+cat-dog+mouse' -> [('+', 'cat'), ('-', 'dog'), ('+', 'mouse')]
    the whole string is validated before anything is returned, so a bad
    string never applies half of its changes
  """
  if not changes or changes[0] not in "+-":
    raise MalformedChangesError(f"change string must start with '+' or '-': {changes!r}")
  return re.findall(_CHANGE, changes)

def convert_words(sentence: str, lengths: Sequence[int]) -> List[str]:
  """cuts the original (not lowercased) sentence into words of the given lengths"""
  words, pos = [], 0
  for n in lengths:
    words.append(sentence[pos:pos + n])
    pos += n
  if pos != len(sentence): raise ValueError(f"word lengths add up to {pos}, sentence has {len(sentence)} characters")
  return words
