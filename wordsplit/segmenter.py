from typing import Dict, List, Optional
from .base import MAX_WORD_LEN, MAX_WORDS
from .utils.strset import StringSet
from .utils.utils import lowercase, check_length, convert_words

class Segmenter:
  """
    breaks a sentence with no spaces into dictionary words. at each position the
    longest prefix whose lowercased form is in the dictionary is picked first; if
    the rest of the sentence can't be broken after it, the next shorter one is tried.

    a result is the list of words cut from the original sentence (case kept), or
    None when no breakdown exists. the empty sentence breaks into no words at all.
  """
  def __init__(self, dictionary: StringSet, max_word_len: Optional[int] = None, max_words: int = MAX_WORDS, max_sentence_len: int = MAX_WORD_LEN - 1, memoize: bool = True, verbose: bool = False):
    if max_words < 1: raise ValueError(f"max_words must be >= 1, got {max_words}")
    self.dictionary, self.max_word_len, self.max_words = dictionary, max_word_len, max_words
    self.max_sentence_len, self.memoize, self.verbose = max_sentence_len, memoize, verbose

  def _resolve_max_word_len(self) -> int:
    if self.max_word_len is not None: return self.max_word_len
    return max((len(key) for key in self.dictionary), default=0)

  def _backtrack(self, lc: str, frame: List[int]):
    pos, n = frame
    if self.verbose: print(f"backtracking: no breakdown after {lc[pos:pos + n]!r} at {pos}")
    frame[1] -= 1

  def _search(self, lc: str, max_len: int) -> Optional[List[int]]:
    # explicit stack, one [pos, candidate length] frame per word.
    # a frame's budget (words still allowed) is max_words minus the frames below it;
    # failed[pos] holds the largest budget already known to fail at pos
    failed: Dict[int, int] = {}
    end = len(lc)
    stack = [[0, min(max_len, end)]]
    while stack:
      frame = stack[-1]
      pos, budget = frame[0], self.max_words - len(stack) + 1
      while frame[1] > 0 and not self.dictionary.contains(lc[pos:pos + frame[1]]): frame[1] -= 1
      n = frame[1]
      if n == 0:
        if self.memoize: failed[pos] = budget
        stack.pop()
        if stack: self._backtrack(lc, stack[-1])
        continue
      if self.verbose: print(f"found word {lc[pos:pos + n]!r} of length {n} at {pos}")
      if pos + n == end: return [f[1] for f in stack]
      if budget == 1 or (self.memoize and failed.get(pos + n, 0) >= budget - 1): self._backtrack(lc, frame)
      else: stack.append([pos + n, min(max_len, end - pos - n)])
    return None

  def break_lengths(self, sentence: str) -> Optional[List[int]]:
    """returns the word lengths of the breakdown, [] for the empty sentence, None if there is none"""
    check_length(sentence, self.max_sentence_len, "sentence")
    if not sentence: return []
    max_len = self._resolve_max_word_len()
    if max_len < 1: raise ValueError(f"max_word_len must be >= 1 for a non-empty sentence, got {max_len}")
    return self._search(lowercase(sentence), max_len)

  def segment(self, sentence: str) -> Optional[List[str]]:
    lengths = self.break_lengths(sentence)
    if lengths is None: return None
    return convert_words(sentence, lengths)


class GreedySegmenter(Segmenter):
  """takes the longest dictionary prefix at each position and never reconsiders it"""
  def _search(self, lc: str, max_len: int) -> Optional[List[int]]:
    lengths, pos = [], 0
    while pos < len(lc):
      if len(lengths) == self.max_words: return None
      n = min(max_len, len(lc) - pos)
      while n > 0 and not self.dictionary.contains(lc[pos:pos + n]): n -= 1
      if n == 0: return None
      if self.verbose: print(f"longest prefix that is a word: {lc[pos:pos + n]!r}, len {n}")
      lengths.append(n)
      pos += n
    return lengths


def segment(original: str, dictionary: StringSet, max_word_len: Optional[int] = None, **kwargs) -> Optional[List[str]]:
  return Segmenter(dictionary, max_word_len, **kwargs).segment(original)
