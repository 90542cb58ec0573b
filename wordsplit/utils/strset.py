import sys, math
from typing import Callable, Iterable, Iterator, Optional, TextIO, Tuple
from ..base import NHASH, HASH_MULTIPLIER
from .utils import parse_changes

class _Node:
  __slots__ = ("key", "included", "left", "right")

  def __init__(self, key: str):
    self.key, self.included, self.left, self.right = key, True, None, None

def _copy_tree(node: Optional[_Node]) -> Optional[_Node]:
  if node is None: return None
  root = _Node(node.key)
  root.included = node.included
  stack = [(node, root)]
  while stack:
    src, dst = stack.pop()
    if src.left is not None:
      dst.left = _Node(src.left.key)
      dst.left.included = src.left.included
      stack.append((src.left, dst.left))
    if src.right is not None:
      dst.right = _Node(src.right.key)
      dst.right.included = src.right.included
      stack.append((src.right, dst.right))
  return root

def _depth_tree(node: Optional[_Node]) -> int:
  depth, level = 0, [node] if node is not None else []
  while level:
    depth += 1
    level = [child for n in level for child in (n.left, n.right) if child is not None]
  return depth

class StringSet:
  """
    set of strings stored as a reduced hash table: each key hashes into one of
    `nhash` buckets, and each bucket is a binary search tree ordered by the key.
    excluding a key only marks its node as not in the set, the node keeps its
    place in the tree and including the key again just flips the mark back.
  """
  def __init__(self, printer: Optional[Callable[[TextIO, str], None]] = None, nhash: int = NHASH):
    if nhash < 1: raise ValueError(f"nhash must be positive, got {nhash}")
    self.printer, self.nhash = printer, nhash
    self.buckets = [None] * nhash

  @classmethod
  def from_words(cls, words: Iterable[str], **kwargs) -> "StringSet":
    s = cls(**kwargs)
    for w in words: s.insert(w)
    return s

  def _hash(self, key: str) -> int:
    h = 0
    for b in key.encode("utf-8"): h = (h * HASH_MULTIPLIER + b) & 0xFFFFFFFF
    return h % self.nhash

  def _find(self, key: str, create: bool = False) -> Optional[_Node]:
    idx = self._hash(key)
    node = self.buckets[idx]
    if node is None:
      if not create: return None
      node = self.buckets[idx] = _Node(key)
      return node
    while True:
      if key == node.key: return node
      if key < node.key:
        if node.left is None:
          if create: node.left = _Node(key)
          return node.left
        node = node.left
      else:
        if node.right is None:
          if create: node.right = _Node(key)
          return node.right
        node = node.right

  def insert(self, key: str):
    self._find(key, create=True).included = True

  def exclude(self, key: str):
    node = self._find(key)
    if node is not None: node.included = False

  def contains(self, key: str) -> bool:
    node = self._find(key)
    return node is not None and node.included

  def bulk_modify(self, changes: str):
    """applies a '+word-word+word...' string: '+' includes the word, '-' excludes it"""
    for sign, word in parse_changes(changes):
      if sign == "+": self.insert(word)
      else: self.exclude(word)

  def __iter__(self) -> Iterator[str]:
    # buckets ascending, in-order inside each bucket; the set must not change meanwhile
    for root in self.buckets:
      stack, node = [], root
      while stack or node is not None:
        while node is not None:
          stack.append(node)
          node = node.left
        node = stack.pop()
        if node.included: yield node.key
        node = node.right

  def foreach(self, visit: Callable[[str], None]):
    for key in self: visit(key)

  def __contains__(self, key) -> bool: return isinstance(key, str) and self.contains(key)
  def __len__(self) -> int: return self.size()

  def size(self) -> int: return sum(1 for _ in self)
  def is_empty(self) -> bool: return self.size() == 0

  def union(self, other: "StringSet"):
    """a += b"""
    for key in other: self.insert(key)

  def subtract(self, other: "StringSet"):
    """a -= b"""
    for key in other: self.exclude(key)

  def intersect(self, other: "StringSet"):
    """a &= b, excluding each member of a that is not in b"""
    for key in [k for k in self if not other.contains(k)]: self.exclude(key)

  def symmetric_split(self, other: "StringSet"):
    """simultaneous a -= b and b -= a, so each side keeps only its own members"""
    shared = [k for k in other if self.contains(k)]
    for key in shared:
      self.exclude(key)
      other.exclude(key)

  def depth_metrics(self) -> Tuple[int, int, float]:
    """min, max and average depth of the non-empty bucket trees, excluded nodes included"""
    depths = [_depth_tree(root) for root in self.buckets if root is not None]
    if not depths: return 0, 0, math.nan
    return min(depths), max(depths), sum(depths) / len(depths)

  def copy(self) -> "StringSet":
    result = StringSet(self.printer, self.nhash)
    result.buckets = [_copy_tree(root) for root in self.buckets]
    return result

  def clear(self): self.buckets = [None] * self.nhash

  def dump(self, out: Optional[TextIO] = None):
    out = sys.stdout if out is None else out
    out.write("{ ")
    for key in self:
      if self.printer is not None: self.printer(out, key)
      else: out.write(f"{key},")
    out.write(" }")
