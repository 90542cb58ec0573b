import argparse, sys
from functools import partial
from argparse import RawTextHelpFormatter
from typing import List, Optional
from .base import DEFAULT_WORDLIST, MAX_WORDS, USAGE, WordsplitError
from .segmenter import Segmenter, GreedySegmenter
from .utils.dictionary import read_dictionary

MyFormatter = partial(RawTextHelpFormatter, max_help_position=40, width=100)

def build_parser(default_wordlist: str = DEFAULT_WORDLIST, usage: str = USAGE) -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
    prog="wordsplit",
    usage=usage,
    description=(
      "Break a sentence WITH NO SPACES into dictionary words.\n\n"
      "At each position the longest prefix whose lowercased version is a dictionary word\n"
      "is picked; if no solution follows from it, shorter prefixes are tried in turn.\n"
    ),
    formatter_class=MyFormatter,
    epilog=(
      "Usage examples:\n\n"
      "  Use the default word list:\n"
      "    wordsplit '' MostEnglishsentencesarelowercase\n"
      "  Use a word list and add extra words:\n"
      "    wordsplit words.txt loiteringwithintent within tent\n"
      "  Exclude a word before splitting:\n"
      "    wordsplit words.txt loiteringwithintent --changes=-within\n"
      "  Longest prefix only, no backtracking:\n"
      "    wordsplit words.txt loiteringwithintent --greedy\n"
    )
  )
  parser.add_argument("wordlist", metavar="WORDLIST", help=f"word list, one word per line ('' for {default_wordlist})")
  parser.add_argument("sentence", metavar="SENTENCE", help="sentence without spaces")
  parser.add_argument("extra", metavar="EXTRA", nargs="*", help="extra words to add to the dictionary")
  parser.add_argument("--changes", type=str, metavar="SPEC", help="'+word-word...' edits applied to the dictionary after loading\n(write --changes=-word when SPEC starts with '-')")
  parser.add_argument("--greedy", action="store_true", help="take the longest prefix only, never backtrack")
  parser.add_argument("--max-words", type=int, metavar="INTEGER", default=MAX_WORDS, help=f"maximum words in the solution (default: {MAX_WORDS})")
  parser.add_argument("--no-memo", action="store_true", help="do not remember positions that failed")
  parser.add_argument("-v", "--verbose", action="store_true", help="print the search as it goes")
  return parser

def main(argv: Optional[List[str]] = None, default_wordlist: str = DEFAULT_WORDLIST) -> int:
  parser = build_parser(default_wordlist)
  args = parser.parse_args(argv)
  if args.max_words < 1: parser.error("--max-words must be at least 1")

  wordlist = args.wordlist or default_wordlist
  try:
    dictionary, longest = read_dictionary(wordlist, args.extra, verbose=args.verbose)
    if args.changes is not None:
      dictionary.bulk_modify(args.changes)
      longest = max((len(word) for word in dictionary), default=0)
    print(f"read dict, maxwordlen={longest}")

    cls = GreedySegmenter if args.greedy else Segmenter
    segmenter = cls(dictionary, max(longest, 1), max_words=args.max_words, memoize=not args.no_memo, verbose=args.verbose)
    words = segmenter.segment(args.sentence)
  except (WordsplitError, IOError) as e:
    print(f"wordsplit: error: {e}", file=sys.stderr)
    return 1

  if words is None: print("No solution found")
  else:
    print(f"found solution with {len(words)} words")
    print(" ".join(words))
  return 0

if __name__ == "__main__":
  raise SystemExit(main())
