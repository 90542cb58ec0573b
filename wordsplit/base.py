NHASH, HASH_MULTIPLIER = 32533, 65599

# buffer bound inherited from the word-list format: lines and sentences must be shorter
MAX_WORD_LEN, MAX_WORDS = 1024, 100

DEFAULT_WORDLIST = "/usr/share/dict/words"
USAGE = "wordsplit (''|wordlistfile) sentencewithoutspaces [extra words]"

class WordsplitError(Exception): pass
class MalformedChangesError(WordsplitError, ValueError): pass
class MalformedDictionaryError(WordsplitError, IOError): pass
class InputTooLongError(WordsplitError, ValueError): pass
