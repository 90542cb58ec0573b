from .base import WordsplitError, MalformedChangesError, MalformedDictionaryError, InputTooLongError
from .utils.strset import StringSet
from .utils.dictionary import read_dictionary, add_words
from .segmenter import Segmenter, GreedySegmenter, segment
