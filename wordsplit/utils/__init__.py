from .strset import StringSet
from .dictionary import read_dictionary, add_words
