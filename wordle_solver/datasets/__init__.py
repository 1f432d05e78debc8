from .dictionary import Dictionary, Words
from .validator import describe_wordlist, pretty_summary
from .io import read_lines, load_dictionary

__all__ = ["Dictionary", "Words", "describe_wordlist", "pretty_summary",
           "read_lines", "load_dictionary"]
