from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines, load_answers, DEFAULT_ANSWERS_PATH

__all__ = ["validate_wordlist", "pretty_summary", "load_answers", "read_lines",
           "write_lines", "DEFAULT_ANSWERS_PATH"]
