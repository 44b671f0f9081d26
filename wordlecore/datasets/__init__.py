from .validator import validate_dictionary, pretty_summary
from .io import read_lines, write_lines, load_dictionary, read_answers

__all__ = ["validate_dictionary", "pretty_summary", "load_dictionary", "read_answers"]
