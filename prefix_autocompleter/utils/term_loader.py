# term_loader.py - read weighted term files into parallel word/weight lists
#
# File format (UTF-8):
#     3                      <- optional declared count (first non-blank line)
#     5627187200\tthe
#     3395006400\tof
#     10.5\tnew york         <- word may contain spaces
# Blank lines are skipped. Weight and word are separated by a tab, or by the
# first run of whitespace when the line has no tab.

import math
import os
from typing import List, Tuple

from prefix_autocompleter.core.autocompleter import BinarySearchAutocompleter
from prefix_autocompleter.core.errors import TermFileError
from prefix_autocompleter.utils.logger_utils import LOG


def _split_line(ln: str):
    if "\t" in ln:
        weight, word = ln.split("\t", 1)
    else:
        parts = ln.split(None, 1)
        if len(parts) != 2:
            return None
        weight, word = parts
    return weight.strip(), word.strip()


def load_terms(path: str) -> Tuple[List[str], List[float]]:
    """
    Parse a term file. Returns (words, weights) with words[i] weighing weights[i].
    Raises FileNotFoundError if path is missing, TermFileError on bad content.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Term file not found: {path}")

    words: List[str] = []
    weights: List[float] = []
    declared = None
    seen_content = False

    with open(path, "r", encoding="utf8") as fh:
        for line_no, ln in enumerate(fh, 1):
            ln = ln.strip()
            if not ln:
                continue

            # a lone integer on the first content line is the term count
            if not seen_content:
                seen_content = True
                if ln.isdigit():
                    declared = int(ln)
                    continue

            pair = _split_line(ln)
            if pair is None:
                raise TermFileError(path, line_no, f"expected '<weight>\\t<word>', got {ln!r}")
            raw_weight, word = pair
            try:
                weight = float(raw_weight)
            except ValueError:
                raise TermFileError(path, line_no, f"bad weight {raw_weight!r}") from None
            if math.isnan(weight) or weight < 0:
                raise TermFileError(path, line_no, f"Negative weight {raw_weight}")
            words.append(word)
            weights.append(weight)

    if declared is not None and declared != len(words):
        raise TermFileError(
            path, 1, f"header declares {declared} terms but file has {len(words)}"
        )
    LOG.debug(f"[term_loader] read {len(words)} terms from {path}")
    return words, weights


def build_from_file(path: str) -> BinarySearchAutocompleter:
    """Load a term file and build the index from it."""
    with LOG.time_block(f"build index from {path}"):
        words, weights = load_terms(path)
        return BinarySearchAutocompleter(words, weights)
