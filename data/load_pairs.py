# load gold-standard word pairs for threshold calibration
import csv
from pathlib import Path
from typing import List, Union

TRUE_LABELS = {"1", "true", "yes", "y", "related"}
FALSE_LABELS = {"0", "false", "no", "n", "unrelated"}


class WordPair:
    """A pair of words with a gold label telling whether they are related."""

    def __init__(self, word1: str, word2: str, related: bool):
        self.word1 = word1
        self.word2 = word2
        self.related = related

    def __eq__(self, other) -> bool:
        return (isinstance(other, WordPair)
                and (self.word1, self.word2, self.related) == (other.word1, other.word2, other.related))

    def __repr__(self) -> str:
        return f"WordPair({self.word1!r}, {self.word2!r}, related={self.related})"


def parse_label(label: str) -> bool:
    """
    parse a gold label

    args:
        label: 1/0, true/false, yes/no (case-insensitive)

    returns:
        True if the label marks a related pair
    """
    value = label.strip().lower()
    if value in TRUE_LABELS:
        return True
    if value in FALSE_LABELS:
        return False
    raise ValueError(f"Unknown label: {label!r}")


def load_word_pairs(path: Union[str, Path]) -> List[WordPair]:
    """
    Load word pairs from a tab-separated file of word1, word2, label rows.
    Blank lines and lines starting with '#' are skipped.
    """
    pairs = []
    with open(path, newline="", encoding="utf-8") as f:
        for line_no, row in enumerate(csv.reader(f, delimiter="\t"), 1):
            if not row or not "".join(row).strip() or row[0].lstrip().startswith("#"):
                continue
            if len(row) != 3:
                raise ValueError(f"{path}:{line_no}: expected 3 tab-separated fields, got {len(row)}")
            try:
                related = parse_label(row[2])
            except ValueError as e:
                raise ValueError(f"{path}:{line_no}: {e}") from e
            pairs.append(WordPair(row[0].strip(), row[1].strip(), related))
    return pairs
