from __future__ import annotations

import pytest

CHAR_ARPA = """\\data\\
ngram 1=5
ngram 2=4

\\1-grams:
-1.0\t<unk>\t0.0
-99\t<s>\t-0.30103
-0.69897\t</s>\t0.0
-0.52288\ta\t-0.22185
-0.69897\tb\t-0.17609

\\2-grams:
-0.30103\t<s> a
-0.39794\ta b
-0.15490\tb </s>
-0.60206\ta </s>

\\end\\
"""

WORD_ARPA = """\\data\\
ngram 1=6
ngram 2=5
ngram 3=2

\\1-grams:
-1.5\t<unk>\t0
-99\t<s>\t-0.5
-1.0\t</s>\t0
-0.6\tthe\t-0.4
-0.9\tcat\t-0.3
-1.1\tsat\t-0.2

\\2-grams:
-0.2\t<s> the\t-0.1
-0.3\tthe cat\t-0.15
-0.4\tcat sat\t0
-0.25\tsat </s>
-0.7\tcat </s>

\\3-grams:
-0.1\t<s> the cat
-0.05\tthe cat sat

\\end\\
"""

ENGLISH = list(" abcdefghijklmnopqrstuvwxyz'")


@pytest.fixture
def char_arpa(tmp_path):
    p = tmp_path / "char.arpa"
    p.write_text(CHAR_ARPA, encoding="utf-8")
    return p


@pytest.fixture
def word_arpa(tmp_path):
    p = tmp_path / "word.arpa"
    p.write_text(WORD_ARPA, encoding="utf-8")
    return p


@pytest.fixture
def alphabet_file(tmp_path):
    p = tmp_path / "alphabet.txt"
    p.write_text("# boundary first\n \n" + "\n".join(ENGLISH[1:]) + "\n", encoding="utf-8")
    return p


@pytest.fixture
def word_scorer(word_arpa):
    from lmscorer.decoding.scorer import Scorer

    scorer = Scorer(0.5, 1.0, word_arpa)
    scorer.set_char_map(ENGLISH)
    return scorer


@pytest.fixture
def char_scorer(char_arpa):
    from lmscorer.decoding.scorer import Scorer

    scorer = Scorer(0.5, 1.0, char_arpa)
    scorer.set_char_map(["a", "b", " "])
    return scorer
