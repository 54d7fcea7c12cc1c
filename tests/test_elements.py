import copy

import pytest

from objstream.formats.elements import ElementIterator


def test_indices_are_shifted_to_zero_based():
    elements = ElementIterator(["1", "2", "3"])
    assert list(elements) == [0, 1, 2]
    assert not elements.truncated
    assert elements.rejected is None


def test_empty_face():
    assert list(ElementIterator([])) == []


def test_malformed_word_truncates_silently():
    elements = ElementIterator(["1", "2", "x", "4"])
    assert list(elements) == [0, 1]
    assert elements.truncated
    assert elements.rejected == "x"


@pytest.mark.parametrize("word", ["0", "-1", "1/2/3", "1.5"])
def test_words_that_are_not_positive_integers_truncate(word):
    elements = ElementIterator(["3", word, "5"])
    assert list(elements) == [2]
    assert elements.rejected == word


def test_single_pass():
    elements = ElementIterator(["1", "2"])
    assert iter(elements) is elements
    assert next(elements) == 0
    assert list(elements) == [1]
    assert list(elements) == []


def test_stays_exhausted_after_truncation():
    words = iter(["1", "bad", "3"])
    elements = ElementIterator(words)
    assert list(elements) == [0]
    assert list(elements) == []
    # the word after the rejected one was never pulled
    assert next(words) == "3"


def test_lazy_consumption():
    pulled = []

    def words():
        for word in ["1", "2", "3"]:
            pulled.append(word)
            yield word

    elements = ElementIterator(words())
    assert pulled == []
    assert next(elements) == 0
    assert pulled == ["1"]


def test_custom_index_parser():
    elements = ElementIterator(["a", "b"], parse=lambda word: ord(word) - ord("a") + 1)
    assert list(elements) == [0, 1]


def test_cannot_be_copied():
    elements = ElementIterator(["1"])
    with pytest.raises(TypeError):
        copy.copy(elements)
    with pytest.raises(TypeError):
        copy.deepcopy(elements)
