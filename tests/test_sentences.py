from __future__ import annotations

from passagekit.text import SentenceSplitter, lexical_diversity, round_half_up, split_sentences, split_words


def test_splits_on_terminators_and_trims():
    sentences = split_sentences("This is the first one. Second sentence here! Is this the third?")
    assert list(sentences) == ["This is the first one.", "Second sentence here!", "Is this the third?"]


def test_keeps_unterminated_tail():
    sentences = split_sentences("First sentence ends here. trailing tail text")
    assert list(sentences) == ["First sentence ends here.", "trailing tail text"]


def test_drops_fragments_of_ten_characters_or_fewer():
    assert list(split_sentences("Ten chars. Eleven chars.")) == ["Eleven chars."]
    assert list(split_sentences("Really?! Yes it is indeed...")) == ["Yes it is indeed..."]


def test_falls_back_to_original_text():
    assert list(split_sentences("Ok. Fine.")) == ["Ok. Fine."]
    assert list(split_sentences("")) == [""]
    assert len(split_sentences("")) == 1


def test_sentence_view_is_restartable():
    view = SentenceSplitter().split("One full sentence. Another full sentence.")
    assert list(view) == list(view)
    assert len(view) == 2


def test_custom_minimum_length():
    splitter = SentenceSplitter(min_chars=3)
    assert list(splitter.split("Hi you. Bye.")) == ["Hi you.", "Bye."]
    assert splitter.count("Hi you. Bye.") == 2


def test_split_words_handles_blank_text():
    assert split_words("") == []
    assert split_words("   ") == []
    assert split_words(" a  b\tc ") == ["a", "b", "c"]


def test_lexical_diversity():
    assert lexical_diversity("") == 0.0
    assert lexical_diversity("The the THE cat") == 0.5


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(1.234, 2) == 1.23
