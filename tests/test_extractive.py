"""
Tests for the extractive summarizer.
"""

import re

import pytest

from ytdigest.core.extractive import (
    NO_SUMMARY_MESSAGE,
    SUMMARY_HEADING,
    extractive_summarize,
    is_informative,
    keyword_frequencies,
    score_sentence,
    split_sentences,
)


def numbered_items(summary):
    """Return the text of each numbered list item, without the trailing period."""
    return [
        match.group(1)
        for match in re.finditer(r"^\d+\. (.*)\.$", summary, flags=re.MULTILINE)
    ]


def test_only_short_sentences_yields_fixed_message():
    """Every sentence under the length threshold means nothing to summarize."""
    text = "Hi there. Short one! Too brief? Okay then."
    assert extractive_summarize(text) == NO_SUMMARY_MESSAGE
    assert "unable to generate a meaningful summary" in NO_SUMMARY_MESSAGE.lower()


def test_empty_text_yields_fixed_message():
    assert extractive_summarize("") == NO_SUMMARY_MESSAGE
    assert extractive_summarize("   \n\t ") == NO_SUMMARY_MESSAGE


def test_single_qualifying_sentence():
    """Exactly one surviving sentence gives exactly one numbered item."""
    text = "Okay. Um yeah. Machine learning models require careful evaluation datasets. Right."
    summary = extractive_summarize(text, num_sentences=5)

    assert summary == (
        f"{SUMMARY_HEADING}\n\n"
        "1. Machine learning models require careful evaluation datasets."
    )


def test_filler_sentences_are_discarded():
    """Long sentences made of filler do not survive the meaningful-word filter."""
    filler = "So um yeah I mean you know it is like that and so on"
    assert len(filler) >= 30
    assert not is_informative(filler)

    text = f"{filler}. Machine learning models require careful evaluation datasets."
    assert numbered_items(extractive_summarize(text)) == [
        "Machine learning models require careful evaluation datasets"
    ]


def test_selected_sentences_keep_transcript_order(lecture_text):
    """The top sentence by score comes second in the transcript and stays second."""
    summary = extractive_summarize(lecture_text, num_sentences=3)

    assert numbered_items(summary) == [
        "Neural networks learn patterns from training data quickly",
        "Training neural networks requires large training data collections",
        "Neural networks and training data are central to this course",
    ]


def test_highest_scoring_sentence_wins(lecture_text):
    summary = extractive_summarize(lecture_text, num_sentences=1)
    assert numbered_items(summary) == [
        "Training neural networks requires large training data collections"
    ]


def test_requesting_more_than_available_returns_all_survivors():
    text = (
        "Solar panels convert sunlight directly into electricity. "
        "Battery storage smooths out the daily production curve. "
        "Inverters translate direct current into household current. "
        "Yes. Okay."
    )
    items = numbered_items(extractive_summarize(text, num_sentences=10))
    assert len(items) == 3
    assert items[0] == "Solar panels convert sunlight directly into electricity"


def test_output_is_numbered_markdown_list(lecture_text):
    summary = extractive_summarize(lecture_text, num_sentences=2)
    lines = summary.split("\n")

    assert lines[0] == SUMMARY_HEADING
    assert lines[1] == ""
    assert lines[2].startswith("1. ")
    assert lines[3].startswith("2. ")
    assert all(line.endswith(".") for line in lines[2:])


def test_summary_is_deterministic(lecture_text):
    assert extractive_summarize(lecture_text, 3) == extractive_summarize(lecture_text, 3)


def test_invalid_sentence_count():
    with pytest.raises(ValueError):
        extractive_summarize("Machine learning models require careful evaluation datasets.", 0)


def test_split_sentences_normalizes_whitespace():
    text = "First   sentence\nspans lines!!  Second one?\tThird."
    assert split_sentences(text) == ["First sentence spans lines", "Second one", "Third"]


def test_keyword_frequencies_skip_stopwords_and_short_tokens(lecture_text):
    keywords = keyword_frequencies(lecture_text)

    assert len(keywords) == 20
    assert keywords["training"] == 4
    assert keywords["neural"] == 3
    assert "this" not in keywords
    assert "from" not in keywords
    # Ties keep first appearance, so the last sentence's final words are cut
    assert "grandmother" in keywords
    assert "mornings" not in keywords


def test_lead_sentences_get_position_bonus():
    keywords = {"neural": 3, "networks": 3}
    sentence = "Neural networks everywhere"

    lead = score_sentence(sentence, keywords, index=0, total=10)
    later = score_sentence(sentence, keywords, index=5, total=10)

    assert lead == pytest.approx(later * 1.2)
    # (3 + 3) / 3 words * (1 + 0.1 * 2 hits)
    assert later == pytest.approx(2.4)


def test_sentence_of_exactly_minimum_length_is_kept():
    sentence = "Gardening tomatoes needs sunny"
    assert len(sentence) == 30
    assert is_informative(sentence)

    assert len(sentence[:-1]) == 29
    assert not is_informative(sentence[:-1])


def test_meaningful_ratio_must_exceed_forty_percent():
    # 2 meaningful words out of 5
    at_ratio = "Strawberries raspberries because through them"
    assert len(at_ratio) >= 30
    assert not is_informative(at_ratio)

    # 3 out of 6
    assert is_informative("Strawberries raspberries blueberries because through them")


def test_lead_bonus_stops_at_window_boundary():
    keywords = {"neural": 3, "networks": 3}
    sentence = "Neural networks everywhere"

    inside = score_sentence(sentence, keywords, index=1, total=10)
    boundary = score_sentence(sentence, keywords, index=2, total=10)
    after = score_sentence(sentence, keywords, index=3, total=10)

    assert inside == pytest.approx(boundary * 1.2)
    assert boundary == pytest.approx(after)
