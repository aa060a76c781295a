"""
Extractive summarization of caption transcripts.

Used when no LLM is configured or the LLM call fails. Sentences are scored by
how densely they carry the transcript's most frequent meaningful words and the
best ones are returned in their original order as a numbered markdown list.
"""

import re
from collections import Counter
from typing import Dict, List

MIN_SENTENCE_LENGTH = 30
MIN_MEANINGFUL_RATIO = 0.4
MIN_WORD_LENGTH = 3
KEYWORD_COUNT = 20
KEYWORD_BONUS = 0.1
LEAD_BONUS = 1.2
LEAD_WINDOW = 0.2

SUMMARY_HEADING = "## Key Points"
NO_SUMMARY_MESSAGE = "Unable to generate a meaningful summary from this transcript."

# Common English function words plus spoken filler found in auto-captions.
STOPWORDS = frozenset("""
    a about above after again against all also am an and any are as at
    be because been before being below between both but by
    can could did do does doing done down during each even ever every
    few for from further get gets getting got had has have having he her here
    hers herself him himself his how i if in into is it its itself
    just let lets me more most much must my myself no nor not now
    of off on once only or other our ours ourselves out over own
    really same says said she should so some such than that thats the their
    theirs them themselves then there theres these they this those through
    to too under until up upon very was we well were what whats when where
    which while who whom why will with within without would you your yours
    yourself yourselves
    um uh umm uhh hmm like yeah yes okay right actually basically literally
    gonna wanna gotta kinda sorta kind sort thing things stuff know mean
    going want think maybe pretty guys something anything everything
    dont doesnt didnt cant wont isnt arent wasnt werent youre theyre
    were weve youve ive ill well whatever alright anyway
""".split())


def _clean_word(word: str) -> str:
    return re.sub(r"[^a-z0-9]", "", word.lower())


def _is_meaningful(token: str) -> bool:
    return len(token) > MIN_WORD_LENGTH and token not in STOPWORDS


def split_sentences(text: str) -> List[str]:
    """Normalize whitespace and split on ``.``, ``!`` and ``?``."""
    normalized = re.sub(r"\s+", " ", text).strip()
    return [s.strip() for s in re.split(r"[.!?]+", normalized) if s.strip()]


def is_informative(sentence: str) -> bool:
    """Long enough, and more than 40% of its words are meaningful."""
    if len(sentence) < MIN_SENTENCE_LENGTH:
        return False
    words = sentence.split()
    meaningful = [w for w in words if _is_meaningful(_clean_word(w))]
    return len(meaningful) / len(words) > MIN_MEANINGFUL_RATIO


def keyword_frequencies(text: str, limit: int = KEYWORD_COUNT) -> Dict[str, int]:
    """The ``limit`` most frequent meaningful tokens and their counts."""
    tokens = (_clean_word(word) for word in text.split())
    counts = Counter(token for token in tokens if _is_meaningful(token))
    return dict(counts.most_common(limit))


def score_sentence(sentence: str, keywords: Dict[str, int], index: int, total: int) -> float:
    """
    Score a sentence by keyword density.

    Args:
        sentence: Sentence to score
        keywords: Keyword to global frequency mapping
        index: Position among the surviving sentences
        total: Number of surviving sentences

    Returns:
        Frequency sum over keyword occurrences, divided by word count,
        boosted by keyword richness and by lying in the lead window
    """
    words = [_clean_word(word) for word in sentence.split()]
    hits = [word for word in words if word in keywords]

    score = sum(keywords[word] for word in hits) / len(words)
    score *= 1 + KEYWORD_BONUS * len(hits)
    if index < total * LEAD_WINDOW:
        score *= LEAD_BONUS
    return score


def extractive_summarize(text: str, num_sentences: int = 5) -> str:
    """
    Build a markdown summary from the most representative transcript sentences.

    Args:
        text: Raw transcript text
        num_sentences: Maximum number of sentences to select

    Returns:
        A heading followed by a numbered list of the selected sentences in
        transcript order, or NO_SUMMARY_MESSAGE when no sentence qualifies
    """
    if num_sentences < 1:
        raise ValueError("num_sentences must be a positive integer")

    sentences = [s for s in split_sentences(text) if is_informative(s)]
    if not sentences:
        return NO_SUMMARY_MESSAGE

    keywords = keyword_frequencies(re.sub(r"\s+", " ", text))
    total = len(sentences)
    scored = [
        (score_sentence(sentence, keywords, index, total), index)
        for index, sentence in enumerate(sentences)
    ]

    # sorted() is stable, so equal scores keep transcript order
    ranked = sorted(scored, key=lambda item: item[0], reverse=True)
    chosen = sorted(index for _, index in ranked[:min(num_sentences, total)])

    lines = [f"{position}. {sentences[index]}." for position, index in enumerate(chosen, start=1)]
    return SUMMARY_HEADING + "\n\n" + "\n".join(lines)
