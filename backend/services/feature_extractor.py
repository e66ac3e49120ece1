"""Feature extraction: raw posting text -> four groups of numeric signals.

Every function here is total. Empty text, text without punctuation and text
made of nothing but symbols all produce finite, in-range values; ratios with
a zero denominator are 0.
"""

import logging
import re

import numpy as np

from models.schemas.features import (
    BehavioralFeatures,
    FeatureAnalysis,
    LinguisticFeatures,
    MetaFeatures,
    TextFeatures,
)
from services.vocabulary import (
    BUZZWORDS,
    CASUAL_WORDS,
    EMOTIONAL_WORDS,
    GHOST_KEYWORDS,
    LEGITIMATE_KEYWORDS,
    MONTH_NAMES,
    NAMED_BENEFITS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    PRESSURE_PHRASES,
    PROCESS_PHRASES,
    PROFESSIONAL_WORDS,
    REQUIREMENT_PHRASES,
    SPECIFIC_PHRASES,
    TECHNICAL_TERMS,
    URGENT_TERMS,
    VAGUE_TERMS,
    count_hits,
)

logger = logging.getLogger(__name__)

NEUTRAL_POSTING_PATTERN = 50.0

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_DOLLAR_AMOUNT = re.compile(r"\$[\d,]+")
_PHONE_NUMBER = re.compile(r"\d{3}-\d{3}-\d{4}")
_HR_MENTION = re.compile(r"\b(?:hr|recruiter)\b")
_MONTH_MENTION = re.compile(r"\b(?:" + "|".join(sorted(MONTH_NAMES)) + r")\b")
_LEADING_CAPITAL = re.compile(r"^[A-Z]")
_VOWELS = "aeiouy"


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return float(max(low, min(high, value)))


def _ratio(numerator: float, denominator: float) -> float:
    """Percentage ratio that is 0 when the denominator is 0."""
    if denominator <= 0:
        return 0.0
    return numerator / denominator * 100


def _words(text: str) -> list[str]:
    """Lower-cased whitespace tokens longer than two characters."""
    return [w for w in text.lower().split() if len(w) > 2]


def _sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def count_syllables(word: str) -> int:
    """Count vowel groups in ``word``; every word has at least one syllable."""
    count = 0
    previous_was_vowel = False
    for ch in word.lower():
        is_vowel = ch in _VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel
    return max(1, count)


# ---------------------------------------------------------------------------
# Text features
# ---------------------------------------------------------------------------

def _tfidf_score(text: str) -> float:
    """Legitimate-minus-ghost keyword density over all whitespace tokens."""
    n_tokens = len(text.split())
    ghost = _ratio(count_hits(text, GHOST_KEYWORDS), n_tokens)
    legit = _ratio(count_hits(text, LEGITIMATE_KEYWORDS), n_tokens)
    return _clamp(legit - ghost)


def _sentiment(text: str) -> float:
    positive = count_hits(text, POSITIVE_WORDS)
    negative = count_hits(text, NEGATIVE_WORDS)
    return _clamp((positive - negative + 5) * 10)


def _readability(words: list[str], sentences: list[str]) -> float:
    """Flesch reading ease, clamped to 0-100."""
    if not sentences or not words:
        return 0.0
    avg_words_per_sentence = len(words) / len(sentences)
    avg_syllables = float(np.mean([count_syllables(w) for w in words]))
    return _clamp(206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables)


def extract_text_features(description: str) -> TextFeatures:
    text = description.lower()
    words = _words(description)
    sentences = _sentences(description)
    n_words = len(words)

    return TextFeatures(
        tfidf_score=_tfidf_score(text),
        vagueness_density=_clamp(_ratio(count_hits(text, VAGUE_TERMS), n_words)),
        buzzword_ratio=_clamp(_ratio(count_hits(text, BUZZWORDS), n_words)),
        specificity_score=_clamp(_ratio(count_hits(text, SPECIFIC_PHRASES), len(SPECIFIC_PHRASES))),
        sentiment_polarity=_sentiment(text),
        readability_index=_readability(words, sentences),
        keyword_diversity=_clamp(_ratio(len(set(words)), n_words)),
        technical_terms_count=count_hits(text, TECHNICAL_TERMS),
    )


# ---------------------------------------------------------------------------
# Meta features
# ---------------------------------------------------------------------------

def score_description_length(length: int) -> float:
    """Character-length curve peaking at 300-800 characters."""
    if length < 200:
        return 20.0
    if length > 1200:
        return 30.0
    if 300 <= length <= 800:
        return 90.0
    return 60.0


def _salary_transparency(text: str) -> float:
    if _DOLLAR_AMOUNT.search(text):
        return 90.0
    if "salary range" in text or "compensation" in text:
        return 70.0
    if "competitive salary" in text:
        return 30.0
    return 10.0


def _contact_info(text: str) -> float:
    score = 0
    if "@" in text or "email" in text:
        score += 40
    if "phone" in text or _PHONE_NUMBER.search(text):
        score += 30
    if "contact" in text or "reach out" in text:
        score += 20
    if _HR_MENTION.search(text):
        score += 10
    return _clamp(score)


def _company_legitimacy(text: str) -> float:
    score = 50
    if "company" in text or "organization" in text:
        score += 20
    if "website" in text or ".com" in text:
        score += 15
    if "about us" in text or "mission" in text:
        score += 15
    return _clamp(score)


def extract_meta_features(description: str) -> MetaFeatures:
    text = description.lower()
    return MetaFeatures(
        description_length=score_description_length(len(description)),
        salary_transparency=_salary_transparency(text),
        contact_info_score=_contact_info(text),
        company_legitimacy=_company_legitimacy(text),
        posting_urgency=_clamp(count_hits(text, URGENT_TERMS) * 25),
        requirement_clarity=_ratio(count_hits(text, REQUIREMENT_PHRASES), len(REQUIREMENT_PHRASES)),
        benefits_specificity=_ratio(count_hits(text, NAMED_BENEFITS), len(NAMED_BENEFITS)),
    )


# ---------------------------------------------------------------------------
# Behavioral features
# ---------------------------------------------------------------------------

def _timeline_realism(text: str) -> float:
    if "immediate" in text or "asap" in text:
        return 20.0
    if "start date" in text or "timeline" in text:
        return 80.0
    if _MONTH_MENTION.search(text):
        return 70.0
    return 50.0


def extract_behavioral_features(
    description: str,
    rng: np.random.Generator | None = None,
) -> BehavioralFeatures:
    """Behavioral signals.

    The posting pattern score has no textual basis. It is a neutral 50 unless
    a generator is supplied, in which case it is drawn uniformly from [0, 100).
    """
    text = description.lower()
    if rng is not None:
        posting_pattern = float(rng.uniform(0, 100))
    else:
        posting_pattern = NEUTRAL_POSTING_PATTERN

    return BehavioralFeatures(
        posting_pattern_score=posting_pattern,
        response_time_indicator=75.0 if ("respond" in text or "reply" in text) else 25.0,
        application_process_clarity=_ratio(count_hits(text, PROCESS_PHRASES), len(PROCESS_PHRASES)),
        interview_process_mentioned=80.0 if "interview" in text else 20.0,
        timeline_realism=_timeline_realism(text),
    )


# ---------------------------------------------------------------------------
# Linguistic features
# ---------------------------------------------------------------------------

def _grammar_quality(description: str) -> float:
    score = 80
    if "  " in description:
        score -= 5
    if not _LEADING_CAPITAL.match(description.strip()):
        score -= 10
    if any(not _LEADING_CAPITAL.match(s.strip()) for s in _sentences(description)):
        score -= 10
    return _clamp(score)


def _clarity_index(description: str) -> float:
    tokens = description.split()
    sentences = _sentences(description)
    if not sentences or not tokens:
        return 0.0

    avg_words_per_sentence = len(tokens) / len(sentences)
    avg_word_length = float(np.mean([len(t) for t in tokens]))

    # Sweet spot: 10-25 words per sentence, 3-7 characters per word
    score = 100
    if avg_words_per_sentence > 25 or avg_words_per_sentence < 10:
        score -= 20
    if avg_word_length > 7 or avg_word_length < 3:
        score -= 15
    return _clamp(score)


def extract_linguistic_features(description: str) -> LinguisticFeatures:
    text = description.lower()
    professional = count_hits(text, PROFESSIONAL_WORDS)
    casual = count_hits(text, CASUAL_WORDS)

    return LinguisticFeatures(
        grammar_quality=_grammar_quality(description),
        professional_tone=_clamp((professional - casual) * 10 + 50),
        emotional_language=_clamp(count_hits(text, EMOTIONAL_WORDS) * 20),
        persuasion_tactics=_clamp(count_hits(text, PRESSURE_PHRASES) * 25),
        clarity_index=_clarity_index(description),
    )


def extract(description: str, rng: np.random.Generator | None = None) -> FeatureAnalysis:
    """Compute the full feature bundle for one posting."""
    features = FeatureAnalysis(
        text_features=extract_text_features(description),
        meta_features=extract_meta_features(description),
        behavioral_features=extract_behavioral_features(description, rng),
        linguistic_features=extract_linguistic_features(description),
    )
    logger.debug("Extracted features for %d-char posting", len(description))
    return features
