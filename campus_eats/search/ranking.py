"""
Heuristic relevance ranking for restaurant search.

Each candidate is scored against the normalized query from three signals:

* **name match**: exact (100), prefix (20), substring (10), otherwise a
  word-level fallback worth up to 50 plus a small character-prefix bonus
  for one- or two-character queries;
* **address match**: full query in the address (15), otherwise 3 per
  query word of three or more characters found in the address;
* **popularity**: the external rating is added to the running score, which
  is then multiplied by 2.5 (rating >= 4.5) or 1.5 (rating >= 4.0); the
  rating count adds ``log10(count + 1)``.

Candidates under ``min_score`` are dropped, the rest are sorted by
descending score (ties keep their input order) and truncated to ``limit``.
"""
from __future__ import annotations

import math
from collections.abc import Sequence

from .models import CandidateRecord, ScoredResult

DEFAULT_MIN_SCORE = 10.0
DEFAULT_LIMIT = 10

EXACT_NAME_SCORE = 100.0
PREFIX_NAME_SCORE = 20.0
SUBSTRING_NAME_SCORE = 10.0
WORD_MATCH_SCORE = 50.0
SHORT_QUERY_MAX_LENGTH = 2
SHORT_QUERY_CHAR_SCORE = 5.0
MIN_NAME_WORD_LENGTH = 2

ADDRESS_MATCH_SCORE = 15.0
ADDRESS_WORD_SCORE = 3.0
MIN_ADDRESS_WORD_LENGTH = 3

# (rating threshold, multiplier), checked in order
POPULARITY_TIERS: tuple[tuple[float, float], ...] = ((4.5, 2.5), (4.0, 1.5))


def normalize_query(query: str) -> str:
    return query.strip().lower()


def _name_score(name: str, query: str) -> float:
    if name == query:
        return EXACT_NAME_SCORE
    if name.startswith(query):
        return PREFIX_NAME_SCORE
    if query in name:
        return SUBSTRING_NAME_SCORE

    query_words = query.split()
    name_words = name.split()

    matched: set[str] = set()
    for word in query_words:
        if len(word) < MIN_NAME_WORD_LENGTH:
            continue
        if any(word in name_word for name_word in name_words):
            matched.add(word)
    score = len(matched) / len(query_words) * WORD_MATCH_SCORE

    if len(query) <= SHORT_QUERY_MAX_LENGTH:
        shared = min(len(query), len(name))
        matching_chars = sum(1 for i in range(shared) if query[i] == name[i])
        score += matching_chars / len(query) * SHORT_QUERY_CHAR_SCORE

    return score


def _address_score(address: str, query: str) -> float:
    if query in address:
        return ADDRESS_MATCH_SCORE
    return sum(
        ADDRESS_WORD_SCORE
        for word in query.split()
        if len(word) >= MIN_ADDRESS_WORD_LENGTH and word in address
    )


def _apply_popularity(score: float, record: CandidateRecord) -> float:
    if record.popularity_score is not None:
        score += record.popularity_score
        for threshold, multiplier in POPULARITY_TIERS:
            if record.popularity_score >= threshold:
                score *= multiplier
                break

    if record.popularity_count:
        score += math.log10(record.popularity_count + 1)

    return score


def score_candidate(record: CandidateRecord, normalized_query: str) -> float:
    """Score one candidate against an already-normalized, non-empty query."""
    name = record.name.strip().lower()
    address = (record.address or "").lower()

    score = _name_score(name, normalized_query)
    score += _address_score(address, normalized_query)
    return _apply_popularity(score, record)


def rank_scored(
    query: str,
    candidates: Sequence[CandidateRecord],
    min_score: float = DEFAULT_MIN_SCORE,
    limit: int = DEFAULT_LIMIT,
) -> list[ScoredResult]:
    """
    Score, filter and order ``candidates`` for ``query``.

    Returns at most ``limit`` results whose score is at least ``min_score``,
    sorted by descending score. Ties keep the order of ``candidates``.
    An empty or whitespace-only query returns an empty list.
    """
    if query is None:
        raise TypeError("query must be a string, got None")
    if candidates is None:
        raise TypeError("candidates must be a sequence of CandidateRecord, got None")
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    normalized = normalize_query(query)
    if not normalized or not candidates:
        return []

    scored: list[ScoredResult] = []
    for record in candidates:
        score = score_candidate(record, normalized)
        if score >= min_score:
            scored.append(ScoredResult(record=record, score=score))

    # sorted() is stable, including with reverse=True
    scored = sorted(scored, key=lambda r: r.score, reverse=True)
    return scored[:limit]


def rank(
    query: str,
    candidates: Sequence[CandidateRecord],
    min_score: float = DEFAULT_MIN_SCORE,
    limit: int = DEFAULT_LIMIT,
) -> list[CandidateRecord]:
    """Return the candidates of :func:`rank_scored` without their scores."""
    return [r.record for r in rank_scored(query, candidates, min_score, limit)]
