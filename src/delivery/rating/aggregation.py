"""Aggregate rating formulas.

A dish's first rating from a given user and a later change of that rating
move the aggregate by two different rules, which give different aggregates
for the same sequence of ratings.

- ``average_with_first_rating``: the prior aggregate and the new score are
  averaged as two values (the raw score when the dish was unrated). This is
  not a running mean over all ratings.
- ``recomputed_average``: the true mean over every recorded per-user rating,
  with the changed rating's old score swapped for the new one.
"""

from delivery.catalogue.dish import UNRATED

MIN_SCORE = 1
MAX_SCORE = 10


def score_in_range(score) -> bool:
    return isinstance(score, int) and MIN_SCORE <= score <= MAX_SCORE


def average_with_first_rating(prior_rating: float, score: int) -> float:
    if prior_rating == UNRATED:
        return float(score)
    return (prior_rating + score) / 2


def recomputed_average(recorded_scores: list[int], old_score: int, new_score: int) -> float:
    """Mean of ``recorded_scores`` once ``old_score`` is replaced by ``new_score``.

    ``recorded_scores`` are read before the change, so they still contain
    ``old_score``.
    """
    if not recorded_scores:
        raise ValueError("A changed rating must be among the recorded ratings")
    return (sum(recorded_scores) - old_score + new_score) / len(recorded_scores)
