"""Length normalizer for token edit distances.

Converts a raw edit distance into a length-normalized dissimilarity score so
that token sequences of different lengths can be ranked against each other.

Formula::

    score(S, T) = raw / max(|S|, |T|)      if |S| > 0 and |T| > 0
                = 0.0                        otherwise

An empty side scores 0.0 rather than a cost proportional to the other side's
length.  The score is bounded above by 1.0 only when the caller's costs are
themselves at most 1.0.
"""

from __future__ import annotations


def normalize_distance(raw: float, n_source: int, n_target: int) -> float:
    """Normalize a raw distance by the longer of the two sequence lengths.

    Args:
        raw:      Raw edit distance between the two sequences.
        n_source: Length of the source sequence.
        n_target: Length of the target sequence.

    Returns:
        ``raw / max(n_source, n_target)``, or ``0.0`` when either length is 0.
    """
    if n_source == 0 or n_target == 0:
        return 0.0
    return raw / max(n_source, n_target)
