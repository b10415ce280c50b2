"""pytest plugin for term-distance.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from term_distance import CostModel, TokenMatch, token_distance


@pytest.fixture(scope="session")
def assert_tokens_within() -> Any:
    """Fixture that returns a callable token-distance asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to token_distance() which creates a fresh engine per call).

    Usage in tests::

        def test_reordered_words(assert_tokens_within):
            assert_tokens_within(["new", "york"], ["york", "new"], max_distance=1.0)

        def test_unrelated(assert_tokens_within):
            with pytest.raises(AssertionError, match=r"distance="):
                assert_tokens_within(["a", "b"], ["c", "d"])

    Returns:
        A callable ``_assert(actual, expected, max_distance=0.0, costs=None,
        token_match=TokenMatch.UNIFORM) -> None`` that raises
        ``AssertionError`` when the token distance exceeds ``max_distance``.
    """

    def _assert(
        actual: Sequence[str],
        expected: Sequence[str],
        max_distance: float = 0.0,
        costs: CostModel | None = None,
        token_match: TokenMatch = TokenMatch.UNIFORM,
    ) -> None:
        """Assert that two token sequences are within ``max_distance`` edits.

        Raises:
            AssertionError: When the distance exceeds ``max_distance``, with a
                message including the distance, the limit and both sequences.
        """
        result = token_distance(actual, expected, costs=costs, token_match=token_match)
        if result > max_distance:
            raise AssertionError(
                f"token sequences too far apart: "
                f"distance={result:.4f} > max_distance={max_distance}\n"
                f"  actual:   {list(actual)}\n"
                f"  expected: {list(expected)}"
            )

    return _assert
