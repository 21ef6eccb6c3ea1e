"""Unit tests for eigentrust.config — TrustSetConfig."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from eigentrust.config import TrustSetConfig


class TestTrustSetConfig:
    def test_defaults(self) -> None:
        config = TrustSetConfig()
        assert config.num_neighbours == 256
        assert config.num_iterations == 10
        assert config.initial_score == 1000

    def test_custom_values(self) -> None:
        config = TrustSetConfig(num_neighbours=123, num_iterations=20, initial_score=2437)
        assert config.num_neighbours == 123
        assert config.num_iterations == 20
        assert config.initial_score == 2437

    def test_capacity_below_two_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TrustSetConfig(num_neighbours=1)

    def test_zero_iterations_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TrustSetConfig(num_iterations=0)

    def test_zero_initial_score_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TrustSetConfig(initial_score=0)

    def test_is_frozen(self) -> None:
        config = TrustSetConfig()
        with pytest.raises(ValidationError):
            config.num_iterations = 3  # type: ignore[misc]
