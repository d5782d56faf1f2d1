"""Step sequencer: tracks the current step and clamps every move into ``1..N``."""

from __future__ import annotations


class StepSequencer:
    """Track the current step index of an ``N``-step wizard.

    Out-of-range moves clamp silently; none of the navigation methods raise.
    ``jump_to`` deliberately skips validation of intermediate steps so the
    progress indicator can be used for non-linear review.
    """

    def __init__(self, total_steps: int, current: int = 1) -> None:
        if isinstance(total_steps, bool) or not isinstance(total_steps, int) or total_steps < 1:
            raise ValueError(f"total_steps must be a positive integer, got {total_steps!r}")
        self._total = total_steps
        self._current = self._clamp(current)

    @property
    def total(self) -> int:
        return self._total

    @property
    def current(self) -> int:
        return self._current

    @property
    def is_first(self) -> bool:
        return self._current == 1

    @property
    def is_terminal(self) -> bool:
        return self._current == self._total

    @property
    def progress_ratio(self) -> float:
        """Fraction of the progress line that is filled (``0.0`` on step 1)."""

        if self._total == 1:
            return 1.0
        return (self._current - 1) / (self._total - 1)

    def _clamp(self, step: int) -> int:
        return max(1, min(self._total, step))

    def advance(self) -> int:
        self._current = self._clamp(self._current + 1)
        return self._current

    def retreat(self) -> int:
        self._current = self._clamp(self._current - 1)
        return self._current

    def jump_to(self, step: object) -> int:
        """Move directly to ``step``; non-integer input leaves the position unchanged."""

        if isinstance(step, bool):
            return self._current
        if isinstance(step, float) and step.is_integer():
            step = int(step)
        if isinstance(step, str):
            try:
                step = int(step.strip())
            except ValueError:
                return self._current
        if not isinstance(step, int):
            return self._current
        self._current = self._clamp(step)
        return self._current

    def __repr__(self) -> str:
        return f"StepSequencer(total_steps={self._total}, current={self._current})"


__all__ = ["StepSequencer"]
