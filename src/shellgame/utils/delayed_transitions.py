from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List

logger = logging.getLogger("shellgame.transitions")


@dataclass(slots=True)
class PendingTransition:
	name: str
	remaining: float
	generation: int
	callback: Callable[[], None] = field(repr=False)


@dataclass(slots=True)
class DelayedTransitions:
	"""Tick-driven delayed continuations keyed to a session generation.

	A continuation only runs if the session generation it was scheduled under
	is still current when its delay elapses. ``cancel_all`` drops everything
	still pending.
	"""

	_pending: List[PendingTransition] = field(default_factory=list, repr=False)

	def schedule(self, name: str, delay: float, generation: int, callback: Callable[[], None]) -> PendingTransition:
		entry = PendingTransition(name=name, remaining=max(0.0, float(delay)), generation=generation, callback=callback)
		self._pending.append(entry)
		return entry

	def advance(self, dt: float, current_generation: int) -> int:
		"""Count pending delays down by ``dt`` and fire the ones that expired.

		Returns the number of continuations that ran.
		"""
		if not self._pending:
			return 0
		due: List[PendingTransition] = []
		for entry in list(self._pending):
			entry.remaining -= dt
			if entry.remaining <= 0.0:
				self._pending.remove(entry)
				due.append(entry)
		fired = 0
		for entry in due:
			if entry.generation != current_generation:
				logger.debug("Dropping stale transition %s (generation %d != %d)", entry.name, entry.generation, current_generation)
				continue
			entry.callback()
			fired += 1
		return fired

	def cancel_all(self) -> None:
		if self._pending:
			logger.debug("Cancelling %d pending transition(s)", len(self._pending))
		self._pending.clear()

	@property
	def pending(self) -> bool:
		return bool(self._pending)

	@property
	def pending_names(self) -> list[str]:
		return [entry.name for entry in self._pending]
