from shellgame.utils.delayed_transitions import DelayedTransitions


def test_transition_fires_once_its_delay_elapses():
	delays = DelayedTransitions()
	fired = []
	delays.schedule("reveal", 0.5, 1, lambda: fired.append("reveal"))
	assert delays.advance(0.25, 1) == 0
	assert delays.pending
	assert delays.advance(0.25, 1) == 1
	assert fired == ["reveal"]
	assert not delays.pending


def test_stale_generation_is_dropped():
	delays = DelayedTransitions()
	fired = []
	delays.schedule("game_over_restart", 2.0, 3, lambda: fired.append(True))
	assert delays.advance(5.0, 4) == 0
	assert fired == []
	assert not delays.pending


def test_cancel_all_clears_pending():
	delays = DelayedTransitions()
	delays.schedule("a", 1.0, 0, lambda: None)
	delays.schedule("b", 2.0, 0, lambda: None)
	assert delays.pending_names == ["a", "b"]
	delays.cancel_all()
	assert not delays.pending
	assert delays.advance(10.0, 0) == 0


def test_callback_may_schedule_follow_up():
	delays = DelayedTransitions()
	fired = []

	def first():
		fired.append("first")
		delays.schedule("second", 1.0, 0, lambda: fired.append("second"))

	delays.schedule("first", 0.0, 0, first)
	delays.advance(0.1, 0)
	assert fired == ["first"]
	assert delays.pending_names == ["second"]
	delays.advance(1.0, 0)
	assert fired == ["first", "second"]


def test_negative_delay_fires_on_next_advance():
	delays = DelayedTransitions()
	fired = []
	delays.schedule("now", -1.0, 0, lambda: fired.append(True))
	delays.advance(0.0, 0)
	assert fired == [True]
