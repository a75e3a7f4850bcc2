import pytest

from shellgame.ui.layout import control_button_centers, layout_slots


def test_three_cups_form_a_single_evenly_spaced_row():
    slots = layout_slots(3)
    assert len(slots) == 3
    assert len({y for _, y in slots}) == 1
    xs = [x for x, _ in slots]
    assert xs[1] - xs[0] == xs[2] - xs[1]


def test_five_cups_sit_two_over_three():
    slots = layout_slots(5)
    assert len(set(slots)) == 5
    top = [s for s in slots if s[1] == 200.0]
    bottom = [s for s in slots if s[1] == 350.0]
    assert len(top) == 2
    assert len(bottom) == 3


def test_layout_is_unaffected_by_callers_mutating_the_result():
    first = layout_slots(3)
    first[0] = (0.0, 0.0)
    assert layout_slots(3)[0] == (250.0, 300.0)


def test_unsupported_cup_count_raises():
    with pytest.raises(ValueError):
        layout_slots(4)


def test_control_buttons_are_centred_in_one_row():
    centers = control_button_centers(3, width=900)
    assert len({y for _, y in centers}) == 1
    assert centers[1][0] == pytest.approx(450.0)
    assert control_button_centers(0) == []
