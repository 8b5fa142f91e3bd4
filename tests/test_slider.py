import pytest

from widgetlab.slider import Slider, next_slider_id


def _noop(value):
    return value


def test_next_slider_id_increments_by_one():
    first = next_slider_id()
    second = next_slider_id()
    assert second == first + 1


def test_each_slider_gets_distinct_id():
    a = Slider(label="A", value=1.0, onchange=_noop, max=10.0)
    b = Slider(label="B", value=1.0, onchange=_noop, max=10.0)
    assert a.id != b.id
    assert b.id > a.id


def test_display_value_plain_uses_zero_precision_by_default():
    slider = Slider(label="Speed", value=20.0, onchange=_noop, max=50.0)
    assert slider.display_value() == "20"


def test_display_value_respects_explicit_precision():
    slider = Slider(label="Speed", value=2.5, onchange=_noop, max=50.0, precision=2)
    assert slider.display_value() == "2.50"


def test_display_value_percentage_default_precision():
    slider = Slider(label="Cohesion", value=0.05, onchange=_noop, max=0.5, percentage=True)
    assert slider.display_value() == "5.0%"


def test_effective_step_uses_explicit_step():
    slider = Slider(label="View", value=80.0, onchange=_noop, max=500.0, step=10.0)
    assert slider.effective_step() == 10.0


def test_effective_step_from_precision():
    plain = Slider(label="A", value=1.0, onchange=_noop, max=10.0)
    assert plain.effective_step() == pytest.approx(1.0)
    precise = Slider(label="A", value=1.0, onchange=_noop, max=10.0, precision=2)
    percent = Slider(label="A", value=0.1, onchange=_noop, max=1.0, percentage=True)
    # percentage shifts the step down by two decimal places relative to precision
    assert percent.effective_step() == pytest.approx(precise.effective_step() / 10.0)


def test_view_contains_id_label_and_value():
    slider = Slider(label="Spacing <m>", value=15.0, onchange=_noop, max=100.0)
    rendered = slider.view()
    assert f'id="slider-{slider.id}"' in rendered
    assert f'for="slider-{slider.id}"' in rendered
    assert "Spacing &lt;m&gt;" in rendered
    assert 'max="100"' in rendered
    assert 'value="15"' in rendered
    assert '<span class="slider__value">15</span>' in rendered


def test_view_writes_small_step_without_exponent():
    slider = Slider(label="A", value=0.5, onchange=_noop, max=1.0, percentage=True, precision=3)
    rendered = slider.view()
    assert "e-" not in rendered
    assert 'step="0.00001"' in rendered