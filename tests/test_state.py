"""
Unit tests for the calculator store.
"""
import math

import pytest

from yplustool.app.state import CalculatorStore, FormState
from yplustool.model.calculator import DEFAULT_INPUTS


class TestFormState:

    def test_defaults_match_placeholders(self):
        form = FormState()
        for name in FormState.field_names():
            assert getattr(form, name) == DEFAULT_INPUTS[name]

    def test_to_input_parses_texts(self):
        inp = FormState(velocity="abc").to_input()

        assert math.isnan(inp.velocity)
        assert inp.density == 1.205


class TestCalculatorStore:

    def test_initial_result_is_empty(self, store):
        assert math.isnan(store.result.reynolds)
        assert math.isnan(store.result.first_layer_height)

    def test_calculate_emits_result(self, store):
        received = []
        store.result_changed.connect(received.append)

        result = store.calculate()

        assert received == [result]
        assert store.result is result
        assert result.reynolds == pytest.approx(66208.79, rel=1e-6)

    def test_set_field_emits_inputs(self, store):
        received = []
        store.inputs_changed.connect(received.append)

        store.set_field("viscosity", "abc")
        store.set_field("viscosity", "abc")

        assert len(received) == 1
        assert received[0].viscosity == "abc"
        assert math.isnan(store.calculate().reynolds)

    def test_unknown_field_raises(self, store):
        with pytest.raises(KeyError):
            store.set_field("pressure", "1.0")

    def test_result_is_overwritten(self, store):
        first = store.calculate()
        store.set_field("target_yplus", "10")
        second = store.calculate()

        assert store.result is second
        assert second.first_layer_height == pytest.approx(10 * first.first_layer_height)

    def test_reset_restores_defaults(self, store):
        store.set_field("density", "-1")
        store.calculate()
        inputs, results = [], []
        store.inputs_changed.connect(inputs.append)
        store.result_changed.connect(results.append)

        store.reset()

        assert store.form == FormState()
        assert math.isnan(store.result.reynolds)
        assert len(inputs) == 1 and len(results) == 1
