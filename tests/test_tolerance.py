import json

import pytest

from commongeom.errors import ConfigurationError
from commongeom.tolerance import (
    DEFAULT_TOLERANCE,
    Tolerance,
    YAxis,
    eq,
    geq,
    gt,
    is_negative,
    is_nonnegative,
    is_nonpositive,
    is_nonzero,
    is_positive,
    is_zero,
    leq,
    load_tolerance,
    lt,
    modulo,
    neq,
    save_tolerance,
    sign,
)


class TestScalarPredicates:
    """epsilon-aware comparisons of scalars"""

    def test_eq(self):
        assert eq(1.0, 1.0 + 1e-9)
        assert not eq(1.0, 1.1)
        assert neq(1.0, 1.1)
        assert not neq(1.0, 1.0 + 1e-9)

    def test_ordering_is_permissive(self):
        assert lt(1.0, 2.0)
        assert lt(1.0, 1.0)
        assert not lt(2.0, 1.0)
        assert gt(1.0, 1.0)
        assert not gt(1.0, 2.0)
        assert leq(1.0 + 1e-9, 1.0)
        assert geq(1.0 - 1e-9, 1.0)

    def test_zero_and_signs(self):
        assert is_zero(1e-9)
        assert is_nonzero(1e-3)
        assert is_positive(1e-3)
        assert not is_positive(1e-9)
        assert is_negative(-1e-3)
        assert not is_negative(-1e-9)
        assert is_nonpositive(1e-9)
        assert is_nonnegative(-1e-9)
        assert not is_nonnegative(-1e-3)

    def test_sign(self):
        assert sign(-5.0) == -1
        assert sign(5.0) == 1
        assert sign(1e-10) == 0
        assert sign(-1e-10) == 0

    def test_custom_epsilon(self):
        loose = Tolerance(epsilon=0.1)
        assert eq(1.0, 1.05, tol=loose)
        assert not eq(1.0, 1.05)
        assert sign(0.05, tol=loose) == 0

    def test_modulo(self):
        assert modulo(-1, 4) == 3
        assert modulo(5, 4) == 1
        assert modulo(0, 3) == 0


class TestTolerance:

    def test_defaults(self):
        assert DEFAULT_TOLERANCE.epsilon == 1e-8
        assert DEFAULT_TOLERANCE.infinity == 1e20
        assert DEFAULT_TOLERANCE.y_axis is YAxis.UP
        assert DEFAULT_TOLERANCE.y_up

    def test_default_is_a_plain_tolerance(self):
        import commongeom
        assert commongeom.DEFAULT_TOLERANCE == Tolerance()
        assert DEFAULT_TOLERANCE is commongeom.tolerance.DEFAULT_TOLERANCE

    def test_y_axis_from_string(self):
        tol = Tolerance(y_axis='down')
        assert tol.y_axis is YAxis.DOWN
        assert not tol.y_up
        assert DEFAULT_TOLERANCE.with_y_axis('DOWN') == tol

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_TOLERANCE.epsilon = 1.0

    def test_with_epsilon(self):
        tol = DEFAULT_TOLERANCE.with_epsilon(1e-4)
        assert tol.epsilon == 1e-4
        assert DEFAULT_TOLERANCE.epsilon == 1e-8

    @pytest.mark.parametrize('kwargs', [
        {'epsilon': 0},
        {'epsilon': -1e-6},
        {'epsilon': float('nan')},
        {'infinity': 1e-9},
        {'y_axis': 'sideways'},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            Tolerance(**kwargs)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            Tolerance(epsilon=-1)

    def test_from_mapping(self):
        tol = Tolerance.from_mapping({'epsilon': '1e-6', 'y_axis': 'down'})
        assert tol.epsilon == 1e-6
        assert tol.y_axis is YAxis.DOWN
        assert tol.infinity == 1e20

    def test_from_mapping_rejects_unknown_keys(self):
        with pytest.raises(ConfigurationError):
            Tolerance.from_mapping({'epsilon': 1e-6, 'precision': 3})

    def test_from_mapping_rejects_bad_numbers(self):
        with pytest.raises(ConfigurationError):
            Tolerance.from_mapping({'epsilon': 'tiny'})


def test_load_yaml(tmp_path):
    path = tmp_path / 'geometry.yaml'
    path.write_text('tolerance:\n  epsilon: 1.0e-6\n  infinity: 1.0e12\n  y_axis: down\n')
    tol = load_tolerance(path)
    assert tol == Tolerance(epsilon=1e-6, infinity=1e12, y_axis=YAxis.DOWN)


def test_load_bare_mapping(tmp_path):
    path = tmp_path / 'geometry.yml'
    path.write_text('epsilon: 0.001\n')
    assert load_tolerance(path).epsilon == 0.001


def test_load_empty_file(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text('')
    assert load_tolerance(path) == DEFAULT_TOLERANCE


def test_load_json(tmp_path):
    path = tmp_path / 'geometry.json'
    path.write_text(json.dumps({'tolerance': {'y_axis': 'down'}}))
    assert load_tolerance(str(path)).y_axis is YAxis.DOWN


def test_load_rejects_unknown_keys(tmp_path):
    path = tmp_path / 'geometry.yaml'
    path.write_text('tolerance:\n  epsilon: 1.0e-6\n  fudge: 2\n')
    with pytest.raises(ConfigurationError):
        load_tolerance(path)


@pytest.mark.parametrize('name', ['saved.yaml', 'saved.json'])
def test_save_then_load(tmp_path, name):
    tol = Tolerance(epsilon=1e-5, y_axis='down')
    path = tmp_path / name
    save_tolerance(tol, path)
    assert load_tolerance(path) == tol
