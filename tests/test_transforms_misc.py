"""
Tests for the cartesian, custom, fisheye, helix and parallel transformers.
"""

import math

import pytest
from numpy.testing import assert_allclose

from chart_coord.dataclasses import ValidationError
from chart_coord.transforms import (
    Transformer,
    cartesian,
    custom,
    fisheye,
    fisheye_circular,
    fisheye_x,
    fisheye_y,
    helix,
    parallel,
)
from chart_coord.transforms.fisheye import distort, undistort


# =============================================================================
# cartesian / custom
# =============================================================================

class TestCartesian:
    """Tests for cartesian()."""

    BOX = (10, 20, 200, 100)

    def test_stretches_unit_square(self):
        t = cartesian([], *self.BOX)
        assert t.transform((0.0, 0.0)) == (10.0, 20.0)
        assert t.transform((1.0, 1.0)) == (210.0, 120.0)
        assert t.transform((0.5, 0.5)) == (110.0, 70.0)

    def test_untransform(self):
        t = cartesian([], *self.BOX)
        assert_allclose(t.untransform((110.0, 70.0)), (0.5, 0.5))

    def test_rejects_params(self):
        with pytest.raises(ValidationError, match="cartesian expects 0 params"):
            cartesian([1], *self.BOX)

    def test_rejects_empty_box(self):
        with pytest.raises(ValidationError, match="positive width and height"):
            cartesian([], 0, 0, 0, 100)


class TestCustom:
    """Tests for custom()."""

    def test_callback_receives_box(self):
        seen = []

        def callback(x, y, width, height):
            seen.append((x, y, width, height))
            return (
                lambda v: (v[0] + x, v[1]),
                lambda v: (v[0] - x, v[1]),
            )

        t = custom([callback], 5, 6, 7, 8)
        assert seen == [(5, 6, 7, 8)]
        assert t.transform((1.0, 2.0)) == (6.0, 2.0)
        assert t.untransform((6.0, 2.0)) == (1.0, 2.0)
        assert t.name == "custom"

    def test_callback_returning_transformer(self):
        inner = Transformer(transform=tuple, untransform=tuple, name="mine")
        assert custom([lambda *box: inner], 0, 0, 1, 1) is inner

    @pytest.mark.parametrize("params", [[], [42], [print, print]])
    def test_rejects_missing_callback(self, params):
        with pytest.raises(ValidationError, match="single callable"):
            custom(params, 0, 0, 1, 1)

    def test_rejects_bad_callback_result(self):
        with pytest.raises(ValidationError, match="must return a Transformer"):
            custom([lambda *box: 42], 0, 0, 1, 1)


# =============================================================================
# fisheye
# =============================================================================

class TestDistortion:
    """Tests for distort() and undistort()."""

    def test_fixed_points(self):
        assert distort(0.0, 3.0) == 0.0
        assert distort(1.0, 3.0) == 1.0

    def test_zero_distortion_is_identity(self):
        assert distort(0.37, 0.0) == pytest.approx(0.37)

    def test_inverse(self):
        for t in [0.1, 0.5, 0.9]:
            assert undistort(distort(t, 2.5), 2.5) == pytest.approx(t)


class TestFisheye:
    """Tests for the fisheye lens transformers on the unit box."""

    def test_fisheye_x_magnifies_near_focus(self):
        t = fisheye_x([0.5, 3], 0, 0, 1, 1)
        x, y = t.transform((0.75, 0.2))
        assert x == pytest.approx(0.9)
        assert y == 0.2

    def test_fisheye_x_fixes_focus_and_edges(self):
        t = fisheye_x([0.3, 3], 0, 0, 1, 1)
        for v in [0.0, 0.3, 1.0]:
            assert t.transform((v, 0.0))[0] == pytest.approx(v)

    def test_fisheye_x_inverse(self):
        t = fisheye_x([0.5, 3], 0, 0, 1, 1)
        assert t.untransform((0.9, 0.2))[0] == pytest.approx(0.75)

    def test_fisheye_x_visual_focus(self):
        """With is_visual the focus is a pixel offset."""
        t = fisheye_x([50, 3, True], 0, 0, 100, 100)
        assert t.transform((0.75, 0.0))[0] == pytest.approx(0.9)

    def test_fisheye_y(self):
        t = fisheye_y([0.5, 3], 0, 0, 1, 1)
        x, y = t.transform((0.2, 0.75))
        assert x == 0.2
        assert y == pytest.approx(0.9)

    def test_fisheye_both_axes(self):
        t = fisheye([0.5, 0.5, 3, 3], 0, 0, 1, 1)
        assert_allclose(t.transform((0.75, 0.75)), (0.9, 0.9))
        assert_allclose(t.untransform((0.9, 0.9)), (0.75, 0.75))

    def test_negative_distortion_rejected(self):
        with pytest.raises(ValidationError, match=">= 0"):
            fisheye_x([0.5, -1], 0, 0, 1, 1)

    def test_param_count(self):
        with pytest.raises(ValidationError, match="fisheye expects 4 params"):
            fisheye([0.5, 0.5, 3], 0, 0, 1, 1)


class TestFisheyeCircular:
    """Tests for fisheye_circular()."""

    PARAMS = [0.5, 0.5, 0.25, 2]

    def test_inside_lens_pushed_out(self):
        t = fisheye_circular(self.PARAMS, 0, 0, 1, 1)
        assert_allclose(t.transform((0.6, 0.5)), (0.5 + 0.25 * 2 / 3, 0.5))

    def test_outside_lens_unchanged(self):
        t = fisheye_circular(self.PARAMS, 0, 0, 1, 1)
        assert t.transform((0.9, 0.5)) == (0.9, 0.5)

    def test_focus_unchanged(self):
        t = fisheye_circular(self.PARAMS, 0, 0, 1, 1)
        assert t.transform((0.5, 0.5)) == (0.5, 0.5)

    def test_round_trip(self):
        t = fisheye_circular(self.PARAMS, 0, 0, 200, 100)
        for vector in [(0.55, 0.5), (0.52, 0.6), (0.45, 0.45)]:
            assert_allclose(t.untransform(t.transform(vector)), vector, atol=1e-9)

    def test_zero_radius_rejected(self):
        with pytest.raises(ValidationError, match="radius must be positive"):
            fisheye_circular([0.5, 0.5, 0, 2], 0, 0, 1, 1)


# =============================================================================
# helix / parallel
# =============================================================================

class TestHelix:
    """Tests for helix()."""

    PARAMS = [0, 4 * math.pi, 0.5, 1.5]

    def test_on_spiral_at_start(self):
        t = helix(self.PARAMS, 0, 0, 100, 100)
        assert_allclose(t.transform((0.0, 0.5)), (0.75, 0.5), atol=1e-12)

    def test_band_moves_across_spiral(self):
        """v2 shifts the radius by the gap between turns, here 0.5."""
        t = helix(self.PARAMS, 0, 0, 100, 100)
        inner = t.transform((0.0, 0.0))
        outer = t.transform((0.0, 1.0))
        assert_allclose(inner, (0.5 + 0.25 * 0.5, 0.5), atol=1e-12)
        assert_allclose(outer, (0.5 + 0.75 * 0.5, 0.5), atol=1e-12)

    @pytest.mark.parametrize("v1", [0.1, 0.3, 0.6, 0.9])
    @pytest.mark.parametrize("v2", [0.1, 0.5, 0.9])
    def test_round_trip(self, v1, v2):
        t = helix(self.PARAMS, 0, 0, 100, 100)
        assert_allclose(t.untransform(t.transform((v1, v2))), (v1, v2), atol=1e-9)

    def test_round_trip_wide_box(self):
        t = helix(self.PARAMS, 0, 0, 300, 100)
        assert_allclose(t.untransform(t.transform((0.7, 0.3))), (0.7, 0.3), atol=1e-9)

    def test_empty_sweep_rejected(self):
        with pytest.raises(ValidationError, match="must not be empty"):
            helix([1.0, 1.0], 0, 0, 100, 100)


class TestParallel:
    """Tests for parallel()."""

    def test_default_axes(self):
        t = parallel([], 0, 0, 1, 1)
        assert_allclose(t.transform((0.2, 0.4, 0.6)), (0.0, 0.2, 0.5, 0.4, 1.0, 0.6))

    def test_custom_axes(self):
        t = parallel([0, 300, 100, 0], 0, 0, 1, 1)
        assert_allclose(t.transform((0.0, 1.0)), (0.0, 100.0, 300.0, 0.0))

    def test_single_component(self):
        t = parallel([], 0, 0, 1, 1)
        assert t.transform((0.5,)) == (0.0, 0.5)

    def test_untransform_reads_axis_values(self):
        t = parallel([0, 300, 100, 0], 0, 0, 1, 1)
        assert_allclose(t.untransform(t.transform((0.1, 0.5, 0.8, 0.3))), (0.1, 0.5, 0.8, 0.3))

    @pytest.mark.parametrize("params", [[0, 1], [0, 1, 0, 1, 2]])
    def test_param_count(self, params):
        with pytest.raises(ValidationError, match="parallel expects"):
            parallel(params, 0, 0, 1, 1)
