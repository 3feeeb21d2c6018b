from hsbkit.conversions.to_hsv import hsl_to_hsv, np_hsl_to_hsv, unit_rgb_to_hsv, np_unit_rgb_to_hsv
import numpy as np
from ..samples import samples_hsv_hsl, samples_rgb_hsv

def test_unit_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = unit_rgb_to_hsv(r, g, b)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(v_out - v_exp) < 1e-9

def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    hsv = np_unit_rgb_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert hsv.shape == expected.shape
    assert np.allclose(hsv, expected)

def test_hsl_to_hsv():
    for (h_exp, s_exp, v_exp), (h, s, l) in samples_hsv_hsl.items():
        h_out, s_out, v_out = hsl_to_hsv(h, s, l)

        assert h_out == h
        assert abs(s_out - s_exp) < 1e-9
        assert abs(v_out - v_exp) < 1e-9

def test_hsl_to_hsv_numpy():
    the_matrix = np.array(list(samples_hsv_hsl.values()))
    expected = np.array(list(samples_hsv_hsl.keys()))
    result = np_hsl_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected)

def test_gray_has_zero_hue():
    h, s, v = unit_rgb_to_hsv(0.3, 0.3, 0.3)
    assert h == 0.0
    assert s == 0.0
    assert v == 0.3
