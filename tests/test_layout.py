import pytest

from controlfront.layout import (
    LAUNCHCONTROL,
    OBSERVABLES,
    Color32,
    Gradient,
    Intensity,
    Kind,
    LinSrgb,
    color32,
    hexcolor_parser,
    hexcolor_vec_parser,
    kind_color,
    kind_color32,
    muted,
)


def assert_color(actual, expected):
    assert actual.red == pytest.approx(expected.red, abs=1e-6)
    assert actual.green == pytest.approx(expected.green, abs=1e-6)
    assert actual.blue == pytest.approx(expected.blue, abs=1e-6)


def test_color_from_hex_string():
    rest, color = hexcolor_parser(b"#0000ff")
    assert rest == b""
    assert_color(color, LinSrgb(0.0, 0.0, 1.0))


def test_color_vector_from_string():
    data = b"#240d24 #481b49 #6c286d #903692 #b744b8 #c567c7 #d48dd5 #e2b3e3 #f1d9f1"
    rest, colors = hexcolor_vec_parser(data)
    assert rest == b""
    expected = [
        LinSrgb(0.14117648, 0.1764706, 0.14117648),
        LinSrgb(0.28235295, 0.23137255, 0.28627452),
        LinSrgb(0.42352942, 0.15686275, 0.42745098),
        LinSrgb(0.5647059, 0.21176471, 0.57254905),
        LinSrgb(0.7176471, 0.26666668, 0.72156864),
        LinSrgb(0.77254903, 0.40392157, 0.78039217),
        LinSrgb(0.83137256, 0.6784314, 0.8352941),
        LinSrgb(0.8862745, 0.7019608, 0.8901961),
        LinSrgb(0.94509804, 0.8509804, 0.94509804),
    ]
    assert len(colors) == len(expected)
    for actual, wanted in zip(colors, expected):
        assert_color(actual, wanted)


def test_parser_leaves_rest():
    rest, color = hexcolor_parser(b"#ff0000xyz")
    assert rest == b"xyz"
    assert_color(color, LinSrgb(1.0, 0.0, 0.0))


def test_vec_parser_stops_before_trailing_space():
    rest, colors = hexcolor_vec_parser(b"#000000 #0000ff ")
    assert rest == b" "
    assert len(colors) == 2


def test_parser_accepts_text():
    rest, color = hexcolor_parser("#0000ff")
    assert rest == b""
    assert_color(color, LinSrgb(0.0, 0.0, 1.0))


@pytest.mark.parametrize("data", [b"", b"0000ff", b"#00ff", b"#00zz00"])
def test_parser_rejects_malformed(data):
    with pytest.raises(ValueError):
        hexcolor_parser(data)


def test_gradient_ends_and_clamping():
    first, last = LinSrgb(0.0, 0.0, 0.0), LinSrgb(1.0, 0.5, 0.25)
    gradient = Gradient([first, LinSrgb(0.2, 0.2, 0.2), last])
    assert gradient.get(0.0) == first
    assert gradient.get(1.0) == last
    assert gradient.get(-3.0) == first
    assert gradient.get(7.0) == last


def test_gradient_hits_stops_and_midpoint():
    middle = LinSrgb(0.2, 0.4, 0.6)
    gradient = Gradient([LinSrgb(0.0, 0.0, 0.0), middle, LinSrgb(1.0, 1.0, 1.0)])
    assert_color(gradient.get(0.5), middle)
    assert_color(Gradient([LinSrgb(0.0, 0.0, 0.0), LinSrgb(1.0, 1.0, 1.0)]).get(0.5), LinSrgb(0.5, 0.5, 0.5))


def test_gradient_needs_colours():
    with pytest.raises(ValueError):
        Gradient([])


def test_muted_colours():
    assert muted(OBSERVABLES) == Color32(0x32, 0x78, 0x7D)
    assert muted(LAUNCHCONTROL) == Color32(0xB0, 0x26, 0x14)


def test_muted_unknown_colour():
    with pytest.raises(KeyError):
        muted(Color32(1, 2, 3))


def test_color32_conversion():
    assert color32(LinSrgb(0.0, 0.0, 1.0)) == Color32(0, 0, 255)
    assert color32(LinSrgb(1.5, -0.5, 0.0)) == Color32(255, 0, 0)


@pytest.mark.parametrize("kind", list(Kind))
def test_kind_colour_increases_with_intensity(kind):
    low = kind_color(kind, Intensity.LOW)
    high = kind_color(kind, Intensity.HIGH)
    for channel in ("red", "green", "blue"):
        assert 0.0 <= getattr(low, channel) <= getattr(high, channel) <= 1.0


def test_kind_color32_matches_conversion():
    for kind in Kind:
        for intensity in Intensity:
            assert kind_color32(kind, intensity) == color32(kind_color(kind, intensity))