from fractions import Fraction

from skeleton_kernel import (
    Collinearity,
    KernelConfig,
    Point,
    Segment,
    compute_normalized_line_coeff,
    compute_offset_lines_isec_dist_to_point,
    compute_offset_lines_isec_time,
    construct_offset_lines_isec,
    construct_seeded_trisegment,
    construct_trisegment,
    get_kernel_config,
    set_kernel_config,
)


def _exact_seeded(*edges):
    segments = [
        Segment(Point(Fraction(a[0]), Fraction(a[1])), Point(Fraction(b[0]), Fraction(b[1])))
        for a, b in edges
    ]
    return construct_seeded_trisegment(construct_trisegment(*segments))


def test_exact_square_corner():
    st = _exact_seeded(((0, 0), (10, 0)), ((10, 0), (10, 10)), ((10, 10), (0, 10)))

    time = compute_offset_lines_isec_time(st)
    point = construct_offset_lines_isec(st)

    assert time.quotient() == 5
    assert isinstance(time.quotient(), Fraction)
    assert isinstance(point.x, Fraction) and isinstance(point.y, Fraction)
    assert point == Point(Fraction(5), Fraction(5))
    assert compute_offset_lines_isec_dist_to_point(Point(Fraction(0), Fraction(0)), st) == 50


def test_exact_triangle_with_pythagorean_hypotenuse():
    st = _exact_seeded(((0, 0), (4, 0)), ((4, 0), (0, 3)), ((0, 3), (0, 0)))

    time = compute_offset_lines_isec_time(st)
    point = construct_offset_lines_isec(st)

    assert time.quotient() == 1
    assert (point.x, point.y) == (Fraction(1), Fraction(1))


def test_exact_degenerate_event():
    st = _exact_seeded(((0, 0), (4, 0)), ((7, 1), (7, 8)), ((6, 0), (10, 0)))
    assert st.event.collinearity is Collinearity.E0E2

    assert compute_offset_lines_isec_time(st).quotient() == 2
    assert construct_offset_lines_isec(st) == Point(Fraction(5), Fraction(2))


def test_huge_exact_coordinates_do_not_overflow():
    big = Fraction(10) ** 400
    edge = Segment(Point(Fraction(0), Fraction(0)), Point(3 * big, 4 * big))

    line = compute_normalized_line_coeff(edge)

    assert line.a == Fraction(-4, 5)
    assert line.b == Fraction(3, 5)


def test_sqrt_precision_is_configurable():
    edge = Segment(Point(Fraction(0), Fraction(0)), Point(Fraction(1), Fraction(1)))
    original = get_kernel_config()
    try:
        set_kernel_config(KernelConfig(sqrt_precision_bits=8))
        coarse = compute_normalized_line_coeff(edge)
        set_kernel_config(KernelConfig(sqrt_precision_bits=128))
        fine = compute_normalized_line_coeff(edge)
    finally:
        set_kernel_config(original)

    exact_b = 2 ** -0.5
    assert abs(float(fine.b) - exact_b) < 1e-15
    assert 1e-6 < abs(float(coarse.b) - exact_b) < 1e-3
