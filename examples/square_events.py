"""Example: offset events at the corners of a square."""

from skeleton_kernel import (
    Segment,
    compute_offset_lines_isec_time,
    construct_offset_lines_isec,
    construct_seeded_trisegment,
    construct_trisegment,
)

SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


def main() -> None:
    count = len(SQUARE)
    edges = [Segment.of(SQUARE[i], SQUARE[(i + 1) % count]) for i in range(count)]
    for i in range(count):
        event = construct_trisegment(edges[i - 1], edges[i], edges[(i + 1) % count])
        st = construct_seeded_trisegment(event)
        time = compute_offset_lines_isec_time(st)
        point = construct_offset_lines_isec(st)
        print(f"corner {i}: collinearity={event.collinearity.value} time={time} point={point}")


if __name__ == "__main__":
    main()
