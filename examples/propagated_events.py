"""Example: events seeded by earlier events through an EventArena."""

from skeleton_kernel import (
    EventArena,
    NodeSeed,
    Segment,
    compute_offset_lines_isec_time,
    construct_offset_lines_isec,
    construct_trisegment,
)


def level(k: int):
    # a collinear pair on y=0 closed by a vertical edge at x=10+k
    return construct_trisegment(
        Segment.of((0, 0), (5, 0)),
        Segment.of((5, 0), (10, 0)),
        Segment.of((10 + k, 0), (10 + k, 10)),
    )


def main() -> None:
    arena = EventArena()
    seed = arena.add_event(level(0))
    for k in range(1, 5):
        seed = arena.add_event(level(k), left_seed=seed)
    for index, st in enumerate(arena):
        time = compute_offset_lines_isec_time(st, arena)
        point = construct_offset_lines_isec(st, arena)
        print(f"#{index} depth={arena.depth(NodeSeed(index))} time={time} point={point}")


if __name__ == "__main__":
    main()
