"""Plane geometry: rectangles from segments, rays through walls, projected targets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

_EPSILON = 10e-8
_FOCAL = 1000.0
_CELL = 10.0


def count_rectangles(segments: Iterable[tuple[int, int, int, int]]) -> int:
    """Rectangles formed by two vertical and two horizontal segments (x1, y1, x2, y2) crossing strictly."""
    verticals = []
    horizontals = []
    for ax, ay, bx, by in segments:
        if ax == bx:
            verticals.append((ax, max(ay, by), min(ay, by)))
        elif ay == by:
            horizontals.append((ay, max(ax, bx), min(ax, bx)))
    count = 0
    for (x1, top1, bottom1), (x2, top2, bottom2) in combinations(verticals, 2):
        for (y1, right1, left1), (y2, right2, left2) in combinations(horizontals, 2):
            if (
                max(y1, y2) < min(top1, top2)
                and min(y1, y2) > max(bottom1, bottom2)
                and max(x1, x2) < min(right1, right2)
                and min(x1, x2) > max(left1, left2)
            ):
                count += 1
    return count


def _cross(ax: int, ay: int, bx: int, by: int) -> int:
    return ax * by - ay * bx


def _walls_on_ray(
    walls: Sequence[tuple[int, int, int, int]], origin: tuple[int, int], through: tuple[int, int]
) -> int:
    ox, oy = origin
    dx, dy = through[0] - ox, through[1] - oy
    hits = 0
    for x1, y1, x2, y2 in walls:
        ex, ey = x2 - x1, y2 - y1
        denominator = _cross(dx, dy, ex, ey)
        if denominator == 0:
            continue
        wx, wy = x1 - ox, y1 - oy
        along_ray = _cross(wx, wy, ex, ey)
        along_wall = _cross(wx, wy, dx, dy)
        if denominator < 0:
            denominator, along_ray, along_wall = -denominator, -along_ray, -along_wall
        if along_ray >= 0 and 0 <= along_wall <= denominator:
            hits += 1
    return hits


def max_walls_hit(walls: Sequence[tuple[int, int, int, int]], origin: tuple[int, int]) -> int:
    """Most walls (x1, y1, x2, y2) one ray from origin through a wall end can cross."""
    best = 0
    for x1, y1, x2, y2 in walls:
        for end in ((x1, y1), (x2, y2)):
            best = max(best, _walls_on_ray(walls, origin, end))
    return best


def mark_targets(
    observer: tuple[float, float, float],
    targets: Iterable[tuple[float, float, float]],
    picture: Sequence[str],
) -> list[str] | None:
    """Picture with '*' on every drawn cell a target projects onto, or None when none is hit.

    Points are (depth, x, y); the picture is viewed from the observer with the
    picture plane 1000 units away and cells 10 units wide.
    """
    rows = [list(line) for line in picture]
    height = len(rows)
    width = max((len(row) for row in rows), default=0)
    oz, ox, oy = observer
    hit = False
    for z, x, y in targets:
        z, x, y = z - oz, x - ox, y - oy
        if z < _EPSILON:
            continue
        fx = _CELL * width / 2.0 + _FOCAL / z * x
        fy = _CELL * height / 2.0 + _FOCAL / z * y
        if fy < _EPSILON or fy > _CELL * height or fx < _EPSILON or fx > _CELL * width:
            continue
        ix = int(fx / _CELL)
        iy = height - int(fy / _CELL) - 1
        if iy < 0 or ix >= len(rows[iy]):
            continue
        if rows[iy][ix] != " ":
            rows[iy][ix] = "*"
            hit = True
    return ["".join(row) for row in rows] if hit else None