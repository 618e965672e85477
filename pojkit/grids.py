"""Searches over grids: segment paths, ships, trails, knights, lakes, curling and mazes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Point = tuple[int, int]

_ROOK = ((0, 1), (0, -1), (1, 0), (-1, 0))
_KING = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))
_KNIGHT = ((2, -1), (2, 1), (-2, 1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2))
_MAX_CLIMB = 10
_CURLING_LIMIT = 10


def _cells(grid: Sequence[str], mark: str) -> set[Point]:
    return {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == mark
    }


def _component(seed: Point, cells: set[Point], moves: Iterable[Point]) -> set[Point]:
    moves = tuple(moves)
    found = {seed}
    stack = [seed]
    while stack:
        r, c = stack.pop()
        for dr, dc in moves:
            neighbour = (r + dr, c + dc)
            if neighbour in cells and neighbour not in found:
                found.add(neighbour)
                stack.append(neighbour)
    return found


def _components(cells: set[Point], moves: Iterable[Point]) -> list[set[Point]]:
    moves = tuple(moves)
    seen: set[Point] = set()
    groups = []
    for cell in sorted(cells):
        if cell in seen:
            continue
        group = _component(cell, cells, moves)
        seen |= group
        groups.append(group)
    return groups


def segments_between(board: Sequence[str], start: Point, end: Point) -> int | None:
    """Fewest straight segments joining two 'X' pieces at (column, row), 1-based, or None.

    The path may run outside the board by one cell on every side but never
    through another piece.
    """
    height = len(board)
    width = max((len(row) for row in board), default=0)
    pieces = {(r + 1, c + 1) for r, c in _cells(board, "X")}
    origin = (start[1], start[0])
    target = (end[1], end[0])
    reach = max(height, width) + 1
    segments = {origin: 0}
    queue = deque([origin])
    while queue:
        row, col = queue.popleft()
        base = segments[(row, col)]
        for dr, dc in _ROOK:
            for step in range(1, reach + 1):
                cell = (row + dr * step, col + dc * step)
                if not (0 <= cell[0] <= height + 1 and 0 <= cell[1] <= width + 1):
                    break
                if cell == target:
                    return base + 1
                if cell in pieces:
                    break
                if cell not in segments:
                    segments[cell] = base + 1
                    queue.append(cell)
    return None


def count_ships(grid: Sequence[str]) -> int | None:
    """Number of ships drawn with '#', or None when any ship is not a solid rectangle."""
    hulls = _cells(grid, "#")
    ships = 0
    for ship in _components(hulls, _KING):
        rows = [r for r, _ in ship]
        cols = [c for _, c in ship]
        for r in range(min(rows), max(rows) + 1):
            for c in range(min(cols), max(cols) + 1):
                if (r, c) not in hulls:
                    return None
        ships += 1
    return ships


def _trail_steps(trails: Iterable[tuple[Point, Point]]) -> set[tuple[Point, Point]]:
    steps: set[tuple[Point, Point]] = set()
    for (ax, ay), (bx, by) in trails:
        if ax == bx:
            if ay < by:
                steps.update(((ax, i), (bx, i + 1)) for i in range(ay, by))
            else:
                steps.update(((ax, i + 1), (bx, i)) for i in range(by, ay))
        elif ax < bx:
            steps.update(((i, ay), (i + 1, by)) for i in range(ax, bx))
        else:
            steps.update(((i + 1, ay), (i, by)) for i in range(bx, ax))
    return steps


def mountain_route(
    heights: Sequence[Sequence[int]],
    trails: Iterable[tuple[Point, Point]],
    start: Point,
    end: Point,
) -> list[Point] | None:
    """Shortest route along one-way trails, climbing at most 10 per step, or None.

    Points are (row, column), 1-based; each trail runs from its first point to
    its second along a row or column.
    """
    rows = len(heights)
    cols = len(heights[0]) if heights else 0
    for x, y in (start, end):
        if not (1 <= x <= rows and 1 <= y <= cols):
            raise ValueError("point lies outside the map")
    if start == end:
        return [start]
    steps = _trail_steps(trails)
    parent: dict[Point, Point | None] = {start: None}
    queue = deque([start])
    while queue and end not in parent:
        x, y = queue.popleft()
        for dx, dy in _ROOK:
            following = (x + dx, y + dy)
            px, py = following
            if not (1 <= px <= rows and 1 <= py <= cols):
                continue
            if ((x, y), following) not in steps:
                continue
            if heights[px - 1][py - 1] - heights[x - 1][y - 1] > _MAX_CLIMB:
                continue
            if following in parent:
                continue
            parent[following] = (x, y)
            if following == end:
                break
            queue.append(following)
    if end not in parent:
        return None
    route = []
    point: Point | None = end
    while point is not None:
        route.append(point)
        point = parent[point]
    route.reverse()
    return route


def knight_moves(size: int, start: Point, end: Point) -> int | None:
    """Fewest knight moves between two squares of a size x size board, 0-based, or None."""
    for x, y in (start, end):
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError("square lies outside the board")
    if start == end:
        return 0
    distance = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _KNIGHT:
            square = (x + dx, y + dy)
            if not (0 <= square[0] < size and 0 <= square[1] < size):
                continue
            if square in distance:
                continue
            if square == end:
                return distance[(x, y)] + 1
            distance[square] = distance[(x, y)] + 1
            queue.append(square)
    return None


def count_lakes(grid: Sequence[str]) -> int:
    """Number of ponds of 'W' cells joined in any of the eight directions."""
    return len(_components(_cells(grid, "W"), _KING))


def curling_moves(board: Sequence[Sequence[int]]) -> int | None:
    """Fewest throws taking the stone (2) to the goal (3), breaking blocks (1); None past ten."""
    grid = [[int(cell) for cell in row] for row in board]
    height = len(grid)
    width = len(grid[0]) if grid else 0
    start = next(
        ((r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == 2),
        None,
    )
    if start is None:
        raise ValueError("board has no stone")

    def inside(r: int, c: int) -> bool:
        return 0 <= r < height and 0 <= c < len(grid[r])

    best = _CURLING_LIMIT + 1

    def throw(r: int, c: int, used: int) -> None:
        nonlocal best
        if used + 1 >= best:
            return
        for dr, dc in _ROOK:
            nr, nc = r + dr, c + dc
            if not inside(nr, nc) or grid[nr][nc] == 1:
                continue
            while inside(nr, nc):
                if grid[nr][nc] == 3:
                    best = min(best, used + 1)
                    break
                if grid[nr][nc] == 1:
                    grid[nr][nc] = 0
                    throw(nr - dr, nc - dc, used + 1)
                    grid[nr][nc] = 1
                    break
                nr, nc = nr + dr, nc + dc

    del width
    throw(*start, 0)
    return best if best <= _CURLING_LIMIT else None


def maze_path(maze: Sequence[Sequence[int]]) -> list[Point] | None:
    """Shortest path of (row, column) cells from the top-left to the bottom-right, walls truthy."""
    height = len(maze)
    width = len(maze[0]) if maze else 0
    if not height or not width:
        raise ValueError("maze must not be empty")
    start, end = (0, 0), (height - 1, width - 1)
    if maze[0][0] or maze[end[0]][end[1]]:
        return None
    parent: dict[Point, Point | None] = {start: None}
    queue = deque([start])
    while queue and end not in parent:
        r, c = queue.popleft()
        for dr, dc in _ROOK:
            cell = (r + dr, c + dc)
            if not (0 <= cell[0] < height and 0 <= cell[1] < width):
                continue
            if maze[cell[0]][cell[1]] or cell in parent:
                continue
            parent[cell] = (r, c)
            queue.append(cell)
    if end not in parent:
        return None
    path = []
    point: Point | None = end
    while point is not None:
        path.append(point)
        point = parent[point]
    path.reverse()
    return path