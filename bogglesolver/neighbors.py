import functools


@functools.cache
def neighbors_for(dims: tuple[int, int]) -> tuple[tuple[int, ...], ...]:
    """King-move neighbors of each cell, indexed row-major."""
    rows, cols = dims

    def idx(r: int, c: int):
        return cols * r + c

    def pos(idx: int):
        return (idx // cols, idx % cols)

    ns: list[tuple[int, ...]] = []
    for i in range(0, rows * cols):
        r, c = pos(i)
        n = []
        for dr in range(-1, 2):
            nr = r + dr
            if nr < 0 or nr >= rows:
                continue
            for dc in range(-1, 2):
                nc = c + dc
                if nc < 0 or nc >= cols:
                    continue
                if dr == 0 and dc == 0:
                    continue
                n.append(idx(nr, nc))
        n.sort()
        ns.append(tuple(n))
    return tuple(ns)
