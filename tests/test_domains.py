from flip_solver.csp.domains import combine_solutions, intersect_axes, reduce_line
from flip_solver.csp.search import enumerate_line_solutions
from flip_solver.types import CellDomain, Line, LineConstraint


def test_combine_is_union_per_position():
    sols = [(0, 1, 2, 3, 1), (0, 2, 2, 1, 2), (1, 1, 2, 0, 3)]
    res = combine_solutions(sols)
    for i, dom in enumerate(res):
        assert set(dom.values) == {s[i] for s in sols}


def test_combine_without_solutions_gives_empty_domains():
    res = combine_solutions([])
    assert len(res) == 5
    assert all(d.is_empty() for d in res)


def test_combine_matches_enumerated_values():
    line = Line(tuple(CellDomain.full() for _ in range(5)), LineConstraint(4, 2))
    sols = enumerate_line_solutions(line)
    res = combine_solutions(sols)
    for i, dom in enumerate(res):
        assert set(dom.values) == {s[i] for s in sols}


def test_reduce_line_keeps_constraint_and_shrinks():
    line = Line(tuple(CellDomain.full() for _ in range(5)), LineConstraint(2, 3))
    reduced = reduce_line(line)
    assert reduced.constraint == line.constraint
    assert all(not d.contains(3) for d in reduced.cells)
    assert all(d.issubset(CellDomain.full()) for d in reduced.cells)


def test_intersect_axes_combines_row_and_column():
    full = CellDomain.full()
    rows = [Line((full,) * 5, LineConstraint(0, 0)) for _ in range(5)]
    cols = [Line((full,) * 5, LineConstraint(0, 0)) for _ in range(5)]
    rows[1] = rows[1].with_cells([CellDomain.of({0, 1})] * 5)
    cols[2] = cols[2].with_cells([CellDomain.of({1, 2})] * 5)

    cells = intersect_axes(rows, cols)
    assert len(cells) == 25
    assert cells[5 * 1 + 2] == CellDomain.singleton(1)
    assert cells[5 * 1 + 0] == CellDomain.of({0, 1})
    assert cells[5 * 3 + 2] == CellDomain.of({1, 2})
    assert cells[0] == full
