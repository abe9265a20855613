import pytest

from termbrot.colors import iteration_to_char, iteration_to_color
from termbrot.escape import iterate
from termbrot.render import (
    INVERSE, RESET, cell_axes, render, render_frame, status_bar, view_bounds,
)
from termbrot.viewport import Viewport


def ascii_view(**kwargs):
    return Viewport(color_mode=False, **kwargs)


def test_ascii_frame_geometry():
    frame = render_frame(ascii_view(), 10, 5)
    rows = frame.split("\n")
    assert rows[-1] == ""
    assert len(rows[:-1]) == 5
    assert all(len(row) == 10 for row in rows[:-1])


def test_render_appends_single_status_line():
    screen = render(ascii_view(), 10, 5)
    assert screen.count("\n") == 5
    status = screen.split("\n")[-1]
    assert status.startswith(INVERSE) and status.endswith(RESET)
    assert len(status[len(INVERSE):-len(RESET)]) == 10


def test_color_rows_are_closed_with_reset():
    frame = render_frame(Viewport(), 12, 4)
    rows = frame.split("\n")[:-1]
    assert len(rows) == 4
    for row in rows:
        assert row.endswith(RESET)
        assert row.count("\x1b[48;2;") == 12
        assert row.count(" ") == 12


def test_render_is_idempotent():
    for view in (Viewport(), ascii_view(zoom=0.3, max_iter=250)):
        assert render(view, 40, 12) == render(view, 40, 12)


def test_render_does_not_mutate_viewport():
    view = Viewport()
    view.select_preset(4)
    before = Viewport(**vars(view))
    render(view, 20, 6)
    assert view == before


def test_bounds_correct_for_cell_aspect():
    bounds = view_bounds(Viewport(), 80, 20)
    # aspect = 80 / 40 = 2, so the imaginary span is half the real one
    assert bounds.x_min == pytest.approx(-2.0)
    assert bounds.x_max == pytest.approx(0.5)
    assert bounds.y_max - bounds.y_min == pytest.approx(1.25)


def test_center_cell_maps_to_view_center():
    view = Viewport(center_x=0.3, center_y=-0.2, zoom=0.8)
    width, height = 10, 4
    xs, ys = cell_axes(view_bounds(view, width, height), width, height)
    assert xs[width // 2] == pytest.approx(view.center_x)
    assert ys[height // 2] == pytest.approx(view.center_y)
    assert xs[0] == pytest.approx(view.center_x - view.zoom / 2)


def test_default_view_center_cell():
    xs, ys = cell_axes(view_bounds(Viewport(), 10, 4), 10, 4)
    assert xs[5] == pytest.approx(-0.75)
    assert ys[2] == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("width, height", [(0, 0), (-5, 3), (4, -1), (0, 7)])
def test_degenerate_geometry_is_clamped(width, height):
    frame = render_frame(ascii_view(), width, height)
    rows = frame.split("\n")[:-1]
    assert len(rows) == max(1, height)
    assert all(len(row) == max(1, width) for row in rows)
    assert len(status_bar(ascii_view(), width)) == len(INVERSE) + max(1, width) + len(RESET)


def test_ascii_cells_match_scalar_pipeline():
    view = ascii_view(center_x=-0.5, center_y=0.1, zoom=2.0, max_iter=60)
    width, height = 16, 6
    bounds = view_bounds(view, width, height)

    expected = []
    for row in range(height):
        line = ""
        for col in range(width):
            cx = bounds.x_min + (col / width) * (bounds.x_max - bounds.x_min)
            cy = bounds.y_min + (row / height) * (bounds.y_max - bounds.y_min)
            n, _, _ = iterate(cx, cy, view.max_iter)
            line += iteration_to_char(n, view.max_iter)
        expected.append(line + "\n")

    assert render_frame(view, width, height) == "".join(expected)


def test_color_cells_match_scalar_pipeline():
    view = Viewport(center_x=-0.75, center_y=0.0, zoom=3.0, max_iter=80)
    width, height = 8, 3
    bounds = view_bounds(view, width, height)

    row = 1
    cells = ""
    for col in range(width):
        cx = bounds.x_min + (col / width) * (bounds.x_max - bounds.x_min)
        cy = bounds.y_min + (row / height) * (bounds.y_max - bounds.y_min)
        n, zx, zy = iterate(cx, cy, view.max_iter)
        r, g, b = iteration_to_color(n, view.max_iter, zx, zy)
        cells += f"\x1b[48;2;{r};{g};{b}m "

    assert render_frame(view, width, height).split("\n")[row] == cells + RESET


def test_default_status_line():
    assert status_bar(Viewport(), 200) == (
        INVERSE
        + " (-0.750000, 0.000000) z:2.50e+00 i:100 COLOR  q r c +-=[] 1-5 arrows".ljust(200)
        + RESET
    )


def test_status_line_shows_preset_and_mode():
    view = ascii_view()
    view.select_preset(1)
    line = status_bar(view, 120)
    assert "ASCII [Seahorse Valley]" in line
    assert "z:5.00e-02" in line
    assert "i:300" in line


def test_status_line_is_truncated_to_width():
    assert status_bar(Viewport(), 5) == INVERSE + " (-0." + RESET
