import pytest

from ascii_wireframe.canvas import CURSOR_HOME, FrameBuffer


def test_new_buffer_is_blank():
    buf = FrameBuffer(6, 3)
    assert buf.marked_cells() == []
    assert list(buf.rows()) == ["      "] * 3


def test_plot_marks_cell_row_major():
    buf = FrameBuffer(6, 3)
    assert buf.plot(4, 1) is True
    assert buf.cells[1 * 6 + 4] == '.'
    assert buf.is_marked(4, 1)
    assert buf.marked_cells() == [(4, 1)]


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (6, 0), (0, 3), (100, 100)])
def test_out_of_range_plot_is_dropped(x, y):
    buf = FrameBuffer(6, 3)
    assert buf.plot(x, y) is False
    assert buf.marked_cells() == []
    assert len(buf.cells) == 18


def test_clear_resets_every_cell():
    buf = FrameBuffer(4, 4, mark='#')
    for i in range(4):
        buf.plot(i, i)
    buf.clear()
    assert buf.marked_cells() == []
    assert set(buf.cells) == {' '}


def test_to_text_rows_are_newline_terminated():
    buf = FrameBuffer(3, 2)
    buf.plot(0, 0)
    buf.plot(2, 1)
    assert buf.to_text() == ".  \n  .\n"
    assert buf.to_text(home=True) == CURSOR_HOME + ".  \n  .\n"


def test_get_outside_raises():
    buf = FrameBuffer(3, 2)
    with pytest.raises(IndexError):
        buf.get(3, 0)


def test_rejects_bad_construction():
    with pytest.raises(ValueError):
        FrameBuffer(0, 5)
    with pytest.raises(ValueError):
        FrameBuffer(5, 5, mark='ab')


def test_equality_compares_cells():
    a = FrameBuffer(3, 3)
    b = FrameBuffer(3, 3)
    a.plot(1, 1)
    b.plot(1, 1)
    assert a == b
    b.plot(0, 0)
    assert a != b
    assert a != FrameBuffer(3, 4)
