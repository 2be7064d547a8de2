import matplotlib
import pytest

matplotlib.use('Agg')

from matplotlib import pyplot

from polypuzzle.display import plot, plot_result
from polypuzzle.matcher import MatchResult
from polypuzzle.shapes.geometry import Point, Polygon

L_SHAPE = Polygon.from_xy([(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)])
UNIT_SQUARE = Polygon.from_xy([(1, 1), (2, 1), (2, 2), (1, 2)])


def test_plot_result():
    fig = plot_result(MatchResult(L_SHAPE, UNIT_SQUARE, 2.0), show=False)
    ax = fig.axes[0]
    # two closed outlines and one boundary run
    assert len(ax.lines) == 3
    assert ax.get_xlim() == pytest.approx((-0.4, 2.4))
    pyplot.close(fig)


def test_plot_points_only():
    fig = plot(points=[Point(0, 0), Point(1, 1)], show=False)
    assert len(fig.axes[0].lines) == 2
    pyplot.close(fig)


def test_plot_nothing():
    fig = plot(show=False)
    assert len(fig.axes) == 1
    pyplot.close(fig)
