# display methods, for dev
from math import sqrt

from matplotlib import pyplot

GM = (sqrt(5) - 1.0) / 2.0
W = 8.0
H = W * GM
SIZE = (W, H)


def set_limits(ax, x0, xN, y0, yN):
    ax.set_xlim(x0, xN)
    ax.set_ylim(y0, yN)
    ax.set_aspect("equal")


def plot(polygons=None, points=None, chains=None, show=True):
    if polygons is None: polygons = []
    if points is None: points = []
    if chains is None: chains = []
    fig = pyplot.figure(figsize=SIZE, dpi=90)
    ax = fig.add_subplot(111)

    every_point = [point for polygon in polygons for point in polygon] + list(points)
    if every_point:
        xmin = min(point.x for point in every_point)
        xmax = max(point.x for point in every_point)
        ymin = min(point.y for point in every_point)
        ymax = max(point.y for point in every_point)
        set_limits(ax, xmin - 0.2 * (xmax - xmin), xmax + 0.2 * (xmax - xmin), ymin - 0.2 * (ymax - ymin),
                   ymax + 0.2 * (ymax - ymin))

    for polygon in polygons:
        xs, ys = polygon.xy
        ax.fill(xs, ys, alpha=0.5)
        # close the outline
        ax.plot(xs + xs[:1], ys + ys[:1], '-')

    for chain in chains:
        ax.plot([point.x for point in chain], [point.y for point in chain], '-', color='lime', linewidth=3)

    for point in points:
        ax.plot(*point.xy, 'o')

    if show:
        pyplot.show()
    return fig


def plot_result(result, show=True):
    return plot([result.first, result.second], chains=result.chains(), show=show)
