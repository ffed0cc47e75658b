import os

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from tagcloud.model.geometry_primitives import Point
from tagcloud.model.layouter import CircularCloudLayouter
from tagcloud.view.renderer import render_rectangles


@pytest.fixture
def center() -> Point:
    return Point(500, 500)


@pytest.fixture
def layouter(center: Point) -> CircularCloudLayouter:
    return CircularCloudLayouter(center)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, "rep_" + report.when, report)


@pytest.fixture(autouse=True)
def save_cloud_on_failure(request, tmp_path_factory):
    """Save a picture of the layout when a test that used `layouter` fails."""
    cloud = request.getfixturevalue("layouter") if "layouter" in request.fixturenames else None
    yield
    report = getattr(request.node, "rep_call", None)
    if cloud is None or report is None or not report.failed:
        return

    directory = tmp_path_factory.mktemp("failed_clouds")
    path = os.path.join(str(directory), f"{request.node.name}.png")
    fig = render_rectangles(cloud.rectangles, path, center=cloud.center, title=request.node.nodeid)
    plt.close(fig)
    print(f"Tag cloud visualization saved to file <{path}>")
