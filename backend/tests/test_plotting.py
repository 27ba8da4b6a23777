from gdp_graph.config.settings import settings
from gdp_graph.utils.plotting import build_gdp_figure, plot_gdp


def test_figure_has_one_bar_trace(two_quarters):
    fig = build_gdp_figure(two_quarters)
    assert len(fig.data) == 1
    bar = fig.data[0]
    assert bar.type == "bar"
    assert list(bar.y) == [50.0, 75.0]
    assert list(bar.customdata[1]) == ["2015 Q2", "$75 Billion"]


def test_value_axis_starts_at_zero(two_quarters):
    fig = build_gdp_figure(two_quarters)
    assert tuple(fig.layout.yaxis.range) == (0, 75.0)
    assert fig.layout.yaxis.title.text == settings.Y_AXIS_LABEL
    assert fig.layout.bargap == 0


def test_plot_gdp_writes_html(two_quarters, tmp_path):
    path = tmp_path / "gdp.html"
    plot_gdp(two_quarters, output_path=str(path))
    assert path.exists()
    assert "2015 Q2" in path.read_text(encoding="utf-8")
