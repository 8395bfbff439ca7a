import math

from matplotlib.figure import Figure

from requiredreturn.charting import COLORS, build_figure, plot_model, required_return_axis_limit
from requiredreturn.computation import evaluate
from requiredreturn.validation import ReturnInputs


def test_plot_model_draws_bars_and_line(scenario_a):
    model = evaluate(scenario_a).model
    fig = Figure()
    ax = fig.add_subplot(111)
    ax_rr = plot_model(ax, model)

    # dividend and investment containers, one bar per year
    assert len(ax.containers) == 2
    assert all(len(c) == 11 for c in ax.containers)
    assert ax.containers[1][0].get_height() == -54.56

    lines = ax_rr.get_lines()
    assert len(lines) == 1
    assert list(lines[0].get_ydata()) == [model.required_return_percent] * 11
    assert lines[0].get_color() == COLORS["required_return"]
    assert ax_rr.get_ylim() == (0.0, 20.0)
    assert ax.get_xlabel() == "Years"
    assert ax_rr.get_ylabel() == "Required Return"


def test_axis_limit():
    model = evaluate(ReturnInputs(100, 2, 3)).model
    assert required_return_axis_limit(model) == math.ceil(model.required_return_percent * 1.2)


def test_build_figure_saves(tmp_path, scenario_a):
    fig = build_figure(evaluate(scenario_a).model)
    out = tmp_path / "chart.png"
    fig.savefig(out)
    assert out.exists()
    assert out.stat().st_size > 0
