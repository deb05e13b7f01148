import pytest

from nodalcfd.parameters import InputParameters2D, PlotMeta

EXAMPLE = """
########################################
Title: "Test Case"
CFL: 1.
FluxType: Lax
InitType: IVortex # Can be "Freestream"
PolynomialOrder: 1
FinalTime: 4
########################################
"""


def test_parse_example_file():
    ip = InputParameters2D.parse(EXAMPLE.encode())
    assert ip.title == "Test Case"
    assert ip.cfl == 1.0
    assert ip.flux_type == "Lax"
    assert ip.init_type == "IVortex"
    assert ip.polynomial_order == 1
    assert ip.final_time == 4.0


def test_parse_empty_keeps_defaults():
    assert InputParameters2D.parse("") == InputParameters2D()


def test_parse_case_insensitive_and_tag_alias():
    ip = InputParameters2D.parse("cfl: 0.5\nLocalTimeStep: true\nmaxiterations: 7\n")
    assert ip.cfl == 0.5
    assert ip.local_time_stepping is True
    assert ip.max_iterations == 7


def test_parse_bcs():
    text = "BCs:\n  Inflow:\n    1:\n      P: 2\n      T: 0.5\n"
    ip = InputParameters2D.parse(text)
    assert ip.bcs == {"Inflow": {1: {"P": 2.0, "T": 0.5}}}


def test_parse_wrong_type_raises():
    with pytest.raises(ValueError):
        InputParameters2D.parse("CFL: fast\n")
    with pytest.raises(ValueError):
        InputParameters2D.parse("PolynomialOrder: 1.5\n")


def test_parse_non_mapping_raises():
    with pytest.raises(ValueError):
        InputParameters2D.parse("- a\n- b\n")


def test_describe_contains_fields_and_sorted_bcs():
    ip = InputParameters2D.parse(EXAMPLE + "BCs:\n  Wall:\n    2: {}\n  Inflow:\n    1:\n      P: 2\n")
    text = ip.describe()
    assert '"Test Case"\t\t= Title' in text
    assert "[Lax]\t\t\t= Flux Type" in text
    assert "[1]\t\t\t\t= Polynomial Order" in text
    assert text.index("BCs[Inflow]") < text.index("BCs[Wall]")
    assert "BCs[Inflow] = map[1:map[P:2]]" in text


def test_plot_meta_defaults_have_no_forced_limits():
    pm = PlotMeta(plot=True, field=3)
    assert pm.field_min is None and pm.field_max is None
    assert pm.field == 3