import numpy as np
import pandas as pd
import pytest

from furnace_simulation import DerivedResult, InvalidParameter, compute, format_result, round_result, sweep
from furnace_simulation.report import electrode_table, result_table
from furnace_simulation.sweep import SWEEPABLE_PARAMETERS, linear_values


@pytest.fixture
def result():
    return DerivedResult(
        electrode_volume=5.890486225480862,
        average_distance=41.49612345,
        resulting_voltage=146659.876543,
        total_power=11950452.04321,
    )


class TestReport:
    def test_format_result(self, result):
        assert format_result(result) == {
            "electrode_volume": "5.890486",
            "average_distance": "41.50",
            "resulting_voltage": "146659.88",
            "total_power": "11950452.0",
        }

    def test_round_result(self, result):
        rounded = round_result(result)
        assert rounded["electrode_volume"] == 5.890486
        assert rounded["average_distance"] == 41.5
        assert rounded["total_power"] == 11950452.0

    def test_fallback_distance_formatting(self, dimensions, electric_params):
        shown = format_result(compute(dimensions, [], electric_params))
        assert shown["average_distance"] == "1.00"
        assert shown["total_power"] == "0.0"

    def test_result_table(self, result):
        table = result_table(result)
        assert "Resulting voltage U0" in table
        assert "146659.88" in table

    def test_electrode_table(self, baseline):
        table = electrode_table(baseline.electrodes)
        assert table.count("0.981748") == 6
        assert "-24.00" in table


class TestSweep:
    def test_linear_values(self):
        values = linear_values(100.0, 0.4, 5)
        np.testing.assert_allclose(values, [60.0, 80.0, 100.0, 120.0, 140.0])

    def test_linear_values_needs_two_points(self):
        with pytest.raises(InvalidParameter):
            linear_values(100.0, 0.4, 1)

    def test_power_sweep(self, baseline):
        df = sweep(baseline, "initial_power", [100_000.0, 200_000.0, 400_000.0])

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == [
            "initial_power",
            "electrode_volume",
            "average_distance",
            "resulting_voltage",
            "total_power",
        ]
        assert len(df) == 3
        voltage = df["resulting_voltage"].to_numpy()
        assert voltage[1] == pytest.approx(2 * voltage[0])
        assert voltage[2] == pytest.approx(2 * voltage[1])

    def test_sweep_matches_single_run(self, baseline):
        df = sweep(baseline, "resistivity", [0.3])
        direct = compute(baseline.dimensions, baseline.electrodes, baseline.electric_params)
        assert df.loc[0, "total_power"] == pytest.approx(direct.total_power)

    def test_sweep_leaves_configuration_alone(self, baseline):
        sweep(baseline, "length", [10.0, 20.0])
        assert baseline.dimensions.length == 71.0

    @pytest.mark.parametrize("parameter", sorted(SWEEPABLE_PARAMETERS))
    def test_every_parameter_is_sweepable(self, baseline, parameter):
        df = sweep(baseline, parameter, [1.0, 2.0])
        assert list(df[parameter]) == [1.0, 2.0]

    def test_unknown_parameter(self, baseline):
        with pytest.raises(InvalidParameter):
            sweep(baseline, "groups", [1, 2])

    def test_zero_voltage_in_sweep(self, baseline):
        with pytest.raises(InvalidParameter):
            sweep(baseline, "initial_voltage", [0.0])
