import pytest

from furnace_simulation import ElectricParameters, FurnaceDimensions, default_configuration


@pytest.fixture
def dimensions():
    return FurnaceDimensions(length=71.0, height=121.0, resistivity=0.3)


@pytest.fixture
def electric_params():
    return ElectricParameters(groups=7, initial_voltage=100.0, initial_power=200_000.0)


@pytest.fixture
def baseline():
    return default_configuration()
