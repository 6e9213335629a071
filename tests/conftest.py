"""Fixtures compartidos: tabla IPC controlada y fecha de evaluación fija."""
from datetime import date
from types import MappingProxyType

import pytest


@pytest.fixture
def tabla_controlada():
    return MappingProxyType({
        "2021-01": 0.01,
        "2021-02": 0.02,
        "2021-03": 0.005,
    })


@pytest.fixture
def tasa_tecnica():
    # 0,1 % mensual
    return 0.012


@pytest.fixture
def fecha_calculo():
    return date(2021, 1, 15)
