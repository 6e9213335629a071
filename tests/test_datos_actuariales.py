from datetime import date, datetime

import pytest

from calculadoras.datos_actuariales import (
    IPC_MENSUAL,
    SALARIO_MINIMO_HISTORICO,
    calcular_semanas_entre,
    factor_mensual,
    formatear_moneda,
    periodo_clave,
    ultimo_dia_mes,
)


def test_ultimo_dia_mes_en_febrero_bisiesto():
    assert ultimo_dia_mes(date(2024, 2, 15)) == date(2024, 2, 29)


def test_ultimo_dia_mes_en_febrero_no_bisiesto():
    assert ultimo_dia_mes(date(2023, 2, 1)) == date(2023, 2, 28)


def test_ultimo_dia_mes_en_diciembre_cruza_el_anio():
    assert ultimo_dia_mes(date(2023, 12, 5)) == date(2023, 12, 31)


def test_semanas_ejemplo_de_59_dias():
    assert calcular_semanas_entre(date(2020, 1, 1), date(2020, 3, 1)) == 8


def test_semanas_misma_fecha_es_cero():
    assert calcular_semanas_entre(date(2020, 5, 5), date(2020, 5, 5)) == 0


def test_semanas_orden_invertido_usa_valor_absoluto():
    assert calcular_semanas_entre(date(2020, 3, 1), date(2020, 1, 1)) == 8


def test_semanas_con_fraccion_de_dia_redondea_dias_hacia_arriba():
    inicio = datetime(2020, 1, 1, 0, 0)
    fin = datetime(2020, 1, 7, 12, 0)  # 6,5 días -> 7 días
    assert calcular_semanas_entre(inicio, fin) == 1


def test_semanas_no_decrecen_al_ampliar_el_periodo():
    inicio = date(2019, 1, 1)
    anteriores = 0
    for dias in range(0, 400, 3):
        fin = date.fromordinal(inicio.toordinal() + dias)
        semanas = calcular_semanas_entre(inicio, fin)
        assert semanas >= anteriores
        anteriores = semanas


def test_periodo_clave_rellena_mes():
    assert periodo_clave(date(2025, 4, 30)) == "2025-04"


def test_factor_mensual_suma_ipc_e_interes_tecnico():
    tabla = {"2021-01": 0.01}
    assert factor_mensual("2021-01", tabla, 0.012) == pytest.approx(1.011)


def test_factor_mensual_periodo_sin_dato_usa_cero():
    assert factor_mensual("1999-01", {}, 0.012) == pytest.approx(1.001)


def test_factor_mensual_con_tabla_incorporada():
    assert factor_mensual("2025-04", tasa_tecnica=0.0) == pytest.approx(1 + IPC_MENSUAL["2025-04"])


@pytest.mark.parametrize("monto, esperado", [
    (1847577.3, "$ 1.847.577"),
    (0, "$ 0"),
    (999.5, "$ 1.000"),
    (1000000, "$ 1.000.000"),
    (-1234.4, "-$ 1.234"),
    (-0.4, "$ 0"),
])
def test_formatear_moneda_pesos_colombianos(monto, esperado):
    assert formatear_moneda(monto) == esperado


def test_formatear_moneda_nan():
    assert formatear_moneda(float("nan")) == "$ NaN"


def test_tabla_salario_minimo_es_de_solo_lectura():
    assert SALARIO_MINIMO_HISTORICO[2022] == 1000000
    with pytest.raises(TypeError):
        SALARIO_MINIMO_HISTORICO[2026] = 1
