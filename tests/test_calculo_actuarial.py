from datetime import date

import pytest

from calculadoras.calculo_actuarial import (
    ERROR_FECHA_FINAL_INVALIDA,
    ERROR_FECHA_FUTURA,
    ERROR_FECHA_INICIAL_INVALIDA,
    ERROR_ORDEN_FECHAS,
    ERROR_SALARIO,
    ResultadoCalculo,
    calcular_deuda_actuarial,
    detalle_factores,
    factor_acumulado,
    fechas_de_pago,
    inicio_indexacion,
    validar_entradas_calculo,
)


# --- Fechas de pago ---

def test_fechas_de_pago_mes_actual_y_siguiente():
    assert fechas_de_pago(date(2024, 1, 31)) == (date(2024, 1, 31), date(2024, 2, 29))


def test_fechas_de_pago_en_diciembre_pasan_al_anio_siguiente():
    assert fechas_de_pago(date(2024, 12, 10)) == (date(2024, 12, 31), date(2025, 1, 31))


def test_inicio_indexacion_es_enero_del_anio_siguiente():
    assert inicio_indexacion(date(2020, 3, 1)) == date(2021, 1, 1)
    assert inicio_indexacion(date(2020, 12, 31)) == date(2021, 1, 1)


# --- Factor acumulado ---

def test_factor_acumulado_incluye_mes_de_la_fecha_de_pago(tabla_controlada, tasa_tecnica):
    factor = factor_acumulado(date(2020, 6, 30), date(2021, 2, 28), tabla_controlada, tasa_tecnica)
    assert factor == pytest.approx(1.011 * 1.021)


def test_factor_acumulado_primer_dia_del_mes_ya_cuenta(tabla_controlada, tasa_tecnica):
    factor = factor_acumulado(date(2020, 6, 30), date(2021, 2, 1), tabla_controlada, tasa_tecnica)
    assert factor == pytest.approx(1.011 * 1.021)


def test_factor_acumulado_es_uno_si_el_inicio_es_posterior(tabla_controlada, tasa_tecnica):
    assert factor_acumulado(date(2021, 1, 10), date(2021, 12, 31), tabla_controlada, tasa_tecnica) == 1.0


def test_factor_acumulado_meses_sin_ipc_solo_aplican_interes_tecnico(tasa_tecnica):
    factor = factor_acumulado(date(2019, 5, 1), date(2020, 3, 31), {}, tasa_tecnica)
    assert factor == pytest.approx(1.001 ** 3)


def test_detalle_factores_coincide_con_factor_acumulado(tabla_controlada, tasa_tecnica):
    detalle = detalle_factores(date(2020, 6, 30), date(2021, 3, 31), tabla_controlada, tasa_tecnica)
    assert list(detalle['periodo']) == ["2021-01", "2021-02", "2021-03"]
    assert list(detalle['ipc']) == [0.01, 0.02, 0.005]
    esperado = factor_acumulado(date(2020, 6, 30), date(2021, 3, 31), tabla_controlada, tasa_tecnica)
    assert detalle['factor_acumulado'].iloc[-1] == pytest.approx(esperado)


def test_detalle_factores_vacio_conserva_columnas(tabla_controlada):
    detalle = detalle_factores(date(2024, 5, 10), date(2024, 7, 31), tabla_controlada)
    assert detalle.empty
    assert list(detalle.columns) == ['periodo', 'ipc', 'factor_mensual', 'factor_acumulado']


# --- Cálculo completo ---

def test_escenario_enero_a_marzo_2020(tabla_controlada, tasa_tecnica, fecha_calculo):
    resultado = calcular_deuda_actuarial(
        date(2020, 1, 1), date(2020, 3, 1), 1000000,
        fecha_calculo=fecha_calculo, tabla=tabla_controlada, tasa_tecnica=tasa_tecnica,
    )
    assert isinstance(resultado, ResultadoCalculo)
    assert resultado.semanas_faltantes == 8
    assert resultado.base_semanal == pytest.approx(230947.0, abs=1)
    assert resultado.monto_base == pytest.approx(1847577.3, rel=1e-5)
    assert resultado.monto_base == pytest.approx(8 * 1000000 / 4.33)
    assert resultado.fecha_primer_pago == date(2021, 1, 31)
    assert resultado.fecha_segundo_pago == date(2021, 2, 28)
    assert resultado.factor_primer_pago == pytest.approx(1.011)
    assert resultado.factor_segundo_pago == pytest.approx(1.011 * 1.021)
    assert resultado.valor_primer_pago == pytest.approx(resultado.monto_base * 1.011)
    assert resultado.valor_segundo_pago == pytest.approx(resultado.monto_base * 1.011 * 1.021)


def test_sin_indexacion_los_pagos_igualan_el_monto_base(tabla_controlada, tasa_tecnica):
    resultado = calcular_deuda_actuarial(
        date(2024, 1, 1), date(2024, 5, 10), 1300000,
        fecha_calculo=date(2024, 6, 15), tabla=tabla_controlada, tasa_tecnica=tasa_tecnica,
    )
    assert resultado.factor_primer_pago == 1.0
    assert resultado.factor_segundo_pago == 1.0
    assert resultado.valor_primer_pago == resultado.monto_base
    assert resultado.valor_segundo_pago == resultado.monto_base


@pytest.mark.parametrize("inicio, fin, salario", [
    (date(2003, 1, 1), date(2003, 1, 1), 332000),
    (date(2010, 2, 1), date(2012, 8, 15), 515000),
    (date(2019, 12, 31), date(2020, 1, 6), 1.0),
])
def test_propiedades_de_entradas_validas(inicio, fin, salario, tabla_controlada, tasa_tecnica):
    resultado = calcular_deuda_actuarial(
        inicio, fin, salario, fecha_calculo=date(2021, 2, 10), tabla=tabla_controlada, tasa_tecnica=tasa_tecnica,
    )
    assert resultado.semanas_faltantes >= 0
    assert resultado.monto_base >= 0
    assert resultado.factor_segundo_pago >= resultado.factor_primer_pago
    assert resultado.valor_segundo_pago >= resultado.valor_primer_pago


def test_cada_pago_se_acumula_desde_el_mismo_mes(tabla_controlada, tasa_tecnica, fecha_calculo):
    resultado = calcular_deuda_actuarial(
        date(2020, 1, 1), date(2020, 3, 1), 1000000,
        fecha_calculo=fecha_calculo, tabla=tabla_controlada, tasa_tecnica=tasa_tecnica,
    )
    assert resultado.factor_segundo_pago / resultado.factor_primer_pago == pytest.approx(1.021)


def test_resultado_es_inmutable(tabla_controlada, fecha_calculo):
    resultado = calcular_deuda_actuarial(date(2020, 1, 1), date(2020, 3, 1), 1000000,
                                         fecha_calculo=fecha_calculo, tabla=tabla_controlada)
    with pytest.raises(AttributeError):
        resultado.monto_base = 0
    assert resultado.como_dict()['semanas_faltantes'] == 8


def test_salario_nan_se_propaga_sin_excepcion(tabla_controlada, fecha_calculo):
    resultado = calcular_deuda_actuarial(date(2020, 1, 1), date(2020, 3, 1), float("nan"),
                                         fecha_calculo=fecha_calculo, tabla=tabla_controlada)
    assert resultado.valor_primer_pago != resultado.valor_primer_pago


# --- Validación ---

HOY = date(2024, 6, 15)


def test_validacion_entradas_correctas():
    assert validar_entradas_calculo("2020-01-01", "2020-06-01", "1000000", hoy=HOY) == []


def test_validacion_entradas_correctas_con_fecha_de_hoy():
    assert validar_entradas_calculo("2020-01-01", "2020-06-01", "1000000") == []


def test_validacion_fecha_final_anterior():
    errores = validar_entradas_calculo("2020-06-01", "2020-01-01", "1000000", hoy=HOY)
    assert errores == [ERROR_ORDEN_FECHAS]


@pytest.mark.parametrize("salario", ["-100", "abc", "0", "", "nan"])
def test_validacion_salario_invalido(salario):
    errores = validar_entradas_calculo("2020-01-01", "2020-06-01", salario, hoy=HOY)
    assert errores == [ERROR_SALARIO]


def test_validacion_fecha_inicial_futura():
    errores = validar_entradas_calculo("2030-01-01", "2030-02-01", "1000000", hoy=HOY)
    assert ERROR_FECHA_FUTURA in errores


def test_validacion_fecha_inicial_hoy_no_es_futura():
    assert validar_entradas_calculo("2024-06-15", "2024-06-15", "1000000", hoy=HOY) == []


def test_validacion_fechas_no_validas_omiten_comparaciones():
    errores = validar_entradas_calculo("2020-13-01", "no-fecha", "1000000", hoy=HOY)
    assert errores == [ERROR_FECHA_INICIAL_INVALIDA, ERROR_FECHA_FINAL_INVALIDA]


def test_validacion_acumula_varios_errores():
    errores = validar_entradas_calculo("2030-06-01", "2030-01-01", "abc", hoy=HOY)
    assert errores == [ERROR_ORDEN_FECHAS, ERROR_SALARIO, ERROR_FECHA_FUTURA]
