"""
Cálculo actuarial por omisión de aportes a pensión.

Flujo: semanas faltantes -> base semanal -> monto base -> factor
acumulado (IPC + interés técnico) por cada fecha de pago -> valores a pagar.
"""

import logging
import math
from dataclasses import dataclass, asdict
from datetime import date, datetime

import pandas as pd
from dateutil.relativedelta import relativedelta

from .datos_actuariales import (
    SEMANAS_POR_MES,
    TASA_INTERES_TECNICO,
    calcular_semanas_entre,
    factor_mensual,
    periodo_clave,
    ultimo_dia_mes,
)
from .importador_ipc import obtener_tabla_ipc

logger = logging.getLogger(__name__)

FORMATO_FECHA = "%Y-%m-%d"

ERROR_ORDEN_FECHAS = "La fecha final debe ser posterior a la fecha inicial"
ERROR_SALARIO = "El salario debe ser un número positivo"
ERROR_FECHA_FUTURA = "La fecha inicial no puede ser futura"
ERROR_FECHA_INICIAL_INVALIDA = "La fecha inicial no es válida"
ERROR_FECHA_FINAL_INVALIDA = "La fecha final no es válida"


@dataclass(frozen=True)
class ResultadoCalculo:
    monto_base: float
    semanas_faltantes: int
    base_semanal: float
    fecha_primer_pago: date
    fecha_segundo_pago: date
    valor_primer_pago: float
    valor_segundo_pago: float
    factor_primer_pago: float = 1.0
    factor_segundo_pago: float = 1.0
    tasa_tecnica: float = TASA_INTERES_TECNICO

    def como_dict(self) -> dict:
        return asdict(self)


def inicio_indexacion(fecha_fin_omision: date) -> date:
    # 1 de enero del año siguiente al fin de la omisión
    return date(fecha_fin_omision.year + 1, 1, 1)


def _meses_indexacion(fecha_fin_omision: date, fecha_pago: date):
    fecha_actual = inicio_indexacion(fecha_fin_omision)
    if isinstance(fecha_pago, datetime):
        fecha_pago = fecha_pago.date()
    while fecha_actual <= fecha_pago:
        yield fecha_actual
        fecha_actual += relativedelta(months=1)


def factor_acumulado(fecha_fin_omision: date, fecha_pago: date, tabla=None, tasa_tecnica: float = None) -> float:
    """
    Factor compuesto desde enero del año siguiente a la omisión hasta el
    mes de la fecha de pago (incluido).

    Args:
        fecha_fin_omision: Última fecha del periodo sin aportes
        fecha_pago: Fecha en que se proyecta el pago
        tabla: Tabla IPC AAAA-MM -> tasa (por defecto la tabla vigente)
        tasa_tecnica: Tasa de interés técnico anual

    Returns:
        Factor acumulado; 1.0 si el inicio es posterior a la fecha de pago
    """
    if tabla is None:
        tabla = obtener_tabla_ipc()
    factor = 1.0
    for mes in _meses_indexacion(fecha_fin_omision, fecha_pago):
        f_mes = factor_mensual(periodo_clave(mes), tabla, tasa_tecnica)
        factor *= f_mes
        logger.debug(f"Periodo {periodo_clave(mes)}: factor mes={f_mes:.6f}, acumulado={factor:.6f}")
    return factor


def detalle_factores(fecha_fin_omision: date, fecha_pago: date, tabla=None, tasa_tecnica: float = None) -> pd.DataFrame:
    """Detalle mes a mes de la indexación, para reportes."""
    if tabla is None:
        tabla = obtener_tabla_ipc()
    filas = []
    acumulado = 1.0
    for mes in _meses_indexacion(fecha_fin_omision, fecha_pago):
        clave = periodo_clave(mes)
        f_mes = factor_mensual(clave, tabla, tasa_tecnica)
        acumulado *= f_mes
        filas.append({
            'periodo': clave,
            'ipc': tabla.get(clave) or 0,
            'factor_mensual': f_mes,
            'factor_acumulado': acumulado,
        })
    return pd.DataFrame(filas, columns=['periodo', 'ipc', 'factor_mensual', 'factor_acumulado'])


def fechas_de_pago(fecha_calculo: date) -> tuple:
    """Último día del mes actual y último día del mes siguiente."""
    primer_pago = ultimo_dia_mes(fecha_calculo)
    mes_siguiente = date(fecha_calculo.year, fecha_calculo.month, 1) + relativedelta(months=1)
    segundo_pago = ultimo_dia_mes(mes_siguiente)
    return primer_pago, segundo_pago


def calcular_deuda_actuarial(fecha_inicio: date, fecha_fin: date, salario: float,
                             fecha_calculo: date = None, tabla=None,
                             tasa_tecnica: float = None) -> ResultadoCalculo:
    """
    Calcula el valor del cálculo actuarial para las dos próximas fechas de pago.

    Args:
        fecha_inicio: Inicio del periodo de omisión
        fecha_fin: Fin del periodo de omisión
        salario: Salario mensual devengado
        fecha_calculo: Fecha de evaluación (default: hoy)
        tabla: Tabla IPC a usar (default: tabla vigente del proceso)
        tasa_tecnica: Tasa de interés técnico anual (default: configuración)

    Returns:
        ResultadoCalculo con montos y fechas
    """
    if fecha_calculo is None:
        fecha_calculo = date.today()
    if tasa_tecnica is None:
        tasa_tecnica = TASA_INTERES_TECNICO

    semanas_faltantes = calcular_semanas_entre(fecha_inicio, fecha_fin)
    base_semanal = salario / SEMANAS_POR_MES
    monto_base = semanas_faltantes * base_semanal

    fecha_primer_pago, fecha_segundo_pago = fechas_de_pago(fecha_calculo)

    # Cada fecha de pago se acumula por separado desde el mismo mes inicial
    factor_primer_pago = factor_acumulado(fecha_fin, fecha_primer_pago, tabla, tasa_tecnica)
    factor_segundo_pago = factor_acumulado(fecha_fin, fecha_segundo_pago, tabla, tasa_tecnica)

    resultado = ResultadoCalculo(
        monto_base=monto_base,
        semanas_faltantes=semanas_faltantes,
        base_semanal=base_semanal,
        fecha_primer_pago=fecha_primer_pago,
        fecha_segundo_pago=fecha_segundo_pago,
        valor_primer_pago=monto_base * factor_primer_pago,
        valor_segundo_pago=monto_base * factor_segundo_pago,
        factor_primer_pago=factor_primer_pago,
        factor_segundo_pago=factor_segundo_pago,
        tasa_tecnica=tasa_tecnica,
    )

    logger.info(f"Cálculo actuarial {fecha_inicio} - {fecha_fin}: semanas={semanas_faltantes}, "
                f"base=${monto_base:,.2f}, pago {fecha_primer_pago}=${resultado.valor_primer_pago:,.2f}, "
                f"pago {fecha_segundo_pago}=${resultado.valor_segundo_pago:,.2f}")
    return resultado


def _parsear_fecha(valor):
    if isinstance(valor, date):
        return valor if not isinstance(valor, datetime) else valor.date()
    try:
        return datetime.strptime(str(valor).strip(), FORMATO_FECHA).date()
    except ValueError:
        return None


def validar_entradas_calculo(fecha_inicio: str, fecha_fin: str, salario: str, hoy: date = None) -> list[str]:
    """
    Valida las entradas del formulario y devuelve los mensajes de error.

    No lanza excepciones; una lista vacía indica entradas válidas. La
    obligatoriedad de cada campo la revisa el formulario.
    """
    if hoy is None:
        hoy = date.today()
    errores = []

    inicio = _parsear_fecha(fecha_inicio)
    fin = _parsear_fecha(fecha_fin)
    if inicio is None:
        errores.append(ERROR_FECHA_INICIAL_INVALIDA)
    if fin is None:
        errores.append(ERROR_FECHA_FINAL_INVALIDA)

    if inicio is not None and fin is not None and fin < inicio:
        errores.append(ERROR_ORDEN_FECHAS)

    try:
        salario_num = float(str(salario).strip())
    except ValueError:
        salario_num = math.nan
    if math.isnan(salario_num) or salario_num <= 0:
        errores.append(ERROR_SALARIO)

    if inicio is not None and inicio > hoy:
        errores.append(ERROR_FECHA_FUTURA)

    return errores
