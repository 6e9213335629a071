# Datos estáticos y utilidades del cálculo actuarial por omisión de aportes
# - Salario mínimo histórico (referencia, no interviene en el cálculo)
# - IPC mensual por periodo AAAA-MM
# - Tasa de interés técnico y semanas promedio por mes

import math
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType

from dateutil.relativedelta import relativedelta

from . import settings

# Salario mínimo legal mensual vigente en Colombia (2003-2025)
SALARIO_MINIMO_HISTORICO = MappingProxyType({
    2003: 332000,
    2004: 358000,
    2005: 381500,
    2006: 408000,
    2007: 433700,
    2008: 461500,
    2009: 496900,
    2010: 515000,
    2011: 535600,
    2012: 566700,
    2013: 589500,
    2014: 616000,
    2015: 644350,
    2016: 689455,
    2017: 737717,
    2018: 781242,
    2019: 828116,
    2020: 877803,
    2021: 908526,
    2022: 1000000,
    2023: 1160000,
    2024: 1300000,
    2025: 1300000,  # mismo valor de 2024 mientras se publica el decreto
})

# IPC mensual (fracción decimal). Se reemplaza con RUTA_TABLA_IPC
IPC_MENSUAL = MappingProxyType({
    "2003-01": 0.008,
    "2003-02": 0.007,
    "2025-04": 0.006,
    "2025-05": 0.006,
})

TASA_INTERES_TECNICO = settings.TASA_INTERES_TECNICO
SEMANAS_POR_MES = settings.SEMANAS_POR_MES


def periodo_clave(fecha: date) -> str:
    """Clave AAAA-MM de la tabla IPC."""
    return f"{fecha.year}-{fecha.month:02d}"


def ultimo_dia_mes(fecha: date) -> date:
    """
    Último día calendario del mes de la fecha.

    Se calcula como el primer día del mes siguiente menos un día,
    así febrero de año bisiesto queda en 29.
    """
    primer_dia = date(fecha.year, fecha.month, 1)
    return primer_dia + relativedelta(months=1) - relativedelta(days=1)


def calcular_semanas_entre(fecha_inicio, fecha_fin) -> int:
    """
    Semanas completas entre dos fechas (en cualquier orden).

    Los días se redondean hacia arriba y luego se divide por 7 truncando.
    """
    if isinstance(fecha_inicio, datetime) != isinstance(fecha_fin, datetime):
        # Mezcla de date y datetime: se compara a medianoche
        if not isinstance(fecha_inicio, datetime):
            fecha_inicio = datetime(fecha_inicio.year, fecha_inicio.month, fecha_inicio.day)
        if not isinstance(fecha_fin, datetime):
            fecha_fin = datetime(fecha_fin.year, fecha_fin.month, fecha_fin.day)
    segundos = abs((fecha_fin - fecha_inicio).total_seconds())
    dias = math.ceil(segundos / 86400)
    return dias // 7


def factor_mensual(periodo: str, tabla=None, tasa_tecnica: float = None) -> float:
    """
    Factor de un mes: 1 + IPC del mes + interés técnico mensual.

    Args:
        periodo: Clave AAAA-MM
        tabla: Tabla IPC a usar (por defecto IPC_MENSUAL)
        tasa_tecnica: Tasa anual (por defecto TASA_INTERES_TECNICO)

    Returns:
        Factor multiplicativo del mes
    """
    if tabla is None:
        tabla = IPC_MENSUAL
    if tasa_tecnica is None:
        tasa_tecnica = TASA_INTERES_TECNICO
    ipc = tabla.get(periodo) or 0
    return 1 + ipc + (tasa_tecnica / 12)


def formatear_moneda(monto) -> str:
    """Pesos colombianos sin decimales y con punto de miles, ej: $ 1.847.577"""
    monto = float(monto)
    if math.isnan(monto):
        return "$ NaN"
    if math.isinf(monto):
        return f"{'-' if monto < 0 else ''}$ ∞"
    redondeado = int(Decimal(str(abs(monto))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    signo = "-" if monto < 0 and redondeado != 0 else ""
    return f"{signo}$ {redondeado:,}".replace(",", ".")
