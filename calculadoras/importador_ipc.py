# Objetivo:
# - Leer la tabla de IPC mensual desde un Excel (.xlsx) o CSV local
# - Mapear columnas por nombre: periodo (Periodo / Fecha) e IPC (IPC / Variación mensual)
# - Entregar un mapeo de solo lectura AAAA-MM -> tasa decimal

import logging
import os
from types import MappingProxyType

import pandas as pd

from . import settings
from .datos_actuariales import IPC_MENSUAL, periodo_clave

logger = logging.getLogger(__name__)

COLUMNAS_PERIODO = ("Periodo", "Fecha", "periodo", "fecha")
COLUMNAS_IPC = ("IPC", "Variación mensual", "Variación mensual del IPC", "ipc")

_tabla_activa = None


def _buscar_columna(df: pd.DataFrame, candidatas) -> str:
    for col in candidatas:
        if col in df.columns:
            return col
    raise ValueError(f"No se encontró ninguna de las columnas {list(candidatas)} en {list(df.columns)}")


def leer_archivo(ruta: str, hoja: str = None) -> pd.DataFrame:
    """Lee el archivo según su extensión (.csv o Excel)."""
    if not os.path.exists(ruta):
        raise FileNotFoundError(f"No existe el archivo de IPC: {ruta}")
    if ruta.lower().endswith(".csv"):
        return pd.read_csv(ruta)
    return pd.read_excel(ruta, sheet_name=hoja or settings.HOJA_TABLA_IPC)


def convertir_tabla_ipc(df: pd.DataFrame, en_porcentaje: bool = False) -> MappingProxyType:
    """
    Convierte un DataFrame con periodo e IPC en la tabla AAAA-MM -> tasa.

    Args:
        df: DataFrame leído del archivo
        en_porcentaje: Si el IPC viene en porcentaje se divide por 100

    Returns:
        Mapeo de solo lectura
    """
    col_periodo = _buscar_columna(df, COLUMNAS_PERIODO)
    col_ipc = _buscar_columna(df, COLUMNAS_IPC)

    tabla = {}
    omitidas = 0
    for _, row in df.iterrows():
        periodo = row.get(col_periodo)
        ipc = row.get(col_ipc)
        if pd.isna(periodo) or pd.isna(ipc):
            omitidas += 1
            continue
        fecha = pd.to_datetime(str(periodo), errors="coerce")
        if pd.isna(fecha):
            logger.warning(f"Periodo no reconocido en tabla IPC: {periodo!r}")
            omitidas += 1
            continue
        try:
            tasa = float(str(ipc).replace(",", "."))
        except ValueError:
            logger.warning(f"Valor IPC no numérico para {periodo}: {ipc!r}")
            omitidas += 1
            continue
        if en_porcentaje:
            tasa = tasa / 100
        tabla[periodo_clave(fecha.date())] = tasa

    logger.info(f"Tabla IPC cargada: {len(tabla)} periodos, {omitidas} filas omitidas")
    return MappingProxyType(dict(sorted(tabla.items())))


def cargar_tabla_ipc(ruta: str, hoja: str = None, en_porcentaje: bool = None) -> MappingProxyType:
    """Lee y convierte la tabla IPC de un archivo local."""
    if en_porcentaje is None:
        en_porcentaje = settings.IPC_EN_PORCENTAJE
    try:
        df = leer_archivo(ruta, hoja)
        return convertir_tabla_ipc(df, en_porcentaje)
    except Exception as e:
        logger.error(f"Error cargando tabla IPC desde {ruta}: {e}")
        raise


def obtener_tabla_ipc():
    """
    Tabla IPC vigente para el proceso.

    Si RUTA_TABLA_IPC está configurada se carga una sola vez desde el
    archivo; si no, se usa la tabla incorporada IPC_MENSUAL.
    """
    global _tabla_activa
    if _tabla_activa is None:
        if settings.RUTA_TABLA_IPC:
            _tabla_activa = cargar_tabla_ipc(settings.RUTA_TABLA_IPC)
        else:
            _tabla_activa = IPC_MENSUAL
    return _tabla_activa
