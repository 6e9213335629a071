from dotenv import load_dotenv
import os

load_dotenv()

# Tasa de interés técnico anual (se divide en 12 para el factor mensual)
TASA_INTERES_TECNICO = float(os.getenv("TASA_INTERES_TECNICO", "0.035"))
# Semanas promedio por mes usadas para la base semanal
SEMANAS_POR_MES = float(os.getenv("SEMANAS_POR_MES", "4.33"))

# Tabla IPC mensual opcional (Excel o CSV local). Vacío = tabla incorporada
RUTA_TABLA_IPC = os.getenv("RUTA_TABLA_IPC", "")
HOJA_TABLA_IPC = os.getenv("HOJA_TABLA_IPC", "IPC")
# True si la columna IPC del archivo viene en porcentaje (0.45 = 0,45 %)
IPC_EN_PORCENTAJE = os.getenv("IPC_EN_PORCENTAJE", "false").lower() in ("1", "true", "si", "sí")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
