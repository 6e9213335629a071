# Liquidación de prestaciones sociales: cesantías, intereses a las
# cesantías, prima de servicios y vacaciones sobre año de 360 días

import logging
import re
from dataclasses import dataclass, asdict

logger = logging.getLogger(__name__)

TASA_INTERESES_CESANTIAS = 0.12
DIAS_ANIO = 360


@dataclass(frozen=True)
class ResultadoLiquidacion:
    salario_base: float
    auxilio_transporte: float
    dias_trabajados: int
    cesantias: float
    intereses_cesantias: float
    prima_servicios: float
    vacaciones: float
    total: float

    def como_dict(self) -> dict:
        return asdict(self)


def parsear_entero(valor) -> int:
    """Convierte '1.300.000' o '$ 1.300.000' en 1300000; vacío -> 0."""
    digitos = re.sub(r"\D", "", str(valor or ""))
    return int(digitos) if digitos else 0


class LiquidacionTrabajo:
    """
    Liquidación de un contrato laboral.

    El auxilio de transporte se conserva para mostrarlo pero no se suma
    a ninguna prestación.
    """

    def __init__(self, salario_base: float, auxilio_transporte: float, dias_trabajados: int):
        self.salario_base = salario_base
        self.auxilio_transporte = auxilio_transporte
        self.dias_trabajados = dias_trabajados

    def calcular_cesantias(self) -> float:
        return (self.salario_base * self.dias_trabajados) / DIAS_ANIO

    def calcular_intereses_cesantias(self) -> float:
        cesantias = self.calcular_cesantias()
        return (cesantias * self.dias_trabajados * TASA_INTERESES_CESANTIAS) / DIAS_ANIO

    def calcular_prima_servicios(self) -> float:
        return (self.salario_base * self.dias_trabajados) / DIAS_ANIO

    def calcular_vacaciones(self) -> float:
        return (self.salario_base * self.dias_trabajados) / (DIAS_ANIO * 2)

    def calcular_total_liquidacion(self) -> float:
        return (self.calcular_cesantias()
                + self.calcular_intereses_cesantias()
                + self.calcular_prima_servicios()
                + self.calcular_vacaciones())

    def obtener_resultados(self) -> ResultadoLiquidacion:
        resultado = ResultadoLiquidacion(
            salario_base=self.salario_base,
            auxilio_transporte=self.auxilio_transporte,
            dias_trabajados=self.dias_trabajados,
            cesantias=self.calcular_cesantias(),
            intereses_cesantias=self.calcular_intereses_cesantias(),
            prima_servicios=self.calcular_prima_servicios(),
            vacaciones=self.calcular_vacaciones(),
            total=self.calcular_total_liquidacion(),
        )
        logger.info(f"Liquidación laboral: salario=${self.salario_base:,.0f}, días={self.dias_trabajados}, "
                    f"total=${resultado.total:,.2f}")
        return resultado
