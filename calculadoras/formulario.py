# Revisión del formulario de cálculo actuarial: campos obligatorios más
# la validación de fechas y salario, en una sola lista de mensajes

from datetime import date

from .calculo_actuarial import (
    ERROR_FECHA_FINAL_INVALIDA,
    ERROR_FECHA_INICIAL_INVALIDA,
    validar_entradas_calculo,
)

MENSAJES_OBLIGATORIOS = {
    'aportante_tipo': 'Seleccione el tipo de documento',
    'aportante_numero': 'Ingrese el número de documento',
    'trabajador_tipo': 'Seleccione el tipo de documento',
    'trabajador_numero': 'Ingrese el número de documento',
    'genero': 'Seleccione el género',
    'fecha_nacimiento': 'Ingrese la fecha de nacimiento',
    'semanas_previas': 'Ingrese las semanas cotizadas',
    'fecha_inicio': 'Ingrese la fecha de inicio',
    'fecha_fin': 'Ingrese la fecha final',
    'salario': 'Ingrese el salario',
}


def campos_obligatorios(formulario: dict) -> dict:
    """Mensajes por campo vacío del formulario actuarial."""
    return {campo: msg for campo, msg in MENSAJES_OBLIGATORIOS.items() if formulario.get(campo) in (None, "")}


def _como_texto(valor) -> str:
    if isinstance(valor, date):
        return valor.isoformat()
    return valor or ""


def errores_formulario(formulario: dict, hoy: date = None) -> list[str]:
    """
    Todos los errores del formulario: primero los campos vacíos y luego
    los de fechas y salario. Una fecha vacía ya se reporta como
    obligatoria, así que no se repite como fecha no válida.
    """
    errores = list(campos_obligatorios(formulario).values())
    validacion = validar_entradas_calculo(
        _como_texto(formulario.get('fecha_inicio')),
        _como_texto(formulario.get('fecha_fin')),
        formulario.get('salario') or "",
        hoy=hoy,
    )
    if formulario.get('fecha_inicio') in (None, ""):
        validacion = [e for e in validacion if e != ERROR_FECHA_INICIAL_INVALIDA]
    if formulario.get('fecha_fin') in (None, ""):
        validacion = [e for e in validacion if e != ERROR_FECHA_FINAL_INVALIDA]
    return errores + validacion
