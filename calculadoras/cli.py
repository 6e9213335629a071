# CLI con argparse para los cálculos
# - actuarial --desde 2020-01-01 --hasta 2020-03-01 --salario 1000000 [--pdf out/calculo.pdf] [--excel out/calculo.xlsx]
# - liquidacion --salario 1300000 --auxilio 162000 --dias 360 [--pdf out/liquidacion.pdf]
import argparse
import logging
import sys
from datetime import datetime

from . import settings
from .calculo_actuarial import calcular_deuda_actuarial, validar_entradas_calculo
from .datos_actuariales import formatear_moneda
from .exportar import generar_excel_actuarial, generar_pdf_actuarial, generar_pdf_liquidacion
from .liquidacion_laboral import LiquidacionTrabajo, parsear_entero

CONCEPTOS_LIQUIDACION = {
    'cesantias': "Cesantías",
    'intereses_cesantias': "Intereses a las cesantías",
    'prima_servicios': "Prima de servicios",
    'vacaciones': "Vacaciones",
    'total': "TOTAL LIQUIDACIÓN",
}


def _fecha(valor: str):
    return datetime.strptime(valor.strip(), "%Y-%m-%d").date()


def construir_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("calculadoras", description="Cálculo actuarial y liquidación laboral")
    sub = parser.add_subparsers(dest="cmd", required=True)

    # actuarial
    p_act = sub.add_parser("actuarial", help="Cálculo actuarial por omisión de aportes")
    p_act.add_argument("--desde", required=True)       # YYYY-MM-DD
    p_act.add_argument("--hasta", required=True)       # YYYY-MM-DD
    p_act.add_argument("--salario", required=True)
    p_act.add_argument("--fecha-calculo", type=_fecha)  # default: hoy
    p_act.add_argument("--pdf")
    p_act.add_argument("--excel")

    # liquidacion
    p_liq = sub.add_parser("liquidacion", help="Liquidación de prestaciones sociales")
    p_liq.add_argument("--salario", required=True)
    p_liq.add_argument("--auxilio", default="0")
    p_liq.add_argument("--dias", required=True, type=int)
    p_liq.add_argument("--pdf")
    return parser


def _ejecutar_actuarial(args) -> int:
    hoy = args.fecha_calculo
    errores = validar_entradas_calculo(args.desde, args.hasta, args.salario, hoy=hoy)
    if errores:
        for error in errores:
            print(f"Error: {error}", file=sys.stderr)
        return 2

    desde, hasta, salario = _fecha(args.desde), _fecha(args.hasta), float(args.salario)
    resultado = calcular_deuda_actuarial(desde, hasta, salario, fecha_calculo=hoy)

    print(f"Semanas faltantes: {resultado.semanas_faltantes}")
    print(f"Base semanal:      {formatear_moneda(resultado.base_semanal)}")
    print(f"Monto base:        {formatear_moneda(resultado.monto_base)}")
    print(f"Pago al {resultado.fecha_primer_pago.strftime('%d/%m/%Y')}: {formatear_moneda(resultado.valor_primer_pago)}")
    print(f"Pago al {resultado.fecha_segundo_pago.strftime('%d/%m/%Y')}: {formatear_moneda(resultado.valor_segundo_pago)}")

    if args.pdf:
        generar_pdf_actuarial(resultado, {'fecha_inicio': desde, 'fecha_fin': hasta, 'salario': salario}, ruta=args.pdf)
    if args.excel:
        generar_excel_actuarial(resultado, hasta, ruta=args.excel)
    return 0


def _ejecutar_liquidacion(args) -> int:
    liquidacion = LiquidacionTrabajo(parsear_entero(args.salario), parsear_entero(args.auxilio), args.dias)
    resultado = liquidacion.obtener_resultados()

    valores = resultado.como_dict()
    for campo, etiqueta in CONCEPTOS_LIQUIDACION.items():
        print(f"{etiqueta + ':':<27}{formatear_moneda(valores[campo])}")

    if args.pdf:
        generar_pdf_liquidacion(resultado, ruta=args.pdf)
    return 0


def main(argv=None) -> int:
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = construir_parser().parse_args(argv)

    if args.cmd == "actuarial":
        return _ejecutar_actuarial(args)
    elif args.cmd == "liquidacion":
        return _ejecutar_liquidacion(args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
