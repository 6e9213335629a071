"""
Exportación de resultados a PDF (reportlab) y Excel (openpyxl)
"""
import io
import logging
import os
from datetime import datetime

import openpyxl
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill
from openpyxl.utils import get_column_letter
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from .calculo_actuarial import detalle_factores
from .datos_actuariales import formatear_moneda

logger = logging.getLogger(__name__)


# --- Utilidades: número a letras (es-CO) ---
def numero_a_letras(n: int) -> str:
    """Convierte un número entero a texto en español."""
    unidades = (
        "cero", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve",
        "diez", "once", "doce", "trece", "catorce", "quince", "dieciséis", "diecisiete", "dieciocho", "diecinueve",
        "veinte", "veintiuno", "veintidós", "veintitrés", "veinticuatro", "veinticinco", "veintiséis", "veintisiete", "veintiocho", "veintinueve"
    )
    decenas = ("", "diez", "veinte", "treinta", "cuarenta", "cincuenta", "sesenta", "setenta", "ochenta", "noventa")
    centenas = ("", "cien", "doscientos", "trescientos", "cuatrocientos", "quinientos", "seiscientos", "setecientos", "ochocientos", "novecientos")

    def _decenas(num):
        if num < 30:
            return unidades[num]
        d, u = divmod(num, 10)
        if u == 0:
            return decenas[d]
        return f"{decenas[d]} y {unidades[u]}"

    def _centenas(num):
        if num < 100:
            return _decenas(num)
        c, r = divmod(num, 100)
        if c == 1:
            return "cien" if r == 0 else f"ciento {_decenas(r)}"
        return centenas[c] if r == 0 else f"{centenas[c]} {_decenas(r)}"

    def _miles(num):
        m, r = divmod(num, 1000)
        partes = []
        if m == 1:
            partes.append("mil")
        elif m > 1:
            partes.append(f"{_centenas(m)} mil")
        if r:
            partes.append(_centenas(r))
        return " ".join(partes)

    if n == 0:
        return "cero"
    if n < 0:
        return "menos " + numero_a_letras(-n)

    millones, resto = divmod(n, 1_000_000)
    partes = []
    if millones == 1:
        partes.append("un millón")
    elif millones > 1:
        partes.append(f"{numero_a_letras(millones)} millones")
    if resto:
        partes.append(_miles(resto))
    # "uno" se apocopa delante de mil/millones
    texto = " ".join(partes)
    texto = texto.replace("veintiuno mil", "veintiún mil")
    return texto.replace("uno mil", "un mil")


def _escribir(contenido: bytes, ruta: str = None) -> bytes:
    if ruta:
        directorio = os.path.dirname(ruta)
        if directorio:
            os.makedirs(directorio, exist_ok=True)
        with open(ruta, "wb") as f:
            f.write(contenido)
        logger.info(f"Archivo generado: {ruta}")
    return contenido


def _estilos():
    styles = getSampleStyleSheet()
    titulo_style = ParagraphStyle('TituloOficial', parent=styles['Heading1'], fontSize=14,
                                  alignment=TA_CENTER, spaceAfter=6, fontName='Helvetica-Bold')
    subtitulo_style = ParagraphStyle('SubtituloOficial', parent=styles['Normal'], fontSize=10,
                                     alignment=TA_CENTER, spaceAfter=12, fontName='Helvetica')
    letras_style = ParagraphStyle('ValorLetras', parent=styles['Normal'], fontSize=9,
                                  fontName='Helvetica-Bold')
    return titulo_style, subtitulo_style, letras_style


def _tabla_resumen(filas):
    tabla = Table(filas, colWidths=[3.2*inch, 3.2*inch])
    tabla.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), colors.lightgrey),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.black),
        ('ALIGN', (0, 0), (0, -1), 'LEFT'),
        ('ALIGN', (1, 1), (1, -1), 'RIGHT'),
        ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.Color(0.97, 0.97, 0.97)]),
        ('TOPPADDING', (0, 0), (-1, -1), 4),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
    ]))
    return tabla


def generar_pdf_actuarial(resultado, datos: dict = None, ruta: str = None) -> bytes:
    """
    PDF con el resumen del cálculo actuarial.

    Args:
        resultado: ResultadoCalculo
        datos: Datos del formulario a mostrar (documentos, periodo, salario)
        ruta: Si se indica, además se guarda el archivo

    Returns:
        Bytes del PDF
    """
    datos = datos or {}
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=letter, rightMargin=0.75*inch, leftMargin=0.75*inch,
                            topMargin=0.75*inch, bottomMargin=0.75*inch)
    titulo_style, subtitulo_style, letras_style = _estilos()

    story = [
        Paragraph("SIMULACIÓN DE CÁLCULO ACTUARIAL", titulo_style),
        Paragraph(f"Generado el {datetime.now().strftime('%d/%m/%Y')}", subtitulo_style),
    ]

    etiquetas = [
        ('aportante', 'Aportante'),
        ('trabajador', 'Trabajador'),
        ('fecha_inicio', 'Fecha inicial de omisión'),
        ('fecha_fin', 'Fecha final de omisión'),
        ('salario', 'Salario devengado'),
    ]
    filas_datos = [['DATO', 'VALOR']]
    for clave, etiqueta in etiquetas:
        if datos.get(clave) is None:
            continue
        valor = datos[clave]
        if clave == 'salario':
            valor = formatear_moneda(valor)
        filas_datos.append([etiqueta, str(valor)])
    if len(filas_datos) > 1:
        story.append(_tabla_resumen(filas_datos))
        story.append(Spacer(1, 12))

    filas = [
        ['CONCEPTO', 'VALOR'],
        ['Semanas faltantes', str(resultado.semanas_faltantes)],
        ['Base semanal', formatear_moneda(resultado.base_semanal)],
        ['Monto base', formatear_moneda(resultado.monto_base)],
        [f"Pago al {resultado.fecha_primer_pago.strftime('%d/%m/%Y')}", formatear_moneda(resultado.valor_primer_pago)],
        [f"Pago al {resultado.fecha_segundo_pago.strftime('%d/%m/%Y')}", formatear_moneda(resultado.valor_segundo_pago)],
    ]
    story.append(_tabla_resumen(filas))
    story.append(Spacer(1, 12))

    valor_letras = numero_a_letras(int(round(resultado.valor_primer_pago))).upper()
    story.append(Paragraph(f"VALOR EN LETRAS (PRIMER PAGO): {valor_letras} PESOS M/CTE.", letras_style))

    doc.build(story)
    return _escribir(buffer.getvalue(), ruta)


def generar_pdf_liquidacion(resultado, ruta: str = None) -> bytes:
    """PDF con el resultado de la liquidación laboral."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=letter, rightMargin=0.75*inch, leftMargin=0.75*inch,
                            topMargin=0.75*inch, bottomMargin=0.75*inch)
    titulo_style, subtitulo_style, letras_style = _estilos()

    filas = [
        ['CONCEPTO', 'VALOR'],
        ['Salario base', formatear_moneda(resultado.salario_base)],
    ]
    if resultado.auxilio_transporte > 0:
        filas.append(['Auxilio de transporte', formatear_moneda(resultado.auxilio_transporte)])
    filas += [
        ['Días trabajados', str(resultado.dias_trabajados)],
        ['Cesantías', formatear_moneda(resultado.cesantias)],
        ['Intereses a las cesantías', formatear_moneda(resultado.intereses_cesantias)],
        ['Prima de servicios', formatear_moneda(resultado.prima_servicios)],
        ['Vacaciones', formatear_moneda(resultado.vacaciones)],
        ['TOTAL LIQUIDACIÓN', formatear_moneda(resultado.total)],
    ]
    tabla = _tabla_resumen(filas)
    tabla.setStyle(TableStyle([
        ('BACKGROUND', (0, -1), (-1, -1), colors.lightgrey),
        ('FONTNAME', (0, -1), (-1, -1), 'Helvetica-Bold'),
    ]))

    story = [
        Paragraph("LIQUIDACIÓN DE PRESTACIONES SOCIALES", titulo_style),
        Paragraph(f"Generado el {datetime.now().strftime('%d/%m/%Y')}", subtitulo_style),
        tabla,
        Spacer(1, 12),
        Paragraph(f"VALOR EN LETRAS: {numero_a_letras(int(round(resultado.total))).upper()} PESOS M/CTE.", letras_style),
    ]
    doc.build(story)
    return _escribir(buffer.getvalue(), ruta)


def generar_excel_actuarial(resultado, fecha_fin_omision, tabla=None, ruta: str = None,
                            tasa_tecnica: float = None) -> bytes:
    """
    Libro Excel con el resumen y el detalle mensual de la indexación
    hasta la segunda fecha de pago.

    El detalle usa la tasa técnica del resultado salvo que se indique otra.
    """
    if tasa_tecnica is None:
        tasa_tecnica = resultado.tasa_tecnica
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "RESUMEN"

    font_title = Font(name='Arial', size=12, bold=True)
    font_header = Font(name='Arial', size=10, bold=True)
    font_normal = Font(name='Arial', size=9)
    align_center = Alignment(horizontal='center', vertical='center')
    align_right = Alignment(horizontal='right', vertical='center')
    border_thin = Border(left=Side(style='thin'), right=Side(style='thin'),
                         top=Side(style='thin'), bottom=Side(style='thin'))
    fill_header = PatternFill(start_color="D9E1F2", end_color="D9E1F2", fill_type="solid")
    formato_pesos = '"$"#,##0'

    ws.merge_cells('A1:B1')
    ws['A1'] = "SIMULACIÓN DE CÁLCULO ACTUARIAL"
    ws['A1'].font = font_title
    ws['A1'].alignment = align_center

    filas = [
        ("Semanas faltantes", resultado.semanas_faltantes, None),
        ("Base semanal", resultado.base_semanal, formato_pesos),
        ("Monto base", resultado.monto_base, formato_pesos),
        ("Fecha primer pago", resultado.fecha_primer_pago, 'DD/MM/YYYY'),
        ("Factor primer pago", resultado.factor_primer_pago, '0.000000'),
        ("Valor primer pago", resultado.valor_primer_pago, formato_pesos),
        ("Fecha segundo pago", resultado.fecha_segundo_pago, 'DD/MM/YYYY'),
        ("Factor segundo pago", resultado.factor_segundo_pago, '0.000000'),
        ("Valor segundo pago", resultado.valor_segundo_pago, formato_pesos),
    ]
    for row, (etiqueta, valor, formato) in enumerate(filas, start=3):
        ws[f'A{row}'] = etiqueta
        ws[f'A{row}'].font = font_header
        ws[f'A{row}'].border = border_thin
        ws[f'B{row}'] = valor
        ws[f'B{row}'].font = font_normal
        ws[f'B{row}'].alignment = align_right
        ws[f'B{row}'].border = border_thin
        if formato:
            ws[f'B{row}'].number_format = formato
    ws.column_dimensions['A'].width = 24
    ws.column_dimensions['B'].width = 20

    detalle = detalle_factores(fecha_fin_omision, resultado.fecha_segundo_pago, tabla, tasa_tecnica)
    ws_det = wb.create_sheet("INDEXACION")
    encabezados = ["PERIODO", "IPC", "FACTOR MENSUAL", "FACTOR ACUMULADO"]
    for col, encabezado in enumerate(encabezados, 1):
        cell = ws_det[f'{get_column_letter(col)}1']
        cell.value = encabezado
        cell.font = font_header
        cell.fill = fill_header
        cell.border = border_thin
        cell.alignment = align_center
    for row, fila in enumerate(detalle.itertuples(index=False), start=2):
        valores = (fila.periodo, fila.ipc, fila.factor_mensual, fila.factor_acumulado)
        formatos = (None, '0.0000%', '0.000000', '0.000000')
        for col, (valor, formato) in enumerate(zip(valores, formatos), 1):
            cell = ws_det[f'{get_column_letter(col)}{row}']
            cell.value = valor
            cell.font = font_normal
            cell.border = border_thin
            if formato:
                cell.number_format = formato
    for col in range(1, len(encabezados) + 1):
        ws_det.column_dimensions[get_column_letter(col)].width = 18

    buffer = io.BytesIO()
    wb.save(buffer)
    logger.info(f"Excel actuarial generado con {len(detalle)} periodos de indexación")
    return _escribir(buffer.getvalue(), ruta)
