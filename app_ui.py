import streamlit as st
from datetime import date

from calculadoras.calculo_actuarial import calcular_deuda_actuarial
from calculadoras.datos_actuariales import formatear_moneda
from calculadoras.exportar import generar_excel_actuarial, generar_pdf_actuarial, generar_pdf_liquidacion
from calculadoras.formulario import errores_formulario
from calculadoras.liquidacion_laboral import LiquidacionTrabajo, parsear_entero

st.set_page_config(page_title="Calculadoras", page_icon="🧮", layout="centered")

# --- Estilos institucionales ---
st.markdown("""
    <style>
    .stButton > button, .stFormSubmitButton > button {background-color: #FF6A00; color: #fff; font-weight: bold; border-radius: 20px;}
    .stButton > button:hover, .stFormSubmitButton > button:hover {background-color: #FF8533; color: #fff;}
    </style>
""", unsafe_allow_html=True)

TIPOS_DOCUMENTO = {
    "": "Seleccione...",
    "cc": "Cédula de Ciudadanía",
    "ce": "Cédula de Extranjería",
    "nit": "NIT",
    "pp": "Pasaporte",
}
GENEROS = {"": "Seleccione...", "M": "Masculino", "F": "Femenino"}

# --- Menú lateral principal ---
st.sidebar.title("Menú")
menu = st.sidebar.radio(
    "Calculadoras",
    ("📊 Cálculo Actuarial", "💼 Liquidación Laboral"),
    index=0,
    key="menu_principal",
)


if menu == "📊 Cálculo Actuarial":
    st.title("Simulador de Cálculo Actuarial")

    with st.form(key="form_actuarial"):
        st.subheader("Datos del aportante")
        col1, col2 = st.columns(2)
        aportante_tipo = col1.selectbox("Tipo de documento", list(TIPOS_DOCUMENTO), format_func=TIPOS_DOCUMENTO.get, key="aportante_tipo")
        aportante_numero = col2.text_input("Número de documento", key="aportante_numero")

        st.subheader("Datos del trabajador")
        col1, col2 = st.columns(2)
        trabajador_tipo = col1.selectbox("Tipo de documento", list(TIPOS_DOCUMENTO), format_func=TIPOS_DOCUMENTO.get, key="trabajador_tipo")
        trabajador_numero = col2.text_input("Número de documento", key="trabajador_numero")
        genero = col1.selectbox("Género", list(GENEROS), format_func=GENEROS.get, key="genero")
        fecha_nacimiento = col2.date_input("Fecha de nacimiento", value=None, min_value=date(1930, 1, 1), key="fecha_nacimiento")
        semanas_previas = st.text_input("Semanas cotizadas previamente", key="semanas_previas")

        st.subheader("Periodo de omisión")
        col1, col2 = st.columns(2)
        fecha_inicio = col1.date_input("Fecha inicial", value=None, min_value=date(1967, 1, 1), key="fecha_inicio")
        fecha_fin = col2.date_input("Fecha final", value=None, min_value=date(1967, 1, 1), key="fecha_fin")
        salario = st.text_input("Salario devengado", placeholder="Ej: 1300000", key="salario")

        enviar = st.form_submit_button("🧮 Calcular")

    if enviar:
        formulario = {
            'aportante_tipo': aportante_tipo,
            'aportante_numero': aportante_numero.strip(),
            'trabajador_tipo': trabajador_tipo,
            'trabajador_numero': trabajador_numero.strip(),
            'genero': genero,
            'fecha_nacimiento': fecha_nacimiento,
            'semanas_previas': semanas_previas.strip(),
            'fecha_inicio': fecha_inicio,
            'fecha_fin': fecha_fin,
            'salario': salario.strip(),
        }
        errores = errores_formulario(formulario)

        if errores:
            for error in errores:
                st.error(f"⚠️ {error}")
        else:
            resultado = calcular_deuda_actuarial(fecha_inicio, fecha_fin, float(salario))
            st.session_state['resultado_actuarial'] = resultado
            st.session_state['datos_actuarial'] = {
                'aportante': f"{TIPOS_DOCUMENTO[aportante_tipo]} {aportante_numero}",
                'trabajador': f"{TIPOS_DOCUMENTO[trabajador_tipo]} {trabajador_numero}",
                'fecha_inicio': fecha_inicio,
                'fecha_fin': fecha_fin,
                'salario': float(salario),
            }

    resultado = st.session_state.get('resultado_actuarial')
    if resultado is not None:
        datos = st.session_state['datos_actuarial']
        st.subheader("Resultado del cálculo")
        col1, col2, col3 = st.columns(3)
        col1.metric("Semanas faltantes", f"{resultado.semanas_faltantes:,}".replace(",", "."))
        col2.metric("Base semanal", formatear_moneda(resultado.base_semanal))
        col3.metric("Monto base", formatear_moneda(resultado.monto_base))

        col1, col2 = st.columns(2)
        col1.metric(f"Pago al {resultado.fecha_primer_pago.strftime('%d/%m/%Y')}", formatear_moneda(resultado.valor_primer_pago))
        col2.metric(f"Pago al {resultado.fecha_segundo_pago.strftime('%d/%m/%Y')}", formatear_moneda(resultado.valor_segundo_pago))
        st.caption("Valores estimados con IPC mensual e interés técnico del 3,5 % anual.")

        col1, col2 = st.columns(2)
        col1.download_button(
            "📄 Descargar PDF",
            data=generar_pdf_actuarial(resultado, datos),
            file_name="calculo_actuarial.pdf",
            mime="application/pdf",
        )
        col2.download_button(
            "📊 Descargar Excel",
            data=generar_excel_actuarial(resultado, datos['fecha_fin']),
            file_name="calculo_actuarial.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )

elif menu == "💼 Liquidación Laboral":
    st.title("Liquidación Laboral")
    st.subheader("Datos de la liquidación")

    col1, col2 = st.columns(2)
    salario_base = col1.text_input("Salario base mensual", placeholder="Ingrese el salario base", key="liq_salario")
    auxilio_transporte = col2.text_input("Auxilio de transporte", placeholder="Ingrese el auxilio de transporte", key="liq_auxilio")
    dias_trabajados = st.number_input("Días trabajados", min_value=0, step=1, key="liq_dias")

    if st.button("🧮 Calcular", key="liq_calcular"):
        liquidacion = LiquidacionTrabajo(parsear_entero(salario_base), parsear_entero(auxilio_transporte), int(dias_trabajados))
        st.session_state['resultado_liquidacion'] = liquidacion.obtener_resultados()

    resultado = st.session_state.get('resultado_liquidacion')
    if resultado is not None:
        st.subheader("Resultado de la liquidación")
        st.write(f"Salario base: **{formatear_moneda(resultado.salario_base)}**")
        if resultado.auxilio_transporte > 0:
            st.write(f"Auxilio de transporte: **{formatear_moneda(resultado.auxilio_transporte)}**")
        st.write(f"Días trabajados: **{resultado.dias_trabajados}**")

        st.table({
            "Concepto": ["Cesantías", "Intereses a las cesantías", "Prima de servicios", "Vacaciones", "TOTAL LIQUIDACIÓN"],
            "Valor": [
                formatear_moneda(resultado.cesantias),
                formatear_moneda(resultado.intereses_cesantias),
                formatear_moneda(resultado.prima_servicios),
                formatear_moneda(resultado.vacaciones),
                formatear_moneda(resultado.total),
            ],
        })
        st.download_button(
            "📄 Descargar PDF",
            data=generar_pdf_liquidacion(resultado),
            file_name="liquidacion_laboral.pdf",
            mime="application/pdf",
        )
