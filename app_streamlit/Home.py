# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import logging

import streamlit as st

from core.config import HASH_ALGORITHM, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="RSA-OAEP Lab", page_icon="🔑", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔑 RSA-OAEP Lab")
st.write(
    f"Genera pares de claves RSA, cifra con la clave pública y descifra con la privada "
    f"usando RSA-OAEP/{HASH_ALGORITHM}. Las claves se muestran en PEM y nunca se guardan."
)
st.info("Ve a **Claves y Cifrado** para empezar.")
