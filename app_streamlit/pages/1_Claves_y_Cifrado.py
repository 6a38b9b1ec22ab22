# --------------------------------------------------------------
# File: 1_Claves_y_Cifrado.py
# Description: Formulario de generación de claves, cifrado y descifrado RSA-OAEP.
# --------------------------------------------------------------

import logging

import streamlit as st

from api.services import decrypt_text, describe_budget, encrypt_text, generate_keys
from core.config import DEFAULT_KEY_SIZE, KEY_SIZE_CHOICES, LOG_LEVEL
from core.crypto_rsa import RsaOaepService

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@st.cache_resource
def _get_service() -> RsaOaepService:
    """Instancia compartida del servicio (sin estado propio)."""
    return RsaOaepService()


service = _get_service()

# Las claves y resultados viven solo en la sesión del navegador.
for key in ("public_key_pem", "private_key_pem", "ciphertext", "decrypted"):
    st.session_state.setdefault(key, "")

st.title("🔐 Claves y cifrado")

# Selección del tamaño de clave y generación del par.
col_size, col_btn = st.columns([2, 1])
with col_size:
    index = KEY_SIZE_CHOICES.index(DEFAULT_KEY_SIZE) if DEFAULT_KEY_SIZE in KEY_SIZE_CHOICES else 0
    key_size = st.selectbox(
        "Tamaño de clave (bits)",
        KEY_SIZE_CHOICES,
        index=index,
        help="Cuanto mayor es la clave, más segura es y más tarda en generarse.",
    )
with col_btn:
    st.write("")
    if st.button("Generar claves", key="btn_generate"):
        with st.spinner("Generando par de claves..."):
            ok, msg, key_pair = generate_keys(int(key_size), service=service)
        if ok:
            st.session_state["public_key_pem"] = key_pair.public_key_pem
            st.session_state["private_key_pem"] = key_pair.private_key_pem
            st.success(msg)
        else:
            st.error(msg)

col_pub, col_priv = st.columns(2)

# Columna de cifrado con la clave pública.
with col_pub:
    public_key_pem = st.text_area("Clave pública RSA", key="public_key_pem", height=220)
    if public_key_pem.strip():
        with st.expander("Copiar clave pública"):
            st.code(public_key_pem, language=None)
    plaintext = st.text_area("Texto a cifrar", key="plaintext")
    budget_hint = describe_budget(public_key_pem, service=service)
    if budget_hint:
        st.caption(f"{budget_hint} Actual: {len(plaintext.encode('utf-8', errors='replace'))} bytes.")

    if st.button("Cifrar", key="btn_encrypt"):
        ok, msg, ciphertext = encrypt_text(public_key_pem, plaintext, service=service)
        if ok:
            st.session_state["ciphertext"] = ciphertext
            st.success(msg)
        else:
            st.error(msg)

    st.markdown("**Texto cifrado**")
    # st.code incluye el botón de copiar al portapapeles.
    st.code(st.session_state["ciphertext"] or " ", language=None)

# Columna de descifrado con la clave privada.
with col_priv:
    private_key_pem = st.text_area("Clave privada RSA", key="private_key_pem", height=220)
    ciphertext_in = st.text_area("Texto a descifrar", key="ciphertext_in")

    if st.button("Descifrar", key="btn_decrypt"):
        ok, msg, decrypted = decrypt_text(private_key_pem, ciphertext_in, service=service)
        if ok:
            st.session_state["decrypted"] = decrypted
            st.success(msg)
        else:
            st.error(msg)

    st.markdown("**Texto descifrado**")
    st.code(st.session_state["decrypted"] or " ", language=None)
