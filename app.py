"""passall -- Streamlit web interface."""

import streamlit as st

from passall import (
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
    CipherConfig,
    GenerationOptions,
    WordCase,
    caesar_cipher,
    generate_cipher_password,
    generate_password,
)

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f511",
    layout="centered",
)

st.title("\U0001f511 Password Generator")
st.caption(
    "Random characters, optionally built around a dictionary word "
    "or a Caesar-shifted phrase."
)

# ── Options ───────────────────────────────────────────────────────────────

length = st.slider("Length", MIN_LENGTH, MAX_LENGTH, DEFAULT_LENGTH)

col1, col2 = st.columns(2)
with col1:
    use_lower = st.checkbox("Lowercase", value=True)
    use_upper = st.checkbox("Uppercase", value=True)
    use_numbers = st.checkbox("Numbers", value=True)
    use_symbols = st.checkbox("Symbols", value=True)
with col2:
    use_caesar = st.toggle("Caesar cipher cryptography")
    use_word = st.checkbox("Include word", value=False, disabled=use_caesar)
    word_case = st.radio(
        "Word case",
        [c.value for c in WordCase],
        horizontal=True,
        disabled=use_caesar or not use_word,
    )

if use_caesar:
    phrase = st.text_input("Phrase", placeholder="Text to encode…")
    shift = st.slider("Shift", 1, 25, 3)

options = GenerationOptions(
    lower=use_lower,
    upper=use_upper,
    numbers=use_numbers,
    symbols=use_symbols,
    word=use_word and not use_caesar,
)

# ── Generate ──────────────────────────────────────────────────────────────

if st.button("Generate password", type="primary"):
    if use_caesar:
        config = CipherConfig(phrase, shift)
        pwd = generate_cipher_password(length, config, options)
    else:
        with st.spinner("Fetching a word…" if options.word else "Generating…"):
            pwd = generate_password(length, options, word_case)

    if pwd:
        st.code(pwd, language=None)
    else:
        st.warning("Enable at least one character class or a word.", icon="⚠️")

    if use_caesar:
        st.markdown(f"**Caesar cipher** &nbsp;·&nbsp; shift {shift}")
        st.text(f"Plain:  {phrase}\nCipher: {caesar_cipher(phrase, shift)}")
