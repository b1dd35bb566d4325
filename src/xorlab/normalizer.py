import unicodedata


def strip_accents(text: str) -> str:
    """Decompose (NFD) and drop everything outside ASCII, combining marks included."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if ord(ch) < 128)


def normalize(text: str) -> str:
    """
    Canonicalize text before encryption.

    Accented Latin letters lose their marks, anything that is not an ASCII
    letter or digit is dropped, and the rest is uppercased. "Café!" -> "CAFE".
    """
    ascii_only = strip_accents(text)
    return "".join(ch for ch in ascii_only if ch.isalnum()).upper()
