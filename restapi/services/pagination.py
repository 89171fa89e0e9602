"""Conversion des numeros de page (base 1) en index de page du stockage (base 0)."""

from restapi.core.exceptions import InvalidPageRequestError

# Plus grand OFFSET / LIMIT representable par le stockage (entier signe 64 bits)
MAX_STORE_INT = 2**63 - 1


def to_page_index(page_number: int, page_size: int) -> int:
    """
    Convertit un numero de page en index de page.

    Args:
        page_number: Numero de page a partir de 1
        page_size: Taille de page, au moins 1

    Returns:
        L'index de page a partir de 0 (page_number - 1)

    Raises:
        InvalidPageRequestError: Si page_number ou page_size est inferieur a 1,
            ou si la taille ou le decalage depasse un entier 64 bits
    """
    if page_number < 1 or page_size < 1:
        raise InvalidPageRequestError(page_number, page_size)
    if page_size > MAX_STORE_INT or (page_number - 1) * page_size > MAX_STORE_INT:
        raise InvalidPageRequestError(page_number, page_size)
    return page_number - 1
