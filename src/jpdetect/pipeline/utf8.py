"""Stage 4: UTF-8 bit-pattern validation.

Only the lead/continuation bit structure is checked.  Overlong forms and
surrogates pass; the round-trip stage is the strict UTF-8 check.
"""


def is_utf8_structure(data: bytes) -> bool:
    """Return True if every byte fits the UTF-8 lead/continuation layout.

    Lead bytes ``0xxxxxxx``, ``110xxxxx``, ``1110xxxx`` and ``11110xxx``
    announce 0 to 3 continuation bytes, each of which must be ``10xxxxxx``.
    A sequence cut off by the end of *data* is invalid.

    :param data: The raw byte data to examine.
    """
    pending = 0
    for byte in data:
        if pending > 0:
            if byte & 0xC0 != 0x80:
                return False
            pending -= 1
        elif byte & 0x80 == 0x00:
            continue
        elif byte & 0xE0 == 0xC0:
            pending = 1
        elif byte & 0xF0 == 0xE0:
            pending = 2
        elif byte & 0xF8 == 0xF0:
            pending = 3
        else:
            return False
    return pending == 0
