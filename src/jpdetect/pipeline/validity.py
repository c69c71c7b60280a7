"""Stage 2: Round-trip validation.

A candidate survives only if decoding the data and encoding the text again
gives back the same bytes.  Plain decodability is not enough: UTF-8 text with
emoji can decode under Shift_JIS, but saving it back would corrupt the file.
"""

from jpdetect.registry import EncodingInfo


def filter_by_round_trip(
    data: bytes, candidates: tuple[EncodingInfo, ...]
) -> tuple[EncodingInfo, ...]:
    """Filter candidates to those that reproduce *data* exactly.

    :param data: The raw byte data to test.
    :param candidates: Encoding candidates to validate.
    :returns: The subset of *candidates* whose decode/encode cycle is lossless.
    """
    valid = []
    for enc in candidates:
        text = enc.try_decode(data)
        if text is None:
            continue
        try:
            encoded = enc.encode(text)
        except UnicodeEncodeError:
            continue
        if encoded == data:
            valid.append(enc)
    return tuple(valid)
