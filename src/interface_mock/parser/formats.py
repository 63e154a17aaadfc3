"""String-format inference for string-typed fields.

Formats are sniffed from keywords in the field name and its declared type.
Rules are checked in order and the first match wins, so ``companyId`` is a
company rather than a uuid.
"""

from interface_mock.parser.base import StringFormat

FORMAT_RULES: list[tuple[StringFormat, tuple[str, ...]]] = [
    ("email", ("email",)),
    ("url", ("url", "uri")),
    ("phone", ("phone",)),
    ("name", ("name",)),
    ("address", ("address",)),
    ("company", ("company",)),
    # "id" is broad: "video" and "guide" also land here.
    ("uuid", ("uuid", "id")),
]


def infer_string_format(text: str) -> StringFormat | None:
    """Return the first format whose keyword occurs in ``text``, or None."""
    lowered = text.lower()
    for fmt, keywords in FORMAT_RULES:
        if any(keyword in lowered for keyword in keywords):
            return fmt
    return None
