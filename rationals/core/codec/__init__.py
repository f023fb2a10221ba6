"""
Codecs: textual form and interchange (JSON-like) representation.
"""

from rationals.core.codec.text import (
    NEGATIVE_INFINITY_TOKEN,
    POSITIVE_INFINITY_TOKEN,
    format_value,
    parse_value,
)
from rationals.core.codec.interchange import (
    export_json,
    export_value,
    import_json,
    import_value,
)

__all__ = [
    "POSITIVE_INFINITY_TOKEN",
    "NEGATIVE_INFINITY_TOKEN",
    "format_value",
    "parse_value",
    "export_value",
    "export_json",
    "import_value",
    "import_json",
]
