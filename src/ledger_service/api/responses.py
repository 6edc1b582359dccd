from typing import Any

import simplejson
from fastapi.responses import JSONResponse


class DecimalJSONResponse(JSONResponse):
    """
    JSONResponse that writes Decimal values as exact JSON numbers.

    123.45 stays 123.45 and 50 stays 50; nothing goes through float.
    """

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")
