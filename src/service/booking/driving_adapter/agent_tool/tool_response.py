"""
Tool Response

Every tool answers with a list of content parts whose text is JSON. Errors
carry ``isError: true``; successful responses omit the flag.
"""

from typing import Any

import attrs
import orjson


@attrs.frozen
class ToolResponse:
    text: str
    is_error: bool = False

    @property
    def data(self) -> Any:
        return orjson.loads(self.text)

    def to_dict(self) -> dict[str, Any]:
        response: dict[str, Any] = {'content': [{'type': 'text', 'text': self.text}]}
        if self.is_error:
            response['isError'] = True
        return response

    @classmethod
    def ok(cls, data: Any) -> 'ToolResponse':
        return cls(text=_dumps(data))

    @classmethod
    def error(cls, message: str, **detail: Any) -> 'ToolResponse':
        return cls(text=_dumps({'error': message, **detail}), is_error=True)


def _dumps(data: Any) -> str:
    return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode()
