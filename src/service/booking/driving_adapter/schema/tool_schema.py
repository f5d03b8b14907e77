from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptionResponse(BaseModel):
    name: str
    description: str
    input_schema: Dict[str, Any] = Field(alias='inputSchema')

    model_config = ConfigDict(populate_by_name=True)


class ToolContentPart(BaseModel):
    type: Literal['text'] = 'text'
    text: str


class ToolCallResponse(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'content': [{'type': 'text', 'text': '{"error": "Flight \\"ZZ999\\" not found"}'}],
                'isError': True,
            }
        },
    )

    content: List[ToolContentPart]
    is_error: Optional[bool] = Field(default=None, alias='isError')
