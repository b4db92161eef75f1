"""공통 타입 정의 — camelCase 직렬화 베이스 모델."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON 계약이 camelCase인 모델의 베이스.

    파이썬 코드에서는 snake_case 필드명, 직렬화(by_alias)는 camelCase.
    FastAPI 응답은 기본적으로 by_alias=True로 직렬화된다.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
