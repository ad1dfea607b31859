from pydantic import BaseModel, Field


# Тело запроса для создания/замены пользователя.
# Проверяется только тип полей: отсутствующее поле становится пустой строкой,
# "id" из тела игнорируется.
class UserPayload(BaseModel):
    name: str = Field(
        "", description="Имя пользователя", examples=["Dave"]
    )
    email: str = Field(
        "", description="Email пользователя (уникальный)",
        examples=["dave@example.com"]
    )


class UserResponse(BaseModel):
    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    message: str
