import pydantic as p

__all__ = ['Category']


class Category(p.BaseModel):
    id: int|None = None
    name: str = p.Field(min_length=1)
    description: str = ""
