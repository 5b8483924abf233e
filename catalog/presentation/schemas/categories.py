import pydantic as p

__all__ = ['CategoryDTO', 'CategoryList', 'CategoryCreationModel']


class CategoryDTO(p.BaseModel):
    model_config = p.ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str = ""


class CategoryList(p.BaseModel):
    categories: list[CategoryDTO]


class CategoryCreationModel(p.BaseModel):
    name: str | None = None
    description: str | None = None
