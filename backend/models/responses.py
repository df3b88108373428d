from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class SkillsResponse(BaseModel):
    skills: list[str] = []


class NormalizedSkillsResponse(BaseModel):
    normalized: list[str] = []


class SuggestionsResponse(BaseModel):
    suggestions: list[str] = []


class CategoriesResponse(BaseModel):
    categories: list[str] = []


class CategorySkillsResponse(BaseModel):
    category: str
    skills: list[str] = []
