"""Skill taxonomy node: a canonical skill with its synonyms and related skills."""

from pydantic import BaseModel


class SkillNode(BaseModel):
    """A single canonical skill in the taxonomy.

    ``related`` is directional: listing B under A does not imply A under B.
    Order is kept because skill suggestions are emitted in insertion order.
    """
    canonical: str
    synonyms: tuple[str, ...] = ()
    related: tuple[str, ...] = ()
    category: str = ""  # informational only

    model_config = {"frozen": True}
