"""Skill taxonomy: canonical skills, synonyms and directional relations.

The taxonomy is an immutable index built once from a catalog of
:class:`SkillNode` entries. Lookups normalize the input (lowercase, strip
everything but ``[a-z0-9]``) and resolve it through a synonym index, so
"Node.js", "nodejs" and "NodeJS" all land on ``Node.js``.

Unknown input never raises; it resolves to ``None``.
"""

import logging
import re
from collections.abc import Iterable
from types import MappingProxyType

from models.schemas.skill_taxonomy import SkillNode

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def _node(canonical: str, synonyms: list[str], related: list[str], category: str) -> SkillNode:
    return SkillNode(
        canonical=canonical,
        synonyms=tuple(synonyms),
        related=tuple(related),
        category=category,
    )


DEFAULT_CATALOG: tuple[SkillNode, ...] = (
    # Programming languages
    _node("JavaScript", ["JS", "ECMAScript", "Javascript"],
          ["TypeScript", "Node.js", "React", "Vue.js"], "Programming Languages"),
    _node("TypeScript", ["TS", "Typescript"],
          ["JavaScript", "Node.js", "React", "Angular"], "Programming Languages"),
    _node("Python", ["Python3", "Python 3"],
          ["Django", "Flask", "FastAPI", "Machine Learning"], "Programming Languages"),
    _node("Java", ["JAVA"],
          ["Spring", "Spring Boot", "Hibernate", "Maven"], "Programming Languages"),
    _node("C#", ["CSharp", "C Sharp"],
          [".NET", "ASP.NET", "Entity Framework"], "Programming Languages"),
    _node("Go", ["Golang"],
          ["Docker", "Kubernetes", "Microservices"], "Programming Languages"),
    _node("Ruby", [],
          ["Ruby on Rails", "Rails", "RSpec"], "Programming Languages"),
    # Frontend frameworks
    _node("React", ["ReactJS", "React.js"],
          ["JavaScript", "TypeScript", "Redux", "Next.js"], "Frontend Frameworks"),
    _node("Angular", ["AngularJS", "Angular.js"],
          ["TypeScript", "RxJS", "NgRx"], "Frontend Frameworks"),
    _node("Vue.js", ["Vue", "VueJS"],
          ["JavaScript", "TypeScript", "Vuex", "Nuxt.js"], "Frontend Frameworks"),
    # Backend frameworks
    _node("Node.js", ["NodeJS", "Node"],
          ["JavaScript", "TypeScript", "Express", "NestJS"], "Backend Frameworks"),
    _node("Express", ["ExpressJS", "Express.js"],
          ["Node.js", "JavaScript", "REST API"], "Backend Frameworks"),
    _node("NestJS", ["Nest.js", "Nest"],
          ["Node.js", "TypeScript", "Express", "Microservices"], "Backend Frameworks"),
    _node("Django", ["Django Framework"],
          ["Python", "REST API", "PostgreSQL"], "Backend Frameworks"),
    _node("Spring Boot", ["SpringBoot", "Spring"],
          ["Java", "Microservices", "REST API"], "Backend Frameworks"),
    # Databases
    _node("PostgreSQL", ["Postgres", "PSQL"],
          ["SQL", "Database Design", "Relational Databases"], "Databases"),
    _node("MySQL", ["My SQL"],
          ["SQL", "Database Design", "Relational Databases"], "Databases"),
    _node("MongoDB", ["Mongo", "Mongo DB"],
          ["NoSQL", "Database Design", "Document Databases"], "Databases"),
    _node("Redis", [],
          ["Caching", "NoSQL", "In-Memory Databases"], "Databases"),
    _node("Elasticsearch", ["Elastic Search"],
          ["Search", "NoSQL", "Full-Text Search"], "Databases"),
    # Cloud platforms
    _node("AWS", ["Amazon Web Services", "Amazon AWS"],
          ["Cloud Computing", "EC2", "S3", "Lambda"], "Cloud Platforms"),
    _node("Azure", ["Microsoft Azure", "MS Azure"],
          ["Cloud Computing", "Azure Functions", "Azure DevOps"], "Cloud Platforms"),
    _node("Google Cloud", ["GCP", "Google Cloud Platform"],
          ["Cloud Computing", "BigQuery", "Cloud Functions"], "Cloud Platforms"),
    # DevOps & tools
    _node("Docker", ["Containerization"],
          ["Kubernetes", "DevOps", "Microservices"], "DevOps"),
    _node("Kubernetes", ["K8s"],
          ["Docker", "DevOps", "Container Orchestration"], "DevOps"),
    _node("Git", ["Version Control"],
          ["GitHub", "GitLab", "Bitbucket"], "DevOps"),
    _node("CI/CD", ["Continuous Integration", "Continuous Deployment", "CI CD"],
          ["Jenkins", "GitHub Actions", "GitLab CI"], "DevOps"),
    # Testing
    _node("Jest", ["Jest Testing"],
          ["JavaScript", "TypeScript", "Unit Testing"], "Testing"),
    _node("Pytest", ["PyTest"],
          ["Python", "Unit Testing", "Test Automation"], "Testing"),
    _node("JUnit", ["JUnit Testing"],
          ["Java", "Unit Testing", "Test Automation"], "Testing"),
    # Soft skills
    _node("Leadership", ["Team Leadership", "Leading Teams"],
          ["Management", "Communication", "Mentoring"], "Soft Skills"),
    _node("Communication", ["Verbal Communication", "Written Communication"],
          ["Collaboration", "Presentation", "Documentation"], "Soft Skills"),
    _node("Problem Solving", ["Problem-Solving", "Analytical Thinking", "Critical Thinking"],
          ["Debugging", "Troubleshooting", "Analysis"], "Soft Skills"),
    # Methodologies
    _node("Agile", ["Agile Development", "Agile Methodology"],
          ["Scrum", "Kanban", "Sprint Planning"], "Methodologies"),
    _node("Scrum", [],
          ["Agile", "Sprint Planning", "Daily Standup"], "Methodologies"),
    _node("REST API", ["RESTful API", "REST", "RESTful", "API Development"],
          ["HTTP", "JSON", "API Design"], "Methodologies"),
    _node("GraphQL", ["Graph QL"],
          ["API Development", "Apollo", "REST API"], "Methodologies"),
    # Machine learning & AI
    _node("Machine Learning", ["ML"],
          ["Python", "TensorFlow", "PyTorch", "Data Science"], "AI/ML"),
    _node("TensorFlow", ["Tensor Flow"],
          ["Machine Learning", "Python", "Deep Learning"], "AI/ML"),
    _node("PyTorch", ["Py Torch"],
          ["Machine Learning", "Python", "Deep Learning"], "AI/ML"),
)


def normalize_skill(skill: str) -> str:
    """Lowercase, trim and drop every non-alphanumeric character."""
    return _NON_ALNUM_RE.sub("", skill.lower().strip())


class SkillTaxonomy:
    """Read-only index over a skill catalog.

    Construct once at startup and share the instance; nothing mutates it
    after ``__init__``.
    """

    def __init__(self, catalog: Iterable[SkillNode] = DEFAULT_CATALOG) -> None:
        skills: dict[str, SkillNode] = {}
        index: dict[str, str] = {}
        for node in catalog:
            skills[node.canonical] = node
            index[normalize_skill(node.canonical)] = node.canonical
            for synonym in node.synonyms:
                key = normalize_skill(synonym)
                previous = index.get(key)
                if previous is not None and previous != node.canonical:
                    logger.warning(
                        "Synonym %r of %s shadows existing mapping to %s",
                        synonym, node.canonical, previous,
                    )
                index[key] = node.canonical
        self._skills = MappingProxyType(skills)
        self._index = MappingProxyType(index)
        logger.debug("Skill taxonomy built: %d skills, %d index keys", len(skills), len(index))

    def __len__(self) -> int:
        return len(self._skills)

    def __contains__(self, canonical: object) -> bool:
        return canonical in self._skills

    def find_canonical(self, skill: str) -> str | None:
        """Resolve any spelling of a skill to its canonical name."""
        if not skill:
            return None
        return self._index.get(normalize_skill(skill))

    def get_skill(self, canonical: str) -> SkillNode | None:
        return self._skills.get(canonical)

    def is_synonym(self, skill_a: str, skill_b: str) -> bool:
        canonical_a = self.find_canonical(skill_a)
        return canonical_a is not None and canonical_a == self.find_canonical(skill_b)

    def is_related(self, skill_a: str, skill_b: str) -> bool:
        """True if both resolve to the same skill or B is listed under A's related skills.

        Directional: ``is_related(a, b)`` may differ from ``is_related(b, a)``.
        """
        canonical_a = self.find_canonical(skill_a)
        canonical_b = self.find_canonical(skill_b)
        if canonical_a is None or canonical_b is None:
            return False
        if canonical_a == canonical_b:
            return True
        node = self._skills.get(canonical_a)
        return node is not None and canonical_b in node.related

    def get_skills_by_category(self, category: str) -> list[str]:
        return [c for c, node in self._skills.items() if node.category == category]

    def get_categories(self) -> set[str]:
        return {node.category for node in self._skills.values()}
