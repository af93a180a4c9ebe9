"""Static knowledge tables used by the requirement matcher.

Three read-only lookups:
1. TRANSFERABLE_SKILLS: non-technical domain skill -> skills it substitutes for
   (career changers: teaching -> communication)
2. SKILL_INFERENCES: tool/framework -> skills it implies (react -> javascript)
3. SKILL_SYNONYMS: canonical skill -> alternative spellings (postgresql -> postgres)

The tables are bundled into an immutable SkillKnowledge value so callers and
tests can inject smaller tables instead of patching module globals.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Transferable skills: career changer mapping, source domain -> target skills
# ---------------------------------------------------------------------------
TRANSFERABLE_SKILLS: dict[str, list[str]] = {
    # Teaching
    "teaching": ["communication", "presentation", "mentoring", "documentation", "training"],
    "classroom management": ["project management", "coordination", "organization", "time management"],
    "curriculum development": ["planning", "strategy", "content creation", "documentation"],
    # Sales
    "sales": ["communication", "negotiation", "presentation", "client relations", "business development"],
    "account management": ["client relations", "project management", "stakeholder management"],
    "cold calling": ["outreach", "communication", "persistence", "networking"],
    # Management
    "team leadership": ["leadership", "mentoring", "people management", "coaching"],
    "budget management": ["resource planning", "financial planning", "prioritization"],
    "strategic planning": ["strategy", "planning", "vision", "roadmap planning"],
    # Customer service
    "customer service": ["communication", "problem solving", "empathy", "support"],
    "technical support": ["troubleshooting", "problem solving", "documentation", "customer success"],
    "call center": ["communication", "efficiency", "problem solving", "multitasking"],
    # Military
    "military": ["leadership", "discipline", "teamwork", "process adherence", "training"],
    "military leadership": ["leadership", "decision making", "crisis management", "team coordination"],
}

# ---------------------------------------------------------------------------
# Skill inference: if the candidate knows X with evidence, they likely know Y
# ---------------------------------------------------------------------------
SKILL_INFERENCES: dict[str, list[str]] = {
    # Frontend frameworks -> languages
    "react": ["javascript", "html", "css", "jsx"],
    "vue": ["javascript", "html", "css"],
    "angular": ["typescript", "javascript", "html", "css"],
    "svelte": ["javascript", "html", "css"],
    # Backend frameworks -> languages
    "django": ["python"],
    "flask": ["python"],
    "fastapi": ["python"],
    "express": ["javascript", "node.js"],
    "spring": ["java"],
    "rails": ["ruby"],
    # Mobile
    "react native": ["javascript", "react"],
    "flutter": ["dart"],
    "swift ui": ["swift"],
    "jetpack compose": ["kotlin"],
    # Testing frameworks -> languages
    "jest": ["javascript"],
    "pytest": ["python"],
    "junit": ["java"],
    "rspec": ["ruby"],
    # Tools -> concepts
    "git": ["version control"],
    "docker": ["containerization", "devops"],
    "kubernetes": ["container orchestration", "devops", "docker"],
    "jenkins": ["ci/cd", "automation", "devops"],
    "terraform": ["infrastructure as code", "devops", "cloud"],
    # Cloud platforms
    "aws": ["cloud computing", "devops"],
    "azure": ["cloud computing", "devops"],
    "gcp": ["cloud computing", "devops"],
    # Databases -> concepts
    "postgresql": ["sql", "database", "relational database"],
    "mysql": ["sql", "database", "relational database"],
    "mongodb": ["nosql", "database"],
    "redis": ["caching", "nosql"],
}

# ---------------------------------------------------------------------------
# Skills synonym database: canonical name -> alternative spellings
# ---------------------------------------------------------------------------
SKILL_SYNONYMS: dict[str, list[str]] = {
    # Languages
    "python": ["py", "python3", "python 3"],
    "javascript": ["js", "javascript es6", "ecmascript", "es6"],
    "typescript": ["ts", "typescript lang"],
    "java": ["java se", "java ee", "jdk"],
    "c++": ["cpp", "c plus plus", "cplusplus"],
    "c#": ["csharp", "c sharp", "c-sharp"],
    "go": ["golang", "go lang"],
    "rust": ["rust lang", "rust-lang"],
    "ruby": ["ruby lang"],
    "kotlin": ["kotlin lang"],
    "shell": ["bash", "shell scripting", "bash scripting"],
    "sql": ["structured query language", "sql queries"],
    # Frontend
    "react": ["react.js", "reactjs", "react js"],
    "vue": ["vue.js", "vuejs", "vue js"],
    "angular": ["angularjs", "angular.js", "angular 2+"],
    "svelte": ["svelte.js", "sveltejs"],
    "next.js": ["nextjs", "next js"],
    "react native": ["react-native", "reactnative"],
    # Backend
    "node.js": ["nodejs", "node js", "node"],
    "express": ["express.js", "expressjs"],
    "django": ["django framework"],
    "flask": ["flask framework"],
    "fastapi": ["fast api"],
    "spring": ["spring boot", "springboot"],
    "rails": ["ruby on rails", "ror"],
    "graphql": ["graph ql", "graphql api"],
    "rest": ["rest api", "restful", "restful api"],
    # Databases
    "postgresql": ["postgres", "psql", "pg"],
    "mysql": ["my sql"],
    "mongodb": ["mongo", "mongo db"],
    "redis": ["redis cache"],
    "dynamodb": ["dynamo db", "amazon dynamodb"],
    # Cloud & DevOps
    "aws": ["amazon web services", "amazon aws"],
    "azure": ["microsoft azure", "ms azure"],
    "gcp": ["google cloud platform", "google cloud"],
    "docker": ["docker container", "dockerfile"],
    "kubernetes": ["k8s", "kube"],
    "terraform": ["terraform iac"],
    "jenkins": ["jenkins ci", "jenkins pipeline"],
    "github actions": ["gh actions", "github action"],
    "ci/cd": ["cicd", "ci cd", "continuous integration"],
    # Data & ML
    "machine learning": ["ml", "ml algorithms"],
    "tensorflow": ["tensor flow"],
    "pytorch": ["torch"],
    "scikit-learn": ["sklearn"],
    # Methodologies & soft skills
    "agile": ["agile methodology", "agile development"],
    "scrum": ["scrum framework"],
    "communication": ["written communication", "verbal communication"],
    "leadership": ["leading teams", "leadership skills"],
    "project management": ["managing projects", "project coordination"],
}


def _freeze(table: Mapping[str, list[str] | tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
    """Lower-case keys and values and wrap the result read-only."""
    return MappingProxyType({
        key.lower(): tuple(value.lower() for value in values)
        for key, values in table.items()
    })


@dataclass(frozen=True)
class SkillKnowledge:
    """Immutable bundle of the three lookup tables.

    Table order is significant: transferable and inferred matching walk the
    tables in insertion order and stop at the first hit.
    """

    transferable_skills: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    skill_inferences: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    skill_synonyms: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    _synonym_index: Mapping[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "transferable_skills", _freeze(self.transferable_skills))
        object.__setattr__(self, "skill_inferences", _freeze(self.skill_inferences))
        object.__setattr__(self, "skill_synonyms", _freeze(self.skill_synonyms))

        index: dict[str, str] = {}
        for canonical, aliases in self.skill_synonyms.items():
            index[canonical] = canonical
            for alias in aliases:
                index[alias] = canonical
        object.__setattr__(self, "_synonym_index", MappingProxyType(index))

    def canonical_name(self, term: str) -> str | None:
        """Canonical skill for a name or alias, case-insensitive."""
        if not term:
            return None
        return self._synonym_index.get(term.lower().strip())

    def synonyms_for(self, term: str) -> tuple[str, ...]:
        """Every known name of the skill `term` refers to, canonical name first.

        Empty when the term is not in the synonym database.
        """
        canonical = self.canonical_name(term)
        if canonical is None:
            return ()
        return (canonical, *self.skill_synonyms[canonical])


DEFAULT_KNOWLEDGE = SkillKnowledge(
    transferable_skills=TRANSFERABLE_SKILLS,
    skill_inferences=SKILL_INFERENCES,
    skill_synonyms=SKILL_SYNONYMS,
)
