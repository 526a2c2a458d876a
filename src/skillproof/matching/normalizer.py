"""Skill synonym normalization.

Covers the common aliases seen in resumes and job descriptions so that most
skills can be matched locally without an LLM call.
"""

SKILL_SYNONYMS: dict[str, str] = {
    # JavaScript ecosystem
    "js": "javascript",
    "es6": "javascript",
    "es2015": "javascript",
    "ecmascript": "javascript",
    "vanilla js": "javascript",
    "ts": "typescript",
    "node": "node.js",
    "nodejs": "node.js",
    "node js": "node.js",
    "react.js": "react",
    "reactjs": "react",
    "react js": "react",
    "next": "next.js",
    "nextjs": "next.js",
    "next js": "next.js",
    "vue.js": "vue",
    "vuejs": "vue",
    "vue js": "vue",
    "nuxt": "nuxt.js",
    "nuxtjs": "nuxt.js",
    "angular.js": "angular",
    "angularjs": "angular",
    # Python
    "python3": "python",
    "python 3": "python",
    "py": "python",
    # Databases
    "postgres": "postgresql",
    "psql": "postgresql",
    "mongo": "mongodb",
    "mysql db": "mysql",
    "mssql": "sql server",
    "ms sql": "sql server",
    # Cloud
    "amazon web services": "aws",
    "google cloud": "gcp",
    "google cloud platform": "gcp",
    "azure cloud": "azure",
    "microsoft azure": "azure",
    # DevOps
    "k8s": "kubernetes",
    "kube": "kubernetes",
    "docker containers": "docker",
    "containerization": "docker",
    "ci/cd": "cicd",
    "ci cd": "cicd",
    "continuous integration": "cicd",
    "github actions": "cicd",
    "jenkins": "cicd",
    "gitlab ci": "cicd",
    # Shell
    "cli": "command line",
    "terminal": "command line",
    "bash": "shell",
    "zsh": "shell",
    "powershell": "shell",
    "shell scripting": "shell",
    # Machine learning
    "ml": "machine learning",
    "ai": "artificial intelligence",
    "deep learning": "machine learning",
    "neural networks": "machine learning",
    "nlp": "natural language processing",
    "cv": "computer vision",
    # Frontend
    "css3": "css",
    "html5": "html",
    "sass": "scss",
    "less css": "css",
    "tailwind": "tailwindcss",
    "tailwind css": "tailwindcss",
    "bootstrap css": "bootstrap",
    # Backend frameworks
    "express.js": "express",
    "expressjs": "express",
    "fast api": "fastapi",
    "django rest": "django",
    "drf": "django",
    "spring boot": "spring",
    "springboot": "spring",
    "ruby on rails": "rails",
    "ror": "rails",
    # Mobile
    "react native": "react-native",
    "rn": "react-native",
    "ios development": "ios",
    "swift ui": "swiftui",
    "android development": "android",
    # Version control
    "github": "git",
    "gitlab": "git",
    "bitbucket": "git",
    "version control": "git",
    # APIs
    "rest api": "rest",
    "restful": "rest",
    "restful api": "rest",
    "graphql api": "graphql",
    # Testing
    "unit testing": "testing",
    "jest": "testing",
    "mocha": "testing",
    "pytest": "testing",
    "cypress": "e2e testing",
    "selenium": "e2e testing",
    # Soft skills
    "communication skills": "communication",
    "team work": "teamwork",
    "team player": "teamwork",
    "problem solving": "problem-solving",
    "analytical skills": "analytical",
    "leadership skills": "leadership",
    "project management": "project-management",
    "time management": "time-management",
    "agile methodology": "agile",
    "scrum methodology": "scrum",
}


def normalize_skill(skill: str) -> str:
    """Return the canonical form of a skill.

    Args:
        skill: Raw skill string like " ReactJS ".

    Returns:
        Canonical skill ("react"), or the lower-cased trimmed input when no
        alias is known.

    Examples:
        >>> normalize_skill("K8s")
        'kubernetes'
        >>> normalize_skill("  Rust ")
        'rust'
    """
    key = skill.lower().strip()
    return SKILL_SYNONYMS.get(key, key)


def are_skills_equivalent(first: str, second: str) -> bool:
    """Two skills are equivalent iff their normalized forms are equal."""
    return normalize_skill(first) == normalize_skill(second)
