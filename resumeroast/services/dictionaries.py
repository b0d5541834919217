"""
Static detection tables used by the feature detectors.

Every table is an immutable tuple: order matters for anything that reports
matched terms back to the caller (the first detected buzzwords fill roast
placeholders, the first detected technologies end up in the improved summary).
"""

BUZZWORDS = (
    "synergy", "passionate", "dynamic", "self-starter", "hardworking", "team player",
    "results-driven", "go-getter", "proactive", "detail-oriented", "innovative",
    "guru", "ninja", "rockstar", "visionary", "thought leader", "motivated",
    "dedicated", "enthusiastic", "strategic thinker", "fast learner", "people person",
    "outside the box", "value-added", "best of breed", "paradigm", "leverage",
    "synergize", "holistic", "bandwidth", "deep dive", "circle back", "low-hanging fruit",
    "move the needle", "game-changer", "disruptive", "bleeding edge", "mission-critical",
    "action-oriented", "bottom line", "core competency", "empower", "stakeholder",
    "scalable", "ecosystem", "pivot", "agile mindset", "wear many hats",
)

TECH_STACK = (
    "react", "angular", "vue", "svelte", "next.js", "nuxt", "gatsby",
    "node.js", "express", "fastify", "django", "flask", "rails", "spring",
    "typescript", "javascript", "python", "java", "c#", "c++", "go", "rust", "kotlin", "swift",
    "aws", "gcp", "azure", "docker", "kubernetes", "terraform", "ansible",
    "postgresql", "mysql", "mongodb", "redis", "elasticsearch", "dynamodb", "cassandra",
    "kafka", "rabbitmq", "graphql", "rest", "grpc", "websocket",
    "ci/cd", "jenkins", "github actions", "gitlab ci", "circleci",
    "react native", "flutter", "ionic", ".net", "laravel", "symfony",
    "tailwind", "sass", "less", "webpack", "vite", "rollup",
    "figma", "sketch", "photoshop", "illustrator",
    "sql", "nosql", "linux", "nginx", "apache",
    "git", "jira", "confluence", "slack",
    "machine learning", "deep learning", "tensorflow", "pytorch", "scikit-learn",
    "pandas", "numpy", "spark", "hadoop", "airflow", "dbt",
    "tableau", "power bi", "looker", "snowflake", "bigquery", "redshift",
    "oauth", "jwt", "saml", "ldap", "openid",
    "microservices", "serverless", "lambda", "s3", "ec2", "cloudfront",
)

SCALE_WORDS = (
    "million", "billion", "high-traffic", "distributed", "microservices",
    "latency", "throughput", "scalability", "concurrent", "petabyte",
    "terabyte", "real-time", "low-latency", "fault-tolerant", "load balancing",
    "horizontal scaling", "vertical scaling", "sharding", "replication",
)

IMPACT_VERBS = (
    "reduced", "increased", "improved", "boosted", "grew", "saved",
    "generated", "delivered", "achieved", "optimized", "accelerated",
    "streamlined", "automated", "eliminated", "decreased", "doubled",
    "tripled", "launched", "shipped", "deployed", "migrated", "designed",
    "architected", "built", "developed", "implemented", "created",
    "established", "led", "managed", "mentored", "coached", "trained",
)

SHIPPING_VERBS = (
    "built", "shipped", "launched", "deployed", "released", "published", "created", "developed",
)

VAGUE_PHRASES = (
    "responsible for", "duties included", "helped with", "assisted in",
    "worked on", "involved in", "participated in", "tasked with",
    "in charge of", "various tasks", "day-to-day", "miscellaneous",
)

ROUTINE_ROLE_KEYWORDS = (
    "data entry", "receptionist", "filing", "administrative assistant",
    "cashier", "clerk", "customer service representative", "operator",
)

OWNERSHIP_KEYWORDS = (
    "led", "owned", "architected", "designed", "founded", "co-founded",
    "principal", "staff", "senior", "director", "vp", "head of",
    "chief", "manager", "tech lead", "team lead",
)

ADAPTABILITY_KEYWORDS = (
    "learned", "migrated", "adopted", "transitioned", "pivoted",
    "cross-functional", "full-stack", "multi-stack", "polyglot",
    "led adoption", "introduced", "pioneered",
)

# Rewrite verbs, cycled round-robin over the rewritten bullets
REWRITE_VERBS = (
    "Spearheaded", "Engineered", "Delivered", "Optimized", "Streamlined", "Architected",
)

# (pattern, label) pairs; the first pattern found in the text decides the role
ROLE_PATTERNS = (
    (r"\b(senior|sr\.?)\s*(software|frontend|backend|full.?stack)\s*(engineer|developer)\b", "Senior Software Engineer"),
    (r"\b(software|frontend|backend|full.?stack)\s*(engineer|developer)\b", "Software Engineer"),
    (r"\bdata\s*(scientist|analyst|engineer)\b", "Data Professional"),
    (r"\b(product|program|project)\s*manager\b", "Product/Program Manager"),
    (r"\b(devops|sre|site reliability|platform)\s*(engineer)?\b", "DevOps/Platform Engineer"),
    (r"\b(designer|ux|ui)\b", "Designer"),
    (r"\b(marketing|growth|content)\s*(manager|specialist|lead)?\b", "Marketing Professional"),
)
