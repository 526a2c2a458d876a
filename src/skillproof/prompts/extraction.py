"""Combined resume and job-description extraction prompt.

One call per candidate returns both skill sets, quality signals, the career
cluster, optional semantic matches and the job category.
"""

COMBINED_EXTRACTION_PROMPT = """Analyze the CANDIDATE RESUME and JOB DESCRIPTION below. Use the EXACT terminology of each document.

=== RESUME TEXT ===
{resume_text}

=== JOB DESCRIPTION ===
{jd_text}

=== EXTRACT ===

**RESUME**:
- technical: programming languages, frameworks, libraries
- tools: platforms, cloud services, databases, build and delivery tools
- soft: interpersonal and working-style skills
- experience_years: total professional years (number, 0 if unknown)
- education_level: highest degree (e.g. "Bachelor", "Master", "PhD", "None")

**JOB DESCRIPTION**:
- technical / tools / soft: same categories as above
- required_experience: years required (number, 0 if not stated)
- critical: skills stated as REQUIRED ("must have", "required", "X+ years of")
- bonus: skills stated as optional ("nice to have", "bonus", "a plus")
- Anything neither critical nor bonus is preferred; do not list it again

**QUALITY** (0-100 each): formatting, achievements (quantified results), clarity, overall score, and up to 3 concrete improvements

**CLUSTER**: career profile type (e.g. "specialist", "generalist", "leader", "career-changer"), confidence 0-1, up to 3 traits

**MATCHES**: for EVERY job-description skill, the closest resume skill (or null), confidence 0-1 that the candidate has it, category (technical, tools, soft) and priority (critical, preferred, bonus). Treat synonyms and close equivalents as matches ("JS" = "JavaScript", "Postgres" = "PostgreSQL").

**JOB CATEGORY**: "technical" for engineering and data roles, "creative" for design, content and media roles, "general" otherwise

**EXPLANATION**: two sentences on the candidate's main strengths and gaps for this role

Never invent skills that are not in the text."""
