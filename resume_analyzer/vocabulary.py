# resume_analyzer/vocabulary.py
"""
Read-only word lists shared by the extractor, scorers and checkers.

Loaded once at import and never mutated.
"""
from typing import Dict, FrozenSet, Tuple

from resume_analyzer.models import SectionName


# Heading aliases per canonical section
SECTION_ALIASES: Dict[SectionName, Tuple[str, ...]] = {
    SectionName.CONTACT: (
        'contact', 'contact information', 'contact info', 'contact details',
        'personal information', 'personal details',
    ),
    SectionName.SUMMARY: (
        'summary', 'professional summary', 'career summary', 'profile',
        'professional profile', 'objective', 'career objective', 'about me',
        'executive summary', 'overview',
    ),
    SectionName.EXPERIENCE: (
        'experience', 'work experience', 'professional experience',
        'employment', 'employment history', 'work history', 'career history',
        'relevant experience', 'professional background',
    ),
    SectionName.EDUCATION: (
        'education', 'academic background', 'academics', 'education and training',
        'qualifications', 'academic qualifications',
    ),
    SectionName.SKILLS: (
        'skills', 'technical skills', 'core skills', 'key skills',
        'core competencies', 'competencies', 'areas of expertise', 'expertise',
        'technologies', 'tools and technologies', 'skills and abilities',
    ),
    SectionName.PROJECTS: (
        'projects', 'personal projects', 'key projects', 'selected projects',
        'academic projects', 'portfolio',
    ),
    SectionName.CERTIFICATIONS: (
        'certifications', 'certificates', 'licenses', 'licenses and certifications',
        'certifications and licenses', 'professional certifications',
    ),
    SectionName.AWARDS: ('awards', 'honors', 'achievements', 'honors and awards', 'accomplishments'),
    SectionName.PUBLICATIONS: ('publications', 'research', 'papers', 'presentations'),
    SectionName.VOLUNTEER: ('volunteer', 'volunteering', 'volunteer experience', 'community involvement'),
    SectionName.LANGUAGES: ('languages', 'language skills'),
    SectionName.INTERESTS: ('interests', 'hobbies', 'hobbies and interests'),
    SectionName.REFERENCES: ('references', 'referees'),
}

# Sections ATS parsers expect to find
STANDARD_SECTIONS: FrozenSet[SectionName] = frozenset({
    SectionName.SUMMARY, SectionName.EXPERIENCE, SectionName.EDUCATION,
    SectionName.SKILLS, SectionName.PROJECTS, SectionName.CERTIFICATIONS,
    SectionName.CONTACT,
})

# Filler common in postings and resumes, on top of the nltk English list
EXTRA_STOP_WORDS: FrozenSet[str] = frozenset({
    'looking', 'seeking', 'candidate', 'candidates', 'ideal', 'including',
    'include', 'includes', 'etc', 'ability', 'able', 'well', 'also', 'within',
    'across', 'new', 'using', 'use', 'used', 'plus', 'must', 'will', 'would',
    'responsible', 'requirements', 'required', 'preferred', 'role', 'position',
    'job', 'company', 'join', 'us', 'per', 'via', 'e.g', 'i.e', 'like',
    'strong', 'good', 'great', 'excellent', 'work', 'working', 'worked',
    'year', 'years', 'month', 'months', 'present', 'current', 'currently',
    'jan', 'feb', 'mar', 'apr', 'jun', 'jul', 'aug', 'sep', 'sept', 'oct',
    'nov', 'dec', 'january', 'february', 'march', 'april', 'may', 'june',
    'july', 'august', 'september', 'october', 'november', 'december',
})

TECHNICAL_SKILLS: FrozenSet[str] = frozenset({
    # Languages
    'python', 'java', 'javascript', 'typescript', 'c', 'c++', 'c#', 'go',
    'golang', 'rust', 'ruby', 'php', 'scala', 'kotlin', 'swift', 'r',
    'matlab', 'sql', 'nosql', 'bash', 'html', 'css', 'perl',
    # Frameworks and platforms
    'react', 'angular', 'vue', 'node.js', 'node', 'django', 'flask', 'fastapi',
    'spring', '.net', 'rails', 'express', 'next.js',
    'aws', 'azure', 'gcp', 'google cloud', 'docker', 'kubernetes', 'terraform',
    'ansible', 'jenkins', 'git', 'github', 'gitlab', 'linux', 'kafka', 'spark',
    'hadoop', 'airflow', 'snowflake', 'databricks',
    'postgresql', 'mysql', 'mongodb', 'redis', 'elasticsearch', 'oracle',
    'graphql', 'rest', 'rest api', 'microservices', 'ci/cd', 'devops',
    'machine learning', 'deep learning', 'data science', 'data analysis',
    'artificial intelligence', 'nlp', 'computer vision',
    'pandas', 'numpy', 'tensorflow', 'pytorch', 'scikit-learn',
    'agile', 'scrum', 'kanban', 'jira',
    # Business and domain tools
    'excel', 'tableau', 'power bi', 'looker', 'salesforce', 'hubspot', 'sap',
    'quickbooks', 'bloomberg', 'financial modeling', 'valuation',
    'seo', 'sem', 'ppc', 'google analytics', 'google ads', 'adobe',
    'ehr', 'epic', 'cerner', 'hipaa',
    'westlaw', 'lexisnexis', 'litigation', 'contract drafting',
})

SOFT_SKILLS: FrozenSet[str] = frozenset({
    'communication', 'leadership', 'teamwork', 'collaboration', 'mentoring',
    'problem solving', 'critical thinking', 'time management', 'adaptability',
    'creativity', 'negotiation', 'presentation', 'organization', 'analytical',
    'stakeholder management', 'project management', 'coaching',
    'decision making', 'interpersonal', 'customer service', 'attention to detail',
})

CERTIFICATIONS: FrozenSet[str] = frozenset({
    'aws certified', 'azure certified', 'google cloud certified', 'pmp', 'cpa',
    'cfa', 'cissp', 'ccna', 'ccnp', 'cka', 'ckad', 'csm', 'scrum master',
    'six sigma', 'itil', 'comptia', 'security+', 'cism', 'frm', 'series 7',
    'bls', 'acls', 'rn', 'shrm', 'phr', 'bar admission', 'terraform certified',
})

# Canonical term -> alternative spellings
SYNONYMS: Dict[str, Tuple[str, ...]] = {
    'kubernetes': ('k8s',),
    'javascript': ('js', 'ecmascript'),
    'typescript': ('ts',),
    'postgresql': ('postgres',),
    'machine learning': ('ml',),
    'artificial intelligence': ('ai',),
    'aws': ('amazon web services',),
    'gcp': ('google cloud', 'google cloud platform'),
    'ci/cd': ('continuous integration', 'continuous deployment', 'continuous delivery'),
    'go': ('golang',),
    'node.js': ('node', 'nodejs'),
    'react': ('react.js', 'reactjs'),
    'c#': ('csharp',),
    'natural language processing': ('nlp',),
    'power bi': ('powerbi',),
    'microsoft excel': ('excel',),
}

ACTION_VERBS: FrozenSet[str] = frozenset({
    'accelerated', 'accomplished', 'achieved', 'administered', 'advised',
    'analyzed', 'architected', 'authored', 'automated', 'boosted', 'built',
    'championed', 'coached', 'collaborated', 'conceived', 'consolidated',
    'coordinated', 'created', 'cut', 'decreased', 'delivered', 'deployed',
    'designed', 'developed', 'devised', 'directed', 'drove', 'eliminated',
    'enabled', 'engineered', 'enhanced', 'established', 'evaluated',
    'exceeded', 'executed', 'expanded', 'facilitated', 'forecasted',
    'formulated', 'founded', 'generated', 'grew', 'guided', 'headed',
    'identified', 'implemented', 'improved', 'increased', 'influenced',
    'initiated', 'innovated', 'installed', 'instituted', 'integrated',
    'introduced', 'launched', 'led', 'maintained', 'managed', 'maximized',
    'mentored', 'migrated', 'minimized', 'modernized', 'monitored',
    'negotiated', 'orchestrated', 'organized', 'overhauled', 'oversaw',
    'partnered', 'pioneered', 'planned', 'presented', 'produced',
    'programmed', 'published', 'raised', 'rebuilt', 'redesigned', 'reduced',
    'refactored', 'reorganized', 'researched', 'resolved', 'restructured',
    'revamped', 'revitalized', 'saved', 'scaled', 'secured', 'shipped',
    'simplified', 'solved', 'spearheaded', 'standardized', 'streamlined',
    'strengthened', 'supervised', 'surpassed', 'trained', 'transformed',
    'tripled', 'doubled', 'upgraded', 'volunteered', 'won', 'wrote',
})

WEAK_OPENERS: Tuple[str, ...] = (
    'responsible for', 'worked on', 'helped with', 'helped', 'involved in',
    'assisted with', 'assisted in', 'duties included', 'tasked with',
    'participated in', 'in charge of',
)

FIRST_PERSON: FrozenSet[str] = frozenset({'i', 'me', 'my', 'mine', 'myself', 'we', 'our', 'ours'})

FILLER_WORDS: FrozenSet[str] = frozenset({
    'very', 'really', 'quite', 'somewhat', 'rather', 'just', 'basically', 'actually',
})

# Common misspelling -> correction
MISSPELLINGS: Dict[str, str] = {
    'teh': 'the', 'recieve': 'receive', 'recieved': 'received',
    'managment': 'management', 'acheive': 'achieve', 'acheived': 'achieved',
    'seperate': 'separate', 'occured': 'occurred', 'definately': 'definitely',
    'responsibilty': 'responsibility', 'experiance': 'experience',
    'sucessful': 'successful', 'succesful': 'successful', 'enviroment': 'environment',
    'developement': 'development', 'commited': 'committed', 'begining': 'beginning',
    'untill': 'until', 'accross': 'across', 'adress': 'address',
}

INFORMAL_WORDS: FrozenSet[str] = frozenset({
    'stuff', 'things', 'guy', 'guys', 'gonna', 'wanna', 'kinda', 'sorta',
    'awesome', 'cool', 'lots', 'ok', 'okay', 'yeah', 'tons', 'super',
})

FORMAL_WORDS: FrozenSet[str] = frozenset({
    'achievement', 'achievements', 'accomplishment', 'accomplishments',
    'professional', 'experience', 'expertise', 'proficient', 'proficiency',
})

BUZZWORDS: Tuple[str, ...] = (
    'synergy', 'go-getter', 'think outside the box', 'team player',
    'hard worker', 'hardworking', 'detail-oriented', 'results-driven',
    'self-starter', 'dynamic', 'passionate', 'motivated', 'guru', 'ninja',
    'rockstar', 'best of breed', 'proactive',
)

VAGUE_TERMS: FrozenSet[str] = frozenset({
    'various', 'several', 'many', 'numerous', 'multiple', 'some', 'etc', 'stuff',
})

LEADERSHIP_WORDS: FrozenSet[str] = frozenset({
    'led', 'managed', 'supervised', 'mentored', 'directed', 'headed',
    'coached', 'oversaw', 'spearheaded', 'team lead', 'leadership',
})

SENIORITY_MARKERS: Tuple[str, ...] = (
    'senior', 'principal', 'staff engineer', 'director', 'vice president',
    'head of', 'chief', 'lead ',
)
