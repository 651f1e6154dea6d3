# resume_analyzer/industry/profiles.py
"""
Per-industry keyword dictionaries, scoring criteria and recommendation templates.

Read-only lookup tables, built once at import.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, List, Pattern, Tuple


@dataclass(frozen=True)
class ElementCheck:
    """Something a strong resume in the industry usually mentions"""
    element: str
    keywords: Tuple[str, ...]
    description: str


@dataclass(frozen=True)
class Recommendation:
    """Template recommendation, promoted when any trigger sub-score is weak"""
    text: str
    triggers: Tuple[str, ...] = ()


@dataclass(frozen=True)
class IndustryProfile:
    name: str
    label: str
    keywords: Tuple[str, ...]
    criteria: Dict[str, float]
    recommendations: Tuple[Recommendation, ...]
    emphasized_sections: Tuple[str, ...] = ()
    element_checks: Tuple[ElementCheck, ...] = ()
    patterns: Dict[str, Pattern] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self):
        compiled = {
            term: re.compile(r'\b' + re.escape(term) + r'\b', re.IGNORECASE)
            for term in self.keywords
        }
        object.__setattr__(self, 'patterns', compiled)

    @property
    def baseline_terms(self) -> List[str]:
        return list(self.keywords)


GENERAL = "general"

PROFILES: Dict[str, IndustryProfile] = {
    'tech': IndustryProfile(
        name='tech',
        label='Technology',
        keywords=(
            'software', 'developer', 'engineer', 'programming', 'code', 'java',
            'python', 'javascript', 'react', 'angular', 'node', 'aws', 'cloud',
            'devops', 'fullstack', 'frontend', 'backend', 'web', 'mobile', 'app',
            'database', 'sql', 'nosql', 'machine learning',
            'artificial intelligence', 'data science', 'algorithm',
        ),
        criteria={
            'technical_skills': 0.25, 'projects': 0.20, 'experience': 0.20,
            'education': 0.15, 'certifications': 0.10, 'action_verbs': 0.05,
            'formatting': 0.05,
        },
        recommendations=(
            Recommendation(
                "Highlight specific programming languages and technologies in a dedicated technical skills section",
                ('keyword', 'section')),
            Recommendation(
                "Include GitHub/portfolio links to showcase your code",
                ('section',)),
            Recommendation(
                "Quantify your achievements with metrics (e.g., improved performance by 30%)",
                ('bullet_point', 'action_verb')),
            Recommendation(
                "List specific technical projects with your role and technologies used",
                ('relevance', 'keyword')),
            Recommendation(
                "Include system design or architecture experience if applicable",
                ('relevance',)),
        ),
        emphasized_sections=('skills', 'projects'),
        element_checks=(
            ElementCheck("Version Control", ('git', 'github', 'gitlab', 'svn'),
                         "Version control experience (Git, GitHub, etc.)"),
            ElementCheck("Cloud Platforms", ('aws', 'azure', 'gcp', 'cloud'),
                         "Cloud platform experience (AWS, Azure, GCP)"),
            ElementCheck("Agile/Scrum", ('agile', 'scrum', 'kanban', 'sprint'),
                         "Agile methodology experience"),
            ElementCheck("Testing", ('test', 'testing', 'unit test', 'integration'),
                         "Testing and quality assurance experience"),
            ElementCheck("CI/CD", ('ci/cd', 'jenkins', 'pipeline', 'deployment'),
                         "Continuous integration/deployment experience"),
        ),
    ),
    'finance': IndustryProfile(
        name='finance',
        label='Finance',
        keywords=(
            'finance', 'accounting', 'investment', 'banking', 'financial',
            'analyst', 'portfolio', 'trading', 'stocks', 'bonds', 'securities',
            'audit', 'tax', 'budget', 'forecast', 'revenue', 'profit', 'loss',
            'balance sheet', 'income statement', 'cash flow', 'equity', 'asset',
            'liability', 'hedge fund', 'private equity',
        ),
        criteria={
            'experience': 0.25, 'technical_skills': 0.20, 'education': 0.20,
            'certifications': 0.15, 'action_verbs': 0.10, 'formatting': 0.05,
            'projects': 0.05,
        },
        recommendations=(
            Recommendation("Emphasize financial certifications (CFA, CPA, etc.)", ('section',)),
            Recommendation("Highlight experience with financial software and tools", ('keyword',)),
            Recommendation("Include quantitative achievements and financial metrics",
                           ('bullet_point', 'action_verb')),
            Recommendation("Demonstrate knowledge of regulations and compliance", ('relevance',)),
            Recommendation("Showcase analytical and modeling skills", ('keyword', 'relevance')),
        ),
        emphasized_sections=('experience', 'education'),
        element_checks=(
            ElementCheck("Financial Modeling", ('model', 'modeling', 'financial model', 'valuation'),
                         "Financial modeling and valuation skills"),
            ElementCheck("Risk Management", ('risk', 'risk management', 'var', 'stress test'),
                         "Risk assessment and management experience"),
            ElementCheck("Regulatory Knowledge", ('sec', 'compliance', 'regulation', 'audit'),
                         "Regulatory compliance and audit experience"),
            ElementCheck("Financial Software", ('bloomberg', 'excel', 'sql', 'tableau'),
                         "Proficiency with financial software and tools"),
        ),
    ),
    'healthcare': IndustryProfile(
        name='healthcare',
        label='Healthcare',
        keywords=(
            'healthcare', 'medical', 'clinical', 'patient', 'doctor', 'nurse',
            'physician', 'hospital', 'pharmacy', 'pharmaceutical', 'health',
            'care', 'treatment', 'diagnosis', 'therapy', 'medicine', 'surgery',
            'laboratory', 'research', 'biotech', 'life science', 'clinical trial',
            'regulatory',
        ),
        criteria={
            'education': 0.25, 'certifications': 0.20, 'experience': 0.20,
            'technical_skills': 0.15, 'action_verbs': 0.10, 'formatting': 0.05,
            'projects': 0.05,
        },
        recommendations=(
            Recommendation("List all relevant certifications and licenses prominently", ('section',)),
            Recommendation("Include experience with electronic health record (EHR) systems", ('keyword',)),
            Recommendation("Highlight patient care metrics and outcomes if applicable",
                           ('bullet_point', 'action_verb')),
            Recommendation("Emphasize knowledge of healthcare regulations (HIPAA, etc.)", ('relevance',)),
            Recommendation("Include specialized medical knowledge or procedures", ('keyword', 'relevance')),
        ),
        emphasized_sections=('education', 'certifications'),
        element_checks=(
            ElementCheck("Clinical Experience", ('clinical', 'patient', 'bedside', 'rounds'),
                         "Direct patient care or clinical experience"),
            ElementCheck("EHR Systems", ('ehr', 'electronic health', 'epic', 'cerner'),
                         "Electronic health record system experience"),
            ElementCheck("Medical Certifications", ('board certified', 'license', 'certification', 'cme'),
                         "Professional medical certifications and licenses"),
            ElementCheck("Research Experience", ('research', 'clinical trial', 'publication', 'study'),
                         "Medical research or clinical trial experience"),
        ),
    ),
    'marketing': IndustryProfile(
        name='marketing',
        label='Marketing',
        keywords=(
            'marketing', 'brand', 'advertising', 'market research',
            'digital marketing', 'social media', 'content', 'seo', 'sem',
            'campaign', 'customer', 'consumer', 'product', 'promotion',
            'public relations', 'communications', 'creative', 'strategy',
            'analytics', 'conversion', 'engagement', 'audience',
        ),
        criteria={
            'experience': 0.25, 'projects': 0.20, 'technical_skills': 0.15,
            'action_verbs': 0.15, 'education': 0.10, 'formatting': 0.10,
            'certifications': 0.05,
        },
        recommendations=(
            Recommendation("Showcase campaign results with specific metrics (ROI, conversion rates, etc.)",
                           ('bullet_point', 'action_verb')),
            Recommendation("Highlight experience with marketing tools and platforms", ('keyword',)),
            Recommendation("Include examples of creative work or content creation", ('section',)),
            Recommendation("Demonstrate knowledge of analytics and data-driven decision making",
                           ('relevance', 'keyword')),
            Recommendation("Emphasize brand strategy and positioning experience", ('relevance',)),
        ),
        emphasized_sections=('experience', 'projects'),
        element_checks=(
            ElementCheck("Digital Marketing", ('seo', 'sem', 'ppc', 'google ads'),
                         "Digital marketing and SEO experience"),
            ElementCheck("Analytics Tools", ('google analytics', 'adobe', 'hubspot', 'salesforce'),
                         "Marketing analytics and automation tools"),
            ElementCheck("Content Creation", ('content', 'copywriting', 'creative', 'brand'),
                         "Content creation and brand management"),
            ElementCheck("Campaign Management", ('campaign', 'roi', 'conversion', 'attribution'),
                         "Marketing campaign management and optimization"),
        ),
    ),
    'legal': IndustryProfile(
        name='legal',
        label='Legal',
        keywords=(
            'legal', 'law', 'attorney', 'lawyer', 'counsel', 'litigation',
            'contract', 'compliance', 'regulation', 'policy', 'legislation',
            'court', 'judge', 'paralegal', 'intellectual property', 'patent',
            'trademark', 'copyright',
        ),
        criteria={
            'education': 0.25, 'experience': 0.25, 'certifications': 0.20,
            'technical_skills': 0.10, 'action_verbs': 0.10, 'formatting': 0.05,
            'projects': 0.05,
        },
        recommendations=(
            Recommendation("Highlight specific areas of legal expertise", ('keyword',)),
            Recommendation("Include case outcomes and settlements if applicable",
                           ('bullet_point', 'action_verb')),
            Recommendation("Emphasize research and writing skills", ('grammar',)),
            Recommendation("List relevant bar admissions and jurisdictions", ('section',)),
            Recommendation("Showcase knowledge of specific regulations and compliance areas",
                           ('relevance',)),
        ),
        emphasized_sections=('education', 'experience'),
        element_checks=(
            ElementCheck("Legal Research", ('westlaw', 'lexis', 'research', 'brief'),
                         "Legal research and brief writing experience"),
            ElementCheck("Court Experience", ('litigation', 'court', 'trial', 'deposition'),
                         "Litigation and court appearance experience"),
            ElementCheck("Contract Management", ('contract', 'agreement', 'negotiation', 'draft'),
                         "Contract drafting and negotiation skills"),
            ElementCheck("Compliance", ('compliance', 'regulatory', 'policy', 'procedure'),
                         "Regulatory compliance and policy development"),
        ),
    ),
    GENERAL: IndustryProfile(
        name=GENERAL,
        label='General',
        keywords=(
            'communication', 'leadership', 'management', 'project', 'team',
            'customer', 'analysis', 'planning', 'budget', 'training', 'reporting',
            'strategy', 'operations', 'process', 'quality', 'stakeholder',
        ),
        criteria={
            'experience': 0.20, 'education': 0.20, 'technical_skills': 0.15,
            'projects': 0.15, 'action_verbs': 0.10, 'certifications': 0.10,
            'formatting': 0.10,
        },
        recommendations=(
            Recommendation("Tailor your resume to the specific job description", ('relevance', 'keyword')),
            Recommendation("Quantify achievements with specific metrics", ('bullet_point',)),
            Recommendation("Use strong action verbs to begin bullet points", ('action_verb',)),
            Recommendation("Ensure consistent formatting throughout", ('formatting',)),
            Recommendation("Include relevant certifications and technical skills", ('section', 'keyword')),
        ),
        emphasized_sections=('experience',),
    ),
}

# Tie-break order for detection; general is the fallback only
PRIORITY: Tuple[str, ...] = ('tech', 'finance', 'healthcare', 'marketing', 'legal')


def get_profile(industry: str) -> IndustryProfile:
    return PROFILES.get(industry, PROFILES[GENERAL])
