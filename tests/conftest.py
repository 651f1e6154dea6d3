"""
Shared fixtures for resume analyzer tests
"""
import pytest
from unittest.mock import Mock

from resume_analyzer.analyzer import ResumeAnalyzer
from resume_analyzer.config import AnalyzerConfig


SAMPLE_RESUME = """Jane Doe
jane.doe@example.com | (555) 123-4567 | linkedin.com/in/janedoe

SUMMARY
Backend engineer with 6 years of experience building Python services and data pipelines on AWS.

EXPERIENCE
Senior Software Engineer, Acme Corp (Jan 2020 - Present)
- Led migration of 12 services to Kubernetes, cutting deployment time by 40%
- Built REST APIs in Python and Django serving 2M requests per day
- Reduced PostgreSQL query latency by 35% through indexing and caching
- Mentored 4 junior engineers on testing and code review

Software Engineer, Beta Inc (Jun 2017 - Dec 2019)
- Developed data pipelines in Python and SQL processing 500GB daily
- Implemented CI/CD with Jenkins and Docker, improving release frequency by 3x
- Designed monitoring dashboards that reduced incident response time by 25%

EDUCATION
B.S. Computer Science, State University, 2017

SKILLS
Python, SQL, Django, PostgreSQL, AWS, Docker, Kubernetes, Git, Jenkins, REST APIs
"""

SAMPLE_JOB = """Senior Backend Engineer

We are looking for a backend engineer with strong Python and SQL experience.
You will design REST APIs, build data pipelines and deploy services on AWS with Kubernetes.
Experience with Terraform and Kafka is a plus.
"""


@pytest.fixture
def resume_text():
    return SAMPLE_RESUME


@pytest.fixture
def job_text():
    return SAMPLE_JOB


@pytest.fixture
def config():
    """Default config with a short AI timeout"""
    config = AnalyzerConfig()
    config.ai.timeout_seconds = 0.5
    return config


@pytest.fixture
def analyzer(config):
    return ResumeAnalyzer(config=config)


@pytest.fixture
def mock_provider():
    """AI provider returning a numbered list with a score"""
    provider = Mock()
    provider.name = "mock"
    provider.complete.return_value = (
        "1. Add a metric to every experience bullet\n"
        "2. Mention Terraform if you have used it\n"
        "3) Move the skills section above education\n"
        "Score: 82"
    )
    return provider

