"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

import resumeroast.services.rate_limit as rate_limit_module
from resumeroast.config import Settings
from resumeroast.main import app
from resumeroast.services.rate_limit import limiter


WEAK_RESUME = """John Smith
Experience
Office Clerk, City Services, 2018 - 2022
- Responsible for various tasks around the office
- Helped with filing and data entry for the team
- Answered phones and greeted visitors
Education
Diploma, Lincoln High, 2014
"""

STRONG_RESUME = """Jane Doe
Senior Software Engineer | https://github.com/janedoe | https://janedoe.dev | https://linkedin.com/in/janedoe

Summary
Senior backend engineer with 8 years of experience building distributed systems.

Experience
Staff Engineer, Acme Corp (Jan 2019 - Present)
- Architected a real-time billing pipeline on Kafka and PostgreSQL handling 2M requests per day
- Reduced p99 latency by 45% by migrating services from Flask to Go microservices
- Led a team of 6 engineers and mentored 3 junior developers to promotion
- Increased deployment frequency 4x by building CI/CD pipelines on Jenkins and Docker
- Saved $250,000 per year by optimizing AWS spend across 40 EC2 instances

Projects
- Shipped an open-source Redis rate limiter used by 1,200+ users (https://github.com/janedoe/limiter)
- Built a React and TypeScript dashboard for Kubernetes cluster health

Skills
Python, Go, TypeScript, React, Kafka, PostgreSQL, Redis, Docker, Kubernetes, Terraform, AWS, Linux

Education
B.S. Computer Science, Georgia Tech, 2016

Certifications
AWS Certified Solutions Architect
"""


@pytest.fixture
def weak_resume() -> str:
    return WEAK_RESUME


@pytest.fixture
def strong_resume() -> str:
    return STRONG_RESUME


@pytest.fixture
def client():
    """Test client with empty rate-limit counters."""
    limiter.reset()
    yield TestClient(app)
    limiter.reset()


@pytest.fixture
def throttled_client(client, monkeypatch):
    """Test client allowing only two requests per endpoint."""
    monkeypatch.setattr(rate_limit_module, "get_settings", lambda: Settings(rate_limit_requests=2))
    return client
