"""Shared test configuration, pytest markers and sample resumes."""

import pytest

# Clean two-page resume: name and contact on top, dated roles, six
# experience bullets, four metrics, no summary section.
STRONG_RESUME = """\
Jane Doe
jane.doe@example.com | (555) 123-4567 | Austin, TX

EXPERIENCE
Senior Software Engineer, Acme Corp
Jan 2019 - Mar 2023
• Built a billing service that cut invoice errors by 30%
• Led a team of 5 engineers through a platform migration
• Reduced cloud spend by $50K per year with autoscaling
• Designed an event pipeline handling 2M messages daily
• Automated release checks, saving 10 hours per week
• Mentored 4 developers across 3 projects in code review
Owned the payments roadmap together with the product lead
and worked closely with finance, support and security
teams to keep the platform stable during peak seasons.
The billing platform served merchants in twelve markets
and processed card, bank and wallet payments every day.
On call duties covered the API gateway, the ledger and
the reporting jobs that fed the monthly close process.

Software Engineer, Globex Inc
Jun 2016 - Dec 2018
Worked on the customer portal built with Django, React
and PostgreSQL, shipping features for account settings,
invoices and notifications used by paying customers.
Wrote integration tests and helped move the build from
a shared Jenkins server to hosted continuous integration.
Took part in design reviews and sprint planning with a
cross functional group of designers and product owners.
Supported the data team by exposing clean export jobs
and documenting the schema of the reporting database.

PROJECTS
Open source contributor to a Python library for parsing
calendar files, adding timezone handling and test cases.
Maintainer of a small command line tool that checks
broken links in static sites and reports them in CI.
Built a home automation dashboard with FastAPI and Vue
that shows energy use and controls lights and heating.

EDUCATION
B.S. Computer Science, University of Texas, 2016
Coursework in algorithms, distributed systems, databases
and computer networks, with a capstone on search ranking.
Teaching assistant for the introductory programming
course, running weekly labs for groups of students.

SKILLS
Languages: Python, Go, TypeScript, SQL and Bash
Frameworks: Django, FastAPI, React, Celery and pytest
Cloud and infrastructure: AWS, Docker, Kubernetes,
Terraform, GitHub Actions, Prometheus and Grafana
Practices: code review, testing, incident response,
observability, capacity planning and documentation

CERTIFICATIONS
AWS Certified Solutions Architect Associate, 2021
Certified Kubernetes Application Developer, 2022

ADDITIONAL INFORMATION
Speaker at the local Python meetup on payment systems
and on building reliable background job processing.
Volunteer mentor for a coding bootcamp that helps
career changers prepare for their first engineering
role, reviewing portfolios and running mock interviews.
Fluent in English and Spanish, conversational German.
Enjoys trail running, cycling and landscape photography
and organizes a monthly hiking group for colleagues.
"""

# Same candidate squeezed into a few lines with placeholder dates.
WEAK_RESUME = """\
Jane Doe
jane.doe@example.com

Experience
Software Engineer, Acme Corp
20XX - Present
Worked on billing and payments.
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: runs the full analysis flow with external services patched"
    )


@pytest.fixture
def strong_resume() -> str:
    return STRONG_RESUME


@pytest.fixture
def weak_resume() -> str:
    return WEAK_RESUME


@pytest.fixture
def two_pages():
    return lambda: 2
