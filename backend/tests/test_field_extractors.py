from datetime import date

from careervision.services.field_extractors import (
    extract_certifications, extract_education, extract_experience, extract_personal_info,
    extract_projects, extract_skills, extract_summary
)
from careervision.services.segmenter import to_lines


def test_personal_info(sample_resume_text):
    info = extract_personal_info(to_lines(sample_resume_text))
    assert info.name == "Jane Doe"
    assert info.email == "jane.doe@example.com"
    assert info.phone == "(555) 123-4567"
    assert info.location == "Austin, TX"


def test_personal_info_misses_are_empty():
    info = extract_personal_info(["EXPERIENCE", "nothing useful here"])
    assert info.name is None
    assert info.email is None
    assert info.phone is None
    assert info.location is None


def test_skills_are_deduplicated_in_vocabulary_order(sample_resume_text):
    lines = to_lines(sample_resume_text)
    assert extract_skills(lines, sample_resume_text) == [
        "typescript", "python", "java", "go", "sql", "react", "django",
        "mysql", "aws", "docker", "git", "leadership",
    ]


def test_skill_terms_match_inside_longer_words():
    assert extract_skills([], "Built Dockerized ReactJS apps in JavaScript") == [
        "javascript", "java", "react", "docker"
    ]
    assert extract_skills([], "Go, C++ and Node.js") == ["c++", "go", "node.js"]


def test_experience_entries(sample_resume_text):
    jobs = extract_experience(to_lines(sample_resume_text))
    assert len(jobs) == 2

    acme, globex = jobs
    assert acme.title == "Senior Software Engineer"
    assert acme.company == "Acme Corp"
    assert acme.start_date == date(2019, 1, 1)
    assert acme.end_date == date(2021, 12, 1)
    assert acme.description == (
        "Built Python and Django services on AWS with Docker. Led a team of five engineers."
    )
    assert acme.skills == ["python", "go", "django", "aws", "docker"]

    assert globex.title == "Software Engineer"
    assert globex.company == "Globex"
    assert globex.start_date == date(2016, 1, 1)
    assert globex.end_date == date(2018, 1, 1)
    assert globex.skills == ["java", "sql", "mysql"]


def test_experience_without_company_segment():
    lines = ["Experience", "Freelance Developer", "Mar 2022 to present", "Client work"]
    [job] = extract_experience(lines)
    assert job.company == "Unknown Company"
    assert job.start_date == date(2022, 3, 1)
    assert job.end_date is None
    assert job.description == "Client work"


def test_experience_without_section():
    assert extract_experience(["Jane Doe", "Engineer 2019"]) == []


def test_education(sample_resume_text):
    [edu] = extract_education(to_lines(sample_resume_text))
    assert edu.degree == "Bachelor of Science in Computer Science"
    assert edu.institution == "University of Texas"
    assert edu.end_date == date(2012, 1, 1)
    assert edu.gpa == "3.8"


def test_certifications(sample_resume_text):
    certs = extract_certifications(to_lines(sample_resume_text))
    first = certs[0]
    assert first.name == "AWS Certified Solutions Architect"
    assert first.issuer == "Amazon Web Services 2020"
    assert first.date == date(2020, 1, 1)
    # The last line of the section has no following issuer line
    assert certs[-1].issuer == "Unknown"


def test_certification_url_is_picked_up():
    lines = ["Certifications", "Certified Kubernetes Administrator", "https://cncf.io/cert/123"]
    cert = extract_certifications(lines)[0]
    assert cert.url == "https://cncf.io/cert/123"


def test_projects(sample_resume_text):
    project = extract_projects(to_lines(sample_resume_text))[0]
    assert project.name == "Timeline Visualizer"
    assert project.description.startswith("Interactive career timeline")
    assert project.technologies == ["typescript", "react"]


def test_short_project_lines_are_skipped():
    assert extract_projects(["Projects", "CLI", "Misc"]) == []


def test_summary_after_heading(sample_resume_text):
    summary = extract_summary(to_lines(sample_resume_text))
    assert summary.startswith("Backend engineer who builds reliable Python services")
    assert len(summary) <= 500


def test_summary_fallback_uses_long_lines():
    lines = ["Jane", "A very long line describing nothing in particular", "short", "Another long line of resume text here"]
    assert extract_summary(lines) == (
        "A very long line describing nothing in particular Another long line of resume text here"
    )


def test_mixed_case_skill_is_reported_once():
    assert extract_skills([], "Python scripts and more python tooling") == ["python"]
