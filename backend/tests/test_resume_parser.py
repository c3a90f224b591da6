from careervision.services.field_extractors import FIELD_EXTRACTORS
from careervision.services.resume_parser import parse_resume


def test_full_resume(sample_resume_text):
    profile = parse_resume(sample_resume_text)
    assert profile.personal_info.email == "jane.doe@example.com"
    assert len(profile.experience) == 2
    assert len(profile.education) == 1
    assert profile.certifications
    assert profile.projects
    assert "python" in profile.skills
    assert profile.extraction_errors == {}


def test_blank_input_gives_empty_profile():
    for text in ("", "   \n\t "):
        profile = parse_resume(text)
        assert profile.skills == []
        assert profile.experience == []
        assert profile.summary == ""
        assert profile.personal_info.email is None


def test_resume_without_headings():
    profile = parse_resume("Jane Doe\njane@example.com\nI like Python and Docker a lot.")
    assert profile.personal_info.email == "jane@example.com"
    assert profile.skills == ["python", "docker"]
    assert profile.summary == "I like Python and Docker a lot."
    assert profile.experience == []
    assert profile.education == []
    assert profile.certifications == []
    assert profile.projects == []


def test_failing_extractor_is_isolated(sample_resume_text):
    def broken(lines, text):
        raise RuntimeError("boom")

    extractors = dict(FIELD_EXTRACTORS, education=broken)
    profile = parse_resume(sample_resume_text, extractors=extractors)

    assert profile.education == []
    assert profile.extraction_errors == {"education": "boom"}
    # Other fields still contribute
    assert len(profile.experience) == 2
    assert profile.personal_info.name == "Jane Doe"
