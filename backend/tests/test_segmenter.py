from careervision.services.segmenter import SECTION_KEYWORDS, find_section, section_body, to_lines


def test_to_lines_trims_and_drops_blanks():
    assert to_lines("  a  \n\n\t\nb\r\n c") == ["a", "b", "c"]
    assert to_lines("") == []


def test_section_runs_until_next_heading():
    lines = ["Jane", "Experience", "Engineer", "2020 - 2021", "Education", "BSc"]
    assert find_section(lines, SECTION_KEYWORDS["experience"]) == (1, 4)


def test_section_runs_to_end_without_later_heading():
    lines = ["Jane", "Work History", "Engineer"]
    assert find_section(lines, SECTION_KEYWORDS["experience"]) == (1, 3)


def test_missing_heading_gives_empty_range():
    lines = ["Jane", "Engineer"]
    assert find_section(lines, SECTION_KEYWORDS["education"]) == (0, 0)
    assert section_body(lines, "education") == []


def test_summary_words_do_not_terminate_a_section():
    lines = ["Experience", "Engineer", "Worked on profile pages", "Skills", "Python"]
    assert find_section(lines, SECTION_KEYWORDS["experience"]) == (0, 3)


def test_heading_match_is_case_insensitive_substring():
    lines = ["PROFESSIONAL EXPERIENCE", "Engineer", "TECHNICAL SKILLS"]
    assert find_section(lines, SECTION_KEYWORDS["experience"]) == (0, 2)
    assert section_body(lines, "experience") == ["Engineer"]
