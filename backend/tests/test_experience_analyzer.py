from services.detectors.experience_analyzer import (
    analyze_experience,
    estimate_years_from_positions,
    extract_stated_years,
)


def test_stated_years_takes_largest():
    text = "3 years of experience in Go. Over 7+ years experience building APIs."
    assert extract_stated_years(text) == 7


def test_stated_years_none():
    assert extract_stated_years("Built APIs with FastAPI") == 0


def test_estimate_from_many_positions():
    text = "Work Experience\nSenior Engineer\nLead Developer\nAnalyst"
    assert estimate_years_from_positions(text) == 5


def test_estimate_from_few_positions():
    text = "Experience\nSoftware Engineer\nData Analyst"
    assert estimate_years_from_positions(text) == 3


def test_estimate_requires_work_section():
    assert estimate_years_from_positions("Senior Engineer\nLead Developer\nAnalyst") == 0


def test_stated_years_win_over_estimate():
    text = "Experience\nSenior Engineer\nLead Developer\nAnalyst\n2 years of experience"
    report = analyze_experience(text)
    assert report.years == 2
    assert not report.is_experienced


def test_experienced_threshold():
    report = analyze_experience("Engineer with 5 years of experience")
    assert report.years == 5
    assert report.is_experienced


def test_empty_text():
    report = analyze_experience("")
    assert report.years == 0
    assert not report.is_experienced
