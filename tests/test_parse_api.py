from fastapi.testclient import TestClient

from resume_sections.config import settings
from resume_sections.main import app

client = TestClient(app)


def test_health():
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["status"] == "running"


def test_list_sections():
    r = client.get("/sections")
    assert r.status_code == 200
    assert r.json() == ["demographics", "education", "employment", "projects", "skills", "references"]


def test_parse_demographics():
    r = client.post(
        "/parse/demographics",
        json={"text": "Jane Smith | Austin, TX | (512) 555-0199 | jane.smith@gmail.com"},
    )
    assert r.status_code == 200
    data = r.json()

    assert data["section_type"] == "demographics"
    assert data["result"]["name"] == "Jane Smith"
    assert data["result"]["email"] == "jane.smith@gmail.com"
    assert data["result"]["objective"] == ""


def test_parse_skills():
    r = client.post("/parse/skills", json={"text": "Python, python, PYTHON"})
    assert r.status_code == 200
    assert r.json() == {"section_type": "skills", "result": ["Python"]}


def test_parse_employment_returns_keyed_records():
    r = client.post(
        "/parse/employment",
        json={"text": "Software Engineer | Google | Mountain View, CA | Jan 2020 - Present"},
    )
    assert r.status_code == 200
    job = r.json()["result"]["current"]
    assert job["title"] == "Software Engineer"
    assert job["company"] == "Google"
    assert job["location"] == "Mountain View, CA"


def test_parse_with_custom_config():
    r = client.post("/parse/skills", json={"text": "Python/Go/Rust", "config": {"delimiters": ["/"]}})
    assert r.status_code == 200
    assert r.json()["result"] == ["Python", "Go", "Rust"]


def test_unknown_section_is_404():
    r = client.post("/parse/invalid_section", json={"text": "anything"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Unknown section type: invalid_section"


def test_bad_config_is_422():
    r = client.post("/parse/skills", json={"text": "Python", "config": {"delimiter": [","]}})
    assert r.status_code == 422
    assert "skills" in r.json()["detail"]


def test_text_over_limit_is_413():
    r = client.post("/parse/skills", json={"text": "x" * (settings.max_text_length + 1)})
    assert r.status_code == 413


def test_section_config_is_json():
    r = client.get("/sections/education/config")
    assert r.status_code == 200
    data = r.json()

    assert isinstance(data["patterns"]["year"], str)
    assert "honors" in data["keywords"]
    assert data["honors_window"] == 50


def test_section_config_round_trips_through_parse():
    config = client.get("/sections/skills/config").json()
    r = client.post("/parse/skills", json={"text": "Python, SQL", "config": config})
    assert r.status_code == 200
    assert r.json()["result"] == ["Python", "SQL"]


def test_unknown_section_config_is_404():
    r = client.get("/sections/hobbies/config")
    assert r.status_code == 404


def test_openapi_schema_uses_app_name():
    r = client.get("/openapi.json")
    assert r.status_code == 200
    assert r.json()["info"]["title"] == settings.app_name
