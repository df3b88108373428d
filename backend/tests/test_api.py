from fastapi.testclient import TestClient
import pytest

from main import create_app
from services.matching.skill_taxonomy import DEFAULT_CATALOG


@pytest.fixture
def client(repository):
    return TestClient(create_app(repository))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["taxonomy_skills"] == len(DEFAULT_CATALOG)


class TestMatchEndpoints:
    def test_calculate(self, client):
        response = client.post("/matching/calculate", json={"candidate_id": "cand-strong", "job_id": "job-1"})
        assert response.status_code == 200
        data = response.json()
        assert data["overall"] == 93
        assert data["breakdown"]["location"]["match_type"] == "exact"
        assert data["weights"]["skills"] == 0.4

    def test_calculate_with_weights(self, client):
        response = client.post(
            "/matching/calculate",
            json={
                "candidate_id": "cand-strong",
                "job_id": "job-1",
                "skills_weight": 1.0,
                "experience_weight": 0,
                "education_weight": 0,
                "location_weight": 0,
                "title_weight": 0,
            },
        )
        assert response.status_code == 200
        assert response.json()["overall"] == 90

    def test_calculate_not_found(self, client):
        response = client.post("/matching/calculate", json={"candidate_id": "ghost", "job_id": "job-1"})
        assert response.status_code == 404
        assert response.json()["detail"] == "Candidate or Job not found"

    def test_calculate_rejects_bad_weight(self, client):
        response = client.post(
            "/matching/calculate",
            json={"candidate_id": "cand-strong", "job_id": "job-1", "skills_weight": 1.5},
        )
        assert response.status_code == 422

    def test_job_matches(self, client):
        response = client.post("/matching/job-matches", json={"job_id": "job-1"})
        assert response.status_code == 200
        data = response.json()
        assert [r["candidate_id"] for r in data] == ["cand-strong", "cand-weak"]
        assert data[0]["match_score"]["overall"] == 93

    def test_job_matches_unknown_job(self, client):
        response = client.post("/matching/job-matches", json={"job_id": "ghost"})
        assert response.status_code == 404

    def test_update_application_score(self, client, repository):
        response = client.post("/matching/application/app-strong/update-score")
        assert response.status_code == 200
        assert response.json()["message"] == "Match score updated successfully"
        assert repository.applications["app-strong"].custom_fields["matchScore"] == 93

    def test_update_unknown_application(self, client):
        response = client.post("/matching/application/ghost/update-score")
        assert response.status_code == 404
        assert response.json()["detail"] == "Application not found"


class TestSkillEndpoints:
    def test_skill_match(self, client):
        response = client.post(
            "/matching/skills/calculate",
            json={
                "candidate_skills": ["JavaScript", "React"],
                "required_skills": ["React", "Node.js"],
                "preferred_skills": ["TypeScript"],
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 86
        assert data["matched_preferred"] == ["TypeScript"]

    def test_extract(self, client):
        response = client.post("/matching/skills/extract", json={"text": "Built services in Golang on k8s"})
        assert response.status_code == 200
        assert response.json()["skills"] == ["Go", "Kubernetes"]

    def test_normalize(self, client):
        response = client.post("/matching/skills/normalize", json={"skills": ["js", "Postgres"]})
        assert response.json()["normalized"] == ["JavaScript", "PostgreSQL"]

    def test_suggestions(self, client):
        response = client.post("/matching/skills/suggestions", json={"skills": ["JavaScript"], "limit": 2})
        assert response.json()["suggestions"] == ["TypeScript", "Node.js"]


class TestTitleAndTaxonomyEndpoints:
    def test_title_suggestions(self, client):
        response = client.get("/matching/titles/Senior Software Engineer/suggestions", params={"limit": 2})
        assert response.status_code == 200
        assert response.json()["suggestions"] == ["software developer", "programmer"]

    def test_categories(self, client):
        response = client.get("/matching/taxonomy/categories")
        assert response.status_code == 200
        assert "Databases" in response.json()["categories"]

    def test_category_skills(self, client):
        response = client.get("/matching/taxonomy/categories/Testing")
        assert response.json()["skills"] == ["Jest", "Pytest", "JUnit"]

    def test_unknown_category(self, client):
        response = client.get("/matching/taxonomy/categories/Cooking")
        assert response.status_code == 404
