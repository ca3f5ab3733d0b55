"""
API tests for the biography router: status codes, envelopes, end-to-end interview flow.
Uses FastAPI TestClient with get_db overridden to an in-memory SQLite database (see conftest).
Requires: fastapi, httpx.
"""
import pytest

Q_GRATEFUL = "What are you most grateful for in your life?"


def _create(client, name="Jane Doe", level="ultra_brief"):
    r = client.post("/biography/sessions", json={"subject_name": name, "detail_level": level})
    assert r.status_code == 200, r.text
    return r.json()["session"]


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_levels_include_question_counts(client):
    levels = client.get("/biography/levels").json()["levels"]
    assert [lvl["id"] for lvl in levels][0] == "ultra_brief"
    counts = [lvl["question_count"] for lvl in levels]
    assert counts == sorted(counts)


def test_questions_requires_known_level(client):
    assert client.get("/biography/questions").status_code == 400
    r = client.get("/biography/questions", params={"level": "epic"})
    assert r.status_code == 400
    assert "Unknown detail level" in r.json()["detail"]
    plan = client.get("/biography/questions", params={"level": "brief"}).json()["plan"]
    assert plan[0]["id"] == "basic_info"


def test_create_session_errors(client):
    r = client.post("/biography/sessions", json={"subject_name": "", "detail_level": "brief"})
    assert r.status_code == 400
    r = client.post("/biography/sessions", json={"subject_name": "Jane", "detail_level": "huge"})
    assert r.status_code == 400


def test_end_to_end_jane_doe(client):
    session = _create(client)
    assert session["status"] == "in_progress"
    r = client.post(
        f"/biography/sessions/{session['id']}/responses",
        json={"topic": "reflections", "question": Q_GRATEFUL, "answer": "my family"},
    )
    assert r.status_code == 200, r.text
    r = client.post(f"/biography/sessions/{session['id']}/generate")
    assert r.status_code == 200, r.text
    draft = r.json()["draft"]
    assert "# The Life of Jane Doe" in draft
    assert "## Life Reflections" in draft
    assert "my family." in draft
    detail = client.get(f"/biography/sessions/{session['id']}").json()
    assert detail["session"]["status"] == "draft_generated"
    assert detail["session"]["draft"] == draft


def test_generate_without_responses_is_400(client):
    session = _create(client)
    r = client.post(f"/biography/sessions/{session['id']}/generate")
    assert r.status_code == 400
    assert "No responses" in r.json()["detail"]
    assert client.post("/biography/sessions/9999/generate").status_code == 404


def test_save_response_upsert_and_validation(client):
    sid = _create(client)["id"]
    url = f"/biography/sessions/{sid}/responses"
    first = client.post(url, json={"topic": "legacy", "question": "Q", "answer": "one"}).json()["response"]
    second = client.post(url, json={"topic": "legacy", "question": "Q", "answer": "two"}).json()["response"]
    assert first["id"] == second["id"]
    assert second["answer"] == "two"
    assert client.post(url, json={"topic": "legacy", "question": "Q"}).status_code == 400
    assert client.post("/biography/sessions/9999/responses", json={"topic": "t", "question": "q", "answer": "a"}).status_code == 404
    responses = client.get(f"/biography/sessions/{sid}").json()["responses"]
    assert len(responses) == 1


def test_delete_response_idempotent(client):
    sid = _create(client)["id"]
    rid = client.post(
        f"/biography/sessions/{sid}/responses", json={"topic": "legacy", "question": "Q", "answer": "A"}
    ).json()["response"]["id"]
    assert client.delete(f"/biography/sessions/{sid}/responses/{rid}").json() == {"ok": True}
    assert client.delete(f"/biography/sessions/{sid}/responses/{rid}").json() == {"ok": True}
    assert client.delete(f"/biography/sessions/9999/responses/{rid}").status_code == 404


def test_delete_session(client):
    sid = _create(client)["id"]
    client.post(f"/biography/sessions/{sid}/responses", json={"topic": "legacy", "question": "Q", "answer": "A"})
    assert client.delete(f"/biography/sessions/{sid}").json() == {"ok": True}
    assert client.get(f"/biography/sessions/{sid}").status_code == 404
    assert client.delete(f"/biography/sessions/{sid}").status_code == 404


def test_list_sessions(client):
    a = _create(client, "Ann")
    _create(client, "Bob")
    client.post(f"/biography/sessions/{a['id']}/responses", json={"topic": "legacy", "question": "Q", "answer": "A"})
    sessions = client.get("/biography/sessions").json()["sessions"]
    assert sessions[0]["subject_name"] == "Ann"
    assert sessions[0]["response_count"] == 1
    assert sessions[1]["response_count"] == 0


def test_interview_state_resumes_after_last_answer(client):
    sid = _create(client)["id"]
    plan = client.get("/biography/questions", params={"level": "ultra_brief"}).json()["plan"]
    first_topic = plan[0]
    for q in first_topic["questions"]:
        client.post(f"/biography/sessions/{sid}/responses", json={"topic": first_topic["id"], "question": q, "answer": "A"})
    state = client.get(f"/biography/sessions/{sid}/interview").json()
    assert state["cursor"] == {"topic_index": 1, "question_index": 0}
    assert state["topic_id"] == plan[1]["id"]
    assert state["question"] == plan[1]["questions"][0]
    assert state["existing_answer"] is None
    assert state["progress"]["answered"] == len(first_topic["questions"])
    assert state["topics"][0]["complete"] is True
    assert state["is_first"] is False


def test_navigate(client):
    sid = _create(client)["id"]
    url = f"/biography/sessions/{sid}/navigate"
    r = client.post(url, json={"action": "advance", "cursor": {"topic_index": 0, "question_index": 0}})
    assert r.json()["cursor"] == {"topic_index": 0, "question_index": 1}
    r = client.post(url, json={"action": "retreat", "cursor": {"topic_index": 1, "question_index": 0}})
    assert r.json()["cursor"] == {"topic_index": 0, "question_index": 1}
    r = client.post(url, json={"action": "jump", "topic_index": 2})
    assert r.json()["cursor"] == {"topic_index": 2, "question_index": 0}
    assert client.post(url, json={"action": "jump", "topic_index": 99}).status_code == 400
    assert client.post(url, json={"action": "advance", "cursor": {"topic_index": 99, "question_index": 0}}).status_code == 400
    assert client.post(url, json={"action": "fly"}).status_code == 422


@pytest.mark.parametrize("path,method", [("draft.md", "get"), ("export", "post")])
def test_draft_downloads(client, path, method):
    sid = _create(client)["id"]
    url = f"/biography/sessions/{sid}/{path}"
    assert getattr(client, method)(url).status_code == 404
    client.post(f"/biography/sessions/{sid}/responses", json={"topic": "reflections", "question": Q_GRATEFUL, "answer": "my family"})
    client.post(f"/biography/sessions/{sid}/generate")
    r = getattr(client, method)(url)
    assert r.status_code == 200
    assert "Life%20Story" in r.headers["content-disposition"]
    if path == "draft.md":
        assert r.text.startswith("# The Life of Jane Doe")
    else:
        assert r.content[:2] == b"PK"
