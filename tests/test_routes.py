import pytest

from skeleton.application import new_application
from skeleton.docs import swagger_spec
from skeleton.routes import register_routes


@pytest.fixture
def client(tmp_path):
    app = new_application(
        {
            "DB_SQLITE_PATH": str(tmp_path / "db.sqlite"),
            "LOG_PATH": "",
            "ENVIRONMENT": "production",
            "LOG_LEVEL": "error",
        }
    )
    register_routes(app)
    yield app.app.test_client()
    app.db.dispose()


def test_root_returns_ok(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json == {"type": "success", "message": "OK"}


def test_ping_returns_pong(client):
    response = client.get("/ping")
    assert response.json == {"type": "success", "message": "PONG"}


def test_example_route(client):
    response = client.get("/api/v1/example")
    assert response.status_code == 200
    assert response.json["message"] == "Handler or controller response example"
    assert response.json["data"]["name"] == "Contoh"
    assert response.json["data"]["id"] == 1


def test_example_route_rejects_post(client):
    assert client.post("/api/v1/example").status_code == 405


def test_swagger_doc_json_matches_spec(client):
    response = client.get("/swagger/doc.json")
    assert response.status_code == 200
    assert response.json == swagger_spec()


def test_swagger_root_redirects_to_index(client):
    response = client.get("/swagger/")
    assert response.status_code == 301
    assert response.headers["Location"].endswith("/swagger/index.html")


def test_swagger_index_is_html(client):
    response = client.get("/swagger/index.html")
    assert response.mimetype == "text/html"
    assert "Chatbot Expense" in response.get_data(as_text=True)


def test_swagger_unknown_file_is_not_found(client):
    assert client.get("/swagger/missing.js").status_code == 404


def test_routes_answer_cors_requests(client):
    response = client.get("/ping", headers={"Origin": "http://example.com"})
    assert response.headers["Access-Control-Allow-Origin"] == "*"