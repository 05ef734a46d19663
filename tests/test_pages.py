"""Route guard behaviour over HTTP and the page shells behind it."""
import pytest

LOGIN = "/api/v1/auth/login"
ADMIN = {"email": "d62809238@gmail.com", "password": "admin12345"}
STAFF = {"email": "staff1@gmail.com", "password": "staff001"}


def _get(client, path):
    return client.get(path, follow_redirects=False)


@pytest.mark.parametrize("path", ["/admin", "/admin/payroll", "/staff", "/staff/sales"])
def test_anonymous_navigation_redirects_to_login(client, path):
    resp = _get(client, path)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/login"


def test_staff_on_admin_page_lands_on_staff_dashboard(client):
    client.post(LOGIN, json=STAFF)

    resp = _get(client, "/admin/payroll")
    assert resp.status_code == 303
    assert resp.headers["location"] == "/staff"
    assert "payroll" not in resp.text


def test_admin_on_staff_page_lands_on_admin_dashboard(client):
    client.post(LOGIN, json=ADMIN)

    resp = _get(client, "/staff/stock")
    assert resp.status_code == 303
    assert resp.headers["location"] == "/admin"


def test_authorized_page_renders_shell(client):
    client.post(LOGIN, json=STAFF)

    resp = _get(client, "/staff/sales")
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["page"] == "sales"
    assert data["title"] == "Sales"
    assert data["role"] == "staff"
    assert data["user"] == {"id": "101", "email": "staff1@gmail.com"}
    assert data["actions"] == ["read", "create"]
    assert any(category["title"] == "Sales" for category in data["nav"])


def test_admin_dashboard_has_no_action_list(client):
    client.post(LOGIN, json=ADMIN)

    data = _get(client, "/admin").json()["data"]
    assert data["page"] == "dashboard"
    assert data["title"] == "Admin Dashboard"
    assert "actions" not in data


def test_logout_closes_access(client):
    client.post(LOGIN, json=ADMIN)
    assert _get(client, "/admin/reports").status_code == 200

    client.post("/api/v1/auth/logout")
    resp = _get(client, "/admin/reports")
    assert resp.status_code == 303
    assert resp.headers["location"] == "/login"


@pytest.mark.parametrize("path", ["/", "/login"])
def test_login_page_is_public(client, path):
    resp = _get(client, path)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["page"] == "login"
    assert data["demo_accounts"] == [
        {"role": "Admin", "email": "d62809238@gmail.com"},
        {"role": "Staff", "email": "staff1@gmail.com"},
    ]


def test_unknown_page_is_not_found(client):
    resp = _get(client, "/warehouse")
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "Page not found"


def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["storage"] == "memory"
    assert body["authenticated"] is False
