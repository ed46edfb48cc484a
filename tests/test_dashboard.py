"""Tests for the dashboard statistics endpoint."""

from datetime import date


def test_statistics(client, admin_headers, make_user, make_division, make_position):
    engineering = make_division("ENG", "Engineering")
    operations = make_division("OPS", "Operations")
    developer = make_position("DEV", "Developer")
    make_user("dev@x.com", division_id=engineering.id, position_id=developer.id)
    make_user("gone@x.com", division_id=engineering.id, is_active=False)
    make_user("ops@x.com", division_id=operations.id, join_date=date.today())

    response = client.get("/api/dashboard/statistics", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "total_users": 4,
        "active_users": 3,
        "total_divisions": 2,
        "total_positions": 1,
        "users_per_division": [
            {"division": "Engineering", "count": 1},
            {"division": "Operations", "count": 1},
        ],
        "users_per_position": [{"position": "Developer", "count": 1}],
        "new_users_this_month": 1,
    }


def test_empty_groups(client, admin_headers):
    body = client.get("/api/dashboard/statistics", headers=admin_headers).json()

    assert body["total_users"] == 1
    assert body["users_per_division"] == []
    assert body["users_per_position"] == []


def test_statistics_require_token(client):
    response = client.get("/api/dashboard/statistics")

    assert response.status_code == 401
