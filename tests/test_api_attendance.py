import pytest

from hackclub.models.user import RoleType


@pytest.fixture
def roll_call(make_user, make_event):
    lead = make_user("Roll Lead", RoleType.LEAD)
    event = make_event("Meetup", creator=lead)
    return {"lead": lead, "event": event}


def mark(client, headers, event, user, status=None):
    body = {"eventId": event.id, "userId": user.id}
    if status:
        body["status"] = status
    return client.post("/api/attendance", json=body, headers=headers)


def test_lead_marks_attendance(client, auth_headers, make_user, roll_call):
    attendee = make_user("Attendee")

    response = mark(client, auth_headers(roll_call["lead"]), roll_call["event"], attendee)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "present"
    assert body["userName"] == "Attendee"
    assert body["userEmail"] == "attendee@hackclub.io"
    assert body["markedAt"] is not None


def test_attendance_is_marked_once(client, auth_headers, make_user, roll_call):
    attendee = make_user("Twice")
    headers = auth_headers(roll_call["lead"])

    mark(client, headers, roll_call["event"], attendee)
    response = mark(client, headers, roll_call["event"], attendee, status="absent")

    assert response.status_code == 409
    assert response.json()["detail"] == "Attendance already marked for this user"


def test_mark_for_missing_user(client, auth_headers, roll_call):
    response = client.post(
        "/api/attendance",
        json={"eventId": roll_call["event"].id, "userId": 999},
        headers=auth_headers(roll_call["lead"]),
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


def test_mark_for_missing_event(client, auth_headers, make_user, roll_call):
    response = client.post(
        "/api/attendance",
        json={"eventId": 999, "userId": make_user("Nowhere").id},
        headers=auth_headers(roll_call["lead"]),
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Event not found"


@pytest.mark.parametrize("role", [RoleType.USER, RoleType.JUDGE])
def test_plain_roles_cannot_mark(client, auth_headers, make_user, roll_call, role):
    actor = make_user(f"Actor {role.value}", role)

    response = mark(client, auth_headers(actor), roll_call["event"], actor)

    assert response.status_code == 403


def test_list_attendance_newest_first(client, auth_headers, make_user, roll_call):
    headers = auth_headers(roll_call["lead"])
    first = make_user("Early Bird")
    second = make_user("Late Comer")
    mark(client, headers, roll_call["event"], first)
    mark(client, headers, roll_call["event"], second, status="absent")

    response = client.get(f"/api/attendance/{roll_call['event'].id}", headers=auth_headers(first))

    assert response.status_code == 200
    assert [record["userName"] for record in response.json()] == ["Late Comer", "Early Bird"]
    assert response.json()[0]["status"] == "absent"


def test_export_attendance_csv(client, auth_headers, make_user, roll_call):
    headers = auth_headers(roll_call["lead"])
    mark(client, headers, roll_call["event"], make_user("Csv Person"))

    response = client.get(f"/api/attendance/{roll_call['event'].id}/export", headers=headers)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"] == (
        f'attachment; filename="attendance-{roll_call["event"].id}.csv"'
    )
    lines = response.text.strip().split("\n")
    assert lines[0] == "Name,Email,Status,Time"
    assert lines[1].startswith("Csv Person,csv.person@hackclub.io,present,")
    assert len(lines) == 2


def test_export_for_event_without_records_has_only_header(client, auth_headers, roll_call):
    response = client.get(
        f"/api/attendance/{roll_call['event'].id}/export", headers=auth_headers(roll_call["lead"])
    )
    assert response.text == "Name,Email,Status,Time\n"


def test_export_requires_organizer_role(client, auth_headers, make_user, roll_call):
    response = client.get(
        f"/api/attendance/{roll_call['event'].id}/export", headers=auth_headers(make_user("Curious"))
    )
    assert response.status_code == 403
