from datetime import datetime, timedelta, timezone

from hackclub.models.event import Event
from hackclub.models.team import Team
from hackclub.models.user import User
from hackclub.services.deadline import is_submission_window_open
from hackclub.services.membership import is_authorized_for_team


def make_team(leader_id, member_ids=()):
    team = Team(name="Code Warriors", event_id=1, leader_id=leader_id)
    team.members = [User(id=member_id, name=f"u{member_id}", email=f"u{member_id}@hackclub.io") for member_id in member_ids]
    return team


def test_leader_is_authorized_even_when_not_listed_as_member():
    team = make_team(leader_id=1, member_ids=[2])
    assert is_authorized_for_team(team, 1)


def test_member_is_authorized():
    team = make_team(leader_id=1, member_ids=[2, 3])
    assert is_authorized_for_team(team, 3)


def test_outsider_is_not_authorized():
    team = make_team(leader_id=1, member_ids=[2])
    assert not is_authorized_for_team(team, 99)


def test_window_open_without_end_date():
    event = Event(title="Open ended", end_date=None)
    assert is_submission_window_open(event)


def test_window_open_before_end_date():
    end = datetime(2030, 5, 1, 12, 0, tzinfo=timezone.utc)
    event = Event(title="Future", end_date=end)
    assert is_submission_window_open(event, now=end - timedelta(minutes=1))


def test_window_open_exactly_at_end_date():
    end = datetime(2030, 5, 1, 12, 0, tzinfo=timezone.utc)
    event = Event(title="Edge", end_date=end)
    assert is_submission_window_open(event, now=end)


def test_window_closed_after_end_date():
    end = datetime(2030, 5, 1, 12, 0, tzinfo=timezone.utc)
    event = Event(title="Past", end_date=end)
    assert not is_submission_window_open(event, now=end + timedelta(seconds=1))


def test_naive_end_date_is_read_as_utc():
    event = Event(title="Naive", end_date=datetime(2030, 5, 1, 12, 0))
    now = datetime(2030, 5, 1, 13, 0, tzinfo=timezone(timedelta(hours=2)))
    # 13:00 at UTC+2 is 11:00 UTC, still before the deadline
    assert is_submission_window_open(event, now=now)


def test_window_closed_for_past_end_date_using_clock():
    event = Event(title="Yesterday", end_date=datetime.now(timezone.utc) - timedelta(days=1))
    assert not is_submission_window_open(event)
