"""Tests for alert generation, lifecycle and reporting."""

from datetime import timedelta

import pytest

from ludoteca.application.use_cases.alerts import (
    cleanup_resolved_alerts,
    create_custom_alert,
    delete_alert,
    generate_overdue_alerts,
    generate_reminder_alerts,
    get_alert,
    get_alerts_dashboard,
    get_alerts_summary_by_user,
    list_alerts_by_user,
    list_unread_alerts,
    mark_alert_as_read,
    mark_all_user_alerts_as_read,
    run_alert_jobs,
)
from ludoteca.application.use_cases.borrowings import borrow_game, return_game
from ludoteca.config import Settings
from ludoteca.domain.entities import AlertType
from ludoteca.domain.errors import InvalidArgumentError, NotFoundError, ValidationError


@pytest.fixture()
def overdue_loan(session, make_user, make_game, now):
    """A loan taken 20 days ago that was due 3 days ago."""

    user = make_user()
    game = make_game("Catan")
    borrowed_at = now - timedelta(days=20)
    borrowing = borrow_game(
        session,
        user_id=user.id,
        game_id=game.id,
        due_date=now - timedelta(days=3),
        now=borrowed_at,
    )
    return user, game, borrowing


def test_overdue_alert_names_game_and_deadline(session, overdue_loan, now):
    user, game, _ = overdue_loan

    [alert] = generate_overdue_alerts(session, now=now)

    assert alert.type is AlertType.OVERDUE
    assert alert.user_id == user.id
    assert alert.game_id == game.id
    assert alert.is_read is False
    assert "Catan" in alert.message
    assert "overdue by 3 day(s)" in alert.message
    assert "2024-02-27" in alert.message


def test_overdue_generation_is_idempotent(session, overdue_loan, now):
    generate_overdue_alerts(session, now=now)
    second_run = generate_overdue_alerts(session, now=now + timedelta(hours=1))

    assert second_run == []
    assert len(list_unread_alerts(session)) == 1


def test_read_alert_allows_a_new_one(session, overdue_loan, now):
    [alert] = generate_overdue_alerts(session, now=now)
    mark_alert_as_read(session, alert.id)

    [fresh] = generate_overdue_alerts(session, now=now + timedelta(days=1))

    assert fresh.id != alert.id
    assert get_alert(session, alert.id).is_read is True


def test_reminders_cover_only_loans_inside_window(
    session, make_user, make_game, now
):
    user = make_user()
    today, tomorrow, later = make_game("Dixit"), make_game("Azul"), make_game("Go")
    borrow_game(
        session,
        user_id=user.id,
        game_id=today.id,
        due_date=now + timedelta(hours=5),
        now=now,
    )
    borrow_game(
        session,
        user_id=user.id,
        game_id=tomorrow.id,
        due_date=now + timedelta(days=1, hours=2),
        now=now,
    )
    borrow_game(
        session,
        user_id=user.id,
        game_id=later.id,
        due_date=now + timedelta(days=7),
        now=now,
    )

    reminders = generate_reminder_alerts(session, now=now, window_days=2)

    by_game = {alert.game_id: alert for alert in reminders}
    assert set(by_game) == {today.id, tomorrow.id}
    assert "due today" in by_game[today.id].message
    assert "due in 1 day(s)" in by_game[tomorrow.id].message
    assert all(alert.type is AlertType.REMINDER for alert in reminders)
    assert generate_reminder_alerts(session, now=now, window_days=2) == []


def test_reminders_skip_overdue_loans(session, overdue_loan, now):
    assert generate_reminder_alerts(session, now=now, window_days=2) == []


@pytest.mark.parametrize("window_days", [-1, 10**9])
def test_reminder_window_must_be_a_sane_number_of_days(session, now, window_days):
    with pytest.raises(ValidationError):
        generate_reminder_alerts(session, now=now, window_days=window_days)


def test_custom_alerts_are_validated_and_not_deduplicated(
    session, make_user, make_game
):
    user = make_user()
    game = make_game()

    first = create_custom_alert(
        session,
        user_id=user.id,
        game_id=game.id,
        alert_type="custom",
        message="Please bring the box back",
    )
    second = create_custom_alert(
        session,
        user_id=user.id,
        game_id=game.id,
        alert_type="custom",
        message="Please bring the box back",
    )

    assert first.id != second.id
    assert first.type is AlertType.CUSTOM


@pytest.mark.parametrize(
    ("overrides", "error"),
    [
        ({"user_id": 0}, InvalidArgumentError),
        ({"game_id": -1}, InvalidArgumentError),
        ({"user_id": 999}, NotFoundError),
        ({"game_id": 999}, NotFoundError),
        ({"alert_type": "urgent"}, ValidationError),
        ({"message": "   "}, ValidationError),
        ({"message": "Hey"}, ValidationError),
        ({"message": "x" * 501}, ValidationError),
    ],
)
def test_custom_alert_rejects_bad_input(
    session, make_user, make_game, overrides, error
):
    user = make_user()
    game = make_game()
    arguments = {
        "user_id": user.id,
        "game_id": game.id,
        "alert_type": "custom",
        "message": "A perfectly fine message",
    }
    arguments.update(overrides)

    with pytest.raises(error):
        create_custom_alert(session, **arguments)


def test_mark_read_and_delete_missing_alert(session):
    with pytest.raises(NotFoundError, match="alert not found"):
        mark_alert_as_read(session, 77)
    with pytest.raises(NotFoundError, match="alert not found"):
        delete_alert(session, 77)


def test_delete_alert(session, overdue_loan, now):
    [alert] = generate_overdue_alerts(session, now=now)

    delete_alert(session, alert.id)

    with pytest.raises(NotFoundError):
        get_alert(session, alert.id)


def test_mark_all_user_alerts_as_read(session, overdue_loan, make_game, now):
    user, _, _ = overdue_loan
    create_custom_alert(
        session,
        user_id=user.id,
        game_id=make_game().id,
        alert_type="custom",
        message="Welcome to the library",
    )
    generate_overdue_alerts(session, now=now)

    assert mark_all_user_alerts_as_read(session, user.id) == 2
    assert list_alerts_by_user(session, user.id, unread_only=True) == []
    assert len(list_alerts_by_user(session, user.id)) == 2


def test_cleanup_removes_only_resolved_generated_alerts(
    session, overdue_loan, make_user, make_game, now
):
    user, game, borrowing = overdue_loan
    other_user = make_user()
    other_game = make_game()
    borrow_game(
        session,
        user_id=other_user.id,
        game_id=other_game.id,
        due_date=now + timedelta(days=1),
        now=now,
    )
    generate_overdue_alerts(session, now=now)
    generate_reminder_alerts(session, now=now, window_days=2)
    create_custom_alert(
        session,
        user_id=user.id,
        game_id=game.id,
        alert_type="custom",
        message="Staff note about the late game",
    )

    assert cleanup_resolved_alerts(session) == 0

    return_game(session, borrowing.id, now=now)
    removed = cleanup_resolved_alerts(session)

    remaining = list_unread_alerts(session)
    assert removed == 1
    assert {(alert.user_id, alert.type) for alert in remaining} == {
        (other_user.id, AlertType.REMINDER),
        (user.id, AlertType.CUSTOM),
    }


def test_summary_and_dashboard_group_unread_alerts(
    session, overdue_loan, make_user, make_game, now
):
    user, _, _ = overdue_loan
    other = make_user()
    borrow_game(
        session,
        user_id=other.id,
        game_id=make_game().id,
        due_date=now + timedelta(days=1),
        now=now,
    )
    generate_overdue_alerts(session, now=now)
    generate_reminder_alerts(session, now=now, window_days=2)
    custom = create_custom_alert(
        session,
        user_id=other.id,
        game_id=make_game().id,
        alert_type="custom",
        message="Game night on Friday",
    )
    mark_alert_as_read(session, custom.id)

    summaries = get_alerts_summary_by_user(session)

    assert set(summaries) == {user.id, other.id}
    assert summaries[user.id].overdue_count == 1
    assert summaries[other.id].reminder_count == 1
    assert summaries[other.id].total_alerts == 1

    dashboard = get_alerts_dashboard(session)
    assert dashboard.total_alerts == 2
    assert dashboard.total_overdue == 1
    assert dashboard.total_reminders == 1
    assert dashboard.users_with_alerts == 2


def test_run_alert_jobs_honours_settings(session, overdue_loan, make_user, make_game, now):
    borrower = make_user()
    borrow_game(
        session,
        user_id=borrower.id,
        game_id=make_game().id,
        due_date=now + timedelta(days=1),
        now=now,
    )

    report = run_alert_jobs(
        session,
        Settings(_env_file=None, enable_reminder_alerts=False),
        now=now,
    )
    assert report.overdue_created == 1
    assert report.reminders_created == 0

    report = run_alert_jobs(session, Settings(_env_file=None), now=now)
    assert report.overdue_created == 0
    assert report.reminders_created == 1
    assert report.alerts_cleaned == 0
