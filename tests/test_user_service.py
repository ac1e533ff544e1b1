import pytest

from daily_logger.schemas import AccountUpdate, SignUpRequest, WorkSchedulePeriod
from daily_logger.services.user_service import (
    get_responsibilities_summary,
    get_user_profile,
    hash_password,
    save_account_changes,
    sign_up_user,
    validate_account_update,
    verify_password,
)

WEEKDAYS = WorkSchedulePeriod(start="Monday", end="Friday", expected_time_in="07:30", expected_time_out="14:30")


def _sign_up(db, email="amani@example.com", password="secret-pass"):
    return sign_up_user(
        db,
        SignUpRequest(name="Amani", email=email, password=password, roles=["Intern"], work_schedule=[WEEKDAYS]),
    )


def _update(**overrides):
    values = dict(name="Amani", email="amani@example.com", roles=["Intern"], work_schedule=[WEEKDAYS])
    values.update(overrides)
    return AccountUpdate(**values)


def test_password_hash_round_trip():
    hashed = hash_password("secret-pass")

    assert hashed != "secret-pass"
    assert verify_password("secret-pass", hashed) is True
    assert verify_password("wrong", hashed) is False
    assert verify_password("secret-pass", "not-a-hash") is False


def test_sign_up_creates_user(db):
    response = _sign_up(db)

    assert response.success is True
    assert response.message == "Account created successfully!"
    profile = get_user_profile(db, response.id)
    assert profile.email == "amani@example.com"
    assert profile.roles == ["Intern"]
    assert profile.work_schedule == [WEEKDAYS]


def test_sign_up_rejects_duplicate_email(db):
    _sign_up(db)

    response = _sign_up(db)

    assert response.success is False
    assert response.message == "A user with this email already exists."


def test_sign_up_requires_fields(db):
    response = sign_up_user(db, SignUpRequest(name="Amani", email="amani@example.com", password="x", roles=[]))

    assert response.success is False
    assert response.message == "Please fill in all required fields."


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"name": " "}, "Name is required."),
        ({"email": "not-an-email"}, "Please enter a valid email address."),
        ({"roles": []}, "At least one role is required."),
        ({"new_password": "abcdef", "confirm_password": "abcdef"}, "Current password is required to set a new password."),
        (
            {"current_password": "x", "new_password": "abc", "confirm_password": "abc"},
            "New password must be at least 6 characters long.",
        ),
        ({"current_password": "x", "new_password": "abcdef", "confirm_password": "abcdeg"}, "New passwords do not match."),
        ({"work_schedule": []}, "At least one work period is required."),
    ],
)
def test_validate_account_update_messages(overrides, message):
    response = validate_account_update(_update(**overrides))

    assert response.success is False
    assert response.message == message


def test_save_account_changes_updates_profile_and_summary(db):
    user_id = _sign_up(db).id

    response = save_account_changes(
        db,
        user_id,
        _update(name="Amani Otieno", roles=["Intern", "Editor"], responsibilities="Maintain studio PCs"),
    )

    assert response.success is True
    profile = get_user_profile(db, user_id)
    assert profile.name == "Amani Otieno"
    assert profile.roles == ["Intern", "Editor"]
    assert get_responsibilities_summary(db, user_id) == "Maintain studio PCs"

    save_account_changes(db, user_id, _update(responsibilities="Support the editors"))
    assert get_responsibilities_summary(db, user_id) == "Support the editors"


def test_password_change_requires_correct_current_password(db):
    user_id = _sign_up(db).id

    wrong = save_account_changes(
        db, user_id, _update(current_password="nope", new_password="new-secret", confirm_password="new-secret")
    )
    right = save_account_changes(
        db, user_id, _update(current_password="secret-pass", new_password="new-secret", confirm_password="new-secret")
    )

    assert wrong.message == "Current password is incorrect."
    assert right.success is True


def test_save_account_changes_for_missing_user(db):
    response = save_account_changes(db, 99, _update())

    assert response.success is False
    assert response.message == "User not found."
