from user_desk.app.domain.models.user_record import UserRecord
from user_desk.app.ui.listing_view import USER_COLUMNS, row_values


def test_row_values_follow_column_order() -> None:
    record = UserRecord(1, "John", "Doe", "j@x.com", "N/A")

    assert [column.label for column in USER_COLUMNS] == ["ID", "First Name", "Last Name", "Email", "Department"]
    assert row_values(record) == ("1", "John", "Doe", "j@x.com", "N/A")


def test_record_payload_uses_wire_keys() -> None:
    payload = {"id": 5, "firstName": "A", "lastName": "", "email": "a@b.co", "department": "Ops"}

    assert UserRecord.from_payload(payload).to_payload() == payload
