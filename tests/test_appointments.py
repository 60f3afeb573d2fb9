from datetime import date

from sqlalchemy.orm import Session

from app.repositories.appointment import create_appointment, get_appointment_by_id


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


# ============================================================================
# CREATE APPOINTMENT TESTS
# ============================================================================


def test_create_appointment_success(
    client, db: Session, staff_token: str, staff_user_dict: dict, pet
):
    response = client.post(
        "/api/v1/appointments",
        json={"pet_id": pet.id, "date": "2025-09-29", "description": "Check"},
        headers=auth(staff_token),
    )
    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["user_id"] == str(staff_user_dict["id"])
    assert data["pet_id"] == str(pet.id)
    assert data["owner"] == pet.owner_id
    assert data["message"] == "Appointment created and notifications sent!"
    assert data["appointment"]["user_id"] == staff_user_dict["id"]
    assert data["appointment"]["date"] == "2025-09-29"


def test_create_appointment_notifies_subscribers(client, db: Session, staff_token: str):
    from app.main import app

    created = client.post(
        "/api/v1/pets",
        json={"name": "Nemo", "species": "Fish", "owner": {"name": "Marlin"}},
        headers=auth(staff_token),
    ).json()

    response = client.post(
        "/api/v1/appointments",
        json={"pet_id": created["id"], "date": "2025-10-01", "description": "Fin check"},
        headers=auth(staff_token),
    )
    assert response.status_code == 201

    messages = [entry.message for entry in app.state.activity_log.entries]
    assert any(
        m.startswith("Pet Nemo received notification: appointment") for m in messages
    )


def test_create_appointment_unknown_pet(client, db: Session, staff_token: str, staff_user_dict):
    response = client.post(
        "/api/v1/appointments",
        json={"pet_id": 99999, "date": "2025-09-29"},
        headers=auth(staff_token),
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Pet not found"
    assert client.get("/api/v1/appointments", headers=auth(staff_token)).json() == []


def test_create_appointment_without_pet(client, db: Session, staff_token: str):
    response = client.post(
        "/api/v1/appointments",
        json={"date": "2025-09-29"},
        headers=auth(staff_token),
    )
    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_create_appointment_invalid_date(client, db: Session, staff_token: str, pet):
    response = client.post(
        "/api/v1/appointments",
        json={"pet_id": pet.id, "date": "Invalid date"},
        headers=auth(staff_token),
    )
    assert response.status_code == 422


def test_create_appointment_without_authentication(client, db: Session, pet):
    response = client.post(
        "/api/v1/appointments", json={"pet_id": pet.id, "date": "2025-09-29"}
    )
    assert response.status_code == 401


# ============================================================================
# LIST / UPDATE / DELETE APPOINTMENT TESTS
# ============================================================================


def test_get_appointments_only_returns_own(
    client, db: Session, staff_token: str, staff_user_dict: dict, admin_user: dict, pet
):
    create_appointment(db, pet_id=pet.id, user_id=staff_user_dict["id"], date=date(2025, 9, 29))
    create_appointment(db, pet_id=pet.id, user_id=admin_user["id"], date=date(2025, 9, 30))

    response = client.get("/api/v1/appointments", headers=auth(staff_token))
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["user_id"] == staff_user_dict["id"]


def test_get_appointments_filtered_by_pet(
    client, db: Session, staff_token: str, staff_user_dict: dict, pet
):
    create_appointment(db, pet_id=pet.id, user_id=staff_user_dict["id"], date=date(2025, 9, 29))

    response = client.get(
        f"/api/v1/appointments?pet_id={pet.id + 1}", headers=auth(staff_token)
    )
    assert response.json() == []

    response = client.get(f"/api/v1/appointments?pet_id={pet.id}", headers=auth(staff_token))
    assert len(response.json()) == 1


def test_update_appointment(client, db: Session, staff_token: str, staff_user_dict: dict, pet):
    appointment = create_appointment(
        db, pet_id=pet.id, user_id=staff_user_dict["id"], date=date(2025, 9, 29)
    )

    response = client.put(
        f"/api/v1/appointments/{appointment.id}",
        json={"description": "New check"},
        headers=auth(staff_token),
    )
    assert response.status_code == 200
    data = response.json()
    assert data["description"] == "New check"
    assert data["date"] == "2025-09-29"


def test_update_appointment_not_found(client, db: Session, staff_token: str):
    response = client.put(
        "/api/v1/appointments/99999", json={"description": "x"}, headers=auth(staff_token)
    )
    assert response.status_code == 404


def test_delete_appointment(client, db: Session, staff_token: str, staff_user_dict: dict, pet):
    appointment = create_appointment(
        db, pet_id=pet.id, user_id=staff_user_dict["id"], date=date(2025, 9, 29)
    )
    appointment_id = appointment.id

    response = client.delete(f"/api/v1/appointments/{appointment_id}", headers=auth(staff_token))
    assert response.status_code == 200
    assert response.json() == {"message": "Appointment deleted"}
    db.expire_all()
    assert get_appointment_by_id(db, appointment_id) is None


def test_delete_appointment_not_found(client, db: Session, staff_token: str):
    response = client.delete("/api/v1/appointments/99999", headers=auth(staff_token))
    assert response.status_code == 404


def test_deleting_pet_removes_its_appointments(
    client, db: Session, admin_token: str, admin_user: dict, pet
):
    appointment = create_appointment(
        db, pet_id=pet.id, user_id=admin_user["id"], date=date(2025, 9, 29)
    )
    appointment_id = appointment.id

    response = client.delete(f"/api/v1/pets/{pet.id}", headers=auth(admin_token))
    assert response.status_code == 200
    db.expire_all()
    assert get_appointment_by_id(db, appointment_id) is None
