from sqlalchemy.orm import Session

from app.repositories.pet import get_pet_by_id
from app.repositories.treatment import create_treatment, get_treatment


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


# ============================================================================
# CREATE / READ / UPDATE PET TESTS
# ============================================================================


def test_create_pet_success(client, db: Session, staff_token: str):
    response = client.post(
        "/api/v1/pets",
        json={
            "name": "Milo",
            "species": "Cat",
            "age": 2,
            "owner": {"name": "Sam Owner", "phone": "555-0111"},
        },
        headers=auth(staff_token),
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Milo"
    assert data["species"] == "Cat"
    assert data["breed"] is None
    assert data["owner"]["name"] == "Sam Owner"
    assert data["owner_id"] == data["owner"]["id"]


def test_create_pet_subscribes_pet_observer(client, db: Session, staff_token: str):
    from app.main import app

    before = len(app.state.notifier.observers)
    client.post(
        "/api/v1/pets",
        json={"name": "Kiwi", "species": "Bird", "owner": {"name": "Al"}},
        headers=auth(staff_token),
    )
    assert len(app.state.notifier.observers) == before + 1


def test_create_pet_missing_owner(client, db: Session, staff_token: str):
    response = client.post(
        "/api/v1/pets", json={"name": "Milo", "species": "Cat"}, headers=auth(staff_token)
    )
    assert response.status_code == 422


def test_create_pet_without_authentication(client, db: Session):
    response = client.post(
        "/api/v1/pets",
        json={"name": "Milo", "species": "Cat", "owner": {"name": "Sam"}},
    )
    assert response.status_code == 401


def test_list_pets_paginated(client, db: Session, staff_token: str, pet):
    response = client.get("/api/v1/pets?page=1&page_size=10", headers=auth(staff_token))
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["page"] == 1
    assert data["page_size"] == 10
    assert data["items"][0]["id"] == pet.id


def test_get_pet(client, db: Session, staff_token: str, pet):
    response = client.get(f"/api/v1/pets/{pet.id}", headers=auth(staff_token))
    assert response.status_code == 200
    assert response.json()["name"] == "Rex"


def test_get_pet_not_found(client, db: Session, staff_token: str):
    response = client.get("/api/v1/pets/99999", headers=auth(staff_token))
    assert response.status_code == 404
    assert response.json()["detail"] == "Pet not found"


def test_update_pet(client, db: Session, staff_token: str, pet):
    response = client.put(
        f"/api/v1/pets/{pet.id}", json={"name": "Rexy"}, headers=auth(staff_token)
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Rexy"
    assert data["species"] == "Dog"


def test_update_pet_not_found(client, db: Session, staff_token: str):
    response = client.put("/api/v1/pets/99999", json={"name": "X"}, headers=auth(staff_token))
    assert response.status_code == 404


# ============================================================================
# DELETE PET TESTS (ADMIN ONLY)
# ============================================================================


def test_delete_pet_as_admin(client, db: Session, admin_token: str, pet):
    pet_id = pet.id
    response = client.delete(f"/api/v1/pets/{pet_id}", headers=auth(admin_token))
    assert response.status_code == 200
    assert response.json() == {"message": "Pet deleted"}
    db.expire_all()
    assert get_pet_by_id(db, pet_id) is None


def test_delete_pet_as_staff_is_denied(client, db: Session, staff_token: str, pet):
    response = client.delete(f"/api/v1/pets/{pet.id}", headers=auth(staff_token))
    assert response.status_code == 403
    assert response.json() == {"message": "Only admin can delete"}
    db.expire_all()
    assert get_pet_by_id(db, pet.id) is not None


def test_delete_pet_not_found_as_admin(client, db: Session, admin_token: str):
    response = client.delete("/api/v1/pets/99999", headers=auth(admin_token))
    assert response.status_code == 404
    assert response.json() == {"message": "Pet not found"}


def test_delete_pet_not_found_as_staff_is_denied(client, db: Session, staff_token: str):
    response = client.delete("/api/v1/pets/99999", headers=auth(staff_token))
    assert response.status_code == 403
    assert response.json() == {"message": "Only admin can delete"}


# ============================================================================
# TREATMENT TESTS
# ============================================================================


def test_add_treatment(client, db: Session, staff_token: str, pet):
    response = client.post(
        f"/api/v1/pets/{pet.id}/treatments",
        json={"vet": "Dr. Who", "date": "2025-09-29", "description": "Check", "cost": 50},
        headers=auth(staff_token),
    )
    assert response.status_code == 201
    data = response.json()
    assert data["vet"] == "Dr. Who"
    assert data["pet_id"] == pet.id
    assert data["date"] == "2025-09-29"
    assert data["cost"] == 50.0


def test_add_treatment_pet_not_found(client, db: Session, staff_token: str):
    response = client.post(
        "/api/v1/pets/99999/treatments",
        json={"vet": "Dr. Who", "date": "2025-09-29"},
        headers=auth(staff_token),
    )
    assert response.status_code == 404


def test_get_treatments(client, db: Session, staff_token: str, pet):
    create_treatment(db, pet_id=pet.id, vet="Dr. A", date=date_(2025, 1, 2))
    create_treatment(db, pet_id=pet.id, vet="Dr. B", date=date_(2025, 1, 1))

    response = client.get(f"/api/v1/pets/{pet.id}/treatments", headers=auth(staff_token))
    assert response.status_code == 200
    treatments = response.json()["treatments"]
    assert [t["vet"] for t in treatments] == ["Dr. B", "Dr. A"]


def test_delete_treatment_as_admin(client, db: Session, admin_token: str, pet):
    treatment = create_treatment(db, pet_id=pet.id, vet="Dr. A", date=date_(2025, 1, 2))
    treatment_id = treatment.id

    response = client.delete(
        f"/api/v1/pets/{pet.id}/treatments/{treatment_id}", headers=auth(admin_token)
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Treatment deleted"}
    db.expire_all()
    assert get_treatment(db, pet.id, treatment_id) is None


def test_delete_treatment_not_found_as_admin(client, db: Session, admin_token: str, pet):
    response = client.delete(
        f"/api/v1/pets/{pet.id}/treatments/99999", headers=auth(admin_token)
    )
    assert response.status_code == 404
    assert response.json() == {"message": "Treatment not found"}


def test_delete_treatment_as_staff_is_denied(client, db: Session, staff_token: str, pet):
    treatment = create_treatment(db, pet_id=pet.id, vet="Dr. A", date=date_(2025, 1, 2))

    response = client.delete(
        f"/api/v1/pets/{pet.id}/treatments/{treatment.id}", headers=auth(staff_token)
    )
    assert response.status_code == 403
    assert response.json() == {"message": "Only admin can delete"}
    assert get_treatment(db, pet.id, treatment.id) is not None


def date_(year: int, month: int, day: int):
    from datetime import date

    return date(year, month, day)
