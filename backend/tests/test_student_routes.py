"""
Rollcall Backend — Student Route Tests (service mocked)
=======================================================

What:  HTTP-layer tests for /api/v1/student with StudentService patched out.
How:   `student_service` is replaced in the routes module, so every test
       pins exactly what the service returns or raises and checks the
       status code and body the route produces.
"""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from rollcall.exceptions import ConflictError, NotFoundError


SERVICE = "rollcall.routes.students.student_service"


class TestListStudents:

    @pytest.mark.asyncio
    async def test_get_all_students_success(self, test_client, student1, student2, student3):
        with patch(SERVICE) as mock_service:
            mock_service.get_all_students = AsyncMock(return_value=[student1, student2, student3])

            response = await test_client.get("/api/v1/student/")

        assert response.status_code == 200
        body = response.json()
        assert len(body) == 3
        assert body[2]["name"] == "name3"
        assert response.headers["X-Total-Count"] == "3"

    @pytest.mark.asyncio
    async def test_get_all_students_none_is_no_content(self, test_client):
        with patch(SERVICE) as mock_service:
            mock_service.get_all_students = AsyncMock(return_value=None)

            response = await test_client.get("/api/v1/student/")

        assert response.status_code == 204
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_get_all_students_empty_list_is_no_content(self, test_client):
        with patch(SERVICE) as mock_service:
            mock_service.get_all_students = AsyncMock(return_value=[])

            response = await test_client.get("/api/v1/student/")

        assert response.status_code == 204


class TestGetStudent:

    @pytest.mark.asyncio
    async def test_get_student_by_id_success(self, test_client, student1):
        with patch(SERVICE) as mock_service:
            mock_service.get_student_by_id = AsyncMock(return_value=student1)

            response = await test_client.get(f"/api/v1/student/{student1.id}")

            mock_service.get_student_by_id.assert_awaited_once()
            assert mock_service.get_student_by_id.await_args.kwargs["student_id"] == 1

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "name1"
        assert body["dob"] == "2001-01-01"
        assert "age" in body

    @pytest.mark.asyncio
    async def test_get_student_by_id_not_found(self, test_client):
        with patch(SERVICE) as mock_service:
            mock_service.get_student_by_id = AsyncMock(
                side_effect=NotFoundError(resource="student", resource_id="100")
            )

            response = await test_client.get("/api/v1/student/100")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_get_student_non_integer_id_rejected(self, test_client):
        response = await test_client.get("/api/v1/student/abc")
        assert response.status_code == 422


class TestCreateStudent:

    @pytest.mark.asyncio
    async def test_create_student_success(self, test_client, student1):
        with patch(SERVICE) as mock_service:
            mock_service.create_student = AsyncMock(return_value=student1)

            response = await test_client.post(
                "/api/v1/student/",
                json={"id": 1, "name": "name1", "email": "email1@gmail.com", "dob": "2001-01-01"},
            )

            payload = mock_service.create_student.await_args.kwargs["payload"]
            assert payload.email == "email1@gmail.com"
            assert payload.dob == date(2001, 1, 1)

        assert response.status_code == 201
        assert response.json()["id"] == 1

    @pytest.mark.asyncio
    async def test_create_student_email_taken(self, test_client):
        with patch(SERVICE) as mock_service:
            mock_service.create_student = AsyncMock(
                side_effect=ConflictError("Email 'email3@gmail.com' is already taken", field="email")
            )

            response = await test_client.post(
                "/api/v1/student/",
                json={"name": "name4", "email": "email3@gmail.com", "dob": "2004-04-04"},
            )

        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "conflict"
        assert body["details"] == {"field": "email"}

    @pytest.mark.asyncio
    async def test_create_student_missing_fields_rejected(self, test_client):
        with patch(SERVICE) as mock_service:
            mock_service.create_student = AsyncMock()

            response = await test_client.post("/api/v1/student/", json={"name": "name4"})

            mock_service.create_student.assert_not_awaited()

        assert response.status_code == 422


class TestUpdateStudent:

    @pytest.mark.asyncio
    async def test_update_student_success(self, test_client, student1):
        updated = student1.model_copy(update={"name": "name1.1", "email": "email1.1@gmail.com"})
        with patch(SERVICE) as mock_service:
            mock_service.update_student = AsyncMock(return_value=updated)

            response = await test_client.put(
                f"/api/v1/student/{student1.id}",
                json={"name": "name1.1", "email": "email1.1@gmail.com", "dob": "2001-01-01"},
            )

            kwargs = mock_service.update_student.await_args.kwargs
            assert kwargs["student_id"] == 1
            assert kwargs["payload"].name == "name1.1"

        assert response.status_code == 200
        assert response.json()["email"] == "email1.1@gmail.com"

    @pytest.mark.asyncio
    async def test_update_student_email_taken(self, test_client, student1):
        with patch(SERVICE) as mock_service:
            mock_service.update_student = AsyncMock(
                side_effect=ConflictError("Email 'email2@gmail.com' is already taken", field="email")
            )

            response = await test_client.put(
                f"/api/v1/student/{student1.id}",
                json={"name": "name1.1", "email": "email2@gmail.com", "dob": "2001-01-01"},
            )

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_update_student_not_found(self, test_client):
        with patch(SERVICE) as mock_service:
            mock_service.update_student = AsyncMock(
                side_effect=NotFoundError(resource="student", resource_id="100")
            )

            response = await test_client.put(
                "/api/v1/student/100",
                json={"id": 100, "name": "name1.1", "email": "email1.1@gmail.com", "dob": "2001-01-01"},
            )

        assert response.status_code == 404


class TestDeleteStudent:

    @pytest.mark.asyncio
    async def test_delete_student_by_id_success(self, test_client, student2):
        with patch(SERVICE) as mock_service:
            mock_service.delete_student_by_id = AsyncMock(return_value=None)

            response = await test_client.delete(f"/api/v1/student/{student2.id}")

            assert mock_service.delete_student_by_id.await_args.kwargs["student_id"] == 2

        assert response.status_code == 204
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_delete_student_by_id_not_found(self, test_client):
        with patch(SERVICE) as mock_service:
            mock_service.delete_student_by_id = AsyncMock(
                side_effect=NotFoundError(resource="student", resource_id="100")
            )

            response = await test_client.delete("/api/v1/student/100")

        assert response.status_code == 404
