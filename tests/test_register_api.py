"""Tests for the registration endpoint and its request logging."""

import logging

import pytest


@pytest.mark.asyncio
async def test_register_returns_welcome(client):
    response = await client.post(
        "/register", json={"username": "alice", "password": "Abc123"}
    )

    assert response.status_code == 201
    assert response.text == "Welcome, alice!"


@pytest.mark.asyncio
async def test_register_requires_uppercase_letter(client):
    response = await client.post(
        "/register", json={"username": "alice", "password": "abc123"}
    )

    assert response.status_code == 400
    assert response.text == "Password must contain at least one uppercase letter"


@pytest.mark.asyncio
async def test_register_rejects_non_english_password(client):
    response = await client.post(
        "/register", json={"username": "alice", "password": "Aשלום12"}
    )

    assert response.status_code == 400
    assert response.text == "Password must be in English only"


@pytest.mark.asyncio
async def test_register_collects_issues_across_fields(client):
    response = await client.post("/register", json={"username": "al", "password": "ab"})

    assert response.status_code == 400
    assert response.text == (
        "Username must be at least 3 characters long, "
        "Password must be at least 6 characters long, "
        "Password must contain at least one uppercase letter"
    )


@pytest.mark.asyncio
async def test_register_rejects_overlong_values(client):
    response = await client.post(
        "/register",
        json={"username": "u" * 16, "password": "Abcdefghijklmnop"},
    )

    assert response.status_code == 400
    assert response.text == (
        "Username cannot exceed 15 characters, Password cannot exceed 15 characters"
    )


@pytest.mark.asyncio
async def test_register_without_credentials(client):
    response = await client.post("/register", json={})

    assert response.status_code == 400
    assert response.text == "Username is required, Password is required"


@pytest.mark.asyncio
async def test_register_logs_request_before_validation(client, caplog):
    caplog.set_level(logging.INFO)

    response = await client.post("/register", json={"username": "al"})

    assert response.status_code == 400
    messages = [record.getMessage() for record in caplog.records]
    request_logs = [i for i, m in enumerate(messages) if "path: /register" in m]
    failure_logs = [i for i, m in enumerate(messages) if m.startswith("Validation failed")]
    assert request_logs and failure_logs
    assert request_logs[0] < failure_logs[0]


@pytest.mark.asyncio
async def test_register_never_logs_password(client, caplog):
    caplog.set_level(logging.DEBUG)

    await client.post("/register", json={"username": "alice", "password": "Secret99"})

    assert "alice" in caplog.text
    assert "Secret99" not in caplog.text


@pytest.mark.asyncio
async def test_request_logging_only_on_register(client, caplog):
    caplog.set_level(logging.INFO)

    await client.get("/pruducts")

    assert not any("Request time:" in r.getMessage() for r in caplog.records)
