# tests/conftest.py
import duckdb
import pytest
from fastapi.testclient import TestClient

from database.connection import DatabaseConnection
from database.repository import LightBnbRepository
from main import app
from routers.dependencies import get_repository

SCHEMA = """
CREATE SEQUENCE users_id_seq START 100;
CREATE TABLE users (
    id INTEGER PRIMARY KEY DEFAULT nextval('users_id_seq'),
    name VARCHAR NOT NULL,
    email VARCHAR NOT NULL UNIQUE,
    password VARCHAR NOT NULL
);

CREATE SEQUENCE properties_id_seq START 100;
CREATE TABLE properties (
    id INTEGER PRIMARY KEY DEFAULT nextval('properties_id_seq'),
    owner_id INTEGER NOT NULL,
    title VARCHAR NOT NULL,
    description VARCHAR,
    thumbnail_photo_url VARCHAR NOT NULL,
    cover_photo_url VARCHAR NOT NULL,
    cost_per_night INTEGER NOT NULL DEFAULT 0,
    parking_spaces INTEGER NOT NULL DEFAULT 0,
    number_of_bathrooms INTEGER NOT NULL DEFAULT 0,
    number_of_bedrooms INTEGER NOT NULL DEFAULT 0,
    country VARCHAR NOT NULL,
    street VARCHAR NOT NULL,
    city VARCHAR NOT NULL,
    province VARCHAR NOT NULL,
    post_code VARCHAR NOT NULL,
    active BOOLEAN NOT NULL DEFAULT TRUE
);

CREATE TABLE reservations (
    id INTEGER PRIMARY KEY,
    start_date DATE NOT NULL,
    end_date DATE NOT NULL,
    property_id INTEGER NOT NULL,
    guest_id INTEGER NOT NULL
);

CREATE TABLE property_reviews (
    id INTEGER PRIMARY KEY,
    guest_id INTEGER NOT NULL,
    property_id INTEGER NOT NULL,
    reservation_id INTEGER NOT NULL,
    rating SMALLINT NOT NULL DEFAULT 0,
    message VARCHAR
);
"""

SEED = """
INSERT INTO users (id, name, email, password) VALUES
    (1, 'Ada Owner', 'ada@example.com', 'hashed-1'),
    (2, 'Grace Guest', 'grace@example.com', 'hashed-2'),
    (3, 'Linus Host', 'linus@example.com', 'hashed-3');

INSERT INTO properties (id, owner_id, title, description, thumbnail_photo_url, cover_photo_url,
    cost_per_night, parking_spaces, number_of_bathrooms, number_of_bedrooms,
    country, street, city, province, post_code) VALUES
    (1, 1, 'Harbour Loft', 'Loft by the water', 'https://img/1t.jpg', 'https://img/1c.jpg',
        9500, 1, 1, 2, 'Canada', '1 Water St', 'Vancouver', 'British Columbia', 'V6B 1A1'),
    (2, 1, 'Plateau Flat', 'Walk-up near the park', 'https://img/2t.jpg', 'https://img/2c.jpg',
        8000, 0, 1, 1, 'Canada', '22 Rue Rachel', 'Montreal', 'Quebec', 'H2J 2J3'),
    (3, 2, 'Old Port Suite', NULL, 'https://img/3t.jpg', 'https://img/3c.jpg',
        15000, 1, 2, 2, 'Canada', '3 Rue de la Commune', 'Montreal', 'Quebec', 'H2Y 1J1'),
    (4, 2, 'Mile End Room', NULL, 'https://img/4t.jpg', 'https://img/4c.jpg',
        5000, 0, 1, 1, 'Canada', '44 Rue Fairmount', 'Montreal', 'Quebec', 'H2T 2M1'),
    (5, 3, 'Kitsilano House', NULL, 'https://img/5t.jpg', 'https://img/5c.jpg',
        20000, 2, 3, 4, 'Canada', '5 Lonsdale Ave', 'North Vancouver', 'British Columbia', 'V7M 2E4'),
    (6, 3, 'Quiet Cabin', NULL, 'https://img/6t.jpg', 'https://img/6c.jpg',
        7000, 1, 1, 1, 'Canada', '6 Alta Lake Rd', 'Whistler', 'British Columbia', 'V8E 0A1');

INSERT INTO reservations (id, start_date, end_date, property_id, guest_id) VALUES
    (1, DATE '2026-03-01', DATE '2026-03-05', 1, 2),
    (2, DATE '2026-01-15', DATE '2026-01-20', 2, 2),
    (3, DATE '2026-02-01', DATE '2026-02-03', 6, 2),
    (4, DATE '2026-04-10', DATE '2026-04-12', 3, 3),
    (5, DATE '2025-11-01', DATE '2025-11-04', 1, 3),
    (6, DATE '2025-12-01', DATE '2025-12-02', 2, 3),
    (7, DATE '2025-10-01', DATE '2025-10-02', 4, 1),
    (8, DATE '2025-09-01', DATE '2025-09-02', 4, 3),
    (9, DATE '2025-08-01', DATE '2025-08-02', 5, 1);

INSERT INTO property_reviews (id, guest_id, property_id, reservation_id, rating, message) VALUES
    (1, 2, 1, 1, 5, 'Great view'),
    (2, 3, 1, 5, 4, NULL),
    (3, 2, 2, 2, 4, NULL),
    (4, 3, 2, 6, 5, 'Lovely'),
    (5, 3, 3, 4, 5, NULL),
    (6, 1, 4, 7, 2, 'Noisy'),
    (7, 3, 4, 8, 3, NULL),
    (8, 1, 5, 9, 3, NULL);
"""

@pytest.fixture
def duck():
    """In-memory duckdb database with the LightBnB schema and seed rows."""
    conn = duckdb.connect(":memory:")
    for statement in (SCHEMA + SEED).split(";"):
        if statement.strip():
            conn.execute(statement)
    yield conn
    conn.close()

@pytest.fixture
def db(duck):
    return DatabaseConnection(connection=duck)

@pytest.fixture
def repository(db):
    return LightBnbRepository(db)

@pytest.fixture
def broken_repository():
    """Repository over an empty database, so every query fails."""
    conn = duckdb.connect(":memory:")
    yield LightBnbRepository(DatabaseConnection(connection=conn))
    conn.close()

@pytest.fixture
def client(repository):
    app.dependency_overrides[get_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()
