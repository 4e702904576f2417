from blogsite.auth.credentials import verify_token
from blogsite.models import User


def test_signup_returns_token_and_profile(app, client):
    response = client.post("/signup", json={
        "fullname": "Alice Doe", "email": "a@b.com", "password": "Abc123",
    })

    assert response.status_code == 200
    data = response.get_json()
    assert data["username"] == "a"
    assert data["fullname"] == "Alice Doe"
    assert data["profile_img"].endswith("seed=a")

    user = User.query.filter_by(email="a@b.com").one()
    assert verify_token(data["access_token"], app.config["JWT_SECRET_KEY"]) == user.id
    assert user.password != "Abc123"


def test_signup_validation_errors(client):
    response = client.post("/signup", json={"fullname": "Al", "email": "a@b.com", "password": "Abc123"})
    assert response.status_code == 403
    assert response.get_json()["error"] == "Fullname must be at least 3 letters long"

    response = client.post("/signup", json={"fullname": "Alice", "email": "nope", "password": "Abc123"})
    assert response.status_code == 403
    assert response.get_json()["error"] == "Enter Valid Email"

    response = client.post("/signup", json={"fullname": "Alice", "email": "a@b.com", "password": "abc"})
    assert response.status_code == 403
    assert response.get_json()["error"].startswith("Password should be 6 to 20 characters")


def test_signup_non_json_body_is_rejected(client):
    response = client.post("/signup", data="fullname=Alice", content_type="text/plain")

    assert response.status_code == 403


def test_duplicate_email_is_500(client, signup):
    signup()
    response = client.post("/signup", json={
        "fullname": "Someone Else", "email": "a@b.com", "password": "Xyz789",
    })

    assert response.status_code == 500
    assert response.get_json()["error"] == "Email Already Exists"
    assert User.query.filter_by(email="a@b.com").count() == 1


def test_usernames_stay_unique_across_domains(signup):
    first = signup(email="alice@one.com")
    second = signup(email="alice@two.com")

    assert first["username"] == "alice"
    assert second["username"] != "alice"
    assert second["username"].startswith("alice")


def test_signin_returns_same_user_info(client, signup):
    created = signup()
    response = client.post("/signin", json={"email": "a@b.com", "password": "Abc123"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["username"] == created["username"]
    assert data["fullname"] == created["fullname"]
    assert data["profile_img"] == created["profile_img"]
    assert data["access_token"]


def test_signin_unknown_email(client):
    response = client.post("/signin", json={"email": "ghost@b.com", "password": "Abc123"})

    assert response.status_code == 403
    assert response.get_json()["error"] == "Email not found"


def test_signin_wrong_password(client, signup):
    signup()
    response = client.post("/signin", json={"email": "a@b.com", "password": "Wrong123"})

    assert response.status_code == 403
    assert response.get_json()["error"] == "Incorrect password"


def test_trailing_newline_cannot_register_a_second_account(client, signup):
    signup(email="a@b.com")

    response = client.post("/signup", json={
        "fullname": "Alice Again", "email": "a@b.com\n", "password": "Abc123",
    })
    assert response.status_code == 403
    assert response.get_json()["error"] == "Enter Valid Email"

    response = client.post("/signup", json={
        "fullname": "Bob Roe", "email": "bob@b.com", "password": "Abc123\n",
    })
    assert response.status_code == 403

    assert User.query.count() == 1
