"""End-to-end tests through the FastAPI app: session cookie flow for both current-user resolvers."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from userauth.core.config import Settings
from userauth.core.database import build_engine
from userauth.core.security import PasswordHasher
from userauth.main import create_app
from userauth.models import Base, User

AUTH = "/api/v1/auth"


class ApiTestCase(unittest.TestCase):
    """Fresh in-memory database and app per test. Subclasses pick the resolver mode."""

    resolver = "middleware"

    def setUp(self) -> None:
        self.engine = build_engine("sqlite://")
        Base.metadata.create_all(self.engine)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        settings = Settings(
            DATABASE_URL="sqlite://",
            SESSION_SECRET="test-session-secret",
            CURRENT_USER_RESOLVER=self.resolver,
        )
        app = create_app(
            settings=settings,
            session_factory=self.session_factory,
            password_hasher=PasswordHasher(rounds=1),
        )
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.client.close()
        self.engine.dispose()

    def signup(self, email: str = "a@b.com", password: str = "pw1"):
        return self.client.post(f"{AUTH}/signup", json={"email": email, "password": password})

    def signin(self, email: str = "a@b.com", password: str = "pw1"):
        return self.client.post(f"{AUTH}/signin", json={"email": email, "password": password})


class SessionFlowTests:
    """Shared checks run once per resolver mode."""

    def test_signup_signs_in_and_hides_password(self) -> None:
        resp = self.signup()
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["email"], "a@b.com")
        self.assertFalse(body["admin"])
        self.assertNotIn("password", body)

        whoami = self.client.get(f"{AUTH}/whoami")
        self.assertEqual(whoami.status_code, 200)
        self.assertEqual(whoami.json()["id"], body["id"])

    def test_password_is_stored_hashed(self) -> None:
        self.signup(password="pw1")
        db = self.session_factory()
        try:
            stored = db.query(User).filter(User.email == "a@b.com").one().password
        finally:
            db.close()
        self.assertNotEqual(stored, "pw1")
        self.assertEqual(stored.count("."), 1)

    def test_duplicate_signup_rejected(self) -> None:
        self.signup()
        resp = self.signup(password="pw2")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "Email already registered!")
        self.assertEqual(len(self.client.get(AUTH, params={"email": "a@b.com"}).json()), 1)

    def test_signout_then_signin(self) -> None:
        user_id = self.signup().json()["id"]

        self.assertEqual(self.client.post(f"{AUTH}/signout").status_code, 204)
        whoami = self.client.get(f"{AUTH}/whoami")
        self.assertEqual(whoami.status_code, 401)
        self.assertEqual(whoami.json()["detail"], "Not authenticated")

        resp = self.signin()
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["id"], user_id)
        self.assertEqual(self.client.get(f"{AUTH}/whoami").json()["id"], user_id)

    def test_signin_failures_are_indistinguishable(self) -> None:
        self.signup()
        self.client.post(f"{AUTH}/signout")

        wrong = self.signin(password="wrong")
        unknown = self.signin(email="nouser@b.com", password="x")
        self.assertEqual(wrong.status_code, 400)
        self.assertEqual(unknown.status_code, wrong.status_code)
        self.assertEqual(wrong.json()["detail"], "Invalid email or password!")
        self.assertEqual(unknown.json(), wrong.json())
        self.assertEqual(self.client.get(f"{AUTH}/whoami").status_code, 401)

    def test_stale_session_user_is_ignored(self) -> None:
        user_id = self.signup().json()["id"]
        self.assertEqual(self.client.delete(f"{AUTH}/{user_id}").status_code, 204)
        # Session still names the deleted id; resolution yields no user and no error.
        self.assertEqual(self.client.get(f"{AUTH}/whoami").status_code, 401)
        self.assertEqual(self.client.get("/api/v1/health/").status_code, 200)

    def test_find_user_by_id_and_email(self) -> None:
        user_id = self.signup().json()["id"]
        self.assertEqual(self.client.get(f"{AUTH}/{user_id}").json()["email"], "a@b.com")

        missing = self.client.get(f"{AUTH}/{user_id + 100}")
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json()["detail"], "User not found!")

        listed = self.client.get(AUTH, params={"email": "a@b.com"}).json()
        self.assertEqual([u["id"] for u in listed], [user_id])
        self.assertEqual(self.client.get(AUTH, params={"email": "x@b.com"}).json(), [])

    def test_find_by_email_ignores_domain_case(self) -> None:
        user_id = self.signup(email="a@B.com").json()["id"]
        listed = self.client.get(AUTH, params={"email": "a@B.com"}).json()
        self.assertEqual([u["id"] for u in listed], [user_id])
        self.assertEqual(self.signin(email="a@b.COM").json()["id"], user_id)

    def test_update_password_then_signin(self) -> None:
        user_id = self.signup().json()["id"]
        resp = self.client.patch(f"{AUTH}/{user_id}", json={"password": "pw2"})
        self.assertEqual(resp.status_code, 200)
        self.client.post(f"{AUTH}/signout")

        self.assertEqual(self.signin(password="pw1").status_code, 400)
        self.assertEqual(self.signin(password="pw2").status_code, 200)

    def test_update_email_to_taken_address(self) -> None:
        self.signup(email="taken@b.com")
        user_id = self.signup(email="a@b.com").json()["id"]
        resp = self.client.patch(f"{AUTH}/{user_id}", json={"email": "taken@b.com"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "Email already registered!")

    def test_remove_missing_user(self) -> None:
        resp = self.client.delete(f"{AUTH}/12345")
        self.assertEqual(resp.status_code, 404)

    def test_invalid_payload_rejected(self) -> None:
        resp = self.client.post(f"{AUTH}/signup", json={"email": "not-an-email", "password": "pw"})
        self.assertEqual(resp.status_code, 422)
        resp = self.client.post(f"{AUTH}/signup", json={"email": "a@b.com", "password": ""})
        self.assertEqual(resp.status_code, 422)


class TestMiddlewareResolver(SessionFlowTests, ApiTestCase):
    resolver = "middleware"


class TestInterceptorResolver(SessionFlowTests, ApiTestCase):
    resolver = "interceptor"


class TestHealth(ApiTestCase):
    def test_health_reports_database(self) -> None:
        resp = self.client.get("/api/v1/health/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {
                "status": "ok",
                "environment": "dev",
                "database": "connected",
                "current_user_resolver": "middleware",
            },
        )

    def test_root(self) -> None:
        self.assertEqual(self.client.get("/").json(), {"message": "User Auth API"})
