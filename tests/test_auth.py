from datetime import datetime, timedelta, timezone

from jose import jwt

from cardclash.services.auth import ALGORITHM, SessionManager, SettingsCredentialVerifier

def test_verifier_accepts_only_exact_pair(settings):
    verifier = SettingsCredentialVerifier(settings)
    assert verifier.verify("teacher", "s3cret")
    assert not verifier.verify("teacher", "wrong")
    assert not verifier.verify("someone", "s3cret")
    assert not verifier.verify("", "")
    assert not verifier.verify(None, None)

def test_issue_and_resolve():
    manager = SessionManager("k")
    token = manager.issue("teacher")
    record = manager.resolve(token)
    assert record["authenticated"] is True
    assert record["username"] == "teacher"
    assert manager.is_authenticated(token)

def test_token_only_carries_session_id():
    manager = SessionManager("k")
    payload = jwt.decode(manager.issue("teacher"), "k", algorithms=[ALGORITHM])
    assert set(payload) == {"sid", "exp"}

def test_revoke_ends_session():
    manager = SessionManager("k")
    token = manager.issue("teacher")
    assert manager.revoke(token)
    assert not manager.is_authenticated(token)
    assert not manager.revoke(token)
    assert len(manager) == 0

def test_token_signed_with_other_secret_rejected():
    issuer = SessionManager("one")
    other = SessionManager("two")
    assert not other.is_authenticated(issuer.issue("teacher"))

def test_garbage_and_missing_tokens():
    manager = SessionManager("k")
    assert not manager.is_authenticated(None)
    assert not manager.is_authenticated("")
    assert not manager.is_authenticated("not-a-token")

def test_unknown_sid_rejected():
    manager = SessionManager("k")
    forged = jwt.encode(
        {"sid": "abc", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)}, "k", algorithm=ALGORITHM
    )
    assert not manager.is_authenticated(forged)

def test_expired_token_rejected():
    manager = SessionManager("k")
    token = manager.issue("teacher")
    sid = jwt.decode(token, "k", algorithms=[ALGORITHM])["sid"]
    expired = jwt.encode(
        {"sid": sid, "exp": datetime.now(timezone.utc) - timedelta(minutes=1)}, "k", algorithm=ALGORITHM
    )
    assert not manager.is_authenticated(expired)
    assert manager.is_authenticated(token)

class FakeClock:
    def __init__(self):
        self.now = datetime.now(timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kw):
        self.now += timedelta(**kw)

def test_expired_sessions_are_purged_on_issue():
    clock = FakeClock()
    manager = SessionManager("k", ttl_minutes=1, clock=clock)
    for _ in range(5):
        manager.issue("teacher")
    assert len(manager) == 5

    clock.advance(minutes=2)
    manager.issue("teacher")
    assert len(manager) == 1

def test_expired_record_treated_as_absent():
    clock = FakeClock()
    manager = SessionManager("k", ttl_minutes=1, clock=clock)
    token = manager.issue("teacher")
    clock.advance(seconds=61)
    assert manager.resolve(token) is None
    assert len(manager) == 0
