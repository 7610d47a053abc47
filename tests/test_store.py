import threading

from cardclash.services.store import DeckStore, SessionStore, seeded_deck_store
from conftest import deck_json, question

VALID = deck_json(question())

def test_list_is_stable_and_ordered(deck_store):
    first = deck_store.list()
    second = deck_store.list()
    assert first == second
    assert [d.id for d in first] == [1, 2, 3]

def test_get_by_id_missing_returns_none(deck_store):
    assert deck_store.get_by_id(4) is None
    assert deck_store.get_by_id(2).title == "US History 101"

def test_create_assigns_next_id(deck_store):
    deck = deck_store.upsert(None, "New", VALID)
    assert deck.id == 4
    assert deck_store.get_by_id(4).title == "New"

def test_unknown_or_invalid_id_creates(deck_store):
    assert deck_store.upsert(99, "A", VALID).id == 4
    assert deck_store.upsert(0, "B", VALID).id == 5
    assert deck_store.upsert(-3, "C", VALID).id == 6

def test_ids_strictly_increase(deck_store):
    seen = {d.id for d in deck_store.list()}
    created = [deck_store.upsert(None, f"Deck {i}", VALID).id for i in range(5)]
    assert created == sorted(created)
    assert len(set(created)) == 5
    assert not seen & set(created)

def test_update_in_place(deck_store):
    before = deck_store.list()
    updated = deck_store.upsert(2, "Renamed", VALID)
    after = deck_store.list()

    assert updated.id == 2
    assert len(after) == len(before)
    assert after[1].title == "Renamed"
    assert after[1].content_json == VALID
    assert after[0] == before[0]
    assert after[2] == before[2]

def test_returned_records_are_copies(deck_store):
    deck = deck_store.get_by_id(1)
    deck.title = "hacked"
    assert deck_store.get_by_id(1).title == "Math Warmup"

def test_empty_store_starts_at_one():
    store = DeckStore()
    assert store.first() is None
    assert store.upsert(None, "First", VALID).id == 1

def test_concurrent_creates_get_distinct_ids():
    store = seeded_deck_store()
    barrier = threading.Barrier(2)
    ids = []

    def create(title):
        barrier.wait()
        ids.append(store.upsert(None, title, VALID).id)

    threads = [threading.Thread(target=create, args=(t,)) for t in ("x", "y")]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(ids) == [4, 5]

def test_many_concurrent_creates_never_collide():
    store = DeckStore()
    threads = [threading.Thread(target=store.upsert, args=(None, f"d{i}", VALID)) for i in range(50)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(d.id for d in store.list()) == list(range(1, 51))

def test_session_store_lookup(session_store):
    assert [s.id for s in session_store.list()] == [101, 102]
    assert session_store.get_by_id(102).deck_id == 2
    assert session_store.get_by_id(7) is None

def test_session_store_copies_are_deep():
    store = SessionStore([{"id": 1, "summary_paragraphs": ["a"]}])
    s = store.get_by_id(1)
    s.summary_paragraphs.append("b")
    assert store.get_by_id(1).summary_paragraphs == ["a"]
