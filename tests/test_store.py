import pytest

from postcart.store import JobRecord, Store, StoreError


@pytest.fixture
def store(tmp_path):
    s = Store(tmp_path / "data")
    s.load()
    return s


def make_job(job_id="job-1", **overrides):
    fields = dict(
        id=job_id,
        to_email="to@example.com",
        to_name="Grandma",
        from_email="from@example.com",
        from_name="Arthur",
        artwork=2,
        style=1,
        font=3,
        border=4,
        stamp_shape=2,
        textured=1,
        country="US",
        subject="Hello",
        message="Wish you were here",
    )
    fields.update(overrides)
    return JobRecord(**fields)


def test_load_creates_attachment_directory(tmp_path):
    s = Store(tmp_path / "data")
    s.load()
    assert (tmp_path / "data" / "attachments").is_dir()
    assert s.stats() == {}
    assert s.uncompleted_jobs() == {}


def test_job_record_round_trip():
    job = make_job(attachment_type="image/png")
    assert JobRecord.from_dict(job.to_dict()) == job


def test_job_record_omits_empty_optional_fields():
    data = make_job(to_name="", from_name="").to_dict()
    assert "to_name" not in data
    assert "from_name" not in data
    assert "attachment_type" not in data
    assert data["stamp"] == 2


def test_recipient_blocking(store):
    assert not store.is_recipient_blocked("a@example.com")
    store.block_recipient("a@example.com")
    assert store.is_recipient_blocked("a@example.com")
    assert not store.is_recipient_blocked("b@example.com")


def test_increment_sender_counts(store):
    assert store.increment_sender("s@example.com") == 1
    assert store.increment_sender("s@example.com") == 2
    assert store.increment_sender("other@example.com") == 1


def test_increment_sender_wraps_like_a_signed_byte(store):
    for _ in range(127):
        last = store.increment_sender("s@example.com")
    assert last == 127
    assert store.increment_sender("s@example.com") == -128


def test_sender_blocked_only_with_positive_rule(store):
    store.block_sender("zero@example.com", 0)
    store.block_sender("rule@example.com", 42)
    assert not store.is_sender_blocked("zero@example.com")
    assert store.is_sender_blocked("rule@example.com")
    assert not store.is_sender_blocked("none@example.com")


def test_record_stat_counts(store):
    store.record_stat("sent")
    store.record_stat("sent")
    store.record_stat("errors")
    assert store.stats() == {"sent": 2, "errors": 1}


def test_record_stat_unknown_name(store):
    with pytest.raises(ValueError):
        store.record_stat("nonsense")


def test_queue_size_tracking(store):
    store.record_queue_size(5)
    store.increment_queue_size()
    store.decrement_queue_size()
    store.decrement_queue_size()
    assert store.stats()["queue"] == 4


def test_stats_returns_snapshot(store):
    snapshot = store.stats()
    snapshot["sent"] = 99
    assert "sent" not in store.stats()


def test_queued_job_persists_immediately(tmp_path, store):
    job = make_job()
    store.record_queued_job(job)
    reopened = Store(tmp_path / "data")
    reopened.load()
    assert reopened.uncompleted_jobs() == {"job-1": job}


def test_remove_job(store):
    store.record_queued_job(make_job("a"))
    store.record_queued_job(make_job("b"))
    store.remove_job("a")
    store.remove_job("missing")
    assert list(store.uncompleted_jobs()) == ["b"]


def test_close_persists_everything(tmp_path):
    with Store(tmp_path / "data") as s:
        s.record_stat("inbound")
        s.block_recipient("r@example.com")
        s.block_sender("s@example.com", 7)
        s.increment_sender("s@example.com")
    reopened = Store(tmp_path / "data")
    reopened.load()
    assert reopened.stats() == {"inbound": 1}
    assert reopened.is_recipient_blocked("r@example.com")
    assert reopened.is_sender_blocked("s@example.com")
    assert reopened.increment_sender("s@example.com") == 2


def test_invalid_json_raises(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "stats.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(StoreError):
        Store(data_dir).load()


def test_attachment_path_and_removal(store):
    path = store.attachment_path("job-9")
    assert path.name == "attachment-job-9"
    path.write_text("content", encoding="utf-8")
    store.remove_attachment("job-9")
    assert not path.exists()


def test_remove_missing_attachment_raises(store):
    with pytest.raises(StoreError):
        store.remove_attachment("never")