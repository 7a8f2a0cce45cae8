"""Sample Records — verifies startup seeding goes through the store rules."""

from roster.services.seed_records import SAMPLE_RECORDS, seed_sample_records


def test_seed_adds_all_sample_records(store):
    assert seed_sample_records(store) == len(SAMPLE_RECORDS) == 3
    assert [r.id for r in store.list()] == ["STU001", "STU002", "STU003"]
    assert store.find_by_id("stu001").display_name == "Alice Johnson"


def test_reseeding_adds_nothing(store):
    seed_sample_records(store)
    assert seed_sample_records(store) == 0
    assert store.count() == 3


def test_seed_does_not_overwrite_existing_record(store):
    store.add("stu002", "Someone Else", 20, "Grade 12")
    assert seed_sample_records(store) == 2
    assert store.find_by_id("STU002").display_name == "Someone Else"
