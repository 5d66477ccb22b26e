"""Tests for the in-memory repository and its seeded catalog."""

from __future__ import annotations

import threading

import pytest
from pydantic import ValidationError as ModelValidationError

from jay_auto_api.app.core.errors import DuplicateUsernameError
from jay_auto_api.app.core.storage import MemStorage
from jay_auto_api.app.schemas.inquiry import ContactInquiryData


def _inquiry(**overrides) -> ContactInquiryData:
    fields = {
        "name": "Dana",
        "email": "dana@b.com",
        "service_type": "maintenance",
        "message": "Time for an oil change please",
    }
    fields.update(overrides)
    return ContactInquiryData(**fields)


def test_fresh_repository_has_six_cars_with_ids_one_to_six(storage):
    cars = storage.get_cars()
    assert len(cars) == 6
    assert [car.id for car in cars] == ["1", "2", "3", "4", "5", "6"]


def test_seeded_catalog_sizes(storage):
    assert len(storage.get_services()) == 7
    assert len(storage.get_testimonials()) == 6


def test_testimonial_ratings_within_bounds(storage):
    assert all(0 <= t.rating <= 5 for t in storage.get_testimonials())


def test_cars_have_non_negative_price_and_mileage(storage):
    for car in storage.get_cars():
        assert car.price >= 0
        assert car.mileage >= 0


def test_car_features_keep_display_order(storage):
    camry = storage.get_cars()[0]
    assert camry.features == ("Backup Camera", "Bluetooth", "Lane Assist", "Apple CarPlay")


def test_catalog_reads_are_repeatable(storage):
    assert storage.get_services() == storage.get_services()
    assert storage.get_cars() == storage.get_cars()
    assert storage.get_testimonials() == storage.get_testimonials()


def test_mutating_a_returned_list_does_not_touch_the_seed(storage):
    services = storage.get_services()
    services.clear()
    assert len(storage.get_services()) == 7


def test_unseeded_repository_is_empty():
    assert MemStorage().get_cars() == []


def test_create_inquiry_assigns_id_and_timestamp(storage):
    inquiry = storage.create_contact_inquiry(_inquiry())
    assert inquiry.id
    assert inquiry.created_at.tzinfo is not None
    assert storage.get_contact_inquiries() == [inquiry]


def test_inquiries_keep_insertion_order(storage):
    first = storage.create_contact_inquiry(_inquiry(name="First"))
    second = storage.create_contact_inquiry(_inquiry(name="Second"))
    assert [i.id for i in storage.get_contact_inquiries()] == [first.id, second.id]


def test_inquiry_snapshot_is_not_affected_by_later_inserts(storage):
    storage.create_contact_inquiry(_inquiry())
    snapshot = storage.get_contact_inquiries()
    storage.create_contact_inquiry(_inquiry())
    assert len(snapshot) == 1
    assert len(storage.get_contact_inquiries()) == 2


def test_stored_inquiries_are_immutable(storage):
    inquiry = storage.create_contact_inquiry(_inquiry())
    with pytest.raises(ModelValidationError):
        inquiry.name = "Changed"


def test_concurrent_inserts_get_distinct_ids(storage):
    def worker():
        for _ in range(50):
            storage.create_contact_inquiry(_inquiry())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [i.id for i in storage.get_contact_inquiries()]
    assert len(ids) == 400
    assert len(set(ids)) == 400


def test_create_user_rejects_duplicate_username(storage):
    storage.create_user("jay", "hash")
    with pytest.raises(DuplicateUsernameError):
        storage.create_user("jay", "other-hash")


def test_user_lookups(storage):
    user = storage.create_user("jay", "hash")
    assert storage.get_user(user.id) == user
    assert storage.get_user_by_username("jay") == user
    assert storage.get_user("missing") is None
    assert storage.get_user_by_username("nobody") is None


def test_shop_info_comes_from_the_seed(storage):
    info = storage.get_shop_info()
    assert info.name == "Jay Auto Repair"
    assert "car-inquiry" in info.service_types
    assert MemStorage().get_shop_info() is None


def test_user_lookup_by_id_waits_for_writers(storage):
    user = storage.create_user("jay", "hash")
    with storage._lock:
        result = []
        reader = threading.Thread(target=lambda: result.append(storage.get_user(user.id)))
        reader.start()
        reader.join(timeout=0.2)
        assert reader.is_alive()
    reader.join()
    assert result == [user]
