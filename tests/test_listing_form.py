from app.services.listing_form import (
    AMENITY_OPTIONS,
    PropertyListingDraft,
    draft_from_form,
    handle_action,
    step_errors,
)


def _complete_draft(**overrides) -> PropertyListingDraft:
    data = {
        "name": "Ocean View Villa",
        "property_type": "villa",
        "price_per_night": "120",
        "address": "Route de Labadee",
        "description": "Three bedrooms above the bay",
        "email": "owner@example.com",
        "phone": "+509 555 0100",
    }
    data.update(overrides)
    return PropertyListingDraft(**data)


def test_draft_from_form_normalizes_values():
    form = {
        "name": "  Villa  ",
        "property_type": "castle",
        "bedrooms": "x",
        "max_guests": "0",
        "plan": "gold",
    }
    draft = draft_from_form(form, ["Garden", "Jetpack", "WiFi"])
    assert draft.name == "Villa"
    assert draft.property_type == "apartment"
    assert draft.bedrooms == 1
    assert draft.max_guests == 1
    assert draft.plan == "standard"
    # offered order, unknown options dropped
    assert draft.amenities == ["WiFi", "Garden"]


def test_amenity_list_has_fifteen_options():
    assert len(AMENITY_OPTIONS) == 15


def test_step_one_requires_name_type_and_price():
    errors = step_errors(PropertyListingDraft(), 1)
    assert "Property name is required" in errors
    assert "Price per night is required" in errors


def test_step_one_rejects_non_positive_price():
    assert step_errors(_complete_draft(price_per_night="abc"), 1) == ["Price per night must be a number"]
    assert step_errors(_complete_draft(price_per_night="0"), 1) == ["Price per night must be greater than zero"]


def test_step_one_rejects_non_finite_price():
    for value in ("nan", "inf", "-Infinity", "1e999"):
        assert step_errors(_complete_draft(price_per_night=value), 1) == ["Price per night must be a number"], value


def test_step_three_has_no_required_fields():
    assert step_errors(PropertyListingDraft(), 3) == []


def test_next_stays_on_step_with_errors():
    state = handle_action(2, _complete_draft(address=""), "next")
    assert state.step == 2
    assert state.errors == ["Address is required"]


def test_next_and_back_move_between_steps():
    draft = _complete_draft()
    assert handle_action(1, draft, "next").step == 2
    assert handle_action(3, draft, "next").step == 4
    assert handle_action(3, draft, "back").step == 2
    assert handle_action(1, draft, "back").step == 1


def test_back_skips_validation():
    state = handle_action(2, PropertyListingDraft(), "back")
    assert state.step == 1
    assert state.errors == []


def test_submit_marks_submitted():
    state = handle_action(4, _complete_draft(), "submit")
    assert state.submitted
    assert state.errors == []


def test_submit_returns_to_first_incomplete_step():
    state = handle_action(4, _complete_draft(description=""), "submit")
    assert not state.submitted
    assert state.step == 2
    assert state.errors == ["Description is required"]


def test_submit_checks_email():
    state = handle_action(4, _complete_draft(email="not-an-email"), "submit")
    assert not state.submitted
    assert state.errors == ["Email must be a valid address"]


def test_restart_clears_draft():
    state = handle_action(4, _complete_draft(), "restart")
    assert state.step == 1
    assert state.draft.name == ""
