import pytest

from travelhub.seed.data import build_seed_plan
from travelhub.seed.plan import SeedPlan, SeedPlanError, SeedStep


def _step(name, *depends_on):
    return SeedStep(name, object, lambda created: [], depends_on=tuple(depends_on))


def test_sample_plan_runs_in_foreign_key_order():
    assert build_seed_plan().names() == [
        "users",
        "oauth_accounts",
        "chat_sessions",
        "chat_messages",
        "flight_search_cache",
        "hotel_search_cache",
        "bookings",
        "flight_bookings",
        "hotel_bookings",
        "booking_items",
        "analytics_events",
    ]


def test_every_dependency_runs_before_its_dependant():
    plan = build_seed_plan()
    position = {name: i for i, name in enumerate(plan.names())}
    for step in plan.steps:
        for dep in step.depends_on:
            assert position[dep] < position[step.name]


def test_ordered_moves_dependants_after_their_dependencies():
    plan = SeedPlan([_step("items", "bookings"), _step("users"), _step("bookings", "users")])
    assert plan.names() == ["users", "bookings", "items"]


def test_independent_steps_keep_declaration_order():
    plan = SeedPlan([_step("b"), _step("a"), _step("c")])
    assert plan.names() == ["b", "a", "c"]


def test_unknown_dependency_is_rejected():
    with pytest.raises(SeedPlanError, match="unknown step 'users'"):
        SeedPlan([_step("bookings", "users")])


def test_duplicate_step_name_is_rejected():
    with pytest.raises(SeedPlanError, match="duplicate"):
        SeedPlan([_step("users"), _step("users")])


def test_cycle_is_rejected():
    plan = SeedPlan([_step("a", "b"), _step("b", "a"), _step("c")])
    with pytest.raises(SeedPlanError, match="cycle"):
        plan.ordered()


def test_default_message_counts_rows():
    assert _step("users").describe([1, 2, 3]) == "Created 3 users"


def test_message_can_silence_a_step():
    step = SeedStep("flight_bookings", object, lambda created: [], message=lambda rows: None)
    assert step.describe([1]) is None
