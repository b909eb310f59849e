def test_last_added_guard_is_checked_first(tiny, io_backend):
    ran = []
    (
        tiny.rock.vicinity_action("push", effect=lambda action: ran.append(True))
        .guarded_by(lambda: False, "First guard says no.")
        .guarded_by(lambda: False, "Second guard says no.")
    )

    tiny.process("push rock")
    assert io_backend.outputs == ["Second guard says no."]
    assert ran == []


def test_effect_runs_when_all_guards_pass(tiny, io_backend):
    state = {"unlocked": True}
    (
        tiny.rock.vicinity_action("push", effect=lambda action: action.say("The rock moves."))
        .guarded_by(lambda: state["unlocked"], "It is stuck.")
        .guarded_by(lambda: True, "Never printed.")
    )

    tiny.process("push rock")
    state["unlocked"] = False
    tiny.process("push rock")
    assert io_backend.outputs == ["The rock moves.", "It is stuck."]


def test_failing_guard_consumes_the_input(tiny, io_backend):
    tiny.rock.vicinity_action("push", effect=lambda action: None).guarded_by(lambda: False, "It is stuck.")
    tiny.here.action("push", effect=lambda action: action.say("Room push."))

    tiny.process("push rock")
    assert io_backend.outputs == ["It is stuck."]


def test_guard_is_skipped_when_subject_names_another_item(tiny, io_backend):
    tiny.rock.vicinity_action("push", effect=lambda action: None).guarded_by(lambda: False, "It is stuck.")
    tiny.here.action("push", effect=lambda action: action.say("Room push."))

    tiny.process("push ball")
    assert io_backend.outputs == ["Room push."]
